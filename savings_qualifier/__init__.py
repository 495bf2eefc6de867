"""Sales-rep calculator comparing a customer's current plan with GFiber."""

__version__ = "0.1.0"
