"""Errors raised while validating a qualification or computing savings.

All of them are recoverable: the flow controller shows ``message`` to the
rep and waits for corrected input.
"""


class QualificationError(Exception):
    """Base class; ``message`` is safe to show in the UI"""

    default_message = "Something went wrong. Please check the details and try again."

    def __init__(self, message: str = ""):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingFields(QualificationError):
    default_message = "Please fill in all details and select a GFiber plan."


class InvalidSpeed(QualificationError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Please enter a valid current {field} speed (e.g., 300).")


class InvalidCost(QualificationError):
    default_message = "Please enter a valid current monthly cost (e.g., 75.00)."


class InvalidCurrentCost(QualificationError):
    """The stored cost no longer parses once we are past the details step"""

    default_message = "Current monthly cost is invalid. Please go back and correct it."


class PlanNotFound(QualificationError):
    def __init__(self, plan_id: str):
        self.plan_id = plan_id
        super().__init__("Selected GFiber plan not found.")
