from decimal import Decimal
from typing import List
import os

from dotenv import load_dotenv; load_dotenv()

from .models import PlanOption

ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY")
ANTHROPIC_MODEL = os.getenv("ANTHROPIC_MODEL", "claude-sonnet-4-5-20250929")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


# =========================
# Plan catalog (example pricing)
# =========================
PLAN_CATALOG: List[PlanOption] = [
    PlanOption("1gig", "1 Gig", Decimal("70"), 1000),
    PlanOption("3gig", "3 Gig", Decimal("100"), 3000),
    PlanOption("8gig", "8 Gig", Decimal("150"), 8000),
]
DEFAULT_PLAN_ID = PLAN_CATALOG[0].id

# YouTube TV, added to the GFiber side when the customer bundles TV today
YOUTUBE_TV_COST = Decimal("83.00")

PROVIDERS = ["Spectrum", "AT&T", "Other"]
