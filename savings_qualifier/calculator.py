from decimal import Decimal
from typing import Optional, Sequence
import re

from .errors import InvalidCost, InvalidCurrentCost, InvalidSpeed, MissingFields, PlanNotFound
from .models import CustomerDetails, PlanOption, SavingsResult, SessionInput


MONTHS_PER_YEAR = 12
MAX_MONTHLY_COST = Decimal("100000")
MAX_SPEED_MBPS = 100_000

# plain ASCII digits only: no exponents, signs, underscores or other scripts
COST_RE = re.compile(r"[0-9]+(\.[0-9]{1,2})?")
SPEED_RE = re.compile(r"[0-9]+")


def money(val: Decimal) -> str:
    """Format as $X,XXX.XX; negatives as -$X.XX."""
    sign = "-" if val < 0 else ""
    return f"{sign}${abs(val):,.2f}"


def _strip_separators(s: str) -> str:
    """Remove commas, spaces."""
    return s.replace(",", "").replace(" ", "")


def _strip_currency(s: str) -> str:
    """Remove dollar sign, commas, spaces."""
    return _strip_separators(s.replace("$", ""))


def parse_cost(raw: str) -> Optional[Decimal]:
    """Dollar amount with at most two decimals, above zero and up to MAX_MONTHLY_COST, or None."""
    text = _strip_currency(raw or "")
    if not COST_RE.fullmatch(text):
        return None
    val = Decimal(text)
    if val <= 0 or val > MAX_MONTHLY_COST:
        return None
    return val


def parse_speed(raw: str) -> Optional[int]:
    """Whole Mbps between 1 and MAX_SPEED_MBPS, or None."""
    text = _strip_separators(raw or "")
    if not SPEED_RE.fullmatch(text):
        return None
    val = int(text)
    return val if 0 < val <= MAX_SPEED_MBPS else None


def find_plan(catalog: Sequence[PlanOption], plan_id: str) -> PlanOption:
    for plan in catalog:
        if plan.id == plan_id:
            return plan
    raise PlanNotFound(plan_id)


def compute_savings(
    session: SessionInput,
    catalog: Sequence[PlanOption],
    tv_cost: Decimal,
) -> SavingsResult:
    """Compare the customer's current bill with the selected GFiber plan.

    Savings are signed: a negative value means GFiber (plus YouTube TV when
    bundled) costs more than what the customer pays today.
    """
    plan = find_plan(catalog, session.selected_plan_id)

    current = parse_cost(session.current_monthly_cost)
    if current is None:
        raise InvalidCurrentCost()

    added_tv = tv_cost if session.has_tv_bundle else Decimal("0")
    gfiber_total = plan.monthly_cost + added_tv
    monthly = current - gfiber_total
    return SavingsResult(
        recommended_plan=plan,
        current_monthly_cost=current,
        tv_cost=added_tv,
        gfiber_total=gfiber_total,
        monthly_savings=monthly,
        yearly_savings=monthly * MONTHS_PER_YEAR,
    )


def validate_details(session: SessionInput) -> CustomerDetails:
    """Check the details form before moving on to the results screen."""
    required = [
        session.provider_name,
        session.current_download_mbps,
        session.current_upload_mbps,
        session.current_monthly_cost,
        session.selected_plan_id,
    ]
    if any(not (v or "").strip() for v in required):
        raise MissingFields()

    download = parse_speed(session.current_download_mbps)
    if download is None:
        raise InvalidSpeed("download")
    upload = parse_speed(session.current_upload_mbps)
    if upload is None:
        raise InvalidSpeed("upload")

    cost = parse_cost(session.current_monthly_cost)
    if cost is None:
        raise InvalidCost()

    return CustomerDetails(
        provider_name=session.provider_name,
        download_mbps=download,
        upload_mbps=upload,
        monthly_cost=cost,
    )
