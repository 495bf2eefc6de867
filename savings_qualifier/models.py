from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class PlanOption:
    id: str
    display_name: str
    monthly_cost: Decimal             # $/mo
    download_speed_mbps: Optional[int] = None   # upload is the same (symmetrical fiber)

    @property
    def upload_speed_mbps(self) -> Optional[int]:
        return self.download_speed_mbps

    @property
    def label(self) -> str:
        return f"{self.display_name} (${self.monthly_cost}/month)"


@dataclass(frozen=True)
class SessionInput:
    """What the rep has typed so far for one customer.

    Text fields hold the raw entry; parsing happens at submission time.
    """
    provider_name: str = ""
    current_download_mbps: str = ""
    current_upload_mbps: str = ""
    current_monthly_cost: str = ""   # internet + TV if bundled
    has_tv_bundle: bool = False
    selected_plan_id: str = ""       # the flow fills in config.DEFAULT_PLAN_ID


@dataclass(frozen=True)
class CustomerDetails:
    provider_name: str
    download_mbps: int
    upload_mbps: int
    monthly_cost: Decimal


@dataclass(frozen=True)
class SavingsResult:
    recommended_plan: PlanOption
    current_monthly_cost: Decimal
    tv_cost: Decimal          # 0 when no TV bundle
    gfiber_total: Decimal
    monthly_savings: Decimal  # signed; negative means GFiber costs more
    yearly_savings: Decimal


@dataclass(frozen=True)
class ChartPoint:
    label: str
    value: float
