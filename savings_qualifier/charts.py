from typing import List

import pandas as pd

from .models import ChartPoint, CustomerDetails, SavingsResult


def gfiber_label(result: SavingsResult) -> str:
    return "GFiber + YouTube TV" if result.tv_cost else "GFiber"


def cost_comparison(result: SavingsResult) -> List[ChartPoint]:
    """Current bill vs GFiber total, per month."""
    return [
        ChartPoint("Current Plan", float(result.current_monthly_cost)),
        ChartPoint(gfiber_label(result), float(result.gfiber_total)),
    ]


def yearly_cost_comparison(result: SavingsResult) -> List[ChartPoint]:
    return [ChartPoint(p.label, p.value * 12) for p in cost_comparison(result)]


def speed_comparison(details: CustomerDetails, result: SavingsResult) -> List[ChartPoint]:
    """Current download/upload next to the plan's symmetrical speed.

    Empty when the plan has no published speed.
    """
    plan = result.recommended_plan
    if plan.download_speed_mbps is None:
        return []
    return [
        ChartPoint("Current download", float(details.download_mbps)),
        ChartPoint("Current upload", float(details.upload_mbps)),
        ChartPoint("GFiber download", float(plan.download_speed_mbps)),
        ChartPoint("GFiber upload", float(plan.upload_speed_mbps)),
    ]


def to_frame(points: List[ChartPoint], value_name: str) -> pd.DataFrame:
    """Frame indexed by label, in the given order, for st.bar_chart."""
    df = pd.DataFrame(
        {"label": [p.label for p in points], value_name: [p.value for p in points]}
    )
    return df.set_index("label")
