"""Chart data handed to st.bar_chart"""

from dataclasses import replace
from decimal import Decimal

from savings_qualifier.calculator import compute_savings, validate_details
from savings_qualifier.charts import cost_comparison, speed_comparison, to_frame, yearly_cost_comparison
from savings_qualifier.models import ChartPoint, PlanOption


def test_cost_comparison_without_tv(filled_session, catalog, tv_cost):
    result = compute_savings(filled_session, catalog, tv_cost)
    assert cost_comparison(result) == [
        ChartPoint("Current Plan", 150.0),
        ChartPoint("GFiber", 70.0),
    ]


def test_cost_comparison_with_tv(filled_session, catalog, tv_cost):
    result = compute_savings(replace(filled_session, has_tv_bundle=True), catalog, tv_cost)
    points = cost_comparison(result)
    assert [p.label for p in points] == ["Current Plan", "GFiber + YouTube TV"]
    assert points[1].value == 153.0


def test_yearly_cost_comparison(filled_session, catalog, tv_cost):
    result = compute_savings(filled_session, catalog, tv_cost)
    assert [p.value for p in yearly_cost_comparison(result)] == [1800.0, 840.0]


def test_speed_comparison(filled_session, catalog, tv_cost):
    session = replace(filled_session, selected_plan_id="3gig")
    points = speed_comparison(validate_details(session), compute_savings(session, catalog, tv_cost))
    assert points == [
        ChartPoint("Current download", 300.0),
        ChartPoint("Current upload", 20.0),
        ChartPoint("GFiber download", 3000.0),
        ChartPoint("GFiber upload", 3000.0),
    ]


def test_speed_comparison_skipped_without_plan_speed(filled_session, tv_cost):
    catalog = [PlanOption("1gig", "1 Gig", Decimal("70"))]
    result = compute_savings(filled_session, catalog, tv_cost)
    assert speed_comparison(validate_details(filled_session), result) == []


def test_to_frame_keeps_order():
    df = to_frame([ChartPoint("b", 2.0), ChartPoint("a", 1.0)], "Monthly Cost")
    assert list(df.index) == ["b", "a"]
    assert list(df["Monthly Cost"]) == [2.0, 1.0]
    assert df.index.name == "label"
