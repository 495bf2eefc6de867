"""Pytest fixtures for testing"""

from decimal import Decimal

import pytest

from savings_qualifier.models import PlanOption, SessionInput

TV_COST = Decimal("83.00")


@pytest.fixture
def catalog():
    return [
        PlanOption("1gig", "1 Gig", Decimal("70"), 1000),
        PlanOption("3gig", "3 Gig", Decimal("100"), 3000),
        PlanOption("8gig", "8 Gig", Decimal("150"), 8000),
    ]


@pytest.fixture
def tv_cost():
    return TV_COST


@pytest.fixture
def filled_session():
    """Details a rep would type for a Spectrum customer paying $150"""
    return SessionInput(
        provider_name="Spectrum",
        current_download_mbps="300",
        current_upload_mbps="20",
        current_monthly_cost="150",
        has_tv_bundle=False,
        selected_plan_id="1gig",
    )
