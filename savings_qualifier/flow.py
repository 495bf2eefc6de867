"""Qualification flow: Welcome -> Details -> Results, and back to Welcome.

``QualificationFlow`` owns all mutable state for one rep's browser session.
Views get a read-only ``FlowState`` snapshot and call the controller methods
as callbacks; each accepted change recomputes the savings right away.
"""

from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Sequence
import logging

from . import config
from .calculator import compute_savings, validate_details
from .errors import PlanNotFound, QualificationError
from .models import CustomerDetails, PlanOption, SavingsResult, SessionInput

logger = logging.getLogger(__name__)


class Step(str, Enum):
    WELCOME = "welcome"
    DETAILS = "details"
    RESULTS = "results"


@dataclass(frozen=True)
class FlowState:
    step: Step
    session: SessionInput
    details: Optional[CustomerDetails] = None
    result: Optional[SavingsResult] = None
    error: str = ""


def _default_session() -> SessionInput:
    return SessionInput(selected_plan_id=config.DEFAULT_PLAN_ID)


class QualificationFlow:
    def __init__(
        self,
        catalog: Sequence[PlanOption] = config.PLAN_CATALOG,
        tv_cost: Decimal = config.YOUTUBE_TV_COST,
    ):
        self.catalog = list(catalog)
        self.tv_cost = tv_cost
        self._state = FlowState(step=Step.WELCOME, session=_default_session())

    # ---------- reading ----------
    def snapshot(self) -> FlowState:
        return self._state

    @property
    def step(self) -> Step:
        return self._state.step

    # ---------- transitions ----------
    def start(self) -> None:
        if not self._expect(Step.WELCOME, "start"):
            return
        self._goto(Step.DETAILS, error="")

    def back(self) -> None:
        """Details -> Welcome. The last submitted entries are kept; unsent form edits are not."""
        if not self._expect(Step.DETAILS, "back"):
            return
        self._goto(Step.WELCOME, error="")

    def submit(self, **fields: Any) -> bool:
        """Apply the details form and move to results if everything checks out."""
        if not self._expect(Step.DETAILS, "submit"):
            return False
        session = replace(self._state.session, **fields)
        self._state = replace(self._state, session=session, details=None, result=None, error="")
        try:
            details = validate_details(session)
            result = compute_savings(session, self.catalog, self.tv_cost)
        except QualificationError as e:
            self._fail(e)
            return False
        self._state = replace(self._state, details=details, result=result)
        self._goto(Step.RESULTS)
        logger.info(
            "Qualification submitted",
            extra={
                "provider": details.provider_name,
                "plan_id": result.recommended_plan.id,
                "tv_bundle": session.has_tv_bundle,
                "monthly_savings": str(result.monthly_savings),
            },
        )
        return True

    def change_plan(self, plan_id: str) -> None:
        self._update_results(selected_plan_id=plan_id)

    def set_tv_bundle(self, has_tv_bundle: bool) -> None:
        self._update_results(has_tv_bundle=bool(has_tv_bundle))

    def revise(self) -> None:
        """Results -> Details, used when no result could be produced."""
        if not self._expect(Step.RESULTS, "revise"):
            return
        self._goto(Step.DETAILS, error="")

    def restart(self) -> None:
        """Clear everything and go back to the welcome screen."""
        self._state = FlowState(step=Step.WELCOME, session=_default_session())
        logger.info("Qualification restarted", extra={"step": Step.WELCOME.value})

    # ---------- internals ----------
    def _update_results(self, **fields: Any) -> None:
        if not self._expect(Step.RESULTS, "update"):
            return
        session = replace(self._state.session, **fields)
        self._state = replace(self._state, session=session)
        self._recompute()

    def _recompute(self) -> None:
        try:
            result = compute_savings(self._state.session, self.catalog, self.tv_cost)
        except QualificationError as e:
            self._state = replace(self._state, result=None)
            self._fail(e)
            return
        self._state = replace(self._state, result=result, error="")

    def _fail(self, e: QualificationError) -> None:
        level = logging.ERROR if isinstance(e, PlanNotFound) else logging.INFO
        logger.log(
            level,
            "Qualification rejected",
            extra={"step": self._state.step.value, "reason": type(e).__name__},
        )
        self._state = replace(self._state, error=e.message)

    def _goto(self, step: Step, **changes: Any) -> None:
        logger.info(
            "Step change",
            extra={"from_step": self._state.step.value, "to_step": step.value},
        )
        self._state = replace(self._state, step=step, **changes)

    def _expect(self, step: Step, action: str) -> bool:
        if self._state.step is step:
            return True
        logger.debug(
            "Ignoring action outside its step",
            extra={"action": action, "step": self._state.step.value},
        )
        return False
