"""PlanService — wraps validate → plan for the Web API."""

from __future__ import annotations

import logging

from siteswap_planner.planner.errors import PlanningError
from siteswap_planner.planner.flight_planner import FlightPlanner
from siteswap_planner.planner.models import SimulationPlan
from siteswap_planner.siteswap.errors import SiteswapError
from siteswap_planner.siteswap.models import ThrowPattern
from siteswap_planner.siteswap.validator import PatternValidator
from siteswap_planner.web.schemas import (
    FlightRecord,
    PatternResponse,
    PlanResponse,
)

_logger = logging.getLogger(__name__)


class PlanService:
    """Validate siteswap text and build flight plans for it.

    Parameters
    ----------
    default_repetitions:
        Loops to plan when a request does not say.
    validator, planner:
        Optional collaborators for testing injection.
    """

    def __init__(
        self,
        default_repetitions: int = 6,
        validator: PatternValidator | None = None,
        planner: FlightPlanner | None = None,
    ) -> None:
        self._validator = validator or PatternValidator()
        self._planner = planner or FlightPlanner(default_repetitions)

    def describe(self, raw_text: str) -> PatternResponse:
        """Validate *raw_text* and return its pattern metadata.

        Raises
        ------
        SiteswapError
            If the text is not a valid siteswap.
        """
        return self._pattern_response(self._validate(raw_text))

    def run_plan(self, raw_text: str, repetitions: int | None = None) -> PlanResponse:
        """Validate *raw_text* and schedule its flights.

        Raises
        ------
        SiteswapError
            If the text is not a valid siteswap.
        PlanningError
            If the planner cannot schedule a validated pattern.
        """
        pattern = self._validate(raw_text)
        try:
            plan = self._planner.plan_pattern(pattern, repetitions)
        except PlanningError:
            _logger.error("Planner fault for validated pattern %r", pattern.notation)
            raise
        return self._plan_response(pattern, plan)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _validate(self, raw_text: str) -> ThrowPattern:
        try:
            return self._validator.validate(raw_text)
        except SiteswapError as exc:
            _logger.warning("Rejected pattern request %r: %s", raw_text, exc)
            raise

    @staticmethod
    def _pattern_response(pattern: ThrowPattern) -> PatternResponse:
        return PatternResponse(
            notation=pattern.notation,
            pattern=list(pattern.pattern),
            period=pattern.period,
            ball_count=pattern.ball_count,
            max_throw_height=pattern.max_throw_height,
            summary=pattern.summary(),
        )

    def _plan_response(self, pattern: ThrowPattern, plan: SimulationPlan) -> PlanResponse:
        return PlanResponse(
            pattern=self._pattern_response(pattern),
            total_beats=plan.total_beats,
            flights=[FlightRecord(**f.to_dict()) for f in plan.flights],
        )
