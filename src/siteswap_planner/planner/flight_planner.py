"""Beat-by-beat flight scheduling for a validated siteswap.

Walks the pattern forward one beat at a time, giving every non-zero throw a
:class:`Flight` and tracking which ball is due to land on which future beat.
Ball identities come from a fixed pool ``0..ball_count-1``:

  - a ball landing on the current beat is the one thrown (or held, for a 0)
  - otherwise a throw introduces the next never-used ball
  - if the pool is used up and nothing lands, the pattern cannot be juggled
    with that many balls and :class:`BallPoolExhausted` is raised

The pending-landing table lives only for the duration of one :meth:`plan` call.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from siteswap_planner.planner.errors import BallPoolExhausted, LandingConflict
from siteswap_planner.planner.models import Flight, Hand, SimulationPlan
from siteswap_planner.siteswap.models import ThrowPattern

_logger = logging.getLogger(__name__)

DEFAULT_REPETITIONS = 6


class FlightPlanner:
    """Build :class:`SimulationPlan` schedules.

    Args:
        default_repetitions: Loops of the pattern to materialize when
            :meth:`plan` is called without an explicit count.
    """

    def __init__(self, default_repetitions: int = DEFAULT_REPETITIONS) -> None:
        self.default_repetitions = default_repetitions

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def plan(
        self,
        pattern: ThrowPattern | Sequence[int],
        ball_count: int,
        repetitions: int | None = None,
    ) -> SimulationPlan:
        """Schedule every throw of *pattern* over ``repetitions`` loops.

        At least one full period is always simulated, so ``repetitions <= 0``
        yields a single loop.

        Args:
            pattern: A :class:`ThrowPattern` or a plain sequence of heights.
            ball_count: Size of the ball identity pool.
            repetitions: Loops to simulate; defaults to ``default_repetitions``.

        Raises:
            ValueError: If *pattern* is empty, holds a negative height, or
                *ball_count* is below 1.
            LandingConflict: If two balls would land on the same absolute beat.
            BallPoolExhausted: If a throw needs a ball and none is free.
        """
        heights = self._heights(pattern)
        if ball_count < 1:
            raise ValueError("ball_count must be >= 1")
        if repetitions is None:
            repetitions = self.default_repetitions

        period = len(heights)
        total_beats = max(repetitions * period, period)

        try:
            flights = self._schedule(heights, ball_count, total_beats)
        except (LandingConflict, BallPoolExhausted) as exc:
            _logger.error("Planning failed for %s with %d balls: %s", heights, ball_count, exc)
            raise

        _logger.debug(
            "Planned %d flights over %d beats (%d balls, period %d)",
            len(flights), total_beats, ball_count, period,
        )
        return SimulationPlan(
            flights=tuple(flights),
            total_beats=total_beats,
            ball_count=ball_count,
            period=period,
        )

    def plan_pattern(
        self, pattern: ThrowPattern, repetitions: int | None = None
    ) -> SimulationPlan:
        """Plan *pattern* with its own ball count."""
        return self.plan(pattern, pattern.ball_count, repetitions)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _heights(pattern: ThrowPattern | Sequence[int]) -> list[int]:
        heights = list(pattern.pattern if isinstance(pattern, ThrowPattern) else pattern)
        if not heights:
            raise ValueError("pattern must contain at least one throw")
        if any(h < 0 for h in heights):
            raise ValueError("throw heights must be non-negative")
        return heights

    @staticmethod
    def _schedule(heights: list[int], ball_count: int, total_beats: int) -> list[Flight]:
        period = len(heights)
        pending: dict[int, int] = {}  # absolute landing beat -> ball id
        next_ball = 0
        flights: list[Flight] = []

        for beat in range(total_beats):
            height = heights[beat % period]
            landing_ball = pending.pop(beat, None)

            if height == 0:
                # Held: the ball (if any) stays in hand and is no longer tracked.
                continue

            if landing_ball is not None:
                ball_id = landing_ball
            elif next_ball < ball_count:
                ball_id = next_ball
                next_ball += 1
            else:
                raise BallPoolExhausted(beat, ball_count)

            landing_beat = beat + height
            if landing_beat in pending:
                raise LandingConflict(landing_beat, ball_id, pending[landing_beat])
            pending[landing_beat] = ball_id

            flights.append(Flight(
                ball_id=ball_id,
                throw_height=height,
                start_beat=beat,
                end_beat=landing_beat,
                from_hand=Hand.for_beat(beat),
                to_hand=Hand.for_beat(landing_beat),
            ))

        return flights


_DEFAULT_PLANNER = FlightPlanner()


def plan(
    pattern: ThrowPattern | Sequence[int],
    ball_count: int,
    repetitions: int = DEFAULT_REPETITIONS,
) -> SimulationPlan:
    """Shortcut for ``FlightPlanner().plan(pattern, ball_count, repetitions)``."""
    return _DEFAULT_PLANNER.plan(pattern, ball_count, repetitions)
