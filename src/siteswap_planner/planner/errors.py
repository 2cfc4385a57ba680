"""Internal-consistency faults raised while building a flight plan.

These derive from :class:`AssertionError`: a pattern that passed
:class:`~siteswap_planner.siteswap.validator.PatternValidator` should never
trigger them, so hitting one means the planner and the validator disagree
about what a legal pattern is. They are not meant to be shown to a user as a
request to re-type the pattern.
"""

from __future__ import annotations


class PlanningError(AssertionError):
    """Base class for planner faults."""


class LandingConflict(PlanningError):
    """Two balls are scheduled to land on the same absolute beat."""

    def __init__(self, beat: int, ball_id: int, other_ball_id: int) -> None:
        self.beat = beat
        self.ball_id = ball_id
        self.other_ball_id = other_ball_id
        super().__init__(
            f"Landing conflict at beat {beat}: ball {ball_id} would land "
            f"where ball {other_ball_id} is already due."
        )


class BallPoolExhausted(PlanningError):
    """A throw needs a ball but every identifier is still airborne."""

    def __init__(self, beat: int, ball_count: int) -> None:
        self.beat = beat
        self.ball_count = ball_count
        super().__init__(
            f"No ball available to throw at beat {beat}: all {ball_count} "
            "balls are already in the air."
        )
