"""Beat-indexed flight scheduling."""

from siteswap_planner.planner.errors import (
    BallPoolExhausted,
    LandingConflict,
    PlanningError,
)
from siteswap_planner.planner.flight_planner import (
    DEFAULT_REPETITIONS,
    FlightPlanner,
    plan,
)
from siteswap_planner.planner.models import Flight, Hand, SimulationPlan

__all__ = [
    "BallPoolExhausted",
    "DEFAULT_REPETITIONS",
    "Flight",
    "FlightPlanner",
    "Hand",
    "LandingConflict",
    "PlanningError",
    "SimulationPlan",
    "plan",
]
