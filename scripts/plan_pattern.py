"""Print the flight schedule for a siteswap pattern.

Usage:
  python scripts/plan_pattern.py 531
  python scripts/plan_pattern.py "4 4 1" --repetitions 2 --json

Exit status: 0 on success, 1 for an invalid pattern, 2 for a planner fault.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from siteswap_planner.planner.errors import PlanningError
from siteswap_planner.planner.flight_planner import DEFAULT_REPETITIONS, FlightPlanner
from siteswap_planner.planner.models import SimulationPlan
from siteswap_planner.siteswap.errors import SiteswapError
from siteswap_planner.siteswap.validator import PatternValidator


def format_table(plan: SimulationPlan) -> str:
    """Render one line per flight: beat, ball, height and hands."""
    lines = [f"{'beat':>5}  {'ball':>4}  {'height':>6}  hands"]
    for f in plan.flights:
        lines.append(
            f"{f.start_beat:>5}  {f.ball_id:>4}  {f.throw_height:>6}  "
            f"{f.from_hand.value} -> {f.to_hand.value} (lands {f.end_beat})"
        )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Plan the ball flights of a siteswap")
    ap.add_argument("pattern", help="Siteswap notation, e.g. 531")
    ap.add_argument(
        "--repetitions",
        type=int,
        default=DEFAULT_REPETITIONS,
        help="Loops of the pattern to schedule",
    )
    ap.add_argument("--json", action="store_true", help="Emit the plan as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        pattern = PatternValidator().validate(args.pattern)
    except SiteswapError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        plan = FlightPlanner().plan_pattern(pattern, args.repetitions)
    except PlanningError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps({"pattern": pattern.to_dict(), "plan": plan.to_dict()}, indent=2))
    else:
        print(f"{pattern.notation}: {pattern.summary()}")
        print(f"{plan.total_beats} beats, {len(plan.flights)} flights")
        print()
        print(format_table(plan))
    return 0


if __name__ == "__main__":
    sys.exit(main())
