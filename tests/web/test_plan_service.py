"""PlanService — validate → plan wrapper used by the Web API."""

from __future__ import annotations

import logging

import pytest

from siteswap_planner.planner.errors import BallPoolExhausted
from siteswap_planner.planner.flight_planner import FlightPlanner
from siteswap_planner.siteswap.errors import LandingCollision
from siteswap_planner.web.service import PlanService


class TestDescribe:
    def test_returns_pattern_metadata(self):
        resp = PlanService().describe("441")
        assert resp.pattern == [4, 4, 1]
        assert resp.ball_count == 3
        assert resp.summary == "3 balls • period 3 • max throw 4"

    def test_rejection_is_logged_and_reraised(self, caplog):
        with caplog.at_level(logging.WARNING, logger="siteswap_planner.web.service"):
            with pytest.raises(LandingCollision):
                PlanService().describe("240")
        assert "Rejected pattern request '240'" in caplog.text


class TestRunPlan:
    def test_uses_service_default_repetitions(self):
        resp = PlanService(default_repetitions=3).run_plan("51")
        assert resp.total_beats == 6
        assert len(resp.flights) == 6

    def test_explicit_repetitions_override_default(self):
        resp = PlanService(default_repetitions=3).run_plan("51", repetitions=1)
        assert resp.total_beats == 2

    def test_flights_carry_ids(self):
        resp = PlanService().run_plan("3", repetitions=3)
        assert [f.id for f in resp.flights] == ["0-0", "1-1", "2-2"]

    def test_injected_planner_is_used(self):
        svc = PlanService(planner=FlightPlanner(default_repetitions=1))
        assert svc.run_plan("531").total_beats == 3

    def test_planner_fault_is_logged_and_reraised(self, caplog):
        with caplog.at_level(logging.ERROR, logger="siteswap_planner.web.service"):
            with pytest.raises(BallPoolExhausted):
                PlanService().run_plan("5003", repetitions=2)
        assert "Planner fault" in caplog.text
