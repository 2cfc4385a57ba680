"""FastAPI Web application serving validated patterns and flight plans."""

from __future__ import annotations

import os

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException

from siteswap_planner import __version__
from siteswap_planner.planner.errors import PlanningError
from siteswap_planner.planner.flight_planner import DEFAULT_REPETITIONS
from siteswap_planner.siteswap.errors import SiteswapError
from siteswap_planner.web.schemas import (
    HealthResponse,
    PatternResponse,
    PlanRequest,
    PlanResponse,
    ValidateRequest,
)
from siteswap_planner.web.service import PlanService

load_dotenv()  # loads .env from project root; must run before env vars are consumed

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

app = FastAPI(title="Siteswap Planner", version=__version__)

_DEFAULT_PATTERN = os.environ.get("SITESWAP_DEFAULT_PATTERN", "531")
_DEFAULT_REPETITIONS = int(
    os.environ.get("SITESWAP_DEFAULT_REPETITIONS", str(DEFAULT_REPETITIONS))
)
_MAX_REPETITIONS = int(os.environ.get("SITESWAP_MAX_REPETITIONS", "64"))


def _service() -> PlanService:
    return PlanService(default_repetitions=_DEFAULT_REPETITIONS)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


@app.get("/api/default", response_model=PatternResponse)
def default_pattern() -> PatternResponse:
    """Return the configured starting pattern."""
    try:
        return _service().describe(_DEFAULT_PATTERN)
    except SiteswapError as exc:
        raise HTTPException(status_code=500, detail=f"Bad default pattern: {exc}") from exc


@app.post("/api/validate", response_model=PatternResponse)
def validate_pattern(req: ValidateRequest) -> PatternResponse:
    try:
        return _service().describe(req.pattern)
    except SiteswapError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.post("/api/plan", response_model=PlanResponse)
def plan_pattern(req: PlanRequest) -> PlanResponse:
    """Validate the pattern and return its beat-by-beat flight schedule."""
    if req.repetitions is not None and req.repetitions > _MAX_REPETITIONS:
        raise HTTPException(
            status_code=422,
            detail=f"repetitions must be <= {_MAX_REPETITIONS}",
        )
    svc = _service()
    try:
        return svc.run_plan(req.pattern, req.repetitions)
    except SiteswapError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except PlanningError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
