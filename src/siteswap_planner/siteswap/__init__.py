"""Siteswap notation parsing and validation."""

from siteswap_planner.siteswap.errors import (
    AllZeroPattern,
    EmptyPattern,
    InvalidCharacter,
    LandingCollision,
    NonIntegerAverage,
    SiteswapError,
    ZeroBalls,
)
from siteswap_planner.siteswap.models import (
    SITESWAP_ALPHABET,
    ThrowPattern,
    height_for_symbol,
    symbol_for_height,
)
from siteswap_planner.siteswap.validator import PatternValidator, validate

__all__ = [
    "AllZeroPattern",
    "EmptyPattern",
    "InvalidCharacter",
    "LandingCollision",
    "NonIntegerAverage",
    "PatternValidator",
    "SITESWAP_ALPHABET",
    "SiteswapError",
    "ThrowPattern",
    "ZeroBalls",
    "height_for_symbol",
    "symbol_for_height",
    "validate",
]
