"""Siteswap text parsing and validation.

Turns free-form user text into a :class:`ThrowPattern`, checking (in order):

  1. the normalized text is non-empty
  2. every character is a siteswap symbol (``0-9``, ``a-z``)
  3. at least one throw is non-zero
  4. the average throw height is a whole number
  5. no two non-zero throws land in the same beat-phase
  6. the pattern holds at least one ball

The first failing rule raises; nothing partial is ever returned.
"""

from __future__ import annotations

import logging
import re

from siteswap_planner.siteswap.errors import (
    AllZeroPattern,
    EmptyPattern,
    InvalidCharacter,
    LandingCollision,
    NonIntegerAverage,
    SiteswapError,
    ZeroBalls,
)
from siteswap_planner.siteswap.models import ThrowPattern, height_for_symbol

_logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


class PatternValidator:
    """Parse and validate siteswap notation.

    The validator is stateless; one instance can be shared freely.
    """

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, raw_text: str) -> ThrowPattern:
        """Return the :class:`ThrowPattern` described by *raw_text*.

        Raises:
            SiteswapError: One of its subclasses, naming the first rule broken.
        """
        try:
            result = self._validate(raw_text)
        except SiteswapError as exc:
            _logger.info("Rejected siteswap %r: %s", raw_text, exc)
            raise
        _logger.debug("Accepted siteswap %r: %s", raw_text, result.summary())
        return result

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _validate(self, raw_text: str) -> ThrowPattern:
        cleaned = self.normalize(raw_text)
        if not cleaned:
            raise EmptyPattern()

        heights = self._parse_heights(cleaned)

        if all(h == 0 for h in heights):
            raise AllZeroPattern()

        period = len(heights)
        total = sum(heights)
        if total % period != 0:
            raise NonIntegerAverage(total, period)

        self._check_landing_slots(heights)

        ball_count = total // period
        if ball_count < 1:
            raise ZeroBalls()

        return ThrowPattern(
            pattern=tuple(heights),
            period=period,
            ball_count=ball_count,
            max_throw_height=max(heights),
        )

    @staticmethod
    def normalize(raw_text: str) -> str:
        """Lower-case *raw_text* and strip all whitespace."""
        return _WHITESPACE.sub("", raw_text.lower())

    @staticmethod
    def _parse_heights(cleaned: str) -> list[int]:
        heights: list[int] = []
        for pos, char in enumerate(cleaned):
            height = height_for_symbol(char)
            if height < 0:
                raise InvalidCharacter(char, pos)
            heights.append(height)
        return heights

    @staticmethod
    def _check_landing_slots(heights: list[int]) -> None:
        """Raise :class:`LandingCollision` if two non-zero throws share a slot."""
        period = len(heights)
        seen: dict[int, int] = {}
        for i, h in enumerate(heights):
            if h == 0:
                continue
            slot = (i + h) % period
            if slot in seen:
                raise LandingCollision(slot, (seen[slot], i))
            seen[slot] = i


_DEFAULT_VALIDATOR = PatternValidator()


def validate(raw_text: str) -> ThrowPattern:
    """Shortcut for ``PatternValidator().validate(raw_text)``."""
    return _DEFAULT_VALIDATOR.validate(raw_text)
