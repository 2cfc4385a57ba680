"""Siteswap data models."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

SITESWAP_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
"""Symbols for throw heights 0-35, indexed by height."""


def height_for_symbol(symbol: str) -> int:
    """Return the throw height for *symbol*, or ``-1`` if it is not in the alphabet."""
    if len(symbol) != 1:
        return -1
    return SITESWAP_ALPHABET.find(symbol.lower())


def symbol_for_height(height: int) -> str:
    """Return the single-character notation for *height*.

    Raises:
        ValueError: If *height* is outside ``0..35``.
    """
    if not 0 <= height < len(SITESWAP_ALPHABET):
        raise ValueError(f"Throw height {height} has no siteswap symbol")
    return SITESWAP_ALPHABET[height]


@dataclass(frozen=True)
class ThrowPattern:
    """A validated vanilla siteswap.

    Instances are produced by :class:`~siteswap_planner.siteswap.validator.PatternValidator`;
    constructing one directly skips all validation.
    """

    pattern: tuple[int, ...]
    """Throw heights in beats, one per beat of the period (0 = empty hand)."""

    period: int
    """Length of :attr:`pattern`."""

    ball_count: int
    """``sum(pattern) / period``; always a positive integer."""

    max_throw_height: int
    """Largest element of :attr:`pattern`."""

    @property
    def notation(self) -> str:
        """Canonical lower-case text form, e.g. ``"531"``."""
        return "".join(symbol_for_height(h) for h in self.pattern)

    def landing_slots(self) -> list[tuple[int, int]]:
        """Return ``(index, slot)`` for every non-zero throw.

        ``slot`` is the beat-phase the throw lands in: ``(index + height) % period``.
        """
        return [
            (i, (i + h) % self.period)
            for i, h in enumerate(self.pattern)
            if h > 0
        ]

    def summary(self) -> str:
        """One-line description, e.g. ``"3 balls • period 3 • max throw 5"``."""
        noun = "ball" if self.ball_count == 1 else "balls"
        return (
            f"{self.ball_count} {noun} • period {self.period} "
            f"• max throw {self.max_throw_height}"
        )

    def to_dict(self) -> dict:
        """Return a JSON-serializable dict."""
        d = dataclasses.asdict(self)
        d["pattern"] = list(self.pattern)
        return d
