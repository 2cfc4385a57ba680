"""Validation errors raised while parsing siteswap text.

Every error is a :class:`ValueError` so callers that only care about "bad
user input" can catch one type; the subclasses exist for callers that want to
react to a specific rule.
"""

from __future__ import annotations


class SiteswapError(ValueError):
    """Base class for all user-recoverable pattern validation failures."""


class EmptyPattern(SiteswapError):
    def __init__(self) -> None:
        super().__init__("Enter at least one throw height.")


class InvalidCharacter(SiteswapError):
    """A character outside ``0-9`` / ``a-z`` was found.

    Args:
        character: The offending character (after lower-casing).
        position: Its index in the normalized pattern.
    """

    def __init__(self, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__(
            f"Unsupported character {character!r} at position {position}. "
            "Use 0-9 or a-z for throws."
        )


class AllZeroPattern(SiteswapError):
    def __init__(self) -> None:
        super().__init__("Pattern cannot be all zeros.")


class NonIntegerAverage(SiteswapError):
    """The throw heights do not average to a whole number of balls."""

    def __init__(self, total: int, period: int) -> None:
        self.total = total
        self.period = period
        super().__init__(
            f"Average throw height must be an integer "
            f"(sum {total} over period {period})."
        )


class LandingCollision(SiteswapError):
    """Two throws land in the same beat-phase of the repeating pattern.

    Args:
        slot: The landing slot (``(index + height) % period``) both throws hit.
        indices: Pattern indices of the two colliding throws, in order.
    """

    def __init__(self, slot: int, indices: tuple[int, int]) -> None:
        self.slot = slot
        self.indices = indices
        super().__init__(
            f"Throws at positions {indices[0]} and {indices[1]} both land "
            f"on beat {slot} (invalid pattern)."
        )


class ZeroBalls(SiteswapError):
    def __init__(self) -> None:
        super().__init__("Pattern must include at least one ball.")
