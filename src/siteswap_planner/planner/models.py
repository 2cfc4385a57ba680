"""Flight plan data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Hand(str, Enum):
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def for_beat(cls, beat: int) -> Hand:
        """Hand active at *beat*: left on even beats, right on odd beats."""
        return cls.LEFT if beat % 2 == 0 else cls.RIGHT


@dataclass(frozen=True)
class Flight:
    """One release-to-catch event on the absolute beat timeline."""

    ball_id: int
    """Ball identity in ``[0, ball_count)``."""

    throw_height: int
    """Beats between release and catch (always > 0)."""

    start_beat: int
    """Absolute beat of the release."""

    end_beat: int
    """Absolute beat of the catch; ``start_beat + throw_height``."""

    from_hand: Hand
    to_hand: Hand

    @property
    def id(self) -> str:
        """Stable key for renderers, e.g. ``"2-7"`` for ball 2 thrown at beat 7."""
        return f"{self.ball_id}-{self.start_beat}"

    @property
    def crosses(self) -> bool:
        """True for odd throws, which travel to the other hand."""
        return self.from_hand is not self.to_hand

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "ball_id": self.ball_id,
            "throw_height": self.throw_height,
            "start_beat": self.start_beat,
            "end_beat": self.end_beat,
            "from_hand": self.from_hand.value,
            "to_hand": self.to_hand.value,
        }


@dataclass(frozen=True)
class SimulationPlan:
    """Ordered flights covering a whole number of pattern periods.

    ``flights`` is sorted by ``start_beat`` and holds exactly one entry per
    beat in ``[0, total_beats)`` whose throw height is non-zero.
    """

    flights: tuple[Flight, ...]
    total_beats: int
    ball_count: int
    period: int

    def flights_for_ball(self, ball_id: int) -> list[Flight]:
        """Return every flight of *ball_id*, in throw order."""
        return [f for f in self.flights if f.ball_id == ball_id]

    def airborne_at(self, beat: int) -> list[Flight]:
        """Return flights in the air at *beat* (released before it, caught after it)."""
        return [f for f in self.flights if f.start_beat < beat < f.end_beat]

    def to_dict(self) -> dict:
        """Return a JSON-serializable dict."""
        return {
            "total_beats": self.total_beats,
            "ball_count": self.ball_count,
            "period": self.period,
            "flights": [f.to_dict() for f in self.flights],
        }
