"""Event envelope and state snapshot shared across the game."""

from dataclasses import dataclass, field
from decimal import Decimal

from rent_game.models.enums import EventType
from rent_game.models.house import House


@dataclass
class GameEvent:
    """Notification of a committed state change."""

    event_type: EventType
    at_ms: int  # Simulation clock time
    subject: int | None  # House id affected, None for portfolio-wide events
    data: dict = field(default_factory=dict)


@dataclass
class GameSnapshot:
    """Read-only copy of the game state for rendering."""

    houses: list[House]
    money: Decimal
    rating: int
    at_ms: int
