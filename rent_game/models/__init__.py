"""Domain models for the rent game."""

from rent_game.models.base import GameEvent, GameSnapshot
from rent_game.models.enums import Action, BrokenItem, EventType
from rent_game.models.house import House, Tenant

__all__ = [
    "Action",
    "BrokenItem",
    "EventType",
    "GameEvent",
    "GameSnapshot",
    "House",
    "Tenant",
]
