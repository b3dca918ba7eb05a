"""In-memory simulation state."""

from rent_game.store.state import GameState, to_money

__all__ = ["GameState", "to_money"]
