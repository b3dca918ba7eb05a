"""Output sinks for game events and snapshots."""

from rent_game.sinks.console import ConsoleSink

__all__ = ["ConsoleSink"]
