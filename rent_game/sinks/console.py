"""Console sink for watching a game from a terminal."""

import json
import sys
from typing import Any, TextIO

from rent_game.models import GameEvent, GameSnapshot
from rent_game.sinks.serialization import event_to_dict, snapshot_to_dict


class ConsoleSink:
    """Write game events and snapshots as JSON lines."""

    def __init__(self, pretty: bool = False, stream: TextIO | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        stream : TextIO | None
            Output stream (default: stdout).
        """
        self.pretty = pretty
        self.stream = stream or sys.stdout
        self._counts: dict[str, int] = {}

    def __call__(self, event: GameEvent) -> None:
        """Write an event; lets the sink be passed to ``RentGame.subscribe``."""
        self.write_event(event)

    def write_event(self, event: GameEvent) -> None:
        """Write a single game event."""
        self._write(event_to_dict(event))
        key = event.event_type.value
        self._counts[key] = self._counts.get(key, 0) + 1

    def write_snapshot(self, snapshot: GameSnapshot) -> None:
        """Write a full state snapshot."""
        self._write({"snapshot": snapshot_to_dict(snapshot)})
        self._counts["snapshot"] = self._counts.get("snapshot", 0) + 1

    @property
    def counts(self) -> dict[str, int]:
        return dict(self._counts)

    def close(self) -> None:
        """Print summary and close."""
        print(f"\n{'='*60}", file=self.stream)
        print("Console Sink Summary", file=self.stream)
        print("=" * 60, file=self.stream)
        for kind, count in self.counts.items():
            print(f"  {kind}: {count}", file=self.stream)

    def _write(self, data: dict[str, Any]) -> None:
        if self.pretty:
            print(json.dumps(data, indent=2, ensure_ascii=False, default=str), file=self.stream)
        else:
            print(json.dumps(data, ensure_ascii=False, default=str), file=self.stream)
