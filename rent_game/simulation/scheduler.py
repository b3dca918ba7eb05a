"""Virtual-time scheduler for the periodic simulation tasks."""

import logging
from dataclasses import dataclass
from typing import Callable

from rent_game.exceptions import ConfigurationError, SchedulerError

logger = logging.getLogger(__name__)


@dataclass
class ScheduledTask:
    """A named callback that fires every ``period_ms`` of simulation time."""

    name: str
    period_ms: int
    callback: Callable[[], object]
    next_due_ms: int = 0
    fire_count: int = 0


class Scheduler:
    """Fire registered tasks as simulation time advances.

    Time only moves through ``advance()``, so the same sequence of calls
    always produces the same firings. Tasks due at the same instant fire
    in registration order.
    """

    def __init__(self) -> None:
        self._tasks: list[ScheduledTask] = []
        self._now_ms = 0
        self._advancing = False

    @property
    def now_ms(self) -> int:
        """Current simulation time."""
        return self._now_ms

    @property
    def tasks(self) -> list[ScheduledTask]:
        return list(self._tasks)

    def register(self, name: str, period_ms: int, callback: Callable[[], object]) -> ScheduledTask:
        """Register a task whose first firing is one period from now.

        Raises
        ------
        SchedulerError
            If a task with the same name is already registered.
        ConfigurationError
            If ``period_ms`` is not positive.
        """
        if any(t.name == name for t in self._tasks):
            raise SchedulerError(f"Task {name!r} is already registered")
        if period_ms <= 0:
            raise ConfigurationError(f"Period for {name} must be positive, got {period_ms}")

        task = ScheduledTask(
            name=name,
            period_ms=period_ms,
            callback=callback,
            next_due_ms=self._now_ms + period_ms,
        )
        self._tasks.append(task)
        logger.debug("Registered task %s every %d ms", name, period_ms)
        return task

    def advance(self, elapsed_ms: int) -> int:
        """Move the clock forward and fire every task that falls due.

        A task due several times within ``elapsed_ms`` fires that many times.
        Each callback sees the state left by the callbacks before it.

        Returns
        -------
        int
            Number of firings.
        """
        if elapsed_ms < 0:
            raise SchedulerError(f"Cannot advance by a negative amount ({elapsed_ms} ms)")
        if self._advancing:
            raise SchedulerError("advance() called from inside a task")

        target = self._now_ms + int(elapsed_ms)
        fired = 0
        self._advancing = True
        try:
            while True:
                due = [
                    (task.next_due_ms, index, task)
                    for index, task in enumerate(self._tasks)
                    if task.next_due_ms <= target
                ]
                if not due:
                    break

                due_ms, _, task = min(due, key=lambda item: (item[0], item[1]))
                self._now_ms = due_ms
                task.next_due_ms += task.period_ms
                task.fire_count += 1
                logger.debug("Firing %s", task.name, extra={"task": task.name, "at_ms": due_ms})
                task.callback()
                fired += 1
        finally:
            self._advancing = False

        self._now_ms = target
        return fired

    def reset(self) -> None:
        """Rewind the clock to zero and reschedule every task."""
        self._now_ms = 0
        for task in self._tasks:
            task.next_due_ms = task.period_ms
            task.fire_count = 0
