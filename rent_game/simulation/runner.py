"""Wall-clock driver for the scheduler."""

import logging
import threading
import time
from typing import Callable

logger = logging.getLogger(__name__)


class RealtimeRunner:
    """Advance simulation time in step with the wall clock.

    A daemon thread wakes every ``tick_interval_ms``, measures the elapsed
    monotonic time and passes it to ``advance`` while holding ``lock``.
    Sub-millisecond remainders carry over to the next tick.

    Parameters
    ----------
    advance : Callable[[int], object]
        Called with elapsed milliseconds, usually ``Scheduler.advance``.
    lock : threading.RLock
        Lock that serializes every state mutation.
    tick_interval_ms : int
        Polling interval.
    clock : Callable[[], float]
        Monotonic clock in seconds.
    """

    def __init__(
        self,
        advance: Callable[[int], object],
        lock: threading.RLock,
        tick_interval_ms: int = 100,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._advance = advance
        self._lock = lock
        self._tick_interval_ms = tick_interval_ms
        self._clock = clock
        self._thread: threading.Thread | None = None
        self._stop_event = threading.Event()
        self.error: BaseException | None = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the clock thread. Does nothing if it is already running."""
        if self.is_running:
            return

        self.error = None
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run,
            args=(self._stop_event,),
            name="rent-game-clock",
            daemon=True,
        )
        self._thread.start()
        logger.info("Real-time clock started (tick=%d ms)", self._tick_interval_ms)

    def stop(self, timeout: float | None = None) -> None:
        """Stop the clock thread and wait for it to exit.

        Safe to call repeatedly and without a prior ``start()``. May be
        called while holding ``lock``, e.g. from an event listener; the
        clock thread gives up waiting for the lock once the stop is signalled.
        """
        thread = self._thread
        if thread is None:
            return

        self._stop_event.set()
        if thread is not threading.current_thread():
            thread.join(timeout)
        self._thread = None
        logger.info("Real-time clock stopped")

    def _acquire(self, stop_event: threading.Event) -> bool:
        """Take the lock, or return False once ``stop_event`` is set."""
        while not self._lock.acquire(timeout=self._tick_interval_ms / 1000):
            if stop_event.is_set():
                return False
        return True

    def _run(self, stop_event: threading.Event) -> None:
        last = self._clock()
        carry = 0.0

        while not stop_event.wait(self._tick_interval_ms / 1000):
            now = self._clock()
            elapsed = (now - last) * 1000 + carry
            last = now
            whole = int(elapsed)
            carry = elapsed - whole

            if not self._acquire(stop_event):
                break
            try:
                # stop() may have won the race for the lock
                if stop_event.is_set():
                    break
                self._advance(whole)
            except Exception as exc:
                self.error = exc
                logger.exception("Simulation tick failed, stopping the clock")
                break
            finally:
                self._lock.release()
