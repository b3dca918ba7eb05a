"""Game controller: owns the state and serializes every change to it."""

from __future__ import annotations

import copy
import logging
import threading
from decimal import Decimal
from typing import Any, Callable

from rent_game.config import GameConfig
from rent_game.generators import HouseGenerator
from rent_game.models import Action, EventType, GameEvent, GameSnapshot, House
from rent_game.rng import derive_rng
from rent_game.simulation import rules
from rent_game.simulation.actions import ActionHandlers, available_actions
from rent_game.simulation.runner import RealtimeRunner
from rent_game.simulation.scheduler import Scheduler
from rent_game.store import GameState

logger = logging.getLogger(__name__)

Listener = Callable[[GameEvent], None]


class RentGame:
    """Headless rent game.

    The controller is the single writer of the game state. Periodic tasks
    and player actions both run under one re-entrant lock, so a front end
    may call actions from its own thread while the real-time clock runs.

    Time can be driven two ways:

    - ``advance(ms)`` moves simulation time forward on the caller's thread
      (deterministic, used by tests and scripts)
    - ``start()`` / ``stop()`` run a background clock that follows the
      wall clock

    Parameters
    ----------
    config : GameConfig | None
        Game configuration. Defaults reproduce the standard game.
    state : GameState | None
        Initial state. When omitted, ``starting_houses`` random houses are
        generated and the wallet holds ``starting_money``.
    """

    def __init__(self, config: GameConfig | None = None, state: GameState | None = None) -> None:
        self.config = config or GameConfig()
        self.config.validate()
        seed = self.config.seed

        self._lock = threading.RLock()
        self._listeners: list[Listener] = []

        self.generator = HouseGenerator(seed=seed, locale=self.config.locale)
        if state is None:
            state = GameState(
                houses=list(self.generator.generate_batch(self.config.economy.starting_houses)),
                money=self.config.economy.starting_money,
            )
        self._state = state

        self._breakage_rng = derive_rng(seed, "spontaneous_breakage")
        self._damage_rng = derive_rng(seed, "tenant_damage")
        self._turnover_rng = derive_rng(seed, "market_turnover")
        self.actions = ActionHandlers(
            state=self._state,
            generator=self.generator,
            rng=derive_rng(seed, "actions"),
            on_event=self._emit,
        )

        self.scheduler = Scheduler()
        periods = self.config.clock.periods()
        self.scheduler.register("spontaneous_breakage", periods["spontaneous_breakage"], self._spontaneous_breakage)
        self.scheduler.register("tenant_damage", periods["tenant_damage"], self._tenant_damage)
        self.scheduler.register("rent_and_churn", periods["rent_and_churn"], self._rent_and_churn)
        self.scheduler.register("market_turnover", periods["market_turnover"], self._market_turnover)

        self._runner = RealtimeRunner(
            advance=self.scheduler.advance,
            lock=self._lock,
            tick_interval_ms=self.config.clock.tick_interval_ms,
        )

        logger.info(
            "New game: %d houses, money=%s, seed=%s",
            len(self._state.houses),
            self._state.money,
            seed,
        )

    # --- State read ---

    @property
    def houses(self) -> list[House]:
        """Copy of the current house collection."""
        with self._lock:
            return copy.deepcopy(self._state.houses)

    @property
    def money(self) -> Decimal:
        with self._lock:
            return self._state.money

    @property
    def rating(self) -> int:
        with self._lock:
            return self._state.rating

    @property
    def now_ms(self) -> int:
        """Simulation time elapsed since the game started."""
        with self._lock:
            return self.scheduler.now_ms

    @property
    def is_running(self) -> bool:
        return self._runner.is_running

    def snapshot(self) -> GameSnapshot:
        """Consistent copy of houses, money and rating."""
        with self._lock:
            return self._state.snapshot(at_ms=self.scheduler.now_ms)

    def summary(self) -> dict[str, int | str]:
        """Portfolio counts, money and rating."""
        with self._lock:
            return self._state.summary()

    def available_actions(self, house_id: int) -> list[Action]:
        """Actions to offer for a house; empty if the id is unknown."""
        with self._lock:
            house = self._state.find_house(house_id)
            if house is None:
                return []
            return available_actions(self._state, house)

    # --- Player actions ---

    def fix(self, house_id: int, cost: int | None = None) -> bool:
        with self._lock:
            return self.actions.fix(house_id, cost=cost)

    def evict(self, house_id: int) -> bool:
        with self._lock:
            return self.actions.evict(house_id)

    def let(self, house_id: int) -> bool:
        with self._lock:
            return self.actions.let(house_id)

    def buy(self, house_id: int) -> bool:
        with self._lock:
            return self.actions.buy(house_id)

    def sell(self, house_id: int) -> bool:
        with self._lock:
            return self.actions.sell(house_id)

    # --- Time ---

    def advance(self, elapsed_ms: int) -> int:
        """Run the simulation forward by ``elapsed_ms`` of simulation time.

        Returns
        -------
        int
            Number of task firings.
        """
        with self._lock:
            return self.scheduler.advance(elapsed_ms)

    def start(self) -> None:
        """Start the real-time clock."""
        self._runner.start()

    def stop(self) -> None:
        """Stop the real-time clock.

        Idempotent, safe before ``start()`` and safe from inside an event
        listener.
        """
        self._runner.stop()

    def __enter__(self) -> "RentGame":
        self.start()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.stop()

    # --- Notifications ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for game events.

        Returns
        -------
        Callable[[], None]
            Call it to unsubscribe.
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, event_type: EventType, subject: int | None, data: dict[str, Any]) -> None:
        event = GameEvent(
            event_type=event_type,
            at_ms=self.scheduler.now_ms,
            subject=subject,
            data=data,
        )
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception(
                    "Listener %r failed on %s",
                    listener,
                    event_type.value,
                    extra={"house_id": subject, "at_ms": event.at_ms},
                )

    # --- Scheduled tasks ---

    def _spontaneous_breakage(self) -> None:
        broken = rules.spontaneous_breakage(
            self._state,
            self._breakage_rng,
            probability=self.config.economy.breakage_probability,
        )
        for house_id, item in broken.items():
            self._emit(EventType.HOUSE_BROKEN, house_id, {"item": item.value, "cause": "wear"})

    def _tenant_damage(self) -> None:
        broken = rules.tenant_damage(self._state, self._damage_rng)
        for house_id, item in broken.items():
            self._emit(EventType.HOUSE_BROKEN, house_id, {"item": item.value, "cause": "tenant"})

    def _rent_and_churn(self) -> None:
        result = rules.rent_and_churn(self._state)
        self._emit(
            EventType.RENT_COLLECTED,
            None,
            {"amount": str(result.collected), "money": str(self._state.money)},
        )
        for house_id in result.vacated:
            self._emit(EventType.TENANT_LEFT, house_id, {})

    def _market_turnover(self) -> None:
        result = rules.market_turnover(self._state, self._turnover_rng, self.generator)
        self._emit(
            EventType.MARKET_TURNOVER,
            result.added.house_id,
            {"dropped": result.dropped, "added": result.added.house_id},
        )
