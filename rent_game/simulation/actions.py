"""Player actions: fix, evict, let, buy, sell.

Handlers validate against the current state and either apply the whole
transition or leave the state untouched. Rejections are raised internally
as ``RentGameError`` subclasses and reported to the caller as ``False``.
"""

import logging
import random
from typing import Any, Callable

from rent_game.exceptions import InvalidHouseStateError, RentGameError
from rent_game.generators import HouseGenerator
from rent_game.models import Action, EventType, House
from rent_game.rng import rand_int
from rent_game.store import GameState

logger = logging.getLogger(__name__)

FIX_COST_STEP = 100
FIX_COST_STEPS = 10

EventCallback = Callable[[EventType, int | None, dict[str, Any]], None]

_APPLIED = {
    Action.FIX: "Fixed",
    Action.EVICT: "Evicted the tenant of",
    Action.LET: "Let",
    Action.BUY: "Bought",
    Action.SELL: "Sold",
}


def roll_fix_cost(rng: random.Random) -> int:
    """Contractor's quote: 100, 200, ... or 1000."""
    return rand_int(rng, FIX_COST_STEPS) * FIX_COST_STEP + FIX_COST_STEP


# Availability predicates: what the front end offers for a house


def can_fix(state: GameState, house: House) -> bool:
    return house.owner and house.broken_item is not None


def can_evict(state: GameState, house: House) -> bool:
    return house.owner and house.tenant is not None


def can_let(state: GameState, house: House) -> bool:
    return house.owner and house.tenant is None


def can_buy(state: GameState, house: House) -> bool:
    return not house.owner and state.can_afford(house.value)


def can_sell(state: GameState, house: House) -> bool:
    return house.owner


_PREDICATES: dict[Action, Callable[[GameState, House], bool]] = {
    Action.FIX: can_fix,
    Action.EVICT: can_evict,
    Action.LET: can_let,
    Action.BUY: can_buy,
    Action.SELL: can_sell,
}


def available_actions(state: GameState, house: House) -> list[Action]:
    """Actions a front end should offer for ``house`` right now.

    Fix is offered regardless of the wallet because the contractor's quote
    is only known once called.
    """
    return [action for action, predicate in _PREDICATES.items() if predicate(state, house)]


class ActionHandlers:
    """Apply player actions to a game state.

    Parameters
    ----------
    state : GameState
        State the handlers mutate.
    generator : HouseGenerator
        Source of new tenants.
    rng : random.Random
        Source of contractor quotes.
    on_event : EventCallback | None
        Called after each applied action with the event type, the house id
        and event data.
    """

    def __init__(
        self,
        state: GameState,
        generator: HouseGenerator,
        rng: random.Random,
        on_event: EventCallback | None = None,
    ) -> None:
        self.state = state
        self.generator = generator
        self.rng = rng
        self._on_event = on_event

    def fix(self, house_id: int, cost: int | None = None) -> bool:
        """Call a contractor to repair the broken item.

        The quote is rolled once per call unless ``cost`` is given. If the
        house is not broken or the quote exceeds the wallet, nothing changes.
        """
        if cost is None:
            cost = roll_fix_cost(self.rng)
        return self._attempt(Action.FIX, house_id, lambda: self._fix(house_id, cost))

    def evict(self, house_id: int) -> bool:
        """Evict the tenant; costs one rating point."""
        return self._attempt(Action.EVICT, house_id, lambda: self._evict(house_id))

    def let(self, house_id: int) -> bool:
        """Move a new tenant into a vacant house."""
        return self._attempt(Action.LET, house_id, lambda: self._let(house_id))

    def buy(self, house_id: int) -> bool:
        """Buy the house at its value."""
        return self._attempt(Action.BUY, house_id, lambda: self._buy(house_id))

    def sell(self, house_id: int) -> bool:
        """Sell the house at its value."""
        return self._attempt(Action.SELL, house_id, lambda: self._sell(house_id))

    def _attempt(self, action: Action, house_id: int, apply: Callable[[], None]) -> bool:
        context = {"action": action.value.lower(), "house_id": house_id}
        try:
            apply()
        except RentGameError as exc:
            logger.debug("Rejected %s of house %s: %s", action.value.lower(), house_id, exc, extra=context)
            return False

        logger.info(
            "%s house %s",
            _APPLIED[action],
            house_id,
            extra={**context, "money": self.state.money, "rating": self.state.rating},
        )
        return True

    def _fix(self, house_id: int, cost: int) -> None:
        house = self.state.get_house(house_id)
        if house.broken_item is None:
            raise InvalidHouseStateError(f"House {house_id} has nothing broken")

        item = house.broken_item
        self.state.debit(cost)
        house.broken_item = None
        self.state.rating += 1
        self._emit(EventType.HOUSE_FIXED, house_id, {"item": item.value, "cost": cost})

    def _evict(self, house_id: int) -> None:
        house = self.state.get_house(house_id)
        if house.tenant is None:
            raise InvalidHouseStateError(f"House {house_id} has no tenant")

        tenant = house.tenant
        house.tenant = None
        self.state.rating -= 1
        self._emit(EventType.TENANT_EVICTED, house_id, {"tenant": tenant.name})

    def _let(self, house_id: int) -> None:
        house = self.state.get_house(house_id)
        if house.tenant is not None:
            raise InvalidHouseStateError(f"House {house_id} is already let")

        house.tenant = self.generator.create_tenant()
        self._emit(
            EventType.HOUSE_LET,
            house_id,
            {"tenant": house.tenant.name, "damage": house.tenant.damage},
        )

    def _buy(self, house_id: int) -> None:
        house = self.state.get_house(house_id)
        self.state.debit(house.value)
        house.owner = True
        self._emit(EventType.HOUSE_BOUGHT, house_id, {"price": house.value})

    def _sell(self, house_id: int) -> None:
        house = self.state.get_house(house_id)
        house.owner = False
        self.state.credit(house.value)
        self._emit(EventType.HOUSE_SOLD, house_id, {"price": house.value})

    def _emit(self, event_type: EventType, house_id: int | None, data: dict[str, Any]) -> None:
        if self._on_event is not None:
            self._on_event(event_type, house_id, data)
