"""Periodic simulation rules.

Each rule mutates a ``GameState`` in place using an explicit random source
and returns what it changed. Rules know nothing about timing; the
controller registers them with the scheduler.
"""

import logging
import random
from dataclasses import dataclass, field
from decimal import Decimal

from rent_game.generators import HouseGenerator
from rent_game.models import BrokenItem, House
from rent_game.rng import rand_int, rand_item
from rent_game.store import GameState, to_money

logger = logging.getLogger(__name__)

ELEMENTS: list[BrokenItem] = list(BrokenItem)

# Rating points per 100% rent bonus
RATING_DIVISOR = 10


@dataclass
class RentResult:
    """Outcome of one rent collection."""

    collected: Decimal
    vacated: list[int] = field(default_factory=list)


@dataclass
class TurnoverResult:
    """Outcome of one market turnover."""

    dropped: list[int]
    added: House


def spontaneous_breakage(
    state: GameState,
    rng: random.Random,
    probability: float = 0.3,
) -> dict[int, BrokenItem]:
    """Break something in working houses.

    Each house without a broken item breaks with ``probability``. Houses
    that are already broken are left alone.

    Returns
    -------
    dict[int, BrokenItem]
        Newly broken items keyed by house id.
    """
    broken: dict[int, BrokenItem] = {}
    for house in state.houses:
        if house.broken_item is None and rng.random() < probability:
            house.broken_item = rand_item(rng, ELEMENTS)
            broken[house.house_id] = house.broken_item

    if broken:
        logger.debug("Spontaneous breakage in houses %s", sorted(broken))
    return broken


def tenant_damage(state: GameState, rng: random.Random) -> dict[int, BrokenItem]:
    """Let tenants break things.

    A tenant with damage ``d`` breaks a random item with probability
    ``d / 10``, overwriting whatever was broken before.
    """
    broken: dict[int, BrokenItem] = {}
    for house in state.houses:
        if house.tenant is not None and rng.random() < house.tenant.damage / 10:
            house.broken_item = rand_item(rng, ELEMENTS)
            broken[house.house_id] = house.broken_item

    if broken:
        logger.debug("Tenant damage in houses %s", sorted(broken))
    return broken


def rent_for(house: House, rating: int) -> Decimal:
    """Rent a single house pays at the given rating.

    Vacant houses pay nothing. Upset tenants (broken item) pay the bare
    value. Happy tenants pay ``value * (1 + rating / 10)``, floored at zero.
    """
    if house.tenant is None:
        return Decimal(0)
    if house.broken_item is not None:
        return Decimal(house.value)
    multiplier = max(0, RATING_DIVISOR + rating)
    return Decimal(house.value * multiplier) / RATING_DIVISOR


def collect_rent(state: GameState) -> Decimal:
    """Credit the rent of every tenanted house and return the total."""
    total = to_money(sum((rent_for(h, state.rating) for h in state.houses), Decimal(0)))
    state.credit(total)
    return total


def evict_upset_tenants(state: GameState) -> list[int]:
    """Tenants living with a broken item move out. Rating is unaffected."""
    vacated = []
    for house in state.houses:
        if house.tenant_is_upset:
            house.tenant = None
            vacated.append(house.house_id)
    return vacated


def rent_and_churn(state: GameState) -> RentResult:
    """Collect rent, then let upset tenants leave."""
    collected = collect_rent(state)
    vacated = evict_upset_tenants(state)
    logger.debug(
        "Collected rent %s, %d tenants left",
        collected,
        len(vacated),
        extra={"money": state.money, "rating": state.rating},
    )
    return RentResult(collected=collected, vacated=vacated)


def market_turnover(
    state: GameState,
    rng: random.Random,
    generator: HouseGenerator,
) -> TurnoverResult:
    """Churn the market.

    Owned houses always stay. Each other house stays with probability 2/3.
    One newly generated house is appended.
    """
    kept: list[House] = []
    dropped: list[int] = []
    for house in state.houses:
        if house.owner or rand_int(rng, 3) > 0:
            kept.append(house)
        else:
            dropped.append(house.house_id)

    added = generator.create_house(taken_ids={h.house_id for h in kept})
    kept.append(added)
    state.houses[:] = kept

    logger.debug("Market turnover dropped %s, added house %d", dropped, added.house_id)
    return TurnoverResult(dropped=dropped, added=added)
