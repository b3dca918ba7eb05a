"""Simulation state: the houses, the wallet and the rating."""

import copy
from dataclasses import dataclass, field
from decimal import Decimal

from rent_game.exceptions import HouseNotFoundError, InsufficientFundsError, InvalidHouseStateError
from rent_game.models import GameSnapshot, House

CENTS = Decimal("0.01")


def to_money(amount: Decimal | int | str) -> Decimal:
    """Quantize an amount to cents."""
    return Decimal(amount).quantize(CENTS)


@dataclass
class GameState:
    """In-memory game state owned by a single controller.

    Houses keep insertion order; rules and handlers look houses up by id
    against the current list.
    """

    houses: list[House] = field(default_factory=list)
    money: Decimal = field(default_factory=lambda: to_money(50000))
    rating: int = 0

    def __post_init__(self) -> None:
        self.money = to_money(self.money)
        ids = [h.house_id for h in self.houses]
        if len(ids) != len(set(ids)):
            raise InvalidHouseStateError(f"Duplicate house ids in {sorted(ids)}")

    def find_house(self, house_id: int) -> House | None:
        """Return the house with ``house_id``, or None."""
        for house in self.houses:
            if house.house_id == house_id:
                return house
        return None

    def get_house(self, house_id: int) -> House:
        """Return the house with ``house_id``.

        Raises
        ------
        HouseNotFoundError
            If no house in the current collection has that id.
        """
        house = self.find_house(house_id)
        if house is None:
            raise HouseNotFoundError(f"House {house_id} not found")
        return house

    def house_ids(self) -> set[int]:
        return {h.house_id for h in self.houses}

    def owned_houses(self) -> list[House]:
        """Houses in the player's portfolio."""
        return [h for h in self.houses if h.owner]

    def market_houses(self) -> list[House]:
        """Houses the player does not own."""
        return [h for h in self.houses if not h.owner]

    def can_afford(self, amount: Decimal | int) -> bool:
        return Decimal(amount) <= self.money

    def credit(self, amount: Decimal | int) -> None:
        """Add ``amount`` to the wallet."""
        self.money = to_money(self.money + Decimal(amount))

    def debit(self, amount: Decimal | int) -> None:
        """Take ``amount`` from the wallet.

        Raises
        ------
        InsufficientFundsError
            If the wallet holds less than ``amount``; the wallet is untouched.
        """
        if not self.can_afford(amount):
            raise InsufficientFundsError(f"Cannot pay {amount} with {self.money}")
        self.money = to_money(self.money - Decimal(amount))

    def snapshot(self, at_ms: int = 0) -> GameSnapshot:
        """Return a deep copy of the state for rendering."""
        return GameSnapshot(
            houses=copy.deepcopy(self.houses),
            money=self.money,
            rating=self.rating,
            at_ms=at_ms,
        )

    def summary(self) -> dict[str, int | str]:
        """Return summary counts of the state."""
        owned = self.owned_houses()
        return {
            "houses": len(self.houses),
            "owned": len(owned),
            "market": len(self.market_houses()),
            "tenanted": sum(1 for h in owned if not h.is_vacant),
            "broken": sum(1 for h in owned if h.is_broken),
            "money": str(self.money),
            "rating": self.rating,
        }
