"""Tests for GameState."""

from decimal import Decimal
from typing import Callable

import pytest

from rent_game.exceptions import HouseNotFoundError, InsufficientFundsError, InvalidHouseStateError
from rent_game.models import BrokenItem, House
from rent_game.store import GameState, to_money


class TestGameStateDefaults:
    """Tests for the starting state."""

    def test_defaults(self) -> None:
        state = GameState()

        assert state.houses == []
        assert state.money == Decimal("50000.00")
        assert state.rating == 0

    def test_money_quantized(self) -> None:
        assert GameState(money=Decimal("10.005")).money == Decimal("10.00")
        assert to_money(7) == Decimal("7.00")

    def test_duplicate_ids_rejected(self, make_house: Callable[..., House]) -> None:
        with pytest.raises(InvalidHouseStateError):
            GameState(houses=[make_house(house_id=1), make_house(house_id=1)])


class TestLookup:
    """Tests for house lookup."""

    def test_find_house(self, make_state: Callable[..., GameState], make_house: Callable[..., House]) -> None:
        house = make_house(house_id=7)
        state = make_state([house])

        assert state.find_house(7) is house
        assert state.find_house(8) is None

    def test_get_house_missing(self, make_state: Callable[..., GameState]) -> None:
        with pytest.raises(HouseNotFoundError, match="House 8 not found"):
            make_state().get_house(8)

    def test_owned_and_market(self, make_state: Callable[..., GameState], make_house: Callable[..., House]) -> None:
        mine = make_house(house_id=1, owner=True)
        theirs = make_house(house_id=2, owner=False)
        state = make_state([mine, theirs])

        assert state.owned_houses() == [mine]
        assert state.market_houses() == [theirs]


class TestWallet:
    """Tests for credit and debit."""

    def test_credit(self, make_state: Callable[..., GameState]) -> None:
        state = make_state(money=100)
        state.credit(Decimal("50.5"))

        assert state.money == Decimal("150.50")

    def test_debit(self, make_state: Callable[..., GameState]) -> None:
        state = make_state(money=100)
        state.debit(100)

        assert state.money == 0

    def test_debit_insufficient(self, make_state: Callable[..., GameState]) -> None:
        state = make_state(money=100)

        with pytest.raises(InsufficientFundsError):
            state.debit(101)
        assert state.money == 100


class TestSnapshot:
    """Tests for snapshot and summary."""

    def test_snapshot_is_a_copy(self, make_state: Callable[..., GameState], make_house: Callable[..., House]) -> None:
        state = make_state([make_house(house_id=1)], money=1234, rating=3)

        snapshot = state.snapshot(at_ms=500)
        snapshot.houses[0].broken_item = BrokenItem.GATE

        assert state.houses[0].broken_item is None
        assert snapshot.money == 1234
        assert snapshot.rating == 3
        assert snapshot.at_ms == 500

    def test_summary(self, make_state: Callable[..., GameState], make_house: Callable[..., House]) -> None:
        state = make_state(
            [
                make_house(house_id=1, damage=1, broken_item=BrokenItem.GATE),
                make_house(house_id=2, damage=0),
                make_house(house_id=3, owner=False, damage=2),
            ],
            money=100,
        )

        assert state.summary() == {
            "houses": 3,
            "owned": 2,
            "market": 1,
            "tenanted": 2,
            "broken": 1,
            "money": "100.00",
            "rating": 0,
        }
