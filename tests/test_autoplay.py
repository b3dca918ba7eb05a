"""Tests for the automated player."""

from decimal import Decimal
from typing import Callable

from rent_game.autoplay import GreedyLandlord
from rent_game.config import GameConfig
from rent_game.models import Action, BrokenItem, House
from rent_game.simulation import RentGame
from rent_game.store import GameState


class TestGreedyLandlord:
    """Tests for GreedyLandlord."""

    def test_buys_cheapest_above_reserve(self, make_house: Callable[..., House]) -> None:
        state = GameState(
            houses=[
                make_house(house_id=1, owner=False, value=15000),
                make_house(house_id=2, owner=False, value=12000),
            ],
            money=Decimal(20000),
        )
        game = RentGame(state=state)

        performed = GreedyLandlord(reserve=5000).play(game)

        assert performed == [(Action.BUY, 2)]
        assert game.money == 8000

    def test_respects_reserve(self, make_house: Callable[..., House]) -> None:
        state = GameState(houses=[make_house(house_id=1, owner=False, value=15000)], money=Decimal(19000))
        game = RentGame(state=state)

        assert GreedyLandlord(reserve=5000).play(game) == []
        assert game.money == 19000

    def test_fixes_then_lets(self, make_house: Callable[..., House]) -> None:
        state = GameState(
            houses=[make_house(house_id=1, owner=True, broken_item=BrokenItem.WINDOW)],
            money=Decimal(1000),
        )
        game = RentGame(state=state)

        performed = GreedyLandlord(reserve=5000).play(game)

        assert performed == [(Action.FIX, 1), (Action.LET, 1)]
        house = game.houses[0]
        assert house.broken_item is None
        assert house.tenant is not None
        assert game.rating == 1

    def test_does_not_let_broken_house(self, make_house: Callable[..., House]) -> None:
        """With no money for the contractor the house stays empty."""
        state = GameState(
            houses=[make_house(house_id=1, owner=True, broken_item=BrokenItem.WINDOW)],
            money=Decimal(0),
        )
        game = RentGame(state=state)

        assert GreedyLandlord().play(game) == []
        assert game.houses[0].tenant is None

    def test_long_run_stays_solvent(self, seed: int) -> None:
        game = RentGame(GameConfig(seed=seed))
        player = GreedyLandlord()

        for _ in range(120):
            game.advance(1000)
            player.play(game)

        assert game.money >= 0
        assert game.now_ms == 120000
