"""Pytest configuration and fixtures."""

import random
from decimal import Decimal
from typing import Callable

import pytest

from rent_game.generators import HouseGenerator
from rent_game.models import BrokenItem, House, Tenant
from rent_game.store import GameState


class StubRandom:
    """Random source that replays scripted values.

    ``random()`` returns the next float from ``floats`` and ``randrange()``
    the next int from ``ints``.
    """

    def __init__(self, floats: list[float] | None = None, ints: list[int] | None = None) -> None:
        self._floats = list(floats or [])
        self._ints = list(ints or [])

    def random(self) -> float:
        return self._floats.pop(0)

    def randrange(self, n: int) -> int:
        value = self._ints.pop(0)
        assert 0 <= value < n
        return value


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def rng(seed: int) -> random.Random:
    """Seeded random source."""
    return random.Random(seed)


@pytest.fixture
def generator(seed: int) -> HouseGenerator:
    """Seeded house generator."""
    return HouseGenerator(seed=seed)


@pytest.fixture
def make_house() -> Callable[..., House]:
    """Factory for houses with explicit fields."""

    def _make(
        house_id: int = 100,
        value: int = 10000,
        owner: bool = True,
        broken_item: BrokenItem | None = None,
        damage: int | None = None,
    ) -> House:
        return House(
            house_id=house_id,
            value=value,
            owner=owner,
            broken_item=broken_item,
            tenant=None if damage is None else Tenant(damage=damage, name="Test Tenant"),
        )

    return _make


@pytest.fixture
def make_state() -> Callable[..., GameState]:
    """Factory for game states."""

    def _make(houses: list[House] | None = None, money: int = 50000, rating: int = 0) -> GameState:
        return GameState(houses=houses or [], money=Decimal(money), rating=rating)

    return _make


@pytest.fixture
def stub_random() -> type[StubRandom]:
    """Class for scripted random sources."""
    return StubRandom
