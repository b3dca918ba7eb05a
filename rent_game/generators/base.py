"""Base generator class for all game entity generators."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker

from rent_game.rng import derive_rng


class BaseGenerator(ABC):
    """Base class for all generators.

    Provides common initialization: a Faker instance for decorative text
    and a dedicated random stream for the values the rules depend on.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    rng : random.Random | None
        Explicit random source. When omitted, a stream is derived from
        ``seed`` and the generator's class name.
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        rng: random.Random | None = None,
    ) -> None:
        self.fake = Faker(locale)
        self.rng = rng or derive_rng(seed, type(self).__name__)
        if seed is not None:
            self.fake.seed_instance(seed)
