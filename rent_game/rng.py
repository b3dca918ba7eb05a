"""Random helpers shared by the generators and simulation rules.

Every consumer receives an explicit ``random.Random`` instead of using the
module-level ``random`` functions, so a seeded game replays identically and
tests can inject their own source.
"""

from __future__ import annotations

import random
import zlib
from typing import Sequence, TypeVar

T = TypeVar("T")


def rand_int(rng: random.Random, n: int) -> int:
    """Return a uniform integer in ``[0, n)``."""
    return rng.randrange(n)


def rand_item(rng: random.Random, items: Sequence[T]) -> T:
    """Return a uniformly chosen element of ``items``."""
    return items[rand_int(rng, len(items))]


def derive_seed(seed: int, tag: str) -> int:
    # zlib.crc32 is stable across processes, unlike hash()
    crc = zlib.crc32(tag.encode("utf-8")) & 0xFFFFFFFF
    return (int(seed) ^ crc) & 0xFFFFFFFF


def derive_rng(seed: int | None, tag: str) -> random.Random:
    """Return an independent random stream for ``tag``.

    Parameters
    ----------
    seed : int | None
        Base seed of the game. ``None`` gives an unseeded stream.
    tag : str
        Name of the consumer (e.g. a task name).

    Returns
    -------
    random.Random
        Stream whose sequence depends only on ``seed`` and ``tag``.
    """
    if seed is None:
        return random.Random()
    return random.Random(derive_seed(seed, tag))
