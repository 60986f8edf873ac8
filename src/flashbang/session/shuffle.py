"""
Uniform random permutations.

Every place a session needs randomness in order (pool shuffling, distractor
sampling, option ordering) goes through here so it stays a Fisher-Yates
permutation driven by one injectable ``random.Random``.
"""

from __future__ import annotations

import random
from typing import Iterable, Iterator, List, TypeVar

T = TypeVar("T")


def shuffled(items: Iterable[T], rng: random.Random) -> List[T]:
    """Return a uniformly shuffled copy of ``items``."""
    result = list(items)
    # random.Random.shuffle is an in-place Fisher-Yates shuffle
    rng.shuffle(result)
    return result


def draw_without_replacement(items: Iterable[T], rng: random.Random) -> Iterator[T]:
    """
    Yield ``items`` in uniformly random order, one at a time.

    Lazy Fisher-Yates: each step swaps a random remaining item into place,
    so stopping after k draws costs O(k) swaps and every prefix is a uniform
    sample without replacement.
    """
    pool = list(items)
    for last in range(len(pool) - 1, -1, -1):
        pick = rng.randint(0, last)
        pool[last], pool[pick] = pool[pick], pool[last]
        yield pool[last]
