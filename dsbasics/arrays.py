"""Helpers that build, shuffle and format integer arrays."""

from __future__ import annotations

import random
from typing import Iterable, MutableSequence, Optional


def inc_sorted(n: int) -> list[int]:
    """Return ``[1, 2, ..., n]``."""
    return list(range(1, n + 1))


def dec_sorted(n: int) -> list[int]:
    """Return ``[n, n - 1, ..., 1]``."""
    return list(range(n, 0, -1))


def shuffle(values: MutableSequence[int],
            rng: Optional[random.Random] = None) -> None:
    """Shuffle ``values`` in place.

    Each position, from the left, is swapped with a randomly chosen position
    at or to the right of it.
    """
    rng = rng if rng is not None else random.Random()
    n = len(values)
    for i in range(n - 1):
        j = rng.randrange(i, n)
        values[i], values[j] = values[j], values[i]


def random_permutation(n: int,
                       rng: Optional[random.Random] = None) -> list[int]:
    """Return the numbers 1 to ``n`` in random order."""
    values = inc_sorted(n)
    shuffle(values, rng)
    return values


def format_array(values: Iterable[int]) -> str:
    """Render values as ``[a b c ]``: each value followed by a space."""
    return "[" + "".join(f"{value} " for value in values) + "]"