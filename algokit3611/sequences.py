"""Integer sequences with characteristic orderings, used as sort inputs."""

from __future__ import annotations

import random
from typing import Optional


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative: {count}")


def sorted_ints(count: int) -> list[int]:
    """``0, 1, ..., count - 1``."""
    _check_count(count)
    return list(range(count))


def reverse_ints(count: int) -> list[int]:
    """``count - 1, ..., 1, 0``."""
    _check_count(count)
    return list(range(count - 1, -1, -1))


def organpipe_ints(count: int) -> list[int]:
    """Rise from 0 to ``count // 2`` and fall back to 0.

    ``count`` must be at least 2.
    """
    if count < 2:
        raise ValueError(f"organ pipe sequence needs count >= 2: {count}")
    half = count // 2
    rising = list(range(half + 1))
    falling = list(range(half - 1, 0, -1))
    return rising + falling + [0]


def rotated_ints(count: int) -> list[int]:
    """``1, 2, ..., count - 1, 0``: sorted values rotated left by one."""
    values = sorted_ints(count)
    return values[1:] + values[:1]


def random01_ints(count: int, rng: Optional[random.Random] = None) -> list[int]:
    """``count`` values drawn uniformly from {0, 1}."""
    _check_count(count)
    rng = rng or random.Random()
    return [rng.randint(0, 1) for _ in range(count)]