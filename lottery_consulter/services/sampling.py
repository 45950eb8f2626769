"""Unique-draw sampler shared by the lottery generator."""

from __future__ import annotations

import random
from typing import Iterable

from lottery_consulter.errors import InvalidRangeError


def pick_unique(
    count: int,
    max_value: int,
    min_value: int = 1,
    *,
    exclude: Iterable[int] = (),
    rng: random.Random | None = None,
) -> list[int]:
    """Draw ``count`` distinct integers from [min_value, max_value].

    Uniform rejection sampling: draw, drop duplicates and excluded values,
    repeat. Ranges here are tiny (at most 80 values), so rejections are cheap.

    Returns:
        The drawn values sorted ascending.

    Raises:
        InvalidRangeError: if the range cannot hold ``count`` distinct values
            once ``exclude`` is taken out.
    """

    rng = rng or random
    blocked = {int(n) for n in exclude if min_value <= int(n) <= max_value}
    available = (max_value - min_value + 1) - len(blocked)

    if count < 0:
        raise InvalidRangeError("count must not be negative", details={"count": count})
    if count > max(available, 0):
        raise InvalidRangeError(
            message=f"Cannot draw {count} distinct numbers from {min_value}..{max_value}",
            details={"count": count, "min": min_value, "max": max_value, "available": max(available, 0)},
        )

    used: set[int] = set()
    result: list[int] = []
    while len(result) < count:
        n = rng.randint(min_value, max_value)
        if n in used or n in blocked:
            continue
        used.add(n)
        result.append(n)

    return sorted(result)
