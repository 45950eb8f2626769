"""Lucky index numerology: digit reduction, weighted index and lucky numbers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Iterable

from lottery_consulter.errors import InvalidRangeError
from lottery_consulter.services.random_service import RandomDraw, RandomService


# Weighted index: name, birth date, lucky color and the random factor.
WEIGHTS = {
    "name": 0.3,
    "birth": 0.4,
    "color": 0.1,
    "random": 0.2,
}
INDEX_SCALE = 11.11  # 9 * 11.11 ~= 100

COLOR_VALUES: dict[str, int] = {
    "red": 1,
    "orange": 2,
    "yellow": 3,
    "green": 4,
    "blue": 5,
    "purple": 6,
    "pink": 7,
    "white": 8,
    "black": 9,
}
DEFAULT_COLOR_SCORE = 5

INTERPRETATIONS: tuple[tuple[int, int, str], ...] = (
    (90, 100, "Your luck is at its peak! A perfect day to show your talent and seize opportunities. "
              "Take on new challenges boldly; money and career luck are both running high."),
    (80, 89, "Your luck is very high! A good day for important decisions and new projects. "
             "Relationships and chances to cooperate look promising."),
    (70, 79, "Your luck is good! Things are moving steadily upward, so push your plans forward "
             "step by step and keep a positive attitude."),
    (60, 69, "Your luck is above average. A calm day for routine work and keeping in touch with "
             "people. Be patient and wait for a better opening."),
    (50, 59, "Your luck is average. Keep a low profile today and focus on learning and "
             "self-improvement. Avoid risky decisions."),
    (40, 49, "Your luck is a little low. Be careful and postpone major decisions; rest well and "
             "get ready for better days."),
    (0, 39, "Your luck is low today. Use the time to reflect and plan, and stay away from risks. "
            "Hard times are temporary and good luck is on its way."),
)
FALLBACK_INTERPRETATION = "Your lucky index is one of a kind. Today is full of possibilities!"

DEFAULT_COUNT = 6
DEFAULT_RANGE = (1, 33)
SEED_COUNT = 6
SEED_RANGE = (1, 49)


def reduce_digits(n: int) -> int:
    """Sum decimal digits repeatedly until a single digit remains."""

    n = abs(int(n))
    while n > 9:
        n = sum(int(d) for d in str(n))
    return n


def string_to_number(text: str) -> int:
    """Reduce the sum of the string's code points to a single digit in 1..9.

    A zero sum (empty string) maps to 9.

    >>> string_to_number("A")
    2
    """

    total = sum(ord(ch) for ch in text)
    if total == 0:
        return 9
    return reduce_digits(total)


def birth_number(birth_date: date) -> int:
    return reduce_digits(birth_date.day + birth_date.month + birth_date.year)


def color_score(color: str | None) -> int:
    if not color:
        return DEFAULT_COLOR_SCORE
    return COLOR_VALUES.get(color.strip().lower(), DEFAULT_COLOR_SCORE)


def random_score(values: Iterable[int]) -> int:
    return sum(int(v) for v in values) % 9 + 1


@dataclass(frozen=True)
class Factors:
    name_score: int
    birth_score: int
    color_score: int
    random_score: int

    def to_dict(self) -> dict[str, int]:
        return {
            "nameScore": self.name_score,
            "birthScore": self.birth_score,
            "colorScore": self.color_score,
            "randomScore": self.random_score,
        }


def lucky_index(factors: Factors) -> int:
    """Weighted sum of the four factors scaled to 0..100 (half-up rounding)."""

    weighted = (
        factors.name_score * WEIGHTS["name"]
        + factors.birth_score * WEIGHTS["birth"]
        + factors.color_score * WEIGHTS["color"]
        + factors.random_score * WEIGHTS["random"]
    )
    index = int(math.floor(weighted * INDEX_SCALE + 0.5))
    return max(0, min(100, index))


def lucky_numbers(
    name_score: int,
    birth_score: int,
    color: int,
    random_values: Iterable[int],
    count: int = DEFAULT_COUNT,
    min_value: int = DEFAULT_RANGE[0],
    max_value: int = DEFAULT_RANGE[1],
) -> list[int]:
    """Derive ``count`` distinct numbers in [min_value, max_value] from the scores.

    Scores and random draws are wrapped into the range and used first (in
    encounter order). Missing values come from a fixed recurrence on the score
    total; a collision probes forward to the next unused value.
    """

    span = max_value - min_value + 1
    if count < 1 or span < 1 or count > span:
        raise InvalidRangeError(
            message=f"Cannot derive {count} distinct numbers from {min_value}..{max_value}",
            details={"count": count, "min": min_value, "max": max_value},
        )

    chosen: list[int] = []
    used: set[int] = set()
    for raw in [name_score, birth_score, color, *random_values]:
        n = (int(raw) - min_value) % span + min_value
        if n not in used:
            used.add(n)
            chosen.append(n)
        if len(chosen) == count:
            break

    base = name_score + birth_score + color
    while len(chosen) < count:
        n = ((base + len(chosen)) * 7 + 13) % span + min_value
        while n in used:
            n = n + 1 if n < max_value else min_value
        used.add(n)
        chosen.append(n)

    return sorted(chosen)


def find_band(index: int) -> tuple[int, int, str] | None:
    for band in INTERPRETATIONS:
        if band[0] <= index <= band[1]:
            return band
    return None


def interpretation_for(index: int) -> str:
    band = find_band(index)
    return band[2] if band else FALLBACK_INTERPRETATION


def parse_number_range(raw: str | None) -> tuple[int, int]:
    """Parse ``"1-33"`` into ``(1, 33)``; empty input gives the default range."""

    if not raw:
        return DEFAULT_RANGE
    lo, sep, hi = str(raw).partition("-")
    if not sep:
        raise ValueError(f"Invalid number range: {raw!r}")
    min_value, max_value = int(lo.strip()), int(hi.strip())
    if min_value < 1 or min_value >= max_value:
        raise ValueError(f"Invalid number range: {raw!r}")
    return min_value, max_value


@dataclass(frozen=True)
class LuckyResult:
    lucky_index: int
    lucky_numbers: list[int]
    interpretation: str
    random_seed: str
    timestamp: str
    confidence: int
    factors: Factors

    def to_dict(self) -> dict[str, Any]:
        return {
            "luckyIndex": self.lucky_index,
            "luckyNumbers": list(self.lucky_numbers),
            "interpretation": self.interpretation,
            "randomSeed": self.random_seed,
            "timestamp": self.timestamp,
            "confidence": self.confidence,
            "factors": self.factors.to_dict(),
        }


class NumerologyService:
    """Compute the lucky index for a person."""

    def __init__(self, random_service: RandomService | None = None) -> None:
        self._random = random_service or RandomService()

    def calculate(
        self,
        name: str,
        birth_date: date,
        lucky_color: str | None = None,
        count: int = DEFAULT_COUNT,
        number_range: tuple[int, int] = DEFAULT_RANGE,
    ) -> tuple[LuckyResult, RandomDraw]:
        draw = self._random.fetch(SEED_COUNT, *SEED_RANGE)

        factors = Factors(
            name_score=string_to_number(name),
            birth_score=birth_number(birth_date),
            color_score=color_score(lucky_color),
            random_score=random_score(draw.values),
        )
        index = lucky_index(factors)
        numbers = lucky_numbers(
            factors.name_score,
            factors.birth_score,
            factors.color_score,
            draw.values,
            count=count,
            min_value=number_range[0],
            max_value=number_range[1],
        )

        result = LuckyResult(
            lucky_index=index,
            lucky_numbers=numbers,
            interpretation=interpretation_for(index),
            random_seed=draw.seed,
            timestamp=datetime.now(timezone.utc).isoformat(),
            confidence=95 if draw.is_authentic else 85,
            factors=factors,
        )
        return result, draw
