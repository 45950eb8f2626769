"""Business logic for generating lottery numbers per draw format."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from lottery_consulter.errors import UnsupportedTypeError
from lottery_consulter.services.sampling import pick_unique


class LotteryType(str, Enum):
    DOUBLE_COLOR = "double_color"
    QILECAI = "qilecai"
    FUCAI3D = "fucai3d"
    KUAILE8 = "kuaile8"


@dataclass(frozen=True)
class FieldRule:
    count: int
    min_value: int
    max_value: int

    def accepts(self, n: int) -> bool:
        return self.min_value <= n <= self.max_value


RED = FieldRule(count=6, min_value=1, max_value=33)
BLUE = FieldRule(count=1, min_value=1, max_value=16)
QILECAI_MAIN = FieldRule(count=7, min_value=1, max_value=30)
FUCAI3D_DIGIT = FieldRule(count=3, min_value=1, max_value=9)
KUAILE8_NUMBER = FieldRule(count=20, min_value=1, max_value=80)


@dataclass(frozen=True)
class GeneratedResult:
    type: LotteryType
    reds: list[int] | None = None
    blues: list[int] | None = None
    numbers: list[int] | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": self.type.value}
        for key in ("reds", "blues", "numbers"):
            value = getattr(self, key)
            if value is not None:
                out[key] = list(value)
        return out


class LotteryService:
    """Generate numbers for the supported lottery formats."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    @staticmethod
    def parse_type(lottery_type: str) -> LotteryType:
        try:
            return LotteryType(str(lottery_type))
        except ValueError as exc:
            raise UnsupportedTypeError(
                str(lottery_type),
                details={"type": [f"Must be one of {'|'.join(t.value for t in LotteryType)}"]},
            ) from exc

    @staticmethod
    def _valid_seeds(lucky_numbers: Iterable[int], rule: FieldRule) -> list[int]:
        """Lucky numbers inside the rule's range, deduplicated, input order kept."""

        seen: set[int] = set()
        out: list[int] = []
        for raw in lucky_numbers:
            n = int(raw)
            if rule.accepts(n) and n not in seen:
                seen.add(n)
                out.append(n)
        return out

    def _unique_field(self, rule: FieldRule, lucky_numbers: list[int] | None = None) -> list[int]:
        chosen = self._valid_seeds(lucky_numbers or [], rule)[: rule.count]
        missing = rule.count - len(chosen)
        if missing:
            chosen.extend(
                pick_unique(missing, rule.max_value, rule.min_value, exclude=chosen, rng=self._rng)
            )
        return sorted(chosen)

    def _special_number(self, mains: list[int], lucky_numbers: list[int] | None = None) -> int:
        for n in self._valid_seeds(lucky_numbers or [], QILECAI_MAIN):
            if n not in mains:
                return n

        while True:
            special = self._rng.randint(QILECAI_MAIN.min_value, QILECAI_MAIN.max_value)
            if special not in mains:
                return special

    def _digits(self, lucky_numbers: list[int] | None = None) -> list[int]:
        # Positional digits: repeats allowed, input order kept.
        rule = FUCAI3D_DIGIT
        digits = [int(n) for n in (lucky_numbers or []) if rule.accepts(int(n))][: rule.count]
        while len(digits) < rule.count:
            digits.append(self._rng.randint(rule.min_value, rule.max_value))
        return digits

    def generate(self, lottery_type: str, lucky_numbers: Iterable[int] | None = None) -> GeneratedResult:
        """Generate one ticket for ``lottery_type``.

        When ``lucky_numbers`` is non-empty, valid values are used first (in
        the order given) and the remaining slots are drawn at random.
        """

        kind = self.parse_type(lottery_type)
        seeds = [int(n) for n in lucky_numbers] if lucky_numbers else None

        if kind is LotteryType.DOUBLE_COLOR:
            reds = self._unique_field(RED, seeds)
            blues = self._unique_field(BLUE, seeds)
            return GeneratedResult(type=kind, reds=reds, blues=blues)

        if kind is LotteryType.QILECAI:
            mains = self._unique_field(QILECAI_MAIN, seeds)
            special = self._special_number(mains, seeds)
            # Special number stays last; only the mains are sorted.
            return GeneratedResult(type=kind, numbers=[*mains, special])

        if kind is LotteryType.FUCAI3D:
            return GeneratedResult(type=kind, numbers=self._digits(seeds))

        if kind is LotteryType.KUAILE8:
            return GeneratedResult(type=kind, numbers=self._unique_field(KUAILE8_NUMBER, seeds))

        raise UnsupportedTypeError(kind.value)
