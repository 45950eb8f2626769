"""True-random integers from random.org with a local pseudo-random fallback.

The genuine and the synthetic provider share one small interface; the
service tries the genuine one and tags every result with where it came from,
so callers never see an upstream failure.
"""

from __future__ import annotations

import abc
import logging
import random
import time
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

import requests

from lottery_consulter.errors import InvalidRangeError, UpstreamUnavailableError

logger = logging.getLogger(__name__)


class RandomSource(str, Enum):
    EXTERNAL = "external"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class RandomDraw:
    values: list[int]
    source: RandomSource

    @property
    def is_authentic(self) -> bool:
        return self.source is RandomSource.EXTERNAL

    @property
    def seed(self) -> str:
        return "".join(str(v) for v in self.values)


class RandomProvider(abc.ABC):
    """Source of ``count`` integers in [min_value, max_value]."""

    @abc.abstractmethod
    def integers(self, count: int, min_value: int, max_value: int) -> list[int]:
        """Return exactly ``count`` integers.

        Implementations raise ``UpstreamUnavailableError`` when they cannot.
        """

    def close(self) -> None:
        """Release any connection held by the provider."""
        return None


class LocalRandomProvider(RandomProvider):
    """Pseudo-random integers from the stdlib generator (repeats allowed)."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def integers(self, count: int, min_value: int, max_value: int) -> list[int]:
        return [self._rng.randint(min_value, max_value) for _ in range(count)]


class RandomOrgProvider(RandomProvider):
    """random.org plain-text integer generator."""

    def __init__(
        self,
        url: str,
        timeout_seconds: float = 5.0,
        user_agent: str = "Lottery-Consulter/1.0",
        http: requests.Session | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._url = url
        self._timeout = timeout_seconds
        self._http = http or requests.Session()
        self._clock = clock
        self._http.headers.update({"User-Agent": user_agent})

    def integers(self, count: int, min_value: int, max_value: int) -> list[int]:
        params = {
            "num": count,
            "min": min_value,
            "max": max_value,
            "col": 1,
            "base": 10,
            "format": "plain",
            "rnd": "new",
        }
        try:
            body = self._read_body(params)
        except requests.RequestException as exc:
            raise UpstreamUnavailableError(f"random.org request failed: {exc}") from exc

        return self._parse(body.decode("utf-8", errors="replace"), count, min_value, max_value)

    def _read_body(self, params: dict[str, Any]) -> bytes:
        # The requests timeout is per socket read; this caps the whole body.
        deadline = self._clock() + self._timeout
        with self._http.get(self._url, params=params, timeout=self._timeout, stream=True) as resp:
            resp.raise_for_status()
            chunks: list[bytes] = []
            for chunk in resp.iter_content(chunk_size=1024):
                if self._clock() > deadline:
                    raise UpstreamUnavailableError(
                        f"random.org response exceeded the {self._timeout:g}s deadline"
                    )
                chunks.append(chunk)
        return b"".join(chunks)

    def close(self) -> None:
        self._http.close()

    @staticmethod
    def _parse(text: str, count: int, min_value: int, max_value: int) -> list[int]:
        lines = [line.strip() for line in (text or "").strip().splitlines() if line.strip()]
        try:
            values = [int(line) for line in lines]
        except ValueError as exc:
            raise UpstreamUnavailableError("random.org returned a non-integer line") from exc

        if len(values) != count:
            raise UpstreamUnavailableError(
                f"random.org returned {len(values)} integers, expected {count}"
            )
        if any(v < min_value or v > max_value for v in values):
            raise UpstreamUnavailableError("random.org returned a value outside the requested range")
        return values


class RandomService:
    """Fetch random integers, falling back to local randomness on any upstream failure."""

    def __init__(
        self,
        primary: RandomProvider | None = None,
        fallback: RandomProvider | None = None,
    ) -> None:
        self._primary = primary
        self._fallback = fallback or LocalRandomProvider()

    def __enter__(self) -> "RandomService":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._primary is not None:
            self._primary.close()

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "RandomService":
        primary: RandomProvider | None = None
        if config.get("RANDOM_ORG_ENABLED", True):
            primary = RandomOrgProvider(
                url=str(config.get("RANDOM_ORG_URL") or "https://www.random.org/integers/"),
                timeout_seconds=float(config.get("RANDOM_TIMEOUT_SECONDS") or 5.0),
                user_agent=str(config.get("USER_AGENT") or "Lottery-Consulter/1.0"),
            )
        return cls(primary=primary)

    def fetch(self, count: int, min_value: int, max_value: int) -> RandomDraw:
        """Return ``count`` integers in [min_value, max_value] tagged with their source.

        Never raises for an upstream failure. Arguments themselves must be
        sane (``count >= 1``, ``min_value <= max_value``).
        """

        if count < 1 or min_value > max_value:
            raise InvalidRangeError(
                "count must be >= 1 and min must not exceed max",
                details={"count": count, "min": min_value, "max": max_value},
            )

        if self._primary is not None:
            try:
                values = self._primary.integers(count, min_value, max_value)
                return RandomDraw(values=values, source=RandomSource.EXTERNAL)
            except UpstreamUnavailableError as exc:
                logger.warning("Random provider unavailable, using fallback: %s", exc.message)

        values = self._fallback.integers(count, min_value, max_value)
        return RandomDraw(values=values, source=RandomSource.FALLBACK)
