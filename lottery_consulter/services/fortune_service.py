"""Decorative fortune cookie messages with a local fallback."""

from __future__ import annotations

import logging
import random
import string
import time
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import requests

logger = logging.getLogger(__name__)

FORTUNE_KINDS = ("cookie", "fortunes", "lessons", "lottos")

FALLBACK_MESSAGES = (
    "Good luck is on its way. Keep a positive mind.",
    "Today is full of opportunities. Take the first step bravely.",
    "Happiness is waiting just ahead. Keep going.",
    "Trust your intuition; it will lead you to success.",
    "Today's effort will bear rich fruit tomorrow.",
    "Keep smiling and good fortune will follow.",
    "Chance favors the prepared, and you are ready.",
    "A fine day to chase your dreams. Go for it.",
)

FALLBACK_LESSONS = (
    {"english": "Good fortune comes to those who wait.", "chinese": "好运总是眷顾有耐心的人。"},
    {"english": "Every cloud has a silver lining.", "chinese": "乌云背后总有一线光明。"},
    {"english": "Fortune favors the bold.", "chinese": "幸运眷顾勇敢的人。"},
    {
        "english": "The best time to plant a tree was 20 years ago. The second best time is now.",
        "chinese": "种树的最佳时机是20年前，其次是现在。",
    },
    {"english": "Success is where preparation and opportunity meet.", "chinese": "成功是准备与机遇的结合。"},
)


@dataclass(frozen=True)
class FortuneResult:
    data: Any
    fallback: bool


class FortuneService:
    """Fetch a fortune from the fortune cookie API or make one up locally."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 5.0,
        user_agent: str = "Lottery-Consulter/1.0",
        http: requests.Session | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._http = http or requests.Session()
        self._http.headers.update({"Accept": "application/json", "User-Agent": user_agent})
        self._rng = rng or random.Random()

    def __enter__(self) -> "FortuneService":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "FortuneService":
        return cls(
            base_url=str(config.get("FORTUNE_API_BASE") or "http://fortunecookieapi.herokuapp.com/v1"),
            timeout_seconds=float(config.get("FORTUNE_TIMEOUT_SECONDS") or 5.0),
            user_agent=str(config.get("USER_AGENT") or "Lottery-Consulter/1.0"),
        )

    def fallback(self) -> dict[str, Any]:
        lesson = self._rng.choice(FALLBACK_LESSONS)
        return {
            "fortune": {
                "message": self._rng.choice(FALLBACK_MESSAGES),
                "id": self._rng.randint(1, 1000),
            },
            "lesson": {
                "english": lesson["english"],
                "chinese": lesson["chinese"],
                "id": self._rng.randint(1, 1000),
            },
        }

    def fetch(self, kind: str = "cookie") -> FortuneResult:
        """Return live content, or fallback content if the upstream call fails in any way."""

        # Cache-busting params so every call yields a fresh fortune.
        params = {
            "_t": int(time.time() * 1000),
            "_r": "".join(self._rng.choices(string.ascii_lowercase + string.digits, k=6)),
        }
        try:
            resp = self._http.get(f"{self._base_url}/{kind}", params=params, timeout=self._timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Fortune API unavailable, using fallback: %s", exc)
            return FortuneResult(data=self.fallback(), fallback=True)

        return FortuneResult(data=data, fallback=False)
