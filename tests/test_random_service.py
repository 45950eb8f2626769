from __future__ import annotations

import random

import pytest
import requests

from fakes import FakeResponse, FakeSession, StepClock
from lottery_consulter.errors import InvalidRangeError, UpstreamUnavailableError
from lottery_consulter.services.random_service import (
    LocalRandomProvider,
    RandomOrgProvider,
    RandomService,
    RandomSource,
)


def _provider(session: FakeSession) -> RandomOrgProvider:
    return RandomOrgProvider(url="https://random.test/integers/", timeout_seconds=5.0, http=session)


def test_random_org_provider_parses_plain_text():
    session = FakeSession(FakeResponse(text="4\n17\n23\n"))
    assert _provider(session).integers(3, 1, 49) == [4, 17, 23]

    url, kwargs = session.calls[0]
    assert url == "https://random.test/integers/"
    assert kwargs["timeout"] == 5.0
    assert kwargs["params"]["num"] == 3
    assert kwargs["params"]["format"] == "plain"
    assert session.headers["User-Agent"] == "Lottery-Consulter/1.0"


@pytest.mark.parametrize(
    "response,error",
    [
        (FakeResponse(status_code=503, text="busy"), None),
        (FakeResponse(text="1\n2\n"), None),
        (FakeResponse(text="1\nabc\n3\n"), None),
        (FakeResponse(text="1\n2\n500\n"), None),
        (None, requests.Timeout("timed out")),
        (None, requests.ConnectionError("refused")),
    ],
    ids=["http-error", "count-mismatch", "not-an-int", "out-of-range", "timeout", "connection"],
)
def test_random_org_provider_failures_raise_upstream_unavailable(response, error):
    with pytest.raises(UpstreamUnavailableError):
        _provider(FakeSession(response, error)).integers(3, 1, 49)


def test_service_tags_external_values():
    service = RandomService(primary=_provider(FakeSession(FakeResponse(text="5\n6\n"))))
    draw = service.fetch(2, 1, 10)
    assert draw.values == [5, 6]
    assert draw.source is RandomSource.EXTERNAL
    assert draw.is_authentic
    assert draw.seed == "56"


@pytest.mark.parametrize(
    "session",
    [
        FakeSession(error=requests.Timeout("timed out")),
        FakeSession(FakeResponse(status_code=500)),
        FakeSession(FakeResponse(text="garbage")),
    ],
)
def test_service_falls_back_without_raising(session, caplog):
    service = RandomService(primary=_provider(session), fallback=LocalRandomProvider(random.Random(3)))
    draw = service.fetch(10, 5, 8)

    assert draw.source is RandomSource.FALLBACK
    assert not draw.is_authentic
    assert len(draw.values) == 10
    assert all(5 <= v <= 8 for v in draw.values)
    assert "using fallback" in caplog.text


def test_service_without_primary_uses_fallback():
    draw = RandomService().fetch(4, 1, 2)
    assert draw.source is RandomSource.FALLBACK
    assert len(draw.values) == 4


def test_from_config_respects_enabled_flag():
    disabled = RandomService.from_config({"RANDOM_ORG_ENABLED": False})
    assert disabled.fetch(1, 1, 2).source is RandomSource.FALLBACK


def test_service_rejects_nonsense_arguments():
    with pytest.raises(InvalidRangeError):
        RandomService().fetch(0, 1, 10)
    with pytest.raises(InvalidRangeError):
        RandomService().fetch(1, 10, 1)


def test_random_org_provider_enforces_total_deadline():
    # Each chunk arrives 2s after the previous one: no single read times out,
    # but the whole body takes longer than 5s.
    trickle = FakeResponse(chunks=[b"1\n", b"2\n", b"3\n", b"4\n"])
    provider = RandomOrgProvider(
        url="https://random.test/integers/",
        timeout_seconds=5.0,
        http=FakeSession(trickle),
        clock=StepClock(2.0),
    )
    with pytest.raises(UpstreamUnavailableError, match="deadline"):
        provider.integers(4, 1, 49)


def test_random_org_provider_streams_within_deadline():
    session = FakeSession(FakeResponse(chunks=[b"7\n", b"8\n"]))
    provider = RandomOrgProvider(url="https://random.test/", http=session, clock=StepClock(0.1))
    assert provider.integers(2, 1, 49) == [7, 8]
    assert session.calls[0][1]["stream"] is True


def test_slow_upstream_falls_back():
    trickle = FakeResponse(chunks=[b"1\n", b"2\n", b"3\n"])
    provider = RandomOrgProvider(url="https://random.test/", http=FakeSession(trickle), clock=StepClock(3.0))
    draw = RandomService(primary=provider).fetch(3, 1, 49)
    assert draw.source is RandomSource.FALLBACK
    assert len(draw.values) == 3


def test_service_context_manager_closes_session():
    session = FakeSession(FakeResponse(text="5\n"))
    with RandomService(primary=_provider(session)) as service:
        assert service.fetch(1, 1, 10).values == [5]
    assert session.closed
