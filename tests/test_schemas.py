from __future__ import annotations

from datetime import date, timedelta

import pytest
from marshmallow import ValidationError

from lottery_consulter.schemas.lucky_index import LuckyIndexRequestSchema, _years_ago
from lottery_consulter.schemas.random import RandomQuerySchema


def test_years_ago_handles_leap_day():
    assert _years_ago(date(2024, 2, 29), 1) == date(2023, 2, 28)
    assert _years_ago(date(2024, 3, 1), 120) == date(1904, 3, 1)


def test_birth_date_window_edges():
    schema = LuckyIndexRequestSchema()
    oldest = _years_ago(date.today(), 120)

    assert schema.load({"name": "Ann", "birthDate": oldest.isoformat()})["birth_date"] == oldest
    assert schema.load({"name": "Ann", "birthDate": date.today().isoformat()})["birth_date"] == date.today()

    with pytest.raises(ValidationError) as exc:
        schema.load({"name": "Ann", "birthDate": (oldest - timedelta(days=1)).isoformat()})
    assert "birthDate" in exc.value.messages


def test_lucky_index_defaults():
    data = LuckyIndexRequestSchema().load({"name": "Ann", "birthDate": "1990-05-01", "luckyColor": "teal"})
    assert data["lucky_color"] == "teal"
    assert data["preferences"] == {}


def test_bad_number_range():
    with pytest.raises(ValidationError) as exc:
        LuckyIndexRequestSchema().load(
            {"name": "Ann", "birthDate": "1990-05-01", "preferences": {"numberRange": "banana"}}
        )
    assert "preferences" in exc.value.messages


def test_random_query_defaults():
    assert RandomQuerySchema().load({}) == {"count": 1, "min": 1, "max": 1_000_000}
