"""Schemas for the lucky index API."""

from __future__ import annotations

from datetime import date

from marshmallow import EXCLUDE, Schema, ValidationError, fields, validate, validates, validates_schema

from lottery_consulter.services.numerology_service import DEFAULT_COUNT, parse_number_range

MAX_AGE_YEARS = 120
MAX_NAME_LENGTH = 50


def _years_ago(today: date, years: int) -> date:
    try:
        return today.replace(year=today.year - years)
    except ValueError:
        # Feb 29 on a non-leap target year
        return today.replace(year=today.year - years, day=28)


class PreferencesSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    number_range = fields.String(required=False, load_default="1-33", data_key="numberRange")
    count = fields.Integer(
        required=False,
        load_default=DEFAULT_COUNT,
        validate=validate.Range(min=1, max=20),
    )

    @validates_schema
    def _validate_range(self, data, **kwargs):  # type: ignore[no-untyped-def]
        try:
            lo, hi = parse_number_range(data.get("number_range"))
        except ValueError as e:
            raise ValidationError({"numberRange": ["Must look like '1-33' with min < max"]}) from e

        if int(data.get("count") or DEFAULT_COUNT) > hi - lo + 1:
            raise ValidationError({"count": ["count must not exceed the size of numberRange"]})


class LuckyIndexRequestSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.String(required=True)
    birth_date = fields.Date(required=True, data_key="birthDate")
    # Unknown colors score as the neutral default.
    lucky_color = fields.String(required=False, load_default=None, allow_none=True, data_key="luckyColor")
    preferences = fields.Nested(PreferencesSchema, required=False, load_default=lambda: {})

    @validates("name")
    def _validate_name(self, value: str, **kwargs) -> None:  # type: ignore[no-untyped-def]
        name = value.strip()
        if not name:
            raise ValidationError("Name must not be blank")
        if len(name) > MAX_NAME_LENGTH:
            raise ValidationError(f"Name must be at most {MAX_NAME_LENGTH} characters")

    @validates("birth_date")
    def _validate_birth_date(self, value: date, **kwargs) -> None:  # type: ignore[no-untyped-def]
        today = date.today()
        if value > today:
            raise ValidationError("Birth date must not be in the future")
        if value < _years_ago(today, MAX_AGE_YEARS):
            raise ValidationError(f"Birth date must be within the last {MAX_AGE_YEARS} years")
