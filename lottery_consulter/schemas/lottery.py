"""Schemas for the lottery number API."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate


class LotteryRequestSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    # Known types are checked by the service so an unknown one maps to unsupported_type.
    type = fields.String(required=True, validate=validate.Length(min=1))

    lucky_numbers = fields.List(
        fields.Integer(),
        required=False,
        load_default=None,
        data_key="luckyNumbers",
        validate=validate.Length(max=100),
    )


class GeneratedResultSchema(Schema):
    type = fields.String(required=True)
    reds = fields.List(fields.Integer())
    blues = fields.List(fields.Integer())
    numbers = fields.List(fields.Integer())
