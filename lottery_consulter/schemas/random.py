"""Schemas for the random integer API."""

from __future__ import annotations

from marshmallow import Schema, ValidationError, fields, validate, validates_schema


class RandomQuerySchema(Schema):
    count = fields.Integer(
        required=False,
        load_default=1,
        validate=validate.Range(min=1, max=10000),
    )

    min = fields.Integer(required=False, load_default=1)
    max = fields.Integer(required=False, load_default=1_000_000)

    @validates_schema
    def _validate_min_max(self, data, **kwargs):  # type: ignore[no-untyped-def]
        if int(data["min"]) >= int(data["max"]):
            raise ValidationError({"min": ["min must be < max"]})
