"""Schemas for the fortune API."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

from lottery_consulter.services.fortune_service import FORTUNE_KINDS


class FortuneQuerySchema(Schema):
    type = fields.String(
        required=False,
        load_default="cookie",
        validate=validate.OneOf(FORTUNE_KINDS),
    )
