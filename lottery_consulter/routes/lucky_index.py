"""Lucky index routes (controllers). No business logic here."""

from __future__ import annotations

import time

from flask import Blueprint, current_app, request

from lottery_consulter.schemas.lucky_index import LuckyIndexRequestSchema
from lottery_consulter.services.numerology_service import DEFAULT_COUNT, NumerologyService, parse_number_range
from lottery_consulter.services.random_service import RandomService
from lottery_consulter.utils.responses import ok

lucky_index_bp = Blueprint("lucky_index", __name__)

_request_schema = LuckyIndexRequestSchema()

API_VERSION = "1.0"


@lucky_index_bp.post("/lucky-index")
def calculate_lucky_index():
    started = time.perf_counter()

    payload = request.get_json(silent=True) or {}
    data = _request_schema.load(payload)
    prefs = data.get("preferences") or {}

    with RandomService.from_config(current_app.config) as random_service:
        result, draw = NumerologyService(random_service).calculate(
            name=data["name"].strip(),
            birth_date=data["birth_date"],
            lucky_color=data.get("lucky_color"),
            count=int(prefs.get("count") or DEFAULT_COUNT),
            number_range=parse_number_range(prefs.get("number_range")),
        )

    return ok(
        result.to_dict(),
        metadata={
            "randomSource": draw.source.value,
            "apiVersion": API_VERSION,
            "processingTime": round((time.perf_counter() - started) * 1000, 2),
        },
    )
