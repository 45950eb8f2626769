"""Lottery routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from lottery_consulter.schemas.lottery import GeneratedResultSchema, LotteryRequestSchema
from lottery_consulter.services.lottery_service import LotteryService
from lottery_consulter.utils.responses import ok

lottery_bp = Blueprint("lottery", __name__)

_request_schema = LotteryRequestSchema()
_response_schema = GeneratedResultSchema()
_service = LotteryService()


@lottery_bp.post("/lottery")
def generate_numbers():
    payload = request.get_json(silent=True) or {}
    data = _request_schema.load(payload)

    result = _service.generate(str(data["type"]), lucky_numbers=data.get("lucky_numbers"))
    return ok(_response_schema.dump(result.to_dict()))
