"""Fortune cookie routes. Upstream failures never reach the caller."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from lottery_consulter.schemas.fortune import FortuneQuerySchema
from lottery_consulter.services.fortune_service import FortuneService
from lottery_consulter.utils.responses import ok

fortune_bp = Blueprint("fortune", __name__)

_query_schema = FortuneQuerySchema()


@fortune_bp.get("/fortune")
def get_fortune():
    args = _query_schema.load(request.args.to_dict())

    with FortuneService.from_config(current_app.config) as service:
        result = service.fetch(str(args["type"]))
    return ok(result.data, fallback=result.fallback)
