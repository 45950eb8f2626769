"""Random integer routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from lottery_consulter.schemas.random import RandomQuerySchema
from lottery_consulter.services.random_service import RandomService
from lottery_consulter.utils.responses import ok

random_bp = Blueprint("random", __name__)

_query_schema = RandomQuerySchema()


@random_bp.get("/random")
def get_random_integers():
    """Return ``count`` integers in [min, max], tagged with their source.

    Query params:
    - count: 1..10000 (default 1)
    - min / max: inclusive bounds, min < max (default 1 / 1000000)
    """

    args = _query_schema.load(request.args.to_dict())

    with RandomService.from_config(current_app.config) as service:
        draw = service.fetch(int(args["count"]), int(args["min"]), int(args["max"]))
    return ok(draw.values, source=draw.source.value)
