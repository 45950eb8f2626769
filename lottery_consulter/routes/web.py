"""Web page routes."""

from __future__ import annotations

from flask import Blueprint, Response, render_template

from lottery_consulter.services.fortune_service import FORTUNE_KINDS
from lottery_consulter.services.lottery_service import LotteryType
from lottery_consulter.services.numerology_service import COLOR_VALUES


web_bp = Blueprint("web", __name__)

LOTTERY_LABELS = {
    LotteryType.DOUBLE_COLOR: "Double Color Ball (6 + 1)",
    LotteryType.QILECAI: "Seven Lucky (7 + special)",
    LotteryType.FUCAI3D: "Welfare 3D (3 digits)",
    LotteryType.KUAILE8: "Happy 8 (20 of 80)",
}


@web_bp.get("/")
def index():
    return render_template(
        "index.html",
        lottery_types=[(t.value, LOTTERY_LABELS[t]) for t in LotteryType],
        colors=list(COLOR_VALUES),
        fortune_kinds=FORTUNE_KINDS,
    )


@web_bp.get("/favicon.ico")
def favicon() -> Response:
        svg = """<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 64 64'>
    <defs>
        <radialGradient id='g' cx='35%' cy='30%' r='80%'>
            <stop offset='0%' stop-color='#fca5a5'/>
            <stop offset='55%' stop-color='#dc2626'/>
            <stop offset='100%' stop-color='#7f1d1d'/>
        </radialGradient>
    </defs>
    <circle cx='32' cy='32' r='28' fill='url(#g)'/>
    <circle cx='32' cy='32' r='28' fill='none' stroke='rgba(255,255,255,0.3)' stroke-width='2'/>
    <text x='32' y='40' text-anchor='middle' font-family='system-ui,Segoe UI,Arial' font-size='22' font-weight='800' fill='#fff7ed'>88</text>
</svg>"""

        return Response(svg, mimetype="image/svg+xml")
