from __future__ import annotations

import math
from pathlib import Path

from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


templates = Jinja2Templates(directory=TEMPLATES_DIR)
templates.env.filters["round_temp"] = round_half_up
