"""Values printed by value: strings, numbers, keywords, symbols."""
from __future__ import annotations

import enum
import json
import math
from typing import TYPE_CHECKING, Any

from refprint.layout import Line
from refprint.paths import Path

if TYPE_CHECKING:
    from refprint.walker import Walker


# Exact float matches only
NAMED_CONSTANTS: dict[float, str] = {
    math.pi: "math.pi",
    math.e: "math.e",
    math.tau: "math.tau",
    math.inf: "math.inf",
    -math.inf: "-math.inf",
}


def render_number(value: Any) -> str:
    if isinstance(value, bool):
        return repr(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "math.nan"
        return NAMED_CONSTANTS.get(value, repr(value))
    return repr(value)


def render_primitive(value: Any) -> str:
    if value is None:
        return "None"
    if isinstance(value, enum.Enum):
        return f"{type(value).__name__}.{value.name}"
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, (bytes, bytearray, range)):
        return repr(value)
    return render_number(value)


def render_symbol(walker: Walker, value: Any, path: Path) -> list[Line]:
    return [Line(0, repr(value))]
