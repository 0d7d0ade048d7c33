"""Mappings keyed by arbitrary objects, printed as key/value slot pairs."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from refprint.classify import type_name
from refprint.layout import Line, container
from refprint.paths import Arrow, Path, Step

if TYPE_CHECKING:
    from refprint.walker import Walker


def render_map(walker: Walker, value: Mapping, path: Path) -> list[Line]:
    name = "Map" if type(value) is dict else type_name(value)
    body: list[Line] = []
    for i, (key, item) in enumerate(value.items()):
        for half, slot_value in (("key", key), ("value", item)):
            step = Step.slot(i, half)
            body.extend(walker.entry(step.text, slot_value, path.append(step), Arrow.WEAK))
    return container(f"{name}{{", body, "}")
