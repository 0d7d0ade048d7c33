"""Index-addressed containers: sequences, bound arguments, sets."""
from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Iterable

from refprint.classify import is_primitive, type_name
from refprint.layout import Line, container
from refprint.paths import Path, Step
from refprint.renderers.objects import own_attributes, render_properties

if TYPE_CHECKING:
    from refprint.walker import Walker


def render_elements(walker: Walker, items: Iterable[Any], path: Path) -> list[Line]:
    lines: list[Line] = []
    for i, item in enumerate(items):
        lines.extend(walker.entry(None, item, path.append(Step.index(i))))
    return lines


def brackets(value: Any) -> tuple[str, str]:
    if type(value) is list:
        return "[", "]"
    if type(value) is tuple:
        return "(", ")"
    return f"{type_name(value)}[", "]"


def render_array(walker: Walker, value: Any, path: Path) -> list[Line]:
    opening, closing = brackets(value)
    body = render_elements(walker, value, path)
    body.extend(render_properties(walker, own_attributes(value), path))
    return container(opening, body, closing)


def render_arguments(walker: Walker, value: inspect.BoundArguments, path: Path) -> list[Line]:
    body = render_elements(walker, value.args, path)
    body.extend(render_properties(walker, value.kwargs.items(), path))
    return container("Arguments[", body, "]")


def set_members(value: Any) -> list[Any]:
    """Members in a stable order where the members allow one."""
    items = list(value)
    if all(is_primitive(item) for item in items):
        try:
            items = sorted(items)
        except TypeError:
            pass
    return items


def render_set(walker: Walker, value: Any, path: Path) -> list[Line]:
    if type(value) is set:
        name = "Set"
    elif type(value) is frozenset:
        name = "FrozenSet"
    else:
        name = type_name(value)
    body = render_elements(walker, set_members(value), path)
    body.extend(render_properties(walker, own_attributes(value), path))
    return container(f"{name}{{", body, "}")
