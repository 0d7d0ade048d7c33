"""Callables: functions, methods, partials and classes."""
from __future__ import annotations

import functools
import inspect
import logging
from typing import TYPE_CHECKING, Any

from refprint.layout import Line, container
from refprint.paths import Path
from refprint.renderers.objects import render_properties

if TYPE_CHECKING:
    from refprint.walker import Walker

log = logging.getLogger(__name__)

_REQUIRED_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def function_header(value: Any) -> str:
    if isinstance(value, type):
        return "class{"
    target = value.func if isinstance(value, functools.partial) else value
    if inspect.isasyncgenfunction(target):
        return "async function*(){"
    if inspect.iscoroutinefunction(target):
        return "async function(){"
    if inspect.isgeneratorfunction(target):
        return "function*(){"
    return "function(){"


def param_count(value: Any) -> int:
    """Positional parameters a caller must supply."""
    try:
        sig = inspect.signature(value)
    except (ValueError, TypeError) as e:
        log.debug("no signature for %r: %s", value, e)
        return 0
    return sum(
        1 for p in sig.parameters.values()
        if p.kind in _REQUIRED_KINDS and p.default is inspect.Parameter.empty
    )


def function_name(value: Any) -> str:
    name = getattr(value, "__name__", "")
    if not isinstance(name, str) or name == "<lambda>":
        return ""
    return name


def function_attributes(value: Any) -> list[tuple[str, Any]]:
    """Attributes assigned onto a function object."""
    if isinstance(value, type):
        return []
    attrs = getattr(value, "__dict__", None)
    if not isinstance(attrs, dict):
        return []
    return list(attrs.items())


def render_function(walker: Walker, value: Any, path: Path) -> list[Line]:
    props: dict[str, Any] = {
        "length": param_count(value),
        "name": function_name(value),
    }
    for key, attr in function_attributes(value):
        props.setdefault(key, attr)
    body = render_properties(walker, props.items(), path)
    return container(function_header(value), body, "}")
