"""Property-bag renderings: plain mappings, class instances, exceptions."""
from __future__ import annotations

import json
import logging
import re
from typing import TYPE_CHECKING, Any, Iterable

from refprint.classify import is_namedtuple, type_name
from refprint.layout import Line, container
from refprint.paths import Path, Step
from refprint.symbol import Symbol

if TYPE_CHECKING:
    from refprint.walker import Walker

log = logging.getLogger(__name__)

_UNSAFE_LABEL_RE = re.compile(r'[\s:"]')


# ── Properties ────────────────────────────────────────────────────────

def property_label(key: str) -> str:
    """Keys print bare unless they would blur into the layout."""
    if not key or _UNSAFE_LABEL_RE.search(key):
        return json.dumps(key, ensure_ascii=False)
    return key


def order_properties(items: Iterable[tuple[Any, Any]], sort: bool) -> list[tuple[Any, Any]]:
    """String keys case-insensitively, then symbol keys by description.

    With ``sort`` off the natural order is kept, symbols interleaved.
    """
    items = list(items)
    if not sort:
        return items
    named = [kv for kv in items if not isinstance(kv[0], Symbol)]
    symbols = [kv for kv in items if isinstance(kv[0], Symbol)]
    named.sort(key=lambda kv: str(kv[0]).lower())
    symbols.sort(key=lambda kv: (kv[0].description or "").lower())
    return named + symbols


def render_properties(walker: Walker, items: Iterable[tuple[Any, Any]], path: Path) -> list[Line]:
    amped = walker.options.amped_symbols
    lines: list[Line] = []
    for key, value in order_properties(items, walker.options.sort_props):
        if isinstance(key, Symbol):
            step = Step.symbol(key, amped)
            name = key.label(amped)
        else:
            step = Step.key(str(key))
            name = property_label(str(key))
        lines.extend(walker.entry(name, value, path.append(step)))
    return lines


def own_attributes(value: Any) -> list[tuple[str, Any]]:
    """Attributes set on a built-in subclass instance, if it has a __dict__."""
    try:
        return list(vars(value).items())
    except TypeError:
        return []


def instance_attributes(value: Any) -> list[tuple[str, Any]]:
    """Own attributes of an instance: ``__dict__`` entries, then set slots."""
    if is_namedtuple(value):
        return list(zip(type(value)._fields, value))

    try:
        attrs = dict(vars(value))
    except TypeError:
        attrs = {}

    for cls in type(value).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__") or name in attrs:
                continue
            try:
                attrs[name] = getattr(value, slot_attribute(cls, name))
            except AttributeError:
                continue
    return list(attrs.items())


def slot_attribute(cls: type, name: str) -> str:
    """Attribute name a slot is stored under, after private name mangling."""
    owner = cls.__name__.lstrip("_")
    if name.startswith("__") and not name.endswith("__") and owner:
        return f"_{owner}{name}"
    return name


def error_message(value: BaseException) -> str:
    try:
        return str(value)
    except Exception:
        log.debug("str() failed for %s, printing an empty message",
                  type_name(value), exc_info=True)
        return ""


# ── Renderers ─────────────────────────────────────────────────────────

def render_object(walker: Walker, value: Any, path: Path) -> list[Line]:
    name = "" if type(value) is dict else type_name(value)
    body = render_properties(walker, value.items(), path)
    return container(f"{name}{{", body, "}")


def render_instance(walker: Walker, value: Any, path: Path) -> list[Line]:
    name = type_name(value)
    if not name:
        log.debug("no class name for %r, printing unlabelled", type(value))
    body = render_properties(walker, instance_attributes(value), path)
    return container(f"{name}{{", body, "}")


def render_error(walker: Walker, value: BaseException, path: Path) -> list[Line]:
    attrs = {"message": error_message(value), "name": type_name(value)}
    attrs.update(instance_attributes(value))
    body = render_properties(walker, attrs.items(), path)
    return container(f"{type_name(value)}{{", body, "}")
