"""Depth-first traversal that prints each object once and refers back after."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable

from refprint.classify import Category, classify, is_primitive
from refprint.config import Options
from refprint.layout import Line, label
from refprint.paths import ROOT, Arrow, Path, back_reference, merge_arrows
from refprint.renderers import dates, functions, mappings, objects, primitives, sequences
from refprint.tracker import IdentityTracker


Renderer = Callable[["Walker", Any, Path], "list[Line]"]

RENDERERS: dict[Category, Renderer] = {
    Category.SYMBOL: primitives.render_symbol,
    Category.OBJECT: objects.render_object,
    Category.INSTANCE: objects.render_instance,
    Category.ERROR: objects.render_error,
    Category.ARRAY: sequences.render_array,
    Category.ARGUMENTS: sequences.render_arguments,
    Category.SET: sequences.render_set,
    Category.MAP: mappings.render_map,
    Category.DATE: dates.render_date,
    Category.FUNCTION: functions.render_function,
}


class Walker:
    """Single-use traversal state for one printed value."""

    def __init__(self, options: Options | None = None):
        self.options = options or Options.defaults()
        self.tracker = IdentityTracker()
        self.now = self.options.now or datetime.now(timezone.utc)

    def walk(self, value: Any, path: Path = ROOT) -> list[Line]:
        category = classify(value)
        if category is Category.PRIMITIVE:
            return [Line(0, primitives.render_primitive(value))]

        seen = self.tracker.lookup(value)
        if seen is not None:
            return [Line(0, back_reference(seen))]

        # Registered before recursing so self-references resolve
        self.tracker.register(value, path)
        return RENDERERS[category](self, value, path)

    def reference(self, value: Any) -> Path | None:
        """Path ``value`` was already printed at, if any."""
        if is_primitive(value):
            return None
        return self.tracker.lookup(value)

    def entry(self, name: str | None, value: Any, path: Path,
              arrow: Arrow | None = None) -> list[Line]:
        """Render one child, labelled ``name: value`` or ``name => value``."""
        if arrow is not None:
            seen = self.reference(value)
            if seen is not None:
                glyph = merge_arrows(arrow, Arrow.STRONG)
                return [Line(0, f"{name} {glyph} {seen.render_as_reference()}")]

        lines = self.walk(value, path)
        if name is None:
            return lines
        prefix = f"{name}: " if arrow is None else f"{name} {arrow.value} "
        return label(lines, prefix)
