"""Public entry point: render any value as indented text."""
from __future__ import annotations

from typing import Any, Mapping

from refprint.config import Options
from refprint.layout import emit
from refprint.paths import ROOT
from refprint.walker import Walker


class Printer:
    """Reusable renderer bound to one set of options.

    Each call gets a fresh walker, so nothing is shared between calls.
    """

    def __init__(self, options: Options | Mapping[str, Any] | None = None, **overrides: Any):
        self.options = Options.coerce(options, **overrides)

    def dumps(self, value: Any) -> str:
        return emit(Walker(self.options).walk(value, ROOT))


def dumps(value: Any, options: Options | Mapping[str, Any] | None = None, **overrides: Any) -> str:
    """Render ``value`` with back-references in place of repeated objects.

    ``options`` may be an Options, a mapping (``sortProps``/``sort_props``
    style keys), or omitted; keyword overrides win over both.
    """
    return Printer(options, **overrides).dumps(value)
