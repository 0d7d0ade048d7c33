"""Printer options and their defaults."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Mapping

log = logging.getLogger(__name__)


# ── Defaults ──────────────────────────────────────────────────────────

SORT_PROPS_ENV = "REFPRINT_SORT_PROPS"
AMPED_SYMBOLS_ENV = "REFPRINT_AMPED_SYMBOLS"

_FALSY = {"0", "false", "no", "off", ""}

# camelCase spellings accepted alongside the field names
_ALIASES = {
    "sortProps": "sort_props",
    "ampedSymbols": "amped_symbols",
}


def env_flag(name: str, default: bool) -> bool:
    val = os.environ.get(name)
    if val is None:
        return default
    return val.strip().lower() not in _FALSY


# ── Options ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Options:
    sort_props: bool = True
    amped_symbols: bool = True
    now: datetime | None = None

    @classmethod
    def defaults(cls) -> Options:
        """Built-in defaults, overridable through the environment."""
        return cls(
            sort_props=env_flag(SORT_PROPS_ENV, True),
            amped_symbols=env_flag(AMPED_SYMBOLS_ENV, True),
        )

    @classmethod
    def coerce(cls, options: Options | Mapping[str, Any] | None = None,
               **overrides: Any) -> Options:
        """Build options from an Options, a mapping, or keyword overrides.

        Flags are coerced with bool() rather than rejected. Unknown keys are
        logged and dropped.
        """
        if isinstance(options, Options):
            base, raw = options, {}
        elif options is None or isinstance(options, Mapping):
            base, raw = cls.defaults(), dict(options or {})
        else:
            log.warning("ignoring printer options of type %s: %r",
                        type(options).__name__, options)
            base, raw = cls.defaults(), {}
        raw.update(overrides)

        changes: dict[str, Any] = {}
        for key, val in raw.items():
            field = _ALIASES.get(key, key)
            if field in ("sort_props", "amped_symbols"):
                changes[field] = bool(val)
            elif field == "now":
                if val is None or isinstance(val, datetime):
                    changes[field] = val
                else:
                    log.warning("ignoring non-datetime 'now' option: %r", val)
            else:
                log.warning("ignoring unknown printer option %r", key)
        return replace(base, **changes)
