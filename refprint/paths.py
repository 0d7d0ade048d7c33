"""Locations inside a printed graph, written the way property access reads."""
from __future__ import annotations

import enum
import json
import re
from typing import Iterator

from refprint.symbol import Symbol

ROOT_MARKER = "{input}"

_IDENT_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def is_identifier(key: str) -> bool:
    return bool(_IDENT_RE.match(key))


# ── Step ──────────────────────────────────────────────────────────────

class Step:
    """One hop from a container to a child.

    ``dotted`` steps are joined with a ``.`` when they follow another step;
    bracketed steps are not.
    """

    __slots__ = ("kind", "text", "dotted")

    def __init__(self, kind: str, text: str, dotted: bool):
        self.kind = kind
        self.text = text
        self.dotted = dotted

    @classmethod
    def key(cls, key: str) -> Step:
        if is_identifier(key):
            return cls("property", key, True)
        return cls("quoted", f"[{json.dumps(key, ensure_ascii=False)}]", False)

    @classmethod
    def symbol(cls, sym: Symbol, amped: bool = True) -> Step:
        return cls("symbol", sym.label(amped), True)

    @classmethod
    def index(cls, i: int) -> Step:
        return cls("index", f"[{i}]", False)

    @classmethod
    def slot(cls, i: int, half: str) -> Step:
        if half not in ("key", "value"):
            raise ValueError(f"map slot must be 'key' or 'value', not {half!r}")
        return cls("slot", f"{i}.{half}", True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Step):
            return NotImplemented
        return (self.kind, self.text) == (other.kind, other.text)

    def __hash__(self) -> int:
        return hash((self.kind, self.text))

    def __repr__(self) -> str:
        return f"Step({self.kind}, {self.text!r})"


# ── Path ──────────────────────────────────────────────────────────────

class Path:
    """Immutable sequence of steps from the root value."""

    __slots__ = ("steps",)

    def __init__(self, steps: tuple[Step, ...] = ()):
        self.steps = steps

    def append(self, step: Step) -> Path:
        return Path(self.steps + (step,))

    def render(self) -> str:
        parts: list[str] = []
        for step in self.steps:
            if parts and step.dotted:
                parts.append(".")
            parts.append(step.text)
        return "".join(parts)

    def render_as_reference(self) -> str:
        return self.render() if self.steps else ROOT_MARKER

    @property
    def is_root(self) -> bool:
        return not self.steps

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.steps == other.steps

    def __hash__(self) -> int:
        return hash(self.steps)

    def __repr__(self) -> str:
        return f"Path({self.render_as_reference()!r})"


ROOT = Path()


def append(path: Path, step: Step) -> Path:
    return path.append(step)


def render(path: Path) -> str:
    return path.render()


def render_as_reference(path: Path) -> str:
    return path.render_as_reference()


# ── Reference kinds ───────────────────────────────────────────────────

class Arrow(enum.Enum):
    STRONG = "->"  # back-reference
    WEAK = "=>"    # map slot to its value


def merge_arrows(first: Arrow, second: Arrow) -> str:
    """Text for two arrows met on one line."""
    if first is Arrow.WEAK and second is Arrow.STRONG:
        return Arrow.STRONG.value
    return f"{first.value} {second.value}"


def back_reference(path: Path) -> str:
    return f"{Arrow.STRONG.value} {path.render_as_reference()}"
