"""Indented line blocks and their flattening into text."""
from __future__ import annotations

from typing import Iterable, NamedTuple

INDENT = "\t"


class Line(NamedTuple):
    depth: int
    text: str


def indent(lines: Iterable[Line], levels: int = 1) -> list[Line]:
    return [Line(ln.depth + levels, ln.text) for ln in lines]


def label(lines: list[Line], prefix: str) -> list[Line]:
    """Prefix the first line of a block, e.g. with ``name: ``."""
    if not lines:
        return [Line(0, prefix.rstrip())]
    head, *rest = lines
    return [Line(head.depth, prefix + head.text), *rest]


def blank() -> Line:
    return Line(0, "")


def container(opening: str, body: list[Line], closing: str) -> list[Line]:
    """Wrap child lines in a header and a closing line.

    Empty bodies collapse onto a single line.
    """
    if not body:
        return [Line(0, opening + closing)]
    return [Line(0, opening), *indent(body), Line(0, closing)]


def emit(lines: Iterable[Line]) -> str:
    return "\n".join(INDENT * ln.depth + ln.text for ln in lines)
