"""Terminal display: Rich-highlighted printer output."""
from __future__ import annotations

from typing import IO, Any, Mapping

from rich.console import Console
from rich.text import Text

from refprint.config import Options
from refprint.printer import dumps

# ── Module state ──────────────────────────────────────────────────────

console = Console()


def init(force_color: bool = False, file: IO[str] | None = None):
    global console
    if force_color:
        console = Console(force_terminal=True, file=file)
    else:
        console = Console(file=file)


# ── Highlighting ──────────────────────────────────────────────────────

STYLES = [
    (r'"(?:[^"\\]|\\.)*"', "green"),
    (r"(?<![\w.])-?(?:\d+(?:\.\d+)?(?:e[+-]?\d+)?|math\.\w+)\b", "cyan"),
    (r"\b(?:None|True|False)\b", "magenta"),
    (r"(?:->|=>) \S.*$", "dim"),
    (r"(?:->|=>)", "bold yellow"),
    (r"(?:[A-Za-z_]\w*|(?:async )?function\*?\(\))?[\[{(]$", "bold"),
    (r"Symbol\([^)]*\)|@@\S+?(?=:|$)", "yellow"),
]


def highlight(text: str) -> Text:
    """Style printer output line by line."""
    out = Text()
    for i, line in enumerate(text.split("\n")):
        if i:
            out.append("\n")
        styled = Text(line)
        for pattern, style in STYLES:
            styled.highlight_regex(pattern, style)
        out.append_text(styled)
    return out


def show(value: Any, options: Options | Mapping[str, Any] | None = None, **overrides: Any) -> None:
    """Print ``value`` to the module console."""
    console.print(highlight(dumps(value, options, **overrides)), soft_wrap=True)
