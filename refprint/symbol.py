"""Identity-compared labels, usable as mapping keys or as values."""
from __future__ import annotations


class Symbol:
    """A unique label carrying an optional description.

    Two symbols are equal only when they are the same object, even if their
    descriptions match.
    """

    __slots__ = ("description",)

    def __init__(self, description: str | None = None):
        self.description = description

    def __repr__(self) -> str:
        return f"Symbol({self.description or ''})"

    def label(self, amped: bool = True) -> str:
        """Text used when the symbol names a property."""
        if amped and self.description is not None:
            return f"@@{self.description}"
        return repr(self)
