"""First-seen paths of every object printed during one call."""
from __future__ import annotations

from typing import Any

from refprint.paths import Path


class IdentityTracker:
    """Maps object identity to the path where the object was first printed.

    Entries hold a reference to the object so its ``id()`` cannot be handed to
    a new object while the tracker is alive.
    """

    __slots__ = ("_seen",)

    def __init__(self):
        self._seen: dict[int, tuple[Any, Path]] = {}

    def register(self, value: Any, path: Path) -> None:
        """Record ``path`` for ``value``; later registrations are no-ops."""
        self._seen.setdefault(id(value), (value, path))

    def lookup(self, value: Any) -> Path | None:
        entry = self._seen.get(id(value))
        if entry is None:
            return None
        return entry[1]

    def __contains__(self, value: Any) -> bool:
        return id(value) in self._seen

    def __len__(self) -> int:
        return len(self._seen)
