"""Shared fixtures for refprint tests."""
from __future__ import annotations

import textwrap
import pytest
from datetime import datetime, timezone


NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _tabs(line: str) -> str:
    stripped = line.lstrip(" ")
    return "\t" * ((len(line) - len(stripped)) // 4) + stripped


@pytest.fixture
def block():
    """Factory: 4-space indented expected literal -> tab-indented text."""
    def _make(text: str) -> str:
        text = textwrap.dedent(text).strip("\n")
        return "\n".join(_tabs(line) for line in text.split("\n"))
    return _make


@pytest.fixture
def now():
    """Fixed reference instant for relative date phrases."""
    return NOW
