"""Shared fixtures for argslot tests."""

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from argslot import ArgumentManager


@pytest.fixture
def manager() -> ArgumentManager:
    """A fresh manager with a program header."""
    return ArgumentManager("demo", "Demo tool")


@pytest.fixture
def write_declarations(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Write a declarations dict to a JSON file and return its path."""

    def _write(data: dict[str, Any], name: str = "options.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
