from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pytest

from chronoscape.config import get_settings
from chronoscape.core.location import load_alias_table
from chronoscape.core.probe import AssetProbe


class RecordingProbe(AssetProbe):
    """Probe backed by a set of identifiers that records every call."""

    def __init__(
        self,
        present: Iterable[str] = (),
        failing: Iterable[str] = (),
    ):
        self.present = set(present)
        self.failing = set(failing)
        self.calls: List[str] = []

    async def check(self, identifier: str) -> Optional[bool]:
        self.calls.append(identifier)
        if identifier in self.failing:
            return None
        return identifier in self.present


@pytest.fixture
def recording_probe():
    """Factory for RecordingProbe instances."""
    return RecordingProbe


@pytest.fixture
def asset_dir(tmp_path: Path):
    """Create an asset directory holding the given identifiers as .jpg files."""

    def _make(*identifiers: str) -> Path:
        directory = tmp_path / "locations"
        directory.mkdir(exist_ok=True)
        for identifier in identifiers:
            (directory / f"{identifier}.jpg").write_bytes(b"\xff\xd8\xff")
        return directory

    return _make


@pytest.fixture(autouse=True)
def clear_caches(monkeypatch: pytest.MonkeyPatch):
    """Keep settings and alias tables from leaking between tests."""
    for name in [k for k in os.environ if k.upper().startswith("CHRONOSCAPE_")]:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    load_alias_table.cache_clear()
    yield
    get_settings.cache_clear()
    load_alias_table.cache_clear()


@pytest.fixture
def alias_file(tmp_path: Path):
    """Write an alias table JSON file and return its path."""
    def _write(aliases: Dict[str, str], parents: Optional[Dict[str, str]] = None) -> Path:
        path = tmp_path / "aliases.json"
        data = {"aliases": aliases}
        if parents is not None:
            data["parents"] = parents
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
