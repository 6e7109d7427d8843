"""Shared fixtures for sitecontent tests."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import List

import pytest

from sitecontent.storage import LocalStorage


class CountingStorage(LocalStorage):
    """LocalStorage that records how often each operation touched disk."""

    def __init__(self, root: Path) -> None:
        super().__init__(root)
        self.calls: Counter = Counter()
        self.reads: List[str] = []

    async def is_dir(self, path: str) -> bool:
        self.calls["is_dir"] += 1
        return await super().is_dir(path)

    async def list_entries(self, directory: str) -> List[str]:
        self.calls["list_entries"] += 1
        return await super().list_entries(directory)

    async def read_text(self, path: str) -> str:
        self.calls["read_text"] += 1
        self.reads.append(path)
        return await super().read_text(path)


@pytest.fixture
def storage(tmp_path: Path) -> CountingStorage:
    return CountingStorage(tmp_path)
