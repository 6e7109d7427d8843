"""Storage backends used by the content loader."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List, Protocol

LOGGER = logging.getLogger(__name__)


class Storage(Protocol):
    """Minimal async file-system surface the loader depends on."""

    async def is_dir(self, path: str) -> bool: ...

    async def list_entries(self, directory: str) -> List[str]: ...

    async def read_text(self, path: str) -> str: ...


class LocalStorage:
    """Reads content from the local disk, relative to ``root``."""

    def __init__(self, root: Path | str = ".") -> None:
        self.root = Path(root)

    def resolve(self, path: str) -> Path:
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self.root / candidate

    async def is_dir(self, path: str) -> bool:
        return await asyncio.to_thread(self.resolve(path).is_dir)

    async def list_entries(self, directory: str) -> List[str]:
        target = self.resolve(directory)
        names = await asyncio.to_thread(lambda: sorted(child.name for child in target.iterdir()))
        LOGGER.debug("Listed %d entries in %s", len(names), target)
        return names

    async def read_text(self, path: str) -> str:
        target = self.resolve(path)
        LOGGER.debug("Reading %s", target)
        return await asyncio.to_thread(target.read_text, encoding="utf-8")
