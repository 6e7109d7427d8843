"""Resolve path and glob requests into real and generated content records."""

from __future__ import annotations

import asyncio
import logging
import posixpath
from collections import deque
from dataclasses import replace
from pathlib import Path
from typing import Any, Deque, Dict, List, Optional

from sitecontent.config import LoaderConfig
from sitecontent.errors import AmbiguousResolutionError, InvalidRequestError
from sitecontent.generators import WILDCARD, GeneratorRegistry, Registration
from sitecontent.models import ContentFile, ResolvedEntry
from sitecontent.storage import LocalStorage, Storage
from sitecontent.utils.globs import is_glob, join, match_many, normalize

LOGGER = logging.getLogger(__name__)


class ContentLoader:
    """Walks real directories and merges in registered virtual files.

    Every resolved path is cached for the lifetime of the loader, so a path
    seen twice yields the same :class:`ResolvedEntry`.
    """

    def __init__(
        self,
        root: Path | str | None = None,
        *,
        storage: Optional[Storage] = None,
        registry: Optional[GeneratorRegistry] = None,
        config: Optional[LoaderConfig] = None,
    ) -> None:
        self.config = config or LoaderConfig()
        if root is not None:
            self.config = replace(self.config, root=Path(root))
        self.storage = storage or LocalStorage(self.config.resolve_root(Path.cwd()))
        self.registry = registry or GeneratorRegistry()
        self._cache: Dict[str, ResolvedEntry] = {}
        self._inflight: Dict[str, asyncio.Future] = {}

    def register(self, directory: str, name: str, generator: Any) -> Registration:
        return self.registry.register(directory, name, generator)

    def cached(self, path: str) -> Optional[ResolvedEntry]:
        return self._cache.get(normalize(path))

    async def get(self, path: str) -> Optional[ResolvedEntry]:
        """Fetch exactly one entry, or ``None`` when nothing matches."""
        if is_glob(path):
            raise InvalidRequestError(f"Cannot get() a glob: {path}")

        found = await self.contents(path)
        if len(found) > 1:
            raise AmbiguousResolutionError(
                f"{path} matched {len(found)} entries: {', '.join(e.path for e in found)}"
            )
        if not found:
            return None
        return found[0]

    async def contents(self, request: str, recurse: bool = False) -> List[ResolvedEntry]:
        """Resolve a path or filename glob into entries.

        A directory request lists the whole directory. Only the filename part
        of a request may be a glob.
        """
        request = normalize(request)

        if await self.storage.is_dir(request):
            return await self._walk(request, WILDCARD, recurse)

        directory = posixpath.dirname(request) or "."
        if is_glob(directory):
            raise InvalidRequestError(f"Glob in directory part is unsupported: {request}")
        return await self._walk(directory, posixpath.basename(request), recurse)

    async def _walk(self, root_dir: str, name_pattern: str, recurse: bool) -> List[ResolvedEntry]:
        pending: Deque[str] = deque([root_dir])
        out: List[ResolvedEntry] = []

        while pending:
            current = pending.popleft()
            if not await self.storage.is_dir(current):
                # missing directories contribute nothing, generated files included
                LOGGER.debug("Directory %s does not exist", current)
                continue

            entries = await self.storage.list_entries(current)
            if name_pattern != WILDCARD:
                entries = match_many(entries, name_pattern)
            for raw in entries:
                full_path = join(current, raw)
                if await self.storage.is_dir(full_path):
                    if recurse:
                        pending.append(full_path)
                else:
                    out.append(await self._output_for(full_path))

            for match in self.registry.virtual_matches(current, name_pattern):
                full_path = join(current, match.name)
                out.append(await self._output_for(full_path, match.generator, virtual=True))

            # subdirectories are always listed in full
            name_pattern = WILDCARD

        return out

    async def _output_for(self, path: str, generator: Any = None, *, virtual: bool = False) -> ResolvedEntry:
        entry = self._cache.get(path)
        if entry is not None:
            LOGGER.debug("Cache hit for %s", path)
            return entry

        future = self._inflight.get(path)
        if future is not None:
            return await future

        future = asyncio.get_running_loop().create_future()
        self._inflight[path] = future
        try:
            entry = await self._materialize(path, generator, virtual)
        except Exception as exc:
            future.set_exception(exc)
            # retrieved here; concurrent waiters still receive it
            future.exception()
            raise
        else:
            entry = self._cache.setdefault(path, entry)
            future.set_result(entry)
        finally:
            del self._inflight[path]
            if not future.done():
                future.cancel()
        return entry

    async def _materialize(self, path: str, generator: Any, virtual: bool) -> ResolvedEntry:
        if virtual:
            LOGGER.debug("Resolved virtual %s", path)
            return ResolvedEntry(path, ContentFile.virtual(path), generator, virtual=True)

        record = await ContentFile.from_source(
            path, self.storage, eager_extensions=self.config.eager_extensions
        )
        return ResolvedEntry(path, record)
