"""Content records produced by the loader."""

from __future__ import annotations

import asyncio
import enum
import logging
import posixpath
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from sitecontent.config import DEFAULT_EAGER_EXTENSIONS
from sitecontent.storage import Storage
from sitecontent.utils.frontmatter import parse_structured, split_front_matter

LOGGER = logging.getLogger(__name__)

MARKDOWN_EXT = ".md"
STRUCTURED_EXTS = (".yaml", ".yml")


class ReadState(enum.Enum):
    UNREAD = "unread"
    RESOLVED = "resolved"


class ContentFile:
    """One resolved file, real or virtual.

    ``content`` is either supplied up front (including an explicit ``None``)
    or left as :attr:`ReadState.UNREAD`, in which case the first
    :meth:`read` fetches it from storage and every later call returns the
    same value.
    """

    def __init__(
        self,
        path: str,
        config: Optional[Any] = None,
        content: Union[str, None, ReadState] = ReadState.UNREAD,
        *,
        storage: Optional[Storage] = None,
    ) -> None:
        self._path = path
        self.config = config
        self._storage = storage
        self._lock = asyncio.Lock()
        if content is ReadState.UNREAD:
            self._state = ReadState.UNREAD
            self._content: Optional[str] = None
        else:
            self._state = ReadState.RESOLVED
            self._content = content

    def __repr__(self) -> str:
        return f"ContentFile({self._path!r}, state={self._state.value})"

    @property
    def path(self) -> str:
        return self._path

    @property
    def ext(self) -> str:
        return posixpath.splitext(self._path)[1]

    @property
    def dir(self) -> str:
        return posixpath.dirname(self._path)

    @property
    def base(self) -> str:
        return posixpath.basename(self._path)

    @property
    def state(self) -> ReadState:
        return self._state

    @property
    def content(self) -> Optional[str]:
        """Body if already resolved, without triggering I/O.

        ``None`` here means either "not read yet" or "resolved to no body";
        check :attr:`state` to tell them apart, or await :meth:`read`.
        """
        return self._content

    async def read(self) -> Optional[str]:
        if self._state is ReadState.RESOLVED:
            return self._content

        async with self._lock:
            if self._state is ReadState.UNREAD:
                if self._storage is None or await self._storage.is_dir(self._path):
                    # nothing readable behind this path
                    self._content = None
                else:
                    self._content = await self._storage.read_text(self._path)
                self._state = ReadState.RESOLVED
        return self._content

    @classmethod
    async def from_source(
        cls,
        path: str,
        storage: Storage,
        *,
        eager_extensions: Sequence[str] = DEFAULT_EAGER_EXTENSIONS,
    ) -> "ContentFile":
        """Build a record for a real on-disk file."""
        ext = posixpath.splitext(path)[1]
        if ext not in eager_extensions:
            return cls(path, storage=storage)

        text = await storage.read_text(path)
        config: Optional[Any] = None
        if ext == MARKDOWN_EXT:
            front = split_front_matter(text)
            config = front.config
            text = front.rest
        elif ext in STRUCTURED_EXTS:
            config = parse_structured(text)
        LOGGER.debug("Eagerly loaded %s", path)
        return cls(path, config, text, storage=storage)

    @classmethod
    def virtual(cls, path: str) -> "ContentFile":
        """Record for a generated path; its body belongs to the generator."""
        return cls(path, None, None)


@dataclass(slots=True)
class ResolvedEntry:
    """Cache entry tying a path to its record and optional generator."""

    path: str
    record: ContentFile
    generator: Any = None
    virtual: bool = False

    @property
    def config(self) -> Optional[Any]:
        return self.record.config
