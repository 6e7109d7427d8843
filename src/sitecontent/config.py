"""Loader configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

DEFAULT_EAGER_EXTENSIONS: Tuple[str, ...] = (".md", ".yaml", ".yml", ".html")


@dataclass(slots=True)
class LoaderConfig:
    root: Path = Path(".")
    eager_extensions: Tuple[str, ...] = DEFAULT_EAGER_EXTENSIONS

    def resolve_root(self, base_dir: Path | None = None) -> Path:
        if Path(self.root).is_absolute() or base_dir is None:
            return Path(self.root)
        return base_dir / self.root
