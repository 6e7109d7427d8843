"""YAML front-matter extraction for Markdown sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

import yaml

from sitecontent.errors import FrontMatterError

FENCE = "---"
END_MARKERS = ("---", "...")


@dataclass(slots=True)
class FrontMatter:
    """Parsed leading block plus the remaining document body."""

    config: Dict[str, Any]
    rest: str


def split_front_matter(text: str) -> FrontMatter:
    """Strip a leading ``---`` delimited YAML block from ``text``.

    Documents without a block come back unchanged with an empty config.
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip("\r\n").rstrip() != FENCE:
        return FrontMatter(config={}, rest=text)

    for index in range(1, len(lines)):
        if lines[index].rstrip("\r\n").rstrip() in END_MARKERS:
            block = "".join(lines[1:index])
            rest = "".join(lines[index + 1 :])
            break
    else:
        # unterminated fence, treat the whole thing as body
        return FrontMatter(config={}, rest=text)

    try:
        parsed = yaml.safe_load(block)
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"Invalid front-matter: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, dict):
        raise FrontMatterError(
            f"Front-matter must be a mapping, got {type(parsed).__name__}"
        )
    return FrontMatter(config=parsed, rest=rest)


def parse_structured(text: str) -> Any:
    """Parse a whole structured-data (YAML) document."""
    return yaml.safe_load(text)
