"""Registry of generated ("virtual") file patterns."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional

from sitecontent.utils.globs import is_glob, match_one

LOGGER = logging.getLogger(__name__)

WILDCARD = "*"


@dataclass(slots=True)
class Registration:
    directory: str
    name: str
    generator: Any


@dataclass(slots=True)
class VirtualMatch:
    name: str
    generator: Any


def match_registration(
    registration: Registration, candidate_dir: str, candidate_name: str = WILDCARD
) -> Optional[VirtualMatch]:
    """Decide whether ``registration`` produces a file for this request.

    1. ``candidate_dir`` must match the registration's directory glob.
    2. A literal ``candidate_name`` (explicit request) matches when it fits
       the registration's name glob; the requested name is returned.
    3. A glob ``candidate_name`` (listing) only offers registrations whose
       own name is concrete, and only when that name fits the request.

    Registrations with a glob name are therefore never expanded by a listing.
    """
    if not match_one(candidate_dir, registration.directory):
        return None

    if not is_glob(candidate_name):
        if match_one(candidate_name, registration.name):
            return VirtualMatch(candidate_name, registration.generator)
        return None

    if is_glob(registration.name):
        return None
    if candidate_name == WILDCARD or match_one(registration.name, candidate_name):
        return VirtualMatch(registration.name, registration.generator)
    return None


class GeneratorRegistry:
    """Ordered, append-only list of generator registrations."""

    def __init__(self) -> None:
        self._registrations: List[Registration] = []

    def __len__(self) -> int:
        return len(self._registrations)

    def __iter__(self) -> Iterator[Registration]:
        return iter(self._registrations)

    def register(self, directory: str, name: str, generator: Any) -> Registration:
        """Register ``generator`` for files named ``name`` under ``directory``.

        Both arguments may be globs. A glob ``name`` only yields files when a
        concrete filename is requested, e.g. ``("example", "_config-*.yaml")``
        is not listed for ``example/*`` but resolves ``example/_config-foo.yaml``.
        """
        registration = Registration(directory, name, generator)
        self._registrations.append(registration)
        LOGGER.debug("Registered generator for %s/%s", directory, name)
        return registration

    def virtual_matches(self, candidate_dir: str, candidate_name: str = WILDCARD) -> List[VirtualMatch]:
        matches = []
        for registration in self._registrations:
            match = match_registration(registration, candidate_dir, candidate_name)
            if match is not None:
                matches.append(match)
        return matches
