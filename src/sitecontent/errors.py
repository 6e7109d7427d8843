"""Exceptions raised while resolving content requests."""

from __future__ import annotations


class ContentError(Exception):
    """Base class for content resolution errors."""


class InvalidRequestError(ContentError, ValueError):
    """Request has a shape the resolver refuses, e.g. a glob in a directory."""


class AmbiguousResolutionError(ContentError, RuntimeError):
    """A single-file request resolved to more than one entry."""


class FrontMatterError(ContentError, ValueError):
    """Front-matter block could not be turned into a mapping."""
