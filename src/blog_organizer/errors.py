"""Errors raised while organizing posts and rewriting indexes.

Every error aborts the run. The CLI reports ``str(error)`` as a single line.
"""

from pathlib import Path
from typing import Any


class OrganizerError(RuntimeError):
    """Base class for fatal organizer errors."""


class MissingMetadataError(OrganizerError):
    """Raised when a staged post lacks a required front matter field."""

    def __init__(self, path: Path, field: str) -> None:
        super().__init__(f"{path}: missing required front matter field '{field}'")
        self.path = path
        self.field = field


class InvalidMetadataError(OrganizerError):
    """Raised when a front matter value cannot be interpreted."""

    def __init__(self, path: Path, field: str, value: Any) -> None:
        super().__init__(f"{path}: invalid value for front matter field '{field}': {value!r}")
        self.path = path
        self.field = field
        self.value = value


class UnknownCategoryError(OrganizerError):
    """Raised when a category is not in the configured category table."""

    def __init__(self, path: Path, category: str | None) -> None:
        super().__init__(f"{path}: unknown category {category!r}")
        self.path = path
        self.category = category


class DestinationConflictError(OrganizerError):
    """Raised when moving a post would overwrite an existing file."""

    def __init__(self, source: Path, destination: Path) -> None:
        super().__init__(f"cannot move {source}: destination {destination} already exists")
        self.source = source
        self.destination = destination


class MissingRegionMarkerError(OrganizerError):
    """Raised when an index document lacks a region marker or heading."""

    def __init__(self, document: Path | str, marker: str) -> None:
        super().__init__(f"{document}: region marker {marker!r} not found")
        self.document = document
        self.marker = marker


class MissingIndexDocumentError(OrganizerError):
    """Raised when an index document is missing and cannot be created."""

    def __init__(self, path: Path, reason: str | None = None) -> None:
        message = f"index document missing: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = path
