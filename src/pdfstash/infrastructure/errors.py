"""Exceptions raised by the document store and its platform boundary.

The service layer translates these into ``ServiceResult`` error codes.
"""

from __future__ import annotations

from pathlib import Path


class DocumentStoreError(Exception):
    """Base class for document store failures."""

    code = "STORE_ERROR"


class SourceNotFound(DocumentStoreError):
    """The pending source file does not exist. Nothing was created."""

    code = "SOURCE_NOT_FOUND"

    def __init__(self, path: Path) -> None:
        super().__init__(f"Source PDF file not found: {path}")
        self.path = path


class DestinationUnwritable(DocumentStoreError):
    """Copying into the managed directory failed; no partial file remains."""

    code = "DESTINATION_UNWRITABLE"

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot write {path}: {reason}")
        self.path = path
        self.reason = reason


class DocumentNotFound(DocumentStoreError):
    """The document vanished or was never in the managed directory."""

    code = "NOT_FOUND"

    def __init__(self, name: str) -> None:
        super().__init__(f"No document found with name: {name}")
        self.name = name


class CollisionUnresolved(DocumentStoreError):
    """Every candidate name tried was already taken."""

    code = "COLLISION_UNRESOLVED"

    def __init__(self, desired_name: str, attempts: int) -> None:
        super().__init__(
            f"Could not find a free name for {desired_name!r} after {attempts} attempts"
        )
        self.desired_name = desired_name
        self.attempts = attempts


class NoImages(DocumentStoreError):
    """Assembly was requested with an empty image list."""

    code = "NO_IMAGES"

    def __init__(self) -> None:
        super().__init__("No images to generate PDF")
