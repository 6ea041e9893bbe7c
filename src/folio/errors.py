"""Error taxonomy shared by the services and the HTTP layer."""

from __future__ import annotations


class FolioError(Exception):
    """Base class for errors surfaced to callers of the services."""


class ValidationError(FolioError):
    """The caller sent a malformed or incomplete collection. Nothing was written."""


class PersistenceError(FolioError):
    """The data directory could not be written. The caller must retry the whole operation."""
