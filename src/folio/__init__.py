"""folio: JSON-file record store and activity feed for a project portfolio site."""

__version__ = "0.1.0"
