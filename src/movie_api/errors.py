"""Errors raised while generating or writing the API document."""

from pathlib import Path


class MovieApiDocsError(Exception):
    """Base class for all document generation errors."""


class SchemaResolutionError(MovieApiDocsError):
    """A schema reference does not match any registered schema."""

    def __init__(self, name: str, location: str):
        self.name = name
        self.location = location
        super().__init__(f"Schema '{name}' referenced by {location} is not registered")


class FileWriteError(MovieApiDocsError):
    """An output file could not be written."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write {path}: {reason}")


class DocumentReadError(MovieApiDocsError):
    """A generated document on disk could not be read or parsed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")
