"""Errors raised while loading compiled contract artifacts."""

from pathlib import Path
from typing import Optional


class ArtifactError(Exception):
    """Base class for artifact loading failures."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path

    def __reduce__(self):
        return (type(self), (str(self), self.path))


class MissingArtifact(ArtifactError, FileNotFoundError):
    """The artifact file does not exist (the build step has not been run)."""


class MalformedArtifact(ArtifactError, ValueError):
    """The artifact file exists but is not valid JSON."""
