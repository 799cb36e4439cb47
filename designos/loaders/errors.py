"""
Loader errors.

Loader-level functions raise these; the top-level aggregators catch them
and substitute ``None`` for the missing piece.
"""

from pathlib import Path
from typing import Optional


class LoaderError(Exception):
    """Base class for product loading failures."""

    prefix = "Loader error"

    def __init__(self, reason: str, path: Optional[Path | str] = None):
        self.reason = reason
        self.path = str(path) if path is not None else None
        super().__init__(self._format())

    def _format(self) -> str:
        if self.path:
            return f"{self.prefix}: {self.reason} ({self.path})"
        return f"{self.prefix}: {self.reason}"


class ProductFileNotFoundError(LoaderError, FileNotFoundError):
    """A required product file or directory does not exist."""

    prefix = "File not found"

    def __init__(self, path: Path | str, reason: Optional[str] = None):
        super().__init__(reason or "", path=path)

    def _format(self) -> str:
        if self.reason:
            return f"{self.prefix}: {self.reason} ({self.path})"
        return f"{self.prefix}: {self.path}"


class InvalidJSONError(LoaderError):
    """A JSON file could not be decoded."""

    prefix = "Invalid JSON"


class ParsingError(LoaderError):
    """A file was readable but its structure is missing required pieces."""

    prefix = "Parsing error"
