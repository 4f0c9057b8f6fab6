"""Error types raised by the document collaborators.

Both errors carry the offending path so a failing pass can be logged
with enough context to locate the file.
"""

from __future__ import annotations

from pathlib import Path


class KbRulesError(Exception):
    """Base class for errors that abort a single generation pass."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class ReadError(KbRulesError):
    """Listing the source directory or reading a document failed."""


class WriteError(KbRulesError):
    """An output file could not be written."""
