"""
Async access to the markdown source directory.

File system calls run in worker threads so the event loop stays free;
any OS or decoding failure is reported as a ReadError carrying the path.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

from ..core.errors import ReadError


async def list_documents(directory: Path, extension: str = ".md") -> list[Path]:
    """Return paths of documents in ``directory`` with the given extension.

    Order follows the file system listing and is not sorted. Entries whose
    extension differs, including names like ``.md`` that have no extension
    at all, are skipped silently.
    """
    try:
        names = await asyncio.to_thread(os.listdir, directory)
    except OSError as exc:
        raise ReadError(directory, str(exc)) from exc
    return [Path(directory) / name for name in names if os.path.splitext(name)[1] == extension]


async def read_document(path: Path) -> str:
    """Read a document as UTF-8 text.

    Line endings are kept exactly as stored and undecodable bytes become
    U+FFFD, so the parser sees the file contents unchanged.
    """
    try:
        raw = await asyncio.to_thread(Path(path).read_bytes)
    except OSError as exc:
        raise ReadError(path, str(exc)) from exc
    return raw.decode("utf-8", errors="replace")


def document_name(path: Path, extension: str = ".md") -> str:
    """File name with the document extension removed."""
    name = Path(path).name
    if extension and name.endswith(extension):
        return name[: -len(extension)]
    return name
