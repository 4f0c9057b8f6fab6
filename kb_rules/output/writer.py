"""Async JSON writer for the generated facts and rules files."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from ..core.errors import WriteError


def dump_json(data: Any, indent: int = 2) -> str:
    """Pretty-print ``data`` with non-ASCII characters kept as-is."""
    return json.dumps(data, ensure_ascii=False, indent=indent)


async def write_json(path: Path, data: Any, indent: int = 2) -> Path:
    """Serialize ``data`` and overwrite ``path`` with it.

    The parent directory must already exist; a missing directory is a
    WriteError like any other OS failure.
    """
    content = dump_json(data, indent)
    try:
        await asyncio.to_thread(Path(path).write_text, content, encoding="utf-8")
    except OSError as exc:
        raise WriteError(path, str(exc)) from exc
    return Path(path)
