"""
Atomic output files.

Curve files, the AUC summary, the motif report and the JSON summary are
written to a temporary file in the destination directory and renamed into
place, so an interrupted run leaves either the old file or the new one.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Callable, TextIO


def _replace_atomically(path: str | os.PathLike, write: Callable[[TextIO], None]) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            write(handle)
        os.replace(tmp_name, target)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


def atomic_write_text(path: str | os.PathLike, content: str) -> None:
    """Write `content` to `path`, creating parent directories."""
    _replace_atomically(path, lambda handle: handle.write(content))


def atomic_write_json(path: str | os.PathLike, data: Any, *, indent: int = 2) -> None:
    """
    Serialize `data` as JSON to `path`.

    Parameters
    ----------
    path:
        Destination file.
    data:
        JSON-serializable object. NaN should already be replaced by None.
    indent:
        Indentation (default 2).
    """
    _replace_atomically(path, lambda handle: json.dump(data, handle, indent=indent))
