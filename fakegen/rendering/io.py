"""File I/O operations for rendering."""

from __future__ import annotations

import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created
    """
    path.parent.mkdir(parents=True, exist_ok=True)


@contextmanager
def open_output(path: Path, mode: int = 0o644) -> Iterator[TextIO]:
    """Stream text into a file that only appears once writing succeeds.

    Records are written incrementally to a temporary file beside the
    destination; it replaces ``path`` when the block exits cleanly and is
    removed when the block raises.

    Args:
        path: Destination file path
        mode: File permissions (octal)

    Yields:
        Writable text stream
    """
    ensure_parent(path)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as tmp:
            yield tmp
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
        os.chmod(path, mode)
    finally:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
