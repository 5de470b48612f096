from __future__ import annotations

from pathlib import Path


def load_buffer(path: str | Path) -> bytes:
    """Read the whole file at `path` into memory.

    Filesystem errors (missing file, directory, permissions) propagate as the
    OSError raised by the read, which already names the path.
    """
    return Path(path).read_bytes()
