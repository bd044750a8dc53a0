from __future__ import annotations

import os
import tempfile
from pathlib import Path

from huffpack.errors import InputNotFound, InputUnreadable, OutputUnwritable


def read_input(path: str) -> bytes:
    p = Path(path)
    if not p.is_file():
        raise InputNotFound(f"input file not found: {path}")
    try:
        return p.read_bytes()
    except OSError as e:
        raise InputUnreadable(f"cannot read {path}: {e}") from e


def write_output(path: str, data: bytes) -> None:
    """
    Write data to path in full, replacing any existing file.

    Bytes go to a temp file next to the target first and are renamed over it
    only once completely written, so a failure never leaves a partial file at
    the final path.
    """
    p = Path(path)
    tmp_name = None
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{p.name}.", suffix=".tmp", dir=str(p.parent))
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, p)
        tmp_name = None
    except OSError as e:
        raise OutputUnwritable(f"cannot write {path}: {e}") from e
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
