from __future__ import annotations

import os
from typing import Optional


def file_size(path: Optional[str]) -> int:
    # 0 for no path or a missing file
    if path and os.path.exists(path):
        return os.path.getsize(path)
    return 0


def read_binary_file(path: Optional[str]) -> bytes:
    """
    Read a whole binary file, sized from its metadata first.
    Returns b"" if the path is empty, missing or the file is empty;
    callers treat an empty result as "cannot read".
    """
    size = file_size(path)
    if size == 0:
        return b""

    with open(path, "rb") as f:
        return f.read(size)


def write_binary_file(path: str, data: bytes) -> int:
    with open(path, "wb") as o:
        return o.write(data)
