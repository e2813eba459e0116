"""Opening files for in-place binary reading and writing."""

from __future__ import annotations

import os
from typing import BinaryIO, Union

PathLike = Union[str, "os.PathLike[str]"]


def open_read_write(file_path: PathLike) -> BinaryIO:
    """Open an existing file in binary mode for reading and writing.

    The file is neither created nor truncated; ``OSError`` is raised when it
    cannot be opened.
    """
    return open(file_path, "r+b")