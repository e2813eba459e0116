"""Reading the shift key from an environment file."""

from __future__ import annotations

import re
from pathlib import Path

from shiftcrypt.fileio import PathLike

DEFAULT_ENV_PATH = ".env"

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def read_env(env_path: PathLike = DEFAULT_ENV_PATH) -> str:
    """Return the whole content of the environment file."""
    return Path(env_path).read_bytes().decode("utf-8", errors="replace")


def read_key(env_path: PathLike = DEFAULT_ENV_PATH) -> int:
    """Parse the integer key at the start of the environment file.

    Leading whitespace and trailing text are ignored; a file that does not
    start with an integer, or one outside the 32-bit range, is an error.
    """
    content = read_env(env_path)
    match = _LEADING_INT.match(content)
    if match is None:
        raise ValueError(f"no integer key in {env_path}: {content!r}")
    key = int(match.group(1))
    if not _INT_MIN <= key <= _INT_MAX:
        raise ValueError(f"key out of range in {env_path}: {key}")
    return key