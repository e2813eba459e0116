"""Byte-shift encryption and decryption of files in place."""

from __future__ import annotations

from datetime import datetime
from typing import BinaryIO

from shiftcrypt.env import DEFAULT_ENV_PATH, read_key
from shiftcrypt.fileio import PathLike
from shiftcrypt.task import Action, Task

MARKER = b"*"
_CHUNK_SIZE = 64 * 1024


def _shift_table(action: Action, key: int) -> bytes:
    shift = key if action is Action.ENCRYPT else -key
    return bytes((value + shift) % 256 for value in range(256))


def shift_stream(stream: BinaryIO, action: Action, key: int) -> bool:
    """Shift every byte of ``stream`` from its current position by ``key``.

    Encryption adds the key and decryption subtracts it, modulo 256. Work
    stops at the first ``*`` byte, leaving it and everything after it as it
    was; the result is ``False`` in that case and ``True`` otherwise.
    """
    table = _shift_table(action, key)
    position = stream.tell()
    while chunk := stream.read(_CHUNK_SIZE):
        cut = chunk.find(MARKER)
        part = chunk if cut < 0 else chunk[:cut]
        stream.seek(position)
        stream.write(part.translate(table))
        position += len(part)
        if cut >= 0:
            return False
    return True


def execute_cryption(task_data: str, env_path: PathLike = DEFAULT_ENV_PATH) -> bool:
    """Run a serialised task using the key from ``env_path``.

    Returns ``False`` when processing stopped at a ``*`` marker.
    """
    task = Task.from_string(task_data)
    with task.open() as stream:
        key = read_key(env_path)
        if not shift_stream(stream, task.action, key):
            return False
    print(f"Exiting the encryption/decryption at: {datetime.now():%Y-%m-%d %H:%M:%S}")
    return True