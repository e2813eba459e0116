"""Tasks: a file path paired with the action to apply to it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO

from shiftcrypt.fileio import open_read_write


class Action(Enum):
    """What to do with a file's bytes."""

    ENCRYPT = "ENCRYPT"
    DECRYPT = "DECRYPT"


@dataclass(frozen=True)
class Task:
    """A file to process and the action to apply."""

    file_path: str
    action: Action

    def to_string(self) -> str:
        """Serialise as ``<path>,<ACTION>``."""
        return f"{self.file_path},{self.action.value}"

    @classmethod
    def from_string(cls, task_data: str) -> Task:
        """Parse a serialised task.

        The path runs up to the first comma and the action up to the end of
        the line; any action other than ``ENCRYPT`` means decryption.
        """
        file_path, separator, rest = task_data.partition(",")
        if not separator or not rest:
            raise ValueError("Invalid task data format")
        action_text = rest.split("\n", 1)[0]
        action = Action.ENCRYPT if action_text == "ENCRYPT" else Action.DECRYPT
        return cls(file_path, action)

    def open(self) -> BinaryIO:
        """Open the task's file for in-place reading and writing."""
        try:
            return open_read_write(self.file_path)
        except OSError as exc:
            raise OSError(f"Failed to open file:{self.file_path}") from exc