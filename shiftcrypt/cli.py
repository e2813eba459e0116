"""Command line entry point: shift every file under a directory."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterator
from pathlib import Path

from shiftcrypt.env import DEFAULT_ENV_PATH
from shiftcrypt.fileio import PathLike, open_read_write
from shiftcrypt.process_management import ProcessManagement
from shiftcrypt.task import Action, Task


def _regular_files(root: Path) -> Iterator[Path]:
    """Yield regular files under ``root``, files of a directory before its subdirectories.

    Directory symlinks are not followed; errors while listing propagate.
    """
    entries = sorted(root.iterdir())
    subdirs = []
    for entry in entries:
        if entry.is_dir():
            if not entry.is_symlink():
                subdirs.append(entry)
        elif entry.is_file():
            yield entry
    for subdir in subdirs:
        yield from _regular_files(subdir)


def _openable_tasks(root: Path, action: Action) -> Iterator[Task]:
    for path in _regular_files(root):
        try:
            with open_read_write(path):
                pass
        except OSError:
            print(f"Unable to Open the file: {path}")
            continue
        yield Task(str(path), action)


def collect_tasks(directory: PathLike, action: str) -> Iterator[Task]:
    """Yield a task for every openable regular file under ``directory``.

    ``action`` is ``"encrypt"`` for encryption; anything else decrypts.
    """
    root = Path(directory)
    if not root.is_dir():
        raise NotADirectoryError(f"Invalid directory path: {directory}")
    task_action = Action.ENCRYPT if action == "encrypt" else Action.DECRYPT
    return _openable_tasks(root, task_action)


def _prompt(message: str) -> str:
    print(message)
    return sys.stdin.readline().rstrip("\n")


def main(argv: list[str] | None = None) -> int:
    """Encrypt or decrypt every file under a directory."""
    parser = argparse.ArgumentParser(
        prog="shiftcrypt", description="Shift-encrypt or decrypt files in place."
    )
    parser.add_argument("directory", nargs="?", help="directory to process")
    parser.add_argument("action", nargs="?", help="encrypt or decrypt")
    parser.add_argument("--env", default=DEFAULT_ENV_PATH, help="file holding the key")
    args = parser.parse_args(argv)

    start = time.perf_counter()
    directory = args.directory if args.directory is not None else _prompt(
        "Enter the directory path:"
    )
    action = args.action if args.action is not None else _prompt(
        "Enter the action (encrypt/decrypt)"
    )

    manager = ProcessManagement(args.env)
    try:
        for task in collect_tasks(directory, action):
            try:
                manager.submit_to_queue(task)
            except ValueError as exc:
                print(f"Skipping {task.file_path}: {exc}")
    except NotADirectoryError:
        print(f"Invalid directory path: {directory}")
    except OSError as exc:
        print(f"Filesystem error:{exc}")

    print("Parent waiting for children to finish...")
    leftover = manager.wait()
    print(f"Completed: {len(manager.completed)}, stopped at marker: "
          f"{len(manager.stopped)}, failed: {len(manager.failed)}")
    for task_data, error in manager.failed:
        print(f"Task {task_data} failed: {error}")
    if leftover:
        print(f"Unprocessed tasks: {len(leftover)}")
    print("No more children to reap.")
    print(f"Total execution time: {time.perf_counter() - start} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())