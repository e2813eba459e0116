# shiftcrypt

`shiftcrypt` encrypts or decrypts every regular file under a directory,
including all of its subdirectories, **in place**. Each byte is shifted by an
integer key modulo 256: encryption adds the key, decryption subtracts it. The
files are queued and handed to a small pool of worker threads.

This is a simple substitution cipher. It hides content from a casual look; it
is not a secure form of encryption.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Setting the key

By default the key is read from a file named `.env` in the current working
directory; another file can be named with `--env`. The file must start with a
whole number (leading whitespace is allowed, anything after the number is
ignored), and the number must fit in a signed 32-bit integer. Use the same
number to decrypt that you used to encrypt.

## Usage

```
shiftcrypt [DIRECTORY] [ACTION] [--env PATH]
```

- `DIRECTORY`: the directory whose files are to be processed. If it is left
  out, the command asks `Enter the directory path:` and reads a line.
- `ACTION`: `encrypt` encrypts; any other value decrypts. If it is left out,
  the command asks `Enter the action (encrypt/decrypt)` and reads a line.
- `--env PATH`: the file holding the key (default `.env`).

Files are visited in sorted order, the files of a directory before its
subdirectories; symbolic links to directories are not followed. When all
workers have stopped, the command prints how many tasks completed, how many
stopped at a `*` marker, how many failed (with their errors), how many were
left unprocessed, and the total running time. It always exits with status 0.

Things to know:

- Files are changed in place; keep a copy of anything you cannot afford to lose.
- Processing of a file stops at the first `*` byte, and that byte and
  everything after it are left as they were. The worker that met the marker
  then stops as well, as does a worker whose task fails (for instance because
  the key file is missing). With up to 8 workers, files may therefore be left
  unprocessed; they are counted as unprocessed tasks.
- A file that cannot be opened for both reading and writing is reported with
  `Unable to Open the file: ...` and skipped.
- A file whose `path,ACTION` form is longer than 255 bytes is reported and
  skipped.
- If the path given is not an existing directory, `Invalid directory path: ...`
  is printed and nothing is changed.

## Library use

- `shiftcrypt.task.Action` (`ENCRYPT`, `DECRYPT`) and `shiftcrypt.task.Task`
  (`file_path`, `action`) describe one file to process. `Task.to_string()`
  gives the `path,ACTION` form and `Task.from_string()` parses it, raising
  `ValueError` on text without a comma and an action; any action other than
  `ENCRYPT` means decryption. `Task.open()` opens the file for in-place
  reading and writing.
- `shiftcrypt.fileio.open_read_write()` opens an existing file in `r+b` mode.
- `shiftcrypt.env.read_env()` returns the content of an env file and
  `shiftcrypt.env.read_key()` parses the key from it, raising `ValueError`
  when there is no valid key.
- `shiftcrypt.cryption.shift_stream(stream, action, key)` shifts the bytes of
  an open binary stream in place from its current position, returning `False`
  if it stopped at a `*` and `True` otherwise.
  `shiftcrypt.cryption.execute_cryption(task_data, env_path)` runs one
  serialised task with the key from `env_path`, with the same return value.
- `shiftcrypt.process_management.ProcessManagement(env_path, max_workers=8,
  capacity=1000)` is a context manager. `submit_to_queue(task)` queues a task
  (blocking while the queue is full) and starts a new worker thread until
  `max_workers` have been started. `wait()` stops the workers once the queue
  is drained and returns the serialised tasks left unprocessed; after it,
  submitting raises `RuntimeError`. Results are kept in `completed`,
  `stopped` and `failed`.
- `shiftcrypt.cli.collect_tasks(directory, action)` yields a `Task` for every
  openable regular file under a directory, raising `NotADirectoryError` if the
  path is not a directory. `shiftcrypt.cli.main()` is the command above.

## What it does not do

- The workers are threads within one process, not separate processes.
- There is no authentication or integrity check: decrypting with the wrong
  key, or decrypting a file that was never encrypted, silently produces
  shifted bytes.