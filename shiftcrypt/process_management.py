"""A bounded task queue drained by a small pool of worker threads."""

from __future__ import annotations

import queue
import threading
from types import TracebackType

from shiftcrypt.cryption import execute_cryption
from shiftcrypt.env import DEFAULT_ENV_PATH
from shiftcrypt.fileio import PathLike
from shiftcrypt.task import Task

MAX_TASK_BYTES = 255
DEFAULT_CAPACITY = 1000
DEFAULT_MAX_WORKERS = 8


class ProcessManagement:
    """Queue serialised tasks and run them on up to ``max_workers`` workers.

    A worker is started with each submission until ``max_workers`` have been
    started. A worker stops when a task hits the ``*`` marker or fails, so
    tasks may be left over once every worker has stopped.
    """

    def __init__(
        self,
        env_path: PathLike = DEFAULT_ENV_PATH,
        *,
        max_workers: int = DEFAULT_MAX_WORKERS,
        capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        if max_workers < 1 or capacity < 1:
            raise ValueError("max_workers and capacity must be positive")
        self.env_path = env_path
        self.max_workers = max_workers
        self.completed: list[str] = []
        self.stopped: list[str] = []
        self.failed: list[tuple[str, Exception]] = []
        self._queue: queue.Queue[str | None] = queue.Queue(maxsize=capacity)
        self._workers: list[threading.Thread] = []
        self._lock = threading.Lock()
        self._closed = False

    def submit_to_queue(self, task: Task) -> None:
        """Queue a task, blocking while the queue is full."""
        if self._closed:
            raise RuntimeError("cannot submit after wait()")
        task_data = task.to_string()
        if len(task_data.encode("utf-8")) > MAX_TASK_BYTES:
            raise ValueError(f"serialised task longer than {MAX_TASK_BYTES} bytes")
        self._queue.put(task_data)
        with self._lock:
            if len(self._workers) < self.max_workers:
                worker = threading.Thread(
                    target=self._run,
                    name=f"worker-{len(self._workers) + 1}",
                    daemon=True,
                )
                self._workers.append(worker)
                worker.start()

    def _run(self) -> None:
        name = threading.current_thread().name
        while True:
            task_data = self._queue.get()
            if task_data is None:
                return
            print(f"Executing task in {name}")
            try:
                completed = execute_cryption(task_data, self.env_path)
            except Exception as exc:  # a failing task ends its worker
                with self._lock:
                    self.failed.append((task_data, exc))
                return
            with self._lock:
                (self.completed if completed else self.stopped).append(task_data)
            if not completed:
                return

    def wait(self) -> list[str]:
        """Stop the workers once the queue is drained; return unprocessed tasks."""
        self._closed = True
        with self._lock:
            workers = list(self._workers)
        for worker in workers:
            while worker.is_alive():
                try:
                    self._queue.put(None, timeout=0.05)
                    break
                except queue.Full:
                    continue
        for worker in workers:
            worker.join()
        leftover: list[str] = []
        while True:
            try:
                item = self._queue.get_nowait()
            except queue.Empty:
                return leftover
            if item is not None:
                leftover.append(item)

    def __enter__(self) -> ProcessManagement:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.wait()