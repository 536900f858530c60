"""A resizable pool of worker threads that runs submitted callables."""

from __future__ import annotations

import os
import threading
from collections import deque
from concurrent.futures import Future
from datetime import timedelta
from enum import Enum
from typing import Any, Callable

DEFAULT_MIN_THREADS = 1
DEFAULT_MAX_THREADS = os.cpu_count() or 1
DEFAULT_MAX_IDLE_TIME = timedelta(milliseconds=60000)


class _Status(Enum):
    STOP = "stop"
    RUNNING = "running"
    PAUSE = "pause"


class ThreadPool:
    """Runs callables on between min_thread_num and max_thread_num threads.

    Threads above the minimum leave after waiting max_idle_time for work.
    """

    def __init__(
        self,
        min_threads: int = DEFAULT_MIN_THREADS,
        max_threads: int = DEFAULT_MAX_THREADS,
        max_idle: timedelta = DEFAULT_MAX_IDLE_TIME,
    ) -> None:
        self.min_thread_num = min_threads
        self.max_thread_num = max_threads
        self.max_idle_time = max_idle
        self._cond = threading.Condition(threading.RLock())
        self._status = _Status.STOP
        self._cur = 0
        self._idle = 0
        self._threads: set[threading.Thread] = set()
        self._tasks: deque[Callable[[], None]] = deque()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self.is_started():
            self.stop()

    def current_thread_num(self) -> int:
        """Return the number of live worker threads."""
        with self._cond:
            return self._cur

    def idle_thread_num(self) -> int:
        """Return the number of workers waiting for a task."""
        with self._cond:
            return self._idle

    def is_started(self) -> bool:
        """Tell whether the pool is running or paused."""
        return self._status is not _Status.STOP

    def is_stopped(self) -> bool:
        """Tell whether the pool is stopped."""
        return self._status is _Status.STOP

    def start(self, start_threads: int = 0) -> None:
        """Start the pool with a thread count clamped to the minimum and maximum."""
        with self._cond:
            if self._status is not _Status.STOP:
                raise RuntimeError("thread pool is already started")
            self._start_locked(start_threads)

    def _start_locked(self, start_threads: int) -> None:
        self._status = _Status.RUNNING
        count = min(max(start_threads, self.min_thread_num), self.max_thread_num)
        for _ in range(count):
            self._create_thread()

    def stop(self) -> None:
        """Stop all workers, cancel queued tasks and wait for the threads to end."""
        with self._cond:
            if self._status is _Status.STOP:
                raise RuntimeError("thread pool is already stopped")
            self._status = _Status.STOP
            pending = list(self._tasks)
            self._tasks.clear()
            threads = list(self._threads)
            self._cond.notify_all()
        for task in pending:
            task.future.cancel()  # type: ignore[attr-defined]
        current = threading.current_thread()
        for thread in threads:
            if thread is not current:
                thread.join()
        with self._cond:
            self._threads.clear()
            self._cur = 0
            self._idle = 0
            self._cond.notify_all()

    def pause(self) -> None:
        """Keep workers from taking new tasks until resumed."""
        with self._cond:
            if self._status is _Status.RUNNING:
                self._status = _Status.PAUSE

    def resume(self) -> None:
        """Let workers take tasks again after a pause."""
        with self._cond:
            if self._status is _Status.PAUSE:
                self._status = _Status.RUNNING
                self._cond.notify_all()

    def wait(self) -> None:
        """Block until the queue is empty and every worker is idle, or the pool stops."""
        with self._cond:
            self._cond.wait_for(
                lambda: self._status is _Status.STOP
                or (not self._tasks and self._idle == self._cur)
            )

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue fn(*args, **kwargs) and return a future for its result."""
        future: Future = Future()

        def task() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = fn(*args, **kwargs)
            except BaseException as exc:  # handed to the caller through the future
                future.set_exception(exc)
            else:
                future.set_result(result)

        task.future = future  # type: ignore[attr-defined]
        with self._cond:
            if self._status is _Status.STOP:
                self._start_locked(0)
            if self._idle <= 0 and self._cur < self.max_thread_num:
                self._create_thread()
            self._tasks.append(task)
            self._cond.notify_all()
        return future

    def _create_thread(self) -> bool:
        if self._cur >= self.max_thread_num:
            return False
        thread = threading.Thread(target=self._worker, daemon=True)
        self._threads.add(thread)
        self._cur += 1
        self._idle += 1
        thread.start()
        return True

    def _has_work(self) -> bool:
        return self._status is _Status.STOP or (
            self._status is _Status.RUNNING and bool(self._tasks)
        )

    def _worker(self) -> None:
        me = threading.current_thread()
        while True:
            with self._cond:
                ready = self._cond.wait_for(
                    self._has_work, self.max_idle_time.total_seconds()
                )
                if self._status is _Status.STOP:
                    return
                if not ready:
                    if not self._tasks and self._cur > self.min_thread_num:
                        self._cur -= 1
                        self._idle -= 1
                        self._threads.discard(me)
                        self._cond.notify_all()
                        return
                    continue
                task = self._tasks.popleft()
                self._idle -= 1
            task()
            with self._cond:
                if self._status is _Status.STOP:
                    return
                self._idle += 1
                self._cond.notify_all()