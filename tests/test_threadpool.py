import threading
import time
from datetime import timedelta

import pytest

from reqkit.threadpool import ThreadPool


def _echo(*args, **kwargs):
    return args, kwargs


def _poll(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


def test_submit_returns_result_and_starts_pool():
    pool = ThreadPool(min_threads=1, max_threads=2)
    assert pool.is_stopped()
    future = pool.submit(_echo, 1, "a", key="value")
    assert future.result(timeout=5) == ((1, "a"), {"key": "value"})
    assert pool.is_started()
    pool.stop()
    assert pool.is_stopped()


def test_exception_reaches_future():
    def fail():
        raise ValueError("boom")

    with ThreadPool(max_threads=2) as pool:
        future = pool.submit(fail)
        with pytest.raises(ValueError, match="boom"):
            future.result(timeout=5)


def test_start_twice_raises():
    pool = ThreadPool(max_threads=2)
    pool.start()
    with pytest.raises(RuntimeError):
        pool.start()
    pool.stop()


def test_stop_when_stopped_raises():
    pool = ThreadPool()
    with pytest.raises(RuntimeError):
        pool.stop()


@pytest.mark.parametrize("requested", [0, 10])
def test_start_clamps_thread_count(requested):
    pool = ThreadPool(min_threads=2, max_threads=3)
    pool.start(requested)
    expected = pool.min_thread_num if requested < pool.min_thread_num else pool.max_thread_num
    assert pool.current_thread_num() == expected
    pool.stop()
    assert pool.current_thread_num() == 0
    assert pool.idle_thread_num() == 0


def test_pause_holds_tasks_until_resume():
    with ThreadPool(max_threads=2) as pool:
        pool.start()
        pool.pause()
        future = pool.submit(_echo, "x")
        time.sleep(0.2)
        assert not future.done()
        pool.resume()
        assert future.result(timeout=5) == (("x",), {})


def test_wait_finishes_all_tasks():
    done = []
    lock = threading.Lock()

    def work(i):
        time.sleep(0.01)
        with lock:
            done.append(i)

    with ThreadPool(min_threads=1, max_threads=4) as pool:
        for i in range(20):
            pool.submit(work, i)
        pool.wait()
        assert sorted(done) == list(range(20))
        assert pool.idle_thread_num() == pool.current_thread_num()


def test_thread_count_never_exceeds_maximum():
    gate = threading.Event()
    with ThreadPool(min_threads=1, max_threads=2) as pool:
        futures = [pool.submit(gate.wait, 5) for _ in range(6)]
        assert pool.current_thread_num() <= 2
        gate.set()
        assert all(f.result(timeout=5) for f in futures)


def test_idle_threads_above_minimum_leave():
    pool = ThreadPool(min_threads=0, max_threads=2, max_idle=timedelta(milliseconds=50))
    pool.submit(_echo).result(timeout=5)
    assert _poll(lambda: pool.current_thread_num() == 0)
    assert pool.idle_thread_num() == 0
    pool.stop()


def test_stop_cancels_queued_tasks():
    pool = ThreadPool(max_threads=1)
    pool.start()
    pool.pause()
    future = pool.submit(_echo)
    pool.stop()
    assert future.cancelled()


def test_context_manager_stops_pool():
    with ThreadPool(max_threads=2) as pool:
        pool.submit(_echo).result(timeout=5)
        assert pool.is_started()
    assert pool.is_stopped()