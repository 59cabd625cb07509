"""Local worker pool for running independent tasks in parallel."""

from __future__ import annotations

import threading
from concurrent.futures import FIRST_COMPLETED, Executor, ProcessPoolExecutor, ThreadPoolExecutor, wait
from typing import Any, Callable, Dict, Hashable, Iterable, Optional

from .config import EXECUTORS, ConfigError


_JOB_LOCK = threading.Lock()
_JOB_ACTIVE = False
_CANCEL_EVENT = threading.Event()
CONSOLE_LOCK = threading.Lock()

ResultHook = Optional[Callable[[Hashable, Any], None]]


class JobStateError(RuntimeError):
    pass


def console_print(*args, **kwargs) -> None:
    """print() behind the shared console lock so concurrent lines stay whole."""
    kwargs.setdefault("flush", True)
    with CONSOLE_LOCK:
        print(*args, **kwargs)


def cancel_job() -> None:
    if not _JOB_ACTIVE:
        raise JobStateError("No active job to cancel")
    _CANCEL_EVENT.set()


def cancel_requested() -> bool:
    return _CANCEL_EVENT.is_set()


def job_active() -> bool:
    return _JOB_ACTIVE


def _make_executor(executor: str, workers: int) -> Executor:
    if executor == "process":
        return ProcessPoolExecutor(max_workers=workers)
    if executor == "thread":
        return ThreadPoolExecutor(max_workers=workers)
    raise ConfigError(f"executor must be one of {', '.join(EXECUTORS)}")


def _map_inline(fn: Callable[[Any], Any], items: list, on_result: ResultHook) -> Dict[Hashable, Any]:
    results: Dict[Hashable, Any] = {}
    for item in items:
        if cancel_requested():
            break
        results[item] = fn(item)
        if on_result is not None:
            on_result(item, results[item])
    return results


def _map_pooled(
    fn: Callable[[Any], Any],
    items: list,
    workers: int,
    executor: str,
    on_result: ResultHook,
) -> Dict[Hashable, Any]:
    results: Dict[Hashable, Any] = {}
    pending = iter(items)
    running = {}
    with _make_executor(executor, workers) as pool:
        # at most `workers` tasks in flight so cancel_job() can stop dispatch
        for item in pending:
            running[pool.submit(fn, item)] = item
            if len(running) >= workers:
                break
        while running:
            done, _ = wait(running, return_when=FIRST_COMPLETED)
            for fut in done:
                item = running.pop(fut)
                results[item] = fut.result()
                if on_result is not None:
                    on_result(item, results[item])
                if cancel_requested():
                    continue
                for nxt in pending:
                    running[pool.submit(fn, nxt)] = nxt
                    break
    return results


def parallel_map(
    fn: Callable[[Any], Any],
    items: Iterable[Hashable],
    *,
    workers: int = 1,
    executor: str = "process",
    on_result: ResultHook = None,
) -> Dict[Hashable, Any]:
    """Apply fn to every item on a pool of workers and return {item: result}.

    Results are keyed by item, so completion order does not matter to the
    caller. With workers == 1 everything runs in the calling thread. For the
    process executor, fn and the items must be picklable.

    on_result(item, result) is called in the calling thread, in completion
    order, as each result arrives. Once cancel_job() is called no further
    items are started and the results collected so far are returned.
    """
    global _JOB_ACTIVE
    if workers <= 0:
        raise ValueError("workers must be positive")
    items = list(items)

    with _JOB_LOCK:
        if _JOB_ACTIVE:
            raise JobStateError("A job is already running; wait for it to finish before starting a new one")
        _JOB_ACTIVE = True
        _CANCEL_EVENT.clear()

    try:
        if workers == 1 or len(items) <= 1:
            return _map_inline(fn, items, on_result)
        return _map_pooled(fn, items, min(workers, len(items)), executor, on_result)
    finally:
        _CANCEL_EVENT.clear()
        with _JOB_LOCK:
            _JOB_ACTIVE = False
