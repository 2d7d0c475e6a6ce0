"""
Convenience helpers built on the try-boundary.

- ``safe_map``: apply a function, fall back to a default if it raises
- ``wrap_list(...).map_safe(f)``: lazy per-element ``try_wrap`` over a sequence
- ``run_async`` / ``try_wrap_async``: submit work to an executor

The async helpers accept any ``concurrent.futures.Executor``. Without one
they use a shared ``ThreadPoolExecutor`` sized by
``AnuKitSettings.async_max_workers``. Completion order between submissions
is not guaranteed, and cancellation follows the executor's own contract.

Examples:
    >>> safe_map("42", -1, int)
    42
    >>> safe_map("oops", -1, int)
    -1
    >>> [r.is_ok() for r in wrap_list(["1", "x", "3"]).map_safe(int)]
    [True, False, True]
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Callable, Generic, TypeVar

from anukit.core.logging import get_library_logger
from anukit.core.result import Result, try_wrap
from anukit.core.settings import get_settings

T = TypeVar("T")
R = TypeVar("R")

logger = get_library_logger(__name__)

_executor: ThreadPoolExecutor | None = None
_executor_lock = threading.Lock()


def safe_map(value: T, fallback: R, function: Callable[[T], R]) -> R:
    """Return ``function(value)``, or ``fallback`` if it raises an ``Exception``."""
    try:
        return function(value)
    except Exception:
        return fallback


class ResultStream(Generic[T]):
    """Wrapper around an iterable for per-element safe transforms."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T]):
        self._items = items

    def map_safe(self, mapper: Callable[[T], R]) -> Iterator[Result[R, Exception]]:
        """
        Lazily apply ``mapper`` to every element through ``try_wrap``.

        Yields one Result per input element, in input order. A failing
        element yields ERR and iteration continues.
        """
        for item in self._items:
            yield try_wrap(lambda: mapper(item))


def wrap_list(items: Iterable[T]) -> ResultStream[T]:
    """Wrap a sequence for ``map_safe``."""
    return ResultStream(items)


# =============================================================================
# ASYNC SUBMISSION
# =============================================================================


def _shared_executor() -> ThreadPoolExecutor:
    global _executor
    with _executor_lock:
        if _executor is None:
            workers = get_settings().async_max_workers
            _executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="anukit")
            logger.debug("executor_created", max_workers=workers)
        return _executor


def shutdown_executor(wait: bool = True) -> None:
    """Shut down the shared executor; the next submission creates a new one."""
    global _executor
    with _executor_lock:
        if _executor is not None:
            _executor.shutdown(wait=wait)
            _executor = None


def run_async(supplier: Callable[[], T], executor: Executor | None = None) -> Future[T]:
    """Submit ``supplier`` to ``executor`` (or the shared pool) and return its future."""
    pool = executor if executor is not None else _shared_executor()
    logger.debug("async_submitted", supplier=getattr(supplier, "__name__", repr(supplier)))
    return pool.submit(supplier)


def try_wrap_async(
    supplier: Callable[[], T], executor: Executor | None = None
) -> Future[Result[T, Exception]]:
    """Submit ``supplier`` under ``try_wrap``; the future resolves to a Result."""
    return run_async(lambda: try_wrap(supplier), executor)


__all__ = [
    "safe_map",
    "wrap_list",
    "ResultStream",
    "run_async",
    "try_wrap_async",
    "shutdown_executor",
]
