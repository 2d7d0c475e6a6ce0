"""Tests for anukit.toolkit helpers."""

import threading
from concurrent.futures import Future, ThreadPoolExecutor

import pytest

from anukit.core.result import Result
from anukit.toolkit import (
    ResultStream,
    run_async,
    safe_map,
    shutdown_executor,
    try_wrap_async,
    wrap_list,
)


class TestSafeMap:
    def test_success(self):
        assert safe_map("42", -1, int) == 42

    def test_failure_returns_fallback(self):
        assert safe_map("oops", -1, int) == -1

    def test_base_exception_propagates(self):
        def interrupt(_value):
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            safe_map("x", None, interrupt)


class TestWrapList:
    def test_returns_result_stream(self):
        assert isinstance(wrap_list([1, 2]), ResultStream)

    def test_all_success(self):
        results = list(wrap_list(["1", "2", "3"]).map_safe(int))
        assert len(results) == 3
        assert all(r.is_ok() for r in results)
        assert [r.unwrap_or_raise() for r in results] == [1, 2, 3]

    def test_error_in_middle_does_not_stop(self):
        results = list(wrap_list(["1", "x", "3"]).map_safe(int))
        assert len(results) == 3
        assert results[0].is_ok()
        assert results[1].is_err()
        assert results[2].is_ok()
        assert results[2].unwrap_or_raise() == 3

    def test_lazy(self):
        calls = []

        def mapper(value):
            calls.append(value)
            return value

        stream = wrap_list([1, 2, 3]).map_safe(mapper)
        assert calls == []
        next(stream)
        assert calls == [1]

    def test_empty(self):
        assert list(wrap_list([]).map_safe(int)) == []


class TestRunAsync:
    def test_shared_executor(self):
        future = run_async(lambda: "async-ok")
        assert isinstance(future, Future)
        assert future.result(timeout=5) == "async-ok"

    def test_runs_off_caller_thread(self):
        caller = threading.get_ident()
        assert run_async(threading.get_ident).result(timeout=5) != caller

    def test_explicit_executor(self):
        with ThreadPoolExecutor(max_workers=1, thread_name_prefix="custom") as pool:
            name = run_async(lambda: threading.current_thread().name, pool).result(timeout=5)
        assert name.startswith("custom")

    def test_failure_surfaces_through_future(self):
        future = run_async(lambda: 1 / 0)
        with pytest.raises(ZeroDivisionError):
            future.result(timeout=5)

    def test_shared_executor_uses_settings(self, monkeypatch):
        monkeypatch.setenv("ANUKIT_ASYNC_MAX_WORKERS", "2")
        name = run_async(lambda: threading.current_thread().name).result(timeout=5)
        assert name.startswith("anukit")

    def test_shutdown_then_resubmit(self):
        assert run_async(lambda: 1).result(timeout=5) == 1
        shutdown_executor()
        assert run_async(lambda: 2).result(timeout=5) == 2


class TestTryWrapAsync:
    def test_success(self):
        result = try_wrap_async(lambda: "async-wrap-ok").result(timeout=5)
        assert isinstance(result, Result)
        assert result.is_ok()
        assert result.try_get_ok() == "async-wrap-ok"

    def test_failure_is_captured(self):
        def crash():
            raise RuntimeError("crash")

        future = try_wrap_async(crash)
        result = future.result(timeout=5)
        assert future.exception() is None
        assert result.is_err()
        assert result.get_error_message() == "crash"
