# tests/test_execution.py
from concurrent.futures import Future

import pytest

from pkg_fedauth.application.execution import await_result, new_single_worker_executor, single_worker_context
from pkg_fedauth.domain.exceptions import AcquisitionExecutionError, FedAuthInterruptedError


def test_context_releases_executor_on_success(executors):
    with single_worker_context(executors) as executor:
        assert executor.submit(lambda: 42).result() == 42

    assert executors.created[0].shutdown_calls == 1


def test_context_releases_executor_on_error(executors):
    with pytest.raises(KeyError):
        with single_worker_context(executors):
            raise KeyError("boom")

    assert executors.created[0].shutdown_calls == 1


def test_default_executor_has_one_worker():
    executor = new_single_worker_executor()
    try:
        assert executor._max_workers == 1
    finally:
        executor.shutdown()


def test_await_result_returns_value():
    future = Future()
    future.set_result("ok")
    assert await_result(future) == "ok"


def test_await_result_wraps_failure():
    original = ValueError("provider said no")
    future = Future()
    future.set_exception(original)

    with pytest.raises(AcquisitionExecutionError) as excinfo:
        await_result(future)

    assert excinfo.value.__cause__ is original
    assert "provider said no" in str(excinfo.value)


def test_await_result_timeout_cancels_future():
    future = Future()

    with pytest.raises(FedAuthInterruptedError) as excinfo:
        await_result(future, timeout=0.01)

    assert "0.01 seconds" in str(excinfo.value)
    assert future.cancelled()


def test_await_result_cancelled_future():
    future = Future()
    future.cancel()

    with pytest.raises(FedAuthInterruptedError):
        await_result(future, timeout=1)


def test_provider_timeout_error_is_not_a_wait_timeout():
    future = Future()
    future.set_exception(TimeoutError("socket timed out"))

    with pytest.raises(AcquisitionExecutionError):
        await_result(future, timeout=1)
