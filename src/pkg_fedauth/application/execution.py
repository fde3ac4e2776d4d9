from __future__ import annotations

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor, wait
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, TypeVar

from ..domain.exceptions import AcquisitionExecutionError, FedAuthInterruptedError
from ..domain.messages import format_message

logger = logging.getLogger(__name__)

T = TypeVar("T")

ExecutorFactory = Callable[[], Executor]


def new_single_worker_executor() -> Executor:
    return ThreadPoolExecutor(max_workers=1, thread_name_prefix="fedauth")


@contextmanager
def single_worker_context(factory: ExecutorFactory = new_single_worker_executor) -> Iterator[Executor]:
    """
    Provide a fresh executor owned by a single acquisition.

    The executor is shut down exactly once, whatever way the block exits.
    Shutdown does not wait for the worker thread.
    """
    executor = factory()
    try:
        yield executor
    finally:
        logger.debug("Shutting down acquisition executor")
        executor.shutdown(wait=False, cancel_futures=True)


def await_result(future: Future[T], timeout: Optional[float] = None) -> T:
    """
    Block until `future` completes and return its result.

    Raises:
        FedAuthInterruptedError   the wait timed out or the future was cancelled
        AcquisitionExecutionError the future completed with an exception
    """
    if not future.cancelled():
        done, _ = wait([future], timeout=timeout)
        if not done:
            future.cancel()
            raise FedAuthInterruptedError(format_message("R_FedAuthTimeout", timeout))

    if future.cancelled():
        raise FedAuthInterruptedError(format_message("R_FedAuthCancelled"))

    exc = future.exception()
    if exc is not None:
        raise AcquisitionExecutionError(exc) from exc

    return future.result()
