# tests/conftest.py
from concurrent.futures import ThreadPoolExecutor

import pytest


class RecordingExecutor(ThreadPoolExecutor):
    """Single-worker executor that counts shutdown calls."""

    def __init__(self) -> None:
        super().__init__(max_workers=1)
        self.shutdown_calls = 0

    def shutdown(self, wait=True, *, cancel_futures=False):
        self.shutdown_calls += 1
        super().shutdown(wait=wait, cancel_futures=cancel_futures)


@pytest.fixture
def executors():
    created = []

    def factory():
        executor = RecordingExecutor()
        created.append(executor)
        return executor

    factory.created = created
    yield factory

    for executor in created:
        ThreadPoolExecutor.shutdown(executor, wait=True)
