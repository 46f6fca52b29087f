"""Shared helpers for threaded lifecycle tests."""

from __future__ import annotations

import time
from typing import Callable

import pytest


def wait_for(predicate: Callable[[], bool], timeout: float = 2.0) -> None:
    """Poll ``predicate`` until true or fail the test after ``timeout`` seconds."""

    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            pytest.fail("condition not reached in time")
        time.sleep(0.005)
