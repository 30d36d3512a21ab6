from __future__ import annotations

import logging

import pytest


def pytest_configure() -> None:
    logging.basicConfig(level=logging.ERROR)  # set log levels very high for tests


@pytest.fixture
def chained() -> RuntimeError:
    try:
        try:
            raise KeyError("k")
        except KeyError as e:
            msg = "outer"
            raise RuntimeError(msg) from e
    except RuntimeError as e:
        return e
