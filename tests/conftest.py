# tests/conftest.py
from __future__ import annotations

import pytest

from engines import api
from engines.english import Engine


@pytest.fixture(scope="function")
def engine() -> Engine:
    """A fresh engine with hard defaults."""
    return Engine()


@pytest.fixture(scope="function")
def default_engine():
    """
    The shared engine behind the package-level functions, reset after the
    test so configuration changes do not leak into other tests.
    """
    shared = api.default_engine()
    shared.reset()
    yield shared
    shared.reset()
