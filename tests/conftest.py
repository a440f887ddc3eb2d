"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration and a few small test
doubles shared across suites. Fixtures here are autouse unless noted.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Any

import pytest

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class CallCounter:
    """Callable that counts invocations and applies an optional transform.

    Use to prove a transform was (or was not) invoked by a short-circuiting
    operation.
    """

    calls: int = 0
    transform: Any = None

    def __call__(self, value: Any) -> Any:
        self.calls += 1
        if self.transform is None:
            return value
        return self.transform(value)


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_resultkit_env(request, monkeypatch):
    """Ensure a clean RESULTKIT_* environment for each test.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("RESULTKIT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def dev_validation(monkeypatch):
    """Enable dev-time argument validation for the duration of a test."""
    monkeypatch.setenv("RESULTKIT_VALIDATE", "1")


@pytest.fixture
def counter() -> CallCounter:
    """Return a fresh identity CallCounter."""
    return CallCounter()


@pytest.fixture
def make_counter() -> type[CallCounter]:
    """Return the CallCounter class for tests that need a custom transform."""
    return CallCounter


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "allow_env_pollution: keep RESULTKIT_* variables from the host"
    )
