"""
Pytest configuration and shared fixtures for PrintNode client tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from fixtures import FakeTransport  # noqa: E402

from printnode import ApiKeyCredentials, RequestDispatcher  # noqa: E402


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def transport():
    """A fake transport with an empty response queue."""
    return FakeTransport()


@pytest.fixture
def credentials():
    return ApiKeyCredentials("test-api-key")


@pytest.fixture
def dispatcher(credentials, transport):
    """A dispatcher wired to the fake transport."""
    return RequestDispatcher(credentials, transport=transport)


@pytest.fixture(autouse=True)
def _clean_printnode_env(monkeypatch):
    """Keep a developer's PRINTNODE_* variables out of the tests."""
    import os
    for key in list(os.environ):
        if key.startswith("PRINTNODE_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
