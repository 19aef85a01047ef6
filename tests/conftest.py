"""Pytest configuration for the test environment.

- Forces ``DISABLE_FILE_LOGS=1`` to avoid writing log files during tests.
- Ensures the project root is available on ``sys.path`` for imports.
- Isolates ``AUTORUN_*`` environment variables and the UI language per test.
"""

import asyncio
import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("DISABLE_FILE_LOGS", "1")  # Avoid creating log files during tests

ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from autorun import i18n  # noqa: E402
from autorun.catalog import IntegrationCatalog, IntegrationDescriptor  # noqa: E402

_ENV_VARS = (
    "AUTORUN_LANG",
    "AUTORUN_DIALOG_VARIANT",
    "AUTORUN_CATALOG",
    "AUTORUN_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Start every test with English texts and no AUTORUN_* overrides."""
    for var in _ENV_VARS:
        # setenv first so teardown removes anything a .env file loaded later
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    monkeypatch.setattr(i18n, "LANG", "en")


@pytest.fixture
def http_catalog():
    """Single-entry catalog used by the concrete dialog scenarios."""
    return IntegrationCatalog(
        [
            IntegrationDescriptor(
                id="http",
                title="HTTP Client",
                description="Make web requests",
                example="http.get(url)",
            )
        ]
    )


@pytest.fixture
def abc_catalog():
    """Three-entry catalog with distinct examples."""
    return IntegrationCatalog(
        IntegrationDescriptor(
            id=name, title=name.upper(), description=f"{name} desc", example=f"{name}()"
        )
        for name in ("alpha", "beta", "gamma")
    )


@pytest.fixture
def run_async():
    """Run a coroutine factory to completion; Textual pilots need an event loop."""

    def _run(factory):
        return asyncio.run(factory())

    return _run
