"""
Root conftest.py: shared Pytest fixtures.

Provides:
- Sample configuration values (see tests/payloads.py for the types).
- A loguru sink fixture for asserting on emitted log records.
- A fixture that disables the YAML format as if PyYAML were not installed.
"""

from __future__ import annotations

import importlib.util
from typing import Any, Dict, Generator, List

import pytest
from loguru import logger

from opzioni.formats import resolver
from tests.payloads import AppSettings, DatabaseSettings


# ---------------------------------------------------------------------------
# Sample Values
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_settings() -> AppSettings:
    """Return a non-default AppSettings value."""
    return AppSettings(
        name="bench",
        debug=True,
        retries=7,
        timeout_sec=0.75,
        tags=["alpha", "beta"],
        database=DatabaseSettings(host="db.internal", port=6543),
    )


@pytest.fixture
def sample_settings_dict() -> Dict[str, Any]:
    """Return sample_settings as plain builtins."""
    return {
        "name": "bench",
        "debug": True,
        "retries": 7,
        "timeout_sec": 0.75,
        "tags": ["alpha", "beta"],
        "database": {"host": "db.internal", "port": 6543},
    }


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


@pytest.fixture
def log_records() -> Generator[List[Dict[str, Any]], None, None]:
    """Capture loguru records emitted during a test."""
    records: List[Dict[str, Any]] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="TRACE")
    yield records
    logger.remove(handler_id)


# ---------------------------------------------------------------------------
# Format Availability
# ---------------------------------------------------------------------------


@pytest.fixture
def yaml_not_installed(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Make the resolver believe PyYAML is missing."""
    real_find_spec = importlib.util.find_spec

    def fake_find_spec(name: str, *args: Any, **kwargs: Any) -> Any:
        if name == "yaml":
            return None
        return real_find_spec(name, *args, **kwargs)

    monkeypatch.setattr(importlib.util, "find_spec", fake_find_spec)
    resolver.enabled_formats.cache_clear()
    yield
    resolver.enabled_formats.cache_clear()
