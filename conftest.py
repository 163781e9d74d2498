"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _clean_audit_env(monkeypatch):
    """Keep a developer's PASSWORD_AUDIT_* variables out of the test run."""
    for name in ("PASSWORD_AUDIT_INPUT", "PASSWORD_AUDIT_MODE", "PASSWORD_AUDIT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield
