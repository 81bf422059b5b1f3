"""Pytest configuration for integration tests."""

import tempfile
from pathlib import Path

import pytest


def pytest_collection_modifyitems(items):
    """Mark every test under integration_tests/ as an integration test."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def data_dir(monkeypatch):
    """Isolated FITAI_DATA_DIR for a whole pipeline run."""
    with tempfile.TemporaryDirectory() as tmpdir:
        monkeypatch.setenv("FITAI_DATA_DIR", tmpdir)
        yield Path(tmpdir)
