"""
Shared fixtures for registry tests.
"""

import json

import pytest

from mcns.lookup import reset_registry


@pytest.fixture
def write_table(tmp_path):
    """Write a particle table JSON file and return its path."""
    def _write(rows, scheme="MCNS", version="test", name="particles.json"):
        path = tmp_path / name
        with open(path, "w") as f:
            json.dump({"scheme": scheme, "version": version, "particles": rows}, f)
        return str(path)
    return _write


@pytest.fixture
def restore_default_registry():
    """Rebuild the shared registry from the bundled table after the test."""
    yield
    reset_registry()
