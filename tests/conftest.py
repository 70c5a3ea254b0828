"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_yaml():
    """Sample YAML configuration for testing."""
    return (
        "server:\n"
        "  host: localhost\n"
        "  port: 8080\n"
        "  debug: false\n"
        "database:\n"
        "  url: jdbc:postgresql://db:5432/app\n"
        "  pool:\n"
        "    size: 10\n"
        "    timeout: 2.5\n"
        "name: demo app\n"
    )


@pytest.fixture
def sample_properties():
    """Sample properties configuration for testing."""
    return (
        "# application settings\n"
        "server.host=localhost\n"
        "server.port=8080\n"
        "server.debug=false\n"
        "! legacy comment style\n"
        "database.pool.size = 10\n"
        "name=demo app\n"
    )


@pytest.fixture
def sample_json():
    """Sample JSON configuration for testing."""
    return (
        '{\n'
        '  "server": {"host": "localhost", "port": 8080, "debug": false},\n'
        '  "features": ["auth", "metrics"],\n'
        '  "owner": null\n'
        '}'
    )


@pytest.fixture
def write_file(temp_dir):
    """Write a file into the temporary directory and return its path."""
    def _write(name: str, content: str) -> Path:
        path = temp_dir / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
