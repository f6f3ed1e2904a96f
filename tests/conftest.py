"""Shared test fixtures for the revision recorder test suite."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog

from revision_recorder.stores import ConnectionRegistry, InMemoryConnection


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "revisions.toml": "app_name = 'test'",
                "production.toml": "[revisions.defaults]\\ncollection = 'history'",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            toml_file = test_config_dir / filename
            toml_file.write_text(content)

    return _create_toml_files


@pytest.fixture
def connection() -> InMemoryConnection:
    """Fresh in-memory connection for each test."""
    return InMemoryConnection()


@pytest.fixture
def registry(connection: InMemoryConnection) -> ConnectionRegistry:
    """Registry with the in-memory connection bound as 'mongodb'."""
    registry = ConnectionRegistry()
    registry.register("mongodb", connection)
    return registry


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Restore structlog defaults after each test.

    Keeps loggers configured by one test from writing to a stream
    another test has already closed.
    """
    yield
    structlog.reset_defaults()
