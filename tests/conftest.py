"""Shared pytest fixtures for s3hygiene tests."""

import logging
from pathlib import Path

import pytest

from s3hygiene.logging_config import CliHandler

EXAMPLE_CONFIG = Path(__file__).resolve().parent.parent / "s3hygiene.example.yaml"


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Drop the handler the CLI installs on the root logger.

    ``configure_logging`` binds a handler to the current ``sys.stderr``,
    which under capsys is a stream that is closed once the test ends.
    """
    root = logging.getLogger()
    before = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler, CliHandler) and handler not in before:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def example_config_path() -> Path:
    """Path to the example configuration shipped at the repository root."""
    return EXAMPLE_CONFIG


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML string to a temporary config file and return its path."""

    def _write(text: str) -> Path:
        path = tmp_path / "s3hygiene.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
