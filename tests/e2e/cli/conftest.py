"""Fixtures for end-to-end CLI tests."""

import logging

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the CLI's ``logging.basicConfig(force=True)`` after each test.

    The CLI binds its console handler to the runner's (short-lived) stderr.
    """
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
