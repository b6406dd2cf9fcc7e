"""Global pytest fixtures and suite marks for ORMASSERT."""

from pathlib import Path

import pytest

pytest_plugins = [
    "ormassert.pytest_plugin",
    "tests.fixtures.sqlite",
    "tests.fixtures.records",
]

TESTS_ROOT = Path(__file__).parent.resolve()
SUITES = ("unit", "integration", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Mark each test with the suite directory it lives under."""
    for item in items:
        path = item.path.resolve()
        if TESTS_ROOT not in path.parents:
            continue
        suite = path.relative_to(TESTS_ROOT).parts[0]
        if suite in SUITES and item.get_closest_marker(suite) is None:
            item.add_marker(getattr(pytest.mark, suite))
