"""Configuration utilities for ORMASSERT.

This module centralizes the environment variables read by the pytest plugin
and the CLI.
"""

import os

DB_URL_ENVVAR = "ORMASSERT_DB_URL"  # pragma: no mutate
DEFAULT_DB_URL = "sqlite+pysqlite:///:memory:"  # pragma: no mutate


class DatabaseUrlNotSetError(Exception):
    """Raised when ORMASSERT_DB_URL is required but not set."""

    def __init__(self) -> None:
        super().__init__(f"The {DB_URL_ENVVAR} environment variable is not set.")


def get_db_url(default: str | None = DEFAULT_DB_URL) -> str:
    """Get the database URL used for test sessions.

    Args:
        default: Value returned when `ORMASSERT_DB_URL` is unset or empty.
            Pass ``None`` to require the variable.

    Returns:
        The value of `ORMASSERT_DB_URL`, or ``default``.

    Raises:
        DatabaseUrlNotSetError: If `ORMASSERT_DB_URL` is not set and
            ``default`` is ``None``.
    """
    if url := os.environ.get(DB_URL_ENVVAR):
        return url
    if default is None:
        raise DatabaseUrlNotSetError
    return default
