"""Entry points (CLI) for ORMASSERT."""
