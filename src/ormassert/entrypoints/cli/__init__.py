"""The ``ormassert`` command-line interface."""
