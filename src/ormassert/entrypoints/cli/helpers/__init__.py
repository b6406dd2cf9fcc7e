"""Helpers shared by the ORMASSERT CLI commands."""

from .loading import load_module, load_object
from .log_level_parser import parse_log_level

__all__ = ["load_module", "load_object", "parse_log_level"]
