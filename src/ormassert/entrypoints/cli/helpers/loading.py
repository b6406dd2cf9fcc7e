"""Import user code named on the command line.

Objects are named as ``package.module:attribute`` (the attribute may be
dotted); modules as ``package.module``.
"""

import importlib
from types import ModuleType
from typing import Any

import click


def load_module(name: str) -> ModuleType:
    """Import a module by dotted name.

    Raises:
        click.BadParameter: If the module cannot be imported.
    """
    try:
        return importlib.import_module(name)
    except ImportError as e:
        raise click.BadParameter(f"Cannot import module {name!r}: {e}") from e


def load_object(dotted: str) -> Any:
    """Resolve ``package.module:attribute`` to the named object.

    Raises:
        click.BadParameter: If the path is malformed, the module cannot be
            imported, or the attribute does not exist.
    """
    module_name, sep, attr_path = dotted.partition(":")
    if not sep or not module_name or not attr_path:
        raise click.BadParameter(f"Expected MODULE:NAME, got {dotted!r}")
    obj: Any = load_module(module_name)
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise click.BadParameter(
                f"{module_name!r} has no attribute {attr_path!r}"
            ) from e
    return obj
