"""Package loggers for Corchetes.

Every module logs through a child of the ``corchetes`` logger, so an
application controls the whole package with one call:

    >>> import logging
    >>> logging.getLogger("corchetes").setLevel(logging.DEBUG)

The root package logger carries a NullHandler. A library must not print
on its own; records reach output only when the application configures
logging.
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "corchetes"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the package logger for ``name``.

    Module names inside the package are used as-is; anything else is
    namespaced under ``corchetes.`` so it inherits the package level.

    Example:
        >>> get_logger("corchetes.dispatch").name
        'corchetes.dispatch'
        >>> get_logger("handlers").name
        'corchetes.handlers'
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
