"""Logger access for Lexis modules.

Every logger lives under the "lexis" namespace so applications can tune the
whole scanner with one call. The package logger carries a NullHandler: rule
warnings stay silent unless the application configures logging.

Example:
    >>> from lexis.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.warning("Skipping invalid rule")
"""

from __future__ import annotations

import logging

_ROOT = "lexis"

logging.getLogger(_ROOT).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get the namespaced logger for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger under "lexis."

    Example:
        >>> get_logger("mymodule").name
        'lexis.mymodule'
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
