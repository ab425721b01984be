# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Logging helper for genro-tagtree.

The library only creates loggers; handlers and levels are left to the
application.

Example:
    >>> from genro_tagtree.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering document")
"""

from __future__ import annotations

import logging

_ROOT = "genro_tagtree"


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``genro_tagtree``.

    Args:
        name: Logger name (typically __name__).

    Returns:
        logging.Logger instance.

    Example:
        >>> get_logger("render").name
        'genro_tagtree.render'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
