"""Logging helpers for planeforge.

Library modules obtain their logger with ``logging.getLogger(__name__)``;
the package attaches a ``NullHandler`` so nothing is printed unless the
application configures logging. :func:`configure_logging` is a convenience
for scripts and debugging sessions.
"""

from __future__ import annotations

import logging
import sys
from typing import Union

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')
_ROOT = 'planeforge'


def _to_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: {level!r}")
    return resolved


def configure_logging(level: Union[str, int] = 'INFO', stream=None) -> logging.Logger:
    """Attach a single stream handler to the ``planeforge`` logger.

    The process root logger is left untouched. Calling this repeatedly
    replaces the handler instead of stacking new ones.
    """
    resolved = _to_level(level)
    logger = logging.getLogger(_ROOT)
    for handler in list(logger.handlers):
        if getattr(handler, '_planeforge_handler', False):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(stream=stream or sys.stderr)
    handler.setFormatter(_FORMAT)
    handler._planeforge_handler = True
    logger.addHandler(handler)
    logger.setLevel(resolved)
    logger.propagate = False
    return logger


__all__ = ['configure_logging']
