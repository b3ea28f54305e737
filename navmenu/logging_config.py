"""Logging setup for navmenu command line use and tests."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union


_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_level(level: Union[int, str]) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    level: Union[int, str] = logging.INFO, stream: Optional[logging.Handler] = None
) -> None:
    """Install a single formatted handler on the root logger.

    Parameters
    ----------
    level:
        Numeric level or level name applied to the root logger.
    stream:
        Handler to install. Defaults to a handler writing to ``sys.stderr`` so
        that rendered markup on stdout stays clean.
    """

    root_logger = logging.getLogger()
    handler: logging.Handler = stream if stream is not None else logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    # Repeated calls replace the handler instead of stacking duplicates.
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)

    root_logger.setLevel(resolve_level(level))
    root_logger.addHandler(handler)


__all__ = ["configure_logging", "resolve_level"]
