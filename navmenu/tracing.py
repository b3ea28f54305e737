"""Structured logging helpers for menu construction and rendering."""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

__all__ = ["log_event", "safe_json", "trace"]


def safe_json(value: Any) -> Any:
    """Return ``value`` converted into something ``json.dumps`` accepts."""

    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (list, tuple, set, frozenset)):
        return [safe_json(item) for item in value]
    if isinstance(value, dict):
        return {str(key): safe_json(val) for key, val in value.items()}
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return safe_json(to_dict())
    return repr(value)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Emit ``event`` and its non-empty ``fields`` as a single JSON log line."""

    if not logger.isEnabledFor(level):
        return
    payload: Dict[str, Any] = {"event": event}
    payload.update({key: safe_json(value) for key, value in fields.items() if value is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, sort_keys=True))


@contextmanager
def trace(name: str, *, logger: Optional[logging.Logger] = None, **fields: Any) -> Iterator[Dict[str, Any]]:
    """Log start, end and failure of a block together with its duration.

    The yielded dictionary can be filled with extra fields that are attached
    to the closing event.
    """

    logger = logger or logging.getLogger("navmenu.trace")
    started = time.perf_counter()
    extra: Dict[str, Any] = {}
    log_event(logger, logging.INFO, "trace.start", trace=name, **fields)
    try:
        yield extra
    except Exception as exc:
        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.error(
            json.dumps(
                {"event": "trace.error", "trace": name, "duration_ms": duration_ms, "error": repr(exc)},
                sort_keys=True,
            ),
            exc_info=True,
        )
        raise
    duration_ms = round((time.perf_counter() - started) * 1000, 2)
    closing = dict(fields)
    closing.update(extra)
    closing["duration_ms"] = duration_ms
    log_event(logger, logging.INFO, "trace.end", trace=name, **closing)
