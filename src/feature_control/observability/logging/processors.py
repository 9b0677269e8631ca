"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

_SESSION_KEY = "session_id"


class SessionProcessor:
    """structlog processor that copies the active session id into events.

    :class:`~feature_control.session.Session` binds ``session_id`` with
    :func:`structlog.contextvars.bound_contextvars` while it initialises; this
    processor makes sure the key is present (``None`` outside a session) so
    JSON log lines always carry the same shape.
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        if _SESSION_KEY not in event_dict:
            bound = structlog.contextvars.get_contextvars()
            event_dict[_SESSION_KEY] = bound.get(_SESSION_KEY)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, optionally bound to *initial_values*."""
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["SessionProcessor", "get_logger"]
