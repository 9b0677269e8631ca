"""Observability – structured logging for resolution and sessions."""
from feature_control.observability.logging import JsonLoggerFactory, SessionProcessor, get_logger

__all__ = ["JsonLoggerFactory", "SessionProcessor", "get_logger"]
