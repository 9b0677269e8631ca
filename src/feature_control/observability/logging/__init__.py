"""Observability – structlog configuration and logger helpers."""
from feature_control.observability.logging.factory import JsonLoggerFactory
from feature_control.observability.logging.processors import SessionProcessor, get_logger

__all__ = ["JsonLoggerFactory", "SessionProcessor", "get_logger"]
