"""Session – session lifecycle and the read-only flag query surface."""
from feature_control.session.attributes import FlagAttribute, SessionAttribute
from feature_control.session.session import Session
from feature_control.session.query import (
    get_flag_attribute,
    get_flag_count,
    get_flag_count_attribute,
)

__all__ = [
    "FlagAttribute",
    "Session",
    "SessionAttribute",
    "get_flag_attribute",
    "get_flag_count",
    "get_flag_count_attribute",
]
