"""Session – attribute kinds accepted by the query surface."""
from __future__ import annotations

from enum import Enum

from feature_control.kernel.errors import InvalidAttributeError


class FlagAttribute(str, Enum):
    """Per-flag string attributes."""

    NAME = "name"
    CATEGORY = "category"
    STATUS = "status"

    @classmethod
    def coerce(cls, value: object) -> "FlagAttribute":
        """Accept a member or its string value; anything else is rejected."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidAttributeError(value)


class SessionAttribute(str, Enum):
    """Integer attributes served by the generic session attribute path."""

    FEATURE_COUNT = "feature_count"

    @classmethod
    def coerce(cls, value: object) -> "SessionAttribute":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidAttributeError(value)


__all__ = ["FlagAttribute", "SessionAttribute"]
