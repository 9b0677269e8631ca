"""Session – handle-based query functions.

These accept ``None`` as a session handle so callers holding the result of a
failed creation get :class:`InvalidSessionError` instead of an
``AttributeError``.
"""
from __future__ import annotations

from feature_control.kernel.errors import InvalidSessionError
from feature_control.session.attributes import FlagAttribute, SessionAttribute
from feature_control.session.session import Session


def _require(session: Session | None) -> Session:
    if not isinstance(session, Session) or not session.is_valid:
        raise InvalidSessionError()
    return session


def get_flag_count(session: Session | None) -> int:
    return _require(session).flag_count()


def get_flag_attribute(session: Session | None, index: int, attribute: FlagAttribute | str) -> str:
    """Name, category token or ``"enabled"``/``"disabled"`` of flag *index*.

    Raises:
        InvalidSessionError: *session* is missing, uninitialised or terminated.
        InvalidAttributeError: *attribute* is not a :class:`FlagAttribute`.
        IndexOutOfRangeError: *index* is outside ``[0, count)``.
    """
    return _require(session).flag_attribute(index, attribute)


def get_flag_count_attribute(session: Session | None) -> int:
    """Same value as :func:`get_flag_count`, via the integer attribute path."""
    return _require(session).query_attribute(SessionAttribute.FEATURE_COUNT)


__all__ = ["get_flag_attribute", "get_flag_count", "get_flag_count_attribute"]
