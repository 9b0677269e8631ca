"""Session – owns one feature registry from probe to teardown.

A session mirrors the lifetime of a graphics context: it is created with
the caller's override lists, resolves its flags exactly once during
:meth:`Session.initialize`, serves read-only queries, and drops everything
on :meth:`Session.terminate`.
"""
from __future__ import annotations

import uuid
from typing import Iterable, Union

import structlog

from feature_control.config import EnvSettingsLoader, FeatureControlSettings
from feature_control.kernel.errors import BaseError, InvalidSessionError
from feature_control.observability.logging import get_logger
from feature_control.registry import CapabilityProbe, FeatureRegistry
from feature_control.resolution import FeatureResolver, OverridePattern, OverrideRequest, ResolvedFeatureSet
from feature_control.session.attributes import FlagAttribute, SessionAttribute

_log = get_logger(__name__)

Patterns = Iterable[Union[str, OverridePattern, None]]


class Session:
    """Session-scoped owner of a :class:`ResolvedFeatureSet`.

    Args:
        probe: Capability probe that registers flags and their defaults.
        enabled_overrides: Patterns to force on; read up to a ``None`` sentinel.
        disabled_overrides: Patterns to force off; read up to a ``None`` sentinel.
        settings: Matching options and extra overrides.  Loaded from the
            environment with :class:`EnvSettingsLoader` when omitted.

    Usage::

        session = Session(probe, disabled_overrides=["supports_renderpass2", None])
        session.initialize()
        session.flag_attribute(0, FlagAttribute.STATUS)   # "enabled"
    """

    def __init__(
        self,
        probe: CapabilityProbe,
        *,
        enabled_overrides: Patterns | None = None,
        disabled_overrides: Patterns | None = None,
        settings: FeatureControlSettings | None = None,
    ) -> None:
        self.id = uuid.uuid4().hex
        self._probe = probe
        self._request = OverrideRequest.from_lists(enabled_overrides, disabled_overrides)
        self._settings = settings
        self._resolved: ResolvedFeatureSet | None = None
        self._terminated = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> "Session":
        """Probe, apply overrides and close dependencies.

        Errors from the probe or registry construction propagate; the session
        then stays invalid and every query raises :class:`InvalidSessionError`.
        """
        if self._terminated:
            raise InvalidSessionError("Session has been terminated")
        if self._resolved is not None:
            return self

        with structlog.contextvars.bound_contextvars(session_id=self.id):
            try:
                settings = self._settings or EnvSettingsLoader().load(FeatureControlSettings)
                request = self._request.merge(
                    OverrideRequest.from_lists(settings.overrides_enabled, settings.overrides_disabled)
                )
                registry = FeatureRegistry()
                self._probe.populate(registry)
                resolved = FeatureResolver(settings).resolve(registry, request)
            except BaseError as exc:
                _log.error("session_initialize_failed", **exc.log_fields())
                raise
            except Exception as exc:
                _log.error("session_initialize_failed", error_type=type(exc).__name__, message=str(exc))
                raise
            self._resolved = resolved
            _log.info("session_initialized", flags=resolved.count())
        return self

    def terminate(self) -> None:
        self._resolved = None
        self._terminated = True
        _log.info("session_terminated", session_id=self.id)

    @property
    def is_valid(self) -> bool:
        return self._resolved is not None

    @property
    def features(self) -> ResolvedFeatureSet:
        """The resolved flags; raises when the session is not usable."""
        if self._resolved is None:
            raise InvalidSessionError()
        return self._resolved

    def __enter__(self) -> "Session":
        return self.initialize()

    def __exit__(self, *exc: object) -> None:
        self.terminate()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def flag_count(self) -> int:
        return self.features.count()

    def flag_attribute(self, index: int, attribute: FlagAttribute | str) -> str:
        """String value of *attribute* for the flag at *index*."""
        features = self.features
        kind = FlagAttribute.coerce(attribute)
        flag = features.get(index)
        if kind is FlagAttribute.NAME:
            return flag.name
        if kind is FlagAttribute.CATEGORY:
            return flag.category.value
        return flag.status.value

    def query_attribute(self, attribute: SessionAttribute | str) -> int:
        """Integer session attribute through the generic query path."""
        features = self.features
        SessionAttribute.coerce(attribute)
        return features.count()

    def __repr__(self) -> str:
        return f"Session(id={self.id!r}, valid={self.is_valid})"


__all__ = ["Session"]
