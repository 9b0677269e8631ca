"""Config settings – FeatureControlSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from feature_control.config.settings.base import Settings
from feature_control.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class FeatureControlSettings(Settings):
    """Override lists and matching options read from the environment.

    ``FEATURE_OVERRIDES_ENABLED=prefer_d*:clamp_point_size`` enables every flag
    starting with ``prefer_d`` plus ``clamp_point_size``.  Environment
    overrides are appended to whatever the caller passes at session creation.
    """

    _prefix: ClassVar[str] = "FEATURE"

    overrides_enabled: list[str] = dataclasses.field(default_factory=list)
    overrides_disabled: list[str] = dataclasses.field(default_factory=list)
    wildcard_ignores_separators: bool = False

    def _validate(self) -> None:
        for field_name in ("overrides_enabled", "overrides_disabled"):
            for pattern in getattr(self, field_name):
                if not isinstance(pattern, str) or not pattern:
                    raise InvalidSettingValueError(field_name, pattern, "patterns must be non-empty strings")


__all__ = ["FeatureControlSettings"]
