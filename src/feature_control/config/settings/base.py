"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass whose fields are read from prefixed environment variables.

    With ``_prefix = "FEATURE"`` the field ``overrides_enabled`` is read from
    ``FEATURE_OVERRIDES_ENABLED``; an empty prefix uses the bare field name.
    """

    _prefix: ClassVar[str] = ""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to reject values that parsed but cannot be used."""


__all__ = ["Settings"]
