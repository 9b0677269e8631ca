"""Registry – FlagDescriptor value object and its reporting enums."""
from __future__ import annotations

import dataclasses
from enum import Enum


class FlagCategory(str, Enum):
    """Reporting group of a flag; values are the stable display tokens."""

    FRONTEND_FEATURES = "Frontend features"
    FRONTEND_WORKAROUNDS = "Frontend workarounds"
    OPENGL_WORKAROUNDS = "OpenGL workarounds"
    OPENGL_FEATURES = "OpenGL features"
    D3D_WORKAROUNDS = "D3D workarounds"
    VULKAN_FEATURES = "Vulkan features"
    VULKAN_WORKAROUNDS = "Vulkan workarounds"
    VULKAN_APP_WORKAROUNDS = "Vulkan app workarounds"
    METAL_FEATURES = "Metal features"
    METAL_WORKAROUNDS = "Metal workarounds"


class FlagStatus(str, Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"

    @classmethod
    def of(cls, enabled: bool) -> "FlagStatus":
        return cls.ENABLED if enabled else cls.DISABLED


@dataclasses.dataclass(frozen=True)
class FlagDescriptor:
    """A named boolean capability or workaround toggle.

    Descriptors are immutable; the registry swaps in an updated copy
    (see :meth:`with_enabled`) while resolution is running.
    """

    name: str
    category: FlagCategory = FlagCategory.FRONTEND_FEATURES
    enabled: bool = False
    requires: frozenset[str] = frozenset()
    description: str = ""
    condition: str = ""
    overridden: bool = False

    @property
    def status(self) -> FlagStatus:
        return FlagStatus.of(self.enabled)

    def with_enabled(self, enabled: bool, *, overridden: bool | None = None) -> "FlagDescriptor":
        return dataclasses.replace(
            self,
            enabled=enabled,
            overridden=self.overridden if overridden is None else overridden,
        )

    def with_requirement(self, name: str) -> "FlagDescriptor":
        return dataclasses.replace(self, requires=self.requires | {name})

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "category": self.category.value,
            "status": self.status.value,
            "overridden": self.overridden,
            "requires": sorted(self.requires),
            "description": self.description,
            "condition": self.condition,
        }


__all__ = ["FlagCategory", "FlagDescriptor", "FlagStatus"]
