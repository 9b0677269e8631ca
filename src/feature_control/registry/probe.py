"""Registry – CapabilityProbe port and a static in-memory adapter."""
from __future__ import annotations

import abc
import dataclasses
from typing import Iterable

from feature_control.registry.descriptor import FlagCategory, FlagDescriptor
from feature_control.registry.registry import FeatureRegistry


class CapabilityProbe(abc.ABC):
    """Port: fill a fresh registry with flags and their backend defaults.

    Implementations decide the default ``enabled`` state per driver/backend
    and declare every ``requires`` edge.  They are called once per session.
    """

    @abc.abstractmethod
    def populate(self, registry: FeatureRegistry) -> None: ...


@dataclasses.dataclass(frozen=True)
class FlagSpec:
    """Declarative input for :class:`StaticCapabilityProbe`."""

    name: str
    enabled: bool = False
    category: FlagCategory = FlagCategory.FRONTEND_FEATURES
    requires: tuple[str, ...] = ()
    description: str = ""
    condition: str = ""


class StaticCapabilityProbe(CapabilityProbe):
    """Probe backed by a fixed list of :class:`FlagSpec`.

    Flags are registered in the given order first, then every ``requires``
    edge is declared, so a spec may depend on one listed after it.
    """

    def __init__(self, specs: Iterable[FlagSpec] = ()) -> None:
        self._specs: tuple[FlagSpec, ...] = tuple(specs)

    @property
    def specs(self) -> tuple[FlagSpec, ...]:
        return self._specs

    def populate(self, registry: FeatureRegistry) -> None:
        for spec in self._specs:
            registry.register(
                FlagDescriptor(
                    name=spec.name,
                    category=spec.category,
                    enabled=spec.enabled,
                    description=spec.description,
                    condition=spec.condition,
                )
            )
        for spec in self._specs:
            for required in spec.requires:
                registry.declare_dependency(spec.name, required)


__all__ = ["CapabilityProbe", "FlagSpec", "StaticCapabilityProbe"]
