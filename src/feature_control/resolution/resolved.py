"""Resolution – ResolvedFeatureSet, the read-only view served to callers."""
from __future__ import annotations

from typing import Any, Iterator

from feature_control.kernel.errors import RegistryError
from feature_control.registry import FeatureRegistry, FlagDescriptor


class ResolvedFeatureSet:
    """Final, immutable flag states in registration order.

    Wraps a frozen :class:`FeatureRegistry`; every accessor is read-only and
    safe to call from any number of threads.
    """

    def __init__(self, registry: FeatureRegistry) -> None:
        if not registry.frozen:
            raise RegistryError("Only a frozen registry can be exposed as resolved")
        self._registry = registry

    def count(self) -> int:
        return self._registry.count()

    def get(self, index: int) -> FlagDescriptor:
        return self._registry.get(index)

    def is_enabled(self, name: str) -> bool:
        return self._registry.lookup(name).enabled

    def names(self) -> list[str]:
        return self._registry.names()

    def enabled_names(self) -> list[str]:
        return [flag.name for flag in self._registry if flag.enabled]

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[FlagDescriptor]:
        return iter(self._registry)

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResolvedFeatureSet):
            return NotImplemented
        return list(self) == list(other)

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> dict[str, Any]:
        flags = [flag.to_dict() for flag in self]
        return {
            "count": len(flags),
            "enabled": sum(1 for flag in flags if flag["status"] == "enabled"),
            "flags": flags,
        }


__all__ = ["ResolvedFeatureSet"]
