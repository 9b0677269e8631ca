"""Registry – FeatureRegistry.

An insertion-ordered, index-addressable collection of :class:`FlagDescriptor`
plus the acyclic ``requires`` graph between them.  The registry is built
single-threaded by a capability probe, mutated by resolution, then frozen.
"""
from __future__ import annotations

import dataclasses
from typing import Iterator

from feature_control.kernel.errors import (
    DependencyCycleError,
    DuplicateNameError,
    IndexOutOfRangeError,
    InvalidCategoryError,
    InvalidFlagNameError,
    RegistryFrozenError,
    UnknownFlagError,
)
from feature_control.registry.descriptor import FlagCategory, FlagDescriptor


class FeatureRegistry:
    """Ordered registry of feature flags owned by a single session."""

    def __init__(self) -> None:
        self._flags: list[FlagDescriptor] = []
        self._index: dict[str, int] = {}
        self._sealed = False
        self._frozen = False

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def register(self, descriptor: FlagDescriptor) -> int:
        """Append *descriptor* and return its index.

        Any ``requires`` already on the descriptor must name flags registered
        earlier.  A category given as its display token (``"Vulkan features"``)
        is stored as the matching :class:`FlagCategory`.
        """
        self._check_writable()
        name = descriptor.name
        if not isinstance(name, str) or not name:
            raise InvalidFlagNameError(name)
        if name in self._index:
            raise DuplicateNameError(name)
        if not isinstance(descriptor.category, FlagCategory):
            try:
                category = FlagCategory(descriptor.category)
            except (ValueError, TypeError):
                raise InvalidCategoryError(name, descriptor.category) from None
            descriptor = dataclasses.replace(descriptor, category=category)
        for required in descriptor.requires:
            if required not in self._index:
                raise UnknownFlagError(required)
        self._index[name] = len(self._flags)
        self._flags.append(descriptor)
        return self._index[name]

    def declare_dependency(self, flag_name: str, required_flag_name: str) -> None:
        """Record that *flag_name* requires *required_flag_name*."""
        self._check_writable()
        position = self.index_of(flag_name)
        self.index_of(required_flag_name)
        path = self._path(required_flag_name, flag_name)
        if path is not None:
            raise DependencyCycleError([flag_name, *path])
        self._flags[position] = self._flags[position].with_requirement(required_flag_name)

    def seal(self) -> None:
        """End construction; flag states may still change until :meth:`freeze`."""
        self._sealed = True

    def freeze(self) -> None:
        self._sealed = True
        self._frozen = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, index: int) -> FlagDescriptor:
        count = len(self._flags)
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < count:
            raise IndexOutOfRangeError(index, count)
        return self._flags[index]

    def count(self) -> int:
        return len(self._flags)

    def index_of(self, name: str) -> int:
        try:
            return self._index[name]
        except KeyError:
            raise UnknownFlagError(name) from None

    def lookup(self, name: str) -> FlagDescriptor:
        return self._flags[self.index_of(name)]

    def names(self) -> list[str]:
        return [flag.name for flag in self._flags]

    def dependents_of(self, name: str) -> list[str]:
        """Names of flags that directly require *name*, in registry order."""
        self.index_of(name)
        return [flag.name for flag in self._flags if name in flag.requires]

    def __len__(self) -> int:
        return len(self._flags)

    def __iter__(self) -> Iterator[FlagDescriptor]:
        return iter(list(self._flags))

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __repr__(self) -> str:
        return f"FeatureRegistry(count={len(self._flags)}, frozen={self._frozen})"

    # ------------------------------------------------------------------
    # Resolution hook
    # ------------------------------------------------------------------

    def set_enabled(self, index: int, enabled: bool, *, overridden: bool | None = None) -> bool:
        """Replace the flag at *index* with its updated state.

        Returns ``True`` when the enabled state actually changed.  Only the
        resolution pipeline calls this; a frozen registry accepts the call
        solely when nothing would change.
        """
        current = self.get(index)
        updated = current.with_enabled(enabled, overridden=overridden)
        if updated == current:
            return False
        if self._frozen:
            raise RegistryFrozenError(f"Cannot change flag '{current.name}' after resolution")
        self._flags[index] = updated
        return current.enabled != enabled

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_writable(self) -> None:
        if self._sealed:
            raise RegistryFrozenError("Registry is sealed; construction has ended")

    def _path(self, start: str, goal: str) -> list[str] | None:
        """Depth-first search along ``requires`` edges from *start* to *goal*."""
        stack: list[tuple[str, list[str]]] = [(start, [start])]
        seen: set[str] = set()
        while stack:
            name, path = stack.pop()
            if name == goal:
                return path
            if name in seen:
                continue
            seen.add(name)
            for required in self._flags[self._index[name]].requires:
                stack.append((required, [*path, required]))
        return None


__all__ = ["FeatureRegistry"]
