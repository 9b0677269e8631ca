"""Resolution – OverrideRequest and the override pass."""
from __future__ import annotations

import dataclasses
from typing import Iterable

from feature_control.observability.logging import get_logger
from feature_control.registry import FeatureRegistry
from feature_control.resolution.pattern import OverridePattern

_log = get_logger(__name__)


def _read_patterns(items: Iterable[str | OverridePattern | None] | None) -> tuple[OverridePattern, ...]:
    """Read patterns up to the first ``None`` sentinel."""
    patterns: list[OverridePattern] = []
    for item in items or ():
        if item is None:
            break
        patterns.append(item if isinstance(item, OverridePattern) else OverridePattern.parse(item))
    return tuple(patterns)


@dataclasses.dataclass(frozen=True)
class OverrideRequest:
    """Force-enable and force-disable pattern sets for one resolution.

    When a flag is matched by both sets it ends up enabled.
    """

    force_enable: tuple[OverridePattern, ...] = ()
    force_disable: tuple[OverridePattern, ...] = ()

    @classmethod
    def from_lists(
        cls,
        enabled: Iterable[str | OverridePattern | None] | None = None,
        disabled: Iterable[str | OverridePattern | None] | None = None,
    ) -> "OverrideRequest":
        """Build a request from two sentinel-terminated pattern lists.

        Each list is read until the first ``None``; a missing list applies no
        overrides from that side.
        """
        return cls(force_enable=_read_patterns(enabled), force_disable=_read_patterns(disabled))

    def merge(self, other: "OverrideRequest") -> "OverrideRequest":
        return OverrideRequest(
            force_enable=self.force_enable + other.force_enable,
            force_disable=self.force_disable + other.force_disable,
        )

    @property
    def empty(self) -> bool:
        return not self.force_enable and not self.force_disable


def _apply(
    registry: FeatureRegistry,
    patterns: tuple[OverridePattern, ...],
    enabled: bool,
    ignore_separators: bool,
) -> list[str]:
    matched: list[str] = []
    if not patterns:
        return matched
    for index in range(registry.count()):
        flag = registry.get(index)
        hit = next((p for p in patterns if p.matches(flag.name, ignore_separators=ignore_separators)), None)
        if hit is None:
            continue
        registry.set_enabled(index, enabled, overridden=True)
        matched.append(flag.name)
        _log.debug(
            "feature_override_applied",
            flag=flag.name,
            pattern=hit.text,
            enabled=enabled,
            previous=flag.enabled,
        )
    return matched


def apply_overrides(
    registry: FeatureRegistry,
    request: OverrideRequest,
    *,
    ignore_separators: bool = False,
) -> list[str]:
    """Apply *request* to *registry*: disable pass, then enable pass.

    Returns the names of every flag touched by an override, in the order the
    passes visited them (a flag matched by both sets appears twice).
    Patterns that match nothing are ignored.
    """
    disabled = _apply(registry, request.force_disable, False, ignore_separators)
    enabled = _apply(registry, request.force_enable, True, ignore_separators)
    return disabled + enabled


__all__ = ["OverrideRequest", "apply_overrides"]
