"""Resolution – dependency propagation.

Computes the least fixed point of *"a flag whose prerequisite is disabled is
itself disabled"*.  Flags are only ever switched off here.
"""
from __future__ import annotations

from feature_control.observability.logging import get_logger
from feature_control.registry import FeatureRegistry

_log = get_logger(__name__)


def propagate_dependencies(registry: FeatureRegistry) -> list[str]:
    """Disable every flag with a disabled prerequisite, transitively.

    Returns the names disabled by this call, in the order they flipped.  A
    registry that is already closed yields an empty list.  The ``requires``
    graph is acyclic, so at most ``count()`` sweeps can change anything.
    """
    disabled: list[str] = []
    for _ in range(registry.count() + 1):
        changed = False
        for index in range(registry.count()):
            flag = registry.get(index)
            if not flag.enabled:
                continue
            blocker = next(
                (name for name in sorted(flag.requires) if not registry.lookup(name).enabled),
                None,
            )
            if blocker is None:
                continue
            registry.set_enabled(index, False)
            disabled.append(flag.name)
            changed = True
            _log.debug("feature_dependency_disabled", flag=flag.name, requires=blocker)
        if not changed:
            break
    return disabled


__all__ = ["propagate_dependencies"]
