"""Resolution – FeatureResolver, the one-shot resolution pipeline."""
from __future__ import annotations

from feature_control.config import FeatureControlSettings
from feature_control.kernel.errors import RegistryFrozenError
from feature_control.observability.logging import get_logger
from feature_control.registry import FeatureRegistry
from feature_control.resolution.overrides import OverrideRequest, apply_overrides
from feature_control.resolution.propagation import propagate_dependencies
from feature_control.resolution.resolved import ResolvedFeatureSet

_log = get_logger(__name__)


class FeatureResolver:
    """Apply overrides and close dependencies over a populated registry.

    Usage::

        registry = FeatureRegistry()
        probe.populate(registry)
        resolved = FeatureResolver().resolve(
            registry, OverrideRequest.from_lists(disabled=["supports_renderpass2"])
        )
    """

    def __init__(self, settings: FeatureControlSettings | None = None) -> None:
        self._settings = settings or FeatureControlSettings()

    @property
    def settings(self) -> FeatureControlSettings:
        return self._settings

    def resolve(
        self,
        registry: FeatureRegistry,
        request: OverrideRequest | None = None,
    ) -> ResolvedFeatureSet:
        """Resolve *registry* in place and return its read-only view.

        Construction ends here: the registry is closed to new flags and edges
        before any override is applied, and fully frozen on return.
        """
        if registry.frozen:
            raise RegistryFrozenError("Registry has already been resolved")
        request = request or OverrideRequest()
        registry.seal()
        try:
            overridden = apply_overrides(
                registry,
                request,
                ignore_separators=self._settings.wildcard_ignores_separators,
            )
            cascaded = propagate_dependencies(registry)
        finally:
            registry.freeze()
        resolved = ResolvedFeatureSet(registry)
        _log.info(
            "feature_resolution_complete",
            flags=resolved.count(),
            enabled=len(resolved.enabled_names()),
            overridden=len(set(overridden)),
            cascaded=len(cascaded),
        )
        return resolved


__all__ = ["FeatureResolver"]
