"""Resolution – override matching, dependency closure and the resolved set."""
from feature_control.resolution.pattern import OverridePattern, PatternKind
from feature_control.resolution.overrides import OverrideRequest, apply_overrides
from feature_control.resolution.propagation import propagate_dependencies
from feature_control.resolution.resolved import ResolvedFeatureSet
from feature_control.resolution.resolver import FeatureResolver

__all__ = [
    "FeatureResolver",
    "OverridePattern",
    "OverrideRequest",
    "PatternKind",
    "ResolvedFeatureSet",
    "apply_overrides",
    "propagate_dependencies",
]
