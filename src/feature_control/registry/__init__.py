"""Registry – flag descriptors, the ordered feature registry and probe port."""
from feature_control.registry.descriptor import FlagCategory, FlagDescriptor, FlagStatus
from feature_control.registry.registry import FeatureRegistry
from feature_control.registry.probe import CapabilityProbe, FlagSpec, StaticCapabilityProbe

__all__ = [
    "CapabilityProbe",
    "FeatureRegistry",
    "FlagCategory",
    "FlagDescriptor",
    "FlagSpec",
    "FlagStatus",
    "StaticCapabilityProbe",
]
