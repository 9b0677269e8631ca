"""
feature_control – Feature-flag resolution for a graphics compatibility layer.

Import path convention::

    from feature_control.registry import FeatureRegistry, FlagDescriptor
    from feature_control.resolution import FeatureResolver, OverrideRequest
    from feature_control.session import Session, get_flag_attribute
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
