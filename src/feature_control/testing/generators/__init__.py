"""Testing generators – hypothesis strategies for registries and overrides."""
from feature_control.testing.generators.strategies import (
    flag_name_strategy,
    override_request_strategy,
    probe_strategy,
)

__all__ = ["flag_name_strategy", "override_request_strategy", "probe_strategy"]
