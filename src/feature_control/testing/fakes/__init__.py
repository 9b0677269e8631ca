"""Testing fakes – in-memory doubles for feature_control ports."""
from feature_control.testing.fakes.probe import FakeCapabilityProbe

__all__ = ["FakeCapabilityProbe"]
