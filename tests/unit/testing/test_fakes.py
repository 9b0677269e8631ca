"""Unit tests for testing helpers: FakeCapabilityProbe and strategies."""

from __future__ import annotations

import pytest
from hypothesis import given

from feature_control.kernel.errors import UnknownFlagError
from feature_control.registry import CapabilityProbe, FeatureRegistry, StaticCapabilityProbe
from feature_control.testing.fakes import FakeCapabilityProbe
from feature_control.testing.generators import flag_name_strategy, probe_strategy


class TestFakeCapabilityProbe:
    def test_is_a_probe(self) -> None:
        assert isinstance(FakeCapabilityProbe(), CapabilityProbe)

    def test_populates_flags_and_edges(self) -> None:
        probe = FakeCapabilityProbe().flag("a", enabled=True).flag("b").requires("b", "a")
        registry = FeatureRegistry()
        probe.populate(registry)
        assert registry.names() == ["a", "b"]
        assert registry.get(0).enabled is True
        assert registry.lookup("b").requires == frozenset({"a"})
        assert probe.populate_calls == 1

    def test_bad_edge_surfaces_registry_error(self) -> None:
        probe = FakeCapabilityProbe().flag("a").requires("a", "ghost")
        with pytest.raises(UnknownFlagError):
            probe.populate(FeatureRegistry())

    def test_fail_with(self) -> None:
        probe = FakeCapabilityProbe().fail_with(RuntimeError("no device"))
        with pytest.raises(RuntimeError):
            probe.populate(FeatureRegistry())

    def test_reset(self) -> None:
        probe = FakeCapabilityProbe().flag("a").fail_with(RuntimeError())
        probe.populate_calls = 3
        probe.reset()
        registry = FeatureRegistry()
        probe.populate(registry)
        assert registry.count() == 0
        assert probe.populate_calls == 1


class TestStrategies:
    @given(flag_name_strategy())
    def test_flag_names_are_canonical(self, name: str) -> None:
        assert name
        assert name == name.lower()
        assert all(token and token[0].isalpha() for token in name.split("_"))

    @given(probe_strategy(max_flags=5))
    def test_probes_build_valid_registries(self, probe: StaticCapabilityProbe) -> None:
        registry = FeatureRegistry()
        probe.populate(registry)
        assert 1 <= registry.count() <= 5
        assert registry.names() == [spec.name for spec in probe.specs]
