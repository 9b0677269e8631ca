"""Property-based tests for resolution: idempotence, monotonicity, determinism."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from feature_control.registry import FeatureRegistry, StaticCapabilityProbe
from feature_control.resolution import (
    FeatureResolver,
    OverrideRequest,
    apply_overrides,
    propagate_dependencies,
)
from feature_control.testing.generators import override_request_strategy, probe_strategy


def _registry(probe: StaticCapabilityProbe) -> FeatureRegistry:
    registry = FeatureRegistry()
    probe.populate(registry)
    return registry


def _request(data: st.DataObject, probe: StaticCapabilityProbe) -> OverrideRequest:
    return data.draw(override_request_strategy([spec.name for spec in probe.specs]))


@given(probe_strategy(), st.data())
def test_propagation_is_idempotent(probe: StaticCapabilityProbe, data: st.DataObject) -> None:
    registry = _registry(probe)
    FeatureResolver().resolve(registry, _request(data, probe))
    assert propagate_dependencies(registry) == []


@given(probe_strategy(), st.data())
def test_propagation_only_disables(probe: StaticCapabilityProbe, data: st.DataObject) -> None:
    registry = _registry(probe)
    apply_overrides(registry, _request(data, probe))
    before = {flag.name: flag.enabled for flag in registry}
    propagate_dependencies(registry)
    for flag in registry:
        assert not (flag.enabled and not before[flag.name])


@given(probe_strategy(), st.data())
def test_result_is_a_fixed_point(probe: StaticCapabilityProbe, data: st.DataObject) -> None:
    resolved = FeatureResolver().resolve(_registry(probe), _request(data, probe))
    for flag in resolved:
        if flag.enabled:
            assert all(resolved.is_enabled(name) for name in flag.requires)


@given(probe_strategy(), st.data())
def test_resolution_is_deterministic(probe: StaticCapabilityProbe, data: st.DataObject) -> None:
    request = _request(data, probe)
    first = FeatureResolver().resolve(_registry(probe), request)
    second = FeatureResolver().resolve(_registry(probe), request)
    assert first == second
    assert first.to_dict() == second.to_dict()


@given(probe_strategy(), st.data())
def test_order_is_preserved(probe: StaticCapabilityProbe, data: st.DataObject) -> None:
    expected = [spec.name for spec in probe.specs]
    registry = _registry(probe)
    assert registry.names() == expected
    resolved = FeatureResolver().resolve(registry, _request(data, probe))
    assert [resolved.get(i).name for i in range(resolved.count())] == expected
