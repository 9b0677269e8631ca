"""Unit tests for the Session lifecycle."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from feature_control.config import FeatureControlSettings
from feature_control.kernel.errors import DuplicateNameError, InvalidCategoryError, InvalidSessionError
from feature_control.registry import FlagCategory
from feature_control.session import FlagAttribute, Session
from feature_control.testing.fakes import FakeCapabilityProbe


@pytest.fixture()
def probe() -> FakeCapabilityProbe:
    return (
        FakeCapabilityProbe()
        .flag("supports_renderpass2", enabled=True, category=FlagCategory.VULKAN_FEATURES)
        .flag("supports_image2d_view_of3d", enabled=True, category=FlagCategory.VULKAN_FEATURES)
        .flag("supports_depth_stencil_resolve", enabled=True, category=FlagCategory.VULKAN_FEATURES)
        .flag("supports_sampler2d_view_of3d", enabled=True, category=FlagCategory.VULKAN_FEATURES)
        .flag("clamp_point_size", enabled=False, category=FlagCategory.OPENGL_WORKAROUNDS)
        .requires("supports_depth_stencil_resolve", "supports_renderpass2")
        .requires("supports_sampler2d_view_of3d", "supports_image2d_view_of3d")
    )


def _statuses(session: Session) -> dict[str, str]:
    return {flag.name: flag.status.value for flag in session.features}


class TestInitialize:
    def test_dependent_flags_follow_overrides(self, probe: FakeCapabilityProbe) -> None:
        session = Session(
            probe,
            disabled_overrides=["supports_renderpass2", "supportsImage2dViewOf3d", None],
            settings=FeatureControlSettings(),
        ).initialize()
        assert _statuses(session) == {
            "supports_renderpass2": "disabled",
            "supports_image2d_view_of3d": "disabled",
            "supports_depth_stencil_resolve": "disabled",
            "supports_sampler2d_view_of3d": "disabled",
            "clamp_point_size": "disabled",
        }

    def test_enable_override(self, probe: FakeCapabilityProbe) -> None:
        session = Session(probe, enabled_overrides=["clamp_*"], settings=FeatureControlSettings()).initialize()
        assert session.features.is_enabled("clamp_point_size")

    def test_initialize_runs_once(self, probe: FakeCapabilityProbe) -> None:
        session = Session(probe, settings=FeatureControlSettings())
        session.initialize()
        session.initialize()
        assert probe.populate_calls == 1

    def test_environment_overrides_are_added(
        self, probe: FakeCapabilityProbe, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FEATURE_OVERRIDES_ENABLED", "clamp_point_size")
        monkeypatch.setenv("FEATURE_OVERRIDES_DISABLED", "supports_renderpass2")
        session = Session(probe).initialize()
        statuses = _statuses(session)
        assert statuses["clamp_point_size"] == "enabled"
        assert statuses["supports_renderpass2"] == "disabled"
        assert statuses["supports_depth_stencil_resolve"] == "disabled"
        assert statuses["supports_image2d_view_of3d"] == "enabled"

    def test_separator_setting_from_environment(
        self, probe: FakeCapabilityProbe, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FEATURE_WILDCARD_IGNORES_SEPARATORS", "true")
        session = Session(probe, disabled_overrides=["supportsS*"]).initialize()
        assert _statuses(session)["supports_sampler2d_view_of3d"] == "disabled"
        assert _statuses(session)["supports_renderpass2"] == "enabled"

    def test_context_manager_terminates(self, probe: FakeCapabilityProbe) -> None:
        with Session(probe, settings=FeatureControlSettings()) as session:
            assert session.is_valid
        assert not session.is_valid


class TestInvalidSession:
    def test_uninitialised_session(self, probe: FakeCapabilityProbe) -> None:
        session = Session(probe, settings=FeatureControlSettings())
        assert not session.is_valid
        with pytest.raises(InvalidSessionError):
            session.flag_count()

    def test_failed_probe_leaves_session_invalid(self) -> None:
        probe = FakeCapabilityProbe().fail_with(RuntimeError("driver lost"))
        session = Session(probe, settings=FeatureControlSettings())
        with pytest.raises(RuntimeError, match="driver lost"):
            session.initialize()
        with pytest.raises(InvalidSessionError):
            session.flag_attribute(0, FlagAttribute.NAME)

    def test_registry_defect_leaves_session_invalid(self) -> None:
        probe = FakeCapabilityProbe().flag("a").flag("a")
        session = Session(probe, settings=FeatureControlSettings())
        with pytest.raises(DuplicateNameError):
            session.initialize()
        assert not session.is_valid

    def test_registry_defect_is_logged_with_error_code(self) -> None:
        probe = FakeCapabilityProbe().flag("a").flag("a")
        session = Session(probe, settings=FeatureControlSettings())
        with capture_logs() as logs, pytest.raises(DuplicateNameError):
            session.initialize()
        failed = [e for e in logs if e["event"] == "session_initialize_failed"]
        assert len(failed) == 1
        assert failed[0]["error_type"] == "DuplicateNameError"
        assert failed[0]["code"] == "duplicate_name"
        assert failed[0]["detail"] == {"name": "a"}
        assert failed[0]["log_level"] == "error"

    def test_probe_failure_is_logged_with_message(self) -> None:
        probe = FakeCapabilityProbe().fail_with(RuntimeError("driver lost"))
        with capture_logs() as logs, pytest.raises(RuntimeError):
            Session(probe, settings=FeatureControlSettings()).initialize()
        failed = [e for e in logs if e["event"] == "session_initialize_failed"]
        assert failed[0]["error_type"] == "RuntimeError"
        assert failed[0]["message"] == "driver lost"

    def test_unknown_category_leaves_session_invalid(self) -> None:
        probe = FakeCapabilityProbe().flag("a", category="Bogus")  # type: ignore[arg-type]
        session = Session(probe, settings=FeatureControlSettings())
        with pytest.raises(InvalidCategoryError):
            session.initialize()
        assert not session.is_valid

    def test_terminated_session(self, probe: FakeCapabilityProbe) -> None:
        session = Session(probe, settings=FeatureControlSettings()).initialize()
        session.terminate()
        with pytest.raises(InvalidSessionError):
            session.flag_count()
        with pytest.raises(InvalidSessionError):
            session.initialize()

    def test_repr(self, probe: FakeCapabilityProbe) -> None:
        session = Session(probe, settings=FeatureControlSettings())
        assert "valid=False" in repr(session)
