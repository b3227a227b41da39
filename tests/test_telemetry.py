from __future__ import annotations

import pytest

from bigint_input.runtime import telemetry


def test_get_logger_is_cached() -> None:
    assert telemetry.get_logger("bigint_input.test") is telemetry.get_logger(
        "bigint_input.test"
    )


def test_span_reraises_and_collects_metadata() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("test::span", component=True, metadata={"k": 1}) as handle:
            handle.add_metadata("extra", [1, 2])
            assert handle.metadata == {"k": "1", "extra": "[1, 2]"}
            raise RuntimeError("boom")


def test_configure_rejects_config_and_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_configure_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="nope")


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BIGINT_INPUT_LOG_LEVEL", "debug")
    monkeypatch.setenv("BIGINT_INPUT_NO_COLOR", "yes")

    settings = telemetry.TelemetrySettings.from_env()

    assert settings.level == "DEBUG"
    assert settings.colored is False


def test_quiet_preset_silences_console() -> None:
    settings = telemetry.preset_settings("quiet")

    assert settings.level == "ERROR"
    assert settings.console is False


def test_production_preset_always_has_a_log_file() -> None:
    assert telemetry.preset_settings("production").log_file


def test_record_event_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("history.undo", level="loud")
