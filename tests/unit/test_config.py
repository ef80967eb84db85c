import pytest
from pydantic import ValidationError

from runner_pipeline.config import LOG_LEVEL_ENV, PipelineSettings


def test_default_markers_match_console_format():
    settings = PipelineSettings()
    assert settings.marker("Send", "Before", "UseCase1Command") == "##### Send -> Before UseCase1Command #####"
    assert settings.marker(settings.get_label, settings.after_label, "X") == "##### Get -> After X #####"

def test_log_level_is_normalised():
    assert PipelineSettings(log_level=" debug ").log_level == "DEBUG"

def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError):
        PipelineSettings(log_level="chatty")

def test_settings_are_frozen():
    settings = PipelineSettings()
    with pytest.raises(ValidationError):
        settings.send_label = "Other"

def test_from_env_reads_log_level():
    assert PipelineSettings.from_env({LOG_LEVEL_ENV: "info"}).log_level == "INFO"

def test_from_env_without_overrides_uses_defaults():
    assert PipelineSettings.from_env({}) == PipelineSettings()
