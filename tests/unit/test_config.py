"""Unit tests for config.py"""

import pytest
from pydantic import ValidationError

from hunkdiff.config import load_config


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    """Run from an empty directory with no HUNKDIFF_* variables set."""
    monkeypatch.chdir(tmp_path)
    for name in ("CONTEXT_RADIUS", "ENCODING", "LOG_LEVEL"):
        monkeypatch.delenv(f"HUNKDIFF_{name}", raising=False)


def test_load_config_defaults():
    """Settings defaults apply when no config.yaml, env var, or CLI override exists."""
    settings = load_config()
    assert settings.context_radius == 3
    assert settings.encoding == "utf-8"
    assert settings.log_level == "WARNING"


def test_load_config_reads_config_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("context_radius: 5\nencoding: latin-1\n")
    settings = load_config()
    assert settings.context_radius == 5
    assert settings.encoding == "latin-1"


def test_load_config_env_context_radius(monkeypatch):
    """HUNKDIFF_CONTEXT_RADIUS env var is coerced to int and applied to settings."""
    monkeypatch.setenv("HUNKDIFF_CONTEXT_RADIUS", "0")
    settings = load_config()
    assert settings.context_radius == 0


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """HUNKDIFF_CONTEXT_RADIUS takes precedence over config.yaml."""
    (tmp_path / "config.yaml").write_text("context_radius: 4\n")
    monkeypatch.setenv("HUNKDIFF_CONTEXT_RADIUS", "2")
    settings = load_config()
    assert settings.context_radius == 2


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var."""
    monkeypatch.setenv("HUNKDIFF_CONTEXT_RADIUS", "2")
    settings = load_config(overrides={"context_radius": 7})
    assert settings.context_radius == 7


def test_load_config_none_override_ignored(monkeypatch):
    monkeypatch.setenv("HUNKDIFF_LOG_LEVEL", "DEBUG")
    settings = load_config(overrides={"log_level": None})
    assert settings.log_level == "DEBUG"


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


@pytest.mark.parametrize("overrides", [
    {"context_radius": -1},
    {"log_level": "LOUD"},
])
def test_load_config_rejects_invalid_values(overrides):
    with pytest.raises(ValidationError):
        load_config(overrides=overrides)


def test_load_config_blank_yaml_uses_defaults(tmp_path):
    (tmp_path / "config.yaml").write_text("")
    assert load_config().context_radius == 3


def test_load_config_non_mapping_yaml(tmp_path):
    """A config.yaml that is not a mapping is rejected with ValueError."""
    (tmp_path / "config.yaml").write_text("- 1\n- 2\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


def test_load_config_custom_file(tmp_path):
    """config_file points the loader at another YAML file."""
    (tmp_path / "diff.yaml").write_text("context_radius: 9\n")
    assert load_config(config_file=str(tmp_path / "diff.yaml")).context_radius == 9


def test_settings_fields():
    """Only fields the diff pipeline and CLI read are declared."""
    assert set(load_config().model_dump()) == {"context_radius", "encoding", "log_level"}
