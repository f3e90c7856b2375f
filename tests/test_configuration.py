"""Tests for the YAML + environment configuration manager."""

from __future__ import annotations

import pytest
import yaml

from potcatalog.shared.core.configuration import (
    ConfigManager,
    SystemConfig,
    ValidationLevel,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("FLET_WEB_MODE", "FLET_PORT", "FLET_WEB_RENDERER", "LOG_LEVEL", "LOG_DIR"):
        monkeypatch.delenv(key, raising=False)


def _write(path, data):
    path.write_text(yaml.safe_dump(data), encoding="utf-8")


def test_defaults_without_files(tmp_path):
    config = ConfigManager(tmp_path).get_config()

    assert config == SystemConfig()
    assert config.text.missing_fields_message == "Please fill in the pot name and location."
    assert config.text.empty_message == "No pots catalogued yet."


def test_bundled_defaults_load():
    config = ConfigManager().get_config()

    assert config.ui.flet_port == 8550
    assert config.logging.level == "DEBUG"


def test_precedence_env_over_project_over_user_over_defaults(tmp_path, monkeypatch):
    _write(tmp_path / "defaults.yaml", {"ui": {"flet_port": 9000, "theme_mode": "dark"}})
    _write(tmp_path / "user.yaml", {"ui": {"flet_port": 9001}, "text": {"title": "Meus Vasos"}})
    _write(tmp_path / "project.yaml", {"ui": {"flet_port": 9002}})
    monkeypatch.setenv("FLET_PORT", "9003")

    config = ConfigManager(tmp_path).get_config()

    assert config.ui.flet_port == 9003
    assert config.ui.theme_mode == "dark"
    assert config.text.title == "Meus Vasos"


def test_env_conversions(tmp_path, monkeypatch):
    monkeypatch.setenv("FLET_WEB_MODE", "yes")
    monkeypatch.setenv("LOG_LEVEL", "info")
    monkeypatch.setenv("FLET_PORT", "not-a-port")

    config = ConfigManager(tmp_path).get_config()

    assert config.ui.flet_web_mode is True
    assert config.logging.level == "INFO"
    assert config.ui.flet_port == 8550


def test_invalid_values_strict_raises(tmp_path):
    _write(tmp_path / "user.yaml", {"ui": {"flet_port": 80}})

    with pytest.raises(ValueError):
        ConfigManager(tmp_path).get_config(ValidationLevel.STRICT)


def test_invalid_values_lenient_falls_back(tmp_path):
    _write(tmp_path / "user.yaml", {"ui": {"unknown_key": True}})

    config = ConfigManager(tmp_path).get_config(ValidationLevel.LENIENT)

    assert config == SystemConfig()


def test_malformed_yaml_is_ignored(tmp_path):
    (tmp_path / "user.yaml").write_text("ui: [unclosed", encoding="utf-8")

    config = ConfigManager(tmp_path).get_config()

    assert config == SystemConfig()
