"""Tests for configuration loading."""

import tempfile
from pathlib import Path

import pytest

from harlog.config import Settings, load_settings_file

ENV_VARS = ("HARLOG_INDENT", "HARLOG_EMIT_ENTRY_TIME", "HARLOG_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestSettingsFile:
    def test_load_yaml(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "harlog.yaml"
            path.write_text("indent: false\nemit_entry_time: true\n")
            assert load_settings_file(path) == {"indent": False, "emit_entry_time": True}

    def test_missing_file(self) -> None:
        assert load_settings_file(Path("does-not-exist.yaml")) == {}

    def test_invalid_yaml_falls_back(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "harlog.yaml"
            path.write_text("indent: [unclosed\n")
            assert load_settings_file(path) == {}

    def test_unknown_keys_skipped(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "harlog.yaml"
            path.write_text("indent: true\ncolour: blue\n")
            assert load_settings_file(path) == {"indent": True}


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings.load(config_yaml="does-not-exist.yaml")
        assert settings.indent is True
        assert settings.emit_entry_time is False
        assert settings.log_level == "WARNING"

    def test_env_overrides_file(self, monkeypatch: pytest.MonkeyPatch) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "harlog.yaml"
            path.write_text("indent: true\nlog_level: info\n")
            monkeypatch.setenv("HARLOG_INDENT", "0")
            monkeypatch.setenv("HARLOG_EMIT_ENTRY_TIME", "yes")
            settings = Settings.load(config_yaml=path)
            assert settings.indent is False
            assert settings.emit_entry_time is True
            assert settings.log_level == "INFO"

    def test_invalid_values_fall_back(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "harlog.yaml"
            path.write_text("indent: [1, 2]\n")
            assert Settings.load(config_yaml=path) == Settings()
