"""Tests for configuration models and loader."""

import json
from pathlib import Path

from pydantic import ValidationError
import pytest

from corext.core.config import (
    AppConfig,
    CacheConfig,
    detect_format,
    load_app_config,
    load_config,
)
from corext.core.config.loader import LOG_LEVEL_ENV, PERMANENT_DIR_ENV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host environment out of config loading."""
    monkeypatch.delenv(PERMANENT_DIR_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


class TestDetectFormat:
    """Tests for format detection."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("config.json", "json"), ("config.yaml", "yaml"), ("config.YML", "yaml")],
    )
    def test_known_extensions(self, name: str, expected: str):
        assert detect_format(name) == expected

    def test_unknown_extension_raises(self):
        with pytest.raises(ValueError, match="Unsupported config format"):
            detect_format("config.toml")


class TestLoadConfig:
    """Tests for raw config loading."""

    def test_load_json(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"permanent_dir": "/var/lib/app"}))

        assert load_config(path) == {"permanent_dir": "/var/lib/app"}

    def test_load_yaml(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("permanent_dir: /var/lib/app\ncache:\n  key_strategy: legacy\n")

        assert load_config(path) == {
            "permanent_dir": "/var/lib/app",
            "cache": {"key_strategy": "legacy"},
        }

    def test_empty_yaml_is_empty_mapping(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text("")

        assert load_config(path) == {}

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.json")

    def test_invalid_json_raises(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("{not json")

        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(path)

    def test_invalid_yaml_raises(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("cache: [unclosed")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping_root_raises(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")

        with pytest.raises(ValueError, match="mapping"):
            load_config(path)


class TestLoadAppConfig:
    """Tests for validated app config loading."""

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        config = load_app_config(tmp_path / "config.json")

        assert config.permanent_dir is None
        assert config.cache == CacheConfig()
        assert config.logging.level == "INFO"

    def test_file_values(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps(
                {
                    "permanent_dir": "/var/lib/app",
                    "cache": {"enabled": False},
                    "logging": {"level": "DEBUG", "structured": True},
                    "unknown": "ignored",
                }
            )
        )

        config = load_app_config(path)

        assert config.permanent_dir == "/var/lib/app"
        assert not config.cache.enabled
        assert config.logging.level == "DEBUG"
        assert config.logging.structured

    def test_invalid_key_strategy_raises(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"cache": {"key_strategy": "crc32"}}))

        with pytest.raises(ValidationError):
            load_app_config(path)

    def test_env_fills_permanent_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(PERMANENT_DIR_ENV, "/srv/app")

        assert load_app_config(tmp_path / "config.json").permanent_dir == "/srv/app"

    def test_file_wins_over_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"permanent_dir": "/from/file"}))
        monkeypatch.setenv(PERMANENT_DIR_ENV, "/from/env")

        assert load_app_config(path).permanent_dir == "/from/file"

    def test_env_sets_log_level(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "warning")

        assert load_app_config(tmp_path / "config.json").logging.level == "WARNING"

    def test_invalid_env_log_level_raises(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "loud")

        with pytest.raises(ValidationError):
            load_app_config(tmp_path / "config.json")

    def test_load_or_default(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("permanent_dir: /var/lib/app\n")

        assert AppConfig.load_or_default(path).permanent_dir == "/var/lib/app"
