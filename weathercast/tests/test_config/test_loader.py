"""Tests for config loading and validation."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from weathercast.config.loader import load_config
from weathercast.config.schema import AppConfig


class TestLoadConfig:
    def test_missing_file_uses_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "nope.yaml")
        assert config == AppConfig()

    def test_none_path_uses_defaults(self):
        config = load_config(None)
        assert config.geocoding.language == "en"
        assert config.forecast.forecast_days == 3
        assert config.auth.username == "forecast"
        assert config.recent_limit == 10

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == AppConfig()

    def test_load_from_yaml(self, tmp_path: Path):
        data = {
            "forecast": {"forecast_days": 5},
            "auth": {"username": "admin", "password": "s3cret"},
        }
        path = tmp_path / "custom.yaml"
        with open(path, "w") as f:
            yaml.dump(data, f)

        config = load_config(path)
        assert config.forecast.forecast_days == 5
        assert config.auth.password == "s3cret"
        assert config.geocoding.count == 1

    def test_fixtures_config(self, fixtures_dir: Path):
        config = load_config(fixtures_dir / "config_default.yaml")
        assert config.recent_limit == 5
        assert config.forecast.forecast_days == 2
        assert config.geocoding.timeout == 5.0

    def test_env_overrides_db_path(
        self, tmp_path: Path, fixtures_dir: Path, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setenv("WEATHERCAST_DB_PATH", str(tmp_path / "env.db"))
        config = load_config(fixtures_dir / "config_default.yaml")
        assert config.database.path == str(tmp_path / "env.db")


class TestSchema:
    def test_unknown_key_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("geocoding:\n  langauge: de\n")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_forecast_days_bounds(self):
        with pytest.raises(ValidationError):
            AppConfig(forecast={"forecast_days": 0})
        with pytest.raises(ValidationError):
            AppConfig(forecast={"forecast_days": 17})

    def test_forecast_days_nullable(self):
        assert AppConfig(forecast={"forecast_days": None}).forecast.forecast_days is None
