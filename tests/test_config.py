"""Tests for configuration loading."""

from __future__ import annotations

import pytest

from ridekick_research.config import (
    ConfigError,
    Settings,
    datastore_configured,
    find_config_path,
    load_datastore_config,
    load_settings,
)


class TestDataStoreConfig:
    def test_missing_credentials(self, no_env):
        with pytest.raises(ConfigError, match="SUPABASE_URL and SUPABASE_ANON_KEY must be set"):
            load_datastore_config()
        assert datastore_configured() is False

    def test_only_url_is_not_enough(self, monkeypatch, no_env):
        monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")

        with pytest.raises(ConfigError):
            load_datastore_config()

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co/")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "key")

        config = load_datastore_config()

        assert config.key == "key"
        assert config.rest_url == "https://example.supabase.co/rest/v1"
        assert datastore_configured() is True


class TestSettings:
    """Tests for load_settings."""

    def test_defaults_without_file(self, tmp_path):
        assert load_settings(tmp_path / "ridekick.yaml") == Settings()
        assert load_settings(None) == Settings()

    def test_explicit_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_settings(tmp_path / "missing.yaml", required=True)

    def test_values(self, tmp_path):
        path = tmp_path / "ridekick.yaml"
        path.write_text("default_project: carbuy\nrecord_limit: 50\n", encoding="utf-8")

        settings = load_settings(path)

        assert settings == Settings(default_project="carbuy", record_limit=50, max_ai_sources=30)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "ridekick.yaml"
        path.write_text("", encoding="utf-8")

        assert load_settings(path) == Settings()

    @pytest.mark.parametrize(
        "content",
        [
            "- a list\n",
            "record_limit: 0\n",
            "record_limit: many\n",
            "record_limit: true\n",
            "max_ai_sources: -1\n",
            "default_project: ''\n",
            "unknown_key: 1\n",
            "record_limit: [\n",
        ],
    )
    def test_invalid(self, tmp_path, content):
        path = tmp_path / "ridekick.yaml"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(ConfigError):
            load_settings(path)

    def test_find_config_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert find_config_path(None) == tmp_path / "ridekick.yaml"
        assert str(find_config_path("other.yaml")) == "other.yaml"
