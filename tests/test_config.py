"""Tests for ohsome_stats.config."""

import pytest

from ohsome_stats.config import Config, DatabaseConfig, config_to_flat, load_config


@pytest.fixture
def clean_env(monkeypatch):
    import os
    for key in list(os.environ):
        if key.startswith("OHSOME_STATS_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestLoadConfig:
    def test_defaults(self, clean_env):
        config = load_config()
        assert config == Config()
        assert config.db.port == 9005
        assert config.query.dialect == "clickhouse"
        assert config.query.table == "stats"
        assert config.query.default_limit == 10
        assert config.query.default_interval == "P1M"
        assert config.cors_origins == ["*"]

    def test_env_overrides(self, clean_env):
        clean_env.setenv("OHSOME_STATS_DB_HOST", "clickhouse")
        clean_env.setenv("OHSOME_STATS_DB_PORT", "9999")
        clean_env.setenv("OHSOME_STATS_DIALECT", " ClickHouse ")
        clean_env.setenv("OHSOME_STATS_DEFAULT_LIMIT", "25")
        clean_env.setenv("OHSOME_STATS_CORS_ORIGINS", "https://a.org, https://b.org,")
        clean_env.setenv("OHSOME_STATS_LOG_LEVEL", "debug")

        config = load_config()
        assert config.db.host == "clickhouse"
        assert config.db.port == 9999
        assert config.query.dialect == "clickhouse"
        assert config.query.default_limit == 25
        assert config.cors_origins == ["https://a.org", "https://b.org"]
        assert config.log_level == "DEBUG"

    def test_invalid_int_raises(self, clean_env):
        clean_env.setenv("OHSOME_STATS_DB_PORT", "not-a-port")
        with pytest.raises(ValueError):
            load_config()


class TestFlat:
    def test_dsn(self):
        db = DatabaseConfig(host="h", port=1, name="n", user="u", password="p")
        assert db.dsn == "postgresql://u:p@h:1/n"

    def test_flat_masks_password(self):
        flat = config_to_flat(Config(db=DatabaseConfig(password="secret")))
        assert flat["db.password"] == "••••••••"
        assert flat["query.table"] == "stats"
        assert "cors_origins" not in flat
