"""Configuration management. All settings from environment variables with sensible defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DatabaseConfig:
    host: str = "localhost"
    port: int = 9005  # ClickHouse PostgreSQL wire interface
    name: str = "default"
    user: str = "default"
    password: str = ""
    pool_min_size: int = 1
    pool_max_size: int = 10

    @property
    def dsn(self) -> str:
        return f"postgresql://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"


@dataclass(frozen=True)
class QueryConfig:
    dialect: str = "clickhouse"  # "clickhouse" or registered dialect name
    table: str = "stats"
    default_limit: int = 10          # top-N hashtags when no limit is given
    default_interval: str = "P1M"    # bucket width for interval queries


@dataclass(frozen=True)
class AttributionConfig:
    url: str = "https://ohsome.org/copyrights"
    text: str = "© OpenStreetMap contributors"


@dataclass(frozen=True)
class Config:
    db: DatabaseConfig = field(default_factory=DatabaseConfig)
    query: QueryConfig = field(default_factory=QueryConfig)
    attribution: AttributionConfig = field(default_factory=AttributionConfig)
    http_host: str = "0.0.0.0"
    http_port: int = 8080
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"


def _parse_cors_origins(raw: str) -> list[str]:
    """Parse comma-separated CORS origins. '*' means allow all."""
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


# Dot-notation config key -> env var. Used for source reporting at startup.
_ENV_MAP: dict[str, str] = {
    "db.host": "OHSOME_STATS_DB_HOST",
    "db.port": "OHSOME_STATS_DB_PORT",
    "db.name": "OHSOME_STATS_DB_NAME",
    "db.user": "OHSOME_STATS_DB_USER",
    "db.password": "OHSOME_STATS_DB_PASS",
    "db.pool_min_size": "OHSOME_STATS_DB_POOL_MIN",
    "db.pool_max_size": "OHSOME_STATS_DB_POOL_MAX",
    "query.dialect": "OHSOME_STATS_DIALECT",
    "query.table": "OHSOME_STATS_TABLE",
    "query.default_limit": "OHSOME_STATS_DEFAULT_LIMIT",
    "query.default_interval": "OHSOME_STATS_DEFAULT_INTERVAL",
    "attribution.url": "OHSOME_STATS_ATTRIBUTION_URL",
    "attribution.text": "OHSOME_STATS_ATTRIBUTION_TEXT",
    "http_host": "OHSOME_STATS_HTTP_HOST",
    "http_port": "OHSOME_STATS_HTTP_PORT",
    "log_level": "OHSOME_STATS_LOG_LEVEL",
}

_SECRET_KEYS = {"db.password"}


def env_values() -> dict[str, str | None]:
    """Snapshot current env var values for source detection."""
    return {key: os.getenv(env_var) for key, env_var in _ENV_MAP.items()}


def config_to_flat(config: Config) -> dict[str, Any]:
    """Serialize config to a flat dict with dot-notation keys. Secrets are masked."""
    result: dict[str, Any] = {}

    for f in fields(config):
        val = getattr(config, f.name)
        if hasattr(val, "__dataclass_fields__"):
            for sf in fields(val):
                result[f"{f.name}.{sf.name}"] = getattr(val, sf.name)
        else:
            # Skip list fields (cors_origins)
            if isinstance(val, list):
                continue
            result[f.name] = val

    for key in _SECRET_KEYS:
        if result.get(key):
            result[key] = "••••••••"
    return result


def load_config() -> Config:
    """Load configuration from environment variables."""
    config = Config(
        db=DatabaseConfig(
            host=os.getenv("OHSOME_STATS_DB_HOST", "localhost"),
            port=int(os.getenv("OHSOME_STATS_DB_PORT", "9005")),
            name=os.getenv("OHSOME_STATS_DB_NAME", "default"),
            user=os.getenv("OHSOME_STATS_DB_USER", "default"),
            password=os.getenv("OHSOME_STATS_DB_PASS", ""),
            pool_min_size=int(os.getenv("OHSOME_STATS_DB_POOL_MIN", "1")),
            pool_max_size=int(os.getenv("OHSOME_STATS_DB_POOL_MAX", "10")),
        ),
        query=QueryConfig(
            dialect=os.getenv("OHSOME_STATS_DIALECT", "clickhouse").lower().strip(),
            table=os.getenv("OHSOME_STATS_TABLE", "stats"),
            default_limit=int(os.getenv("OHSOME_STATS_DEFAULT_LIMIT", "10")),
            default_interval=os.getenv("OHSOME_STATS_DEFAULT_INTERVAL", "P1M"),
        ),
        attribution=AttributionConfig(
            url=os.getenv("OHSOME_STATS_ATTRIBUTION_URL", "https://ohsome.org/copyrights"),
            text=os.getenv("OHSOME_STATS_ATTRIBUTION_TEXT", "© OpenStreetMap contributors"),
        ),
        http_host=os.getenv("OHSOME_STATS_HTTP_HOST", "0.0.0.0"),
        http_port=int(os.getenv("OHSOME_STATS_HTTP_PORT", "8080")),
        cors_origins=_parse_cors_origins(os.getenv("OHSOME_STATS_CORS_ORIGINS", "*")),
        log_level=os.getenv("OHSOME_STATS_LOG_LEVEL", "INFO").upper(),
    )

    overridden = sorted(key for key, value in env_values().items() if value is not None)
    if overridden:
        logger.info("Config loaded (env overrides: %s)", ", ".join(overridden))
    return config
