"""SQL dialect factory with pluggable registry.

Built-in dialects: clickhouse.
Register custom dialects via ``register_dialect(name, factory_fn)``.
"""

from __future__ import annotations

import logging
from typing import Callable

from ohsome_stats.query.interface import Dialect

logger = logging.getLogger(__name__)

# Dialect registry: name -> zero-argument factory returning a Dialect
_dialects: dict[str, Callable[[], Dialect]] = {}


def register_dialect(name: str, factory: Callable[[], Dialect]) -> None:
    """Register a custom dialect.

    Args:
        name: Dialect name (matches OHSOME_STATS_DIALECT env var).
        factory: Callable returning a Dialect instance.

    Example::

        from ohsome_stats.query import register_dialect
        from ohsome_stats.query.interface import Dialect

        class DuckDBDialect(Dialect):
            ...

        register_dialect("duckdb", DuckDBDialect)
    """
    _dialects[name] = factory
    logger.info("Registered SQL dialect: %s", name)


def get_dialect(name: str) -> Dialect:
    """Return the dialect adapter for ``name``.

    Checks the plugin registry first, then falls back to built-in dialects.
    """
    if name in _dialects:
        return _dialects[name]()

    if name == "clickhouse":
        from ohsome_stats.query.clickhouse import ClickHouseDialect
        return ClickHouseDialect()

    available = sorted(set(BUILT_IN_DIALECTS + list(_dialects.keys())))
    raise ValueError(
        f"Unknown SQL dialect: {name!r}. "
        f"Available: {', '.join(available)}"
    )


# For error messages and discovery
BUILT_IN_DIALECTS = ["clickhouse"]
