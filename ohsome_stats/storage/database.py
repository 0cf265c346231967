"""Read-only connection pool for the analytical engine.

Uses psycopg_pool.ConnectionPool against ClickHouse's PostgreSQL wire
interface. Every execute() checks out a connection for exactly one query
and returns it to the pool as soon as the rows are consumed; no connection
is held between calls, so concurrent requests (FastAPI threadpool) never
share one.

Parameters are merged client-side (psycopg.ClientCursor): the engine only
speaks the simple query protocol.
"""

import logging

import psycopg
from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool

from ohsome_stats.config import DatabaseConfig
from ohsome_stats.core.exceptions import QueryExecutionError

logger = logging.getLogger(__name__)


class Database:
    """Analytical engine connection pool with per-query checkout."""

    def __init__(self, config: DatabaseConfig):
        self.config = config
        self._pool: ConnectionPool | None = None

    def connect(self) -> None:
        """Initialize the connection pool."""
        self._pool = ConnectionPool(
            self.config.dsn,
            min_size=self.config.pool_min_size,
            max_size=self.config.pool_max_size,
            kwargs={
                "row_factory": dict_row,
                "autocommit": True,
                "cursor_factory": psycopg.ClientCursor,
            },
            open=False,
        )
        self._pool.open()
        # Block until min_size connections are ready
        self._pool.wait()
        logger.info(
            "Connection pool ready: %s:%s/%s (min=%d, max=%d)",
            self.config.host, self.config.port, self.config.name,
            self.config.pool_min_size, self.config.pool_max_size,
        )

    def close(self) -> None:
        """Shut down the pool."""
        if self._pool:
            self._pool.close()
            self._pool = None
            logger.info("Connection pool closed")

    @property
    def pool(self) -> ConnectionPool:
        if self._pool is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self._pool

    def execute(self, query: str, params: tuple | list | None = None) -> list[dict]:
        """Execute a query and return all rows.

        Any driver or pool failure is raised as QueryExecutionError.
        """
        pool = self.pool
        try:
            with pool.connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(query, params)
                    if cur.description:
                        return cur.fetchall()
                    return []
        except psycopg.Error as e:
            # psycopg_pool.PoolTimeout is an OperationalError too
            logger.warning("Query failed: %s", e)
            raise QueryExecutionError(f"Query execution failed: {e}") from e
