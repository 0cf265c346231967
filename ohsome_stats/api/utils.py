"""Shared utilities for API route modules."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from fastapi import HTTPException

from ohsome_stats.core.exceptions import InvalidIntervalError, QueryExecutionError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def run_query(fn: Callable[[], T]) -> T:
    """Run a repository call, mapping core errors to HTTP errors."""
    try:
        return fn()
    except InvalidIntervalError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except QueryExecutionError as e:
        logger.error("Stats query failed: %s", e, exc_info=True)
        raise HTTPException(status_code=502, detail="Query execution failed")
