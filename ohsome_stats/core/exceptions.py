"""Exceptions raised by the stats core.

Classes:
    StatsError:
        Generic base class for stats-related exceptions.

    InvalidIntervalError:
        Raised when an interval token is outside the supported ISO-8601 subset.

    QueryExecutionError:
        Raised when the analytical engine cannot be reached or rejects a query.

Example:
    >>> from ohsome_stats.core.exceptions import InvalidIntervalError
    >>> raise InvalidIntervalError("Unsupported interval 'P1DT6H'")
    Traceback (most recent call last):
        ...
    ohsome_stats.core.exceptions.InvalidIntervalError: Unsupported interval 'P1DT6H'
"""


class StatsError(Exception):
    """Generic base class for stats-related exceptions."""

    pass


class InvalidIntervalError(StatsError, ValueError):
    """Exception raised when an interval token cannot be translated."""

    def __init__(self, token: str, reason: str = ""):
        self.token = token
        self.reason = reason
        message = f"Unsupported interval {token!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class QueryExecutionError(StatsError):
    """Exception raised when a query fails in the analytical engine or its connection."""

    pass
