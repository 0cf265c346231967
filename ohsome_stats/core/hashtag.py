"""Hashtag expressions: exact match vs. prefix wildcard."""

from __future__ import annotations

from dataclasses import dataclass

WILDCARD = "*"
MARKER = "#"


@dataclass(frozen=True)
class HashtagExpression:
    """A hashtag as requested by a caller, without the leading marker.

    A trailing ``*`` turns the expression into a prefix match and is
    stripped from ``tag``. Any other input is an exact match and is kept
    as-is (case preserved, no character validation).
    """
    tag: str
    is_wildcard: bool = False

    @classmethod
    def parse(cls, raw: str) -> HashtagExpression:
        if raw.endswith(WILDCARD):
            return cls(tag=raw[: -len(WILDCARD)], is_wildcard=True)
        return cls(tag=raw, is_wildcard=False)

    @property
    def bound_value(self) -> str:
        """Value bound to the query. Stored hashtags carry the marker prefix."""
        return f"{MARKER}{self.tag}"
