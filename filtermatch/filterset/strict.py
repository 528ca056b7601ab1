"""Exact string filter set."""

from __future__ import annotations

from typing import Sequence

from filtermatch.filterset.base import FilterSet


class StrictFilterSet(FilterSet):
    """Matches strings equal to one of the configured patterns."""

    def __init__(self, patterns: Sequence[str]):
        self._patterns = frozenset(patterns)

    def matches(self, value: str) -> bool:
        return value in self._patterns

    def __repr__(self) -> str:
        return f"StrictFilterSet({sorted(self._patterns)!r})"
