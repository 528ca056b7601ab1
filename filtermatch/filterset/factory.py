"""Filter set factory."""

from __future__ import annotations

from typing import Sequence

from filtermatch.core.errors import PatternCompileError
from filtermatch.filterset.base import FilterSet
from filtermatch.filterset.config import FilterSetConfig, MatchType
from filtermatch.filterset.regexp import RegexpFilterSet
from filtermatch.filterset.strict import StrictFilterSet


def create_filter_set(patterns: Sequence[str], config: FilterSetConfig) -> FilterSet:
    """Create a FilterSet for ``patterns`` according to ``config.match_type``.

    Raises:
        PatternCompileError: If a pattern is invalid or the match type is unknown.
    """
    if config.match_type == MatchType.REGEXP:
        return RegexpFilterSet(patterns)
    if config.match_type == MatchType.STRICT:
        return StrictFilterSet(patterns)
    raise PatternCompileError(f"unrecognized match_type: {config.match_type!r}")
