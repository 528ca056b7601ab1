"""
Filter set package.

Provides string filter sets used by regexp-mode attribute criteria:
- Strict (exact string) matching
- Regular expression matching
"""

from filtermatch.filterset.base import FilterSet, FilterSetCompiler
from filtermatch.filterset.config import MATCH_TYPE_FIELD_NAME, FilterSetConfig, MatchType
from filtermatch.filterset.factory import create_filter_set
from filtermatch.filterset.regexp import RegexpFilterSet
from filtermatch.filterset.strict import StrictFilterSet

__all__ = [
    # Config
    "MatchType",
    "FilterSetConfig",
    "MATCH_TYPE_FIELD_NAME",
    # Filter sets
    "FilterSet",
    "FilterSetCompiler",
    "StrictFilterSet",
    "RegexpFilterSet",
    # Factory
    "create_filter_set",
]
