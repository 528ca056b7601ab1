"""
filtermatch: compiled attribute matching for telemetry filtering.

Criteria are compiled once into an immutable CompiledMatcher and then evaluated
against each record's attributes:

    matcher = compile_matcher(
        FilterSetConfig(match_type=MatchType.STRICT),
        [("http.status_code", 200)],
    )
    matcher.match(AttributeMap.from_dict({"http.status_code": 200}))  # True
"""

from filtermatch.compiler import CompiledMatcher, Criterion, MatcherCompiler, compile_matcher
from filtermatch.core import (
    AttributeMap,
    AttributeValue,
    CriteriaConfigError,
    InvalidCriterionError,
    MatcherError,
    PatternCompileError,
    UnsupportedCoercionError,
    UnsupportedValueTypeError,
    ValueConversionError,
    ValueType,
    normalize_value,
)
from filtermatch.filterset import FilterSet, FilterSetConfig, MatchType, create_filter_set
from filtermatch.rules import AttributeSpec, CriteriaLoader, MatchProperties
from filtermatch.runtime import MatchTrace, explain, match

__version__ = "0.1.0"

__all__ = [
    # Compile / evaluate
    "compile_matcher",
    "MatcherCompiler",
    "CompiledMatcher",
    "Criterion",
    "match",
    "explain",
    "MatchTrace",
    # Values
    "AttributeValue",
    "AttributeMap",
    "ValueType",
    "normalize_value",
    # Filter sets
    "FilterSet",
    "FilterSetConfig",
    "MatchType",
    "create_filter_set",
    # Configuration
    "AttributeSpec",
    "MatchProperties",
    "CriteriaLoader",
    # Errors
    "MatcherError",
    "InvalidCriterionError",
    "UnsupportedValueTypeError",
    "ValueConversionError",
    "PatternCompileError",
    "CriteriaConfigError",
    "UnsupportedCoercionError",
]
