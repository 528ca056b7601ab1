"""
Runtime package.

Provides evaluation of compiled attribute criteria with:
- Short-circuit AND over criteria
- String coercion for pattern matching
- Match tracing for debugging
"""

from filtermatch.runtime.coercion import format_double, to_match_string
from filtermatch.runtime.evaluator import check_criterion, match
from filtermatch.runtime.trace import MatchStep, MatchTrace, explain

__all__ = [
    # Evaluator
    "match",
    "check_criterion",
    # Coercion
    "to_match_string",
    "format_double",
    # Trace
    "MatchTrace",
    "MatchStep",
    "explain",
]
