"""
Runtime evaluator for compiled attribute criteria.

Evaluation is a short-circuiting AND over the criteria in compile order. It
never raises: values that cannot be coerced for pattern matching fail only
their own criterion.
"""

from __future__ import annotations

import logging

from filtermatch.compiler.ir import CompiledMatcher, Criterion, KeyOnly, Pattern
from filtermatch.core.attributes import AttributeLookup
from filtermatch.core.errors import UnsupportedCoercionError
from filtermatch.core.values import AttributeValue
from filtermatch.runtime.coercion import to_match_string

logger = logging.getLogger(__name__)


def check_criterion(criterion: Criterion, actual: AttributeValue | None) -> bool:
    """Check one criterion against the attribute value found for its key.

    Args:
        criterion: The compiled criterion
        actual: The record's value for ``criterion.key`` (None if absent)

    Returns:
        True if the criterion is satisfied
    """
    if actual is None:
        return False

    mode = criterion.mode
    if isinstance(mode, KeyOnly):
        return True

    if isinstance(mode, Pattern):
        try:
            value = to_match_string(actual)
        except UnsupportedCoercionError as e:
            logger.debug(f"Attribute {criterion.key!r} not matched: {e}")
            return False
        return mode.filter.matches(value)

    return actual == mode.value


def match(compiled: CompiledMatcher, attrs: AttributeLookup) -> bool:
    """Match a record's attributes against a compiled matcher.

    Args:
        compiled: The compiled criteria
        attrs: The record's attributes (any mapping of key -> AttributeValue)

    Returns:
        True if every criterion is satisfied
    """
    # No criteria: every record matches
    if not compiled.criteria:
        return True

    # Criteria exist, so a record without attributes cannot match
    if len(attrs) == 0:
        return False

    for criterion in compiled.criteria:
        if not check_criterion(criterion, attrs.get(criterion.key)):
            return False
    return True
