"""
Match tracing for attribute criteria.

Records how a match decision was reached, one step per criterion checked, for
debugging filter configurations.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from filtermatch.compiler.ir import CompiledMatcher, ExactValue, Pattern
from filtermatch.core.attributes import AttributeLookup
from filtermatch.runtime.evaluator import check_criterion


class MatchStep(BaseModel):
    """A single criterion check."""

    index: int
    """Position of the criterion in the matcher."""

    key: str
    """The attribute key looked up."""

    mode: Literal["key_only", "exact_value", "pattern"]
    """The criterion's match mode."""

    present: bool
    """Whether the key was found in the attributes."""

    expected: Any = None
    """Expected value (exact_value) or pattern text (pattern)."""

    actual: Any = None
    """The attribute's value, if present."""

    result: bool
    """Whether the criterion passed."""


class MatchTrace(BaseModel):
    """Complete trace of one evaluation.

    Steps stop at the first failed criterion, mirroring evaluation.
    """

    matched: bool = False
    """The overall match decision."""

    steps: list[MatchStep] = Field(default_factory=list)
    """Criteria checked, in order."""

    def failed_step(self) -> MatchStep | None:
        """Return the step that caused a non-match, if any."""
        for step in self.steps:
            if not step.result:
                return step
        return None


def explain(compiled: CompiledMatcher, attrs: AttributeLookup) -> MatchTrace:
    """Evaluate ``compiled`` against ``attrs`` and record each step.

    The ``matched`` field always equals ``match(compiled, attrs)``.
    """
    if not compiled.criteria:
        return MatchTrace(matched=True)
    if len(attrs) == 0:
        return MatchTrace(matched=False)

    trace = MatchTrace(matched=True)
    for index, criterion in enumerate(compiled.criteria):
        actual = attrs.get(criterion.key)
        mode = criterion.mode

        expected: Any = None
        if isinstance(mode, ExactValue):
            expected = mode.value.to_native()
        elif isinstance(mode, Pattern):
            expected = mode.source

        result = check_criterion(criterion, actual)
        trace.steps.append(
            MatchStep(
                index=index,
                key=criterion.key,
                mode=mode.kind,
                present=actual is not None,
                expected=expected,
                actual=actual.to_native() if actual is not None else None,
                result=result,
            )
        )
        if not result:
            trace.matched = False
            break
    return trace
