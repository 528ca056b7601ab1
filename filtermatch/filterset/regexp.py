"""Regular expression filter set."""

from __future__ import annotations

import re
from typing import Sequence

from filtermatch.core.errors import PatternCompileError
from filtermatch.filterset.base import FilterSet


class RegexpFilterSet(FilterSet):
    """Matches strings containing a match for any configured pattern.

    Patterns are unanchored: ``GET`` matches ``"GET"`` and ``"FORGET"``.
    Use ``^``/``$`` to anchor explicitly.

    Patterns run on Python's backtracking ``re`` engine, not RE2, so there
    is no linear-time guarantee. Nested quantifiers such as ``(a+)+$`` take
    exponential time on inputs like ``"aaaa...!"``. Configured patterns
    should avoid them; ``a+$`` accepts the same strings.
    """

    def __init__(self, patterns: Sequence[str]):
        compiled: list[re.Pattern[str]] = []
        for pattern in patterns:
            try:
                compiled.append(re.compile(pattern))
            except re.error as e:
                raise PatternCompileError(f"invalid regexp {pattern!r}: {e}") from e
        self._patterns = tuple(compiled)

    def matches(self, value: str) -> bool:
        return any(pattern.search(value) for pattern in self._patterns)

    def __repr__(self) -> str:
        return f"RegexpFilterSet({[p.pattern for p in self._patterns]!r})"
