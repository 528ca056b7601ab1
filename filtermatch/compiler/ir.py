"""
Compiled representation of attribute criteria.

Each criterion carries exactly one match mode, decided at compile time:
- KeyOnly: the key must be present
- ExactValue: the attribute must equal a typed value
- Pattern: the attribute's string form must match a filter set

All models are frozen so a CompiledMatcher can be shared between threads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from filtermatch.core.values import AttributeValue
from filtermatch.filterset.base import FilterSet

if TYPE_CHECKING:
    from filtermatch.core.attributes import AttributeLookup
    from filtermatch.runtime.trace import MatchTrace


class KeyOnly(BaseModel):
    """Satisfied by the presence of the key."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["key_only"] = "key_only"


class ExactValue(BaseModel):
    """Satisfied when the attribute is structurally equal to ``value``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["exact_value"] = "exact_value"

    value: AttributeValue
    """The expected typed value."""


class Pattern(BaseModel):
    """Satisfied when the attribute's string form matches ``filter``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["pattern"] = "pattern"

    filter: FilterSet
    """Compiled single-pattern filter set."""

    source: str
    """The configured pattern text."""


MatchMode = Annotated[KeyOnly | ExactValue | Pattern, Field(discriminator="kind")]


class Criterion(BaseModel):
    """A single compiled attribute check."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1)
    """The attribute key to look up."""

    mode: MatchMode
    """How the attribute value is checked once the key is found."""


class CompiledMatcher(BaseModel):
    """Ordered, immutable list of criteria. All of them must pass."""

    model_config = ConfigDict(frozen=True)

    criteria: tuple[Criterion, ...] = ()
    """Criteria in configuration order."""

    def __len__(self) -> int:
        return len(self.criteria)

    def match(self, attrs: AttributeLookup) -> bool:
        """Check a record's attributes against every criterion."""
        from filtermatch.runtime.evaluator import match

        return match(self, attrs)

    def explain(self, attrs: AttributeLookup) -> MatchTrace:
        """Evaluate like ``match`` and record each criterion checked."""
        from filtermatch.runtime.trace import explain

        return explain(self, attrs)
