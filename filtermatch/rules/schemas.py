"""Schemas for attribute criteria configuration."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError

from filtermatch.compiler.compiler import compile_matcher
from filtermatch.compiler.ir import CompiledMatcher
from filtermatch.core.config import get_settings
from filtermatch.core.errors import CriteriaConfigError
from filtermatch.filterset.config import FilterSetConfig, MatchType


def _default_match_type() -> MatchType:
    try:
        settings = get_settings()
    except ValidationError as e:
        raise CriteriaConfigError(f"Invalid filtermatch settings: {e}") from e
    return settings.default_match_type


class AttributeSpec(BaseModel):
    """A configured attribute criterion.

    A missing ``value`` means only the presence of ``key`` is checked.
    """

    key: str
    value: Any = None


class MatchProperties(BaseModel):
    """A named block of attribute criteria sharing one match type."""

    name: str | None = None
    match_type: MatchType = Field(default_factory=_default_match_type)
    attributes: list[AttributeSpec] = Field(default_factory=list)

    def filter_set_config(self) -> FilterSetConfig:
        """Filter set config for this block."""
        return FilterSetConfig(match_type=self.match_type)

    def compile(self) -> CompiledMatcher:
        """Compile this block's attributes into a matcher."""
        return compile_matcher(self.filter_set_config(), self.attributes)
