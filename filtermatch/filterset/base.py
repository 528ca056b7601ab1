"""Filter set interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol, Sequence

from filtermatch.filterset.config import FilterSetConfig


class FilterSet(ABC):
    """A pre-compiled set of patterns tested against strings."""

    @abstractmethod
    def matches(self, value: str) -> bool:
        """Return True if any pattern in the set matches ``value``."""


class FilterSetCompiler(Protocol):
    """Builds a FilterSet from patterns and a config."""

    def __call__(self, patterns: Sequence[str], config: FilterSetConfig) -> FilterSet: ...
