"""
Attribute criteria compiler.

Compiles configured (key, optional value) pairs into a CompiledMatcher once at
startup, so per-record evaluation never has to inspect configuration again.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from filtermatch.compiler.ir import (
    CompiledMatcher,
    Criterion,
    ExactValue,
    KeyOnly,
    MatchMode,
    Pattern,
)
from filtermatch.core.errors import (
    InvalidCriterionError,
    MatcherError,
    PatternCompileError,
    UnsupportedValueTypeError,
    ValueConversionError,
)
from filtermatch.core.values import AttributeValue, ValueNormalizer, ValueType, normalize_value
from filtermatch.filterset.base import FilterSetCompiler
from filtermatch.filterset.config import MATCH_TYPE_FIELD_NAME, FilterSetConfig, MatchType
from filtermatch.filterset.factory import create_filter_set

logger = logging.getLogger(__name__)


class MatcherCompiler:
    """Compiles attribute criteria into a CompiledMatcher.

    The value normalizer and filter set compiler are injectable so either can
    be replaced (or stubbed in tests).
    """

    def __init__(
        self,
        normalizer: ValueNormalizer | None = None,
        filter_compiler: FilterSetCompiler | None = None,
    ):
        """Initialize the compiler.

        Args:
            normalizer: Converts raw config values (defaults to normalize_value)
            filter_compiler: Builds pattern filter sets (defaults to create_filter_set)
        """
        self._normalize = normalizer or normalize_value
        self._create_filter_set = filter_compiler or create_filter_set

    def compile(
        self,
        config: FilterSetConfig,
        criteria: Iterable[Any],
    ) -> CompiledMatcher:
        """Compile criteria into a matcher.

        Compilation is all-or-nothing: the first invalid criterion raises and
        no matcher is returned.

        Args:
            config: Filter set config selecting the match type
            criteria: Items with a key and optional value. Each item is an
                object with ``key``/``value`` attributes, a ``(key, value)``
                tuple, or a ``{"key": ..., "value": ...}`` mapping.

        Returns:
            CompiledMatcher with criteria in input order

        Raises:
            InvalidCriterionError: If a key is empty
            ValueConversionError: If a value cannot be normalized
            UnsupportedValueTypeError: If regexp mode gets a non-string value
            PatternCompileError: If a pattern cannot be compiled
        """
        compiled: list[Criterion] = []
        for position, item in enumerate(criteria):
            try:
                key, raw_value = _split_criterion(item, position)
                mode = self._compile_mode(config, key, raw_value)
            except MatcherError as e:
                logger.warning(f"Failed to compile attribute criterion {position}: {e}")
                raise
            compiled.append(Criterion(key=key, mode=mode))

        logger.debug(
            f"Compiled {len(compiled)} attribute criteria "
            f"({MATCH_TYPE_FIELD_NAME}={config.match_type.value})"
        )
        return CompiledMatcher(criteria=tuple(compiled))

    def _compile_mode(self, config: FilterSetConfig, key: str, raw_value: Any) -> MatchMode:
        """Decide the match mode for one criterion."""
        if raw_value is None:
            return KeyOnly()

        value = self._normalize_value(key, raw_value)

        if config.match_type != MatchType.REGEXP:
            return ExactValue(value=value)

        if value.type != ValueType.STRING:
            raise UnsupportedValueTypeError(
                f"{MATCH_TYPE_FIELD_NAME}={MatchType.REGEXP.value} for {key!r} "
                f"only supports {ValueType.STRING.value}, but found {value.type.value}"
            )

        pattern = value.as_string()
        try:
            filter_set = self._create_filter_set([pattern], config)
        except PatternCompileError:
            raise
        except (TypeError, ValueError) as e:
            raise PatternCompileError(f"invalid pattern {pattern!r} for {key!r}: {e}") from e
        return Pattern(filter=filter_set, source=pattern)

    def _normalize_value(self, key: str, raw_value: Any) -> AttributeValue:
        try:
            return self._normalize(raw_value)
        except ValueConversionError:
            raise
        except (TypeError, ValueError) as e:
            raise ValueConversionError(f"cannot convert value for {key!r}: {e}") from e


def _split_criterion(item: Any, position: int) -> tuple[str, Any]:
    """Extract (key, raw value) from a criterion item."""
    if isinstance(item, tuple):
        if len(item) != 2:
            raise InvalidCriterionError(
                f"criterion {position} must be a (key, value) pair, got {len(item)} items"
            )
        key, raw_value = item
    elif isinstance(item, Mapping):
        key, raw_value = item.get("key"), item.get("value")
    else:
        key, raw_value = getattr(item, "key", None), getattr(item, "value", None)

    if not isinstance(key, str):
        raise InvalidCriterionError(f"criterion {position} key must be a string, got {key!r}")
    if key == "":
        raise InvalidCriterionError("can't have empty key in the list of attributes")
    return key, raw_value


def compile_matcher(config: FilterSetConfig, criteria: Iterable[Any]) -> CompiledMatcher:
    """Compile criteria with the default normalizer and filter set factory."""
    return MatcherCompiler().compile(config, criteria)
