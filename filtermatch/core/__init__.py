"""Core value model, attribute maps, errors and settings."""

from filtermatch.core.attributes import AttributeLookup, AttributeMap, parse_any_value
from filtermatch.core.config import Settings, get_settings
from filtermatch.core.errors import (
    CriteriaConfigError,
    InvalidCriterionError,
    MatcherError,
    PatternCompileError,
    UnsupportedCoercionError,
    UnsupportedValueTypeError,
    ValueConversionError,
    ValueTypeError,
)
from filtermatch.core.values import (
    AttributeValue,
    ValueNormalizer,
    ValueType,
    normalize_value,
)

__all__ = [
    # Values
    "AttributeValue",
    "ValueType",
    "ValueNormalizer",
    "normalize_value",
    # Attributes
    "AttributeLookup",
    "AttributeMap",
    "parse_any_value",
    # Errors
    "MatcherError",
    "InvalidCriterionError",
    "UnsupportedValueTypeError",
    "ValueConversionError",
    "PatternCompileError",
    "CriteriaConfigError",
    "UnsupportedCoercionError",
    "ValueTypeError",
    # Settings
    "Settings",
    "get_settings",
]
