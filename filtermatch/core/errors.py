"""Exceptions raised while building and evaluating attribute matchers."""


class MatcherError(Exception):
    """Base class for attribute matcher failures."""

    pass


class InvalidCriterionError(MatcherError):
    """Raised when a criterion is malformed (e.g. an empty key)."""

    pass


class UnsupportedValueTypeError(MatcherError):
    """Raised when a configured value type cannot be used with the match type."""

    pass


class ValueConversionError(MatcherError):
    """Raised when a raw configuration value cannot be normalized."""

    pass


class PatternCompileError(MatcherError):
    """Raised when a pattern filter set cannot be built."""

    pass


class CriteriaConfigError(MatcherError):
    """Raised when a criteria document is malformed."""

    pass


class UnsupportedCoercionError(MatcherError):
    """Raised when an attribute value has no string form for pattern matching."""

    pass


class ValueTypeError(TypeError):
    """Raised when a checked accessor is used on the wrong value variant."""

    pass
