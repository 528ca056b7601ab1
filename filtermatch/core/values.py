"""Typed attribute values.

Telemetry attributes carry one of a fixed set of value kinds. This module
models them as an explicit tagged union:
- STRING, BOOL, INT (64-bit), DOUBLE (64-bit float)
- BYTES
- ARRAY (ordered values) and MAP (string keys to values)

Values are immutable and compare structurally: two values are equal only when
they have the same variant and equal payloads.
"""

from __future__ import annotations

import math
from enum import Enum
from collections.abc import Iterable, Mapping
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict

from filtermatch.core.errors import ValueConversionError, ValueTypeError


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ValueType(str, Enum):
    """Variant tags for attribute values."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"
    DOUBLE = "double"
    BYTES = "bytes"
    ARRAY = "array"
    MAP = "map"


class AttributeValue(BaseModel):
    """A single typed attribute value.

    Build instances with the ``of_*`` constructors and read them back with the
    matching ``as_*`` accessor. Accessing the wrong variant raises
    ValueTypeError.
    """

    model_config = ConfigDict(frozen=True)

    type: ValueType
    """The variant tag."""

    payload: Any = None
    """Variant payload. Arrays are tuples, maps are key-sorted tuples of pairs."""

    # =========================================================================
    # Constructors
    # =========================================================================

    @classmethod
    def of_string(cls, value: str) -> AttributeValue:
        if not isinstance(value, str):
            raise ValueConversionError(f"expected str, got {type(value).__name__}")
        return cls(type=ValueType.STRING, payload=value)

    @classmethod
    def of_bool(cls, value: bool) -> AttributeValue:
        if not isinstance(value, bool):
            raise ValueConversionError(f"expected bool, got {type(value).__name__}")
        return cls(type=ValueType.BOOL, payload=value)

    @classmethod
    def of_int(cls, value: int) -> AttributeValue:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueConversionError(f"expected int, got {type(value).__name__}")
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueConversionError(f"integer {value} does not fit in 64 bits")
        return cls(type=ValueType.INT, payload=value)

    @classmethod
    def of_double(cls, value: float) -> AttributeValue:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueConversionError(f"expected float, got {type(value).__name__}")
        return cls(type=ValueType.DOUBLE, payload=float(value))

    @classmethod
    def of_bytes(cls, value: bytes | bytearray) -> AttributeValue:
        if not isinstance(value, (bytes, bytearray)):
            raise ValueConversionError(f"expected bytes, got {type(value).__name__}")
        return cls(type=ValueType.BYTES, payload=bytes(value))

    @classmethod
    def of_array(cls, values: Iterable[AttributeValue]) -> AttributeValue:
        items = tuple(values)
        for item in items:
            if not isinstance(item, AttributeValue):
                raise ValueConversionError(
                    f"array elements must be AttributeValue, got {type(item).__name__}"
                )
        return cls(type=ValueType.ARRAY, payload=items)

    @classmethod
    def of_map(cls, values: Mapping[str, AttributeValue]) -> AttributeValue:
        for key, item in values.items():
            if not isinstance(key, str):
                raise ValueConversionError(f"map keys must be str, got {type(key).__name__}")
            if not isinstance(item, AttributeValue):
                raise ValueConversionError(
                    f"map values must be AttributeValue, got {type(item).__name__}"
                )
        pairs = tuple(sorted(values.items(), key=lambda kv: kv[0]))
        return cls(type=ValueType.MAP, payload=pairs)

    # =========================================================================
    # Checked accessors
    # =========================================================================

    def _expect(self, expected: ValueType) -> Any:
        if self.type != expected:
            raise ValueTypeError(f"value is {self.type.value}, not {expected.value}")
        return self.payload

    def as_string(self) -> str:
        return self._expect(ValueType.STRING)

    def as_bool(self) -> bool:
        return self._expect(ValueType.BOOL)

    def as_int(self) -> int:
        return self._expect(ValueType.INT)

    def as_double(self) -> float:
        return self._expect(ValueType.DOUBLE)

    def as_bytes(self) -> bytes:
        return self._expect(ValueType.BYTES)

    def as_array(self) -> tuple[AttributeValue, ...]:
        return self._expect(ValueType.ARRAY)

    def as_map(self) -> dict[str, AttributeValue]:
        return dict(self._expect(ValueType.MAP))

    def to_native(self) -> Any:
        """Convert back to plain Python values (used for traces and debugging)."""
        if self.type == ValueType.ARRAY:
            return [item.to_native() for item in self.payload]
        if self.type == ValueType.MAP:
            return {key: item.to_native() for key, item in self.payload}
        return self.payload

    # =========================================================================
    # Structural equality
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeValue):
            return NotImplemented
        if self.type != other.type:
            return False
        if self.type == ValueType.ARRAY:
            return len(self.payload) == len(other.payload) and all(
                a == b for a, b in zip(self.payload, other.payload)
            )
        if self.type == ValueType.MAP:
            mine, theirs = dict(self.payload), dict(other.payload)
            return mine.keys() == theirs.keys() and all(
                mine[key] == theirs[key] for key in mine
            )
        if self.type == ValueType.DOUBLE and (
            math.isnan(self.payload) or math.isnan(other.payload)
        ):
            return False
        return self.payload == other.payload

    def __hash__(self) -> int:
        return hash((self.type, self.payload))


class ValueNormalizer(Protocol):
    """Converts a loosely typed configuration value into an AttributeValue."""

    def __call__(self, raw: Any) -> AttributeValue: ...


def normalize_value(raw: Any) -> AttributeValue:
    """Normalize a raw configuration value (e.g. parsed YAML) to an AttributeValue.

    Args:
        raw: A str, bool, int, float, bytes, list/tuple or str-keyed dict.
            Containers are normalized recursively.

    Returns:
        The equivalent AttributeValue

    Raises:
        ValueConversionError: If the value (or a nested value) has no
            attribute representation.
    """
    if isinstance(raw, AttributeValue):
        return raw
    # bool is a subclass of int and must be checked first
    if isinstance(raw, bool):
        return AttributeValue.of_bool(raw)
    if isinstance(raw, int):
        return AttributeValue.of_int(raw)
    if isinstance(raw, float):
        return AttributeValue.of_double(raw)
    if isinstance(raw, str):
        return AttributeValue.of_string(raw)
    if isinstance(raw, (bytes, bytearray)):
        return AttributeValue.of_bytes(raw)
    if isinstance(raw, (list, tuple)):
        return AttributeValue.of_array(normalize_value(item) for item in raw)
    if isinstance(raw, Mapping):
        return AttributeValue.of_map(
            {key: normalize_value(item) for key, item in raw.items()}
        )
    raise ValueConversionError(f"unsupported value type: {type(raw).__name__}")
