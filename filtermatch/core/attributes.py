"""Read-only attribute maps for telemetry records."""

from __future__ import annotations

import base64
import binascii
from collections.abc import Iterator, Mapping
from typing import Any, Protocol

from filtermatch.core.errors import ValueConversionError
from filtermatch.core.values import AttributeValue, normalize_value


class AttributeLookup(Protocol):
    """What the evaluator needs from a record's attributes.

    A plain ``dict[str, AttributeValue]`` satisfies this protocol.
    """

    def get(self, key: str) -> AttributeValue | None: ...

    def __len__(self) -> int: ...


class AttributeMap(Mapping[str, AttributeValue]):
    """Immutable mapping of attribute key to typed value."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, AttributeValue] | None = None):
        self._values: dict[str, AttributeValue] = dict(values or {})
        for key, value in self._values.items():
            if not isinstance(value, AttributeValue):
                raise ValueConversionError(
                    f"attribute {key!r} is not an AttributeValue: {type(value).__name__}"
                )

    @classmethod
    def from_dict(cls, attributes: Mapping[str, Any]) -> AttributeMap:
        """Build a map from native Python values."""
        return cls({key: normalize_value(value) for key, value in attributes.items()})

    @classmethod
    def from_otlp(cls, attributes: list[dict[str, Any]] | None) -> AttributeMap:
        """Build a map from an OTLP/JSON ``attributes`` list.

        Each entry is ``{"key": ..., "value": AnyValue}``. Entries without a key
        are skipped.
        """
        parsed: dict[str, AttributeValue] = {}
        for attr in attributes or []:
            key = attr.get("key")
            if not key:
                continue
            parsed[key] = parse_any_value(attr.get("value", {}))
        return cls(parsed)

    def __getitem__(self, key: str) -> AttributeValue:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"AttributeMap({self._values!r})"


def parse_any_value(value: dict[str, Any]) -> AttributeValue:
    """Decode an OTLP/JSON AnyValue into an AttributeValue."""
    if not isinstance(value, dict):
        raise ValueConversionError(f"AnyValue must be an object, got {type(value).__name__}")

    if "stringValue" in value:
        return AttributeValue.of_string(value["stringValue"])
    if "boolValue" in value:
        return AttributeValue.of_bool(value["boolValue"])
    if "intValue" in value:
        # int64 is encoded as a decimal string in OTLP/JSON
        try:
            return AttributeValue.of_int(int(value["intValue"]))
        except (TypeError, ValueError) as e:
            raise ValueConversionError(f"invalid intValue: {value['intValue']!r}") from e
    if "doubleValue" in value:
        try:
            return AttributeValue.of_double(float(value["doubleValue"]))
        except (TypeError, ValueError) as e:
            raise ValueConversionError(f"invalid doubleValue: {value['doubleValue']!r}") from e
    if "bytesValue" in value:
        try:
            return AttributeValue.of_bytes(base64.b64decode(value["bytesValue"], validate=True))
        except (TypeError, binascii.Error) as e:
            raise ValueConversionError(f"invalid bytesValue: {value['bytesValue']!r}") from e
    if "arrayValue" in value:
        return AttributeValue.of_array(
            parse_any_value(v) for v in value["arrayValue"].get("values", [])
        )
    if "kvlistValue" in value:
        return AttributeValue.of_map(
            {
                kv["key"]: parse_any_value(kv.get("value", {}))
                for kv in value["kvlistValue"].get("values", [])
                if kv.get("key")
            }
        )
    raise ValueConversionError(f"unrecognized AnyValue: {sorted(value)}")
