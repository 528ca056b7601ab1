"""
Tests for the attribute value model.

Tests constructors, checked accessors, structural equality and normalization.
"""

import math

import pytest

from filtermatch.core.errors import ValueConversionError, ValueTypeError
from filtermatch.core.values import (
    INT64_MAX,
    INT64_MIN,
    AttributeValue,
    ValueType,
    normalize_value,
)


class TestConstructors:
    """Test typed constructors."""

    def test_scalar_variants(self):
        """Test each scalar constructor sets the right tag."""
        assert AttributeValue.of_string("GET").type == ValueType.STRING
        assert AttributeValue.of_bool(True).type == ValueType.BOOL
        assert AttributeValue.of_int(200).type == ValueType.INT
        assert AttributeValue.of_double(1.5).type == ValueType.DOUBLE
        assert AttributeValue.of_bytes(b"\x00").type == ValueType.BYTES

    def test_int_rejects_bool(self):
        """Test that bools are not accepted as ints."""
        with pytest.raises(ValueConversionError):
            AttributeValue.of_int(True)

    def test_int_range(self):
        """Test the 64-bit range is enforced."""
        assert AttributeValue.of_int(INT64_MAX).as_int() == INT64_MAX
        assert AttributeValue.of_int(INT64_MIN).as_int() == INT64_MIN
        with pytest.raises(ValueConversionError):
            AttributeValue.of_int(INT64_MAX + 1)

    def test_double_accepts_int(self):
        """Test that of_double widens ints to float."""
        value = AttributeValue.of_double(200)
        assert value.as_double() == 200.0
        assert isinstance(value.payload, float)

    def test_array_requires_values(self):
        """Test that array elements must already be AttributeValues."""
        with pytest.raises(ValueConversionError):
            AttributeValue.of_array([1, 2])

    def test_map_requires_string_keys(self):
        """Test that map keys must be strings."""
        with pytest.raises(ValueConversionError):
            AttributeValue.of_map({1: AttributeValue.of_int(1)})

    def test_frozen(self):
        """Test values cannot be mutated."""
        value = AttributeValue.of_int(1)
        with pytest.raises(Exception):
            value.payload = 2


class TestAccessors:
    """Test checked accessors."""

    def test_matching_accessor(self):
        """Test reading the payload through the matching accessor."""
        assert AttributeValue.of_string("x").as_string() == "x"
        assert AttributeValue.of_bool(False).as_bool() is False
        assert AttributeValue.of_bytes(b"ab").as_bytes() == b"ab"

    def test_wrong_accessor_raises(self):
        """Test that reading the wrong variant raises ValueTypeError."""
        with pytest.raises(ValueTypeError):
            AttributeValue.of_int(1).as_string()
        with pytest.raises(ValueTypeError):
            AttributeValue.of_string("1").as_int()

    def test_value_type_error_is_type_error(self):
        """Test ValueTypeError can be caught as TypeError."""
        with pytest.raises(TypeError):
            AttributeValue.of_bool(True).as_double()

    def test_map_accessor_returns_dict(self):
        """Test as_map returns a fresh dict."""
        value = AttributeValue.of_map({"b": AttributeValue.of_int(2), "a": AttributeValue.of_int(1)})
        result = value.as_map()
        assert result == {"a": AttributeValue.of_int(1), "b": AttributeValue.of_int(2)}
        result["c"] = AttributeValue.of_int(3)
        assert "c" not in value.as_map()

    def test_to_native(self):
        """Test conversion back to plain Python values."""
        value = normalize_value({"codes": [200, 404], "ok": True})
        assert value.to_native() == {"codes": [200, 404], "ok": True}


class TestEquality:
    """Test structural equality."""

    def test_same_variant_same_payload(self):
        """Test equal scalars compare equal."""
        assert AttributeValue.of_int(200) == AttributeValue.of_int(200)
        assert AttributeValue.of_string("a") == AttributeValue.of_string("a")

    def test_int_not_equal_double(self):
        """Test Int(200) != Double(200.0)."""
        assert AttributeValue.of_int(200) != AttributeValue.of_double(200.0)

    def test_bool_not_equal_int(self):
        """Test Bool(True) != Int(1)."""
        assert AttributeValue.of_bool(True) != AttributeValue.of_int(1)

    def test_string_not_equal_bytes(self):
        """Test String("a") != Bytes(b"a")."""
        assert AttributeValue.of_string("a") != AttributeValue.of_bytes(b"a")

    def test_nan_never_equal(self):
        """Test NaN doubles are not equal, even to themselves."""
        nan = AttributeValue.of_double(math.nan)
        assert nan != nan

    def test_nested_arrays(self):
        """Test arrays compare element-wise with variant tags."""
        a = normalize_value([1, "x", [True]])
        b = normalize_value([1, "x", [True]])
        c = normalize_value([1.0, "x", [True]])
        assert a == b
        assert a != c
        assert normalize_value([1]) != normalize_value([1, 1])

    def test_maps_ignore_insertion_order(self):
        """Test maps compare by content, not key order."""
        a = normalize_value({"x": 1, "y": "z"})
        b = normalize_value({"y": "z", "x": 1})
        assert a == b
        assert hash(a) == hash(b)
        assert a != normalize_value({"x": 1, "y": "other"})
        assert a != normalize_value({"x": 1})

    def test_not_equal_to_native(self):
        """Test values are not equal to raw Python values."""
        assert AttributeValue.of_int(1) != 1


class TestNormalize:
    """Test the default value normalizer."""

    @pytest.mark.parametrize(
        "raw,expected_type",
        [
            ("GET", ValueType.STRING),
            (True, ValueType.BOOL),
            (200, ValueType.INT),
            (200.0, ValueType.DOUBLE),
            (b"raw", ValueType.BYTES),
            (bytearray(b"raw"), ValueType.BYTES),
            ([1, 2], ValueType.ARRAY),
            ((1, 2), ValueType.ARRAY),
            ({"a": 1}, ValueType.MAP),
        ],
    )
    def test_supported_types(self, raw, expected_type):
        """Test each supported raw type maps to its variant."""
        assert normalize_value(raw).type == expected_type

    def test_bool_checked_before_int(self):
        """Test bools normalize to BOOL, not INT."""
        assert normalize_value(False) == AttributeValue.of_bool(False)

    def test_passthrough(self):
        """Test AttributeValues are returned unchanged."""
        value = AttributeValue.of_int(7)
        assert normalize_value(value) is value

    @pytest.mark.parametrize("raw", [None, object(), {1, 2}, [None], {"a": None}, {1: "a"}])
    def test_unsupported_types(self, raw):
        """Test unsupported values raise ValueConversionError."""
        with pytest.raises(ValueConversionError):
            normalize_value(raw)

    def test_int_overflow(self):
        """Test ints beyond 64 bits are rejected."""
        with pytest.raises(ValueConversionError):
            normalize_value(2**64)
