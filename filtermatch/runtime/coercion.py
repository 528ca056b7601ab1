"""String forms of attribute values for pattern matching."""

from __future__ import annotations

import math
from decimal import Context, Decimal

from filtermatch.core.errors import UnsupportedCoercionError
from filtermatch.core.values import AttributeValue, ValueType

_DOUBLE_CONTEXT = Context(prec=17)


def format_double(value: float) -> str:
    """Shortest round-trippable decimal form, without exponent.

    200.0 -> "200", 1e20 -> "100000000000000000000", 1e-07 -> "0.0000001".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    # repr has at most 17 significant digits; a fixed context keeps them all
    return format(Decimal(repr(value)).normalize(_DOUBLE_CONTEXT), "f")


def to_match_string(value: AttributeValue) -> str:
    """Coerce a scalar attribute value to the string a pattern is tested against.

    Raises:
        UnsupportedCoercionError: For bytes, arrays, maps and unknown variants.
    """
    if value.type == ValueType.STRING:
        return value.as_string()
    if value.type == ValueType.BOOL:
        return "true" if value.as_bool() else "false"
    if value.type == ValueType.INT:
        return str(value.as_int())
    if value.type == ValueType.DOUBLE:
        return format_double(value.as_double())
    raise UnsupportedCoercionError(f"unexpected attribute type: {value.type.value}")
