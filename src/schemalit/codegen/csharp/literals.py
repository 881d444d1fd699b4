"""C# literal conversion rules.

Numeric literals carry the suffix or narrowing cast of their subtype so the
literal has exactly the property's type:

=========  ==============  ==========
Kind       C# type         Example
=========  ==============  ==========
int8       ``sbyte``       ``(sbyte)5``
uint8      ``byte``        ``(byte)5``
int16      ``short``       ``(short)5``
uint16     ``ushort``      ``(ushort)5``
int32      ``int``         ``5``
uint32     ``uint``        ``5U``
int64      ``long``        ``5L``
uint64     ``ulong``       ``5UL``
float32    ``float``       ``1.5F``
float64    ``double``      ``1.5D``
decimal    ``decimal``     ``1.5M``
=========  ==============  ==========

All formatting is locale independent. Floating point values use the
shortest digits that round-trip to the same binary value.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import TYPE_CHECKING

from schemalit.foundation.schema.numerics import NumericKind, float32_digits

if TYPE_CHECKING:
    from schemalit.foundation.schema.numerics import TaggedNumber
    from schemalit.foundation.schema.value_kinds import JsonObjectType

_CASTS: dict[NumericKind, str] = {
    NumericKind.INT8: "sbyte",
    NumericKind.UINT8: "byte",
    NumericKind.INT16: "short",
    NumericKind.UINT16: "ushort",
}

_SUFFIXES: dict[NumericKind, str] = {
    NumericKind.INT32: "",
    NumericKind.UINT32: "U",
    NumericKind.INT64: "L",
    NumericKind.UINT64: "UL",
}

# System.Decimal.MaxValue
_DECIMAL_MAX = Decimal("79228162514264337593543950335")

_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\0": "\\0",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def _non_finite(type_name: str, value: float) -> str:
    if math.isnan(value):
        return f"{type_name}.NaN"
    return f"{type_name}.PositiveInfinity" if value > 0 else f"{type_name}.NegativeInfinity"


class CSharpNumericLiteralConverter:
    """Converts tagged numbers to C# numeric literals."""

    def convert_numeric(self, value: TaggedNumber) -> str | None:
        kind = value.kind
        number = value.value

        if kind in _CASTS:
            return f"({_CASTS[kind]}){int(number)}"
        if kind in _SUFFIXES:
            return f"{int(number)}{_SUFFIXES[kind]}"
        if kind is NumericKind.FLOAT32:
            if not math.isfinite(number):
                return _non_finite("float", float(number))
            return float32_digits(float(number)) + "F"
        if kind is NumericKind.FLOAT64:
            if not math.isfinite(number):
                return _non_finite("double", float(number))
            return repr(float(number)) + "D"
        if kind is NumericKind.DECIMAL:
            if not isinstance(number, Decimal) or not number.is_finite():
                return None
            if number.copy_abs() > _DECIMAL_MAX:
                return None
            return format(number, "f") + "M"
        return None


class CSharpEnumLiteralQualifier:
    """Qualifies enum member references with a C# namespace."""

    def qualify_enum(self, namespace: str, member_identifier: str) -> str:
        namespace = namespace.strip().rstrip(".")
        if not namespace:
            return member_identifier
        return f"{namespace}.{member_identifier}"


class CSharpLiteralSyntax:
    """C# string, boolean and construction literals."""

    def string_literal(self, value: str) -> str:
        escaped = []
        for char in value:
            if char in _ESCAPES:
                escaped.append(_ESCAPES[char])
            elif ord(char) < 0x20 or char in "\u0085\u2028\u2029":
                escaped.append(f"\\u{ord(char):04x}")
            else:
                escaped.append(char)
        return '"' + "".join(escaped) + '"'

    def boolean_literal(self, value: bool) -> str:
        return "true" if value else "false"

    def empty_instance(self, target_type: str, kind: JsonObjectType) -> str | None:
        return f"new {target_type}()"
