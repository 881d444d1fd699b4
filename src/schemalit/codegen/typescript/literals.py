"""TypeScript literal conversion rules.

TypeScript has a single ``number`` type, so numeric literals carry no
suffix. 64-bit integers beyond ``Number.MAX_SAFE_INTEGER`` would lose
precision as numbers and are emitted as BigInt literals instead.
"""

from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import TYPE_CHECKING

from schemalit.foundation.schema.numerics import INTEGER_RANGES, NumericKind, float32_digits
from schemalit.foundation.schema.value_kinds import JsonObjectType

if TYPE_CHECKING:
    from schemalit.foundation.schema.numerics import TaggedNumber

MAX_SAFE_INTEGER = 2**53 - 1


class TypeScriptNumericLiteralConverter:
    """Converts tagged numbers to TypeScript numeric literals."""

    def convert_numeric(self, value: TaggedNumber) -> str | None:
        kind = value.kind
        number = value.value

        if kind in INTEGER_RANGES:
            integer = int(number)
            if kind in (NumericKind.INT64, NumericKind.UINT64) and abs(integer) > MAX_SAFE_INTEGER:
                return f"{integer}n"
            return str(integer)
        if kind in (NumericKind.FLOAT32, NumericKind.FLOAT64):
            number = float(number)
            if math.isnan(number):
                return "Number.NaN"
            if math.isinf(number):
                return "Number.POSITIVE_INFINITY" if number > 0 else "Number.NEGATIVE_INFINITY"
            if kind is NumericKind.FLOAT32:
                return float32_digits(number)
            text = repr(number)
            return text[:-2] if text.endswith(".0") else text
        if kind is NumericKind.DECIMAL:
            if not isinstance(number, Decimal) or not number.is_finite():
                return None
            return format(number, "f")
        return None


class TypeScriptEnumLiteralQualifier:
    """Qualifies enum member references with a module or namespace path."""

    def qualify_enum(self, namespace: str, member_identifier: str) -> str:
        namespace = namespace.strip().rstrip(".")
        if not namespace:
            return member_identifier
        return f"{namespace}.{member_identifier}"


class TypeScriptLiteralSyntax:
    """TypeScript string, boolean and construction literals."""

    def string_literal(self, value: str) -> str:
        # JSON string syntax is a subset of JavaScript's except for the
        # line separators, which older engines reject unescaped.
        text = json.dumps(value, ensure_ascii=False)
        return text.replace("\u2028", "\\u2028").replace("\u2029", "\\u2029")

    def boolean_literal(self, value: bool) -> str:
        return "true" if value else "false"

    def empty_instance(self, target_type: str, kind: JsonObjectType) -> str | None:
        if JsonObjectType.ARRAY in kind and JsonObjectType.OBJECT not in kind:
            return "[]"
        return f"new {target_type}()"
