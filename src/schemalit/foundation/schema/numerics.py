"""Tagged numeric values.

A schema default such as ``5`` carries no width, signedness or precision of
its own; the generated property does. :class:`TaggedNumber` pairs the raw
value with the concrete :class:`NumericKind` so literal converters can
dispatch on an explicit tag instead of probing runtime types.

Example:
    >>> from schemalit.foundation.schema.numerics import NumericKind, TaggedNumber
    >>> TaggedNumber(NumericKind.UINT8, 5)
    TaggedNumber(kind=<NumericKind.UINT8: 'uint8'>, value=5)
"""

from __future__ import annotations

import logging
import math
import struct
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from schemalit.foundation.schema.value_kinds import JsonObjectType

if TYPE_CHECKING:
    from schemalit.foundation.schema.schema import JsonSchema

logger = logging.getLogger(__name__)


class NumericKind(StrEnum):
    """Concrete numeric subtypes a generated property can have."""

    INT8 = "int8"
    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    DECIMAL = "decimal"

    @property
    def is_integer(self) -> bool:
        return self in INTEGER_RANGES

    @property
    def is_float(self) -> bool:
        return self in (NumericKind.FLOAT32, NumericKind.FLOAT64)


INTEGER_RANGES: dict[NumericKind, tuple[int, int]] = {
    NumericKind.INT8: (-(2**7), 2**7 - 1),
    NumericKind.UINT8: (0, 2**8 - 1),
    NumericKind.INT16: (-(2**15), 2**15 - 1),
    NumericKind.UINT16: (0, 2**16 - 1),
    NumericKind.INT32: (-(2**31), 2**31 - 1),
    NumericKind.UINT32: (0, 2**32 - 1),
    NumericKind.INT64: (-(2**63), 2**63 - 1),
    NumericKind.UINT64: (0, 2**64 - 1),
}

# Keys are lowercased ``format`` values.
INTEGER_FORMATS: dict[str, NumericKind] = {
    "int8": NumericKind.INT8,
    "sbyte": NumericKind.INT8,
    "byte": NumericKind.UINT8,
    "uint8": NumericKind.UINT8,
    "int16": NumericKind.INT16,
    "short": NumericKind.INT16,
    "uint16": NumericKind.UINT16,
    "ushort": NumericKind.UINT16,
    "int32": NumericKind.INT32,
    "uint32": NumericKind.UINT32,
    "uint": NumericKind.UINT32,
    "int64": NumericKind.INT64,
    "long": NumericKind.INT64,
    "uint64": NumericKind.UINT64,
    "ulong": NumericKind.UINT64,
}

NUMBER_FORMATS: dict[str, NumericKind] = {
    "float": NumericKind.FLOAT32,
    "float32": NumericKind.FLOAT32,
    "double": NumericKind.FLOAT64,
    "float64": NumericKind.FLOAT64,
    "decimal": NumericKind.DECIMAL,
}


def to_float32(value: float) -> float:
    """Round a double to the nearest single-precision value.

    Raises:
        OverflowError: If a finite value is outside the float32 range.
    """
    return struct.unpack("<f", struct.pack("<f", value))[0]


def float32_digits(value: float) -> str:
    """Shortest decimal digits that parse back to the same float32 value.

    Formatting is locale independent. Callers handle non-finite values.
    """
    for precision in range(1, 10):
        text = format(value, f".{precision}g")
        try:
            if to_float32(float(text)) == value:
                return text
        except OverflowError:
            # Rounding near the float32 limit can overshoot it.
            continue
    return format(value, ".9g")


@dataclass(frozen=True, slots=True)
class TaggedNumber:
    """A numeric default paired with its concrete subtype.

    Attributes:
        kind: The numeric subtype tag.
        value: ``int`` for integer kinds, ``float`` for float kinds
            (float32 values are rounded to single precision), ``Decimal``
            for the decimal kind.

    Raises:
        ValueError: If the value does not fit the kind.
    """

    kind: NumericKind
    value: int | float | Decimal

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, bool):
            msg = f"Boolean is not a numeric value for {self.kind}"
            raise ValueError(msg)

        if self.kind.is_integer:
            if not isinstance(value, int):
                msg = f"{self.kind} requires an int, got {type(value).__name__}"
                raise ValueError(msg)
            low, high = INTEGER_RANGES[self.kind]
            if not low <= value <= high:
                msg = f"Value {value} out of range for {self.kind} [{low}, {high}]"
                raise ValueError(msg)
            return

        if self.kind.is_float:
            if not isinstance(value, (int, float)):
                msg = f"{self.kind} requires a float, got {type(value).__name__}"
                raise ValueError(msg)
            try:
                normalized = float(value)
            except OverflowError:
                msg = f"Value {value} out of range for {self.kind}"
                raise ValueError(msg) from None
            if self.kind is NumericKind.FLOAT32 and math.isfinite(normalized):
                try:
                    normalized = to_float32(normalized)
                except OverflowError:
                    msg = f"Value {value} out of range for {self.kind}"
                    raise ValueError(msg) from None
            object.__setattr__(self, "value", normalized)
            return

        if isinstance(value, Decimal):
            return
        if isinstance(value, (int, float)):
            object.__setattr__(self, "value", Decimal(str(value)))
            return
        msg = f"{self.kind} requires a Decimal, got {type(value).__name__}"
        raise ValueError(msg)


def tag_numeric_default(schema: JsonSchema, default: Any) -> TaggedNumber | None:
    """Tag a raw default with the numeric subtype its schema declares.

    The subtype comes from the schema's kind and ``format``: integers
    without a known format are int32, numbers without one are float64.

    Args:
        schema: The actual schema the default belongs to.
        default: The raw default value (or an already tagged value).

    Returns:
        The tagged value, or ``None`` when the default is not a number or
        does not fit the declared subtype.
    """
    if isinstance(default, TaggedNumber):
        return default
    if isinstance(default, bool) or not isinstance(default, (int, float, Decimal)):
        return None

    fmt = (schema.format or "").lower()
    integral = JsonObjectType.INTEGER in schema.type and (
        JsonObjectType.NUMBER not in schema.type or isinstance(default, int)
    )

    if integral:
        kind = INTEGER_FORMATS.get(fmt, NumericKind.INT32)
        if isinstance(default, float) and default.is_integer():
            default = int(default)
        elif isinstance(default, Decimal) and default.is_finite():
            if default == default.to_integral_value():
                default = int(default)
    else:
        kind = NUMBER_FORMATS.get(fmt, NumericKind.FLOAT64)
        if isinstance(default, Decimal) and kind is not NumericKind.DECIMAL:
            default = float(default)

    try:
        return TaggedNumber(kind, default)
    except ValueError as exc:
        logger.debug("Cannot tag default %r as %s: %s", default, kind, exc)
        return None
