"""Value-kind bitset for JSON Schema ``type`` declarations.

A schema may satisfy several JSON value categories at once, so the kind is
a flag set rather than a single value (a nullable integer is
``INTEGER | NULL``).

Example:
    >>> from schemalit.foundation.schema.value_kinds import JsonObjectType
    >>> kind = JsonObjectType.parse(["integer", "null"])
    >>> JsonObjectType.NULL in kind
    True
"""

from __future__ import annotations

from enum import IntFlag
from typing import Any

from schemalit.foundation.schema.exceptions import SchemaLoadError


class JsonObjectType(IntFlag):
    """JSON value categories a schema node declares."""

    NONE = 0
    ARRAY = 1
    BOOLEAN = 2
    INTEGER = 4
    NULL = 8
    NUMBER = 16
    OBJECT = 32
    STRING = 64

    @classmethod
    def parse(cls, value: Any) -> JsonObjectType:
        """Build a flag set from a JSON Schema ``type`` value.

        Args:
            value: ``None``, a type name, or a list of type names.

        Returns:
            The combined flag set (``NONE`` when no type is declared).

        Raises:
            SchemaLoadError: If a name is not a JSON Schema type.
        """
        if value is None:
            return cls.NONE
        names = [value] if isinstance(value, str) else list(value)
        kind = cls.NONE
        for name in names:
            member = _NAMES.get(name) if isinstance(name, str) else None
            if member is None:
                msg = f"Unknown JSON Schema type: {name!r}"
                raise SchemaLoadError(msg, type=repr(name))
            kind |= member
        return kind

    @property
    def is_numeric(self) -> bool:
        return bool(self & (JsonObjectType.INTEGER | JsonObjectType.NUMBER))

    @property
    def is_reference_like(self) -> bool:
        """True when an instance of this kind is an object or array."""
        return bool(self & (JsonObjectType.OBJECT | JsonObjectType.ARRAY))


_NAMES: dict[str, JsonObjectType] = {
    "array": JsonObjectType.ARRAY,
    "boolean": JsonObjectType.BOOLEAN,
    "integer": JsonObjectType.INTEGER,
    "null": JsonObjectType.NULL,
    "number": JsonObjectType.NUMBER,
    "object": JsonObjectType.OBJECT,
    "string": JsonObjectType.STRING,
}
