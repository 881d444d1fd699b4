"""Default naming collaborators.

Code generators usually bring their own type and enum member naming. These
implementations cover the common case: upper camel case identifiers
derived from declared names.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from schemalit.foundation.schema.schema import JsonSchema

_WORD_SPLIT = re.compile(r"[^0-9A-Za-z]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def to_upper_camel_case(text: str) -> str:
    """Convert arbitrary text to an UpperCamelCase identifier.

    Separators are dropped and each word is capitalised; existing camel
    humps are preserved (``"fooBar-baz"`` -> ``"FooBarBaz"``). A leading
    digit is prefixed with an underscore.

    Example:
        >>> to_upper_camel_case("light-blue")
        'LightBlue'
        >>> to_upper_camel_case("2xl")
        '_2xl'
    """
    words = [w for w in _WORD_SPLIT.split(text) if w]
    parts: list[str] = []
    for word in words:
        for piece in _CAMEL_BOUNDARY.split(word):
            parts.append(piece[:1].upper() + piece[1:])
    result = "".join(parts)
    if result[:1].isdigit():
        result = "_" + result
    return result


class DefaultEnumNameGenerator:
    """Enum member naming: upper camel case of the declared member name."""

    def generate(self, index: int, name: str, value: Any, schema: JsonSchema) -> str:
        if name is None or not str(name).strip():
            return "Empty"
        # ':' separates prefixes in values such as "status:active".
        identifier = to_upper_camel_case(str(name).replace(":", "-"))
        return identifier or "Empty"


class DefaultTypeNameResolver:
    """Type naming from the schema's declared name, title, or the caller's hint."""

    def resolve(self, schema: JsonSchema, is_nullable: bool, type_name_hint: str | None) -> str:
        for candidate in (schema.type_name_hint, schema.title, type_name_hint):
            if candidate:
                name = to_upper_camel_case(candidate)
                if name:
                    return name
        return "Anonymous"
