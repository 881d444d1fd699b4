"""Schemalit Foundation Schema -- pure Python schema primitives.

This package provides the building blocks the default-value generator
consumes: the value-kind bitset, the schema node model with actual-schema
resolution, tagged numeric values, port interfaces, exceptions, and a
minimal document loader.
"""

from schemalit.foundation.schema.exceptions import (
    SchemaLitError,
    SchemaLoadError,
    UnknownLanguageError,
)
from schemalit.foundation.schema.loader import load_schema
from schemalit.foundation.schema.numerics import (
    NumericKind,
    TaggedNumber,
    float32_digits,
    tag_numeric_default,
)
from schemalit.foundation.schema.ports import (
    EnumLiteralQualifier,
    EnumNameGenerator,
    LiteralSyntax,
    NumericLiteralConverter,
    TypeNameResolver,
)
from schemalit.foundation.schema.schema import JsonSchema
from schemalit.foundation.schema.value_kinds import JsonObjectType

__all__ = [
    "EnumLiteralQualifier",
    "EnumNameGenerator",
    "JsonObjectType",
    "JsonSchema",
    "LiteralSyntax",
    "NumericKind",
    "NumericLiteralConverter",
    "SchemaLitError",
    "SchemaLoadError",
    "TaggedNumber",
    "TypeNameResolver",
    "UnknownLanguageError",
    "float32_digits",
    "load_schema",
    "tag_numeric_default",
]
