"""Schemalit C# target -- default value literals for generated C# classes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalit.codegen.core.generator import DefaultValueGenerator
from schemalit.codegen.csharp.literals import (
    CSharpEnumLiteralQualifier,
    CSharpLiteralSyntax,
    CSharpNumericLiteralConverter,
)
from schemalit.codegen.csharp.settings import CSharpGeneratorSettings, get_csharp_settings

if TYPE_CHECKING:
    from schemalit.codegen.core.settings import CodeGeneratorSettings
    from schemalit.foundation.schema.ports import EnumNameGenerator, TypeNameResolver


def create_csharp_generator(
    settings: CodeGeneratorSettings | None = None,
    *,
    type_resolver: TypeNameResolver | None = None,
    enum_name_generator: EnumNameGenerator | None = None,
) -> DefaultValueGenerator:
    """Build a default value generator emitting C# literals.

    Args:
        settings: Generator settings. Defaults to the cached
            :class:`CSharpGeneratorSettings` loaded from the environment.
        type_resolver: Type naming collaborator (default: title/hint based).
        enum_name_generator: Enum member naming (default: upper camel case).
    """
    extra: dict[str, object] = {}
    if type_resolver is not None:
        extra["type_resolver"] = type_resolver
    if enum_name_generator is not None:
        extra["enum_name_generator"] = enum_name_generator
    return DefaultValueGenerator(
        numeric_converter=CSharpNumericLiteralConverter(),
        enum_qualifier=CSharpEnumLiteralQualifier(),
        syntax=CSharpLiteralSyntax(),
        settings=settings if settings is not None else get_csharp_settings(),
        **extra,  # type: ignore[arg-type]
    )


__all__ = [
    "CSharpEnumLiteralQualifier",
    "CSharpGeneratorSettings",
    "CSharpLiteralSyntax",
    "CSharpNumericLiteralConverter",
    "create_csharp_generator",
    "get_csharp_settings",
]
