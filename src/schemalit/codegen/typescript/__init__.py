"""Schemalit TypeScript target -- default value literals for generated TypeScript classes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalit.codegen.core.generator import DefaultValueGenerator
from schemalit.codegen.typescript.literals import (
    TypeScriptEnumLiteralQualifier,
    TypeScriptLiteralSyntax,
    TypeScriptNumericLiteralConverter,
)
from schemalit.codegen.typescript.settings import (
    TypeScriptGeneratorSettings,
    get_typescript_settings,
)

if TYPE_CHECKING:
    from schemalit.codegen.core.settings import CodeGeneratorSettings
    from schemalit.foundation.schema.ports import EnumNameGenerator, TypeNameResolver


def create_typescript_generator(
    settings: CodeGeneratorSettings | None = None,
    *,
    type_resolver: TypeNameResolver | None = None,
    enum_name_generator: EnumNameGenerator | None = None,
) -> DefaultValueGenerator:
    """Build a default value generator emitting TypeScript literals.

    Args:
        settings: Generator settings. Defaults to the cached
            :class:`TypeScriptGeneratorSettings` loaded from the environment.
        type_resolver: Type naming collaborator.
        enum_name_generator: Enum member naming.
    """
    extra: dict[str, object] = {}
    if type_resolver is not None:
        extra["type_resolver"] = type_resolver
    if enum_name_generator is not None:
        extra["enum_name_generator"] = enum_name_generator
    return DefaultValueGenerator(
        numeric_converter=TypeScriptNumericLiteralConverter(),
        enum_qualifier=TypeScriptEnumLiteralQualifier(),
        syntax=TypeScriptLiteralSyntax(),
        settings=settings if settings is not None else get_typescript_settings(),
        **extra,  # type: ignore[arg-type]
    )


__all__ = [
    "TypeScriptEnumLiteralQualifier",
    "TypeScriptGeneratorSettings",
    "TypeScriptLiteralSyntax",
    "TypeScriptNumericLiteralConverter",
    "create_typescript_generator",
    "get_typescript_settings",
]
