"""Language-independent default value generator.

Turns the default declared by a schema (or its absence) into a literal
expression for the property being emitted. Target-language specifics are
injected as strategies; see :mod:`schemalit.foundation.schema.ports`.

Resolution order:
1. Defaults disabled (per call or in settings) -> no literal.
2. Enumeration with a default -> qualified enum member reference.
3. Integer/number with a default -> numeric literal of the tagged subtype.
4. String/boolean with a default -> primitive literal.
5. Nothing produced, null not allowed, object/array kind -> empty instance.
6. Otherwise no literal; the property keeps the language's implicit default.

No step raises for schema content. Every failure degrades to ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from schemalit.codegen.core.logging import get_logger
from schemalit.codegen.core.naming import DefaultEnumNameGenerator, DefaultTypeNameResolver
from schemalit.codegen.core.settings import CodeGeneratorSettings
from schemalit.foundation.schema.numerics import TaggedNumber, tag_numeric_default
from schemalit.foundation.schema.value_kinds import JsonObjectType

if TYPE_CHECKING:
    from schemalit.foundation.schema.ports import (
        EnumLiteralQualifier,
        EnumNameGenerator,
        LiteralSyntax,
        NumericLiteralConverter,
        TypeNameResolver,
    )
    from schemalit.foundation.schema.schema import JsonSchema

logger = get_logger(__name__)


@dataclass(frozen=True)
class DefaultValueGenerator:
    """Renders schema defaults as target-language literals.

    Instances hold only immutable configuration and are safe to share
    between threads.

    Attributes:
        numeric_converter: Renders tagged numbers.
        enum_qualifier: Qualifies enum member references.
        syntax: Primitive literal forms and empty-instance construction.
        settings: Namespace and the global default-value switch.
        type_resolver: Generated type names (for enum references).
        enum_name_generator: Enum member naming strategy.

    Example:
        >>> from schemalit.codegen.csharp import create_csharp_generator
        >>> from schemalit.foundation.schema import JsonObjectType, JsonSchema
        >>> gen = create_csharp_generator()
        >>> gen.get_default_value(
        ...     JsonSchema(type=JsonObjectType.ARRAY), False, "Widgets", None, True
        ... )
        'new Widgets()'
    """

    numeric_converter: NumericLiteralConverter
    enum_qualifier: EnumLiteralQualifier
    syntax: LiteralSyntax
    settings: CodeGeneratorSettings = field(default_factory=CodeGeneratorSettings)
    type_resolver: TypeNameResolver = field(default_factory=DefaultTypeNameResolver)
    enum_name_generator: EnumNameGenerator = field(default_factory=DefaultEnumNameGenerator)

    def get_default_value(
        self,
        schema: JsonSchema,
        allows_null: bool,
        target_type: str,
        type_name_hint: str | None,
        use_schema_default: bool,
    ) -> str | None:
        """Get the literal initializing a property, if any.

        Args:
            schema: The property schema (references are resolved here).
            allows_null: Whether the property may hold null.
            target_type: Generated type name of the property.
            type_name_hint: Name to use when the enum type has none.
            use_schema_default: Use the schema's declared default if present.

        Returns:
            A complete literal expression, or None to leave the property
            at the language's implicit default.
        """
        if not use_schema_default or not self.settings.generate_default_values:
            logger.debug("default_literal_disabled", target_type=target_type)
            return None

        actual = schema.actual_schema
        if actual is None:
            logger.debug(
                "default_literal_unresolved",
                target_type=target_type,
                reference=schema.reference_path,
            )
            return None

        default = schema.default if schema.has_default else actual.default
        literal = None
        if default is not None:
            literal = self._convert_default(schema, actual, default, type_name_hint)

        if literal is None and not allows_null and actual.type.is_reference_like:
            literal = self.syntax.empty_instance(target_type, actual.type)
            logger.debug("default_literal_fallback", target_type=target_type, literal=literal)

        return literal

    def _convert_default(
        self,
        schema: JsonSchema,
        actual: JsonSchema,
        default: Any,
        type_name_hint: str | None,
    ) -> str | None:
        kind = actual.type
        if (
            actual.is_enumeration
            and JsonObjectType.OBJECT not in kind
            and kind != JsonObjectType.NONE
        ):
            return self._enum_default(actual, default, type_name_hint)

        if kind.is_numeric and _is_number(default):
            tagged = tag_numeric_default(actual, default)
            if tagged is None:
                logger.debug("default_literal_untagged", default=repr(default), format=actual.format)
                return None
            return self.numeric_converter.convert_numeric(tagged)

        if JsonObjectType.STRING in kind and isinstance(default, str):
            return self.syntax.string_literal(default)
        if JsonObjectType.BOOLEAN in kind and isinstance(default, bool):
            return self.syntax.boolean_literal(default)
        return None

    def _enum_default(self, actual: JsonSchema, default: Any, type_name_hint: str | None) -> str:
        type_name = self.type_resolver.resolve(actual, False, type_name_hint)
        index = _index_of(actual.enumeration, default)
        if 0 <= index < len(actual.enumeration_names):
            name = actual.enumeration_names[index]
        else:
            name = str(default)
        member = self.enum_name_generator.generate(index, name, default, actual)
        return self.enum_qualifier.qualify_enum(self.settings.namespace, f"{type_name}.{member}")


def _index_of(values: list[Any], value: Any) -> int:
    # bool == int in Python; True must not match an enum value of 1.
    for i, candidate in enumerate(values):
        if candidate == value and isinstance(candidate, bool) == isinstance(value, bool):
            return i
    return -1


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, Decimal, TaggedNumber))
