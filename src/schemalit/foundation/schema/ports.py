"""Port interfaces for the default-value generator.

The orchestrator is language agnostic. Everything that depends on the
target language (numeric literal grammar, symbol qualification, primitive
literal syntax) and everything owned by the wider code generator (type
names, enum member naming) is injected through these protocols.

All protocols are runtime_checkable to enable isinstance() verification in
tests and when wiring generators from entry points.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from schemalit.foundation.schema.numerics import TaggedNumber
    from schemalit.foundation.schema.schema import JsonSchema
    from schemalit.foundation.schema.value_kinds import JsonObjectType


@runtime_checkable
class NumericLiteralConverter(Protocol):
    """Port for rendering tagged numbers as target-language literals.

    Example:
        >>> class PlainConverter:
        ...     def convert_numeric(self, value: TaggedNumber) -> str | None:
        ...         return str(value.value)
        >>> isinstance(PlainConverter(), NumericLiteralConverter)
        True
    """

    def convert_numeric(self, value: TaggedNumber) -> str | None:
        """Convert a tagged number to a literal.

        Args:
            value: The number and its subtype tag.

        Returns:
            A complete literal expression, or None when the converter has
            no literal form for the subtype.
        """
        ...


@runtime_checkable
class EnumLiteralQualifier(Protocol):
    """Port for qualifying an enum member reference with a namespace."""

    def qualify_enum(self, namespace: str, member_identifier: str) -> str:
        """Join a namespace and an already-resolved member identifier.

        Args:
            namespace: Configured namespace or module path. May be empty.
            member_identifier: Member reference such as ``"Color.Red"``.

        Returns:
            The qualified reference, or the bare identifier when
            ``namespace`` is empty.
        """
        ...


@runtime_checkable
class LiteralSyntax(Protocol):
    """Port for primitive literal forms of a target language."""

    def string_literal(self, value: str) -> str:
        """Quote and escape a string."""
        ...

    def boolean_literal(self, value: bool) -> str:
        """Render a boolean."""
        ...

    def empty_instance(self, target_type: str, kind: JsonObjectType) -> str | None:
        """Expression constructing a fresh, empty instance of ``target_type``.

        Args:
            target_type: Generated type name of the property.
            kind: Value kinds of the actual schema (object and/or array).

        Returns:
            The construction expression, or None if the language has none.
        """
        ...


@runtime_checkable
class TypeNameResolver(Protocol):
    """Port for the code generator's type naming."""

    def resolve(self, schema: JsonSchema, is_nullable: bool, type_name_hint: str | None) -> str:
        """Return the generated type name for ``schema``."""
        ...


@runtime_checkable
class EnumNameGenerator(Protocol):
    """Port for the enum member naming strategy."""

    def generate(self, index: int, name: str, value: Any, schema: JsonSchema) -> str:
        """Return the member identifier for one enumeration entry.

        Args:
            index: Position of the value in ``schema.enumeration`` (-1 if absent).
            name: Declared member name, or the value's string form.
            value: The enumeration value.
            schema: The enumeration's actual schema.
        """
        ...
