"""Unit tests for schemalit.codegen.core.generator."""

from __future__ import annotations

from typing import Any

import pytest

from schemalit.codegen.core.generator import DefaultValueGenerator
from schemalit.codegen.csharp import create_csharp_generator
from schemalit.codegen.csharp.settings import CSharpGeneratorSettings
from schemalit.foundation.schema.numerics import NumericKind, TaggedNumber
from schemalit.foundation.schema.schema import JsonSchema
from schemalit.foundation.schema.value_kinds import JsonObjectType

_KINDS = [
    JsonObjectType.NONE,
    JsonObjectType.OBJECT,
    JsonObjectType.ARRAY,
    JsonObjectType.STRING,
    JsonObjectType.INTEGER,
    JsonObjectType.NUMBER,
    JsonObjectType.BOOLEAN,
    JsonObjectType.OBJECT | JsonObjectType.NULL,
]


def _color_enum(**overrides: Any) -> JsonSchema:
    fields: dict[str, Any] = {
        "type": JsonObjectType.STRING,
        "enumeration": ["red", "light-blue"],
        "type_name_hint": "Color",
    }
    fields.update(overrides)
    return JsonSchema(**fields)


@pytest.mark.unit
class TestDisabledDefaults:
    @pytest.mark.parametrize("kind", _KINDS)
    @pytest.mark.parametrize("allows_null", [True, False])
    def test_opt_out_always_returns_none(
        self,
        csharp_generator: DefaultValueGenerator,
        kind: JsonObjectType,
        allows_null: bool,
    ) -> None:
        schema = JsonSchema(type=kind, default=5)
        assert csharp_generator.get_default_value(schema, allows_null, "T", None, False) is None

    def test_settings_switch_disables_defaults(self, clean_env: None) -> None:
        generator = create_csharp_generator(
            CSharpGeneratorSettings(generate_default_values=False)
        )
        schema = JsonSchema(type=JsonObjectType.OBJECT)
        assert generator.get_default_value(schema, False, "Widget", None, True) is None


@pytest.mark.unit
class TestNumericDefaults:
    @pytest.mark.parametrize(
        ("kind", "fmt", "default", "expected"),
        [
            (JsonObjectType.INTEGER, None, 5, "5"),
            (JsonObjectType.INTEGER, "int64", 5, "5L"),
            (JsonObjectType.INTEGER, "byte", 5, "(byte)5"),
            (JsonObjectType.INTEGER, "uint32", 5, "5U"),
            (JsonObjectType.INTEGER | JsonObjectType.NULL, "int64", 5, "5L"),
            (JsonObjectType.NUMBER, None, 1.5, "1.5D"),
            (JsonObjectType.NUMBER, "float", 1.5, "1.5F"),
            (JsonObjectType.NUMBER, "decimal", 1.5, "1.5M"),
        ],
    )
    def test_numeric_literal_by_format(
        self,
        csharp_generator: DefaultValueGenerator,
        kind: JsonObjectType,
        fmt: str | None,
        default: int | float,
        expected: str,
    ) -> None:
        schema = JsonSchema(type=kind, format=fmt, default=default)
        assert csharp_generator.get_default_value(schema, False, "T", None, True) == expected

    def test_tagged_default_used_directly(self, csharp_generator: DefaultValueGenerator) -> None:
        schema = JsonSchema(type=JsonObjectType.INTEGER, default=TaggedNumber(NumericKind.UINT64, 5))
        assert csharp_generator.get_default_value(schema, False, "ulong", None, True) == "5UL"

    def test_default_out_of_range_gives_no_literal(
        self, csharp_generator: DefaultValueGenerator
    ) -> None:
        schema = JsonSchema(type=JsonObjectType.INTEGER, format="byte", default=300)
        assert csharp_generator.get_default_value(schema, False, "byte", None, True) is None

    def test_non_numeric_default_gives_no_literal(
        self, csharp_generator: DefaultValueGenerator
    ) -> None:
        schema = JsonSchema(type=JsonObjectType.INTEGER, default="five")
        assert csharp_generator.get_default_value(schema, False, "int", None, True) is None

    def test_integer_too_large_for_double_gives_no_literal(
        self, csharp_generator: DefaultValueGenerator
    ) -> None:
        schema = JsonSchema(type=JsonObjectType.NUMBER, default=10**400)
        assert csharp_generator.get_default_value(schema, False, "double", None, True) is None

    def test_decimal_beyond_csharp_range_gives_no_literal(
        self, csharp_generator: DefaultValueGenerator
    ) -> None:
        schema = JsonSchema(type=JsonObjectType.NUMBER, format="decimal", default=1e30)
        assert csharp_generator.get_default_value(schema, False, "decimal", None, True) is None

    def test_unrecognised_subtype_gives_no_literal(self, clean_env: None) -> None:
        class NoLiterals:
            def convert_numeric(self, value: TaggedNumber) -> str | None:
                return None

        base = create_csharp_generator(CSharpGeneratorSettings())
        generator = DefaultValueGenerator(
            numeric_converter=NoLiterals(),
            enum_qualifier=base.enum_qualifier,
            syntax=base.syntax,
            settings=base.settings,
        )
        schema = JsonSchema(type=JsonObjectType.INTEGER, default=5)
        assert generator.get_default_value(schema, False, "int", None, True) is None


@pytest.mark.unit
class TestPrimitiveDefaults:
    def test_string(self, csharp_generator: DefaultValueGenerator) -> None:
        schema = JsonSchema(type=JsonObjectType.STRING, default='a "quoted" word')
        assert (
            csharp_generator.get_default_value(schema, True, "string", None, True)
            == '"a \\"quoted\\" word"'
        )

    def test_empty_string_is_a_default(self, csharp_generator: DefaultValueGenerator) -> None:
        schema = JsonSchema(type=JsonObjectType.STRING, default="")
        assert csharp_generator.get_default_value(schema, True, "string", None, True) == '""'

    def test_boolean(self, csharp_generator: DefaultValueGenerator) -> None:
        schema = JsonSchema(type=JsonObjectType.BOOLEAN, default=False)
        assert csharp_generator.get_default_value(schema, False, "bool", None, True) == "false"

    def test_boolean_default_on_string_schema_ignored(
        self, csharp_generator: DefaultValueGenerator
    ) -> None:
        schema = JsonSchema(type=JsonObjectType.STRING, default=True)
        assert csharp_generator.get_default_value(schema, True, "string", None, True) is None

    def test_string_default_on_integer_or_string_schema(
        self, csharp_generator: DefaultValueGenerator
    ) -> None:
        schema = JsonSchema(type=JsonObjectType.INTEGER | JsonObjectType.STRING, default="abc")
        assert csharp_generator.get_default_value(schema, True, "object", None, True) == '"abc"'

    def test_boolean_default_on_integer_or_boolean_schema(
        self, csharp_generator: DefaultValueGenerator
    ) -> None:
        schema = JsonSchema(type=JsonObjectType.INTEGER | JsonObjectType.BOOLEAN, default=True)
        assert csharp_generator.get_default_value(schema, True, "object", None, True) == "true"

    def test_number_default_on_number_or_string_schema(
        self, csharp_generator: DefaultValueGenerator
    ) -> None:
        schema = JsonSchema(type=JsonObjectType.NUMBER | JsonObjectType.STRING, default=2.5)
        assert csharp_generator.get_default_value(schema, True, "object", None, True) == "2.5D"


@pytest.mark.unit
class TestEnumDefaults:
    def test_member_is_qualified_with_namespace(
        self, csharp_generator: DefaultValueGenerator
    ) -> None:
        schema = _color_enum(default="light-blue")
        assert (
            csharp_generator.get_default_value(schema, False, "Color", None, True)
            == "App.Models.Color.LightBlue"
        )

    def test_member_without_namespace(self, clean_env: None) -> None:
        generator = create_csharp_generator(CSharpGeneratorSettings(namespace=""))
        schema = _color_enum(default="red")
        assert generator.get_default_value(schema, False, "Color", None, True) == "Color.Red"

    def test_declared_member_names(self, csharp_generator: DefaultValueGenerator) -> None:
        schema = JsonSchema(
            type=JsonObjectType.INTEGER,
            enumeration=[1, 2],
            enumeration_names=["Low", "High"],
            default=2,
        )
        assert (
            csharp_generator.get_default_value(schema, False, "Priority", "Priority", True)
            == "App.Models.Priority.High"
        )

    def test_default_declared_on_referencing_property(
        self, csharp_generator: DefaultValueGenerator
    ) -> None:
        prop = JsonSchema(reference=_color_enum(), reference_path="#/definitions/Color", default="red")
        assert (
            csharp_generator.get_default_value(prop, False, "Color", None, True)
            == "App.Models.Color.Red"
        )

    def test_default_declared_on_enum_definition(
        self, csharp_generator: DefaultValueGenerator
    ) -> None:
        prop = JsonSchema(reference=_color_enum(default="red"), reference_path="#/definitions/Color")
        assert (
            csharp_generator.get_default_value(prop, False, "Color", None, True)
            == "App.Models.Color.Red"
        )

    def test_custom_naming_collaborators(self, clean_env: None) -> None:
        class ShoutingNames:
            def generate(self, index: int, name: str, value: Any, schema: JsonSchema) -> str:
                return f"{name.upper().replace('-', '_')}_{index}"

        class FixedTypeName:
            def resolve(
                self, schema: JsonSchema, is_nullable: bool, type_name_hint: str | None
            ) -> str:
                return "Palette"

        generator = create_csharp_generator(
            CSharpGeneratorSettings(namespace="Ns"),
            type_resolver=FixedTypeName(),
            enum_name_generator=ShoutingNames(),
        )
        schema = _color_enum(default="light-blue")
        assert (
            generator.get_default_value(schema, False, "Color", None, True)
            == "Ns.Palette.LIGHT_BLUE_1"
        )

    def test_default_not_in_enumeration_uses_its_text(
        self, csharp_generator: DefaultValueGenerator
    ) -> None:
        schema = _color_enum(default="green")
        assert (
            csharp_generator.get_default_value(schema, False, "Color", None, True)
            == "App.Models.Color.Green"
        )

    def test_boolean_default_does_not_match_integer_member(
        self, csharp_generator: DefaultValueGenerator
    ) -> None:
        schema = JsonSchema(
            type=JsonObjectType.INTEGER,
            enumeration=[0, 1],
            enumeration_names=["Off", "On"],
            type_name_hint="Switch",
            default=True,
        )
        assert (
            csharp_generator.get_default_value(schema, False, "Switch", None, True)
            == "App.Models.Switch.True"
        )

    def test_object_enumeration_is_not_an_enum(
        self, csharp_generator: DefaultValueGenerator
    ) -> None:
        schema = JsonSchema(type=JsonObjectType.OBJECT, enumeration=[{"a": 1}], default={"a": 1})
        assert (
            csharp_generator.get_default_value(schema, False, "Thing", None, True) == "new Thing()"
        )

    def test_untyped_enumeration_is_not_an_enum(
        self, csharp_generator: DefaultValueGenerator
    ) -> None:
        schema = JsonSchema(enumeration=["a"], default="a")
        assert csharp_generator.get_default_value(schema, False, "object", None, True) is None


@pytest.mark.unit
class TestEmptyInstanceFallback:
    @pytest.mark.parametrize(
        ("kind", "target", "expected"),
        [
            (JsonObjectType.ARRAY, "Widgets", "new Widgets()"),
            (JsonObjectType.OBJECT, "Widget", "new Widget()"),
            (JsonObjectType.OBJECT | JsonObjectType.NULL, "Widget", "new Widget()"),
        ],
    )
    def test_non_nullable_reference_like_gets_fallback(
        self,
        csharp_generator: DefaultValueGenerator,
        kind: JsonObjectType,
        target: str,
        expected: str,
    ) -> None:
        schema = JsonSchema(type=kind)
        assert csharp_generator.get_default_value(schema, False, target, None, True) == expected

    @pytest.mark.parametrize("kind", [JsonObjectType.ARRAY, JsonObjectType.OBJECT])
    def test_nullable_reference_like_gets_nothing(
        self, csharp_generator: DefaultValueGenerator, kind: JsonObjectType
    ) -> None:
        schema = JsonSchema(type=kind)
        assert csharp_generator.get_default_value(schema, True, "Widgets", None, True) is None

    @pytest.mark.parametrize(
        "kind",
        [JsonObjectType.INTEGER, JsonObjectType.STRING, JsonObjectType.BOOLEAN, JsonObjectType.NONE],
    )
    def test_non_nullable_primitive_without_default_gets_nothing(
        self, csharp_generator: DefaultValueGenerator, kind: JsonObjectType
    ) -> None:
        schema = JsonSchema(type=kind)
        assert csharp_generator.get_default_value(schema, False, "T", None, True) is None

    def test_object_default_value_falls_back_to_empty_instance(
        self, csharp_generator: DefaultValueGenerator
    ) -> None:
        schema = JsonSchema(type=JsonObjectType.OBJECT, default={"name": "x"})
        assert csharp_generator.get_default_value(schema, False, "Widget", None, True) == "new Widget()"

    def test_fallback_uses_actual_schema_kind(
        self, csharp_generator: DefaultValueGenerator
    ) -> None:
        prop = JsonSchema(
            reference=JsonSchema(type=JsonObjectType.ARRAY), reference_path="#/definitions/Widgets"
        )
        assert csharp_generator.get_default_value(prop, False, "Widgets", None, True) == "new Widgets()"


@pytest.mark.unit
class TestUnresolvedSchemas:
    @pytest.mark.parametrize("allows_null", [True, False])
    def test_dangling_reference_gives_no_literal(
        self, csharp_generator: DefaultValueGenerator, allows_null: bool
    ) -> None:
        schema = JsonSchema(reference_path="#/definitions/Missing", default=5)
        assert csharp_generator.get_default_value(schema, allows_null, "Missing", None, True) is None

    def test_reference_cycle_gives_no_literal(
        self, csharp_generator: DefaultValueGenerator
    ) -> None:
        schema = JsonSchema(type=JsonObjectType.NONE, reference_path="#")
        schema.reference = schema
        assert csharp_generator.get_default_value(schema, False, "Loop", None, True) is None


@pytest.mark.unit
class TestTypeScriptGenerator:
    def test_array_fallback_is_array_literal(
        self, typescript_generator: DefaultValueGenerator
    ) -> None:
        schema = JsonSchema(type=JsonObjectType.ARRAY)
        assert typescript_generator.get_default_value(schema, False, "string[]", None, True) == "[]"

    def test_object_fallback(self, typescript_generator: DefaultValueGenerator) -> None:
        schema = JsonSchema(type=JsonObjectType.OBJECT)
        assert (
            typescript_generator.get_default_value(schema, False, "Widget", None, True)
            == "new Widget()"
        )

    def test_enum_is_unqualified_by_default(
        self, typescript_generator: DefaultValueGenerator
    ) -> None:
        schema = _color_enum(default="red")
        assert typescript_generator.get_default_value(schema, False, "Color", None, True) == "Color.Red"

    def test_numbers_have_no_suffix(self, typescript_generator: DefaultValueGenerator) -> None:
        schema = JsonSchema(type=JsonObjectType.INTEGER, format="int64", default=5)
        assert typescript_generator.get_default_value(schema, False, "number", None, True) == "5"
