"""Build :class:`JsonSchema` graphs from JSON Schema documents.

Only the keywords the default-value generator reads are loaded. Local
``$ref`` pointers (``#/definitions/...``, ``#/components/schemas/...``,
``#/$defs/...``) are resolved against the document; every pointer maps to a
single node, so recursive schemas load as cyclic graphs. Remote or dangling
references load as unresolved nodes, whose actual schema is ``None``.

Usage:
    from schemalit.foundation.schema.loader import load_schema

    root = load_schema(json.loads(text))
    pet = root.properties["pet"].actual_schema
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from schemalit.foundation.schema.exceptions import SchemaLoadError
from schemalit.foundation.schema.schema import JsonSchema
from schemalit.foundation.schema.value_kinds import JsonObjectType

logger = logging.getLogger(__name__)

# Containers whose member keys are definition names.
_DEFINITION_CONTAINERS = frozenset({"definitions", "schemas", "$defs"})


def load_schema(document: Mapping[str, Any]) -> JsonSchema:
    """Load the root schema of a JSON Schema document.

    Args:
        document: Parsed JSON/YAML document.

    Returns:
        The root schema node.

    Raises:
        SchemaLoadError: If a schema node is not an object, declares an
            unknown ``type``, or uses a keyword with the wrong JSON shape
            (``properties`` that is not an object, ``enum`` or a
            composition keyword that is not an array).
    """
    return _SchemaLoader(document).load()


def _escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def _unescape(token: str) -> str:
    return token.replace("~1", "/").replace("~0", "~")


def _array(raw: Mapping[str, Any], keyword: str, pointer: str) -> list[Any]:
    value = raw.get(keyword)
    if value is None:
        return []
    if not isinstance(value, list):
        msg = f"{keyword} must be an array"
        raise SchemaLoadError(msg, pointer=pointer, found=type(value).__name__)
    return value


class _SchemaLoader:
    def __init__(self, document: Mapping[str, Any]) -> None:
        self._document = document
        self._nodes: dict[str, JsonSchema] = {}

    def load(self) -> JsonSchema:
        return self._node(self._document, "#")

    def _node(self, raw: Any, pointer: str, name_hint: str | None = None) -> JsonSchema:
        existing = self._nodes.get(pointer)
        if existing is not None:
            return existing
        if not isinstance(raw, Mapping):
            msg = "Schema node must be an object"
            raise SchemaLoadError(msg, pointer=pointer, found=type(raw).__name__)

        schema = JsonSchema(type_name_hint=name_hint)
        # Registered before children are loaded so self-references terminate.
        self._nodes[pointer] = schema

        try:
            schema.type = JsonObjectType.parse(raw.get("type"))
        except SchemaLoadError as exc:
            raise SchemaLoadError(exc.message, pointer=pointer, **exc.context) from exc
        if raw.get("nullable") is True:
            schema.type |= JsonObjectType.NULL

        schema.default = raw.get("default")
        schema.format = raw.get("format")
        schema.title = raw.get("title")
        schema.enumeration = list(_array(raw, "enum", pointer))
        schema.enumeration_names = [str(n) for n in _array(raw, "x-enumNames", pointer)]

        ref = raw.get("$ref")
        if isinstance(ref, str):
            schema.reference_path = ref
            schema.reference = self._resolve(ref)

        for keyword, attr in (("allOf", "all_of"), ("oneOf", "one_of"), ("anyOf", "any_of")):
            members = _array(raw, keyword, pointer)
            setattr(
                schema,
                attr,
                [self._node(m, f"{pointer}/{keyword}/{i}") for i, m in enumerate(members)],
            )

        properties = raw.get("properties")
        if properties is None:
            properties = {}
        elif not isinstance(properties, Mapping):
            msg = "properties must be an object"
            raise SchemaLoadError(msg, pointer=pointer, found=type(properties).__name__)
        for name, member in properties.items():
            schema.properties[name] = self._node(member, f"{pointer}/properties/{_escape(name)}")

        items = raw.get("items")
        if isinstance(items, Mapping):
            schema.item = self._node(items, f"{pointer}/items")

        return schema

    def _resolve(self, ref: str) -> JsonSchema | None:
        if not ref.startswith("#"):
            logger.debug("Leaving non-local reference unresolved: %s", ref)
            return None

        tokens = [_unescape(t) for t in ref[1:].split("/") if t]
        target: Any = self._document
        for token in tokens:
            if isinstance(target, Mapping) and token in target:
                target = target[token]
            elif isinstance(target, list) and token.isdigit() and int(token) < len(target):
                target = target[int(token)]
            else:
                logger.warning("Unresolvable schema reference: %s", ref)
                return None

        name_hint = None
        if len(tokens) >= 2 and tokens[-2] in _DEFINITION_CONTAINERS:
            name_hint = tokens[-1]

        pointer = "#" + "".join(f"/{_escape(t)}" for t in tokens)
        return self._node(target, pointer, name_hint)
