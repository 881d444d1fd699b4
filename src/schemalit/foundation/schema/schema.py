"""Schema node model and actual-schema resolution.

A :class:`JsonSchema` is one node of an already-parsed schema graph. Nodes
may point at other nodes through ``$ref`` or composition keywords; the
:attr:`JsonSchema.actual_schema` property follows those links to the node
that really describes the value.

Example:
    >>> from schemalit.foundation.schema import JsonObjectType, JsonSchema
    >>> target = JsonSchema(type=JsonObjectType.INTEGER, default=5)
    >>> JsonSchema(reference=target).actual_schema is target
    True
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from schemalit.foundation.schema.value_kinds import JsonObjectType

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class JsonSchema:
    """A single schema node.

    Nodes compare and hash by identity so the loader can build cyclic
    graphs (a ``Tree`` whose ``children`` refer back to ``Tree``).

    Attributes:
        type: Declared value kinds.
        default: Declared default value. ``None`` means no default.
        enumeration: Allowed values (``enum``).
        enumeration_names: Member names parallel to ``enumeration``
            (``x-enumNames``).
        format: The ``format`` keyword (drives numeric subtype tagging).
        title: The ``title`` keyword.
        type_name_hint: Name the schema was declared under (definition key).
        reference: Resolved ``$ref`` target.
        reference_path: Raw ``$ref`` text. Set without ``reference`` when the
            pointer could not be resolved.
        all_of: ``allOf`` members.
        one_of: ``oneOf`` members.
        any_of: ``anyOf`` members.
        properties: Object member schemas by property name.
        item: Array item schema.
    """

    type: JsonObjectType = JsonObjectType.NONE
    default: Any = None
    enumeration: list[Any] = field(default_factory=list)
    enumeration_names: list[str] = field(default_factory=list)
    format: str | None = None
    title: str | None = None
    type_name_hint: str | None = None
    reference: JsonSchema | None = None
    reference_path: str | None = None
    all_of: list[JsonSchema] = field(default_factory=list)
    one_of: list[JsonSchema] = field(default_factory=list)
    any_of: list[JsonSchema] = field(default_factory=list)
    properties: dict[str, JsonSchema] = field(default_factory=dict)
    item: JsonSchema | None = None

    @property
    def has_default(self) -> bool:
        return self.default is not None

    @property
    def is_enumeration(self) -> bool:
        return len(self.enumeration) > 0

    @property
    def is_nullable(self) -> bool:
        """True when ``null`` is an accepted value of this node."""
        if JsonObjectType.NULL in self.type:
            return True
        if None in self.enumeration:
            return True
        return any(_is_null_schema(member) for member in (*self.one_of, *self.any_of))

    @property
    def has_unresolved_reference(self) -> bool:
        return self.reference_path is not None and self.reference is None

    @property
    def actual_schema(self) -> JsonSchema | None:
        """The node after following references and flattening composition.

        Returns:
            The resolved node, or ``None`` when a ``$ref`` in the chain is
            dangling or the chain loops back on itself.
        """
        seen: set[int] = set()
        node: JsonSchema | None = self
        while node is not None:
            if id(node) in seen:
                logger.warning(
                    "Reference cycle while resolving actual schema (ref=%s)",
                    node.reference_path,
                )
                return None
            seen.add(id(node))
            if node.has_unresolved_reference:
                return None
            nxt = node._next_in_chain()
            if nxt is None:
                return node
            node = nxt
        return None

    def _next_in_chain(self) -> JsonSchema | None:
        if self.reference is not None:
            return self.reference
        if self.type == JsonObjectType.NONE and not self.enumeration:
            if len(self.all_of) == 1:
                return self.all_of[0]
            for members in (self.one_of, self.any_of):
                candidates = [m for m in members if not _is_null_schema(m)]
                if members and len(candidates) == 1:
                    return candidates[0]
        return None


def _is_null_schema(schema: JsonSchema) -> bool:
    return schema.type == JsonObjectType.NULL and schema.reference is None
