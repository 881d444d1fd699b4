"""Exception hierarchy for schema loading and generator lookup.

The default-value conversion core never raises for schema content; these
errors surface only from document loading and language registry lookups.

Example:
    >>> from schemalit.foundation.schema.exceptions import SchemaLoadError
    >>> raise SchemaLoadError("Schema node must be an object", pointer="#/definitions/Pet")
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "SchemaLitError",
    "SchemaLoadError",
    "UnknownLanguageError",
]


class SchemaLitError(Exception):
    """Base class for all schemalit errors.

    Attributes:
        error_code: Machine-readable error code.
        message: Human-readable error description.
        context: Structured debugging information (pointers, names).
    """

    error_code: str = "SCHEMALIT_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation including context for logging."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class SchemaLoadError(SchemaLitError):
    """Raised when a JSON Schema document cannot be turned into schema nodes.

    Covers structural problems only (a node that is not an object, an
    unknown ``type`` name). Dangling ``$ref`` pointers are not errors; they
    load as unresolved references.

    Attributes:
        error_code: "SCHEMA_LOAD_ERROR" (class constant).
        pointer: JSON pointer of the offending node, when known.
    """

    error_code: str = "SCHEMA_LOAD_ERROR"

    def __init__(self, message: str, pointer: str | None = None, **extra_context: Any) -> None:
        self.pointer = pointer
        context: dict[str, Any] = dict(extra_context)
        if pointer is not None:
            context = {"pointer": pointer, **context}
        super().__init__(message, context)


class UnknownLanguageError(SchemaLitError):
    """Raised when no generator factory is registered for a target language.

    Attributes:
        error_code: "UNKNOWN_LANGUAGE" (class constant).
        language: The requested language name.
        available: Names that are registered.
    """

    error_code: str = "UNKNOWN_LANGUAGE"

    def __init__(self, language: str, available: list[str]) -> None:
        self.language = language
        self.available = available
        message = f"No default value generator registered for language: {language}"
        super().__init__(
            message,
            {"language": language, "available": ",".join(available) or "<none>"},
        )
