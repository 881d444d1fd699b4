"""Schemalit Codegen Core -- language-independent default value generation.

Provides the :class:`DefaultValueGenerator` orchestrator, default naming
collaborators, settings, structured logging, and the target-language
registry.
"""

from schemalit.codegen.core.generator import DefaultValueGenerator
from schemalit.codegen.core.logging import LoggingSettings, configure_logging, get_logger
from schemalit.codegen.core.naming import (
    DefaultEnumNameGenerator,
    DefaultTypeNameResolver,
    to_upper_camel_case,
)
from schemalit.codegen.core.registry import (
    LANGUAGES_GROUP,
    LanguageRegistry,
    get_default_registry,
)
from schemalit.codegen.core.settings import CodeGeneratorSettings, get_codegen_settings

__all__ = [
    "LANGUAGES_GROUP",
    "CodeGeneratorSettings",
    "DefaultEnumNameGenerator",
    "DefaultTypeNameResolver",
    "DefaultValueGenerator",
    "LanguageRegistry",
    "LoggingSettings",
    "configure_logging",
    "get_codegen_settings",
    "get_default_registry",
    "get_logger",
    "to_upper_camel_case",
]
