"""Code generator configuration using Pydantic settings.

Settings are loaded from environment variables with the ``SCHEMALIT_``
prefix. Language packages subclass :class:`CodeGeneratorSettings` with
their own prefix and defaults.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CodeGeneratorSettings(BaseSettings):
    """Language-independent generator settings.

    Environment Variables:
        SCHEMALIT_NAMESPACE: Namespace or module path used to qualify
            enum references (default: empty, references stay unqualified)
        SCHEMALIT_GENERATE_DEFAULT_VALUES: Emit literals for schema
            defaults (default: true)

    Example:
        >>> CodeGeneratorSettings(namespace="App.Models").namespace
        'App.Models'
    """

    model_config = SettingsConfigDict(
        env_prefix="SCHEMALIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    namespace: str = Field(
        default="",
        description="Namespace used to qualify emitted enum references",
    )
    generate_default_values: bool = Field(
        default=True,
        description="Emit literals for schema default values",
    )

    @field_validator("namespace")
    @classmethod
    def strip_namespace(cls, v: str) -> str:
        return v.strip()


@lru_cache(maxsize=1)
def get_codegen_settings() -> CodeGeneratorSettings:
    """Get cached generator settings singleton.

    Returns:
        CodeGeneratorSettings instance loaded from environment.
    """
    return CodeGeneratorSettings()
