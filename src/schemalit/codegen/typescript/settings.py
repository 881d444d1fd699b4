"""TypeScript generator settings.

Environment variables use the ``SCHEMALIT_TYPESCRIPT_`` prefix.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from schemalit.codegen.core.settings import CodeGeneratorSettings


class TypeScriptGeneratorSettings(CodeGeneratorSettings):
    """Settings for TypeScript code generation.

    Environment Variables:
        SCHEMALIT_TYPESCRIPT_NAMESPACE: Module or namespace path prefixed to
            enum references (default: empty, references stay bare)
        SCHEMALIT_TYPESCRIPT_GENERATE_DEFAULT_VALUES: Emit default literals
            (default: true)
    """

    model_config = SettingsConfigDict(
        env_prefix="SCHEMALIT_TYPESCRIPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    namespace: str = Field(
        default="",
        description="Module or namespace path used to qualify enum references",
    )


@lru_cache(maxsize=1)
def get_typescript_settings() -> TypeScriptGeneratorSettings:
    return TypeScriptGeneratorSettings()
