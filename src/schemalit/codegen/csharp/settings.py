"""C# generator settings.

Environment variables use the ``SCHEMALIT_CSHARP_`` prefix.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from schemalit.codegen.core.settings import CodeGeneratorSettings


class CSharpGeneratorSettings(CodeGeneratorSettings):
    """Settings for C# code generation.

    Environment Variables:
        SCHEMALIT_CSHARP_NAMESPACE: Namespace of the generated types
            (default: MyNamespace)
        SCHEMALIT_CSHARP_GENERATE_DEFAULT_VALUES: Emit default literals
            (default: true)
    """

    model_config = SettingsConfigDict(
        env_prefix="SCHEMALIT_CSHARP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    namespace: str = Field(
        default="MyNamespace",
        description="Namespace of the generated C# types",
    )


@lru_cache(maxsize=1)
def get_csharp_settings() -> CSharpGeneratorSettings:
    return CSharpGeneratorSettings()
