"""Shared fixtures for schemalit tests."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import patch

import pytest

from schemalit.codegen.core.generator import DefaultValueGenerator
from schemalit.codegen.core.logging import LoggingSettings, configure_logging
from schemalit.codegen.csharp import create_csharp_generator
from schemalit.codegen.csharp.settings import CSharpGeneratorSettings
from schemalit.codegen.typescript import create_typescript_generator
from schemalit.codegen.typescript.settings import TypeScriptGeneratorSettings


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging() -> None:
    """Keep structured debug events out of test output."""
    configure_logging(LoggingSettings(log_level="WARNING", environment="test"))


@pytest.fixture()
def clean_env() -> Iterator[None]:
    """Run with an empty environment so settings use their defaults."""
    with patch.dict("os.environ", {}, clear=True):
        yield


@pytest.fixture()
def csharp_generator(clean_env: None) -> DefaultValueGenerator:
    """C# generator qualifying enums with ``App.Models``."""
    return create_csharp_generator(CSharpGeneratorSettings(namespace="App.Models"))


@pytest.fixture()
def typescript_generator(clean_env: None) -> DefaultValueGenerator:
    """TypeScript generator without a module namespace."""
    return create_typescript_generator(TypeScriptGeneratorSettings())
