"""Registry of target-language generator factories.

A factory takes optional settings and returns a configured
:class:`DefaultValueGenerator`. The built-in C# and TypeScript targets are
always available; other packages contribute targets through the
``schemalit.languages`` entry-point group.

Example:
    >>> from schemalit.codegen.core.registry import get_default_registry
    >>> gen = get_default_registry().create("csharp")
"""

from __future__ import annotations

import logging
import threading
from functools import lru_cache
from importlib.metadata import entry_points
from typing import TYPE_CHECKING, Protocol

from schemalit.foundation.schema.exceptions import UnknownLanguageError

if TYPE_CHECKING:
    from schemalit.codegen.core.generator import DefaultValueGenerator
    from schemalit.codegen.core.settings import CodeGeneratorSettings

logger = logging.getLogger(__name__)

LANGUAGES_GROUP = "schemalit.languages"


class GeneratorFactory(Protocol):
    """Callable building a generator for one target language."""

    def __call__(self, settings: CodeGeneratorSettings | None = None) -> DefaultValueGenerator: ...


class LanguageRegistry:
    """Maps language names to generator factories.

    Names are case-insensitive. Registration is guarded by a lock; lookups
    read a plain dict.
    """

    def __init__(self) -> None:
        self._factories: dict[str, GeneratorFactory] = {}
        self._lock = threading.Lock()

    def register(self, name: str, factory: GeneratorFactory, *, replace: bool = False) -> None:
        """Register a factory under ``name``.

        Raises:
            ValueError: If the name is taken and ``replace`` is False.
        """
        key = name.strip().lower()
        with self._lock:
            if key in self._factories and not replace:
                msg = f"Language already registered: {key}"
                raise ValueError(msg)
            self._factories[key] = factory
        logger.debug("Registered language %s", key)

    def get(self, name: str) -> GeneratorFactory:
        """Return the factory for ``name``.

        Raises:
            UnknownLanguageError: If no factory is registered.
        """
        factory = self._factories.get(name.strip().lower())
        if factory is None:
            raise UnknownLanguageError(name, self.names())
        return factory

    def create(
        self, name: str, settings: CodeGeneratorSettings | None = None
    ) -> DefaultValueGenerator:
        return self.get(name)(settings)

    def names(self) -> list[str]:
        return sorted(self._factories)

    def load_entry_points(self, group: str = LANGUAGES_GROUP) -> int:
        """Register factories contributed by installed packages.

        Names that are already registered keep their factory and the entry
        point is not loaded. Entry points that fail to import or do not
        resolve to a callable are logged and skipped.

        Returns:
            Number of newly registered languages.
        """
        added = 0
        for ep in entry_points(group=group):
            key = ep.name.strip().lower()
            if key in self._factories:
                logger.debug("Language %s already registered, skipping %s", key, ep.value)
                continue
            try:
                factory = ep.load()
            except Exception:
                logger.exception("Failed to load language entry point %s:%s", group, ep.name)
                continue
            if not callable(factory):
                logger.warning("Ignoring non-callable language entry point %s", ep.name)
                continue
            try:
                self.register(key, factory)
            except ValueError:
                # Registered concurrently since the check above.
                continue
            added += 1
        logger.info("Loaded %d language(s) from entry point group %r", added, group)
        return added


@lru_cache(maxsize=1)
def get_default_registry() -> LanguageRegistry:
    """Cached registry with the built-in targets and entry-point contributions."""
    from schemalit.codegen.csharp import create_csharp_generator
    from schemalit.codegen.typescript import create_typescript_generator

    registry = LanguageRegistry()
    registry.register("csharp", create_csharp_generator)
    registry.register("typescript", create_typescript_generator)
    registry.load_entry_points()
    return registry
