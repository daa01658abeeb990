"""Plugin registry for mdinclude.

Directive syntaxes are plugins: the two built-in ones register themselves
with a decorator, and third-party packages contribute more by declaring
entry-points in the ``mdinclude.syntaxes`` group of their
``pyproject.toml``.

Example
-------
Register a syntax with the decorator::

    from mdinclude.directives.syntax import DirectiveSyntax, syntax_registry

    @syntax_registry.register("wiki")
    class WikiSyntax(DirectiveSyntax):
        name = "wiki"
        pattern = re.compile(r"\\{\\{include:(?P<target>[^}]+)\\}\\}")

Declare it for discovery from another distribution::

    [project.entry-points."mdinclude.syntaxes"]
    wiki = "my_package.syntaxes:WikiSyntax"

Enable it by name in the settings::

    syntaxes: [wiki]
"""
from __future__ import annotations

import importlib.metadata
import logging
from abc import ABC
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ABC)


class PluginNotFoundError(KeyError):
    """Raised when a requested plugin name is not in the registry."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.plugin_name = name
        self.registry_name = registry_name
        super().__init__(
            f"Plugin {name!r} is not registered in the {registry_name!r} registry. "
            "Check that the package providing it is installed."
        )


class PluginAlreadyRegisteredError(ValueError):
    """Raised when attempting to register a name that already exists."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.plugin_name = name
        self.registry_name = registry_name
        super().__init__(f"Plugin {name!r} is already registered in the {registry_name!r} registry.")


class PluginRegistry(Generic[T]):
    """Name-to-class registry for plugin implementations.

    Parameters
    ----------
    base_class:
        The abstract base class all plugins must subclass.
    name:
        A human-readable name for this registry (used in error messages).
    """

    def __init__(self, base_class: type[T], name: str) -> None:
        self._base_class = base_class
        self._name = name
        self._plugins: dict[str, type[T]] = {}
        self._loaded_groups: set[str] = set()

    def register(self, name: str) -> Callable[[type[T]], type[T]]:
        """Return a class decorator that registers the decorated class under ``name``.

        Raises
        ------
        PluginAlreadyRegisteredError
            If ``name`` is already in use.
        TypeError
            If the decorated class does not subclass ``base_class``.
        """

        def decorator(cls: type[T]) -> type[T]:
            self.register_class(name, cls)
            return cls

        return decorator

    def register_class(self, name: str, cls: type[T]) -> None:
        """Register ``cls`` under ``name`` without decorator syntax."""
        if name in self._plugins:
            raise PluginAlreadyRegisteredError(name, self._name)
        if not (isinstance(cls, type) and issubclass(cls, self._base_class)):
            raise TypeError(
                f"Cannot register {cls!r} under {name!r}: "
                f"it must be a subclass of {self._base_class.__name__}."
            )
        self._plugins[name] = cls
        logger.debug("Registered %s -> %s in registry %r", name, cls.__qualname__, self._name)

    def deregister(self, name: str) -> None:
        """Remove ``name`` from the registry.

        Raises
        ------
        PluginNotFoundError
            If ``name`` is not registered.
        """
        if name not in self._plugins:
            raise PluginNotFoundError(name, self._name)
        del self._plugins[name]
        logger.debug("Deregistered %s from registry %r", name, self._name)

    def get(self, name: str) -> type[T]:
        """Return the class registered under ``name``.

        Raises
        ------
        PluginNotFoundError
            If no plugin is registered under ``name``.
        """
        try:
            return self._plugins[name]
        except KeyError:
            raise PluginNotFoundError(name, self._name) from None

    def list_plugins(self) -> list[str]:
        """Return registered names in alphabetical order."""
        return sorted(self._plugins)

    def __contains__(self, name: object) -> bool:
        return name in self._plugins

    def __len__(self) -> int:
        return len(self._plugins)

    def __repr__(self) -> str:
        return (
            f"PluginRegistry(name={self._name!r}, "
            f"base_class={self._base_class.__name__}, "
            f"plugins={self.list_plugins()})"
        )

    def load_entrypoints(self, group: str) -> None:
        """Register every class declared under the entry-point ``group``.

        Each group is scanned once per registry. Entry-points that fail to
        import, or whose names are already taken, are skipped with a log
        entry rather than raising.
        """
        if group in self._loaded_groups:
            return
        self._loaded_groups.add(group)
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._plugins:
                logger.debug("Entry-point %r already registered in %r; skipping.", ep.name, self._name)
                continue
            try:
                cls = ep.load()
            except Exception:
                logger.exception("Failed to load entry-point %r from group %r; skipping.", ep.name, group)
                continue
            try:
                self.register_class(ep.name, cls)
            except TypeError:
                logger.warning(
                    "Entry-point %r loaded but is not a %s; skipping.",
                    ep.name,
                    self._base_class.__name__,
                )
