"""Registry of digit storage backends.

Backends are registered by name, either with the ``@register`` decorator
at import time or lazily via ``load_entrypoints`` for installed packages
that declare entry-points in the ``decint.storage`` group.

Example
-------
Register a custom backend::

    from array import array

    from decint.storage import DigitStorage, storage_registry

    @storage_registry.register("array")
    class ArrayStorage(DigitStorage):
        def __init__(self, digits=()):
            self._data = array("b", digits)
        ...

Select it for new integers::

    from decint.storage import set_default_storage
    set_default_storage("array")

or per instance with ``Integer(42, storage="array")``.
"""
from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Callable

from decint.storage.backends import ByteArrayStorage, DigitStorage, ListStorage

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP = "decint.storage"


class StorageNotFoundError(KeyError):
    """Raised when a requested backend name is not in the registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.backend_name = name
        self.available = available
        super().__init__(
            f"Storage backend {name!r} is not registered. "
            f"Available backends: {', '.join(available) or '(none)'}. "
            "Check that the package is installed and its entry-points are declared."
        )


class StorageAlreadyRegisteredError(ValueError):
    """Raised when attempting to register a name that already exists."""

    def __init__(self, name: str) -> None:
        self.backend_name = name
        super().__init__(
            f"Storage backend {name!r} is already registered. "
            "Use a unique name or explicitly deregister the existing entry first."
        )


class StorageRegistry:
    """Name to backend-class mapping for :class:`DigitStorage` implementations.

    Parameters
    ----------
    default:
        Name of the backend used when an ``Integer`` is built without an
        explicit ``storage`` argument.  It must be registered before the
        first lookup.
    """

    def __init__(self, default: str = "list") -> None:
        self._backends: dict[str, type[DigitStorage]] = {}
        self._default = default

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, name: str) -> Callable[[type[DigitStorage]], type[DigitStorage]]:
        """Return a class decorator that registers the decorated backend.

        Raises
        ------
        StorageAlreadyRegisteredError
            If ``name`` is already in use.
        TypeError
            If the decorated class does not subclass ``DigitStorage``.
        """

        def decorator(cls: type[DigitStorage]) -> type[DigitStorage]:
            self.register_class(name, cls)
            return cls

        return decorator

    def register_class(self, name: str, cls: type[DigitStorage]) -> None:
        """Register a backend class directly without the decorator syntax.

        Raises
        ------
        StorageAlreadyRegisteredError
            If ``name`` is already registered.
        TypeError
            If ``cls`` is not a subclass of ``DigitStorage``.
        """
        if name in self._backends:
            raise StorageAlreadyRegisteredError(name)
        if not (isinstance(cls, type) and issubclass(cls, DigitStorage)):
            raise TypeError(
                f"Cannot register {cls!r} under {name!r}: "
                "it must be a subclass of DigitStorage."
            )
        self._backends[name] = cls
        logger.debug("Registered storage backend %r -> %s", name, cls.__qualname__)

    def deregister(self, name: str) -> None:
        """Remove a backend from the registry.

        The current default backend cannot be removed.

        Raises
        ------
        StorageNotFoundError
            If ``name`` is not currently registered.
        ValueError
            If ``name`` is the current default.
        """
        if name not in self._backends:
            raise StorageNotFoundError(name, self.list_backends())
        if name == self._default:
            raise ValueError(
                f"Cannot deregister {name!r} while it is the default storage backend."
            )
        del self._backends[name]
        logger.debug("Deregistered storage backend %r", name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str | None = None) -> type[DigitStorage]:
        """Return the backend class registered under ``name``.

        ``None`` selects the default backend.

        Raises
        ------
        StorageNotFoundError
            If no backend is registered under ``name``.
        """
        key = self._default if name is None else name
        try:
            return self._backends[key]
        except KeyError:
            raise StorageNotFoundError(key, self.list_backends()) from None

    def list_backends(self) -> list[str]:
        """Return all registered backend names in alphabetical order."""
        return sorted(self._backends)

    @property
    def default(self) -> str:
        """Name of the backend used when none is requested."""
        return self._default

    @default.setter
    def default(self, name: str) -> None:
        if name not in self._backends:
            raise StorageNotFoundError(name, self.list_backends())
        if name != self._default:
            logger.debug("Default storage backend changed %r -> %r", self._default, name)
        self._default = name

    def __contains__(self, name: object) -> bool:
        """Support ``"list" in registry`` membership test."""
        return name in self._backends

    def __len__(self) -> int:
        """Return the number of registered backends."""
        return len(self._backends)

    def __repr__(self) -> str:
        return (
            f"StorageRegistry(default={self._default!r}, "
            f"backends={self.list_backends()})"
        )

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str = ENTRYPOINT_GROUP) -> None:
        """Discover and register backends declared as package entry-points.

        Already-registered names are skipped with a debug-level log entry,
        so repeated calls are idempotent.  Entry-points that fail to load
        or do not name a ``DigitStorage`` subclass are logged and skipped.

        Example
        -------
        In a downstream package's ``pyproject.toml``::

            [project.entry-points."decint.storage"]
            array = "my_package.storage:ArrayStorage"
        """
        entry_points = importlib.metadata.entry_points(group=group)
        for ep in entry_points:
            if ep.name in self._backends:
                logger.debug("Entry-point %r already registered; skipping.", ep.name)
                continue
            try:
                cls = ep.load()
            except Exception:
                logger.exception(
                    "Failed to load entry-point %r from group %r; skipping.",
                    ep.name,
                    group,
                )
                continue
            try:
                self.register_class(ep.name, cls)
            except (StorageAlreadyRegisteredError, TypeError):
                logger.warning(
                    "Entry-point %r loaded but could not be registered; skipping.",
                    ep.name,
                )


storage_registry = StorageRegistry()
storage_registry.register_class("list", ListStorage)
storage_registry.register_class("bytearray", ByteArrayStorage)


def set_default_storage(name: str) -> None:
    """Select the backend used by ``Integer`` when ``storage`` is omitted.

    Raises
    ------
    StorageNotFoundError
        If ``name`` is not registered.
    """
    storage_registry.default = name


def get_default_storage() -> str:
    """Return the name of the current default backend."""
    return storage_registry.default
