"""Pluggable digit storage.

Exports the ``DigitStorage`` base class, the built-in backends, the
module-level ``storage_registry`` and the default-backend helpers.
"""
from __future__ import annotations

from decint.storage.backends import ByteArrayStorage, DigitStorage, ListStorage
from decint.storage.registry import (
    ENTRYPOINT_GROUP,
    StorageAlreadyRegisteredError,
    StorageNotFoundError,
    StorageRegistry,
    get_default_storage,
    set_default_storage,
    storage_registry,
)

__all__ = [
    "DigitStorage",
    "ListStorage",
    "ByteArrayStorage",
    "StorageRegistry",
    "StorageNotFoundError",
    "StorageAlreadyRegisteredError",
    "ENTRYPOINT_GROUP",
    "storage_registry",
    "set_default_storage",
    "get_default_storage",
]
