"""Digit storage backends.

An ``Integer`` keeps its digits in a :class:`DigitStorage`, a narrow
mutable-sequence capability: indexing, length, append/pop/insert and
slicing.  Any growable contiguous array can back it; two backends ship
with decint:

``list``
    A plain Python list of ints.  The default.
``bytearray``
    One byte per digit.  Smaller for very long numbers.

Additional backends register with
:data:`decint.storage.registry.storage_registry`.
"""
from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable, MutableSequence
from typing import Any, overload


class DigitStorage(MutableSequence[int]):
    """Abstract container for most-significant-first decimal digits.

    Subclasses wrap a concrete sequence and implement the five abstract
    ``MutableSequence`` methods; slicing must return an instance of the
    same backend.

    Parameters
    ----------
    digits:
        Initial digits, most significant first.
    """

    __slots__ = ()

    @abstractmethod
    def __init__(self, digits: Iterable[int] = ()) -> None: ...

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitStorage):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class ListStorage(DigitStorage):
    """Digits kept in a Python ``list``."""

    __slots__ = ("_data",)

    def __init__(self, digits: Iterable[int] = ()) -> None:
        self._data: list[int] = list(digits)

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> ListStorage: ...

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return ListStorage(self._data[index])
        return self._data[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        self._data[index] = value

    def __delitem__(self, index: Any) -> None:
        del self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def insert(self, index: int, value: int) -> None:
        self._data.insert(index, value)


class ByteArrayStorage(DigitStorage):
    """Digits kept one per byte in a ``bytearray``."""

    __slots__ = ("_data",)

    def __init__(self, digits: Iterable[int] = ()) -> None:
        self._data = bytearray(digits)

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> ByteArrayStorage: ...

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return ByteArrayStorage(self._data[index])
        return self._data[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        self._data[index] = value

    def __delitem__(self, index: Any) -> None:
        del self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def insert(self, index: int, value: int) -> None:
        self._data.insert(index, value)
