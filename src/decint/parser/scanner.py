"""Decimal text scanner: converts ``"-00123"`` style text into digits.

Accepted grammar::

    literal := ["-"] digit+
    digit   := "0" .. "9"

Leading zeros are skipped (one digit is always kept) and ``"-0"`` style
input normalizes to non-negative zero.  Anything else, including ``+``,
whitespace and grouping separators, is rejected with
:class:`~decint.core.errors.InvalidFormatError`.
"""
from __future__ import annotations

from typing import Final, NoReturn

from decint.core.errors import InvalidFormatError

_SIGN: Final[str] = "-"
_ZERO: Final[str] = "0"
_DIGITS: Final[frozenset[str]] = frozenset("0123456789")


class DecimalScanner:
    """Single-pass scanner for one decimal integer literal.

    After a failed :meth:`scan` the scanner holds the fallback value
    zero (``digits == [0]``, ``negative is False``) rather than whatever
    had been collected before the bad character.

    Parameters
    ----------
    text:
        The complete literal to scan.
    """

    __slots__ = ("_text", "_pos", "digits", "negative")

    def __init__(self, text: str) -> None:
        self._text: str = text
        self._pos: int = 0
        self.digits: list[int] = []
        self.negative: bool = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def scan(self) -> tuple[list[int], bool]:
        """Scan the text and return ``(digits, negative)``.

        Raises
        ------
        InvalidFormatError
            On a bare ``-``, empty input, or any non-digit character.
        """
        text = self._text
        end = len(text)

        if self._current() == _SIGN:
            self._pos += 1
            if self._pos == end:
                self._fail("sign without digits", offset=0)
            self.negative = True

        while self._current() == _ZERO and self._pos < end - 1:
            self._pos += 1

        if self._pos == end - 1 and text[self._pos] == _ZERO:
            self.negative = False

        while self._pos < end:
            ch = text[self._pos]
            if ch not in _DIGITS:
                self._fail(f"unexpected character {ch!r}", offset=self._pos)
            self.digits.append(ord(ch) - ord(_ZERO))
            self._pos += 1

        if not self.digits:
            self._fail("no digits")

        return self.digits, self.negative

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _current(self) -> str:
        """Return the character at the current position, or ``""`` at the end."""
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _fail(self, reason: str, offset: int | None = None) -> NoReturn:
        self.digits = [0]
        self.negative = False
        raise InvalidFormatError(reason, self._text, offset)


def parse_decimal(text: str) -> tuple[list[int], bool]:
    """Convenience wrapper: scan ``text`` and return ``(digits, negative)``.

    Raises
    ------
    InvalidFormatError
        If ``text`` is not a valid decimal integer literal.
    """
    return DecimalScanner(text).scan()
