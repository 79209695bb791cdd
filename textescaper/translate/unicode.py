# textescaper/translate/unicode.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

from .base import Sink, UnicodeEscapeError
from .scanner import (
    HIGH_SURROGATE_MAX,
    HIGH_SURROGATE_MIN,
    LOW_SURROGATE_MAX,
    LOW_SURROGATE_MIN,
    MAX_CODEPOINT,
    char_width,
    codepoint_at,
    combine_surrogates,
    utf16_units,
)

__all__ = ["UnicodeEscaper", "UnicodeUnescaper"]

# "\u", "\uuuu", "\u+" ... (the four hex digits are checked separately)
RE_U_PREFIX = re.compile(r"\\u+\+?")
RE_HEX4 = re.compile(r"[0-9A-Fa-f]{4}")


def _hex_escape(unit: int) -> str:
    return f"\\u{unit:04X}"


@dataclass(frozen=True)
class UnicodeEscaper:
    """
    Escape single codepoints as ``\\uXXXX`` depending on a range test.

    :param lo: Lower bound (inclusive).
    :param hi: Upper bound (inclusive).
    :param inside: Escape codepoints inside ``[lo, hi]`` if True, outside it
                   if False.
    """

    lo: int = 0
    hi: int = MAX_CODEPOINT
    inside: bool = True

    @classmethod
    def between(cls, lo: int, hi: int) -> "UnicodeEscaper":
        return cls(lo, hi, inside=True)

    @classmethod
    def outside_of(cls, lo: int, hi: int) -> "UnicodeEscaper":
        return cls(lo, hi, inside=False)

    @classmethod
    def below(cls, codepoint: int) -> "UnicodeEscaper":
        """Escape every codepoint strictly below ``codepoint``."""
        return cls(codepoint, MAX_CODEPOINT, inside=False)

    @classmethod
    def above(cls, codepoint: int) -> "UnicodeEscaper":
        """Escape every codepoint strictly above ``codepoint``."""
        return cls(0, codepoint, inside=False)

    def should_escape(self, codepoint: int) -> bool:
        in_range = self.lo <= codepoint <= self.hi
        return in_range if self.inside else not in_range

    def consume(self, text: str, index: int, out: Sink) -> int:
        cp = codepoint_at(text, index)
        if not self.should_escape(cp):
            return 0
        # Supplementary codepoints go out as two escaped surrogate halves
        for unit in utf16_units(cp):
            out.write(_hex_escape(unit))
        return char_width(text, index)


@dataclass(frozen=True)
class UnicodeUnescaper:
    """
    Decode ``\\uXXXX`` escapes (also ``\\uuuuXXXX`` and ``\\u+XXXX``).

    An escaped high surrogate directly followed by an escaped low surrogate
    is decoded to the single supplementary character.

    Malformed escapes raise :class:`UnicodeEscapeError`: there is no
    sensible literal reading of a broken ``\\u``.
    """

    def _decode_at(self, text: str, index: int) -> Tuple[int, int] | None:
        m = RE_U_PREFIX.match(text, index)
        if not m:
            return None
        start = m.end()
        digits = text[start : start + 4]
        if len(digits) < 4:
            raise UnicodeEscapeError(
                "Less than 4 hex digits in unicode value", text[index:], index
            )
        if not RE_HEX4.fullmatch(digits):
            raise UnicodeEscapeError(
                "Unable to parse unicode value", text[index : start + 4], index
            )
        return int(digits, 16), start + 4 - index

    def consume(self, text: str, index: int, out: Sink) -> int:
        decoded = self._decode_at(text, index)
        if decoded is None:
            return 0
        value, n = decoded

        if HIGH_SURROGATE_MIN <= value <= HIGH_SURROGATE_MAX:
            low = self._decode_at(text, index + n)
            if low is not None and LOW_SURROGATE_MIN <= low[0] <= LOW_SURROGATE_MAX:
                out.write(chr(combine_surrogates(value, low[0])))
                return n + low[1]

        out.write(chr(value))
        return n
