# textescaper/translate/scanner.py
from __future__ import annotations

from typing import Tuple

__all__ = [
    "is_high_surrogate",
    "is_low_surrogate",
    "combine_surrogates",
    "char_width",
    "codepoint_at",
    "logical_char_at",
    "utf16_units",
]

HIGH_SURROGATE_MIN = 0xD800
HIGH_SURROGATE_MAX = 0xDBFF
LOW_SURROGATE_MIN = 0xDC00
LOW_SURROGATE_MAX = 0xDFFF
SUPPLEMENTARY_MIN = 0x10000
MAX_CODEPOINT = 0x10FFFF


def is_high_surrogate(ch: str) -> bool:
    return HIGH_SURROGATE_MIN <= ord(ch) <= HIGH_SURROGATE_MAX


def is_low_surrogate(ch: str) -> bool:
    return LOW_SURROGATE_MIN <= ord(ch) <= LOW_SURROGATE_MAX


def combine_surrogates(high: int, low: int) -> int:
    return (high - HIGH_SURROGATE_MIN) * 0x400 + (low - LOW_SURROGATE_MIN) + SUPPLEMENTARY_MIN


def char_width(text: str, index: int) -> int:
    """
    Width (in ``str`` elements) of the logical character at ``index``.

    A valid high/low surrogate pair counts as one logical character of
    width 2. Everything else, lone surrogates included, has width 1.
    """
    if (
        index + 1 < len(text)
        and is_high_surrogate(text[index])
        and is_low_surrogate(text[index + 1])
    ):
        return 2
    return 1


def codepoint_at(text: str, index: int) -> int:
    """
    Codepoint of the logical character at ``index``.

    :param text: Input text.
    :param index: Position of the logical character.
    :returns: The combined codepoint for a surrogate pair, else ``ord``.
    """
    if char_width(text, index) == 2:
        return combine_surrogates(ord(text[index]), ord(text[index + 1]))
    return ord(text[index])


def logical_char_at(text: str, index: int) -> str:
    """
    The logical character at ``index``: a surrogate pair or one element.

    :param text: Input text.
    :param index: Position of the logical character.
    :returns: Substring of length 1 or 2.
    """
    return text[index : index + char_width(text, index)]


def utf16_units(codepoint: int) -> Tuple[int, ...]:
    """
    UTF-16 code units for ``codepoint``: one unit in the BMP, a surrogate
    pair above it.
    """
    if codepoint < SUPPLEMENTARY_MIN:
        return (codepoint,)
    v = codepoint - SUPPLEMENTARY_MIN
    return (HIGH_SURROGATE_MIN + (v >> 10), LOW_SURROGATE_MIN + (v & 0x3FF))
