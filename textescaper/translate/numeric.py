# textescaper/translate/numeric.py
from __future__ import annotations

import re
from dataclasses import dataclass

from .base import Sink
from .scanner import MAX_CODEPOINT

__all__ = ["NumericEntityUnescaper"]

# &#NNN; or &#xHHH; / &#XHHH;
RE_NUMERIC_ENTITY = re.compile(r"&#(?:([0-9]+)|[xX]([0-9A-Fa-f]+));")

MAX_DECIMAL_DIGITS = len(str(MAX_CODEPOINT))
MAX_HEX_DIGITS = len(f"{MAX_CODEPOINT:X}")


@dataclass(frozen=True)
class NumericEntityUnescaper:
    """
    Decode numeric character references (``&#68642;``, ``&#x10C22;``).

    Anything that is not a complete, in-range reference is left alone so
    unknown markup survives a round trip unchanged.
    """

    def consume(self, text: str, index: int, out: Sink) -> int:
        if not text.startswith("&#", index):
            return 0
        m = RE_NUMERIC_ENTITY.match(text, index)
        if not m:
            return 0

        dec, hexa = m.groups()
        # U+10FFFF has 7 decimal / 6 hex significant digits; longer runs
        # overflow and may exceed int()'s digit limit
        if dec is not None:
            if len(dec.lstrip("0")) > MAX_DECIMAL_DIGITS:
                return 0
            value = int(dec, 10)
        else:
            if len(hexa.lstrip("0")) > MAX_HEX_DIGITS:
                return 0
            value = int(hexa, 16)
        if value > MAX_CODEPOINT:
            return 0

        out.write(chr(value))
        return m.end() - index
