# textescaper/translate/lookup.py
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .base import Sink

__all__ = ["LookupTranslator"]


@dataclass(frozen=True)
class LookupTranslator:
    """
    Exact-match substitution against a fixed table.

    At each position the longest key that is a prefix of the remaining
    input wins; its value is written and ``len(key)`` is consumed.

    :param table: Mapping of source string to replacement.
    """

    table: Mapping[str, str]
    _shortest: int = field(init=False, repr=False, compare=False)
    _longest: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if any(not k for k in self.table):
            raise ValueError("LookupTranslator keys must be non-empty strings")
        frozen = MappingProxyType(dict(self.table))
        lengths = [len(k) for k in frozen] or [0]
        object.__setattr__(self, "table", frozen)
        object.__setattr__(self, "_shortest", min(lengths))
        object.__setattr__(self, "_longest", max(lengths))

    def consume(self, text: str, index: int, out: Sink) -> int:
        if not self.table:
            return 0
        longest = min(self._longest, len(text) - index)
        for n in range(longest, self._shortest - 1, -1):
            value = self.table.get(text[index : index + n])
            if value is not None:
                out.write(value)
                return n
        return 0

    def inverted(self) -> "LookupTranslator":
        """
        Translator for the reverse mapping (values become keys).
        """
        return LookupTranslator({v: k for k, v in self.table.items()})
