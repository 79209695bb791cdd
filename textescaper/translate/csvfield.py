# textescaper/translate/csvfield.py
from __future__ import annotations

from dataclasses import dataclass

from .base import Sink, TranslatorStateError

__all__ = ["CsvEscaper", "CsvUnescaper"]

CSV_DELIMITER = ","
CSV_QUOTE = '"'
CR = "\r"
LF = "\n"


def _search_chars(delimiter: str, quote: str) -> frozenset[str]:
    return frozenset((delimiter, quote, CR, LF))


def _check_field_chars(delimiter: str, quote: str) -> None:
    if len(delimiter) != 1 or len(quote) != 1:
        raise ValueError("CSV delimiter and quote must be single characters")
    if delimiter == quote:
        raise ValueError("CSV delimiter and quote must differ")


def _check_whole_input(name: str, index: int) -> None:
    if index != 0:
        raise TranslatorStateError(f"{name} must consume the whole input from index 0, got {index}")


@dataclass(frozen=True)
class CsvEscaper:
    """
    Quote a CSV field when it needs quoting.

    The field is wrapped in quotes (with embedded quotes doubled) only if it
    contains the delimiter, the quote, CR or LF; otherwise it is written as is.
    Works on the whole input in a single call.
    """

    delimiter: str = CSV_DELIMITER
    quote: str = CSV_QUOTE

    def __post_init__(self) -> None:
        _check_field_chars(self.delimiter, self.quote)

    def consume(self, text: str, index: int, out: Sink) -> int:
        _check_whole_input(type(self).__name__, index)
        search = _search_chars(self.delimiter, self.quote)
        if not any(ch in search for ch in text):
            out.write(text)
        else:
            out.write(self.quote)
            out.write(text.replace(self.quote, self.quote * 2))
            out.write(self.quote)
        return len(text)


@dataclass(frozen=True)
class CsvUnescaper:
    """
    Undo :class:`CsvEscaper`.

    Only a field that both starts and ends with the quote is touched; its
    quotes are stripped and doubled quotes collapsed, but only if the
    interior contains something that required quoting. Otherwise the field
    is returned unchanged, quotes included.
    """

    delimiter: str = CSV_DELIMITER
    quote: str = CSV_QUOTE

    def __post_init__(self) -> None:
        _check_field_chars(self.delimiter, self.quote)

    def consume(self, text: str, index: int, out: Sink) -> int:
        _check_whole_input(type(self).__name__, index)
        if not (text.startswith(self.quote) and text.endswith(self.quote)):
            out.write(text)
            return len(text)

        quoteless = text[1:-1]
        search = _search_chars(self.delimiter, self.quote)
        if any(ch in search for ch in quoteless):
            out.write(quoteless.replace(self.quote * 2, self.quote))
        else:
            out.write(text)
        return len(text)
