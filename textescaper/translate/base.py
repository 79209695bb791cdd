# textescaper/translate/base.py
from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from io import StringIO
from pathlib import Path
from typing import Any, Literal, Optional, Protocol, Tuple

from .scanner import logical_char_at

__all__ = [
    "Direction",
    "TextEscaperError",
    "UnicodeEscapeError",
    "TranslatorStateError",
    "Sink",
    "Translator",
    "AggregateTranslator",
    "TranslationReport",
    "translate",
    "translate_to",
    "translate_with_report",
]

Direction = Literal["escape", "unescape"]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TextEscaperError(Exception):
    """Base class for every error raised by textescaper."""


class UnicodeEscapeError(TextEscaperError, ValueError):
    """
    Raised when a ``\\uXXXX`` escape is malformed or truncated.

    :param message: Human readable description.
    :param sequence: The offending input text.
    :param index: Position of the backslash in the input.
    """

    def __init__(self, message: str, sequence: str, index: int):
        super().__init__(message, sequence, index)
        self.sequence = sequence
        self.index = index

    def __str__(self) -> str:
        return f"{self.args[0]}: {self.sequence!r} at index {self.index}"


class TranslatorStateError(TextEscaperError, RuntimeError):
    """A translator was used in a way its contract forbids (programming error)."""


# ---------------------------------------------------------------------------
# Contract
# ---------------------------------------------------------------------------


class Sink(Protocol):
    def write(self, s: str) -> Any: ...


class Translator(Protocol):
    """
    A single rule of a rule set.

    ``consume`` looks at ``text`` starting at ``index``. It either writes a
    replacement to ``out`` and returns how many ``str`` elements it used up,
    or returns 0 without writing anything.
    """

    def consume(self, text: str, index: int, out: Sink) -> int: ...


@dataclass(frozen=True, init=False)
class AggregateTranslator:
    """
    Ordered composition of translators: at each position the first child
    that consumes something wins.
    """

    translators: Tuple[Translator, ...]

    def __init__(self, *translators: Translator):
        object.__setattr__(self, "translators", tuple(translators))

    def consume(self, text: str, index: int, out: Sink) -> int:
        for t in self.translators:
            consumed = t.consume(text, index, out)
            if consumed != 0:
                return consumed
        return 0

    def with_(self, *translators: Translator) -> "AggregateTranslator":
        """
        Return a new aggregate trying ``translators`` after the current ones.
        """
        return AggregateTranslator(*self.translators, *translators)


# ---------------------------------------------------------------------------
# Report (optional)
# ---------------------------------------------------------------------------


@dataclass
class TranslationReport:
    """
    Counters for one translation run.

    :param input_len: Length of the input string.
    :param output_len: Length of the output string.
    :param translated_units: Input elements consumed by translators.
    :param copied_units: Input elements copied through unchanged.
    """

    input_len: int
    output_len: int
    translated_units: int = 0
    copied_units: int = 0
    scheme: str | None = None
    direction: Direction | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_jsonl(self, path: str | Path, *, append: bool = True) -> None:
        """
        Write the report as one JSON line.
        """
        out_path = Path(path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with out_path.open("a" if append else "w", encoding="utf-8") as f:
            f.write(json.dumps(self.to_dict(), ensure_ascii=False) + "\n")


# ---------------------------------------------------------------------------
# Driver loop
# ---------------------------------------------------------------------------


def _drive(translator: Translator, text: str, out: Sink) -> Tuple[int, int]:
    """
    Run the translate/copy loop. Each translator writes into a scratch
    buffer first, so ``out`` only ever receives fragments whose consumed
    length passed the contract checks.
    """
    translated = 0
    copied = 0
    i = 0
    n = len(text)
    scratch = StringIO()
    while i < n:
        scratch.seek(0)
        scratch.truncate()
        consumed = translator.consume(text, i, scratch)
        if consumed > 0:
            if i + consumed > n:
                raise TranslatorStateError(
                    f"{type(translator).__name__} consumed {consumed} at index {i}, "
                    f"only {n - i} left"
                )
            out.write(scratch.getvalue())
            i += consumed
            translated += consumed
            continue
        if consumed < 0:
            raise TranslatorStateError(
                f"{type(translator).__name__} returned a negative length ({consumed})"
            )

        # No rule matched: copy one logical character verbatim
        ch = logical_char_at(text, i)
        out.write(ch)
        i += len(ch)
        copied += len(ch)
    return translated, copied


def translate_to(translator: Translator, text: Optional[str], out: Sink) -> None:
    """
    Stream the translation of ``text`` into ``out``.

    :param translator: Rule set to apply.
    :param text: Input text; ``None`` writes nothing.
    :param out: Object with a ``write(str)`` method.
    :raises TranslatorStateError: on a contract violation; ``out`` then holds
        the output for the input before the failing position only.
    """
    if out is None:
        raise TypeError("out must not be None")
    if text is None:
        return
    _drive(translator, text, out)


def translate(translator: Translator, text: Optional[str]) -> Optional[str]:
    """
    Translate ``text`` with ``translator`` in one left-to-right pass.

    :param translator: Rule set to apply.
    :param text: Input text.
    :returns: Translated text, or ``None`` if ``text`` is ``None``.
    """
    if text is None:
        return None
    buf = StringIO()
    _drive(translator, text, buf)
    return buf.getvalue()


def translate_with_report(
    translator: Translator, text: str
) -> Tuple[str, TranslationReport]:
    """
    Like :func:`translate`, but also returns a :class:`TranslationReport`.
    """
    buf = StringIO()
    translated, copied = _drive(translator, text, buf) if text else (0, 0)
    s = buf.getvalue()
    rep = TranslationReport(
        input_len=len(text) if text else 0,
        output_len=len(s),
        translated_units=translated,
        copied_units=copied,
    )
    return s, rep
