from .base import (
    AggregateTranslator,
    TextEscaperError,
    TranslationReport,
    Translator,
    TranslatorStateError,
    UnicodeEscapeError,
    translate,
    translate_to,
    translate_with_report,
)
from .csvfield import CsvEscaper, CsvUnescaper
from .lookup import LookupTranslator
from .numeric import NumericEntityUnescaper
from .unicode import UnicodeEscaper, UnicodeUnescaper

__all__ = [
    "AggregateTranslator",
    "CsvEscaper",
    "CsvUnescaper",
    "LookupTranslator",
    "NumericEntityUnescaper",
    "TextEscaperError",
    "TranslationReport",
    "Translator",
    "TranslatorStateError",
    "UnicodeEscapeError",
    "UnicodeEscaper",
    "UnicodeUnescaper",
    "translate",
    "translate_to",
    "translate_with_report",
]
