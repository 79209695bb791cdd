# textescaper/escaper/escape.py
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, List, Literal, Mapping, Tuple, Union, get_args

from ..translate import (
    AggregateTranslator,
    CsvEscaper,
    CsvUnescaper,
    LookupTranslator,
    NumericEntityUnescaper,
    TranslationReport,
    Translator,
    UnicodeEscapeError,
    UnicodeEscaper,
    UnicodeUnescaper,
    translate,
    translate_with_report,
)
from ..translate.base import Direction, Sink
from .mappings import (
    APOS_ESCAPE,
    APOS_UNESCAPE,
    BASIC_ESCAPE,
    BASIC_UNESCAPE,
    ECMASCRIPT_QUOTE_ESCAPE,
    HTML40_EXTENDED_ESCAPE,
    HTML40_EXTENDED_UNESCAPE,
    ISO8859_1_ESCAPE,
    ISO8859_1_UNESCAPE,
    JAVA_CTRL_CHARS_ESCAPE,
    JAVA_CTRL_CHARS_UNESCAPE,
    JAVA_QUOTE_ESCAPE,
    JAVA_QUOTE_UNESCAPE,
)

__all__ = [
    "ESCAPE_JAVA",
    "ESCAPE_ECMASCRIPT",
    "ESCAPE_XML",
    "ESCAPE_HTML3",
    "ESCAPE_HTML4",
    "ESCAPE_CSV",
    "UNESCAPE_JAVA",
    "UNESCAPE_ECMASCRIPT",
    "UNESCAPE_HTML3",
    "UNESCAPE_HTML4",
    "UNESCAPE_XML",
    "UNESCAPE_CSV",
    "Scheme",
    "SCHEMES",
    "rule_set",
    "escape_java",
    "unescape_java",
    "escape_ecmascript",
    "unescape_ecmascript",
    "escape_html3",
    "unescape_html3",
    "escape_html4",
    "unescape_html4",
    "escape_xml",
    "unescape_xml",
    "escape_csv",
    "unescape_csv",
    "escape",
    "unescape",
    "escape_lines",
    "unescape_lines",
    "main",
]

logger = logging.getLogger(__name__)

Scheme = Literal["java", "ecmascript", "html3", "html4", "xml", "csv"]
SCHEMES: Tuple[str, ...] = get_args(Scheme)


@dataclass(frozen=True)
class _StrayBackslashUnescaper:
    """
    Drop a backslash that starts no known escape.

    A backslash at the very end of the input is left for the driver to copy.
    """

    def consume(self, text: str, index: int, out: Sink) -> int:
        if text[index] == "\\" and index + 1 < len(text):
            return 1
        return 0


# ---------------------------------------------------------------------------
# Rule sets (ordered: narrow lookups first, broad range escapers last)
# ---------------------------------------------------------------------------

ESCAPE_JAVA: Translator = AggregateTranslator(
    LookupTranslator(JAVA_QUOTE_ESCAPE),
    LookupTranslator(JAVA_CTRL_CHARS_ESCAPE),
    UnicodeEscaper.outside_of(32, 0x7F),
)

ESCAPE_ECMASCRIPT: Translator = AggregateTranslator(
    LookupTranslator(ECMASCRIPT_QUOTE_ESCAPE),
    LookupTranslator(JAVA_CTRL_CHARS_ESCAPE),
    UnicodeEscaper.outside_of(32, 0x7F),
)

ESCAPE_XML: Translator = AggregateTranslator(
    LookupTranslator(BASIC_ESCAPE),
    LookupTranslator(APOS_ESCAPE),
)

ESCAPE_HTML3: Translator = AggregateTranslator(
    LookupTranslator(BASIC_ESCAPE),
    LookupTranslator(ISO8859_1_ESCAPE),
)

ESCAPE_HTML4: Translator = AggregateTranslator(
    LookupTranslator(BASIC_ESCAPE),
    LookupTranslator(ISO8859_1_ESCAPE),
    LookupTranslator(HTML40_EXTENDED_ESCAPE),
)

ESCAPE_CSV: Translator = CsvEscaper()

UNESCAPE_JAVA: Translator = AggregateTranslator(
    UnicodeUnescaper(),
    LookupTranslator(JAVA_CTRL_CHARS_UNESCAPE),
    LookupTranslator(JAVA_QUOTE_UNESCAPE),
    _StrayBackslashUnescaper(),
)

UNESCAPE_ECMASCRIPT: Translator = UNESCAPE_JAVA

UNESCAPE_HTML3: Translator = AggregateTranslator(
    LookupTranslator(BASIC_UNESCAPE),
    LookupTranslator(ISO8859_1_UNESCAPE),
    NumericEntityUnescaper(),
)

UNESCAPE_HTML4: Translator = AggregateTranslator(
    LookupTranslator(BASIC_UNESCAPE),
    LookupTranslator(ISO8859_1_UNESCAPE),
    LookupTranslator(HTML40_EXTENDED_UNESCAPE),
    NumericEntityUnescaper(),
)

UNESCAPE_XML: Translator = AggregateTranslator(
    LookupTranslator(BASIC_UNESCAPE),
    LookupTranslator(APOS_UNESCAPE),
    NumericEntityUnescaper(),
)

UNESCAPE_CSV: Translator = CsvUnescaper()

_RULE_SETS: Mapping[Tuple[Direction, str], Translator] = MappingProxyType(
    {
        ("escape", "java"): ESCAPE_JAVA,
        ("escape", "ecmascript"): ESCAPE_ECMASCRIPT,
        ("escape", "html3"): ESCAPE_HTML3,
        ("escape", "html4"): ESCAPE_HTML4,
        ("escape", "xml"): ESCAPE_XML,
        ("escape", "csv"): ESCAPE_CSV,
        ("unescape", "java"): UNESCAPE_JAVA,
        ("unescape", "ecmascript"): UNESCAPE_ECMASCRIPT,
        ("unescape", "html3"): UNESCAPE_HTML3,
        ("unescape", "html4"): UNESCAPE_HTML4,
        ("unescape", "xml"): UNESCAPE_XML,
        ("unescape", "csv"): UNESCAPE_CSV,
    }
)


# ---------------------------------------------------------------------------
# Java and ECMAScript
# ---------------------------------------------------------------------------


def escape_java(text: str | None) -> str | None:
    """
    Escape quotes, backslashes and control characters Java-style; every
    character outside printable ASCII becomes ``\\uXXXX`` (``é`` ->
    ``\\u00E9``, ``😀`` -> ``\\uD83D\\uDE00``).
    """
    return translate(ESCAPE_JAVA, text)


def escape_ecmascript(text: str | None) -> str | None:
    """
    Like :func:`escape_java`, but also escapes ``'`` and ``/``.
    """
    return translate(ESCAPE_ECMASCRIPT, text)


def unescape_java(text: str | None) -> str | None:
    """
    Decode Java string-literal escapes.

    :raises UnicodeEscapeError: on a malformed ``\\u`` escape.
    """
    return translate(UNESCAPE_JAVA, text)


def unescape_ecmascript(text: str | None) -> str | None:
    return translate(UNESCAPE_ECMASCRIPT, text)


# ---------------------------------------------------------------------------
# HTML and XML
# ---------------------------------------------------------------------------


def escape_html4(text: str | None) -> str | None:
    """
    Replace characters with HTML 4.0 named entities (``<`` -> ``&lt;``,
    ``é`` -> ``&eacute;``, ``€`` -> ``&euro;``).
    """
    return translate(ESCAPE_HTML4, text)


def escape_html3(text: str | None) -> str | None:
    """
    Replace characters with HTML 3.2 named entities (basic + Latin-1).
    """
    return translate(ESCAPE_HTML3, text)


def unescape_html4(text: str | None) -> str | None:
    """
    Decode HTML 4.0 named entities and numeric character references.
    Unknown entities are kept as they are.
    """
    return translate(UNESCAPE_HTML4, text)


def unescape_html3(text: str | None) -> str | None:
    return translate(UNESCAPE_HTML3, text)


def escape_xml(text: str | None) -> str | None:
    """
    Escape the five XML special characters. Non-ASCII text is not touched.
    """
    return translate(ESCAPE_XML, text)


def unescape_xml(text: str | None) -> str | None:
    return translate(UNESCAPE_XML, text)


# ---------------------------------------------------------------------------
# CSV
# ---------------------------------------------------------------------------


def escape_csv(text: str | None) -> str | None:
    """
    Quote a single CSV field if it contains ``,``, ``"``, CR or LF.
    """
    return translate(ESCAPE_CSV, text)


def unescape_csv(text: str | None) -> str | None:
    """
    Undo :func:`escape_csv` on a single field.
    """
    return translate(UNESCAPE_CSV, text)


# --- generic entrypoints ----------------------------------------------------


def rule_set(scheme: Scheme, direction: Direction = "escape") -> Translator:
    """
    Look up the translator for ``scheme`` in ``direction``.

    :raises ValueError: for an unknown scheme or direction.
    """
    try:
        return _RULE_SETS[(direction, scheme)]
    except KeyError:
        raise ValueError(
            f"unknown scheme/direction {scheme!r}/{direction!r}; "
            f"schemes: {', '.join(SCHEMES)}"
        ) from None


def _run(
    text: str | None,
    *,
    scheme: Scheme,
    direction: Direction,
    report: bool,
) -> Union[str, None, Tuple[str | None, TranslationReport]]:
    translator = rule_set(scheme, direction)
    if not report:
        return translate(translator, text)

    if text is None:
        rep = TranslationReport(input_len=0, output_len=0)
        out: str | None = None
    else:
        out, rep = translate_with_report(translator, text)
    rep.scheme = scheme
    rep.direction = direction
    return out, rep


def escape(
    text: str | None,
    *,
    scheme: Scheme = "html4",
    report: bool = False,
) -> Union[str, None, Tuple[str | None, TranslationReport]]:
    """
    One-shot entrypoint: escape ``text`` with the named scheme.

    - report=False -> returns str (or None)
    - report=True  -> returns (str, TranslationReport)
    """
    return _run(text, scheme=scheme, direction="escape", report=report)


def unescape(
    text: str | None,
    *,
    scheme: Scheme = "html4",
    report: bool = False,
) -> Union[str, None, Tuple[str | None, TranslationReport]]:
    """
    One-shot entrypoint: unescape ``text`` with the named scheme.

    - report=False -> returns str (or None)
    - report=True  -> returns (str, TranslationReport)
    """
    return _run(text, scheme=scheme, direction="unescape", report=report)


def escape_lines(lines: Iterable[str], **kwargs: Any) -> List[str]:
    """
    Escape an iterable of strings with :func:`escape`.

    :param lines: Iterable of strings.
    :param kwargs: Forwarded to :func:`escape` (``report`` is ignored).
    :returns: List of escaped strings.
    """
    kwargs.pop("report", None)
    return [escape(x, **kwargs) for x in lines]


def unescape_lines(lines: Iterable[str], **kwargs: Any) -> List[str]:
    """
    Unescape an iterable of strings with :func:`unescape`.
    """
    kwargs.pop("report", None)
    return [unescape(x, **kwargs) for x in lines]


def main(argv: List[str] | None = None) -> int:
    """
    CLI entrypoint.

    Usage::

        textescaper --scheme html4 < infile.txt > outfile.txt
        textescaper --scheme java --unescape < infile.txt

    :param argv: Optional argv (defaults to ``sys.argv[1:]``).
    :returns: Process exit status.
    """
    parser = argparse.ArgumentParser(
        prog="textescaper",
        description="Escape or unescape stdin to stdout.",
    )
    parser.add_argument("--scheme", choices=SCHEMES, default="html4")
    parser.add_argument(
        "--unescape", action="store_true", help="decode instead of encode"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    direction: Direction = "unescape" if args.unescape else "escape"
    data = sys.stdin.read()
    try:
        out, rep = _run(data, scheme=args.scheme, direction=direction, report=True)
    except UnicodeEscapeError as exc:
        logger.debug("aborting %s/%s", direction, args.scheme, exc_info=True)
        sys.stderr.write(f"textescaper: {exc}\n")
        return 1

    logger.debug(
        "%s/%s: %d -> %d chars (%d translated, %d copied)",
        direction,
        args.scheme,
        rep.input_len,
        rep.output_len,
        rep.translated_units,
        rep.copied_units,
    )
    sys.stdout.write(out)
    return 0
