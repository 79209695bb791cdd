from .escaper.escape import (
    ESCAPE_CSV,
    ESCAPE_ECMASCRIPT,
    ESCAPE_HTML3,
    ESCAPE_HTML4,
    ESCAPE_JAVA,
    ESCAPE_XML,
    UNESCAPE_CSV,
    UNESCAPE_ECMASCRIPT,
    UNESCAPE_HTML3,
    UNESCAPE_HTML4,
    UNESCAPE_JAVA,
    UNESCAPE_XML,
    escape,
    escape_csv,
    escape_ecmascript,
    escape_html3,
    escape_html4,
    escape_java,
    escape_lines,
    escape_xml,
    unescape,
    unescape_csv,
    unescape_ecmascript,
    unescape_html3,
    unescape_html4,
    unescape_java,
    unescape_lines,
    unescape_xml,
)
from .translate import (
    TextEscaperError,
    TranslationReport,
    TranslatorStateError,
    UnicodeEscapeError,
    translate,
)

__version__ = "0.1.0"

__all__ = [
    "ESCAPE_CSV",
    "ESCAPE_ECMASCRIPT",
    "ESCAPE_HTML3",
    "ESCAPE_HTML4",
    "ESCAPE_JAVA",
    "ESCAPE_XML",
    "UNESCAPE_CSV",
    "UNESCAPE_ECMASCRIPT",
    "UNESCAPE_HTML3",
    "UNESCAPE_HTML4",
    "UNESCAPE_JAVA",
    "UNESCAPE_XML",
    "escape",
    "escape_csv",
    "escape_ecmascript",
    "escape_html3",
    "escape_html4",
    "escape_java",
    "escape_lines",
    "escape_xml",
    "unescape",
    "unescape_csv",
    "unescape_ecmascript",
    "unescape_html3",
    "unescape_html4",
    "unescape_java",
    "unescape_lines",
    "unescape_xml",
    "TextEscaperError",
    "TranslationReport",
    "TranslatorStateError",
    "UnicodeEscapeError",
    "translate",
]
