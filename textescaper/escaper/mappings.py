# textescaper mappings: entity and control-character tables.

from html.entities import codepoint2name

BASIC_CODEPOINTS = (0x22, 0x26, 0x3C, 0x3E)  # " & < >


def _entity(cp: int) -> str:
    return f"&{codepoint2name[cp]};"


def _invert(table):
    return {v: k for k, v in table.items()}


# " & < >
BASIC_ESCAPE = {chr(cp): _entity(cp) for cp in BASIC_CODEPOINTS}
BASIC_UNESCAPE = _invert(BASIC_ESCAPE)

# XML only; HTML 4 has no &apos;
APOS_ESCAPE = {"'": "&apos;"}
APOS_UNESCAPE = _invert(APOS_ESCAPE)

# Latin-1 supplement: &nbsp; (U+00A0) .. &yuml; (U+00FF)
ISO8859_1_ESCAPE = {chr(cp): _entity(cp) for cp in range(0xA0, 0x100)}
ISO8859_1_UNESCAPE = _invert(ISO8859_1_ESCAPE)

# Everything else HTML 4.0 names: symbols, Greek letters, math, arrows ...
HTML40_EXTENDED_ESCAPE = {
    chr(cp): _entity(cp)
    for cp in sorted(codepoint2name)
    if cp > 0xFF
}
HTML40_EXTENDED_UNESCAPE = _invert(HTML40_EXTENDED_ESCAPE)

# Java / ECMAScript short escapes
JAVA_CTRL_CHARS_ESCAPE = {
    "\b": "\\b",
    "\n": "\\n",
    "\t": "\\t",
    "\f": "\\f",
    "\r": "\\r",
}
JAVA_CTRL_CHARS_UNESCAPE = _invert(JAVA_CTRL_CHARS_ESCAPE)

# Quote / backslash escapes
JAVA_QUOTE_ESCAPE = {
    '"': '\\"',
    "\\": "\\\\",
}
ECMASCRIPT_QUOTE_ESCAPE = {
    "'": "\\'",
    '"': '\\"',
    "\\": "\\\\",
    "/": "\\/",
}
JAVA_QUOTE_UNESCAPE = {
    "\\\\": "\\",
    '\\"': '"',
    "\\'": "'",
}
