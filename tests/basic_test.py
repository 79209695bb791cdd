import logging

import pytest

import textescaper
from textescaper import (
    escape_csv,
    escape_ecmascript,
    escape_html3,
    escape_html4,
    escape_java,
    escape_xml,
    unescape_csv,
    unescape_ecmascript,
    unescape_html3,
    unescape_html4,
    unescape_java,
    unescape_xml,
)

logging.basicConfig(level=logging.INFO)

PUBLIC_FUNCTIONS = [
    escape_java,
    unescape_java,
    escape_ecmascript,
    unescape_ecmascript,
    escape_html3,
    unescape_html3,
    escape_html4,
    unescape_html4,
    escape_xml,
    unescape_xml,
    escape_csv,
    unescape_csv,
]


@pytest.mark.parametrize("fn", PUBLIC_FUNCTIONS, ids=lambda f: f.__name__)
def test_none_maps_to_none(fn):
    assert fn(None) is None


@pytest.mark.parametrize("fn", PUBLIC_FUNCTIONS, ids=lambda f: f.__name__)
def test_empty_string_stays_empty(fn):
    assert fn("") == ""


def test_escape_java_quotes_and_backslash():
    raw = 'He didn\'t say, "Stop!" \\o/'
    escaped = escape_java(raw)

    logging.info(f"result: {escaped}")

    assert escaped == 'He didn\'t say, \\"Stop!\\" \\\\o/'


def test_escape_java_control_and_non_ascii():
    assert escape_java("\t\n\r\b\f") == "\\t\\n\\r\\b\\f"
    assert escape_java("\x01") == "\\u0001"
    assert escape_java("caf\u00e9") == "caf\\u00E9"
    # DEL sits on the upper bound of the printable range and is kept
    assert escape_java("\x7f") == "\x7f"


def test_escape_ecmascript_also_escapes_apostrophe_and_slash():
    assert escape_ecmascript("</script>") == "<\\/script>"
    assert escape_ecmascript("it's") == "it\\'s"
    assert escape_java("</script>") == "</script>"


def test_unescape_java_basics():
    assert unescape_java("\\u0041\\t\\\\\\\"") == 'A\t\\"'
    assert unescape_java("it\\'s") == "it's"
    assert unescape_ecmascript("<\\/script>") == "</script>"


def test_unescape_java_drops_unknown_backslash():
    assert unescape_java("a\\qb") == "aqb"


def test_unescape_java_keeps_trailing_backslash():
    assert unescape_java("ends with \\") == "ends with \\"
    assert unescape_java("\\") == "\\"


def test_escape_html4():
    raw = '<a href="x">caf\u00e9 & \u20ac</a>'
    assert (
        escape_html4(raw)
        == "&lt;a href=&quot;x&quot;&gt;caf&eacute; &amp; &euro;&lt;/a&gt;"
    )


def test_escape_html3_has_no_extended_entities():
    assert escape_html3("\u00e9\u20ac") == "&eacute;\u20ac"


def test_unescape_html4_named_and_numeric():
    assert unescape_html4("&lt;&eacute;&euro;&#65;&#x42;&#X43;") == "<\u00e9\u20acABC"


def test_unescape_html3_leaves_extended_entities():
    assert unescape_html3("&euro; &amp;") == "&euro; &"


def test_escape_xml_leaves_non_ascii():
    assert escape_xml("'\"&<>\u00e9") == "&apos;&quot;&amp;&lt;&gt;\u00e9"


def test_unescape_xml():
    assert unescape_xml("&apos;&lt;&#233;") == "'<\u00e9"
    # HTML names mean nothing to XML
    assert unescape_xml("&eacute;") == "&eacute;"
    assert unescape_html4("&apos;") == "&apos;"


def test_csv_examples():
    assert escape_csv("a,b") == '"a,b"'
    assert escape_csv("plain") == "plain"
    assert unescape_csv('"a""b"') == 'a"b'


def test_package_exports_version():
    assert textescaper.__version__
