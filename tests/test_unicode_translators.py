from io import StringIO

import pytest

from textescaper import UnicodeEscapeError, escape_java, unescape_java
from textescaper.translate import UnicodeEscaper, UnicodeUnescaper, translate


def test_supplementary_codepoint_escaped_as_two_halves():
    assert escape_java("\U0001F600") == "\\uD83D\\uDE00"


def test_surrogate_pair_input_escaped_like_native_character():
    out = StringIO()
    consumed = UnicodeEscaper.outside_of(32, 0x7F).consume("\ud83d\ude00", 0, out)
    assert consumed == 2
    assert out.getvalue() == "\\uD83D\\uDE00"


def test_lone_surrogate_is_escaped_not_dropped():
    assert escape_java("a\ud800b") == "a\\uD800b"


def test_between():
    assert translate(UnicodeEscaper.between(0x41, 0x42), "ABC") == "\\u0041\\u0042C"


def test_below():
    assert translate(UnicodeEscaper.below(0x20), "\x1fA") == "\\u001FA"


def test_above():
    assert translate(UnicodeEscaper.above(0x7E), "~\x7f") == "~\\u007F"


def test_escaper_declines_inside_printable_range():
    out = StringIO()
    assert UnicodeEscaper.outside_of(32, 0x7F).consume("a", 0, out) == 0
    assert out.getvalue() == ""


def test_unescape_supplementary_pair_yields_one_character():
    result = unescape_java("\\ud83d\\ude00")
    assert result == "\U0001F600"
    assert len(result) == 1


def test_unescape_lone_high_surrogate():
    assert unescape_java("\\uD83D!") == "\ud83d!"


def test_unescape_high_surrogate_followed_by_non_low():
    assert unescape_java("\\uD83D\\u0041") == "\ud83dA"


def test_unescaper_consumes_six_units():
    out = StringIO()
    assert UnicodeUnescaper().consume("x\\u00e9y", 1, out) == 6
    assert out.getvalue() == "é"


def test_unescaper_accepts_repeated_u_and_plus():
    assert unescape_java("\\uuuu0041") == "A"
    assert unescape_java("\\u+0041") == "A"


def test_unescaper_declines_without_u():
    out = StringIO()
    assert UnicodeUnescaper().consume("\\n", 0, out) == 0


def test_truncated_escape_is_an_error():
    with pytest.raises(UnicodeEscapeError) as excinfo:
        unescape_java("abc\\u12")
    assert excinfo.value.index == 3
    assert excinfo.value.sequence == "\\u12"
    assert "Less than 4 hex digits" in str(excinfo.value)


def test_non_hex_escape_is_an_error():
    with pytest.raises(UnicodeEscapeError) as excinfo:
        unescape_java("\\u12G4 tail")
    assert excinfo.value.sequence == "\\u12G4"


def test_unicode_escape_error_is_a_value_error():
    with pytest.raises(ValueError):
        unescape_java("\\u")


def test_escaped_backslash_before_u_is_not_an_escape():
    assert unescape_java("\\\\u0041") == "\\u0041"
