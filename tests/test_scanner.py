from textescaper.translate.scanner import (
    char_width,
    codepoint_at,
    combine_surrogates,
    is_high_surrogate,
    is_low_surrogate,
    logical_char_at,
    utf16_units,
)

GRINNING = "\U0001F600"
GRINNING_PAIR = "\ud83d\ude00"


def test_surrogate_predicates():
    assert is_high_surrogate("\ud83d")
    assert not is_high_surrogate("\ude00")
    assert is_low_surrogate("\ude00")
    assert not is_low_surrogate("a")


def test_char_width_pairs_and_lone_surrogates():
    assert char_width(GRINNING_PAIR, 0) == 2
    assert char_width("a" + GRINNING_PAIR, 1) == 2
    # native supplementary character is a single element
    assert char_width(GRINNING, 0) == 1
    # lone or reversed surrogates count as one unit each
    assert char_width("\ud83d", 0) == 1
    assert char_width("\ud83dx", 0) == 1
    assert char_width("\ude00\ud83d", 0) == 1


def test_codepoint_at():
    assert codepoint_at(GRINNING_PAIR, 0) == 0x1F600
    assert codepoint_at(GRINNING, 0) == 0x1F600
    assert codepoint_at("\ud83d", 0) == 0xD83D
    assert codepoint_at("abc", 2) == ord("c")


def test_logical_char_at_takes_pairs_whole():
    text = "a" + GRINNING_PAIR + "b\ud800"
    assert logical_char_at(text, 0) == "a"
    assert logical_char_at(text, 1) == GRINNING_PAIR
    assert logical_char_at(text, 3) == "b"
    assert logical_char_at(text, 4) == "\ud800"
    assert logical_char_at(GRINNING, 0) == GRINNING


def test_utf16_units():
    assert utf16_units(0x41) == (0x41,)
    assert utf16_units(0xFFFF) == (0xFFFF,)
    assert utf16_units(0x1F600) == (0xD83D, 0xDE00)
    assert utf16_units(0x10C22) == (0xD803, 0xDC22)
    assert combine_surrogates(0xD803, 0xDC22) == 0x10C22
