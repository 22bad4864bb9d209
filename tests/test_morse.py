from __future__ import annotations

import pytest

from morsegen.morse import (
    LETTER_SEPARATOR,
    MARK_SEPARATOR,
    MORSE_CODE,
    PROSIGNS,
    WORD_SEPARATOR,
    UnsupportedCharacterError,
    char_to_morse,
    is_supported,
    text_to_morse,
    tokenize_text,
    word_to_morse,
)


def test_table_covers_itu_character_set():
    expected = set("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789") | set(".,:?/-()=+&'!_\"$@")
    assert set(MORSE_CODE) == expected


def test_patterns_use_single_space_between_marks():
    for pattern in list(MORSE_CODE.values()) + list(PROSIGNS.values()):
        marks = pattern.split(MARK_SEPARATOR)
        assert all(mark in (".", "-") for mark in marks), pattern


def test_parentheses_share_one_pattern():
    assert MORSE_CODE["("] == MORSE_CODE[")"] == "- . - - . -"


def test_prosign_keys_never_collide_with_single_characters():
    assert all(len(key) > 1 for key in PROSIGNS)


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        MORSE_CODE["~"] = "."  # type: ignore[index]
    with pytest.raises(TypeError):
        PROSIGNS["KN"] = "- . - - ."  # type: ignore[index]


def test_separators():
    assert LETTER_SEPARATOR == "   "
    assert WORD_SEPARATOR == "       "


def test_tokenize_text_splits_on_whitespace_and_uppercases():
    assert tokenize_text("  cq\tde\n k  ") == ["CQ", "DE", "K"]
    assert tokenize_text("") == []
    assert tokenize_text("   \t\n") == []


def test_tokenize_splits_only_on_c_locale_whitespace():
    assert tokenize_text("A\vB\fC\rD") == ["A", "B", "C", "D"]
    assert tokenize_text("E\xa0T") == ["E\xa0T"]


@pytest.mark.parametrize("sep", ["\xa0", "\x1c", "\x1f", "\x85", "\u2003"])
def test_other_unicode_separators_are_rejected(sep):
    with pytest.raises(UnsupportedCharacterError) as excinfo:
        text_to_morse(f"E{sep}T")
    assert excinfo.value.char == sep


def test_tokenize_only_folds_ascii_letters():
    assert tokenize_text("straße") == ["STRAßE"]


def test_single_characters_match_table_in_either_case():
    for ch, pattern in MORSE_CODE.items():
        assert word_to_morse(ch) == pattern
        assert char_to_morse(ch.lower()) == pattern


def test_prosign_words_use_fixed_pattern():
    assert word_to_morse("AR") == ". - . - ."
    assert word_to_morse("sk") == ". . . - . -"
    assert word_to_morse("BT") == "- . . . -"
    spelled = LETTER_SEPARATOR.join([MORSE_CODE["A"], MORSE_CODE["R"]])
    assert word_to_morse("AR") != spelled


def test_prosign_embedded_in_a_word_is_spelled_out():
    assert word_to_morse("ARK") == LETTER_SEPARATOR.join(
        [MORSE_CODE["A"], MORSE_CODE["R"], MORSE_CODE["K"]]
    )


def test_text_to_morse_scenario():
    assert text_to_morse("CQ AR DE K") == (
        "- . - .   - - . -" + WORD_SEPARATOR + ". - . - ." + WORD_SEPARATOR + "- . .   ." + WORD_SEPARATOR + "- . -"
    )
    assert text_to_morse("") == ""


def test_unsupported_character_reports_char_and_word():
    with pytest.raises(UnsupportedCharacterError) as excinfo:
        word_to_morse("ab~c")
    assert excinfo.value.char == "~"
    assert excinfo.value.word == "AB~C"
    assert str(excinfo.value) == "Unsupported character: ~"
    assert isinstance(excinfo.value, ValueError)


def test_non_ascii_letters_are_rejected():
    with pytest.raises(UnsupportedCharacterError) as excinfo:
        char_to_morse("ß")
    assert excinfo.value.char == "ß"


def test_is_supported():
    assert is_supported("hello @ world")
    assert not is_supported("HELLO ~ WORLD")
    assert is_supported("")
