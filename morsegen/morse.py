from __future__ import annotations

import re
from types import MappingProxyType
from typing import List, Mapping, Optional

# ITU-R M.1677-1 characters. Marks are separated by a single space.
MORSE_CODE: Mapping[str, str] = MappingProxyType(
    {
        "A": ". -",
        "B": "- . . .",
        "C": "- . - .",
        "D": "- . .",
        "E": ".",
        "F": ". . - .",
        "G": "- - .",
        "H": ". . . .",
        "I": ". .",
        "J": ". - - -",
        "K": "- . -",
        "L": ". - . .",
        "M": "- -",
        "N": "- .",
        "O": "- - -",
        "P": ". - - .",
        "Q": "- - . -",
        "R": ". - .",
        "S": ". . .",
        "T": "-",
        "U": ". . -",
        "V": ". . . -",
        "W": ". - -",
        "X": "- . . -",
        "Y": "- . - -",
        "Z": "- - . .",
        "0": "- - - - -",
        "1": ". - - - -",
        "2": ". . - - -",
        "3": ". . . - -",
        "4": ". . . . -",
        "5": ". . . . .",
        "6": "- . . . .",
        "7": "- - . . .",
        "8": "- - - . .",
        "9": "- - - - .",
        ".": ". - . - . -",
        ",": "- - . . - -",
        ":": "- - - . . .",
        "?": ". . - - . .",
        "/": "- . . - .",
        "-": "- . . . . -",
        # Both parentheses share one pattern.
        "(": "- . - - . -",
        ")": "- . - - . -",
        "=": "- . . . -",
        "+": ". - . - .",
        "&": ". - . . .",
        "'": ". - - - - .",
        "!": "- . - . - -",
        "_": ". . - - . -",
        '"': ". - . . - .",
        "$": ". . . - . . -",
        "@": ". - - . - .",
    }
)

# Prosigns are whole words sent as one pattern, never letter by letter.
PROSIGNS: Mapping[str, str] = MappingProxyType(
    {
        "AR": ". - . - .",
        "SK": ". . . - . -",
        "BT": "- . . . -",
    }
)

MARK_SEPARATOR = " "
LETTER_SEPARATOR = " " * 3
WORD_SEPARATOR = " " * 7
EOM = "<EOM>"

# C-locale whitespace only; other separators are rejected as characters.
WHITESPACE_RE = re.compile(r"[ \t\n\v\f\r]+")


class UnsupportedCharacterError(ValueError):
    """Raised when a character has no Morse pattern."""

    def __init__(self, char: str, word: Optional[str] = None):
        self.char = char
        self.word = word
        super().__init__(f"Unsupported character: {char}")


def _upper_ascii(text: str) -> str:
    return "".join(ch.upper() if ch.isascii() else ch for ch in text)


def tokenize_text(text: str) -> List[str]:
    return [_upper_ascii(word) for word in WHITESPACE_RE.split(text) if word]


def char_to_morse(ch: str) -> str:
    ch = _upper_ascii(ch)
    try:
        return MORSE_CODE[ch]
    except KeyError:
        raise UnsupportedCharacterError(ch) from None


def word_to_morse(word: str) -> str:
    """
    Translate one token. Prosigns are matched first and returned verbatim;
    any other word is spelled out with a 3-space gap between letters.
    """
    word = _upper_ascii(word)
    if word in PROSIGNS:
        return PROSIGNS[word]
    letters: List[str] = []
    for ch in word:
        try:
            letters.append(char_to_morse(ch))
        except UnsupportedCharacterError as exc:
            exc.word = word
            raise
    return LETTER_SEPARATOR.join(letters)


def text_to_morse(text: str) -> str:
    return WORD_SEPARATOR.join(word_to_morse(word) for word in tokenize_text(text))


def is_supported(text: str) -> bool:
    try:
        text_to_morse(text)
    except UnsupportedCharacterError:
        return False
    return True
