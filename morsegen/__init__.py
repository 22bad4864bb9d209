from .config import AppConfig, ConsoleConfig, load_config, save_config
from .generator import MorseCodeGenerator
from .morse import (
    EOM,
    LETTER_SEPARATOR,
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

__all__ = [
    "AppConfig",
    "ConsoleConfig",
    "load_config",
    "save_config",
    "MorseCodeGenerator",
    "EOM",
    "LETTER_SEPARATOR",
    "MORSE_CODE",
    "PROSIGNS",
    "WORD_SEPARATOR",
    "UnsupportedCharacterError",
    "char_to_morse",
    "is_supported",
    "text_to_morse",
    "tokenize_text",
    "word_to_morse",
]
