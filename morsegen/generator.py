from __future__ import annotations

from typing import Iterator, List, Tuple

from .morse import EOM, WORD_SEPARATOR, tokenize_text, word_to_morse


class MorseCodeGenerator:
    """
    Translates a stored message into Morse code, either in one piece
    (get_message) or one word per call (get_next) until EOM is returned.
    """

    def __init__(self) -> None:
        self._message = ""
        self._words: List[str] = []
        self._word_index = 0

    @property
    def message(self) -> str:
        return self._message

    @property
    def words(self) -> Tuple[str, ...]:
        return tuple(self._words)

    @property
    def word_index(self) -> int:
        return self._word_index

    @property
    def remaining(self) -> int:
        return max(len(self._words) - self._word_index, 0)

    @property
    def exhausted(self) -> bool:
        return self._word_index >= len(self._words)

    def set_message(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"message must be str, not {type(text).__name__}")
        self._message = text
        self._words = tokenize_text(text)
        self._word_index = 0

    def clear_message(self) -> None:
        self._message = ""
        self._words = []
        self._word_index = 0

    def get_message(self) -> str:
        # Retokenize so the cursor is neither read nor moved.
        return WORD_SEPARATOR.join(word_to_morse(word) for word in tokenize_text(self._message))

    def get_next(self) -> str:
        if self.exhausted:
            return EOM
        word = self._words[self._word_index]
        self._word_index += 1
        return word_to_morse(word)

    def iter_words(self) -> Iterator[str]:
        while True:
            part = self.get_next()
            if part == EOM:
                return
            yield part
