"""
Word Repository

Supplies target words and validates guesses against the word database.
"""

import random
from typing import Dict, Iterable, List, Optional

from ..config.game_settings import (
    ALPHABET_PATTERN, WORD_LENGTH, get_word_statistics, load_word_list,
    validate_word_list_integrity,
)


class WordRepository:
    """
    Word database for one server.

    ``words`` are the possible answers; ``allowed_words`` optionally widens
    the set of accepted guesses beyond the answers.
    """

    def __init__(self,
                 words: Iterable[str],
                 allowed_words: Optional[Iterable[str]] = None,
                 rng: Optional[random.Random] = None,
                 word_length: int = WORD_LENGTH):
        self.word_length = word_length
        self.word_list: List[str] = [word.upper() for word in words]
        validate_word_list_integrity(self.word_list, word_length)

        self.valid_words = set(self.word_list)
        if allowed_words is not None:
            extra = [word.upper() for word in allowed_words]
            validate_word_list_integrity(extra, word_length)
            self.valid_words.update(extra)

        self.rng = rng or random.Random()

    @classmethod
    def from_json(cls, path: Optional[str] = None, **kwargs) -> 'WordRepository':
        """Build a repository from a JSON word array (bundled list by default)."""
        word_length = kwargs.get('word_length', WORD_LENGTH)
        return cls(load_word_list(path, word_length), **kwargs)

    def get_random_word(self) -> str:
        return self.rng.choice(self.word_list)

    def is_valid_word(self, word) -> bool:
        if not isinstance(word, str) or len(word) != self.word_length:
            return False
        if not all(ALPHABET_PATTERN.fullmatch(char) for char in word):
            return False
        return word.upper() in self.valid_words

    @staticmethod
    def count_letter(letter: str, word: str) -> int:
        """Number of times a letter occurs in a word, case-insensitive."""
        return word.upper().count(letter.upper())

    def letter_frequency(self) -> Dict[str, int]:
        return get_word_statistics(self.word_list)["letter_frequency"]

    def __len__(self) -> int:
        return len(self.word_list)
