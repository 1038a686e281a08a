"""
Game Configuration Constants Module

Game rules and the bundled word database. Word length and guess limit can be
overridden through the environment (see app_config.Config); the values here
are the defaults every engine function falls back to.
"""

import json
import os
import re
from typing import Dict, Final, List, Optional, Pattern

from .app_config import Config

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = Config.WORD_LENGTH
"""Number of letters in every target word and guess."""

MAX_GUESSES: Final[int] = Config.MAX_GUESSES
"""Maximum number of guess attempts allowed per game."""

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

ALPHABET_PATTERN: Final[Pattern[str]] = re.compile(r'^[A-Z]$', re.IGNORECASE | re.ASCII)
"""A single accepted letter key, case-insensitive."""

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.json'
)


def load_word_list(path: Optional[str] = None, word_length: int = WORD_LENGTH) -> List[str]:
    """
    Load a word list from a JSON array file.

    Args:
        path: JSON file to read, defaults to the bundled words.json
        word_length: Required length of every word

    Returns:
        List[str]: Uppercase words

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed, empty, or contains invalid words
    """
    json_file_path = path or DEFAULT_WORD_LIST_PATH

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}")

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    uppercase_words = [str(word).upper() for word in word_list]
    validate_word_list_integrity(uppercase_words, word_length)
    return uppercase_words


def validate_word_list_integrity(words: List[str], word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of a word database.

    Checks length, alphabet, uppercase formatting and uniqueness.

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != word_length:
            raise ValueError(f"Word at index {index} '{word}' is not {word_length} characters long")

        if not all(ALPHABET_PATTERN.fullmatch(char) for char in word):
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: List[str]) -> Dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: total_words, avg_vowel_count, letter_frequency, most_common_letters
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
