"""
Game Configuration Constants Module

This module defines the board geometry and the bundled word lists.
All game parameters are centralized here so the core, the console
front end and the HTTP API agree on them.
"""

import json
import os
import string
from typing import Final, List

# Core Game Configuration Constants
BOARD_ROWS: Final[int] = 6
"""
Number of guess rows on the board, which is also the attempt limit.
Type: Final[int] - Immutable to prevent accidental modification
"""

BOARD_COLS: Final[int] = 5
"""
Letters per word.
"""

MAX_ATTEMPTS: Final[int] = BOARD_ROWS

ALPHABET: Final[str] = string.ascii_uppercase
ALPHABET_LENGTH: Final[int] = len(ALPHABET)

_CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))

DEFAULT_ANSWERS_PATH: Final[str] = os.path.join(_CONFIG_DIR, 'answers.json')
DEFAULT_EXTRAS_PATH: Final[str] = os.path.join(_CONFIG_DIR, 'extras.json')


def load_word_list(json_file_path: str, allow_empty: bool = False) -> List[str]:
    """
    Load a word list from a JSON array file.

    Args:
        json_file_path: Path to a JSON file holding an array of words
        allow_empty: Accept an empty array (used for the extras list)

    Returns:
        List[str]: List of uppercase words of BOARD_COLS letters

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed, the list is empty, or a word is invalid
    """
    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {os.path.basename(json_file_path)}: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list and not allow_empty:
        raise ValueError("Word list cannot be empty")

    uppercase_words = []
    for word in word_list:
        if not isinstance(word, str):
            raise ValueError(f"Word list entry {word!r} is not a string")
        uppercase_words.append(word.strip().upper())

    for word in uppercase_words:
        if len(word) != BOARD_COLS:
            raise ValueError(f"Word '{word}' is not {BOARD_COLS} characters long")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")

    return uppercase_words


def validate_word_list_integrity(word_list: List[str]) -> bool:
    """
    Validates the integrity and consistency of a word list.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly BOARD_COLS characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent uppercase formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not word_list:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(word_list):
        if len(word) != BOARD_COLS:
            raise ValueError(f"Word at index {index} '{word}' is not {BOARD_COLS} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(word_list) != len(set(word_list)):
        seen = set()
        duplicates = sorted({word for word in word_list if word in seen or seen.add(word)})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(word_list: List[str]) -> dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the list
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Five most frequent letters
    """
    if not word_list:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in word_list)

    letter_frequency = {}
    for word in word_list:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(word_list),
        "avg_vowel_count": round(total_vowels / len(word_list), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        answers = load_word_list(DEFAULT_ANSWERS_PATH)
        extras = load_word_list(DEFAULT_EXTRAS_PATH, allow_empty=True)
        validate_word_list_integrity(answers)
        if extras:
            validate_word_list_integrity(extras)
        print(" Word list validation passed")

        print(f" Answer statistics: {get_word_statistics(answers)}")

        print(" All configuration validation checks passed")
    except (OSError, ValueError) as config_error:
        print(f" Configuration validation failed: {config_error}")
        raise SystemExit(1)
