"""
Game Configuration Constants Module

This module defines all puzzle configuration constants. The word list, the
seed salt and the draw cap together decide which puzzle every player sees on
a given day, so none of them may change once a day has been played.

"""

import json
import os
from typing import List, Final

# Core Game Configuration Constants
MAX_ROUNDS: Final[int] = 8
"""
Maximum number of guesses allowed per daily puzzle.
Type: Final[int] - Immutable to prevent accidental modification
"""

RACK_SIZE_START: Final[int] = 12
"""Number of tiles in the starting rack, answer letters included."""

DRAW_PER_ROUND: Final[int] = 2
"""Tiles drawn into the rack after every guess."""

RACK_DRAW_CAP: Final[int] = 2000
"""Upper bound on seeded draws while filling the starting rack."""

WORD_LENGTH: Final[int] = 5

PUZZLE_TIMEZONE: Final[str] = "America/Los_Angeles"
"""Reference timezone for the daily date key."""

# Seed strings are "<salt>:<purpose>:<date>[:<index>...]". Changing the salt,
# the separators or the segment order changes every past and future puzzle.
SEED_SALT: Final[str] = "rackle:v1:core"

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


# Load word list from JSON file
def _load_word_list() -> List[str]:
    """
    Load word list from words.json.

    Returns:
        List[str]: List of lowercase 5-letter words, in file order

    Raises:
        FileNotFoundError: If words.json file is not found
        ValueError: If the JSON is malformed, the list is empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'words.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in words.json: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    lowercase_words = [str(word).strip().lower() for word in word_list]

    for word in lowercase_words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' is not {WORD_LENGTH} characters long")
        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")

    return lowercase_words


# Order matters: answers are picked by index into this list
WORD_LIST: Final[List[str]] = _load_word_list()

WORD_SET: Final[frozenset] = frozenset(WORD_LIST)


def validate_word_list_integrity(words: List[str] = WORD_LIST) -> bool:
    """
    Validates the integrity and consistency of the word database.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly 5 characters
    2. Character validation: Only ASCII alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent lowercase formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message

    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
