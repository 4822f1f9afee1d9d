"""
Game Configuration Constants Module

Board dimensions and the local word list. The local list serves two roles:
it is the fallback pool when the remote word API cannot supply a target,
and it is the complete set of acceptable guesses.
"""

import json
import os
from typing import List, Final

# Board dimensions
ROWS: Final[int] = 6
"""
Number of guess attempts allowed per game.
"""

COLUMNS: Final[int] = 5
"""
Letters per word. Every target word and every guess has this length.
"""


def _load_fallback_words() -> List[str]:
    """
    Load the local word list from fallback_words.json.

    Returns:
        List[str]: List of lowercase words of length COLUMNS

    Raises:
        FileNotFoundError: If fallback_words.json file is not found
        ValueError: If word list is empty, malformed or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'fallback_words.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in fallback_words.json: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    words = [str(word).lower() for word in word_list]
    validate_word_list_integrity(words)
    return words


def validate_word_list_integrity(words: List[str], word_length: int = COLUMNS) -> bool:
    """
    Validates the integrity and consistency of a word list.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly word_length characters
    2. Character validation: Only alphabetic characters allowed
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
        if len(word) != word_length:
            raise ValueError(f"Word at index {index} '{word}' is not {word_length} characters long")

        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


# Local word list loaded from JSON file
FALLBACK_WORDS: Final[List[str]] = _load_fallback_words()
