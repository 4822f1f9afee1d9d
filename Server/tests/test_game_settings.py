"""
Tests for wordle.config.game_settings.
"""

import pytest

from wordle.config import COLUMNS, FALLBACK_WORDS, validate_word_list_integrity


def test_fallback_words_loaded():
    assert len(FALLBACK_WORDS) == 10
    assert "crane" in FALLBACK_WORDS
    assert all(len(word) == COLUMNS for word in FALLBACK_WORDS)
    assert validate_word_list_integrity(FALLBACK_WORDS)


@pytest.mark.parametrize("words", [
    [],
    ["cranes"],
    ["cr4ne"],
    ["CRANE"],
    ["crane", "crane"],
])
def test_invalid_word_lists_rejected(words):
    with pytest.raises(ValueError):
        validate_word_list_integrity(words)
