"""
Word Source

Supplies target words and judges which guesses are acceptable.
"""

import random
from typing import List, Optional

import requests

from ..config.app_config import Config
from ..config.game_settings import COLUMNS, FALLBACK_WORDS
from ..utils.game_logger import game_logger


class WordSource:
    """
    Target word supplier backed by a remote random-word API.

    The remote API is asked once per call to select_target_word; any failure
    falls back to the local word list. Guesses are only ever checked against
    the local list, so a remote target may be a word the player cannot type
    in. That asymmetry is intentional and kept as-is.
    """

    def __init__(self,
                 word_length: int = COLUMNS,
                 fallback_words: Optional[List[str]] = None,
                 api_url: Optional[str] = Config.RANDOM_WORD_API_URL,
                 timeout: Optional[float] = Config.RANDOM_WORD_TIMEOUT,
                 rng: Optional[random.Random] = None):
        self.word_length = word_length
        self.fallback_words = list(fallback_words if fallback_words is not None else FALLBACK_WORDS)
        self.api_url = api_url
        self.timeout = timeout
        self.rng = rng or random.Random()
        self._acceptable = {word.lower() for word in self.fallback_words}

        if not self.fallback_words:
            raise ValueError("Fallback word list cannot be empty")
        bad = [word for word in self.fallback_words if len(word) != word_length]
        if bad:
            raise ValueError(f"Fallback words {bad} are not {word_length} characters long")

        # Origin of the most recent target word: "remote" or "fallback"
        self.last_origin: Optional[str] = None

    def select_target_word(self) -> str:
        """
        Pick the target word for a new session.

        Returns:
            str: Lowercase word of the configured length. Never raises.
        """
        word = self._fetch_remote_word()
        if word is not None:
            self.last_origin = "remote"
            return word

        self.last_origin = "fallback"
        return self.rng.choice(self.fallback_words).lower()

    def is_acceptable_guess(self, word: str) -> bool:
        """Case-insensitive membership in the local word list."""
        if not isinstance(word, str):
            return False
        return word.lower() in self._acceptable

    def _fetch_remote_word(self) -> Optional[str]:
        """One GET against the random-word API; None on any failure."""
        if not self.api_url:
            return None

        try:
            response = requests.get(
                self.api_url,
                params={'length': self.word_length},
                timeout=self.timeout
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            game_logger.logger.warning(f"Random word API failed; using fallback list: {e}")
            return None

        if not isinstance(data, list) or not data:
            game_logger.logger.warning(f"Random word API returned unexpected payload; using fallback list: {data!r}")
            return None

        candidate = data[0]
        if (not isinstance(candidate, str)
                or len(candidate) != self.word_length
                or not (candidate.isascii() and candidate.isalpha())):
            game_logger.logger.warning(f"Random word API returned unusable word; using fallback list: {candidate!r}")
            return None

        return candidate.lower()
