"""
Game Service

Keeps live game sessions in memory and routes player input to them.
"""

import threading
import uuid
from typing import Dict, Optional, Tuple

from ..models.game import GameConfig, SessionState, SubmissionResult
from . import session as session_ops
from .word_source import WordSource


class GameNotFoundError(LookupError):
    """Raised when a game id does not name a live session."""

    def __init__(self, game_id: str):
        super().__init__(f"Game not found: {game_id}")
        self.game_id = game_id


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Target word selection through the word source
    - Letter entry, removal and guess submission
    - Game state views that hide the answer until the game ends
    """

    def __init__(self, word_source: Optional[WordSource] = None, config: Optional[GameConfig] = None):
        self.word_source = word_source or WordSource()
        self.config = config or GameConfig(columns=self.word_source.word_length)
        self.games: Dict[str, SessionState] = {}  # Store active games by game_id
        # Handlers may run on worker threads
        self._lock = threading.Lock()

    def create_new_game(self) -> str:
        """
        Creates a new game session with a freshly selected target word.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        state = session_ops.new_session(self.word_source, self.config)

        with self._lock:
            self.games[game_id] = state
        return game_id

    def get_session(self, game_id: str) -> SessionState:
        """
        Returns the live session for a game id.

        Raises:
            GameNotFoundError: If no session has this id
        """
        with self._lock:
            state = self.games.get(game_id)
        if state is None:
            raise GameNotFoundError(game_id)
        return state

    def get_game_state(self, game_id: str) -> Dict:
        """Returns the client-facing state (answer hidden until game over)."""
        return self.get_session(game_id).to_public_dict()

    def add_letter(self, game_id: str, letter: str) -> bool:
        state = self.get_session(game_id)
        with self._lock:
            return session_ops.add_letter(state, letter)

    def remove_letter(self, game_id: str) -> bool:
        state = self.get_session(game_id)
        with self._lock:
            return session_ops.remove_letter(state)

    def submit_guess(self, game_id: str) -> SubmissionResult:
        """
        Submits the current row of a game.

        Args:
            game_id: Unique game identifier

        Returns:
            SubmissionResult describing the outcome
        """
        state = self.get_session(game_id)
        with self._lock:
            return session_ops.submit_guess(state, self.word_source)

    def handle_key(self, game_id: str, key: str) -> Tuple[str, bool, Optional[SubmissionResult]]:
        """Applies one raw key press to a game."""
        state = self.get_session(game_id)
        with self._lock:
            return session_ops.handle_key(state, key, self.word_source)

    def active_game_count(self) -> int:
        with self._lock:
            return len(self.games)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            return self.games.pop(game_id, None) is not None


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_source: Optional[WordSource] = None,
                            config: Optional[GameConfig] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_source, config)
    return _game_service
