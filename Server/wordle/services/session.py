"""
Session Transitions

Letter entry and submission over an explicit SessionState. None of these
functions keep state of their own; the caller owns the session.
"""

from typing import Optional, Tuple

from ..models.game import GameConfig, GuessOutcome, SessionState, SubmissionResult
from .evaluator import evaluate_guess
from .word_source import WordSource

KEY_BACKSPACE = 'Backspace'
KEY_ENTER = 'Enter'


def new_session(word_source: WordSource, config: Optional[GameConfig] = None) -> SessionState:
    """
    Start a session with a freshly selected target word.

    Args:
        word_source: Supplier of the target word
        config: Board dimensions; columns must match the word source length

    Returns:
        SessionState with an empty grid
    """
    config = config or GameConfig(columns=word_source.word_length)
    if config.columns != word_source.word_length:
        raise ValueError(
            f"Board has {config.columns} columns but word source supplies "
            f"{word_source.word_length}-letter words"
        )
    return SessionState(target_word=word_source.select_target_word(), config=config)


def is_letter(key: str) -> bool:
    return isinstance(key, str) and len(key) == 1 and key.isascii() and key.isalpha()


def add_letter(state: SessionState, letter: str) -> bool:
    """Place a letter at the cursor. Returns False when nothing changed."""
    if state.game_over or not is_letter(letter):
        return False
    if state.current_col >= state.config.columns or state.current_row >= state.config.rows:
        return False

    state.grid[state.current_row][state.current_col] = letter.lower()
    state.current_col += 1
    return True


def remove_letter(state: SessionState) -> bool:
    """Clear the slot before the cursor. Returns False when nothing changed."""
    if state.game_over or state.current_col == 0:
        return False

    state.current_col -= 1
    state.grid[state.current_row][state.current_col] = ''
    return True


def submit_guess(state: SessionState, word_source: WordSource) -> SubmissionResult:
    """
    Submit the current row.

    Rejections (incomplete row, unacceptable word, finished game) leave the
    session untouched and are reported through the result outcome.
    """
    if state.game_over:
        return SubmissionResult(outcome=GuessOutcome.GAME_OVER, answer=state.target_word)

    row = state.grid[state.current_row]
    if state.current_col < state.config.columns:
        return SubmissionResult(
            outcome=GuessOutcome.INCOMPLETE_ROW,
            guess=''.join(row),
            missing_columns=[col for col, letter in enumerate(row) if not letter]
        )

    guess = state.current_guess()
    if not word_source.is_acceptable_guess(guess):
        return SubmissionResult(outcome=GuessOutcome.INVALID_WORD, guess=guess)

    statuses = evaluate_guess(guess, state.target_word)
    state.results.append([status.value for status in statuses])

    if guess == state.target_word:
        state.won = True
        return SubmissionResult(outcome=GuessOutcome.WON, guess=guess, statuses=statuses,
                                answer=state.target_word)

    if state.current_row + 1 == state.config.rows:
        state.lost = True
        return SubmissionResult(outcome=GuessOutcome.LOST, guess=guess, statuses=statuses,
                                answer=state.target_word)

    state.current_row += 1
    state.current_col = 0
    return SubmissionResult(outcome=GuessOutcome.CONTINUE, guess=guess, statuses=statuses)


def handle_key(state: SessionState, key: str,
               word_source: WordSource) -> Tuple[str, bool, Optional[SubmissionResult]]:
    """
    Dispatch a raw key name the way the keyboard handler does.

    Returns:
        Tuple of (action, accepted, submission result). action is one of
        "add_letter", "remove_letter", "submit" or "ignored".
    """
    if is_letter(key):
        return 'add_letter', add_letter(state, key), None
    if key == KEY_BACKSPACE:
        return 'remove_letter', remove_letter(state), None
    if key == KEY_ENTER:
        result = submit_guess(state, word_source)
        return 'submit', result.accepted, result
    return 'ignored', False, None
