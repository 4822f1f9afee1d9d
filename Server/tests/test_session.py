"""
Tests for session transitions over SessionState.
"""

import copy

import pytest

from wordle.models.game import GameConfig, GuessOutcome, LetterStatus, SessionPhase, SessionState
from wordle.services import session


def type_word(state, word):
    for letter in word:
        assert session.add_letter(state, letter)


def snapshot(state):
    return copy.deepcopy((state.current_row, state.current_col, state.grid, state.results,
                          state.won, state.lost))


@pytest.fixture
def state():
    return SessionState(target_word="crane")


def test_new_session_builds_empty_grid(offline_word_source):
    state = session.new_session(offline_word_source)

    assert len(state.target_word) == 5
    assert state.grid == [[''] * 5 for _ in range(6)]
    assert state.current_row == 0
    assert state.current_col == 0
    assert state.phase == SessionPhase.ENTERING


def test_new_session_rejects_mismatched_columns(offline_word_source):
    with pytest.raises(ValueError):
        session.new_session(offline_word_source, GameConfig(rows=6, columns=4))


def test_add_letter_lowercases_and_advances(state):
    assert session.add_letter(state, "G")
    assert state.grid[0][0] == "g"
    assert state.current_col == 1


@pytest.mark.parametrize("key", ["1", "ab", "", " ", "é"])
def test_add_letter_rejects_non_letters(state, key):
    assert not session.add_letter(state, key)
    assert state.current_col == 0


def test_add_letter_stops_at_full_row(state):
    type_word(state, "grape")
    assert state.phase == SessionPhase.ROW_COMPLETE
    assert not session.add_letter(state, "x")
    assert state.current_col == 5


def test_remove_letter(state):
    assert not session.remove_letter(state)

    type_word(state, "gr")
    assert session.remove_letter(state)
    assert state.current_col == 1
    assert state.grid[0] == ["g", "", "", "", ""]


def test_submit_incomplete_row_changes_nothing(state):
    type_word(state, "gra")
    before = snapshot(state)

    result = session.submit_guess(state, FakeSource())

    assert result.outcome == GuessOutcome.INCOMPLETE_ROW
    assert result.missing_columns == [3, 4]
    assert not result.accepted
    assert snapshot(state) == before


def test_submit_unacceptable_word_changes_nothing(state):
    type_word(state, "abcde")
    before = snapshot(state)

    result = session.submit_guess(state, FakeSource())

    assert result.outcome == GuessOutcome.INVALID_WORD
    assert result.guess == "abcde"
    assert result.phase is None
    assert snapshot(state) == before


def test_submit_valid_guess_advances_row(state):
    type_word(state, "grape")

    result = session.submit_guess(state, FakeSource())

    assert result.outcome == GuessOutcome.CONTINUE
    assert result.phase == SessionPhase.REVEALED
    assert result.statuses == [LetterStatus.WRONG, LetterStatus.CORRECT, LetterStatus.CORRECT,
                               LetterStatus.WRONG, LetterStatus.CORRECT]
    assert result.answer is None
    assert state.current_row == 1
    assert state.current_col == 0
    assert state.results == [["wrong", "correct", "correct", "wrong", "correct"]]
    assert state.phase == SessionPhase.ENTERING


def test_correct_guess_wins(state):
    type_word(state, "crane")

    result = session.submit_guess(state, FakeSource())

    assert result.outcome == GuessOutcome.WON
    assert result.answer == "crane"
    assert state.won
    assert state.phase == SessionPhase.WON


def test_correct_guess_on_last_attempt_wins(state):
    for _ in range(5):
        type_word(state, "apple")
        assert session.submit_guess(state, FakeSource()).outcome == GuessOutcome.CONTINUE

    type_word(state, "crane")
    result = session.submit_guess(state, FakeSource())

    assert result.outcome == GuessOutcome.WON
    assert state.won
    assert not state.lost
    assert state.current_row == 5


def test_running_out_of_attempts_loses(state):
    for _ in range(5):
        type_word(state, "apple")
        session.submit_guess(state, FakeSource())

    type_word(state, "blaze")
    result = session.submit_guess(state, FakeSource())

    assert result.outcome == GuessOutcome.LOST
    assert result.answer == "crane"
    assert state.lost
    assert state.phase == SessionPhase.LOST
    assert state.current_row == 5
    assert len(state.results) == 6


def test_no_input_after_game_ends(state):
    type_word(state, "crane")
    session.submit_guess(state, FakeSource())
    before = snapshot(state)

    assert not session.add_letter(state, "a")
    assert not session.remove_letter(state)
    assert session.submit_guess(state, FakeSource()).outcome == GuessOutcome.GAME_OVER
    assert snapshot(state) == before


def test_smaller_board():
    state = SessionState(target_word="crane", config=GameConfig(rows=1, columns=5))
    type_word(state, "grape")

    assert session.submit_guess(state, FakeSource()).outcome == GuessOutcome.LOST


def test_handle_key_dispatch(state):
    source = FakeSource()

    assert session.handle_key(state, "C", source) == ("add_letter", True, None)
    assert session.handle_key(state, "Shift", source) == ("ignored", False, None)
    assert session.handle_key(state, "Backspace", source) == ("remove_letter", True, None)

    action, accepted, result = session.handle_key(state, "Enter", source)
    assert action == "submit"
    assert not accepted
    assert result.outcome == GuessOutcome.INCOMPLETE_ROW

    for letter in "crane":
        session.handle_key(state, letter, source)
    action, accepted, result = session.handle_key(state, "Enter", source)
    assert accepted
    assert result.outcome == GuessOutcome.WON


def test_public_dict_hides_answer_until_over(state):
    assert state.to_public_dict()['answer'] is None

    type_word(state, "crane")
    session.submit_guess(state, FakeSource())

    public = state.to_public_dict()
    assert public['answer'] == "crane"
    assert public['phase'] == "won"


class FakeSource:
    """Accepts the words the tests submit."""

    words = {"apple", "grape", "crane", "blaze"}

    def is_acceptable_guess(self, word):
        return word.lower() in self.words
