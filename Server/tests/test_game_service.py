"""
Tests for wordle.services.game_service.
"""

import pytest

from wordle.models.game import GuessOutcome
from wordle.services.game_service import GameNotFoundError, GameService, get_game_service


def test_initialize_sets_global(game_service):
    assert get_game_service() is game_service


def test_create_game_hides_answer(game_service):
    game_id = game_service.create_new_game()
    state = game_service.get_game_state(game_id)

    assert state['answer'] is None
    assert state['rows'] == 6
    assert state['columns'] == 5
    assert game_service.get_session(game_id).target_word == "crane"


def test_games_are_independent(game_service):
    first = game_service.create_new_game()
    second = game_service.create_new_game()

    game_service.add_letter(first, "c")

    assert first != second
    assert game_service.get_game_state(first)['current_col'] == 1
    assert game_service.get_game_state(second)['current_col'] == 0


def test_play_to_win(game_service):
    game_id = game_service.create_new_game()
    for letter in "grape":
        assert game_service.add_letter(game_id, letter)
    assert game_service.submit_guess(game_id).outcome == GuessOutcome.CONTINUE

    for letter in "cranx":
        game_service.handle_key(game_id, letter)
    assert game_service.remove_letter(game_id)
    game_service.handle_key(game_id, "e")
    action, accepted, result = game_service.handle_key(game_id, "Enter")

    assert (action, accepted) == ("submit", True)
    assert result.outcome == GuessOutcome.WON
    assert game_service.get_game_state(game_id)['answer'] == "crane"


def test_unknown_game_raises(game_service):
    with pytest.raises(GameNotFoundError):
        game_service.get_game_state("missing")
    with pytest.raises(GameNotFoundError):
        game_service.handle_key("missing", "a")


def test_delete_game(game_service):
    game_id = game_service.create_new_game()

    assert game_service.delete_game(game_id)
    assert not game_service.delete_game(game_id)
    with pytest.raises(GameNotFoundError):
        game_service.get_session(game_id)


def test_default_word_source_falls_back_offline():
    # network is refused by the autouse fixture
    service = GameService()
    game_id = service.create_new_game()

    assert service.word_source.last_origin == "fallback"
    assert service.get_session(game_id).target_word in service.word_source.fallback_words


def test_active_game_count(game_service):
    assert game_service.active_game_count() == 0

    game_id = game_service.create_new_game()
    game_service.create_new_game()
    assert game_service.active_game_count() == 2

    game_service.delete_game(game_id)
    assert game_service.active_game_count() == 1
