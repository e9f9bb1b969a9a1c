import pytest

from play import GameState
from scoring import ScoreBoard, read_best_score
from storage import MemoryStore


def test_pass_through_counts_and_saves_first_best():
    store = MemoryStore()
    state = GameState()
    board = ScoreBoard(state, store)
    assert board.best_score_text.text == "Best Score: 0"

    board.on_pass_through()

    assert state.score == 1
    assert board.score_text.text == "Score: 1"
    assert store.get("bestScore") == "1"
    assert board.best_score_text.text == "Best Score: 1"


def test_lower_score_never_overwrites_best():
    store = MemoryStore({"bestScore": "50"})
    state = GameState()
    board = ScoreBoard(state, store)
    assert board.best_score == 50

    for _ in range(3):
        board.on_pass_through()
    board.save_best_score()

    assert store.get("bestScore") == "50"


@pytest.mark.parametrize("raw", ["", "abc", "12.5"])
def test_malformed_best_counts_as_none(raw):
    store = MemoryStore({"bestScore": raw})
    assert read_best_score(store) is None
    assert ScoreBoard(GameState(), store).best_score == 0


def test_best_is_max_over_playthroughs():
    store = MemoryStore({"bestScore": "4"})
    for final in (2, 7, 5, 9, 1):
        state = GameState()
        board = ScoreBoard(state, store)
        for _ in range(final):
            board.on_pass_through()
        board.save_best_score()   # death
    assert store.get("bestScore") == "9"


def test_death_with_no_score_initialises_best():
    store = MemoryStore()
    ScoreBoard(GameState(), store).save_best_score()
    assert store.get("bestScore") == "0"
