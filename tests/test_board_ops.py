import pytest

from minestake.components.cell import CellKind
from minestake.components.game_state import GameState, GameStatus
from minestake.errors import CellOutOfRangeError
from minestake.systems.board_ops import reveal_cell
from tests.helpers import board_from_rows


def _state(*rows: str) -> GameState:
    return GameState(board=board_from_rows(rows))


def test_reveal_reward_scores_and_stays_active():
    state = _state("X.", "..")

    result = reveal_cell(state, 0, 1)

    assert result.changed
    assert result.state.status is GameStatus.ACTIVE
    assert result.state.score == 1
    assert result.state.revealed_reward_count == 1
    assert result.state.board.cell_at(0, 1).revealed
    assert result.delta.position == (0, 1)
    assert result.delta.kind is CellKind.REWARD
    assert result.delta.score_gained == 1
    assert result.delta.terminal_status is None
    # Original state value is untouched.
    assert state.score == 0
    assert not state.board.cell_at(0, 1).revealed


def test_reveal_penalty_loses_without_scoring():
    state = _state("X.", "..")
    state = reveal_cell(state, 1, 1).state
    state = reveal_cell(state, 1, 0).state

    result = reveal_cell(state, 0, 0)

    assert result.state.status is GameStatus.LOST
    assert result.state.score == 2
    assert result.delta.score_gained == 0
    assert result.delta.terminal_status is GameStatus.LOST
    assert result.state.board.cell_at(0, 0).revealed


def test_revealing_last_reward_wins():
    state = _state("X.", "..")
    for row, col in [(0, 1), (1, 0)]:
        state = reveal_cell(state, row, col).state
        assert state.status is GameStatus.ACTIVE

    result = reveal_cell(state, 1, 1)

    assert result.state.status is GameStatus.WON
    assert result.state.score == 3
    assert result.delta.terminal_status is GameStatus.WON


def test_reveal_twice_is_noop():
    state = reveal_cell(_state("X.", ".."), 0, 1).state

    result = reveal_cell(state, 0, 1)

    assert not result.changed
    assert result.state is state
    assert result.state.score == 1


@pytest.mark.parametrize(
    "first_reveal,expected_status",
    [((0, 0), GameStatus.LOST), ((0, 1), GameStatus.WON)],
)
def test_reveal_after_terminal_is_noop(first_reveal, expected_status):
    state = reveal_cell(_state("X."), *first_reveal).state
    assert state.status is expected_status

    for row, col in [(0, 0), (0, 1)]:
        result = reveal_cell(state, row, col)
        assert not result.changed
        assert result.state is state


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (2, 0), (0, 2), (5, 5)])
def test_reveal_out_of_range_raises(row, col):
    state = _state("X.", "..")
    with pytest.raises(CellOutOfRangeError):
        reveal_cell(state, row, col)


def test_board_without_penalties_wins_on_last_cell():
    state = _state("..")
    state = reveal_cell(state, 0, 0).state
    assert state.status is GameStatus.ACTIVE
    state = reveal_cell(state, 0, 1).state
    assert state.status is GameStatus.WON
    assert state.score == state.total_reward == 2
