import pytest

from tictactoe.game_logic import (
    CELL_COUNT, EMPTY_BOARD, WIN_LINES, Draw, GameState, Mark, Ongoing, Won,
    apply_move, evaluate_status, index_of, initial_state, is_legal_move, reset,
)

X, O, _ = Mark.X, Mark.O, Mark.EMPTY


def play(*moves, state=None):
    state = state or initial_state()
    for index in moves:
        state = apply_move(state, index)
    return state


def reachable_states():
    # every state legal play can reach from the empty board
    seen = {}
    stack = [initial_state()]
    while stack:
        state = stack.pop()
        if state.board in seen:
            continue
        seen[state.board] = state
        for index in range(CELL_COUNT):
            nxt = apply_move(state, index)
            if nxt is not state:
                stack.append(nxt)
    return list(seen.values())


def test_initial_state():
    state = initial_state()
    assert state.board == EMPTY_BOARD
    assert state.active_player is X
    assert state.status == Ongoing()
    assert state.winner is None and state.winning_line is None
    assert not state.is_over
    assert state.move_count == 0


def test_first_move():
    state = apply_move(initial_state(), 0)
    assert state.board[0] is X
    assert state.active_player is O
    assert state.status == Ongoing()


def test_column_win():
    state = play(0, 1, 3, 2, 6)
    assert state.status == Won(X, (0, 3, 6))
    assert state.winner is X
    assert state.winning_line == (0, 3, 6)
    assert state.is_over


def test_full_board_without_line_is_draw():
    state = play(0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert state.board == (X, O, X, X, O, O, O, X, X)
    assert state.status == Draw()
    assert state.winner is None
    assert state.is_over


def test_last_cell_can_still_win():
    # ninth move completes column 2-5-8 and the 0-4-8 diagonal at once;
    # columns are checked before diagonals, so the column is reported
    state = play(0, 1, 2, 3, 4, 6, 5, 7, 8)
    assert state.move_count == 9
    assert state.status == Won(X, (2, 5, 8))
    assert state.winning_line == (2, 5, 8)


def test_move_on_filled_cell_is_ignored():
    state = play(0, 1, 3, 2, 6)
    assert apply_move(state, 1) is state
    ongoing = play(4)
    assert apply_move(ongoing, 4) is ongoing


def test_move_after_game_over_is_ignored():
    won = play(0, 1, 3, 2, 6)
    assert apply_move(won, 8) is won
    drawn = play(0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert apply_move(drawn, 0) is drawn


@pytest.mark.parametrize("index", [-1, 9, 100, 2.0, "3", None, True])
def test_bad_index_is_ignored(index):
    state = play(4)
    assert not is_legal_move(state, index)
    assert apply_move(state, index) is state


def test_accepted_move_adds_one_mark_and_flips_player():
    state = initial_state()
    for index in (4, 0, 8, 2):
        nxt = apply_move(state, index)
        assert nxt is not state
        assert nxt.move_count == state.move_count + 1
        changed = [i for i in range(CELL_COUNT) if nxt.board[i] != state.board[i]]
        assert changed == [index]
        assert nxt.board[index] is state.active_player
        assert nxt.active_player is state.active_player.other
        state = nxt


def test_apply_move_does_not_touch_input():
    before = play(0, 4)
    board = before.board
    apply_move(before, 8)
    assert before.board == board
    assert before.active_player is X


def test_reset_after_win():
    state = play(0, 1, 3, 2, 6)
    fresh = reset()
    assert fresh.board == EMPTY_BOARD
    assert fresh.active_player is X
    assert fresh.status == Ongoing()
    assert fresh is not reset()
    # old game is left alone
    assert state.winner is X


def test_evaluate_status_is_pure():
    board = (X, X, X, O, O, _, _, _, _)
    first = evaluate_status(board)
    assert first == evaluate_status(board) == Won(X, (0, 1, 2))


@pytest.mark.parametrize("line", WIN_LINES)
def test_every_line_wins(line):
    board = [_] * CELL_COUNT
    for i in line:
        board[i] = O
    assert evaluate_status(tuple(board)) == Won(O, line)


def test_first_line_in_order_wins_on_constructed_board():
    # not reachable in play: row 0 and column 0 both complete
    board = (X, X, X, X, O, O, X, O, O)
    assert evaluate_status(board) == Won(X, (0, 1, 2))


def test_empty_cells_never_win():
    assert evaluate_status(EMPTY_BOARD) == Ongoing()


def test_reachable_states_are_consistent():
    states = reachable_states()
    assert len(states) == 5478
    for state in states:
        status = state.status
        assert sum(isinstance(status, kind) for kind in (Ongoing, Won, Draw)) == 1
        xs = state.board.count(X); os_ = state.board.count(O)
        assert xs - os_ in (0, 1)
        if not state.is_over:
            assert state.active_player is (X if xs == os_ else O)
        if isinstance(status, Draw):
            assert _ not in state.board
        if isinstance(status, Won):
            assert all(state.board[i] is status.player for i in status.line)


def test_index_of_and_cell():
    state = play(index_of(1, 2))
    assert index_of(1, 2) == 5
    assert state.cell(1, 2) is X
    with pytest.raises(ValueError):
        index_of(3, 0)


def test_state_validation():
    with pytest.raises(ValueError):
        GameState((X, O))
    with pytest.raises(ValueError):
        GameState(EMPTY_BOARD, Mark.EMPTY)
    assert GameState(list(EMPTY_BOARD)).board == EMPTY_BOARD


def test_mark_other():
    assert X.other is O and O.other is X
    assert Mark.EMPTY.other is Mark.EMPTY
