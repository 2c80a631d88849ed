import pytest

from fifteensolve.heuristics import manhattan_distance
from fifteensolve.solver import (
    IDAStarSolver,
    Move,
    SolveResult,
    apply_move,
    find_blank,
    format_state,
    is_goal,
    solve_and_report,
)

GOAL = (
    (1, 2, 3, 4),
    (5, 6, 7, 8),
    (9, 10, 11, 12),
    (13, 14, 15, 0),
)


def _scramble(moves):
    state = GOAL
    for move in moves:
        state = apply_move(state, move)
    return state


def test_is_goal_accepts_goal():
    assert is_goal(GOAL) is True


def test_is_goal_rejects_blank_elsewhere():
    assert is_goal(_scramble([Move.LEFT])) is False


def test_find_blank():
    assert find_blank(GOAL) == (3, 3)
    assert find_blank(_scramble([Move.UP])) == (2, 3)


def test_find_blank_missing():
    assert find_blank([[1] * 4] * 4) is None


@pytest.mark.parametrize("move", [Move.DOWN, Move.RIGHT])
def test_apply_move_off_board(move):
    assert apply_move(GOAL, move) is None


def test_apply_move_swaps_blank():
    moved = apply_move(GOAL, Move.LEFT)
    assert moved[3] == (13, 14, 0, 15)
    assert moved[:3] == GOAL[:3]


@pytest.mark.parametrize("move", list(Move))
def test_opposite_is_involution(move):
    middle = _scramble([Move.UP, Move.LEFT])
    assert find_blank(middle) == (2, 2)
    moved = apply_move(middle, move)
    assert moved != middle
    assert apply_move(moved, move.opposite()) == middle
    assert move.opposite().opposite() is move
    assert move.opposite() is not move


def test_move_then_opposite_restores():
    state = apply_move(GOAL, Move.UP)
    assert apply_move(state, Move.UP.opposite()) == GOAL


def test_format_state_first_row():
    lines = format_state(GOAL).split("\n")
    assert lines[0] == " 1  2  3  4 "
    assert len(lines) == 4


def test_solve_goal_needs_no_moves():
    result = IDAStarSolver(manhattan_distance).solve(GOAL)
    assert result.solved
    assert result.moves == 0
    assert result.path == (GOAL,)


def test_solve_single_move():
    start = _scramble([Move.LEFT])
    result = IDAStarSolver(manhattan_distance).solve(start)
    assert result.moves == 1
    assert result.path[0] == start
    assert result.path[-1] == GOAL


def test_solve_path_is_connected_and_optimal_bound():
    sequence = [Move.UP, Move.LEFT, Move.LEFT, Move.DOWN, Move.LEFT, Move.UP]
    start = _scramble(sequence)
    result = IDAStarSolver(manhattan_distance).solve(start)
    assert result.solved
    assert result.moves <= len(sequence)
    assert is_goal(result.path[-1])
    for before, after in zip(result.path, result.path[1:]):
        assert after in {apply_move(before, m) for m in Move}
    assert result.generated_states >= result.moves


def test_solve_accepts_lists():
    start = [list(row) for row in _scramble([Move.UP])]
    result = IDAStarSolver(manhattan_distance).solve(start)
    assert result.path[-1] == GOAL


def test_unsolved_result_properties():
    result = SolveResult(None, 7)
    assert result.solved is False
    assert result.moves is None


def test_verbose_prints_bounds(capsys):
    IDAStarSolver(manhattan_distance, verbose=True).solve(_scramble([Move.UP]))
    assert "Nuevo límite:" in capsys.readouterr().out


def test_solve_and_report_output(capsys):
    result = solve_and_report(_scramble([Move.UP, Move.LEFT]), manhattan_distance)
    out = capsys.readouterr().out
    assert result.moves == 2
    assert "¡Solución encontrada!" in out
    assert "Número de movimientos: 2" in out
    assert "Paso 2:" in out