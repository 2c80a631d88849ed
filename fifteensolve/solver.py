"""Iterative deepening A* search for the 15-puzzle."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

SIZE = 4

State = tuple[tuple[int, ...], ...]
Heuristic = Callable[[State], int]

_UNBOUNDED = 2**31 - 1


class Move(Enum):
    """Direction in which the blank square moves."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    def opposite(self) -> "Move":
        """The move that undoes this one."""
        return _OPPOSITES[self]


_OPPOSITES = {
    Move.UP: Move.DOWN,
    Move.DOWN: Move.UP,
    Move.LEFT: Move.RIGHT,
    Move.RIGHT: Move.LEFT,
}


def _as_state(matrix: Sequence[Sequence[int]]) -> State:
    return tuple(tuple(row) for row in matrix)


def is_goal(state: Sequence[Sequence[int]]) -> bool:
    """True for 1..15 in order with the blank in the bottom-right corner."""
    flat = [tile for row in state for tile in row]
    return flat == [*range(1, SIZE * SIZE), 0]


def find_blank(state: Sequence[Sequence[int]]) -> tuple[int, int] | None:
    """Row and column of the blank, or None if there is none."""
    for i, row in enumerate(state):
        for j, tile in enumerate(row):
            if tile == 0:
                return i, j
    return None


def apply_move(state: Sequence[Sequence[int]], move: Move) -> State | None:
    """State after moving the blank, or None if the move leaves the board."""
    blank = find_blank(state)
    if blank is None:
        return None
    i, j = blank
    di, dj = move.value
    ni, nj = i + di, j + dj
    if not (0 <= ni < SIZE and 0 <= nj < SIZE):
        return None
    grid = [list(row) for row in state]
    grid[i][j], grid[ni][nj] = grid[ni][nj], grid[i][j]
    return _as_state(grid)


def format_state(state: Sequence[Sequence[int]]) -> str:
    """Render a state as rows of right-aligned two-digit tiles."""
    return "\n".join("".join(f"{tile:2d} " for tile in row) for row in state)


@dataclass(frozen=True)
class SolveResult:
    """Outcome of a search: the path of states, if any, and work done."""

    path: tuple[State, ...] | None
    generated_states: int

    @property
    def solved(self) -> bool:
        return self.path is not None

    @property
    def moves(self) -> int | None:
        """Number of moves in the solution, or None if unsolved."""
        return None if self.path is None else len(self.path) - 1


class IDAStarSolver:
    """Solve the puzzle by IDA* with a supplied heuristic."""

    def __init__(self, heuristic: Heuristic, verbose: bool = False) -> None:
        self._heuristic = heuristic
        self._verbose = verbose
        self._generated = 0

    def solve(self, root: Sequence[Sequence[int]]) -> SolveResult:
        """Search from root until a goal is reached or no bound remains."""
        start = _as_state(root)
        self._generated = 0
        bound = self._heuristic(start)
        while True:
            new_bound, path = self._search(start, 0, bound, None, [start])
            if self._verbose:
                print(f"Nuevo límite: {new_bound} Estados generados: {self._generated}")
            if path is not None:
                return SolveResult(tuple(path), self._generated)
            if new_bound == _UNBOUNDED:
                return SolveResult(None, self._generated)
            bound = new_bound

    def _search(
        self,
        state: State,
        g: int,
        bound: int,
        previous: Move | None,
        path: list[State],
    ) -> tuple[int, list[State] | None]:
        f = g + self._heuristic(state)
        if f > bound:
            return f, None
        if is_goal(state):
            return bound, list(path)
        minimum = _UNBOUNDED
        for move in Move:
            if previous is not None and move is previous.opposite():
                continue
            successor = apply_move(state, move)
            if successor is None:
                continue
            self._generated += 1
            path.append(successor)
            t, found = self._search(successor, g + 1, bound, move, path)
            if found is not None:
                return t, found
            path.pop()
            minimum = min(minimum, t)
        return minimum, None


def solve_and_report(
    initial: Sequence[Sequence[int]], heuristic: Heuristic
) -> SolveResult:
    """Solve and print the sequence of states and statistics."""
    result = IDAStarSolver(heuristic, verbose=True).solve(initial)
    if result.path is None:
        print("No se encontró solución.")
        return result
    print("¡Solución encontrada!")
    print("Secuencia de estados:")
    for step, state in enumerate(result.path):
        print(f"Paso {step}:")
        print(format_state(state))
        print()
    print("Número de movimientos:", result.moves)
    print("Estados generados:", result.generated_states)
    return result