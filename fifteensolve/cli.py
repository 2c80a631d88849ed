"""Command line entry: read a 15-puzzle, check it, and solve it."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from fifteensolve.heuristics import WalkingDistanceTable, heuristic_calculus
from fifteensolve.solver import SIZE, State, solve_and_report
from fifteensolve.walking_distance import DEFAULT_FILENAME, generate_moving_distances

_INTEGER = re.compile(r"[+-]?[0-9]+")


def count_inversions(puzzle: Sequence[int]) -> int:
    """Pairs out of order, ignoring the blank."""
    tiles = [tile for tile in puzzle if tile != 0]
    return sum(
        1
        for index, tile in enumerate(tiles)
        for later in tiles[index + 1:]
        if tile > later
    )


def blank_row_from_bottom(puzzle: Sequence[int], n: int) -> int:
    """Row of the blank counted from the bottom, starting at 1."""
    try:
        index = list(puzzle).index(0)
    except ValueError:
        return n
    return n - index // n


def is_solvable(state: Sequence[Sequence[int]]) -> bool:
    """Whether the state can reach the goal, by inversion parity."""
    puzzle = [tile for row in state for tile in row]
    inversions = count_inversions(puzzle)
    if SIZE % 2:
        return inversions % 2 == 0
    blank_row = blank_row_from_bottom(puzzle, SIZE)
    if blank_row % 2 == 0:
        return inversions % 2 != 0
    return inversions % 2 == 0


def parse_state(text: str) -> State:
    """Parse 16 whitespace separated integers into a 4x4 state."""
    fields = text.split()
    if len(fields) != SIZE * SIZE:
        raise ValueError("Debe ingresar 16 números")
    numbers = []
    for field in fields:
        if not _INTEGER.fullmatch(field):
            raise ValueError(f"Error al convertir: {field}")
        numbers.append(int(field))
    return tuple(tuple(numbers[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a puzzle from standard input and solve it."""
    args = list(sys.argv[1:] if argv is None else argv)
    extra = bool(args) and args[0] == "-extra_heuristic"

    print("Ingrese 16 números separados por espacio:")
    line = sys.stdin.readline()
    try:
        initial = parse_state(line)
    except ValueError as error:
        print(error)
        return 1
    if sorted(tile for row in initial for tile in row) != list(range(SIZE * SIZE)):
        print("El estado debe contener los números del 0 al 15")
        return 1

    generate_moving_distances(DEFAULT_FILENAME)
    table = WalkingDistanceTable.from_file(DEFAULT_FILENAME)

    heuristic_calculus(initial, table, True, extra)

    print("\nCurrent puzzle state:")
    for row in initial:
        print("".join(f"{tile}\t" for tile in row))

    if not is_solvable(initial):
        print("The puzzle is not solvable.")
        return 0
    print("The puzzle is solvable.")

    solve_and_report(initial, lambda state: heuristic_calculus(state, table, False, extra))
    return 0


if __name__ == "__main__":
    sys.exit(main())