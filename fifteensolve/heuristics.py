"""Heuristics for the 15-puzzle: Manhattan, linear conflict, walking distance."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path

from fifteensolve.walking_distance import matrix_to_key

SIZE = 4

Matrix = Sequence[Sequence[int]]

_CORNER_TILES = {1: (0, 0), 4: (0, 3), 13: (3, 0), 15: (3, 3)}


def horizontal_distance_mapping() -> dict[int, int]:
    """Map each tile to the row it belongs in."""
    mapping: dict[int, int] = {}
    for group, tiles in enumerate(
        (range(1, 5), range(5, 9), range(9, 13), range(13, 16))
    ):
        mapping.update(dict.fromkeys(tiles, group))
    return mapping


def vertical_distance_mapping() -> dict[int, int]:
    """Map each tile to the column it belongs in."""
    mapping: dict[int, int] = {}
    for group, tiles in enumerate(
        ((1, 5, 9, 13), (2, 6, 10, 14), (3, 7, 11, 15), (4, 8, 12))
    ):
        mapping.update(dict.fromkeys(tiles, group))
    return mapping


_HORIZONTAL = horizontal_distance_mapping()
_VERTICAL = vertical_distance_mapping()


def transpose_matrix(matrix: Matrix) -> list[list[int]]:
    """Swap rows and columns."""
    return [list(column) for column in zip(*matrix)]


def manhattan_distance(state: Matrix) -> int:
    """Sum of each tile's distance from its goal square."""
    distance = 0
    for i, row in enumerate(state):
        for j, tile in enumerate(row):
            if tile:
                goal_row, goal_col = divmod(tile - 1, SIZE)
                distance += abs(i - goal_row) + abs(j - goal_col)
    return distance


def linear_conflict(state: Matrix) -> int:
    """Two for every reversed pair of tiles already in their goal row or column."""
    conflict = 0
    for i in range(SIZE):
        for j in range(SIZE):
            tile = state[i][j]
            if tile and (tile - 1) // SIZE == i:
                for k in range(j + 1, SIZE):
                    other = state[i][k]
                    if other and (other - 1) // SIZE == i and tile > other:
                        conflict += 2

            tile = state[j][i]
            if tile and (tile - 1) % SIZE == i:
                for k in range(j + 1, SIZE):
                    other = state[k][i]
                    if other and (other - 1) % SIZE == i and tile > other:
                        conflict += 2
    return conflict


def corner_conflict(state: Matrix) -> int:
    """Two for every corner tile out of place and blocked along its edge."""
    conflict = 0
    for tile, goal in _CORNER_TILES.items():
        for i in range(SIZE):
            for j in range(SIZE):
                if state[i][j] != tile or (i, j) == goal:
                    continue
                blocked = (
                    (i == 0 and state[i + 1][j] != 0)
                    or (j == 0 and state[i][j + 1] != 0)
                    or (i == 3 and state[i - 1][j] != 0)
                    or (j == 3 and state[i][j - 1] != 0)
                )
                if blocked:
                    conflict += 2
    return conflict


class WalkingDistanceTable:
    """Precomputed walking distances keyed by row-group count matrices."""

    def __init__(self, states: Mapping[str, int]) -> None:
        self._states = dict(states)

    @classmethod
    def from_file(cls, filename: str | Path) -> "WalkingDistanceTable":
        """Load a table written as a JSON object of key to distance."""
        with open(filename, encoding="utf-8") as handle:
            states = json.load(handle)
        if not isinstance(states, dict):
            raise ValueError(f"{filename}: expected a JSON object")
        return cls(states)

    def __len__(self) -> int:
        return len(self._states)

    def value(self, matrix: Matrix) -> int:
        """Distance stored for a count matrix; KeyError if absent."""
        key = matrix_to_key(matrix)
        try:
            return self._states[key]
        except KeyError:
            raise KeyError(f"key '{key}' not found") from None

    def distance(self, state: Matrix) -> int:
        """Walking distance of a puzzle state."""
        horizontal = [[0] * SIZE for _ in range(SIZE)]
        for i, row in enumerate(state):
            for tile in row:
                if tile:
                    horizontal[i][_HORIZONTAL[tile]] += 1

        vertical = [[0] * SIZE for _ in range(SIZE)]
        for i, column in enumerate(transpose_matrix(state)):
            for tile in column:
                if tile:
                    vertical[i][_VERTICAL[tile]] += 1

        return self.value(vertical) + self.value(horizontal)


def heuristic_calculus(
    state: Matrix,
    table: WalkingDistanceTable,
    verbose: bool = False,
    extra: bool = False,
) -> int:
    """Combined estimate: Manhattan/3 + linear conflict + walking distance."""
    manhattan = manhattan_distance(state)
    linear = linear_conflict(state)
    walking = table.distance(state)

    if extra:
        corner = corner_conflict(state)
        total = manhattan // 3 + linear + walking + corner // 2
        if verbose:
            print(
                "Heuristica usada: h = (manhattanDistanceValue / 3) + "
                "linearConflictValue + walkingDistanceValue + (cornerConflictValue / 2)"
            )
            print(
                f"Manhattan: {manhattan}, Linear Conflict: {linear}, "
                f"Walking Distance: {walking}, Corner Conflict: {corner}, "
                f"Total: {total}"
            )
        return total

    total = manhattan // 3 + linear + walking
    if verbose:
        print(
            "Heuristica usada: h = (manhattanDistanceValue / 3) + "
            "linearConflictValue + walkingDistanceValue"
        )
        print(
            f"Manhattan: {manhattan}, Linear Conflict: {linear}, "
            f"Walking Distance: {walking}, Total: {total}"
        )
    return total