"""Breadth-first generation of the walking-distance lookup table."""

from __future__ import annotations

import json
from collections import deque
from collections.abc import Mapping, Sequence
from pathlib import Path

SIZE = 4
DEFAULT_FILENAME = "matrix_states.json"
INITIAL_MATRIX: tuple[tuple[int, ...], ...] = (
    (4, 0, 0, 0),
    (0, 4, 0, 0),
    (0, 0, 4, 0),
    (0, 0, 0, 3),
)


def matrix_to_key(matrix: Sequence[Sequence[int]]) -> str:
    """Flatten a matrix into a comma separated key."""
    return ",".join(str(number) for row in matrix for number in row)


def key_to_matrix(key: str) -> list[list[int]]:
    """Turn a key back into a 4x4 matrix."""
    parts = key.split(",")
    if len(parts) < SIZE * SIZE:
        raise ValueError(f"key '{key}' does not hold {SIZE * SIZE} numbers")
    numbers = [int(part) for part in parts[: SIZE * SIZE]]
    return [numbers[row * SIZE:(row + 1) * SIZE] for row in range(SIZE)]


def row_sum(matrix: Sequence[Sequence[int]], row: int) -> int:
    """Sum of the values in one row."""
    return sum(matrix[row])


def generate_neighbors(key: str) -> list[str]:
    """Keys of the states reached by moving one unit into a row that sums to 3."""
    matrix = key_to_matrix(key)
    target_rows = [row for row in range(SIZE) if row_sum(matrix, row) == 3]
    neighbors: list[str] = []
    for target in target_rows:
        sources = [row for row in (target - 1, target + 1) if 0 <= row < SIZE]
        for source in sources:
            for col, count in enumerate(matrix[source]):
                if count <= 0:
                    continue
                moved = [list(row) for row in matrix]
                moved[source][col] -= 1
                moved[target][col] += 1
                neighbors.append(matrix_to_key(moved))
    return neighbors


def bfs(start_key: str) -> dict[str, int]:
    """Shortest distance from the start to every reachable state."""
    distances = {start_key: 0}
    queue = deque([start_key])
    while queue:
        current = queue.popleft()
        next_distance = distances[current] + 1
        for neighbor in generate_neighbors(current):
            if neighbor not in distances:
                distances[neighbor] = next_distance
                queue.append(neighbor)
    return distances


def save_results(distances: Mapping[str, int], filename: str | Path) -> None:
    """Write the distance table as indented JSON."""
    data = json.dumps(dict(distances), indent=2, sort_keys=True)
    Path(filename).write_text(data, encoding="utf-8")


def min_distance_last_row(distances: Mapping[str, int]) -> int | None:
    """Smallest distance among states whose last row sums to 3, or None."""
    candidates = [
        distance
        for key, distance in distances.items()
        if row_sum(key_to_matrix(key), SIZE - 1) == 3
    ]
    return min(candidates, default=None)


def generate_moving_distances(filename: str | Path = DEFAULT_FILENAME) -> bool:
    """Build the table file unless it exists; return whether it was written."""
    path = Path(filename)
    if path.exists():
        print("El archivo ya ha sido generado, no se generará nuevamente.")
        return False
    print("El archivo no existe, generándolo ahora...")

    distances = bfs(matrix_to_key(INITIAL_MATRIX))
    save_results(distances, path)

    print("Total generated states:", len(distances))
    minimum = min_distance_last_row(distances)
    if minimum is None:
        print("No solution found")
    else:
        print("Minimum distance to maintain sum 3 in last row:", minimum)
    return True