# fifteensolve

A solver for the classic 15-puzzle on a 4x4 board. It runs an iterative
deepening A* (IDA*) search. The search is guided by a sum of heuristics:

- Manhattan distance, divided by three with integer division
- Linear conflict
- Walking distance, looked up in a precomputed table
- Optionally, a corner-conflict penalty, halved

## Installation

```
pip install .
```

## Command line

Start the solver. Type the sixteen tiles of the board in row order on one
line, with `0` for the blank:

```
fifteensolve
Ingrese 16 números separados por espacio:
1 2 3 4 5 6 7 8 9 10 11 12 13 14 0 15
```

You can also start it with `python -m fifteensolve.cli`.

The input is rejected, with exit status 1, in these cases:

- The line does not hold exactly sixteen integers.
- A field is not an integer.
- The numbers are not 0 to 15, each used once.

For a valid board, the program then does the following:

1. It writes the walking-distance table, `matrix_states.json`, to the current
   directory. If the file is already there, it is left as it is.
2. It prints each heuristic's value for the starting board.
3. It prints the board.
4. It checks whether the board can be solved, by inversion parity.

If the board is not solvable, the program says so and stops. If it is
solvable, the program prints the following:

- each new search bound
- every state of the solution
- the number of moves
- the number of states generated

Pass `-extra_heuristic` as the first argument to add the corner-conflict term:

```
fifteensolve -extra_heuristic
```

## Library use

```python
from fifteensolve.walking_distance import generate_moving_distances
from fifteensolve.heuristics import WalkingDistanceTable, heuristic_calculus
from fifteensolve.solver import IDAStarSolver
from fifteensolve.cli import is_solvable, parse_state

generate_moving_distances("matrix_states.json")
table = WalkingDistanceTable.from_file("matrix_states.json")

state = parse_state("1 2 3 4 5 6 7 8 9 10 11 12 13 14 0 15")
if is_solvable(state):
    solver = IDAStarSolver(lambda s: heuristic_calculus(s, table, False, False))
    result = solver.solve(state)
    print(result.solved, result.moves, result.generated_states)
```

### Modules

- `fifteensolve.walking_distance` builds the walking-distance table.
  - `bfs` runs a breadth-first search over row-group count matrices.
  - `generate_moving_distances` writes the table as JSON unless the file
    already exists. It returns whether the file was written.
  - The module also has helpers: `matrix_to_key`, `key_to_matrix`,
    `row_sum`, `generate_neighbors`, `save_results` and
    `min_distance_last_row`.
- `fifteensolve.heuristics` holds the heuristics.
  - `manhattan_distance`, `linear_conflict` and `corner_conflict` each score
    a board.
  - `WalkingDistanceTable` loads the table with `from_file`. Its `value`
    method looks up a count matrix and raises `KeyError` if the matrix is
    absent. Its `distance` method gives the walking distance of a board.
  - `heuristic_calculus` combines the terms. It prints them when `verbose` is
    true, and adds the corner term when `extra` is true.
- `fifteensolve.solver` holds the search.
  - `IDAStarSolver(heuristic, verbose=False).solve(root)` returns a
    `SolveResult`. It has these members:
    - `path`: the states from the start to the goal, or `None`
    - `generated_states`
    - `solved`
    - `moves`
  - The module also has helpers: `Move`, `is_goal`, `find_blank`,
    `apply_move`, `format_state` and `solve_and_report`.
- `fifteensolve.cli` holds the command.
  - `parse_state` reads a board from text and raises `ValueError` on bad
    input.
  - `is_solvable`, `count_inversions` and `blank_row_from_bottom` do the
    parity check.
  - `main` is the command itself.

## Limits

- The board size is fixed at 4x4.
- The command reads one board from standard input per run.
- The walking-distance table is always read from and written to
  `matrix_states.json` in the current directory.