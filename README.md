# trenchsolver

This package solves the "men in a trench" puzzle. The trench is two rows deep,
and its bottom row holds a line of numbered soldiers. Some cells of the top row
are recesses and the rest are solid barriers. A soldier can step into an empty
recess or an empty trench cell. The goal is to reorder the soldiers so that
soldier 1 stands at the front of the trench, then 2, 3 and so on, with any
remaining cells empty.

The search treats each blank cell as the piece that moves. One move slides a
blank along a path of empty cells until it reaches a soldier, then swaps the
two. The path may turn at most three times. Every move costs 1.

## Installation

```
pip install .
```

## Running the solver

```
trenchsolver
```

The command asks three questions.

1. **Puzzle type.** Pick `1` for a built-in puzzle, then choose one with 2, 3,
   5, 7 or 9 soldiers. Pick `2` to enter your own puzzle.
2. **Custom puzzle.** Enter the trench length, then the number of soldiers.
   * A length of zero or less becomes 10.
   * A soldier count that is not between 1 and length − 1 becomes length − 1.
   * In the first row, `0` marks a recess and any other number marks a barrier.
   * In the second row, `0` marks an empty cell. Enter each soldier number
     once.
3. **Search algorithm.**
   1. Uniform Cost Search
   2. A\* with the misplaced tile heuristic
   3. A\* with the Manhattan distance of soldier 1
   4. A\* with the Manhattan distance of all soldiers
   5. A\* with the Euclidean distance. Any other number also uses this one.

As the search runs, the command prints each state it expands. When it finds a
solution, it prints every step from the original puzzle to the goal, followed
by three figures:

* the number of nodes expanded
* the largest size the queue reached
* the depth of the goal

The search stops when the cheapest state in the queue has an estimated total
cost above 28. In that case it reports `Puzzle can not be solved`.

Each run appends two records to files in the current directory:

* `info.txt` gets the figures.
* `Timesheet.txt` gets the elapsed time.

## Using the library

```python
from trenchsolver.graph import Graph
from trenchsolver.menu import default_puzzle, goal_state
from trenchsolver.node import Heuristic
from trenchsolver.solver import Solver
from trenchsolver.visited import VisitedStates

puzzle = default_puzzle(1)            # two soldiers
graph = Graph(puzzle.size, puzzle.soldiers, puzzle.blanks)
graph.set_initial_state(puzzle.cells)
graph.set_goal_state(goal_state(puzzle.cells, puzzle.size, puzzle.soldiers))

result = Solver(output_dir="results").solve(graph, VisitedStates(), Heuristic.MISPLACED)
print(result.solved, result.expanded, result.max_queue_size, result.goal_depth)
```

The main pieces are these:

* **`Solver(output_dir=".", out=None)`** writes its progress to `out`, which
  defaults to standard output. It appends `info.txt` and `Timesheet.txt` in
  `output_dir`.
* **`Solver.solve`** returns a `SearchResult`. Its fields are `solved`,
  `expanded`, `max_queue_size`, `goal_depth`, `elapsed_ms`, `algorithm` and
  `goal`.
* **`Solver.dig(blank, node, graph, direction)`** lists the successors that one
  blank reaches when it starts out in one `Direction`.
* **`Solver.format_solution(goal)`** returns the solution steps as text.
* **`Heuristic`** has five members: `UNIFORM`, `MISPLACED`, `LEADER_MANHATTAN`,
  `MANHATTAN` and `EUCLIDEAN`.
* **`Node`** carries a `Tunnel`, a link to its parent `prev`, and the costs
  `g_cost`, `h_cost` and `total_cost`.
  * `Node.path()` returns the chain of nodes from the root to that node.
  * `Node.is_goal()` tests whether every soldier is in place.
* **`Tunnel`** stores the trench as a flat list `cells` of two rows, each
  `size` cells long:
  * `-1` is a barrier.
  * `0` is a blank.
  * `1..n` are the soldiers.
  * `Tunnel.swap_soldier(blank, direction)` slides a blank in a straight line
    to the next soldier and swaps the two.
  * `Tunnel.render()` returns the text picture that the command prints, with
    `X` for barriers.
* **`VisitedStates`** maps each state to the cheapest node seen for it.

## Tests

```
pip install .[test]
pytest
```