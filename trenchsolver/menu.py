"""Interactive menu: choose or enter a trench puzzle and a search algorithm."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence, TextIO

from trenchsolver.graph import Graph
from trenchsolver.solver import SearchResult, Solver
from trenchsolver.tunnel import BARRIER, BLANK
from trenchsolver.visited import VisitedStates


@dataclass(frozen=True)
class Puzzle:
    """A puzzle layout: tunnel length, soldier and blank counts, and cells."""

    size: int
    soldiers: int
    blanks: int
    cells: tuple[int, ...]


# Keyed by the menu choice offered to the user.
_DEFAULT_PUZZLES = {
    # X   X
    #   2 1
    1: Puzzle(3, 2, 2, (-1, 0, -1, 0, 2, 1)),
    # X X   X X
    #   2 3 1
    2: Puzzle(5, 3, 3, (-1, -1, 0, -1, -1, 0, 2, 3, 1, 0)),
    # X X   X   X X
    #   2 3 4 5 1
    3: Puzzle(7, 5, 4, (-1, -1, 0, -1, 0, -1, -1, 0, 5, 4, 3, 2, 1, 0)),
    # X X X   X   X X X
    #   2 3 4 5 6 7 1
    4: Puzzle(
        9, 7, 4, (-1, -1, -1, 0, -1, 0, -1, -1, -1, 0, 2, 3, 4, 5, 6, 7, 1, 0)
    ),
    # X X X   X   X   X X
    #   2 3 4 5 6 7 8 9 1
    5: Puzzle(
        10,
        9,
        4,
        (-1, -1, -1, 0, -1, 0, -1, 0, -1, -1, 0, 2, 3, 4, 5, 6, 7, 8, 9, 1),
    ),
}

_INVALID = "Error: invalid input"


def default_puzzle(choice: int) -> Puzzle:
    """The built-in puzzle for a menu choice from 1 to 5."""
    try:
        return _DEFAULT_PUZZLES[choice]
    except KeyError:
        raise ValueError(f"no default puzzle for choice {choice!r}") from None


def goal_state(initial: Sequence[int], size: int, soldiers: int) -> list[int]:
    """The solved layout: recesses empty, soldiers 1..n in order, then blanks."""
    goal = list(initial)
    for i, value in enumerate(goal):
        if i < size and value != BARRIER:
            goal[i] = BLANK
        elif size <= i <= size + soldiers - 1:
            goal[i] = i - size + 1
        elif i > size + soldiers - 1:
            goal[i] = BLANK
    return goal


class Menu:
    """Reads the puzzle and algorithm choice, then runs the search."""

    def __init__(
        self,
        input_func: Callable[[], str] | None = None,
        out: TextIO | None = None,
    ) -> None:
        self._input = input_func if input_func is not None else input
        self.out = out if out is not None else sys.stdout
        self._tokens: deque[str] = deque()
        self.puzzle_type = 0
        self.size = 1
        self.soldiers = 0
        self.blanks = 0
        self.initial: list[int] = []
        self.goal: list[int] = []
        self.algorithm = 0
        self.graph = Graph()
        self.solver = Solver(out=self.out)
        self.visited = VisitedStates()

    def _say(self, text: str = "") -> None:
        print(text, file=self.out)

    def _ask(self, prompt: str) -> None:
        self.out.write(prompt)
        self.out.flush()

    def _read_int(self) -> int:
        """Next whitespace-separated integer; 0 when input is missing or bad."""
        while not self._tokens:
            try:
                line = self._input()
            except EOFError:
                return 0
            self._tokens.extend(line.split())
        token = self._tokens.popleft()
        try:
            return int(token)
        except ValueError:
            return 0

    def _resize(self, cells: Iterable[int], length: int) -> list[int]:
        cells = list(cells)[:length]
        return cells + [0] * (length - len(cells))

    def prompt_puzzle_type(self) -> None:
        """Ask for a default or a custom puzzle and read it."""
        self._say()
        self._say("Welcome to the trench puzzle solver")
        self._say("1. Default puzzle")
        self._say("2. Enter your own puzzle")
        self._ask("Please choose the type of puzzle to solve (1-2): ")
        self.puzzle_type = self._read_int()
        if self.puzzle_type == 1:
            self.prompt_default()
        elif self.puzzle_type == 2:
            self.prompt_puzzle_size()
            self.prompt_puzzle()
        else:
            self._say(_INVALID)

    def prompt_default(self) -> None:
        """Ask which built-in puzzle to use and load it."""
        self._say("Default puzzle options")
        for choice, puzzle in _DEFAULT_PUZZLES.items():
            self._say(f"{choice}. {puzzle.soldiers} soldiers")
        self._ask("Please choose one of the default puzzles to solve (1-5): ")
        try:
            puzzle = default_puzzle(self._read_int())
        except ValueError:
            self._say(_INVALID)
            return
        self.size = puzzle.size
        self.soldiers = puzzle.soldiers
        self.blanks = puzzle.blanks
        self.initial = list(puzzle.cells)

    def prompt_puzzle_size(self) -> None:
        """Read the tunnel length and the number of soldiers."""
        self._say()
        self._ask("Please enter the puzzle length: ")
        self.size = self._read_int()
        if self.size <= 0:
            self.size = 10
        self._ask("Please enter the number of soldiers: ")
        self.soldiers = self._read_int()
        if self.soldiers <= 0 or self.soldiers >= self.size:
            self.soldiers = self.size - 1
        length = self.size * 2
        self.initial = self._resize(self.initial, length)
        self.goal = self._resize(self.goal, length)

    def prompt_puzzle(self) -> None:
        """Read both rows of a custom puzzle, counting its blanks."""
        self._say()
        self._say(
            f"Developing a puzzle of length {self.size} with {self.soldiers} soldiers"
        )
        self._say(
            "Please enter the first row of your puzzle, use a zero to represent "
            "the blanks and -1s for barriers"
        )
        self._say()
        self._ask("First row: ")
        half = len(self.initial) // 2
        for i in range(half):
            if self._read_int() == BLANK:
                self.initial[i] = BLANK
                self.blanks += 1
            else:
                self.initial[i] = BARRIER
        self._say()
        self._say(
            "Please enter the values of second row of your puzzle, "
            "using a 0 for blank spaces"
        )
        self._say(
            "You must enter the each soldier number once and soldier numbers "
            "must be from 1 to the total number of soldiers"
        )
        self._say()
        self._ask("Second row: ")
        for j in range(self.size, len(self.initial)):
            num = self._read_int()
            self.initial[j] = num
            if num == BLANK:
                self.blanks += 1

    def prompt_algorithm(self) -> None:
        """Read the choice of search algorithm."""
        self._say()
        self._say("Enter your choice of algorithm")
        self._say("1. Uniform Cost Search")
        self._say("2. A* with the Misplaced Tile heurisitic")
        self._say("3. A* with the Manhattan distance based on leader heurisitic")
        self._say("4. A* with the Manhattan distance heurisitic")
        self._say("5. A* with the Euclidean distance heurisitic")
        self._ask("Please choose the type of puzzle to solve (1-5): ")
        self.algorithm = self._read_int()
        self._say()

    def develop_puzzle(self) -> None:
        """Build the graph from the initial layout and its goal."""
        self.graph = Graph(self.size, self.soldiers, self.blanks)
        self.graph.set_initial_state(self.initial)
        self._say()
        self.goal = goal_state(self.initial, self.size, self.soldiers)
        self._say("Puzzle created: ")
        self.out.write(self.graph.initial.tunnel.render())
        self.graph.set_goal_state(self.goal)

    def begin_algorithm(self) -> SearchResult:
        """Run the chosen search on the puzzle."""
        self._say("\nBeginning algorithm...")
        result = self.solver.solve(self.graph, self.visited, self.algorithm)
        if not result.solved:
            self._say("Puzzle can not be solved")
        return result


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive solver."""
    menu = Menu()
    menu.prompt_puzzle_type()
    try:
        menu.develop_puzzle()
    except (ValueError, IndexError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    menu.prompt_algorithm()
    menu.begin_algorithm()
    return 0


if __name__ == "__main__":
    sys.exit(main())