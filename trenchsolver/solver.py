"""Best-first search over trench states with a choice of heuristics."""

from __future__ import annotations

import heapq
import itertools
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from trenchsolver.graph import Graph
from trenchsolver.node import Heuristic, Node
from trenchsolver.tunnel import BLANK, Direction, Tunnel
from trenchsolver.visited import VisitedStates

# Nodes whose total cost exceeds this are never expanded.
MAX_TOTAL_COST = 28
# A blank may change direction at most this many times in a single move.
MAX_TURNS = 3

INFO_FILE = "info.txt"
TIMESHEET_FILE = "Timesheet.txt"

_ALGORITHM_NAMES = {
    Heuristic.UNIFORM: "Uniform Cost",
    Heuristic.MISPLACED: "A* Misplaced Tile",
    Heuristic.LEADER_MANHATTAN: "A* Manhattan Distance for Leader",
    Heuristic.MANHATTAN: "A* Manhattan Distance",
    Heuristic.EUCLIDEAN: "A* Euclidean Distance",
}


def algorithm_name(heuristic: int) -> str:
    """Human-readable name of the search for a heuristic number."""
    try:
        return _ALGORITHM_NAMES[Heuristic(heuristic)]
    except ValueError:
        return _ALGORITHM_NAMES[Heuristic.EUCLIDEAN]


@dataclass
class SearchResult:
    """Outcome and statistics of one search."""

    solved: bool
    expanded: int
    max_queue_size: int
    goal_depth: int
    elapsed_ms: int
    algorithm: str
    goal: Node | None = None


def _next_cell(tunnel: Tunnel, x: int, y: int, heading: Direction) -> tuple[int, int] | None:
    """The cell one step away in the heading, or None if the blank cannot go there."""
    if heading is Direction.UP:
        return (x, 0) if y == 1 else None
    if heading is Direction.DOWN:
        return (x, 1) if y == 0 else None
    if heading is Direction.LEFT:
        return (x - 1, y) if 0 < x <= tunnel.size - 1 else None
    return (x + 1, y) if 0 <= x < tunnel.size - 1 else None


class Solver:
    """Runs the search and reports its progress and results."""

    def __init__(self, output_dir: str | Path = ".", out: TextIO | None = None) -> None:
        self.output_dir = Path(output_dir)
        self.out = out if out is not None else sys.stdout

    def dig(self, blank: int, node: Node, graph: Graph, direction: int) -> list[Node]:
        """Successors reached by sliding the blank from the given direction.

        The blank slides over other blanks and may turn up to three times;
        each soldier it meets yields a successor.  Moves that would recreate
        the parent's state are left out.
        """
        try:
            first = Direction(direction)
        except ValueError:
            return []
        tunnel = node.tunnel
        start = tunnel.blanks[blank]
        successors: list[Node] = []
        avenues = [(start % tunnel.size, start // tunnel.size, first, 0)]
        while avenues:
            x, y, heading, turns = avenues.pop()
            cx, cy = x, y
            while True:
                target = _next_cell(tunnel, cx, cy, heading)
                if target is None:
                    break
                tx, ty = target
                value = tunnel.value_at(tx, ty)
                if value == BLANK:
                    cx, cy = tx, ty
                    continue
                if 0 < value <= tunnel.soldiers:
                    succ = graph.successor(blank, node, tx, ty)
                    if succ is not None:
                        successors.append(succ)
                break
            if turns >= MAX_TURNS:
                continue
            if heading in (Direction.UP, Direction.DOWN) and cy != y:
                avenues.extend((x, cy, turn, turns + 1) for turn in (Direction.LEFT, Direction.RIGHT))
            elif heading in (Direction.LEFT, Direction.RIGHT) and cx != x:
                avenues.extend((cx, y, turn, turns + 1) for turn in (Direction.UP, Direction.DOWN))
        return successors

    def solve(self, graph: Graph, visited: VisitedStates, heuristic: int) -> SearchResult:
        """Search from the graph's initial state and report what was found."""
        out = self.out
        began = time.perf_counter()
        initial = graph.initial
        initial.setup_cost(heuristic)
        order = itertools.count()
        queue: list[tuple[float, int, Node]] = [(initial.total_cost, next(order), initial)]
        visited.add(initial.tunnel.state, initial)
        expanded = 0
        max_queue = 0
        goal_depth = 0
        goal: Node | None = None

        print("Expanding state", file=out)
        out.write(initial.tunnel.render())
        print(file=out)

        while queue:
            max_queue = max(max_queue, len(queue))
            node = queue[0][2]
            if expanded < 1:
                expanded += 1
            if node.total_cost > MAX_TOTAL_COST:
                break
            if node.is_goal():
                goal = node
                goal_depth = int(node.g_cost)
                print(file=out)
                print("Goal!!!", file=out)
                out.write(self.format_solution(node))
                break
            seen = visited.get(node.tunnel.state)
            if seen is not None and seen.total_cost < node.total_cost:
                heapq.heappop(queue)
            else:
                print(file=out)
                print(
                    f"The best state to expand with g(n) = {node.g_cost:g} "
                    f"and h(n) = {node.h_cost:g} is",
                    file=out,
                )
                out.write(node.tunnel.render())
                print(file=out)
                print(file=out)
                heapq.heappop(queue)
                print("Expanding this node...", file=out)
                expanded += 1
                for blank in range(len(node.tunnel.blanks)):
                    for direction in Direction:
                        for succ in self.dig(blank, node, graph, direction):
                            succ.setup_cost(heuristic)
                            known = visited.get(succ.tunnel.state)
                            if known is None or known.total_cost > succ.total_cost:
                                visited.add(succ.tunnel.state, succ)
                                heapq.heappush(queue, (succ.total_cost, next(order), succ))
            max_queue = max(max_queue, len(queue))

        elapsed_ms = int((time.perf_counter() - began) * 1000)
        result = SearchResult(
            solved=goal is not None,
            expanded=expanded,
            max_queue_size=max_queue,
            goal_depth=goal_depth,
            elapsed_ms=elapsed_ms,
            algorithm=algorithm_name(heuristic),
            goal=goal,
        )
        print(
            f"Time taken for {result.algorithm} algorithm: {elapsed_ms} milliseconds",
            file=out,
        )
        self.write_results(graph, result)
        return result

    def write_results(self, graph: Graph, result: SearchResult) -> None:
        """Print the statistics and append them to the info and timesheet files."""
        soldiers = graph.initial.tunnel.soldiers
        stats = (
            "To solve this problem the search algorithm expanded a total of "
            f"{result.expanded} nodes.\n"
            "The maximum number of nodes in the queue at any one time: "
            f"{result.max_queue_size}.\n"
            f"The depth of the goal node was {result.goal_depth}.\n"
        )
        self.out.write(stats)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        with open(self.output_dir / INFO_FILE, "a", encoding="utf-8") as info:
            info.write(f"{soldiers} men in a trench\n")
            info.write(f"Solution Results for {result.algorithm} algorithm: \n")
            info.write(stats)
        with open(self.output_dir / TIMESHEET_FILE, "a", encoding="utf-8") as sheet:
            sheet.write(f"{soldiers} men in a trench\n")
            sheet.write(
                f"Time taken for {result.algorithm} algorithm: "
                f"{result.elapsed_ms} milliseconds\n"
            )

    def format_solution(self, goal: Node) -> str:
        """The steps from the original puzzle to the goal, as text."""
        first, *steps = goal.path()
        parts = ["Solution: \n", "\nOriginal problem: \n", "\n", first.tunnel.render()]
        for number, node in enumerate(steps, start=1):
            parts.append(f"{number}.\n")
            parts.append(node.tunnel.render())
            parts.append("\n")
        return "".join(parts)