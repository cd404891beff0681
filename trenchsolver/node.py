"""Search nodes: a tunnel state with its parent and path/heuristic costs."""

from __future__ import annotations

import math
from enum import IntEnum

from trenchsolver.tunnel import Tunnel


class Heuristic(IntEnum):
    """Cost model used to rank nodes during the search."""

    UNIFORM = 1
    MISPLACED = 2
    LEADER_MANHATTAN = 3
    MANHATTAN = 4
    EUCLIDEAN = 5


class Node:
    """One state of the puzzle in the search tree."""

    def __init__(self, size: int, soldiers: int, blanks: int) -> None:
        self.size = size
        self.soldiers = soldiers
        self.blanks = blanks
        self.tunnel = Tunnel(size, soldiers, blanks)
        self.prev: Node | None = None
        self.total_cost: float = 0
        self.g_cost: float = 0
        self.h_cost: float = 0

    def __repr__(self) -> str:
        return (
            f"Node(cells={self.tunnel.cells!r}, g={self.g_cost}, "
            f"h={self.h_cost}, total={self.total_cost})"
        )

    def setup_cost(self, heuristic: int) -> float:
        """Compute the heuristic and total cost; unknown values mean Euclidean."""
        try:
            kind = Heuristic(heuristic)
        except ValueError:
            kind = Heuristic.EUCLIDEAN
        if kind is Heuristic.UNIFORM:
            self.h_cost = 0
        elif kind is Heuristic.MISPLACED:
            self.h_cost = self.misplaced_count()
        elif kind is Heuristic.LEADER_MANHATTAN:
            self.h_cost = self.manhattan_soldier(1)
        elif kind is Heuristic.MANHATTAN:
            self.h_cost = self.manhattan_total()
        else:
            self.h_cost = self.euclidean_total()
        self.total_cost = self.g_cost + self.h_cost
        return self.total_cost

    def _soldier_values(self) -> range:
        return range(1, self.soldiers + 1)

    def misplaced_soldier(self, value: int) -> int:
        """1 if the soldier is not on its goal cell, else 0."""
        target = value + self.size - 1
        return int(self.tunnel.number_location(value) != target)

    def misplaced_count(self) -> int:
        """Number of soldiers not on their goal cells."""
        return sum(self.misplaced_soldier(v) for v in self._soldier_values())

    def euclidean_soldier(self, value: int) -> float:
        """Straight-line distance of the soldier from its goal cell."""
        x, y = self.tunnel.number_coordinates(value)
        return math.hypot(x - (value - 1), y - 1)

    def euclidean_total(self) -> float:
        """Sum of the Euclidean distances of all soldiers."""
        return sum(self.euclidean_soldier(v) for v in self._soldier_values())

    def manhattan_soldier(self, value: int) -> int:
        """Grid distance of the soldier from its goal cell."""
        x, y = self.tunnel.number_coordinates(value)
        return abs(x - (value - 1)) + abs(y - 1)

    def manhattan_total(self) -> int:
        """Sum of the Manhattan distances of all soldiers."""
        return sum(self.manhattan_soldier(v) for v in self._soldier_values())

    def is_goal(self) -> bool:
        """Whether every soldier stands on its goal cell."""
        return self.misplaced_count() == 0

    def path(self) -> list[Node]:
        """Nodes from the root of the search tree down to this one."""
        steps: list[Node] = []
        node: Node | None = self
        while node is not None:
            steps.append(node)
            node = node.prev
        steps.reverse()
        return steps