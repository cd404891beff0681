"""The search graph: initial and goal states and successor generation."""

from __future__ import annotations

from typing import Iterable

from trenchsolver.node import Node
from trenchsolver.tunnel import Tunnel


class Graph:
    """Holds the start and goal states and creates successor nodes."""

    def __init__(self, size: int = 10, soldiers: int = 9, blanks: int = 4) -> None:
        self.size = size
        self.soldiers = soldiers
        self.blanks = blanks
        self.initial = Node(size, soldiers, blanks)
        self.goal = Node(size, soldiers, blanks)

    def _fresh_tunnel(self, cells: Iterable[int]) -> Tunnel:
        tunnel = Tunnel(self.size, self.soldiers, self.blanks)
        tunnel.load(cells)
        return tunnel

    def set_initial_state(self, cells: Iterable[int]) -> None:
        """Load the cells of the starting state."""
        self.initial.tunnel = self._fresh_tunnel(cells)

    def set_goal_state(self, cells: Iterable[int]) -> None:
        """Load the cells of the goal state."""
        self.goal.tunnel = self._fresh_tunnel(cells)

    def successor(self, blank: int, node: Node, x: int, y: int) -> Node | None:
        """Node reached by swapping the blank with the soldier at (x, y).

        Returns None when the move would recreate the parent's state.
        """
        succ = Node(self.size, self.soldiers, self.blanks)
        succ.tunnel = node.tunnel.copy()
        succ.tunnel.swap(blank, x, y)
        if node.prev is not None and node.prev.tunnel.cells == succ.tunnel.cells:
            return None
        succ.prev = node
        succ.g_cost = node.g_cost + 1
        return succ