"""Record of states already reached during a search."""

from __future__ import annotations

from typing import Iterable

from trenchsolver.node import Node


class VisitedStates:
    """Maps a tunnel state to the cheapest node seen for it."""

    def __init__(self) -> None:
        self._nodes: dict[tuple[int, ...], Node] = {}

    def add(self, state: Iterable[int], node: Node) -> None:
        """Store the node for the state, replacing any earlier one."""
        self._nodes[tuple(state)] = node

    def __contains__(self, state: object) -> bool:
        try:
            key = tuple(state)  # type: ignore[arg-type]
        except TypeError:
            return False
        return key in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def get(self, state: Iterable[int]) -> Node | None:
        """The node stored for the state, or None."""
        return self._nodes.get(tuple(state))