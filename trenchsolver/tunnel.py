"""The trench: a two-row grid of barriers, recesses and numbered soldiers."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable

BARRIER = -1
BLANK = 0
NOT_SWAPPABLE = -1


class Direction(IntEnum):
    """Direction in which a blank slides to meet a soldier."""

    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


class Tunnel:
    """A ``size`` x 2 tunnel stored row by row in a flat list.

    The top row (y == 0) holds barriers (-1) and recesses (0); the bottom
    row (y == 1) holds soldiers numbered from 1 and blanks (0).  ``blanks``
    lists the flat locations of the blank cells.
    """

    def __init__(self, size: int, soldiers: int, blanks: int) -> None:
        if blanks < 1:
            raise ValueError("a tunnel needs at least one blank")
        self.size = size
        self.soldiers = soldiers
        self.cells: list[int] = [BLANK] * (size * 2)
        # Side recesses are preset at 3, 5, 7, ...; the last blank sits at
        # the start of the bottom row, where soldier 1 should end up.
        self.blanks: list[int] = [3 + 2 * k for k in range(blanks - 1)] + [size]

    def __repr__(self) -> str:
        return (
            f"Tunnel(size={self.size}, soldiers={self.soldiers}, "
            f"cells={self.cells!r}, blanks={self.blanks!r})"
        )

    @property
    def state(self) -> tuple[int, ...]:
        """The cells as a hashable tuple."""
        return tuple(self.cells)

    def number_location(self, num: int) -> int:
        """Flat location of the first cell holding ``num``, or 0 if absent."""
        try:
            return self.cells.index(num)
        except ValueError:
            return 0

    def number_coordinates(self, num: int) -> tuple[int, int]:
        """(x, y) coordinates of the first cell holding ``num``."""
        loc = self.number_location(num)
        return loc % self.size, loc // self.size

    def blank_location(self, index: int) -> int:
        """Flat location of the blank with the given index."""
        return self.blanks[index]

    def location(self, x: int, y: int) -> int:
        """Flat location of the cell at (x, y)."""
        return x + self.size * y

    def value_at(self, x: int, y: int) -> int:
        """Value of the cell at (x, y)."""
        loc = self.location(x, y)
        if not 0 <= loc < len(self.cells):
            raise IndexError(f"cell ({x}, {y}) is outside the tunnel")
        return self.cells[loc]

    def refresh_blanks(self) -> None:
        """Record the location of every blank cell, in order."""
        zeros = [loc for loc, value in enumerate(self.cells) if value == BLANK]
        if len(zeros) > len(self.blanks):
            raise IndexError(
                f"tunnel has {len(zeros)} blanks but room for {len(self.blanks)}"
            )
        self.blanks[: len(zeros)] = zeros

    def set_blank(self, location: int, index: int) -> None:
        """Set the location of the blank with the given index."""
        self.blanks[index] = location

    def _step(self, x: int, y: int, direction: Direction) -> tuple[int, int, int]:
        """Advance one cell; return new (x, y) and -1 (stop), 0 (blank) or 1 (soldier)."""
        if direction is Direction.UP:
            y -= 1
            if y != 0:
                return x, y, NOT_SWAPPABLE
            limit_ok = lambda v: 0 < v <= self.size  # noqa: E731
        elif direction is Direction.DOWN:
            y += 1
            if y != 1:
                return x, y, NOT_SWAPPABLE
            limit_ok = lambda v: 0 < v <= self.size  # noqa: E731
        elif direction is Direction.LEFT:
            x -= 1
            if not 0 <= x < self.size:
                return x, y, NOT_SWAPPABLE
            limit_ok = lambda v: 0 < v < self.size  # noqa: E731
        else:
            x += 1
            if not 0 < x < self.size:
                return x, y, NOT_SWAPPABLE
            limit_ok = lambda v: 0 < v <= self.size  # noqa: E731
        value = self.value_at(x, y)
        if limit_ok(value):
            return x, y, 1
        if value < 0:
            return x, y, NOT_SWAPPABLE
        return x, y, 0

    def can_swap(self, blank: int, direction: int) -> int:
        """Distance the blank slides to reach a soldier, or -1 if it cannot."""
        try:
            heading = Direction(direction)
        except ValueError:
            return NOT_SWAPPABLE
        loc = self.blanks[blank]
        x, y = loc % self.size, loc // self.size
        slides = 1
        while True:
            x, y, outcome = self._step(x, y, heading)
            if outcome == NOT_SWAPPABLE:
                return NOT_SWAPPABLE
            if outcome == 1:
                return slides
            slides += 1

    def swap(self, blank: int, x: int, y: int) -> None:
        """Exchange the given blank with the soldier at (x, y)."""
        blank_loc = self.blanks[blank]
        soldier = self.value_at(x, y)
        soldier_loc = self.number_location(soldier)
        self.cells[blank_loc] = soldier
        self.cells[soldier_loc] = BLANK
        self.set_blank(soldier_loc, blank)

    def swap_soldier(self, blank: int, direction: int) -> bool:
        """Slide a blank in a straight line to the next soldier and swap.

        Returns whether a swap happened.
        """
        distance = self.can_swap(blank, direction)
        if distance <= 0:
            return False
        loc = self.blanks[blank]
        x, y = loc % self.size, loc // self.size
        heading = Direction(direction)
        if heading is Direction.UP:
            self.swap(blank, x, y - 1)
        elif heading is Direction.DOWN:
            self.swap(blank, x, y + 1)
        elif heading is Direction.LEFT:
            self.swap(blank, x - distance, y)
        else:
            self.swap(blank, x + distance, y)
        return True

    def load(self, cells: Iterable[int]) -> None:
        """Replace the cells and recompute the blank locations."""
        self.cells = list(cells)
        self.refresh_blanks()

    def load_blanks(self, blanks: Iterable[int]) -> None:
        """Replace the list of blank locations."""
        self.blanks = list(blanks)

    def copy(self) -> Tunnel:
        """An independent copy of this tunnel."""
        other = Tunnel.__new__(Tunnel)
        other.size = self.size
        other.soldiers = self.soldiers
        other.cells = list(self.cells)
        other.blanks = list(self.blanks)
        return other

    def render(self) -> str:
        """Two text lines showing barriers as X, blanks as spaces and soldiers."""
        lines = []
        for row in range(2):
            parts = []
            for value in self.cells[row * self.size : (row + 1) * self.size]:
                if value == BLANK:
                    parts.append("  ")
                elif value < 0:
                    parts.append("X ")
                else:
                    parts.append(f"{value} ")
            lines.append("".join(parts) + "\n")
        return "".join(lines)