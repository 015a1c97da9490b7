"""The list of choices, the cursor on it and the selection the user builds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator


class Direction(Enum):
    """Arrow-key directions, numbered like the key codes of the main loop."""

    RIGHT = 0
    UP = 1
    LEFT = 2
    DOWN = 3


class WindowTooSmall(Exception):
    """The choices do not fit into the window."""

    def __init__(self, message: str = "window size too small. Resize window") -> None:
        super().__init__(message)


@dataclass
class Item:
    """One choice with its selection state and its place on screen."""

    value: str
    selected: bool = False
    x: int = 0
    y: int = 0

    def __len__(self) -> int:
        return len(self.value)


class Selection:
    """Choices shown column by column, with a cursor and a set of selected items.

    Each value is pushed onto the front of the list, so the items are shown
    and reported last value first.
    """

    def __init__(self, values: Iterable[str]) -> None:
        self._items = [Item(str(value)) for value in reversed(list(values))]
        if not self._items:
            raise ValueError("no values to select from")
        self._cursor = 0
        self._window: tuple[int, int] | None = None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    @property
    def cursor(self) -> Item:
        """The item under the cursor."""
        if not self._items:
            raise IndexError("the selection is empty")
        return self._items[self._cursor]

    def layout(self, rows: int, columns: int) -> None:
        """Place the items in columns of at most ``rows`` items.

        A column starts one cell past the widest item seen so far.
        Raises WindowTooSmall if an item would cross the right edge.
        """
        self._window = (rows, columns)
        if not self._items:
            return
        if rows < 1:
            raise WindowTooSmall()
        positions = []
        x = 0
        widest = 0
        for start in range(0, len(self._items), rows):
            for row, item in enumerate(self._items[start:start + rows]):
                if x + len(item) > columns:
                    raise WindowTooSmall()
                widest = max(widest, len(item))
                positions.append((x, row))
            x += widest + 1
        for item, (px, py) in zip(self._items, positions):
            item.x, item.y = px, py

    def move(self, direction: Direction) -> None:
        """Move the cursor; horizontal moves stay on the cursor's row."""
        direction = Direction(direction)
        count = len(self._items)
        if not count:
            return
        if direction is Direction.UP:
            self._cursor = (self._cursor - 1) % count
        elif direction is Direction.DOWN:
            self._cursor = (self._cursor + 1) % count
        else:
            step = 1 if direction is Direction.RIGHT else -1
            row = self.cursor.y
            for distance in range(1, count + 1):
                index = (self._cursor + step * distance) % count
                if self._items[index].y == row:
                    self._cursor = index
                    break

    def toggle(self) -> None:
        """Flip the selection of the cursor item and move down one item."""
        item = self.cursor
        item.selected = not item.selected
        self._cursor = (self._cursor + 1) % len(self._items)

    def delete(self) -> bool:
        """Remove the cursor item; the cursor goes to the next one.

        Returns whether any items are left.
        """
        if not self._items:
            return False
        del self._items[self._cursor]
        if not self._items:
            self._cursor = 0
            return False
        if self._cursor >= len(self._items):
            self._cursor = 0
        self._relayout()
        return True

    def backspace(self) -> bool:
        """Remove the item before the cursor, wrapping to the last one.

        With a single item left, that item is removed. Returns whether any
        items are left.
        """
        if not self._items:
            return False
        if len(self._items) == 1:
            self._items.clear()
            self._cursor = 0
            return False
        victim = (self._cursor - 1) % len(self._items)
        del self._items[victim]
        if victim < self._cursor:
            self._cursor -= 1
        self._relayout()
        return True

    def selected_values(self) -> list[str]:
        """The selected values in display order."""
        return [item.value for item in self._items if item.selected]

    def result(self) -> str:
        """The selected values joined by single spaces."""
        return " ".join(self.selected_values())

    def _relayout(self) -> None:
        if self._window is None:
            return
        try:
            self.layout(*self._window)
        except WindowTooSmall:
            pass