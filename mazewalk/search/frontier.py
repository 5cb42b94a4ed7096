"""
Frontier containers that set the exploration order of a search.

A search pulls one position at a time from its frontier; whether that is
the newest (stack) or the oldest (queue) entry is what separates the
depth-first strategy from the breadth-first ones.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque

from mazewalk.grid import Position


class Frontier(ABC):
    """
    Abstract base class for discovered-but-not-yet-expanded positions.

    Subclasses decide which entry pop() returns and whether neighbors
    should be offered in reverse so the first compass direction still
    comes out first.
    """

    # Offer neighbors last-to-first (so LIFO frontiers pop North first)
    reverse_neighbors: bool = False

    def __init__(self) -> None:
        self._items: deque[Position] = deque()
        self.peak = 0

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for logging (e.g., 'stack', 'queue')."""
        ...

    def push(self, pos: Position) -> None:
        self._items.append(pos)
        self.peak = max(self.peak, len(self._items))

    @abstractmethod
    def pop(self) -> Position:
        """Remove and return the next position to expand."""
        ...

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self._items)})"


class StackFrontier(Frontier):
    """LIFO frontier for depth-first search."""

    reverse_neighbors = True

    @property
    def name(self) -> str:
        return "stack"

    def pop(self) -> Position:
        return self._items.pop()


class QueueFrontier(Frontier):
    """FIFO frontier for breadth-first search."""

    @property
    def name(self) -> str:
        return "queue"

    def pop(self) -> Position:
        return self._items.popleft()
