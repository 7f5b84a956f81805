"""
Occupancy index - O(1) "who covers this cell" lookups for one turn.
"""

from collections import Counter
from typing import Dict, Iterable, Optional, Set

from .snake import Coord, Snake


class OccupancyIndex:
    """
    Built once per turn in a single pass over every snake body.

    Stacked segments (a snake that just ate, or the start of a game) are
    counted so that freeing a tail only clears the cell when no other
    segment still covers it.
    """

    def __init__(self, snakes: Iterable[Snake]):
        self._owners: Dict[Coord, str] = {}
        self._indexes: Dict[Coord, int] = {}
        self._counts: Counter = Counter()
        self._snakes: Dict[str, Snake] = {}

        for snake in snakes:
            self._snakes[snake.snake_id] = snake
            for i, segment in enumerate(snake.body):
                if segment not in self._owners:
                    self._owners[segment] = snake.snake_id
                    self._indexes[segment] = i
                self._counts[segment] += 1

    def is_occupied(self, coord: Coord) -> bool:
        return coord in self._owners

    def owner(self, coord: Coord) -> Optional[str]:
        return self._owners.get(coord)

    def turns_until_free(self, coord: Coord) -> Optional[int]:
        """
        Further turns, after the one being decided, until the cell is empty.

        Every snake moves once per turn, so a segment leaves after as many
        turns as there are segments behind it. None for an empty cell.
        """
        owner = self._owners.get(coord)
        if owner is None:
            return None
        return self._snakes[owner].length - 1 - self._indexes[coord]

    def occupied_cells(self) -> Set[Coord]:
        """A fresh set of every covered cell, safe for the caller to mutate."""
        return set(self._owners)

    def blocked_after_move(self, snake_id: str, new_head: Coord, eating: bool) -> Set[Coord]:
        """
        Obstacles once snake_id has moved its head to new_head.

        Its tail is freed unless it is eating this turn; every other snake
        stays where it is now since their moves are not known yet.
        """
        blocked = self.occupied_cells()
        snake = self._snakes[snake_id]
        if not eating and self._counts[snake.tail] == 1:
            blocked.discard(snake.tail)
        blocked.add(new_head)
        return blocked

    def __len__(self):
        return len(self._owners)
