"""
Snake entity for the decision core.
"""

from typing import List, Tuple, Optional


Coord = Tuple[int, int]


class Snake:
    """
    Represents a snake on the board for a single turn.

    Attributes:
        snake_id: unique id assigned by the game host
        body: list of (x, y) from head at index 0 to tail at the end
        health: remaining health, the snake is eliminated at 0
        name: display name, informational only
    """

    def __init__(self, snake_id: str, body: List[Coord], health: int, name: Optional[str] = None):
        self.snake_id = snake_id
        self.body = list(body)
        self.health = health
        self.name = name or snake_id

    @property
    def head(self) -> Coord:
        """Return the head position (first element)."""
        return self.body[0]

    @property
    def tail(self) -> Coord:
        return self.body[-1]

    @property
    def length(self) -> int:
        return len(self.body)

    def __repr__(self):
        return f"<Snake id={self.snake_id} head={self.head} length={self.length} health={self.health}>"
