"""
Reachable-space evaluation by breadth-first flood fill.
"""

from collections import deque
from typing import Set

from domain.board import Board
from domain.snake import Coord


def reachable_space(board: Board, start: Coord, blocked: Set[Coord]) -> int:
    """
    Count the cells reachable from start through free grid-adjacent cells.

    Args:
        board: the board giving the grid bounds
        start: cell the search starts from (not counted, may itself be blocked)
        blocked: cells that cannot be entered

    Returns:
        Number of distinct free cells reachable from start.
    """
    visited = {start}
    queue = deque([start])
    count = 0

    while queue:
        current = queue.popleft()
        for nxt in board.neighbors(current):
            if nxt in visited or nxt in blocked:
                continue
            visited.add(nxt)
            count += 1
            queue.append(nxt)

    return count
