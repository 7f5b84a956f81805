"""
Shortest path from a cell to the nearest food the snake can survive to reach.
"""

from collections import deque
from typing import Dict, Optional, Set

from domain.board import Board
from domain.snake import Coord


def food_distance(
    board: Board,
    start: Coord,
    blocked: Set[Coord],
    health: Optional[int] = None,
) -> Optional[int]:
    """
    Breadth-first search from start to the first food cell reached.

    Uses the same traversal rule as the flood fill, so in an unweighted grid
    the first food found is the closest one. When health is given, every
    step costs one point and entering a hazard without food costs
    board.hazard_damage more; cells the snake would reach with no health
    left are never entered. A cell is searched again only when a later path
    arrives with more health left than the first one, so the answer is the
    shortest path among those the snake survives.

    Args:
        board: the board holding food, hazards and bounds
        start: cell the search starts from
        blocked: cells that cannot be entered
        health: health left on start, None for no starvation limit

    Returns:
        Number of steps to the nearest reachable food, or None.
    """
    if not board.food:
        return None
    if board.has_food(start):
        return 0

    remaining = float("inf") if health is None else health
    best: Dict[Coord, float] = {start: remaining}
    queue = deque([(start, 0, remaining)])

    while queue:
        current, steps, remaining = queue.popleft()
        for nxt in board.neighbors(current):
            if nxt in blocked:
                continue
            # eating restores health, so the last step only needs us alive before it
            if board.has_food(nxt):
                return steps + 1
            left = remaining - 1
            if board.has_hazard(nxt):
                left -= board.hazard_damage
            if left <= 0 or best.get(nxt, 0) >= left:
                continue
            best[nxt] = left
            queue.append((nxt, steps + 1, left))

    return None
