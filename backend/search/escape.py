"""
Escape timing for a snake shut in a pocket.

Snake bodies move every turn, so a pocket bounded by body segments opens
when the first of those segments leaves. The segment closest to its
snake's tail leaves first.
"""

from collections import deque
from typing import Optional, Set

from domain.board import Board
from domain.snake import Coord


def pocket_exit_turns(board: Board, start: Coord, blocked: Set[Coord]) -> Optional[int]:
    """
    Turns until the pocket around start gets its first opening.

    Walks the free cells reachable from start and looks at every body
    segment bordering them.

    Returns:
        The fewest turns until a bordering segment frees, or None when the
        pocket is bounded only by the board edge (or by our new head).
    """
    visited = {start}
    queue = deque([start])
    soonest: Optional[int] = None

    while queue:
        current = queue.popleft()
        for nxt in board.neighbors(current):
            if nxt in visited:
                continue
            if nxt in blocked:
                turns = board.occupancy.turns_until_free(nxt)
                if turns is not None and (soonest is None or turns < soonest):
                    soonest = turns
                continue
            visited.add(nxt)
            queue.append(nxt)

    return soonest
