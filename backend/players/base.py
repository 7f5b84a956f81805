"""
Base player interface for the decision core.
"""

from typing import Optional

from domain.board import Board
from search.deadline import Deadline


class Player:
    """
    Base class/interface for move selection.

    A player is stateless across turns: everything it needs arrives in the
    board snapshot, so one instance can serve every game concurrently.
    """

    name = "base"

    def get_move(self, board: Board, deadline: Optional[Deadline] = None) -> str:
        """
        Return a move direction for board.you given the current board.

        Args:
            board: Snapshot of the current turn
            deadline: Optional time budget for the decision

        Returns:
            One of: "up", "down", "left", "right"
        """
        raise NotImplementedError
