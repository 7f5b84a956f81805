"""
Greedy single-ply player driven by reachable space.
"""

import logging
from typing import List, Optional

from domain.board import Board
from domain.constants import MOVE_PRIORITY
from domain.errors import DeadlineExceeded, NoLegalMove
from search.deadline import Deadline
from .base import Player
from .legal_moves import require_legal_moves
from .scoring import MoveEvaluation, evaluate_fatal_move, evaluate_move, threatened_cells


logger = logging.getLogger(__name__)


def pick_best(evaluations: List[MoveEvaluation]) -> MoveEvaluation:
    """Highest score wins, exact ties go to the earlier move in MOVE_PRIORITY."""
    return max(evaluations, key=lambda e: (e.score, -MOVE_PRIORITY.index(e.move)))


class SpacePlayer(Player):
    """
    Scores every legal move by the space it leaves us, hunger and
    head-to-head risk, then picks the best one.

    When every move is fatal it still answers with the move whose target
    cell opens onto the most space.
    """

    name = "space"

    def evaluate(self, board: Board, deadline: Optional[Deadline] = None) -> List[MoveEvaluation]:
        """
        Evaluate candidate moves in priority order.

        Stops early once the deadline is spent, but always returns at least
        one evaluation.
        """
        try:
            candidates = require_legal_moves(board)
        except NoLegalMove as exc:
            logger.warning(f"{exc}; ranking fatal moves by raw space")
            return [evaluate_fatal_move(board, move) for move in MOVE_PRIORITY]

        threatened = threatened_cells(board)
        evaluations: List[MoveEvaluation] = []
        for move in candidates:
            if evaluations and deadline is not None:
                try:
                    deadline.check()
                except DeadlineExceeded as exc:
                    logger.warning(f"{exc}; keeping best of {len(evaluations)} evaluated moves")
                    break
            evaluation = evaluate_move(board, move, threatened)
            logger.debug(f"Candidate {evaluation}")
            evaluations.append(evaluation)

        return evaluations

    def get_move(self, board: Board, deadline: Optional[Deadline] = None) -> str:
        return pick_best(self.evaluate(board, deadline)).move
