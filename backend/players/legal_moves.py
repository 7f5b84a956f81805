"""
Legal move filter - drops candidate moves that are immediately fatal.
"""

from typing import List

from domain.board import Board
from domain.constants import MOVE_DELTAS, MOVE_PRIORITY
from domain.errors import NoLegalMove
from domain.snake import Coord


def next_head(head: Coord, move: str) -> Coord:
    dx, dy = MOVE_DELTAS[move]
    return head[0] + dx, head[1] + dy


def is_lethal_hazard(board: Board, coord: Coord, health: int) -> bool:
    """
    True if ending the turn on coord would starve a snake with this health.

    Hazard damage is applied on top of the regular one point per turn,
    and not at all when the hazard cell also holds food.
    """
    if not board.has_hazard(coord) or board.has_food(coord):
        return False
    return health - 1 - board.hazard_damage <= 0


def is_legal(board: Board, coord: Coord) -> bool:
    if not board.is_in_bounds(coord):
        return False
    if board.is_occupied(coord):
        return False
    return not is_lethal_hazard(board, coord, board.you.health)


def legal_moves(board: Board) -> List[str]:
    """
    Candidate moves for board.you that do not end the game this turn.

    Returns:
        The surviving moves, in MOVE_PRIORITY order (possibly empty).
    """
    head = board.you.head
    return [move for move in MOVE_PRIORITY if is_legal(board, next_head(head, move))]


def require_legal_moves(board: Board) -> List[str]:
    """
    Same as legal_moves but raises NoLegalMove when nothing survives.
    """
    moves = legal_moves(board)
    if not moves:
        raise NoLegalMove(f"All moves from {board.you.head} are fatal on turn {board.turn}")
    return moves
