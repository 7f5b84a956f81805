"""
Per-candidate evaluation and composite scoring.

Score tiers, from best to worst:
  1. moves with room to fit our body, ranked by reachable space (plus a
     food bonus when hungry, minus the health a hazard would take)
  2. self-traps, where reachable space is smaller than our length, ranked
     by how soon a body segment walling the pocket moves away
  3. moves next to the head of an opponent at least as long as us

The penalties are sized from the board so a lower tier never outscores a
higher one, whatever the space or food terms add.
"""

from dataclasses import dataclass
from typing import Optional, Set

from domain.board import Board
from domain.constants import FOOD_WEIGHT, LOW_HEALTH_THRESHOLD, SPACE_WEIGHT
from domain.snake import Coord
from search.escape import pocket_exit_turns
from search.flood_fill import reachable_space
from search.food_path import food_distance
from .legal_moves import next_head


@dataclass
class MoveEvaluation:
    move: str
    head: Coord
    legal: bool
    space: int
    food_distance: Optional[int]
    head_to_head_risk: bool
    score: float
    on_hazard: bool = False
    escape_turns: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "move": self.move,
            "head": {"x": self.head[0], "y": self.head[1]},
            "legal": self.legal,
            "space": self.space,
            "food_distance": self.food_distance,
            "head_to_head_risk": self.head_to_head_risk,
            "on_hazard": self.on_hazard,
            "escape_turns": self.escape_turns,
            "score": self.score,
        }


def hazard_penalty(board: Board) -> float:
    return SPACE_WEIGHT * board.hazard_damage


def escape_bonus(board: Board, escape_turns: Optional[int]) -> float:
    """One cell's worth per turn the pocket opens sooner, nothing if it never does."""
    if escape_turns is None:
        return 0.0
    return float(SPACE_WEIGHT * max(board.cell_count - escape_turns, 0))


def trap_penalty(board: Board) -> float:
    cells = board.cell_count
    # covers the space, escape and food terms plus a hazard on the best non-trap move
    return cells * (2 * SPACE_WEIGHT + FOOD_WEIGHT) + hazard_penalty(board) + 1


def head_to_head_penalty(board: Board) -> float:
    return 2 * trap_penalty(board)


def hunger_urgency(health: int) -> float:
    """0.0 at or above the low-health threshold, rising to 1.0 at zero health."""
    if health >= LOW_HEALTH_THRESHOLD:
        return 0.0
    return (LOW_HEALTH_THRESHOLD - max(health, 0)) / LOW_HEALTH_THRESHOLD


def threatened_cells(board: Board) -> Set[Coord]:
    """
    Cells an opponent at least as long as us could move its head into.

    A head-to-head collision eliminates the shorter snake, and both when
    lengths are equal.
    """
    you = board.you
    cells: Set[Coord] = set()
    for opponent in board.opponents:
        if opponent.length < you.length:
            continue
        cells.add(opponent.head)
        cells.update(board.neighbors(opponent.head))
    return cells


def health_after_move(board: Board, head: Coord) -> int:
    """Health left once our head is on the given cell."""
    if board.has_food(head):
        return board.max_health
    health = board.you.health - 1
    if board.has_hazard(head):
        health -= board.hazard_damage
    return health


def score_move(
    board: Board,
    space: int,
    distance: Optional[int],
    head_to_head_risk: bool,
    eating: bool = False,
    on_hazard: bool = False,
    escape_turns: Optional[int] = None,
) -> float:
    you = board.you
    score = float(SPACE_WEIGHT * space)

    length_after = you.length + (1 if eating else 0)
    if space < length_after:
        score -= trap_penalty(board)
        score += escape_bonus(board, escape_turns)

    if on_hazard:
        score -= hazard_penalty(board)

    urgency = hunger_urgency(you.health)
    if urgency and distance is not None and not on_hazard:
        score += urgency * FOOD_WEIGHT * max(board.cell_count - distance, 0)

    if head_to_head_risk:
        score -= head_to_head_penalty(board)

    return score


def evaluate_move(
    board: Board,
    move: str,
    threatened: Optional[Set[Coord]] = None,
) -> MoveEvaluation:
    """
    Evaluate one legal candidate move for board.you.

    The body is advanced one step (tail freed unless the move eats) and
    opponents stay at their current positions.
    """
    you = board.you
    head = next_head(you.head, move)
    eating = board.has_food(head)
    on_hazard = board.has_hazard(head) and not eating
    blocked = board.occupancy.blocked_after_move(you.snake_id, head, eating)

    space = reachable_space(board, head, blocked)
    distance = food_distance(board, head, blocked, health=health_after_move(board, head))

    escape_turns = None
    if space < you.length + (1 if eating else 0):
        escape_turns = pocket_exit_turns(board, head, blocked)

    if threatened is None:
        threatened = threatened_cells(board)
    risk = head in threatened

    return MoveEvaluation(
        move=move,
        head=head,
        legal=True,
        space=space,
        food_distance=distance,
        head_to_head_risk=risk,
        score=score_move(
            board, space, distance, risk,
            eating=eating, on_hazard=on_hazard, escape_turns=escape_turns,
        ),
        on_hazard=on_hazard,
        escape_turns=escape_turns,
    )


def evaluate_fatal_move(board: Board, move: str) -> MoveEvaluation:
    """
    Raw score for a move already known to be fatal: reachable space from
    the target cell, or -1 when it leaves the board.
    """
    you = board.you
    head = next_head(you.head, move)
    if not board.is_in_bounds(head):
        space = -1
    else:
        eating = board.has_food(head)
        space = reachable_space(board, head, board.occupancy.blocked_after_move(you.snake_id, head, eating))

    return MoveEvaluation(
        move=move,
        head=head,
        legal=False,
        space=space,
        food_distance=None,
        head_to_head_risk=False,
        score=float(space),
    )
