"""
Tests for players/scoring.py and players/space_player.py - the decision policy.
"""

import os
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.board import Board
from domain.constants import VALID_MOVES
from players.scoring import (
    MoveEvaluation,
    evaluate_move,
    hazard_penalty,
    head_to_head_penalty,
    hunger_urgency,
    score_move,
    threatened_cells,
    trap_penalty,
)
from players.space_player import SpacePlayer, pick_best
from search.deadline import Deadline
from board_factory import make_payload


# A snake that has wrapped itself around a two-cell pocket at (1,5)-(2,5),
# with its head at (3,5) and open board to the right.
POCKET_BODY = [
    (3, 5), (3, 4), (2, 4), (1, 4), (0, 4), (0, 5),
    (0, 6), (1, 6), (2, 6), (3, 6), (3, 7),
]


def _board(**kwargs) -> Board:
    return Board.from_payload(make_payload(**kwargs))


def _by_move(evaluations):
    return {e.move: e for e in evaluations}


class TestScoringHelpers:
    def test_hunger_urgency(self):
        assert hunger_urgency(100) == 0.0
        assert hunger_urgency(30) == 0.0
        assert hunger_urgency(15) == pytest.approx(0.5)
        assert hunger_urgency(0) == 1.0

    def test_penalty_tiers(self):
        """Head-to-head risk costs more than a self-trap."""
        board = _board(you=[(5, 5)])
        assert head_to_head_penalty(board) > trap_penalty(board) > board.cell_count

    def test_extra_room_beats_one_step_closer_to_food(self):
        """Even at the lowest health a cell of room is worth more than a step towards food."""
        board = _board(you=[(5, 5)], health=1)
        assert score_move(board, 50, 10, False) > score_move(board, 49, 9, False)

    def test_hazard_landing_costs_its_damage_and_drops_food_bonus(self):
        board = _board(you=[(5, 5)], health=10, hazard_damage=14)
        assert hazard_penalty(board) == 140
        safe = score_move(board, 50, 4, False)
        hazard = score_move(board, 50, 4, False, on_hazard=True)
        assert hazard == 500 - 140
        assert safe > 500

    def test_threatened_cells_only_for_longer_or_equal_opponents(self):
        board = _board(
            you=[(0, 0), (0, 1), (0, 2)],
            opponents={
                "long": [(5, 5), (5, 4), (5, 3), (5, 2)],
                "equal": [(9, 9), (9, 8), (9, 7)],
                "short": [(2, 8), (2, 7)],
            },
        )
        cells = threatened_cells(board)
        assert {(5, 6), (4, 5), (6, 5), (5, 5)} <= cells
        assert {(9, 10), (8, 9), (10, 9)} <= cells
        assert (2, 9) not in cells
        assert (1, 8) not in cells

    def test_evaluate_move_fields(self):
        board = _board(you=[(1, 1)], food=[(5, 5)])
        evaluation = evaluate_move(board, "up")
        assert evaluation.head == (1, 2)
        assert evaluation.legal is True
        assert evaluation.space == 120
        assert evaluation.food_distance == 7
        assert evaluation.head_to_head_risk is False

    def test_to_dict(self):
        evaluation = MoveEvaluation("left", (0, 1), True, 10, None, False, 100.0)
        assert evaluation.to_dict() == {
            "move": "left",
            "head": {"x": 0, "y": 1},
            "legal": True,
            "space": 10,
            "food_distance": None,
            "head_to_head_risk": False,
            "on_hazard": False,
            "escape_turns": None,
            "score": 100.0,
        }


class TestPickBest:
    def _evaluation(self, move, score):
        return MoveEvaluation(move, (0, 0), True, 0, None, False, score)

    def test_highest_score_wins(self):
        evaluations = [self._evaluation("up", 1.0), self._evaluation("left", 5.0)]
        assert pick_best(evaluations).move == "left"

    def test_ties_follow_move_priority(self):
        """Exact ties resolve up > down > left > right regardless of list order."""
        evaluations = [
            self._evaluation("right", 3.0),
            self._evaluation("left", 3.0),
            self._evaluation("down", 3.0),
        ]
        assert pick_best(evaluations).move == "down"


class TestSpacePlayer:
    """Scenario tests for the decision policy."""

    def setup_method(self):
        self.player = SpacePlayer()

    def test_empty_board_ties_resolve_up(self):
        """Healthy 1-length snake on an empty board: all moves tie on space, up wins."""
        board = _board(you=[(1, 1)], food=[(5, 5)], health=100)
        evaluations = self.player.evaluate(board)

        assert len({e.score for e in evaluations}) == 1
        assert {e.space for e in evaluations} == {120}
        assert self.player.get_move(board) == "up"

    def test_food_ignored_when_healthy(self):
        board = _board(you=[(1, 1)], food=[(5, 1)], health=100)
        assert self.player.get_move(board) == "up"

    def test_food_sought_when_hungry(self):
        """Below the low-health threshold the move towards food wins."""
        board = _board(you=[(1, 1)], food=[(5, 1)], health=10)
        evaluations = _by_move(self.player.evaluate(board))

        assert evaluations["right"].food_distance == 3
        assert evaluations["up"].food_distance == 5
        assert self.player.get_move(board) == "right"

    def test_hungrier_means_bigger_food_bonus(self):
        hungry = _by_move(self.player.evaluate(_board(you=[(1, 1)], food=[(5, 1)], health=25)))
        starving = _by_move(self.player.evaluate(_board(you=[(1, 1)], food=[(5, 1)], health=5)))
        assert starving["right"].score > hungry["right"].score

    def test_self_trap_pocket_loses_to_open_board(self):
        board = _board(you=POCKET_BODY)
        evaluations = _by_move(self.player.evaluate(board))

        assert set(evaluations) == {"left", "right"}
        assert evaluations["left"].space == 1
        assert evaluations["right"].space > len(POCKET_BODY)
        assert evaluations["left"].score < evaluations["right"].score
        assert self.player.get_move(board) == "right"

    def test_food_in_pocket_does_not_lure_starving_snake(self):
        board = _board(you=POCKET_BODY, food=[(1, 5)], health=5)
        assert self.player.get_move(board) == "right"

    def test_longer_opponent_head_is_avoided(self):
        """Moving next to a longer opponent's head scores below every other legal move."""
        board = _board(
            you=[(5, 5), (5, 4), (5, 3)],
            opponents={"opp": [(7, 5), (8, 5), (9, 5), (10, 5)]},
        )
        evaluations = _by_move(self.player.evaluate(board))

        assert evaluations["right"].head_to_head_risk is True
        others = [e for move, e in evaluations.items() if move != "right"]
        assert others
        assert all(evaluations["right"].score < e.score for e in others)
        assert self.player.get_move(board) != "right"

    def test_equal_length_opponent_head_is_avoided(self):
        board = _board(
            you=[(5, 5), (5, 4), (5, 3)],
            opponents={"opp": [(7, 5), (8, 5), (9, 5)]},
        )
        assert _by_move(self.player.evaluate(board))["right"].head_to_head_risk is True

    def test_shorter_opponent_head_is_not_penalized(self):
        board = _board(
            you=[(5, 5), (5, 4), (5, 3)],
            opponents={"opp": [(7, 5), (8, 5)]},
        )
        assert _by_move(self.player.evaluate(board))["right"].head_to_head_risk is False

    def test_head_to_head_ranks_below_self_trap(self):
        """With a trap on one side and a longer head on the other, the trap is preferred."""
        body = [(3, 5), (3, 4), (2, 4), (1, 4), (0, 4), (0, 5), (0, 6), (1, 6), (2, 6), (3, 6)]
        board = _board(
            you=body,
            opponents={"opp": [(5, 5), (6, 5), (7, 5), (8, 5), (9, 5), (10, 5), (10, 4), (9, 4), (8, 4), (7, 4), (6, 4)]},
        )
        evaluations = _by_move(self.player.evaluate(board))
        assert evaluations["right"].head_to_head_risk is True
        assert evaluations["left"].space < len(body)
        assert self.player.get_move(board) == "left"

    def test_hazard_band_too_costly_to_cross_for_food(self):
        """Low health cannot pay for three hazard rows, so the food beyond them is out of reach."""
        band = [(x, y) for x in range(11) for y in (1, 2, 3)]
        board = _board(
            you=[(5, 0), (4, 0)], food=[(5, 4)], hazards=band,
            health=20, hazard_damage=14,
        )
        evaluations = _by_move(self.player.evaluate(board))

        assert set(evaluations) == {"up", "right"}
        assert evaluations["up"].on_hazard is True
        assert evaluations["up"].food_distance is None
        assert evaluations["right"].food_distance is None
        assert evaluations["up"].score < evaluations["right"].score
        assert self.player.get_move(board) == "right"

    def test_healthy_snake_crosses_hazard_band_for_food(self):
        band = [(x, y) for x in range(11) for y in (1, 2, 3)]
        board = _board(
            you=[(5, 0), (4, 0)], food=[(5, 4)], hazards=band,
            health=25, hazard_damage=5,
        )
        evaluations = _by_move(self.player.evaluate(board))
        assert evaluations["up"].food_distance == 3

    def test_trapped_snake_prefers_pocket_that_opens_first(self):
        """Of two equal dead ends, pick the one walled by the segment nearest its tail."""
        body = [(5, 5), (5, 4), (6, 4), (7, 4), (7, 5), (7, 6), (6, 6), (5, 6)]
        board = _board(
            you=body,
            opponents={"opp": [(4, 7), (4, 6), (3, 6), (3, 5), (3, 4), (4, 4), (4, 3), (4, 2), (4, 1), (4, 0)]},
        )
        evaluations = _by_move(self.player.evaluate(board))

        assert set(evaluations) == {"left", "right"}
        assert evaluations["left"].space == evaluations["right"].space == 0
        # our (6, 6) leaves after one more turn, the opponent's (4, 4) after four
        assert evaluations["right"].escape_turns == 1
        assert evaluations["left"].escape_turns == 4
        assert self.player.get_move(board) == "right"

    def test_fully_boxed_in_still_answers(self):
        """When all moves are fatal one of the four directions still comes back."""
        board = _board(
            you=[(0, 0), (1, 0)],
            opponents={"opp": [(0, 1), (1, 1), (2, 1)]},
        )
        evaluations = _by_move(self.player.evaluate(board))

        assert set(evaluations) == VALID_MOVES
        assert all(e.legal is False for e in evaluations.values())
        assert evaluations["down"].space == -1
        assert evaluations["left"].space == -1
        move = self.player.get_move(board)
        assert move in VALID_MOVES
        # up opens onto the board with the most room once our tail moves
        assert move == "up"

    def test_boxed_in_one_by_one_board(self):
        board = _board(you=[(0, 0)], width=1, height=1)
        assert self.player.get_move(board) == "up"

    @pytest.mark.parametrize("payload", [
        make_payload(you=[(5, 5)]),
        make_payload(you=[(5, 5), (5, 4)], opponents={"a": [(2, 2), (2, 1)], "b": [(8, 8), (8, 7)]}),
        make_payload(you=[(0, 0)], width=1, height=1),
    ])
    def test_deterministic(self, payload):
        """Identical input always yields the identical move."""
        moves = {SpacePlayer().get_move(Board.from_payload(payload)) for _ in range(5)}
        assert len(moves) == 1

    def test_spent_deadline_keeps_first_evaluation(self):
        """An expired budget still yields a move, from the candidates scored so far."""
        board = _board(you=[(5, 5)])
        evaluations = self.player.evaluate(board, Deadline(0))
        assert [e.move for e in evaluations] == ["up"]
        assert self.player.get_move(board, Deadline(0)) == "up"

    def test_generous_deadline_scores_everything(self):
        board = _board(you=[(5, 5)])
        assert len(self.player.evaluate(board, Deadline(10_000))) == 4
