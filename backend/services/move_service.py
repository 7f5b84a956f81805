"""
Request handling for the four game host calls: identify, start, move, end.

The handler owns the session store and the player. It never lets an error
escape a move request: the host needs a direction every turn, and any
direction is at least as good as no answer.
"""

import logging
from typing import Any, Dict, Optional

import config
from domain.board import Board
from domain.constants import DEFAULT_MOVE, DEFAULT_TIMEOUT_MS, VALID_MOVES
from domain.errors import MalformedState
from players.base import Player
from players.space_player import SpacePlayer
from search.deadline import Deadline
from .game_sessions import GameSessionStore


logger = logging.getLogger(__name__)


def _game_id(payload: Any) -> Optional[str]:
    if not isinstance(payload, dict):
        return None
    game = payload.get("game")
    if not isinstance(game, dict) or game.get("id") is None:
        return None
    return str(game["id"])


class MoveService:
    def __init__(
        self,
        player: Optional[Player] = None,
        sessions: Optional[GameSessionStore] = None,
        latency_margin_ms: int = config.LATENCY_MARGIN_MS,
    ):
        self.player = player or SpacePlayer()
        self.sessions = sessions if sessions is not None else GameSessionStore()
        self.latency_margin_ms = latency_margin_ms

    def info(self) -> Dict[str, str]:
        return {
            "apiversion": "1",
            "author": config.SNAKE_AUTHOR,
            "color": config.SNAKE_COLOR,
            "head": config.SNAKE_HEAD,
            "tail": config.SNAKE_TAIL,
            "version": config.SNAKE_VERSION,
        }

    def start(self, payload: Any) -> None:
        game_id = _game_id(payload)
        if game_id is None:
            logger.warning("Start notification without a game id, ignoring")
            return
        self.sessions.start(game_id)
        logger.info(f"GAME START {game_id}")

    def end(self, payload: Any) -> None:
        game_id = _game_id(payload)
        if game_id is None:
            logger.warning("End notification without a game id, ignoring")
            return
        if not self.sessions.end(game_id):
            logger.warning(f"End notification for unknown game {game_id}")
        logger.info(f"GAME OVER {game_id}")

    def deadline_for(self, board: Board) -> Deadline:
        timeout_ms = board.timeout_ms if board.timeout_ms is not None else DEFAULT_TIMEOUT_MS
        return Deadline(max(timeout_ms - self.latency_margin_ms, 0))

    def move(self, payload: Any) -> Dict[str, str]:
        """
        Decide the move for one turn. Always returns a valid direction.
        """
        try:
            board = Board.from_payload(payload)
        except MalformedState as exc:
            logger.warning(f"Malformed move request for game {_game_id(payload)}: {exc}. Moving {DEFAULT_MOVE}.")
            return {"move": DEFAULT_MOVE}

        deadline = self.deadline_for(board)

        if board.game_id is not None and not self.sessions.record_turn(board.game_id, board.turn):
            logger.warning(
                f"Duplicate or out-of-order turn {board.turn} for game {board.game_id} "
                f"(last seen {self.sessions.last_turn(board.game_id)})"
            )

        logger.debug(f"Turn {board.turn} board:\n{board.render()}")

        try:
            direction = self.player.get_move(board, deadline)
        except Exception as exc:  # noqa: BLE001 - the turn must still be answered
            logger.exception(f"Move computation failed on turn {board.turn} of game {board.game_id}: {exc}")
            direction = DEFAULT_MOVE

        if direction not in VALID_MOVES:
            logger.error(f"Player {self.player.name} returned invalid move {direction!r}, using {DEFAULT_MOVE}")
            direction = DEFAULT_MOVE

        logger.info(f"MOVE {board.turn}: {direction} ({deadline.elapsed_ms():.1f}ms)")
        return {"move": direction}
