"""
Game session store - last seen turn per game.

This is the only state that outlives a single request. It is owned by the
request handler and passed in explicitly, so the decision code never
touches it. The lock is held for dictionary access only.
"""

import logging
import threading
from typing import Dict, Optional


logger = logging.getLogger(__name__)

NO_TURN_YET = -1


class GameSessionStore:
    """
    Thread-safe mapping of game_id -> last seen turn number.

    Losing the store (e.g. on restart) only resets duplicate-turn detection.
    """

    def __init__(self):
        self._turns: Dict[str, int] = {}
        self._lock = threading.Lock()

    def start(self, game_id: str) -> None:
        with self._lock:
            restarted = game_id in self._turns
            self._turns[game_id] = NO_TURN_YET
        if restarted:
            logger.warning(f"Game {game_id} started again, resetting its session")

    def end(self, game_id: str) -> bool:
        """Remove the session; returns False if the game was unknown."""
        with self._lock:
            return self._turns.pop(game_id, None) is not None

    def record_turn(self, game_id: str, turn: int) -> bool:
        """
        Record a move request for game_id.

        Unknown games (missed start, or a restarted process) are adopted.

        Returns:
            True if the turn is newer than any seen before, False for a
            duplicate or out-of-order request (the stored turn is kept).
        """
        with self._lock:
            last = self._turns.get(game_id, NO_TURN_YET)
            if turn <= last:
                return False
            self._turns[game_id] = turn
            return True

    def last_turn(self, game_id: str) -> Optional[int]:
        with self._lock:
            return self._turns.get(game_id)

    def __contains__(self, game_id: str) -> bool:
        with self._lock:
            return game_id in self._turns

    def __len__(self) -> int:
        with self._lock:
            return len(self._turns)
