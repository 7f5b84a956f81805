"""
Domain entities for the snake agent.

This module contains the per-turn board model and its derived lookups,
independent of the HTTP layer and of any move strategy.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, MOVE_PRIORITY, MOVE_DELTAS, DEFAULT_MOVE,
)
from .errors import AgentError, MalformedState, NoLegalMove, DeadlineExceeded
from .snake import Coord, Snake
from .occupancy import OccupancyIndex
from .board import Board

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'MOVE_PRIORITY', 'MOVE_DELTAS', 'DEFAULT_MOVE',
    'AgentError', 'MalformedState', 'NoLegalMove', 'DeadlineExceeded',
    'Coord', 'Snake',
    'OccupancyIndex',
    'Board',
]
