"""
Player implementations for the snake agent.

This module contains the move-selection strategy: the legal move filter,
per-move scoring and the decision policy that combines them.
"""

from .base import Player
from .space_player import SpacePlayer, pick_best
from .scoring import MoveEvaluation
from .legal_moves import legal_moves

__all__ = [
    'Player',
    'SpacePlayer',
    'pick_best',
    'MoveEvaluation',
    'legal_moves',
]
