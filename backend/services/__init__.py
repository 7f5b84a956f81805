"""
Services wrapping the decision core for the HTTP layer.
"""

from .game_sessions import GameSessionStore
from .move_service import MoveService

__all__ = ['GameSessionStore', 'MoveService']
