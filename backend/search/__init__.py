"""
Graph searches over the board grid.
"""

from .flood_fill import reachable_space
from .food_path import food_distance
from .escape import pocket_exit_turns
from .deadline import Deadline

__all__ = ['reachable_space', 'food_distance', 'pocket_exit_turns', 'Deadline']
