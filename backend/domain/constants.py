"""
Game constants and strategy weights for the snake agent.
"""

# Movement directions
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Fixed evaluation order, also used to break exact score ties
MOVE_PRIORITY = (UP, DOWN, LEFT, RIGHT)

# Up => y + 1, (0, 0) is the bottom left corner
MOVE_DELTAS = {
    UP: (0, 1),
    DOWN: (0, -1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Answer used whenever the payload cannot be evaluated
DEFAULT_MOVE = UP

# Game settings (standard ruleset defaults, overridden by game.ruleset.settings)
MAX_HEALTH = 100
DEFAULT_HAZARD_DAMAGE = 14
DEFAULT_TIMEOUT_MS = 500

# Strategy weights
LOW_HEALTH_THRESHOLD = 30
SPACE_WEIGHT = 10
# Kept below SPACE_WEIGHT so one step closer to food never outweighs one more cell of room
FOOD_WEIGHT = 5
