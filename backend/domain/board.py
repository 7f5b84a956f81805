"""
Board entity - an immutable snapshot of one turn of a game.

The board is parsed from the move request payload sent by the game host:

    {
        "game": {"id": ..., "ruleset": {...}, "timeout": 500},
        "turn": 12,
        "board": {"width": 11, "height": 11, "food": [...], "hazards": [...], "snakes": [...]},
        "you": {"id": ..., "health": 90, "body": [...], ...}
    }

Coordinates are (x, y) tuples with (0, 0) at the bottom left.
"""

from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple

from .constants import DEFAULT_HAZARD_DAMAGE, MAX_HEALTH
from .errors import MalformedState
from .occupancy import OccupancyIndex
from .snake import Coord, Snake


def _require(mapping: Any, key: str, where: str) -> Any:
    if not isinstance(mapping, dict):
        raise MalformedState(f"Expected an object for '{where}', got {type(mapping).__name__}")
    if key not in mapping:
        raise MalformedState(f"Missing '{key}' in '{where}'")
    return mapping[key]


def _parse_int(value: Any, where: str) -> int:
    # bool is an int subclass but never a valid coordinate or dimension
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedState(f"Expected an integer for '{where}', got {value!r}")
    return value


def _parse_coord(point: Any, where: str) -> Coord:
    return (
        _parse_int(_require(point, "x", where), f"{where}.x"),
        _parse_int(_require(point, "y", where), f"{where}.y"),
    )


def _parse_coords(points: Any, where: str) -> List[Coord]:
    if points is None:
        return []
    if not isinstance(points, list):
        raise MalformedState(f"Expected a list for '{where}'")
    return [_parse_coord(point, f"{where}[{i}]") for i, point in enumerate(points)]


def _parse_snake(data: Any, where: str) -> Snake:
    snake_id = _require(data, "id", where)
    body = _parse_coords(_require(data, "body", where), f"{where}.body")
    if not body:
        raise MalformedState(f"Snake '{snake_id}' has an empty body")
    health = _parse_int(_require(data, "health", where), f"{where}.health")
    return Snake(str(snake_id), body, health, name=data.get("name"))


class Board:
    """
    A read-only snapshot of the board for a single turn.

    Attributes:
        width, height: board dimensions
        food: frozenset of (x, y) food positions
        hazards: frozenset of (x, y) hazard positions
        snakes: dict of snake_id -> Snake, own snake included
        you_id: id of the snake this agent controls
        turn: turn number reported by the host
        game_id: id of the game this snapshot belongs to
        hazard_damage: extra health lost when ending a turn on a hazard
        max_health: health restored by eating
        timeout_ms: response deadline announced by the host
    """

    def __init__(
        self,
        width: int,
        height: int,
        snakes: Dict[str, Snake],
        you_id: str,
        food: Iterable[Coord] = (),
        hazards: Iterable[Coord] = (),
        turn: int = 0,
        game_id: Optional[str] = None,
        hazard_damage: int = DEFAULT_HAZARD_DAMAGE,
        max_health: int = MAX_HEALTH,
        timeout_ms: Optional[int] = None,
    ):
        if width <= 0 or height <= 0:
            raise MalformedState(f"Board dimensions must be positive, got {width}x{height}")
        if you_id not in snakes:
            raise MalformedState(f"Own snake '{you_id}' is not on the board")

        self.width = width
        self.height = height
        self.snakes = dict(snakes)
        self.you_id = you_id
        self.food: FrozenSet[Coord] = frozenset(food)
        self.hazards: FrozenSet[Coord] = frozenset(hazards)
        self.turn = turn
        self.game_id = game_id
        self.hazard_damage = hazard_damage
        self.max_health = max_health
        self.timeout_ms = timeout_ms

        for snake in self.snakes.values():
            for segment in snake.body:
                if not self.is_in_bounds(segment):
                    raise MalformedState(
                        f"Snake '{snake.snake_id}' has a segment out of bounds at {segment}"
                    )

        self.occupancy = OccupancyIndex(self.snakes.values())

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Board":
        """
        Build a board from a move/start/end request payload.

        Raises:
            MalformedState: if the payload is missing data or describes an impossible board.
        """
        board_data = _require(payload, "board", "payload")
        you_data = _require(payload, "you", "payload")
        game_data = payload.get("game") or {}
        if not isinstance(game_data, dict):
            raise MalformedState("Expected an object for 'game'")

        width = _parse_int(_require(board_data, "width", "board"), "board.width")
        height = _parse_int(_require(board_data, "height", "board"), "board.height")

        snakes: Dict[str, Snake] = {}
        raw_snakes = board_data.get("snakes") or []
        if not isinstance(raw_snakes, list):
            raise MalformedState("Expected a list for 'board.snakes'")
        for i, raw in enumerate(raw_snakes):
            snake = _parse_snake(raw, f"board.snakes[{i}]")
            snakes[snake.snake_id] = snake

        you_id = str(_require(you_data, "id", "you"))

        ruleset = game_data.get("ruleset") or {}
        settings = ruleset.get("settings") if isinstance(ruleset, dict) else None
        if not isinstance(settings, dict):
            settings = {}
        hazard_damage = settings.get("hazardDamagePerTurn", DEFAULT_HAZARD_DAMAGE)
        timeout_ms = game_data.get("timeout")

        return cls(
            width=width,
            height=height,
            snakes=snakes,
            you_id=you_id,
            food=_parse_coords(board_data.get("food"), "board.food"),
            hazards=_parse_coords(board_data.get("hazards"), "board.hazards"),
            turn=_parse_int(payload.get("turn", 0), "turn"),
            game_id=str(game_data["id"]) if game_data.get("id") is not None else None,
            hazard_damage=_parse_int(hazard_damage, "ruleset.settings.hazardDamagePerTurn"),
            timeout_ms=_parse_int(timeout_ms, "game.timeout") if timeout_ms is not None else None,
        )

    @property
    def you(self) -> Snake:
        return self.snakes[self.you_id]

    @property
    def opponents(self) -> List[Snake]:
        return [snake for snake_id, snake in self.snakes.items() if snake_id != self.you_id]

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def is_in_bounds(self, coord: Coord) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def is_occupied(self, coord: Coord) -> bool:
        """True if any snake body segment (own included) covers the cell."""
        return self.occupancy.is_occupied(coord)

    def snake_at(self, coord: Coord) -> Optional[str]:
        return self.occupancy.owner(coord)

    def has_food(self, coord: Coord) -> bool:
        return coord in self.food

    def has_hazard(self, coord: Coord) -> bool:
        return coord in self.hazards

    def neighbors(self, coord: Coord) -> List[Coord]:
        """In-bounds grid-adjacent cells, regardless of occupancy."""
        x, y = coord
        candidates: Tuple[Coord, ...] = ((x, y + 1), (x, y - 1), (x - 1, y), (x + 1, y))
        return [c for c in candidates if self.is_in_bounds(c)]

    def render(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = hazard
        Y = own head, y = own body
        0,1,2... = opponent head (in board order), T = opponent body
        (0,0) is at the bottom left and x-axis labels are at the bottom
        """
        grid = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for x, y in self.hazards:
            grid[y][x] = 'H'
        for x, y in self.food:
            grid[y][x] = 'F'

        for i, snake in enumerate(self.opponents):
            for x, y in reversed(snake.body):
                grid[y][x] = 'T'
            hx, hy = snake.head
            grid[hy][hx] = str(i % 10)

        for x, y in reversed(self.you.body):
            grid[y][x] = 'y'
        hx, hy = self.you.head
        grid[hy][hx] = 'Y'

        rows = [f"{y:2d} {' '.join(grid[y])}" for y in range(self.height - 1, -1, -1)]
        rows.append("   " + " ".join(str(x % 10) for x in range(self.width)))
        return "\n".join(rows)

    def __repr__(self):
        return (
            f"<Board {self.width}x{self.height} turn={self.turn}, food={len(self.food)}, "
            f"hazards={len(self.hazards)}, snakes={len(self.snakes)}>"
        )
