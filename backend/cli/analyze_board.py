#!/usr/bin/env python3
"""Replay a saved move request through the decision core.

Loads a move request JSON (the body the game host POSTs to /move), then
prints the board, the evaluation of every candidate move and the chosen
move. Handy for reproducing a bad turn from a game log.

Usage:
    python cli/analyze_board.py turn_42.json
    python cli/analyze_board.py turn_42.json --json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# Ensure we can import the core modules from the backend root
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))

from domain.board import Board  # noqa: E402
from domain.errors import MalformedState  # noqa: E402
from players.space_player import SpacePlayer, pick_best  # noqa: E402


logger = logging.getLogger(__name__)


def analyze(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Evaluate one move request without any time budget.

    Raises:
        MalformedState: if the payload does not describe a valid board.
    """
    board = Board.from_payload(payload)
    evaluations = SpacePlayer().evaluate(board)
    best = pick_best(evaluations)
    return {
        "turn": board.turn,
        "board": board.render(),
        "evaluations": [e.to_dict() for e in evaluations],
        "move": best.move,
    }


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Evaluate a saved move request")
    parser.add_argument("path", help="Path to a move request JSON file")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the analysis as JSON instead of text",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    path = Path(args.path)
    try:
        with path.open("r", encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to load %s: %s", path, exc)
        return 1

    try:
        result = analyze(payload)
    except MalformedState as exc:
        logger.error("Malformed move request: %s", exc)
        return 1

    if args.json:
        print(json.dumps(result, indent=2))
        return 0

    logger.info("Turn %d", result["turn"])
    logger.info(result["board"])
    logger.info("")
    for e in result["evaluations"]:
        distance = e["food_distance"] if e["food_distance"] is not None else "-"
        escape = e["escape_turns"] if e["escape_turns"] is not None else "-"
        logger.info(
            "%-5s  legal=%-5s  space=%3d  food=%3s  hazard=%-5s  escape=%3s  h2h=%-5s  score=%.1f",
            e["move"],
            e["legal"],
            e["space"],
            distance,
            e["on_hazard"],
            escape,
            e["head_to_head_risk"],
            e["score"],
        )
    logger.info("")
    logger.info("Chosen move: %s", result["move"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
