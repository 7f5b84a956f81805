import os
import logging
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

import config
from services.game_sessions import GameSessionStore
from services.move_service import MoveService

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(service: Optional[MoveService] = None) -> Flask:
    """
    Build the Flask app serving the game host API.

    Routes:
    - GET  /       identify (appearance metadata)
    - POST /start  game start notification
    - POST /move   move request, answers {"move": <direction>}
    - POST /end    game end notification
    """
    app = Flask(__name__)
    service = service or MoveService(sessions=GameSessionStore())
    app.config["MOVE_SERVICE"] = service

    # Browser-based board viewers call the server from another origin.
    # Allowed origins can be configured via CORS_ALLOWED_ORIGINS env var (comma-separated)
    allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
    if allowed_origins_env:
        allowed_origins = [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
    else:
        allowed_origins = "*"
    CORS(app, origins=allowed_origins)

    @app.route("/", methods=["GET"])
    def on_info():
        return jsonify(service.info())

    @app.route("/start", methods=["POST"])
    def on_start():
        service.start(request.get_json(silent=True))
        return "ok"

    @app.route("/move", methods=["POST"])
    def on_move():
        return jsonify(service.move(request.get_json(silent=True)))

    @app.route("/end", methods=["POST"])
    def on_end():
        service.end(request.get_json(silent=True))
        return "ok"

    @app.after_request
    def identify_server(response):
        response.headers.set("server", "snake-agent/python")
        return response

    return app


app = create_app()


if __name__ == "__main__":
    logger.info(f"Starting snake server at http://{config.HOST}:{config.PORT}")
    # Threaded so concurrent games never wait on each other.
    app.run(host=config.HOST, port=config.PORT, debug=bool(os.getenv("FLASK_DEBUG")), threaded=True)
