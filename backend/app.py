import os
import logging
import threading
import uuid
from typing import Dict

from flask import Flask, jsonify, request, Response
from flask_cors import CORS

from config import configure_logging, get_board_size, get_cors_origins
from domain.constants import MIN_BOARD_SIZE
from game import SnakeGame
from game_loop import GameLoop
from players.keyboard_player import KeyboardPlayer
from services.board_renderer import BoardRenderer

configure_logging()
logger = logging.getLogger(__name__)

MAX_BOARD_SIZE = 100


class GameRegistry:
    """In-memory game sessions, one GameLoop each."""

    def __init__(self):
        self._loops: Dict[str, GameLoop] = {}
        self._lock = threading.Lock()

    def create(self, size: int) -> str:
        game_id = str(uuid.uuid4())
        loop = GameLoop(SnakeGame(size), player=KeyboardPlayer())
        with self._lock:
            self._loops[game_id] = loop
        return game_id

    def get(self, game_id: str) -> GameLoop:
        with self._lock:
            return self._loops[game_id]

    def remove(self, game_id: str) -> None:
        with self._lock:
            del self._loops[game_id]

    def __len__(self):
        with self._lock:
            return len(self._loops)


def default_board_size() -> int:
    """SNAKE_BOARD_SIZE, checked against the sizes the API accepts."""
    size = get_board_size()
    if not MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE:
        raise ValueError(
            f"SNAKE_BOARD_SIZE must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}, got {size}"
        )
    return size


def create_app(registry: GameRegistry = None) -> Flask:
    app = Flask(__name__)
    games = registry if registry is not None else GameRegistry()
    renderer = BoardRenderer()
    app.config["GAMES"] = games

    CORS(app, resources={r"/api/*": {"origins": get_cors_origins()}})

    def not_found(game_id):
        return jsonify({"error": f"Game '{game_id}' not found"}), 404

    @app.route("/api/games", methods=["POST"])
    def create_game():
        """
        Start a new game.

        JSON body (optional):
        - size: board edge length (defaults to SNAKE_BOARD_SIZE)
        """
        payload = request.get_json(silent=True) or {}
        if "size" in payload:
            size = payload["size"]
        else:
            try:
                size = default_board_size()
            except ValueError as error:
                logging.error(f"Invalid board size configuration: {error}")
                return jsonify({"error": "Server board size is misconfigured"}), 500

        if not isinstance(size, int) or isinstance(size, bool) or not MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE:
            return jsonify({"error": f"size must be an integer between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}"}), 400

        game_id = games.create(size)
        logger.info(f"Created game {game_id} ({size}x{size})")
        state = games.get(game_id).snapshot()
        return jsonify({"game_id": game_id, "state": state.to_dict()}), 201

    @app.route("/api/games/<game_id>", methods=["GET"])
    def get_game(game_id):
        try:
            loop = games.get(game_id)
        except KeyError:
            return not_found(game_id)
        return jsonify({"game_id": game_id, "state": loop.snapshot().to_dict()})

    @app.route("/api/games/<game_id>/keys", methods=["POST"])
    def press_key(game_id):
        """
        Deliver a key press. Unbound keys are accepted and ignored.

        JSON body:
        - key: KeyboardEvent.key value, e.g. "ArrowUp" or "w"
        """
        try:
            loop = games.get(game_id)
        except KeyError:
            return not_found(game_id)

        payload = request.get_json(silent=True) or {}
        key = payload.get("key")
        if not isinstance(key, str):
            return jsonify({"error": "key must be a string"}), 400

        keyboard = loop.player
        direction = keyboard.press(key)
        next_direction = keyboard.pending or loop.direction
        return jsonify({
            "accepted": direction is not None,
            "direction": next_direction.value
        }), 202

    @app.route("/api/games/<game_id>/tick", methods=["POST"])
    def tick(game_id):
        try:
            loop = games.get(game_id)
        except KeyError:
            return not_found(game_id)

        try:
            outcome = loop.tick()
        except Exception as error:
            logging.error(f"Error stepping game {game_id}: {error}")
            return jsonify({"error": "Failed to advance game"}), 500

        if outcome is None:
            return jsonify({"error": "Game is over", "state": loop.snapshot().to_dict()}), 409

        return jsonify({"outcome": outcome.to_dict(), "state": loop.snapshot().to_dict()})

    @app.route("/api/games/<game_id>/restart", methods=["POST"])
    def restart_game(game_id):
        """Replace the session's game with a fresh one of the same size."""
        try:
            loop = games.get(game_id)
        except KeyError:
            return not_found(game_id)

        loop.restart()
        loop.player.clear()
        return jsonify({"game_id": game_id, "state": loop.snapshot().to_dict()})

    @app.route("/api/games/<game_id>/frame.png", methods=["GET"])
    def frame(game_id):
        try:
            loop = games.get(game_id)
        except KeyError:
            return not_found(game_id)
        return Response(renderer.to_png_bytes(loop.snapshot()), mimetype="image/png")

    @app.route("/api/games/<game_id>", methods=["DELETE"])
    def delete_game(game_id):
        try:
            games.remove(game_id)
        except KeyError:
            return not_found(game_id)
        return "", 204

    return app


app = create_app()


if __name__ == "__main__":
    # Run the Flask app in debug mode.
    app.run(debug=os.getenv("FLASK_DEBUG"))
