import os
from typing import Dict, Optional

import numpy as np
from flask import Flask, jsonify, request
from flask_cors import CORS

from board_rules import Direction, valid_moves
from game_session import Game, GameOverError, MoveResult


def resolve_seed() -> Optional[int]:
    env_seed = os.environ.get("GAME_SEED")
    if env_seed:
        return int(env_seed)
    return None


app = Flask(__name__)
allowed_origins = os.environ.get("GAME_ALLOWED_ORIGINS", "*")
CORS(app, resources={r"/game": {"origins": allowed_origins}, r"/move": {"origins": allowed_origins}})
_session: Optional[Game] = None


def new_session(seed: Optional[int] = None) -> Game:
    global _session
    _session = Game(np.random.default_rng(seed))
    app.logger.info("Started new game (seed=%s)", seed)
    return _session


def get_session() -> Game:
    if _session is None:
        return new_session(resolve_seed())
    return _session


def describe(game: Game) -> Dict:
    board = game.snapshot()
    return {
        "board": board,
        "state": game.state.value,
        "moves": game.moves,
        "highest_tile": game.highest_tile(),
        "valid_moves": valid_moves(board),
    }


@app.post("/game")
def start_game():
    payload = request.get_json(silent=True) or {}
    if not isinstance(payload, dict):
        return jsonify({"error": "Payload must be a JSON object"}), 400
    seed = payload.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int) or seed < 0):
        return jsonify({"error": "'seed' must be a non-negative integer"}), 400

    game = new_session(seed)
    return jsonify(describe(game)), 201


@app.get("/game")
def show_game():
    return jsonify(describe(get_session()))


@app.post("/move")
def move():
    payload = request.get_json(force=True, silent=False) or {}
    if not isinstance(payload, dict):
        return jsonify({"error": "Payload must be a JSON object"}), 400
    raw_direction = payload.get("direction")
    if raw_direction is None:
        return jsonify({"error": "Payload must include 'direction' key"}), 400

    try:
        direction = Direction.parse(raw_direction)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    game = get_session()
    try:
        result = game.move(direction)
    except GameOverError as exc:
        return jsonify({"error": str(exc), **describe(game)}), 409

    response = describe(game)
    response["direction"] = direction.value
    response["result"] = result.value
    response["changed"] = result is not MoveResult.REJECTED
    return jsonify(response)


def main():
    # Use 0.0.0.0 so a front end in another process on the same machine can reach it.
    port = int(os.environ.get("PORT", 5050))
    app.run(host="0.0.0.0", port=port, debug=bool(os.environ.get("FLASK_DEBUG")))


if __name__ == "__main__":
    main()
