from __future__ import annotations

import os
import random
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from atropos_core.board import Board
from atropos_core.codec import board_to_text, format_move, parse_board
from atropos_core.config import SearchConfig
from atropos_core.errors import AtroposError, MalformedInput
from atropos_core.layout import initial_board
from atropos_core.move import Move
from atropos_core.moves import (
    adjacent_moves,
    apply_move,
    completes_triangle,
    free_moves,
    playable_cells,
)
from atropos_core.search import Side, best_move

DEFAULT_SIZE = int(os.getenv("ATROPOS_BOARD_SIZE", "7"))
MAX_SIZE = 20

app = Flask(__name__)


def _move_to_json(m: Move) -> List[int]:
    return [int(m.color), int(m.x), int(m.y), int(m.z)]


def _move_from_json(obj: Any) -> Move:
    if not isinstance(obj, (list, tuple)) or len(obj) != 4:
        raise MalformedInput("move must be a list [color, x, y, z]")
    try:
        color, x, y, z = (int(v) for v in obj)
    except (TypeError, ValueError):
        raise MalformedInput("move fields must be integers")
    return Move(color, x, y, z)


def _safe_moves(board: Board) -> List[Move]:
    if board.last_move is None:
        return free_moves(board)
    moves = adjacent_moves(board)
    return free_moves(board) if moves is None else moves


def _state_to_json(board: Board) -> Dict[str, Any]:
    return {
        "board": board_to_text(board),
        "size": board.size,
        "lastMove": _move_to_json(board.last_move) if board.last_move is not None else None,
        "freeCells": board.count_free_cells(),
        "safeMoves": [_move_to_json(m) for m in _safe_moves(board)],
    }


def _board_from_body(body: Dict[str, Any]) -> Board:
    text = body.get("board")
    if not isinstance(text, str):
        raise MalformedInput("board required")
    return parse_board(text)


def _search_config(body: Dict[str, Any]) -> SearchConfig:
    config = SearchConfig.from_env()
    depth = body.get("depth")
    if depth is None:
        return config
    depth = int(depth)
    if depth < 1:
        raise ValueError("depth must be at least 1")
    return SearchConfig(max_depth=depth, endgame_tactic=config.endgame_tactic)


@app.get("/")
def index() -> Any:
    config = SearchConfig.from_env()
    return jsonify({
        "ok": True,
        "service": "atropos",
        "defaultSize": DEFAULT_SIZE,
        "maxDepth": config.max_depth,
        "endgameTactic": config.endgame_tactic,
    })


@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        size = int(body.get("size", DEFAULT_SIZE))
    except (TypeError, ValueError):
        return jsonify({"ok": False, "error": "size must be an integer"}), 400
    if not 1 <= size <= MAX_SIZE:
        return jsonify({"ok": False, "error": f"size must be between 1 and {MAX_SIZE}"}), 400
    board = initial_board(size)
    return jsonify({"ok": True, "state": _state_to_json(board)})


@app.post("/api/legal")
def api_legal() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        board = _board_from_body(body)
    except MalformedInput as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    return jsonify({
        "ok": True,
        "playable": [list(c) for c in playable_cells(board)],
        "safeMoves": [_move_to_json(m) for m in _safe_moves(board)],
    })


@app.post("/api/move")
def api_move() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        board = _board_from_body(body)
        move = _move_from_json(body.get("move"))
    except MalformedInput as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    if move.coord not in playable_cells(board):
        return jsonify({"ok": False, "error": "Illegal move", "playable": [list(c) for c in playable_cells(board)]}), 400
    try:
        lost = completes_triangle(board, move)
        next_board = apply_move(board, move)
    except AtroposError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    return jsonify({"ok": True, "state": _state_to_json(next_board), "lost": lost})


@app.post("/api/ai")
def api_ai() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        board = _board_from_body(body)
        config = _search_config(body)
    except (MalformedInput, ValueError, TypeError) as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    seed: Optional[int] = body.get("seed")
    move = best_move(board, config.max_depth, Side.MAX, rng=random.Random(seed), config=config)
    if move.is_dummy:
        return jsonify({"ok": False, "error": "No move available: the board is full"}), 409
    try:
        lost = completes_triangle(board, move)
        next_board = apply_move(board, move)
    except AtroposError as e:
        return jsonify({"ok": False, "error": str(e)}), 409
    return jsonify({
        "ok": True,
        "move": _move_to_json(move),
        "text": format_move(move),
        "score": move.score,
        "state": _state_to_json(next_board),
        "lost": lost,
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
