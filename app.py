from __future__ import annotations

import logging
import random
from typing import Any, Dict

from flask import Flask, jsonify, request

from arboretum_core.ai import STRATEGIES, pick_move
from arboretum_core.board import PlayArea, insert
from arboretum_core.categorize import categorize_cards
from arboretum_core.config import configure_logging, load_config
from arboretum_core.frontier import is_connected, legal_placements
from arboretum_core.hand import analyze_hand
from arboretum_core.scoring import position_score, should_accelerate
from arboretum_core.serialize import (
    area_from_json,
    area_to_json,
    card_from_json,
    card_to_json,
    coord_from_json,
    hand_from_json,
    move_to_json,
    opponent_hand_from_json,
    state_from_json,
)

logger = logging.getLogger(__name__)

CONFIG = load_config()
app = Flask(__name__)
# Seeded once per process so a fixed ARBORETUM_SEED replays the same random choices.
_rng = random.Random(CONFIG.seed)


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        raise ValueError("JSON object body required")
    return body


def _area(body: Dict[str, Any], key: str) -> PlayArea:
    area = area_from_json(body.get(key))
    if not is_connected(area):
        raise ValueError(f"{key} is not a single connected region through the origin")
    return area


def _bad_request(e: Exception) -> Any:
    logger.info("rejected request to %s: %s", request.path, e)
    return jsonify({"ok": False, "error": str(e)}), 400


# ---------- Evaluation API ----------

@app.post("/api/frontier")
def api_frontier() -> Any:
    try:
        area = _area(_body(), "playArea")
    except ValueError as e:
        return _bad_request(e)
    return jsonify({"ok": True, "legalPlacements": [list(c) for c in legal_placements(area)]})


@app.post("/api/analyze")
def api_analyze() -> Any:
    try:
        hand = hand_from_json(_body().get("hand", []))
    except ValueError as e:
        return _bad_request(e)
    analysis = {
        species: {
            "count": a.count,
            "totalRank": a.total_rank,
            "has1": a.has1,
            "has8": a.has8,
            "score": a.score,
            "ranks": list(a.ranks),
        }
        for species, a in analyze_hand(hand).items()
    }
    return jsonify({"ok": True, "analysis": analysis})


@app.post("/api/categorize")
def api_categorize() -> Any:
    try:
        body = _body()
        hand = hand_from_json(body.get("hand", []))
        opponent_hand = opponent_hand_from_json(body.get("opponentHand", []))
    except ValueError as e:
        return _bad_request(e)
    cat = categorize_cards(hand, opponent_hand)
    return jsonify({
        "ok": True,
        "saveCards": [card_to_json(c) for c in cat.save_cards],
        "playCards": [card_to_json(c) for c in cat.play_cards],
        "saveSpecies": cat.save_species,
    })


@app.post("/api/score")
def api_score() -> Any:
    try:
        body = _body()
        area = _area(body, "playArea")
        hand = hand_from_json(body.get("hand", []))
        opponent_hand = opponent_hand_from_json(body.get("opponentHand", []))
    except ValueError as e:
        return _bad_request(e)
    return jsonify({"ok": True, "score": position_score(area, hand, opponent_hand)})


@app.post("/api/accelerate")
def api_accelerate() -> Any:
    try:
        body = _body()
        area = _area(body, "playArea")
        opp_area = _area(body, "opponentPlayArea")
        hand = hand_from_json(body.get("hand", []))
        opponent_hand = opponent_hand_from_json(body.get("opponentHand", []))
    except ValueError as e:
        return _bad_request(e)
    known = [c for c in opponent_hand if c is not None]
    return jsonify({
        "ok": True,
        "accelerate": should_accelerate(area, hand, opponent_hand, opp_area),
        "ourScore": position_score(area, hand, opponent_hand),
        "opponentScore": position_score(opp_area, known, hand),
    })


# ---------- Move API ----------

@app.post("/api/place")
def api_place() -> Any:
    try:
        body = _body()
        area = _area(body, "playArea")
        card = card_from_json(body.get("card"))
        x, y = coord_from_json(body.get("coord"))
        next_area = insert(area, card, x, y)
        if (x, y) not in legal_placements(area):
            raise ValueError(f"({x}, {y}) is not adjacent to the play area")
    except ValueError as e:
        return _bad_request(e)
    return jsonify({
        "ok": True,
        "playArea": area_to_json(next_area),
        "legalPlacements": [list(c) for c in legal_placements(next_area)],
    })


@app.post("/api/move")
def api_move() -> Any:
    try:
        body = _body()
        state = state_from_json(body.get("state"))
        for area in (state.play_area, state.opponent_play_area):
            if not is_connected(area):
                raise ValueError("play areas must be single connected regions through the origin")
        strategy = str(body.get("strategy", CONFIG.strategy))
        if strategy not in STRATEGIES:
            raise ValueError(f"unknown strategy {strategy!r}")
        move = pick_move(state, _rng, strategy=strategy)
    except ValueError as e:
        return _bad_request(e)
    return jsonify({"ok": True, "move": move_to_json(move)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    configure_logging(CONFIG.log_level)
    app.run(host=CONFIG.host, port=CONFIG.port)
