from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from .board import PlayArea
from .cards import Card, Coord
from .state import TurnState


def card_to_json(card: Card) -> List[Any]:
    return [card.species, int(card.rank)]


def card_from_json(obj: Any) -> Card:
    """Parses ["J", 8] into a Card."""
    if not isinstance(obj, (list, tuple)) or len(obj) != 2:
        raise ValueError(f'bad card: {obj!r}')
    species, rank = obj
    if isinstance(rank, bool) or not isinstance(rank, int):
        raise ValueError(f'bad card rank: {rank!r}')
    return Card(str(species), rank)


def _int_value(value: Any, what: str) -> int:
    """Accepts JSON integers only; floats, bools, strings and nulls are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f'bad {what}: {value!r}')
    return value


def coord_from_json(obj: Any) -> Coord:
    if not isinstance(obj, (list, tuple)) or len(obj) != 2:
        raise ValueError(f'bad coordinate: {obj!r}')
    return (_int_value(obj[0], 'coordinate x'), _int_value(obj[1], 'coordinate y'))


def hand_from_json(obj: Any) -> Tuple[Card, ...]:
    if not isinstance(obj, list):
        raise ValueError('hand must be a list of cards')
    return tuple(card_from_json(c) for c in obj)


def opponent_hand_from_json(obj: Any) -> Tuple[Optional[Card], ...]:
    """Like hand_from_json, but null entries stand for unknown cards."""
    if not isinstance(obj, list):
        raise ValueError('opponent hand must be a list of cards or nulls')
    return tuple(None if c is None else card_from_json(c) for c in obj)


def area_to_json(area: PlayArea) -> List[Dict[str, Any]]:
    return [{"x": int(x), "y": int(y), "card": card_to_json(card)} for (x, y), card in area.items()]


def area_from_json(obj: Any) -> PlayArea:
    if obj is None:
        return PlayArea()
    if not isinstance(obj, list):
        raise ValueError('play area must be a list of {x, y, card} cells')
    cells = []
    for cell in obj:
        try:
            coord = (_int_value(cell["x"], 'x'), _int_value(cell["y"], 'y'))
            card = card_from_json(cell["card"])
        except (KeyError, TypeError) as e:
            raise ValueError(f'bad play area cell {cell!r}: {e}') from None
        cells.append((coord, card))
    return PlayArea(tuple(cells))


def state_from_json(obj: Any) -> TurnState:
    if not isinstance(obj, dict):
        raise ValueError('state must be an object')
    try:
        sub_turn = _int_value(obj["subTurn"], 'subTurn')
        deck = _int_value(obj.get("deck", 0), 'deck')
    except (KeyError, TypeError) as e:
        raise ValueError(f'bad state: {e}') from None
    return TurnState(
        sub_turn=sub_turn,
        hand=hand_from_json(obj.get("hand", [])),
        play_area=area_from_json(obj.get("playArea")),
        opponent_hand=opponent_hand_from_json(obj.get("opponentHand", [])),
        opponent_play_area=area_from_json(obj.get("opponentPlayArea")),
        deck=deck,
        discard=hand_from_json(obj.get("discard", [])),
        opponent_discard=hand_from_json(obj.get("opponentDiscard", [])),
    )


def move_to_json(move: Any) -> Dict[str, Any]:
    """Encodes a move from ai.pick_move: a draw source, a placement, or a discard."""
    if isinstance(move, Card):
        return {"discard": card_to_json(move)}
    if isinstance(move, int):
        return {"draw": move}
    return {"play": {"card": card_to_json(move.card), "coord": [int(move.coord[0]), int(move.coord[1])]}}
