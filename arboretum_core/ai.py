from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from .board import PlayArea, insert
from .cards import Card, Coord
from .categorize import categorize_cards
from .frontier import legal_placements
from .hand import lowest_card
from .opponent import OpponentHand
from .scoring import position_score
from .state import SUB_TURN_DISCARD, SUB_TURN_PLAY, TurnState

logger = logging.getLogger(__name__)

DRAW_DECK = 0
DRAW_DISCARD = 1
DRAW_OPPONENT_DISCARD = 2

STRATEGIES = ('strategic', 'random')


@dataclass(frozen=True)
class PlayMove:
    card: Card
    coord: Coord


Move = Union[int, PlayMove, Card]


def draw_options(state: TurnState) -> List[int]:
    """Draw sources that currently have cards."""
    options: List[int] = []
    if state.deck > 0:
        options.append(DRAW_DECK)
    if state.discard:
        options.append(DRAW_DISCARD)
    if state.opponent_discard:
        options.append(DRAW_OPPONENT_DISCARD)
    return options


def random_draw_move(state: TurnState, rng: random.Random) -> int:
    options = draw_options(state)
    if not options:
        raise ValueError('no draw source has cards')
    return rng.choice(options)


def random_play_move(state: TurnState, rng: random.Random) -> PlayMove:
    if not state.hand:
        raise ValueError('cannot play from an empty hand')
    card = rng.choice(list(state.hand))
    coord = rng.choice(legal_placements(state.play_area))
    return PlayMove(card, coord)


def discard_move(state: TurnState) -> Card:
    """Discards the lowest-ranked card in hand."""
    return lowest_card(state.hand)


def _without(hand: Sequence[Card], index: int) -> List[Card]:
    return [c for i, c in enumerate(hand) if i != index]


def best_play(area: PlayArea, hand: Sequence[Card], opponent_hand: OpponentHand) -> PlayMove:
    """
    Picks the placement with the best resulting position score.
    Only cards the categorizer is willing to give up are tried, unless it wants to keep them all.
    Ties go to the earliest card in hand, then the smallest coordinate.
    """
    if not hand:
        raise ValueError('cannot play from an empty hand')
    playable = set(categorize_cards(hand, opponent_hand).play_cards)
    candidates = [i for i, c in enumerate(hand) if c in playable] or list(range(len(hand)))
    coords = legal_placements(area)

    best = PlayMove(hand[candidates[0]], coords[0])
    best_value = position_score(insert(area, best.card, *best.coord), _without(hand, candidates[0]), opponent_hand)
    for i in candidates:
        card = hand[i]
        rest = _without(hand, i)
        for coord in coords:
            value = position_score(insert(area, card, *coord), rest, opponent_hand)
            if value > best_value:
                best, best_value = PlayMove(card, coord), value
    logger.debug("best_play: %s at %s (score %.1f)", best.card, best.coord, best_value)
    return best


def strategic_discard(state: TurnState) -> Card:
    """Discards the lowest card among those not worth saving."""
    play_cards = categorize_cards(state.hand, state.opponent_hand).play_cards
    return lowest_card(play_cards or state.hand)


def pick_move(state: TurnState, rng: Optional[random.Random] = None, strategy: str = 'strategic') -> Move:
    """Chooses the move for the current sub-turn: a draw source, a placement, or a discard."""
    if strategy not in STRATEGIES:
        raise ValueError(f'unknown strategy {strategy!r}; expected one of {", ".join(STRATEGIES)}')
    rng = rng or random.Random()
    if state.is_draw():
        # Neither strategy has a draw preference; both draw at random from available sources.
        move: Move = random_draw_move(state, rng)
    elif state.sub_turn == SUB_TURN_PLAY:
        if strategy == 'random':
            move = random_play_move(state, rng)
        else:
            move = best_play(state.play_area, state.hand, state.opponent_hand)
    elif state.sub_turn == SUB_TURN_DISCARD:
        move = discard_move(state) if strategy == 'random' else strategic_discard(state)
    else:
        raise ValueError(f'invalid sub_turn {state.sub_turn}; expected 0-3')
    logger.debug("pick_move: sub_turn=%d strategy=%s -> %s", state.sub_turn, strategy, move)
    return move
