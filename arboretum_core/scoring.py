from __future__ import annotations

from typing import Callable, List, Sequence, Tuple

from .board import PlayArea
from .cards import Card, Coord, SPECIES
from .hand import analyze_hand
from .opponent import OpponentHand, known_cards

Path = List[Coord]
# (area, species) -> (score, scoring paths). Swap in a path-based scorer here.
AreaScorer = Callable[[PlayArea, str], Tuple[int, List[Path]]]

# Hand potential is not yet on the board, so it counts for half.
HAND_POTENTIAL_WEIGHT = 0.5


def score_play_area(area: PlayArea, species: str) -> Tuple[int, List[Path]]:
    """Simplified species score: the rank sum of that species' cards in the area. No paths are reported."""
    score = 0
    for card in area.cards():
        if card.species == species:
            score += card.rank
    return score, []


def board_score(area: PlayArea, area_scorer: AreaScorer = score_play_area) -> int:
    return sum(area_scorer(area, s)[0] for s in SPECIES)


def hand_score(hand: Sequence[Card]) -> float:
    analysis = analyze_hand(hand)
    total = 0.0
    for s in SPECIES:
        if analysis[s].count > 0:
            total += analysis[s].score * HAND_POTENTIAL_WEIGHT
    return total


def position_score(
    area: PlayArea,
    hand: Sequence[Card],
    opponent_hand: OpponentHand,
    area_scorer: AreaScorer = score_play_area,
) -> float:
    """Value of a board plus hand: realized board score and weighted hand potential."""
    # opponent_hand is part of the evaluation signature; the simplified scorer does not read it.
    return board_score(area, area_scorer) + hand_score(hand)


def should_accelerate(
    our_area: PlayArea,
    our_hand: Sequence[Card],
    opponent_hand: OpponentHand,
    opponent_area: PlayArea,
) -> bool:
    """True when our position strictly beats the opponent's, judged only from their known cards."""
    ours = position_score(our_area, our_hand, opponent_hand)
    theirs = position_score(opponent_area, known_cards(opponent_hand), our_hand)
    return ours > theirs
