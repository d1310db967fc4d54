from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from .cards import Card, RANK_EIGHT, SPECIES
from .hand import analyze_hand
from .opponent import OpponentHand, nullifying_species

logger = logging.getLogger(__name__)

SAVE_SPECIES_COUNT = 2
MAX_SAVED_PER_SPECIES = 2


@dataclass(frozen=True)
class Categorization:
    """Split of a hand into cards worth holding for scoring and cards free to play or discard."""
    save_cards: List[Card] = field(default_factory=list)
    play_cards: List[Card] = field(default_factory=list)
    save_species: List[str] = field(default_factory=list)


def rank_species(hand: Sequence[Card]) -> List[str]:
    """Species by hand score, highest first; equal scores keep SPECIES order."""
    analysis = analyze_hand(hand)
    return sorted(SPECIES, key=lambda s: -analysis[s].score)


def categorize_cards(hand: Sequence[Card], opponent_hand: OpponentHand) -> Categorization:
    """
    Decides which cards to hold and which to give up.
    The two best-scoring species are kept, at most two cards each, taken in hand order.
    An 8 the opponent can cancel with a known 1 is never worth holding.
    """
    save_species = rank_species(hand)[:SAVE_SPECIES_COUNT]
    cancelled = nullifying_species(opponent_hand)

    save_cards: List[Card] = []
    play_cards: List[Card] = []
    saved: Dict[str, int] = {}
    for card in hand:
        if card.rank == RANK_EIGHT and card.species in cancelled:
            play_cards.append(card)
        elif card.species in save_species and saved.get(card.species, 0) < MAX_SAVED_PER_SPECIES:
            save_cards.append(card)
            saved[card.species] = saved.get(card.species, 0) + 1
        else:
            play_cards.append(card)

    logger.debug(
        "categorize: save_species=%s save=%s play=%s",
        save_species,
        [str(c) for c in save_cards],
        [str(c) for c in play_cards],
    )
    return Categorization(save_cards=save_cards, play_cards=play_cards, save_species=save_species)
