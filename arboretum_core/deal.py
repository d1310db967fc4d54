from __future__ import annotations

import random
from typing import List, Optional, Sequence, Tuple

from .cards import Card, SPECIES


def build_deck(species: Sequence[str] = SPECIES, max_rank: int = 8) -> List[Card]:
    """One card of every rank 1..max_rank for each species."""
    return [Card(s, rank) for s in species for rank in range(1, max_rank + 1)]


def deal_hands(seed: Optional[int] = None, hand_size: int = 7) -> Tuple[List[Card], List[Card], List[Card]]:
    """Shuffles a full deck and deals two hands. Returns (hand1, hand2, remaining deck)."""
    rng = random.Random(seed)
    deck = build_deck()
    if hand_size * 2 > len(deck):
        raise ValueError(f'cannot deal two hands of {hand_size} from {len(deck)} cards')
    rng.shuffle(deck)
    hand1 = deck[:hand_size]
    hand2 = deck[hand_size:hand_size * 2]
    return hand1, hand2, deck[hand_size * 2:]
