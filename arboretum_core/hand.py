from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .cards import Card, RANK_EIGHT, RANK_ONE, SPECIES

# Bonus potential added to a species' rank total when the hand holds its 1 or 8.
ONE_BONUS = 1
EIGHT_BONUS = 2


@dataclass(frozen=True)
class SpeciesAnalysis:
    """Aggregate view of one species within a hand."""
    count: int = 0
    total_rank: int = 0
    has1: bool = False
    has8: bool = False
    score: int = 0
    ranks: Tuple[int, ...] = ()


def analyze_species(ranks: Sequence[int]) -> SpeciesAnalysis:
    total = sum(ranks)
    has1 = RANK_ONE in ranks
    has8 = RANK_EIGHT in ranks
    score = total
    if has1:
        score += ONE_BONUS
    if has8:
        score += EIGHT_BONUS
    return SpeciesAnalysis(
        count=len(ranks),
        total_rank=total,
        has1=has1,
        has8=has8,
        score=score,
        ranks=tuple(ranks),
    )


def analyze_hand(hand: Sequence[Card]) -> Dict[str, SpeciesAnalysis]:
    """Per-species statistics for a hand, with an entry for every species in SPECIES order."""
    ranks_by_species: Dict[str, List[int]] = {s: [] for s in SPECIES}
    for card in hand:
        ranks_by_species[card.species].append(card.rank)
    return {s: analyze_species(ranks_by_species[s]) for s in SPECIES}


def most_common_species(hand: Sequence[Card]) -> str:
    """Species held most often; earlier species win ties, and an empty hand gives the first species."""
    counts = {s: 0 for s in SPECIES}
    for card in hand:
        counts[card.species] += 1
    best = SPECIES[0]
    best_count = 0
    for s in SPECIES:
        if counts[s] > best_count:
            best, best_count = s, counts[s]
    return best


def lowest_card(hand: Sequence[Card]) -> Card:
    """First card with the smallest rank."""
    if not hand:
        raise ValueError('cannot pick the lowest card of an empty hand')
    lowest = hand[0]
    for card in hand:
        if card.rank < lowest.rank:
            lowest = card
    return lowest
