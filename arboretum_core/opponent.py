from __future__ import annotations

from typing import List, Optional, Sequence, Set

from .cards import Card, RANK_ONE

# Unknown slots are None; known slots carry the full card.
OpponentHand = Sequence[Optional[Card]]


def known_cards(opponent_hand: OpponentHand) -> List[Card]:
    """Known opponent cards, in slot order."""
    return [card for card in opponent_hand if card is not None]


def nullifying_species(opponent_hand: OpponentHand) -> Set[str]:
    """Species for which the opponent is known to hold a 1, cancelling our 8 of that species."""
    return {card.species for card in known_cards(opponent_hand) if card.rank == RANK_ONE}
