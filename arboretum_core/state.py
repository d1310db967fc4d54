from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .board import PlayArea
from .cards import Card

# Sub-turns of a player's turn: two draws, one play, one discard.
SUB_TURN_FIRST_DRAW = 0
SUB_TURN_SECOND_DRAW = 1
SUB_TURN_PLAY = 2
SUB_TURN_DISCARD = 3


@dataclass(frozen=True)
class TurnState:
    """Snapshot the orchestrator hands to the bot when a decision is due."""
    sub_turn: int
    hand: Tuple[Card, ...]
    play_area: PlayArea = field(default_factory=PlayArea)
    opponent_hand: Tuple[Optional[Card], ...] = ()
    opponent_play_area: PlayArea = field(default_factory=PlayArea)
    deck: int = 0  # cards left to draw
    discard: Tuple[Card, ...] = ()
    opponent_discard: Tuple[Card, ...] = ()

    def is_draw(self) -> bool:
        return self.sub_turn in (SUB_TURN_FIRST_DRAW, SUB_TURN_SECOND_DRAW)
