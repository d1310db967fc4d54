from __future__ import annotations

# Facade module that re-exports the Arboretum core API.
# Used by the Flask app and tests; single-responsibility modules live under arboretum_core/*.

from arboretum_core.cards import SPECIES, Card, Coord, card_string, parse_card
from arboretum_core.errors import ArboretumError, OccupiedCellError
from arboretum_core.board import PlayArea, empty_play_area, get, insert
from arboretum_core.frontier import (
    neighbors,
    empty_neighbors,
    legal_placements,
    reachable_region,
    is_connected,
)
from arboretum_core.hand import SpeciesAnalysis, analyze_hand, most_common_species, lowest_card
from arboretum_core.opponent import known_cards, nullifying_species
from arboretum_core.categorize import Categorization, categorize_cards
from arboretum_core.scoring import (
    HAND_POTENTIAL_WEIGHT,
    score_play_area,
    position_score,
    should_accelerate,
)
from arboretum_core.state import TurnState
from arboretum_core.deal import build_deck, deal_hands
from arboretum_core.ai import (
    DRAW_DECK,
    DRAW_DISCARD,
    DRAW_OPPONENT_DISCARD,
    PlayMove,
    draw_options,
    best_play,
    pick_move,
)


def main() -> None:
    # CLI driver delegated to arboretum_core.cli
    from arboretum_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
