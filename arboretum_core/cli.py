from __future__ import annotations

import argparse
import json
import random
from typing import Optional, Sequence

from .ai import STRATEGIES, pick_move
from .board import PlayArea, insert
from .categorize import categorize_cards
from .config import configure_logging, load_config
from .deal import deal_hands
from .frontier import is_connected, legal_placements
from .scoring import position_score, should_accelerate
from .serialize import move_to_json, state_from_json
from .state import SUB_TURN_PLAY, TurnState


def demo_state(seed: Optional[int]) -> TurnState:
    """A dealt position: two of our cards already down, two opponent cards revealed."""
    mine, theirs, deck = deal_hands(seed=seed)
    area = insert(insert(PlayArea(), mine[0], 0, 0), mine[1], 1, 0)
    opp_area = insert(PlayArea(), theirs[0], 0, 0)
    opponent_hand = (theirs[1], theirs[2]) + (None,) * (len(theirs) - 3)
    return TurnState(
        sub_turn=SUB_TURN_PLAY,
        hand=tuple(mine[2:]),
        play_area=area,
        opponent_hand=opponent_hand,
        opponent_play_area=opp_area,
        deck=len(deck),
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    cfg = load_config()
    parser = argparse.ArgumentParser(description='Arboretum bot: evaluate a position and suggest a move')
    parser.add_argument('--state', default=None, help='JSON file with a turn state (default: deal a demo position)')
    parser.add_argument('--seed', type=int, default=cfg.seed, help='RNG seed for dealing and random choices')
    parser.add_argument('--strategy', choices=list(STRATEGIES), default=cfg.strategy, help='Move selection strategy')
    parser.add_argument('--log-level', default=cfg.log_level, help='Logging level (DEBUG, INFO, ...)')
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.state:
        try:
            with open(args.state, 'r', encoding='utf-8') as f:
                state = state_from_json(json.load(f))
        except (OSError, ValueError) as e:
            parser.error(f'cannot load state from {args.state}: {e}')
        for name, area in (('play area', state.play_area), ('opponent play area', state.opponent_play_area)):
            if not is_connected(area):
                parser.error(f'{args.state}: {name} is not a single connected region through the origin')
    else:
        state = demo_state(args.seed)

    frontier = legal_placements(state.play_area)
    print('Play area (++ marks legal placements):')
    print(state.play_area.pretty(frontier))
    print('Legal placements:', frontier)
    print('Hand:', ' '.join(str(c) for c in state.hand))
    print('Opponent hand:', ' '.join(str(c) if c is not None else '??' for c in state.opponent_hand))

    cat = categorize_cards(state.hand, state.opponent_hand)
    print('Save species:', ', '.join(cat.save_species))
    print('Save cards:', ' '.join(str(c) for c in cat.save_cards) or '-')
    print('Play cards:', ' '.join(str(c) for c in cat.play_cards) or '-')

    score = position_score(state.play_area, state.hand, state.opponent_hand)
    print(f'Position score: {score:.1f}')
    accelerate = should_accelerate(state.play_area, state.hand, state.opponent_hand, state.opponent_play_area)
    print('Ahead, accelerate:' if accelerate else 'Not ahead, play it safe:', accelerate)

    move = pick_move(state, random.Random(args.seed), strategy=args.strategy)
    print('Suggested move:', json.dumps(move_to_json(move)))


if __name__ == '__main__':
    main()
