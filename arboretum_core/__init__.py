"""
Arboretum core Python package.

Pure-logic decision core for an Arboretum card-laying bot: the sparse play area,
legal-placement search, and the hand/position heuristics that drive move choice.
Modules:
- cards.py: Card, Coord, species constants
- board.py: PlayArea and insertion
- frontier.py: empty-neighbor (legal placement) search
- hand.py, opponent.py: per-species hand analysis and opponent knowledge
- categorize.py, scoring.py: save/play split and position evaluation
- state.py, ai.py: turn snapshot and move selection
"""
