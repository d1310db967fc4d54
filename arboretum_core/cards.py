from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

SPECIES: Tuple[str, ...] = ('J', 'R', 'C', 'M', 'O', 'W')

Coord = Tuple[int, int]

# Ranks with special scoring meaning: a 1 cancels an opponent's 8 of the same species.
RANK_ONE = 1
RANK_EIGHT = 8


@dataclass(frozen=True)
class Card:
    """A single card: one of the six species and a positive rank."""
    species: str
    rank: int

    def __post_init__(self) -> None:
        if self.species not in SPECIES:
            raise ValueError(f"unknown species {self.species!r}; expected one of {', '.join(SPECIES)}")
        if isinstance(self.rank, bool) or not isinstance(self.rank, int):
            raise ValueError(f"rank must be an int, got {self.rank!r}")
        if self.rank < 1:
            raise ValueError(f"rank must be positive, got {self.rank}")

    def __str__(self) -> str:
        return f"{self.species}{self.rank}"


def card_string(card: Card) -> str:
    """Short text form of a card, e.g. 'J8'."""
    return str(card)


def parse_card(text: str) -> Card:
    """Parses the short text form produced by card_string."""
    text = text.strip()
    if len(text) < 2:
        raise ValueError(f"cannot parse card {text!r}")
    try:
        rank = int(text[1:])
    except ValueError:
        raise ValueError(f"cannot parse card {text!r}") from None
    return Card(text[0].upper(), rank)
