from __future__ import annotations

from typing import Tuple


class ArboretumError(Exception):
    """Base class for errors raised by the Arboretum core."""


class OccupiedCellError(ArboretumError, ValueError):
    """Raised when a card is placed on a coordinate that already holds one."""

    def __init__(self, coord: Tuple[int, int], card: object) -> None:
        self.coord = coord
        self.card = card
        super().__init__(f"cell {coord} is already occupied by {card}")
