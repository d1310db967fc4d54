from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .cards import Card, Coord, card_string
from .errors import OccupiedCellError

Cell = Tuple[Coord, Card]


@dataclass(frozen=True)
class PlayArea:
    """Sparse, unbounded board of placed cards keyed by (x, y)."""
    cells: Tuple[Cell, ...] = ()  # immutable, sorted by coordinate for consistent hashing
    _lookup: Dict[Coord, Card] = field(default_factory=dict, init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        lookup: Dict[Coord, Card] = {}
        for coord, card in self.cells:
            if coord in lookup:
                raise OccupiedCellError(coord, lookup[coord])
            lookup[coord] = card
        object.__setattr__(self, 'cells', tuple(sorted(self.cells, key=lambda cell: cell[0])))
        object.__setattr__(self, '_lookup', lookup)

    @classmethod
    def from_cells(cls, cells: Mapping[Coord, Card]) -> 'PlayArea':
        """Builds a play area from a coordinate -> card mapping."""
        return cls(tuple(((int(x), int(y)), card) for (x, y), card in cells.items()))

    def at(self, x: int, y: int) -> Optional[Card]:
        return self._lookup.get((x, y))

    def __contains__(self, coord: object) -> bool:
        return coord in self._lookup

    def __len__(self) -> int:
        return len(self.cells)

    def is_empty(self) -> bool:
        return not self.cells

    def coords(self) -> Iterator[Coord]:
        """Iterates over occupied coordinates in sorted order."""
        for coord, _ in self.cells:
            yield coord

    def cards(self) -> Iterator[Card]:
        for _, card in self.cells:
            yield card

    def items(self) -> Iterable[Cell]:
        return self.cells

    def bounds(self) -> Optional[Tuple[int, int, int, int]]:
        """Returns (min_x, min_y, max_x, max_y) of the occupied cells, or None when empty."""
        if not self.cells:
            return None
        xs = [x for (x, _), _ in self.cells]
        ys = [y for (_, y), _ in self.cells]
        return min(xs), min(ys), max(xs), max(ys)

    def pretty(self, marks: Optional[Iterable[Coord]] = None) -> str:
        """Renders the bounding box, top row first; marked empty cells show as '++'."""
        mset = set(marks or ())
        box = self.bounds()
        if box is None:
            return '++' if (0, 0) in mset else '(empty)'
        min_x, min_y, max_x, max_y = box
        if mset:
            min_x = min([min_x] + [x for x, _ in mset])
            max_x = max([max_x] + [x for x, _ in mset])
            min_y = min([min_y] + [y for _, y in mset])
            max_y = max([max_y] + [y for _, y in mset])
        lines: List[str] = []
        for y in range(max_y, min_y - 1, -1):
            row: List[str] = []
            for x in range(min_x, max_x + 1):
                card = self.at(x, y)
                if card is not None:
                    row.append(card_string(card).ljust(2))
                elif (x, y) in mset:
                    row.append('++')
                else:
                    row.append('..')
            lines.append(' '.join(row))
        return '\n'.join(lines)


def empty_play_area() -> PlayArea:
    return PlayArea()


def get(area: PlayArea, x: int, y: int) -> Optional[Card]:
    """Gets the card at (x, y), or None if the cell is empty."""
    return area.at(x, y)


def insert(area: PlayArea, card: Card, x: int, y: int) -> PlayArea:
    """Returns a new play area with card placed at (x, y); the input is left untouched."""
    existing = area.at(x, y)
    if existing is not None:
        raise OccupiedCellError((x, y), existing)
    return PlayArea(area.cells + (((x, y), card),))
