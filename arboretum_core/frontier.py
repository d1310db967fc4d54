from __future__ import annotations

import logging
from typing import List, Set

from .board import PlayArea
from .cards import Coord

logger = logging.getLogger(__name__)

ORIGIN: Coord = (0, 0)


def neighbors(coord: Coord) -> List[Coord]:
    """Gets the four orthogonal neighbors of a coordinate (up, down, right, left)."""
    x, y = coord
    return [
        (x, y + 1),
        (x, y - 1),
        (x + 1, y),
        (x - 1, y),
    ]


def empty_neighbors(area: PlayArea) -> Set[Coord]:
    """
    Finds every empty cell orthogonally adjacent to the occupied region.
    The region is walked from the origin with a work list; cells are marked visited
    by coordinate, so identical cards at different positions are all explored.
    An area without a card at the origin yields just the origin.
    """
    if ORIGIN not in area:
        return {ORIGIN}
    results: Set[Coord] = set()
    visited: Set[Coord] = {ORIGIN}
    to_view: List[Coord] = [ORIGIN]
    while to_view:
        current = to_view.pop()
        for nxt in neighbors(current):
            if nxt not in area:
                results.add(nxt)
            elif nxt not in visited:
                visited.add(nxt)
                to_view.append(nxt)
    logger.debug("frontier: %d occupied visited, %d empty neighbors", len(visited), len(results))
    return results


def legal_placements(area: PlayArea) -> List[Coord]:
    """Legal coordinates for the next card, sorted for reproducible iteration."""
    return sorted(empty_neighbors(area))


def reachable_region(area: PlayArea) -> Set[Coord]:
    """Occupied cells reachable from the origin through occupied cells."""
    if ORIGIN not in area:
        return set()
    seen: Set[Coord] = {ORIGIN}
    to_view: List[Coord] = [ORIGIN]
    while to_view:
        current = to_view.pop()
        for nxt in neighbors(current):
            if nxt in area and nxt not in seen:
                seen.add(nxt)
                to_view.append(nxt)
    return seen


def is_connected(area: PlayArea) -> bool:
    """True when the area is empty or forms one 4-connected region containing the origin."""
    if area.is_empty():
        return True
    return len(reachable_region(area)) == len(area)
