# hexes.py: A single board tile with its neighbors, sides and corners

from __future__ import annotations

from enum import IntEnum
from typing import Dict, List, Optional

from settlers.constants import DESERT, PLACEHOLDER_NUMBER, SIDES, TERRAINS
from settlers.models import Building, Corner, Path, Road
from settlers.results import check_index


class Direction(IntEnum):
    """Edge directions of a pointy-top hex. Side i of a hex faces direction i."""

    NORTH_EAST = 0
    EAST = 1
    SOUTH_EAST = 2
    SOUTH_WEST = 3
    WEST = 4
    NORTH_WEST = 5

    @property
    def opposite(self) -> "Direction":
        return Direction((self + 3) % SIDES)


# 7 lines x 13 columns. Column 12 of a hex is column 0 of its east neighbor.
_TEMPLATE = [
    "      .      ",
    "   /     \\   ",
    "|           |",
    "|           |",
    "|           |",
    "   \\     /   ",
    "      '      ",
]
_CORNER_CELLS = [(0, 6), (2, 12), (4, 12), (6, 6), (4, 0), (2, 0)]
_SIDE_CELLS = [(1, 9), (3, 12), (5, 9), (5, 3), (3, 0), (1, 3)]
_INTERIOR = 11


class Hex:
    """One of the 19 tiles.

    Corner i lies between side i - 1 and side i, so side i touches corners
    i and i + 1. Sides and corners are entities shared with the neighboring
    hexes; a hex only holds references to them.
    """

    def __init__(self, label: int, q: int, r: int, number: int = PLACEHOLDER_NUMBER):
        self.label = label
        self.q = q
        self.r = r
        self.resource: str = DESERT
        self.number = number
        self.corners: List[Corner] = []
        self.paths: List[Path] = []
        self._neighbors: Dict[Direction, Hex] = {}

    def __repr__(self) -> str:
        return f"Hex({self.label}, q={self.q}, r={self.r}, {self.resource}, {self.number})"

    # ── Neighbors ─────────────────────────────────────────────────────────────

    def neighbor(self, direction: Direction) -> Optional["Hex"]:
        return self._neighbors.get(Direction(direction))

    def neighbors(self) -> List["Hex"]:
        return [self._neighbors[d] for d in Direction if d in self._neighbors]

    def _link(self, direction: Direction, other: "Hex") -> None:
        self._neighbors[direction] = other
        other._neighbors[direction.opposite] = self

    def set_east(self, other: "Hex") -> None:
        self._link(Direction.EAST, other)

    def set_south_east(self, other: "Hex") -> None:
        self._link(Direction.SOUTH_EAST, other)

    def set_south_west(self, other: "Hex") -> None:
        self._link(Direction.SOUTH_WEST, other)

    # ── Occupancy ─────────────────────────────────────────────────────────────

    def building_at(self, corner: int) -> Optional[Building]:
        return self.corners[check_index(corner, "corner")].building

    def road_at(self, edge: int) -> Optional[Road]:
        return self.paths[check_index(edge, "edge")].road

    def has_road(self, edge: int) -> bool:
        return self.road_at(edge) is not None

    def corner(self, corner: int) -> Corner:
        return self.corners[check_index(corner, "corner")]

    def path(self, edge: int) -> Path:
        return self.paths[check_index(edge, "edge")]

    def buildings(self) -> List[Building]:
        return [c.building for c in self.corners if c.building is not None]

    def place_road(self, road: Road, edge: int) -> None:
        self.path(edge).road = road

    def place_building(self, building: Building, corner: int) -> None:
        self.corner(corner).building = building

    # ── Setup ─────────────────────────────────────────────────────────────────

    def set_resource(self, resource: str) -> None:
        if resource not in TERRAINS:
            raise ValueError(f"Unknown resource '{resource}'")
        self.resource = resource

    def set_number(self, number: int) -> None:
        self.number = number

    @property
    def is_desert(self) -> bool:
        return self.resource == DESERT

    def clear(self) -> None:
        """Empty every side and corner, handing pieces back to their owners."""
        for slot in self.paths:
            if slot.road is not None and slot.road.owner is not None:
                slot.road.owner.take_back(slot.road)
            slot.road = None
        for slot in self.corners:
            if slot.building is not None and slot.building.owner is not None:
                slot.building.owner.take_back(slot.building)
            slot.building = None

    # ── Display ───────────────────────────────────────────────────────────────

    def dump(self) -> str:
        rows = [list(line) for line in _TEMPLATE]
        number = "--" if self.number == 0 else str(self.number)
        for line, text in ((2, f"#{self.label}"), (3, self.resource), (4, number)):
            rows[line][1:1 + _INTERIOR] = list(f"{text:^{_INTERIOR}}")
        for i, (line, col) in enumerate(_SIDE_CELLS):
            road = self.paths[i].road if self.paths else None
            if road is not None:
                rows[line][col] = str(road)
        for i, (line, col) in enumerate(_CORNER_CELLS):
            building = self.corners[i].building if self.corners else None
            if building is not None:
                rows[line][col] = str(building)
        return "\n".join("".join(row) for row in rows)
