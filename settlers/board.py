# board.py: Board construction (hex topology, shared corner/path registry) and rendering

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from settlers.constants import (
    BOARD_RADIUS,
    CENTER_RING,
    HEX_COLUMN_WIDTH,
    MIDDLE_RING,
    OUTER_RING,
    RENDER_ROWS,
    SIDES,
)
from settlers.hexes import Hex
from settlers.models import Building, Corner, Path, Road
from settlers.results import OutOfRangeError, check_label
from settlers.utils import axial_hexes, corner_point, key_point, side_corners

logger = logging.getLogger(__name__)


class Board:
    """The 19-hex board.

    Topology is fixed once built: hexes, neighbor links, the 54 corners and
    the 72 paths never change. Only resources, numbers and placed pieces do.
    The board performs no legality checks; see ``placement`` for those.
    """

    def __init__(self) -> None:
        self.hexes: List[Hex] = []
        self.corners: List[Corner] = []
        self.paths: List[Path] = []
        self._axial: Dict[Tuple[int, int], Hex] = {}
        self._build_hexes()
        self._wire_neighbors()
        self._build_registry()
        self.center: List[Hex] = [self.get(label) for label in CENTER_RING]
        self.middle: List[Hex] = [self.get(label) for label in MIDDLE_RING]
        self.outer: List[Hex] = [self.get(label) for label in OUTER_RING]

    # ── Construction ──────────────────────────────────────────────────────────

    def _build_hexes(self) -> None:
        for label, (q, r) in enumerate(axial_hexes(BOARD_RADIUS), start=1):
            tile = Hex(label, q, r)
            self.hexes.append(tile)
            self._axial[(q, r)] = tile

    def _wire_neighbors(self) -> None:
        for tile in self.hexes:
            east = self._axial.get((tile.q + 1, tile.r))
            south_east = self._axial.get((tile.q, tile.r + 1))
            south_west = self._axial.get((tile.q - 1, tile.r + 1))
            if east is not None:
                tile.set_east(east)
            if south_east is not None:
                tile.set_south_east(south_east)
            if south_west is not None:
                tile.set_south_west(south_west)

    def _build_registry(self) -> None:
        corner_by_point: Dict[Tuple[int, int], Corner] = {}
        path_by_pair: Dict[Tuple[int, int], Path] = {}

        for tile in self.hexes:
            for i in range(SIDES):
                k = key_point(*corner_point(tile.q, tile.r, i))
                if k not in corner_by_point:
                    corner = Corner(idx=len(self.corners), point=k)
                    corner_by_point[k] = corner
                    self.corners.append(corner)
                corner = corner_by_point[k]
                corner.hexes.append(tile.label)
                tile.corners.append(corner)

            for i in range(SIDES):
                start, end = side_corners(i)
                a, b = tile.corners[start].idx, tile.corners[end].idx
                pair: Tuple[int, int] = tuple(sorted((a, b)))  # type: ignore[assignment]
                if pair not in path_by_pair:
                    path = Path(idx=len(self.paths), a=pair[0], b=pair[1])
                    path_by_pair[pair] = path
                    self.paths.append(path)
                    self.corners[pair[0]].paths.add(path.idx)
                    self.corners[pair[1]].paths.add(path.idx)
                    self.corners[pair[0]].neighbors.add(pair[1])
                    self.corners[pair[1]].neighbors.add(pair[0])
                path = path_by_pair[pair]
                path.hexes.append(tile.label)
                tile.paths.append(path)

        logger.debug(
            "Built board: %d hexes, %d corners, %d paths",
            len(self.hexes), len(self.corners), len(self.paths),
        )

    # ── Lookups ───────────────────────────────────────────────────────────────

    def get(self, label: int) -> Hex:
        return self.hexes[check_label(label) - 1]

    def get_axial(self, q: int, r: int) -> Optional[Hex]:
        """Hex at axial (q, r), or None for the unused slots of the 5x5 table."""
        if not (-BOARD_RADIUS <= q <= BOARD_RADIUS and -BOARD_RADIUS <= r <= BOARD_RADIUS):
            raise OutOfRangeError(f"Axial coordinates out of range: ({q}, {r})")
        return self._axial.get((q, r))

    def all_hexes(self) -> List[Hex]:
        return list(self.hexes)

    def hexes_with_number(self, number: int) -> List[Hex]:
        return [tile for tile in self.hexes if tile.number == number and not tile.is_desert]

    def buildings_on(self, label: int) -> List[Building]:
        return self.get(label).buildings()

    def corner_hexes(self, corner: Corner) -> List[Hex]:
        return [self.get(label) for label in corner.hexes]

    def corner_paths(self, corner: Corner) -> List[Path]:
        return [self.paths[idx] for idx in sorted(corner.paths)]

    def adjacent_corners(self, corner: Corner) -> List[Corner]:
        return [self.corners[idx] for idx in sorted(corner.neighbors)]

    @property
    def is_empty(self) -> bool:
        return all(p.road is None for p in self.paths) and all(
            c.building is None for c in self.corners
        )

    # ── Mutation ──────────────────────────────────────────────────────────────

    def clear(self) -> None:
        for tile in self.hexes:
            tile.clear()

    def place_road(self, road: Road, label: int, edge: int) -> None:
        self.get(label).place_road(road, edge)
        logger.debug("Road %s placed on hex %d edge %d", road, label, edge)

    def place_building(self, building: Building, label: int, corner: int) -> None:
        self.get(label).place_building(building, corner)
        logger.debug("%s %s placed on hex %d corner %d", building.kind, building, label, corner)

    def remove_building(self, label: int, corner: int) -> Optional[Building]:
        slot = self.get(label).corner(corner)
        building, slot.building = slot.building, None
        return building

    # ── Display ───────────────────────────────────────────────────────────────

    def dump(self) -> str:
        lines: List[str] = []
        for labels, indent, first, last in RENDER_ROWS:
            blocks = [self.get(label).dump().split("\n") for label in labels]
            for i in range(first, last + 1):
                line = " " * indent
                line += "".join(block[i][:HEX_COLUMN_WIDTH] for block in blocks[:-1])
                line += blocks[-1][i]
                lines.append(line)
        return "\n".join(lines) + "\n"
