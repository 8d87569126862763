# models.py: Dataclasses for pieces, shared board entities and players

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from settlers.constants import (
    CITIES_PER_PLAYER,
    RESOURCES,
    ROADS_PER_PLAYER,
    SETTLEMENTS_PER_PLAYER,
)

SETTLEMENT = "settlement"
CITY = "city"


@dataclass(eq=False)
class Road:
    color: str
    owner: Optional["Player"] = field(default=None, repr=False)

    def __str__(self) -> str:
        return self.color[0].lower()


@dataclass(eq=False)
class Building:
    color: str
    kind: str = SETTLEMENT
    owner: Optional["Player"] = field(default=None, repr=False)

    @property
    def is_city(self) -> bool:
        return self.kind == CITY

    @property
    def victory_points(self) -> int:
        return 2 if self.is_city else 1

    def __str__(self) -> str:
        letter = self.color[0]
        return letter.upper() if self.is_city else letter.lower()


@dataclass(eq=False)
class Corner:
    """A vertex of the board, shared by up to three hexes."""

    idx: int
    point: Tuple[int, int]
    hexes: List[int] = field(default_factory=list)
    paths: Set[int] = field(default_factory=set)
    neighbors: Set[int] = field(default_factory=set)
    building: Optional[Building] = None


@dataclass(eq=False)
class Path:
    """A side of the board's hexes, shared by up to two hexes."""

    idx: int
    a: int
    b: int
    hexes: List[int] = field(default_factory=list)
    road: Optional[Road] = None

    @property
    def corners(self) -> Tuple[int, int]:
        return self.a, self.b


@dataclass(eq=False)
class Player:
    name: str
    color: str
    hand: Dict[str, int] = field(default_factory=lambda: {r: 0 for r in RESOURCES})
    roads: List[Road] = field(default_factory=list, repr=False)
    settlements: List[Building] = field(default_factory=list, repr=False)
    cities: List[Building] = field(default_factory=list, repr=False)
    placed_roads: List[Road] = field(default_factory=list, repr=False)
    placed_settlements: List[Building] = field(default_factory=list, repr=False)
    placed_cities: List[Building] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if not self.roads:
            self.roads = [Road(self.color, self) for _ in range(ROADS_PER_PLAYER)]
        if not self.settlements:
            self.settlements = [
                Building(self.color, SETTLEMENT, self) for _ in range(SETTLEMENTS_PER_PLAYER)
            ]
        if not self.cities:
            self.cities = [Building(self.color, CITY, self) for _ in range(CITIES_PER_PLAYER)]

    @property
    def victory_points(self) -> int:
        return len(self.placed_settlements) + 2 * len(self.placed_cities)

    @property
    def resource_count(self) -> int:
        return sum(self.hand.values())

    def hand_str(self) -> str:
        return ", ".join(f"{r}:{self.hand[r]}" for r in RESOURCES)

    def pieces_str(self) -> str:
        return (
            f"roads:{len(self.roads)} settlements:{len(self.settlements)} "
            f"cities:{len(self.cities)}"
        )

    # ── Piece pools ───────────────────────────────────────────────────────────

    def take_road(self) -> Road:
        road = self.roads.pop()
        self.placed_roads.append(road)
        return road

    def take_settlement(self) -> Building:
        settlement = self.settlements.pop()
        self.placed_settlements.append(settlement)
        return settlement

    def take_city(self) -> Building:
        city = self.cities.pop()
        self.placed_cities.append(city)
        return city

    def take_back(self, piece) -> None:
        """Return a placed piece to the matching unplaced pool.

        Pieces that never came out of this player's pool are ignored, so the
        pool never grows past its starting size.
        """
        if isinstance(piece, Road):
            placed, pool = self.placed_roads, self.roads
        elif piece.is_city:
            placed, pool = self.placed_cities, self.cities
        else:
            placed, pool = self.placed_settlements, self.settlements
        if piece not in placed:
            return
        placed.remove(piece)
        pool.append(piece)
