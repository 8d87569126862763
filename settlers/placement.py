# placement.py: Road, settlement and city legality, and committing placements

from __future__ import annotations

import logging
from typing import Optional, Tuple

from settlers.board import Board
from settlers.constants import CITY_COST, ROAD_COST, SETTLEMENT_COST, SIDES
from settlers.models import Building, Player, Road
from settlers.results import Outcome, OutOfRangeError, PlacementResult, check_index
from settlers.utils import can_afford, missing_resources, pay_cost

logger = logging.getLogger(__name__)


def _out_of_range(exc: OutOfRangeError) -> PlacementResult:
    return PlacementResult(Outcome.OUT_OF_RANGE, str(exc))


def _invalid(message: str) -> PlacementResult:
    return PlacementResult(Outcome.INVALID_POSITION, message)


def _short(player: Player, cost, piece: str) -> PlacementResult:
    missing = ", ".join(f"{n} {res}" for res, n in missing_resources(player.hand, cost).items())
    return PlacementResult(
        Outcome.INSUFFICIENT_RESOURCES, f"Not enough resources for {piece} (need {missing})."
    )


def _connects(road: Optional[Road], building: Optional[Building], player: Player) -> bool:
    """A neighboring road links up unless another player's building sits between."""
    if road is None or road.owner is not player:
        return False
    return building is None or building.owner is player


# ── Roads ─────────────────────────────────────────────────────────────────────

def check_road(
    board: Board,
    player: Player,
    label: int,
    edge: int,
    setup_at: Optional[Tuple[int, int]] = None,
) -> PlacementResult:
    """Check whether *player* may put a road on side *edge* of hex *label*.

    The side must be empty and one of the two sides next to it on the same
    hex (edge - 1 and edge + 1) must carry one of the player's roads that is
    not cut off by an opponent's building on the corner they share. During
    initial placement, *setup_at* is the (hex label, corner) of the settlement
    just placed and the road must end at that corner instead.
    """
    try:
        tile = board.get(label)
        check_index(edge, "edge")
        anchor = board.get(setup_at[0]).corner(setup_at[1]) if setup_at is not None else None
    except OutOfRangeError as exc:
        return _out_of_range(exc)

    if tile.has_road(edge):
        return _invalid("Edge already has a road.")

    if anchor is not None:
        if anchor.building is None or anchor.building.owner is not player:
            return _invalid("Setup road must start from your settlement.")
        if anchor.idx not in tile.path(edge).corners:
            return _invalid("Setup road must touch the just-placed settlement.")
        return PlacementResult.success()

    left_edge, right_edge = (edge - 1) % SIDES, (edge + 1) % SIDES
    left_building, right_building = tile.building_at(edge), tile.building_at(right_edge)
    if _connects(tile.road_at(left_edge), left_building, player):
        return PlacementResult.success()
    if _connects(tile.road_at(right_edge), right_building, player):
        return PlacementResult.success()
    return _invalid("Road must connect to one of your roads.")


def is_valid_road(board: Board, player: Player, label: int, edge: int) -> bool:
    return check_road(board, player, label, edge).ok


def place_road(
    board: Board,
    player: Player,
    label: int,
    edge: int,
    free: bool = False,
    setup_at: Optional[Tuple[int, int]] = None,
) -> PlacementResult:
    result = check_road(board, player, label, edge, setup_at=setup_at)
    if not result.ok:
        return result
    if not free and not can_afford(player.hand, ROAD_COST):
        return _short(player, ROAD_COST, "road")
    if not player.roads:
        return PlacementResult(Outcome.NO_PIECES_LEFT, "No roads left.")

    if not free:
        pay_cost(player.hand, ROAD_COST)
    road = player.take_road()
    board.place_road(road, label, edge)
    logger.info("%s built a road on hex %d edge %d", player.name, label, edge)
    return PlacementResult.success(f"{player.name} built a road.")


# ── Settlements ───────────────────────────────────────────────────────────────

def check_settlement(
    board: Board,
    player: Player,
    label: int,
    corner: int,
    setup: bool = False,
) -> PlacementResult:
    """Check whether *player* may put a settlement on *corner* of hex *label*.

    The corner must be empty, every corner one path away must be empty
    (distance rule), and outside initial placement one of the player's roads
    must end at the corner.
    """
    try:
        target = board.get(label).corner(corner)
    except OutOfRangeError as exc:
        return _out_of_range(exc)

    if target.building is not None:
        return _invalid("Corner is already occupied.")
    if any(c.building is not None for c in board.adjacent_corners(target)):
        return _invalid("Distance rule violated (adjacent settlement/city).")
    if not setup and not any(
        p.road is not None and p.road.owner is player for p in board.corner_paths(target)
    ):
        return _invalid("Settlement must connect to one of your roads.")
    return PlacementResult.success()


def is_valid_settlement(
    board: Board, player: Player, label: int, corner: int, setup: bool = False
) -> bool:
    return check_settlement(board, player, label, corner, setup=setup).ok


def place_settlement(
    board: Board,
    player: Player,
    label: int,
    corner: int,
    free: bool = False,
    setup: bool = False,
) -> PlacementResult:
    result = check_settlement(board, player, label, corner, setup=setup)
    if not result.ok:
        return result
    if not free and not can_afford(player.hand, SETTLEMENT_COST):
        return _short(player, SETTLEMENT_COST, "settlement")
    if not player.settlements:
        return PlacementResult(Outcome.NO_PIECES_LEFT, "No settlements left.")

    if not free:
        pay_cost(player.hand, SETTLEMENT_COST)
    settlement = player.take_settlement()
    board.place_building(settlement, label, corner)
    logger.info("%s built a settlement on hex %d corner %d", player.name, label, corner)
    return PlacementResult.success(f"{player.name} built a settlement.")


# ── Cities ────────────────────────────────────────────────────────────────────

def check_city(board: Board, player: Player, label: int, corner: int) -> PlacementResult:
    try:
        building = board.get(label).building_at(corner)
    except OutOfRangeError as exc:
        return _out_of_range(exc)

    if building is None or building.owner is not player:
        return _invalid("You do not own a settlement on this corner.")
    if building.is_city:
        return _invalid("Corner is already a city.")
    return PlacementResult.success()


def place_city(board: Board, player: Player, label: int, corner: int) -> PlacementResult:
    """Upgrade the player's settlement; the settlement goes back to the pool."""
    result = check_city(board, player, label, corner)
    if not result.ok:
        return result
    if not can_afford(player.hand, CITY_COST):
        return _short(player, CITY_COST, "city")
    if not player.cities:
        return PlacementResult(Outcome.NO_PIECES_LEFT, "No cities left.")

    pay_cost(player.hand, CITY_COST)
    settlement = board.get(label).building_at(corner)
    player.take_back(settlement)
    city = player.take_city()
    board.place_building(city, label, corner)
    logger.info("%s upgraded hex %d corner %d to a city", player.name, label, corner)
    return PlacementResult.success(f"{player.name} built a city.")
