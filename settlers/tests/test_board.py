from __future__ import annotations

import pytest

from settlers.constants import MIDDLE_RING, OUTER_RING
from settlers.hexes import Direction
from settlers.models import Building, Road
from settlers.results import OutOfRangeError


def test_board_has_nineteen_hexes_labeled_in_rows(board) -> None:
    hexes = board.all_hexes()
    assert len(hexes) == 19
    assert [h.label for h in hexes] == list(range(1, 20))
    rows = {}
    for h in hexes:
        rows.setdefault(h.r, []).append(h.label)
    assert [len(rows[r]) for r in sorted(rows)] == [3, 4, 5, 4, 3]


def test_hexes_start_with_placeholder_number(board) -> None:
    assert all(h.number == 2 for h in board.all_hexes())


def test_axial_lookup_matches_labels(board) -> None:
    assert board.get_axial(0, 0).label == 10
    assert board.get_axial(0, -2).label == 1
    assert board.get_axial(2, -2).label == 3
    assert board.get_axial(-2, 0).label == 8
    assert board.get_axial(0, 2).label == 19
    for h in board.all_hexes():
        assert board.get_axial(h.q, h.r) is h


def test_axial_lookup_has_six_empty_slots(board) -> None:
    empty = [
        (q, r) for q in range(-2, 3) for r in range(-2, 3) if board.get_axial(q, r) is None
    ]
    assert sorted(empty) == [(-2, -2), (-2, -1), (-1, -2), (1, 2), (2, 1), (2, 2)]


@pytest.mark.parametrize("q, r", [(3, 0), (0, -3), (-3, 3)])
def test_axial_lookup_rejects_coordinates_off_the_table(board, q, r) -> None:
    with pytest.raises(OutOfRangeError):
        board.get_axial(q, r)


@pytest.mark.parametrize("label", [0, 20, -1, 100])
def test_get_rejects_bad_labels(board, label) -> None:
    with pytest.raises(OutOfRangeError):
        board.get(label)


def test_neighbor_graph_is_symmetric(board) -> None:
    for h in board.all_hexes():
        for direction in Direction:
            other = h.neighbor(direction)
            if other is not None:
                assert other.neighbor(direction.opposite) is h


def test_neighbor_links_follow_rows(board) -> None:
    assert board.get(1).neighbor(Direction.EAST) is board.get(2)
    assert board.get(1).neighbor(Direction.SOUTH_EAST) is board.get(5)
    assert board.get(1).neighbor(Direction.SOUTH_WEST) is board.get(4)
    assert board.get(1).neighbor(Direction.WEST) is None
    assert board.get(1).neighbor(Direction.NORTH_EAST) is None
    assert board.get(8).neighbor(Direction.SOUTH_EAST) is board.get(13)
    assert len(board.get(10).neighbors()) == 6
    assert sorted(len(h.neighbors()) for h in board.all_hexes()).count(3) == 6


def test_rings_are_true_rings(board) -> None:
    assert [h.label for h in board.center] == [10]
    assert [h.label for h in board.middle] == MIDDLE_RING
    assert [h.label for h in board.outer] == OUTER_RING
    for ring in (board.middle, board.outer):
        for a, b in zip(ring, ring[1:] + ring[:1]):
            assert b in a.neighbors()
    center = board.center[0]
    assert set(center.neighbors()) == set(board.middle)


def test_registry_has_standard_counts(board) -> None:
    assert len(board.corners) == 54
    assert len(board.paths) == 72
    assert all(1 <= len(c.hexes) <= 3 for c in board.corners)
    assert all(1 <= len(p.hexes) <= 2 for p in board.paths)
    assert all(2 <= len(c.neighbors) <= 3 for c in board.corners)


def test_corners_are_shared_between_touching_hexes(board) -> None:
    # Top of the center hex is the lower-right corner of 5 and lower-left of 6.
    top = board.get(10).corner(0)
    assert board.get(5).corner(2) is top
    assert board.get(6).corner(4) is top
    assert sorted(top.hexes) == [5, 6, 10]


def test_road_is_visible_from_both_hexes(board, alice) -> None:
    road = Road(alice.color, alice)
    board.place_road(road, 10, Direction.EAST)
    assert board.get(10).road_at(1) is road
    assert board.get(11).road_at(4) is road
    for h in board.all_hexes():
        for side in range(6):
            neighbor = h.neighbor(Direction(side))
            if neighbor is not None:
                assert h.path(side) is neighbor.path(Direction(side).opposite)


def test_hexes_with_number_and_buildings_on(board, alice) -> None:
    board.get(4).set_resource("ore")
    board.get(4).set_number(6)
    assert board.hexes_with_number(6) == [board.get(4)]
    settlement = Building(alice.color, owner=alice)
    board.place_building(settlement, 4, 3)
    assert board.buildings_on(4) == [settlement]
    # Corner 3 of hex 4 is shared with hexes 8 and 9.
    assert board.buildings_on(9) == [settlement]
    assert board.buildings_on(8) == [settlement]


def test_clear_returns_pieces_to_owners(board, alice) -> None:
    road = alice.take_road()
    settlement = alice.take_settlement()
    board.place_road(road, 7, 2)
    board.place_building(settlement, 7, 3)
    board.place_road(Road("black"), 1, 0)
    assert not board.is_empty

    board.clear()

    assert board.is_empty
    assert len(alice.roads) == 15
    assert len(alice.settlements) == 5
    assert alice.placed_roads == []
    assert alice.placed_settlements == []


def test_clear_ignores_pieces_not_taken_from_a_pool(board, alice) -> None:
    board.place_building(Building(alice.color, owner=alice), 4, 3)
    board.place_road(Road(alice.color, alice), 4, 2)
    board.place_road(alice.take_road(), 10, 0)

    board.clear()

    assert board.is_empty
    assert len(alice.settlements) == 5
    assert len(alice.roads) == 15
    assert alice.placed_roads == []


def test_render_has_twenty_three_rows(board) -> None:
    text = board.dump()
    lines = text.splitlines()
    assert len(lines) == 23
    assert max(len(line) for line in lines) == 61
    for label in range(1, 20):
        assert f"#{label} " in text


def test_render_indents_rows_like_packed_hexes(board) -> None:
    lines = board.dump().splitlines()
    # first row: 12 blank columns before the apex of hex 1 (at column 6 of its block)
    assert lines[0].index(".") == 18
    # second row: 6 blank columns, then the north-west slope of hex 4
    assert lines[5].index("/") == 9
    # middle row starts flush left with the west side of hex 8
    assert lines[10].startswith("|")
    assert lines[10].rstrip().endswith("|")
