from __future__ import annotations

import random
from collections import Counter

import pytest

from settlers.board import Board
from conftest import ScriptedRandom
from settlers.constants import NUMBER_TOKENS, RESOURCE_COUNTS
from settlers.randomizer import distribute_tokens, outer_start_for, reset_board, resource_pool


def numbers_by_label(board):
    return {h.label: h.number for h in board.all_hexes()}


@pytest.mark.parametrize("seed", range(25))
def test_exactly_one_desert_with_no_number(board, seed) -> None:
    reset_board(board, random.Random(seed))
    deserts = [h for h in board.all_hexes() if h.resource == "desert"]
    assert len(deserts) == 1
    assert deserts[0].number == 0
    others = [h for h in board.all_hexes() if h.resource != "desert"]
    assert all(h.number != 0 for h in others)


@pytest.mark.parametrize("seed", range(25))
def test_tokens_used_exactly_once(board, seed) -> None:
    reset_board(board, random.Random(seed))
    numbers = [h.number for h in board.all_hexes() if h.resource != "desert"]
    assert sorted(numbers) == sorted(NUMBER_TOKENS)


@pytest.mark.parametrize("seed", range(25))
def test_resource_multiset_is_a_permutation(board, seed) -> None:
    reset_board(board, random.Random(seed))
    assert Counter(h.resource for h in board.all_hexes()) == Counter(RESOURCE_COUNTS)


def test_same_seed_gives_same_board(board) -> None:
    other = Board()
    reset_board(board, random.Random(1234))
    reset_board(other, random.Random(1234))
    assert [(h.resource, h.number) for h in board.all_hexes()] == [
        (h.resource, h.number) for h in other.all_hexes()
    ]


def test_resource_pool_counts() -> None:
    pool = resource_pool()
    assert len(pool) == 19
    assert Counter(pool) == Counter(RESOURCE_COUNTS)


def test_clockwise_spiral_from_first_middle_hex(board) -> None:
    # Unshuffled pool puts the desert on hex 19; coin flip 1 = clockwise, offset 0.
    reset_board(board, ScriptedRandom([1, 0]))
    assert numbers_by_label(board) == {
        10: 11,
        5: 3, 6: 6, 11: 5, 15: 4, 14: 9, 9: 10,
        4: 8, 1: 4, 2: 11, 3: 12, 7: 9, 12: 10, 16: 8, 19: 0, 18: 3, 17: 6, 13: 2, 8: 5,
    }


def test_counter_clockwise_spiral_from_offset(board) -> None:
    reset_board(board, ScriptedRandom([0, 2]))
    assert numbers_by_label(board) == {
        10: 11,
        11: 3, 6: 6, 5: 5, 9: 4, 14: 9, 15: 10,
        16: 8, 12: 4, 7: 11, 3: 12, 2: 9, 1: 10, 4: 8, 8: 3, 13: 6, 17: 2, 18: 5, 19: 0,
    }


def test_counter_clockwise_spiral_from_first_middle_hex(board) -> None:
    # The middle walk returns to hex 5, so the outer ring starts on hex 2.
    reset_board(board, ScriptedRandom([0, 0]))
    assert numbers_by_label(board) == {
        10: 11,
        5: 3, 9: 6, 14: 5, 15: 4, 11: 9, 6: 10,
        2: 8, 1: 4, 4: 11, 8: 12, 13: 9, 17: 10, 18: 8, 19: 0, 16: 3, 12: 6, 7: 2, 3: 5,
    }


def test_outer_start_tables_mirror_each_other(board) -> None:
    # Clockwise and counter-clockwise starts sit on either side of the same
    # outer corner hex.
    outer = board.outer
    for i, hexagon in enumerate(board.middle):
        cw = outer.index(outer_start_for(board, hexagon, clockwise=True))
        ccw = outer.index(outer_start_for(board, hexagon, clockwise=False))
        assert cw == (2 * i - 1) % len(outer)
        assert ccw == (2 * i + 1) % len(outer)


def test_desert_in_center_does_not_consume_a_token(board) -> None:
    def desert_to_center(seq):
        seq[9], seq[-1] = seq[-1], seq[9]

    reset_board(board, ScriptedRandom([1, 0], shuffle=desert_to_center))
    assert board.get(10).resource == "desert"
    assert board.get(10).number == 0
    # The middle ring picks up where the center would have: the last token.
    assert board.get(5).number == NUMBER_TOKENS[-1]
    numbers = [h.number for h in board.all_hexes() if h.label != 10]
    assert sorted(numbers) == sorted(NUMBER_TOKENS)


def test_reset_assigns_resources_in_label_order(board) -> None:
    reset_board(board, ScriptedRandom([1, 0]))
    assert [h.resource for h in board.all_hexes()] == resource_pool()


def test_distribute_tokens_overwrites_previous_numbers(board) -> None:
    reset_board(board, random.Random(3))
    distribute_tokens(board, random.Random(4))
    numbers = [h.number for h in board.all_hexes() if h.resource != "desert"]
    assert sorted(numbers) == sorted(NUMBER_TOKENS)


def test_outer_start_tables(board) -> None:
    assert outer_start_for(board, board.get(5), clockwise=True).label == 4
    assert outer_start_for(board, board.get(9), clockwise=True).label == 13
    assert outer_start_for(board, board.get(5), clockwise=False).label == 2
    assert outer_start_for(board, board.get(9), clockwise=False).label == 4
    with pytest.raises(ValueError):
        outer_start_for(board, board.get(1), clockwise=True)
