# randomizer.py: Board setup (resource shuffle and spiral token distribution)

from __future__ import annotations

import logging
import random
from typing import Dict, List

from settlers.board import Board
from settlers.constants import (
    CLOCKWISE_OUTER_START,
    COUNTER_CLOCKWISE_OUTER_START,
    DESERT,
    NUMBER_TOKENS,
    RESOURCE_COUNTS,
)
from settlers.hexes import Hex

logger = logging.getLogger(__name__)


def resource_pool() -> List[str]:
    resources: List[str] = []
    for res, count in RESOURCE_COUNTS.items():
        resources.extend([res] * count)
    return resources


def coin_flip(rng: random.Random) -> bool:
    return rng.randint(0, 1) == 1


def reset_board(board: Board, rng: random.Random) -> None:
    """Clear *board*, deal the shuffled resources onto hexes 1..19, then
    distribute the number tokens from the center outward."""
    resources = resource_pool()
    rng.shuffle(resources)
    board.clear()
    for tile, res in zip(board.all_hexes(), resources):
        tile.set_resource(res)
        if res == DESERT:
            tile.set_number(0)
    distribute_tokens(board, rng)


def distribute_tokens(board: Board, rng: random.Random) -> None:
    """Spiral the tokens out from the center.

    The walk direction and the starting hex of the middle ring are random;
    the token order is not. Tokens are taken from the end of NUMBER_TOKENS and
    the desert is stepped over without using one.
    """
    clockwise = coin_flip(rng)
    tokens = NUMBER_TOKENS[:]
    step = 1 if clockwise else -1

    def assign(tile: Hex) -> None:
        if tile.resource != DESERT:
            tile.set_number(tokens.pop())

    for tile in board.center:
        assign(tile)

    curr_middle = rng.randint(0, len(board.middle) - 1)
    for _ in range(len(board.middle)):
        assign(board.middle[curr_middle])
        curr_middle = (curr_middle + step) % len(board.middle)

    pivot = board.middle[curr_middle]
    outer_start = outer_start_for(board, pivot, clockwise)
    curr_outer = board.outer.index(outer_start)
    for _ in range(len(board.outer)):
        assign(board.outer[curr_outer])
        curr_outer = (curr_outer + step) % len(board.outer)

    logger.debug(
        "Distributed tokens %s starting at middle hex %d",
        "clockwise" if clockwise else "counter-clockwise", pivot.label,
    )


def outer_start_for(board: Board, middle_hex: Hex, clockwise: bool) -> Hex:
    table: Dict[int, int] = CLOCKWISE_OUTER_START if clockwise else COUNTER_CLOCKWISE_OUTER_START
    if middle_hex.label not in table:
        raise ValueError(f"Hex {middle_hex.label} is not on the middle ring")
    return board.get(table[middle_hex.label])
