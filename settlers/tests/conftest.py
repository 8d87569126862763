from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from settlers.board import Board  # noqa: E402
from settlers.models import Player  # noqa: E402


class ScriptedRandom:
    """Stand-in for random.Random that replays fixed draws."""

    def __init__(self, draws: List[int], shuffle=None):
        self.draws = list(draws)
        self._shuffle = shuffle

    def randint(self, a: int, b: int) -> int:
        value = self.draws.pop(0)
        assert a <= value <= b
        return value

    def shuffle(self, seq: list) -> None:
        if self._shuffle is not None:
            self._shuffle(seq)


@pytest.fixture
def board() -> Board:
    return Board()


@pytest.fixture
def alice() -> Player:
    return Player(name="Alice", color="red")


@pytest.fixture
def bob() -> Player:
    return Player(name="Bob", color="white")


def give(player: Player, **cards: int) -> Dict[str, int]:
    for res, count in cards.items():
        player.hand[res] = count
    return player.hand
