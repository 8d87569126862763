#!/usr/bin/env python3
# main.py: Entry point: prompt for players, launch game

from __future__ import annotations

import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from settlers.constants import COLORS, MAX_PLAYERS, MIN_PLAYERS
from settlers.game import SettlersGame
from settlers.settlers_models import GameConfig, PlayerConfig


def prompt_players() -> List[PlayerConfig]:
    while True:
        raw = input(f"Number of players ({MIN_PLAYERS}-{MAX_PLAYERS}): ").strip()
        if raw.isdigit() and MIN_PLAYERS <= int(raw) <= MAX_PLAYERS:
            n = int(raw)
            break
        print(f"Please enter a number from {MIN_PLAYERS} to {MAX_PLAYERS}.")

    players: List[PlayerConfig] = []
    for i in range(n):
        while True:
            name = input(f"Player {i + 1} name: ").strip()
            if any(p.name == name for p in players):
                print("That name is taken.")
                continue
            try:
                players.append(PlayerConfig(name=name, color=COLORS[i]))
                break
            except ValidationError as exc:
                print(exc.errors()[0]["msg"])
    return players


def parse_seed(argv: List[str]) -> Optional[int]:
    if len(argv) < 2:
        return None
    try:
        return int(argv[1])
    except ValueError:
        print(f"Ignoring seed {argv[1]!r}: not a whole number.")
        return None


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    config = GameConfig(players=prompt_players(), seed=parse_seed(sys.argv))
    game = SettlersGame(config=config)
    game.run()


if __name__ == "__main__":
    main()
