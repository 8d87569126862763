# game.py: SettlersGame, a single game session (board, players, dice, turns)

from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional, Tuple

from settlers.board import Board
from settlers.constants import DESERT, RESOURCES
from settlers.models import Player
from settlers.placement import place_city, place_road, place_settlement
from settlers.randomizer import reset_board
from settlers.results import GameStateError, PlacementResult
from settlers.settlers_models import GameConfig
from settlers.utils import add_resources

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Commands:\n"
    "  board\n"
    "  hand\n"
    "  roll\n"
    "  road <hex> <edge>\n"
    "  settlement <hex> <corner>\n"
    "  city <hex> <corner>\n"
    "  end"
)


class SettlersGame:
    """One game session.

    Every session owns its board, its players and its random generator, so
    any number of sessions can live side by side and a fixed seed replays
    the same board and dice.
    """

    def __init__(
        self,
        players: Optional[List[str]] = None,
        seed: Optional[int] = None,
        config: Optional[GameConfig] = None,
    ):
        if config is None:
            config = GameConfig.from_names(players or [], seed=seed)
        self.config = config
        self.rng = random.Random(config.seed)
        self.players: List[Player] = [Player(name=p.name, color=p.color) for p in config.players]
        self.board = Board()
        reset_board(self.board, self.rng)
        self.current_player: int = 0
        self.round_num: int = 1
        self.dice_rolled: bool = False
        self.last_roll: Optional[Tuple[int, int, int]] = None
        self.winner: Optional[Player] = None

    @classmethod
    def new_game(cls, players: List[str], seed: Optional[int] = None) -> "SettlersGame":
        return cls(players, seed=seed)

    def reroll_board(self) -> None:
        """Deal a fresh board. Only allowed while no piece has been placed."""
        if not self.board.is_empty:
            raise GameStateError("Cannot re-roll a board that already has pieces on it")
        reset_board(self.board, self.rng)
        logger.debug("Board re-rolled")

    @property
    def player(self) -> Player:
        return self.players[self.current_player]

    # ── Display ───────────────────────────────────────────────────────────────

    def render_board(self) -> str:
        return self.board.dump()

    def status(self) -> str:
        lines = ["Players:"]
        for p in self.players:
            lines.append(
                f"  {p.name:10} {p.color:6} VP:{p.victory_points:2} "
                f"{p.pieces_str()} Hand[{p.hand_str()}]"
            )
        return "\n".join(lines)

    # ── Dice & production ─────────────────────────────────────────────────────

    def roll_dice(self) -> Tuple[int, int, int]:
        die1 = self.rng.randint(1, 6)
        die2 = self.rng.randint(1, 6)
        self.last_roll = (die1, die2, die1 + die2)
        logger.info("Rolled %d + %d = %d", die1, die2, die1 + die2)
        return self.last_roll

    def distribute_resources(self, roll: int) -> Dict[str, Dict[str, int]]:
        """Credit every building next to a hex numbered *roll*.

        A settlement earns one card and a city two. Returns the gains per
        player name, including players who earned nothing.
        """
        gains: Dict[str, Dict[str, int]] = {p.name: {r: 0 for r in RESOURCES} for p in self.players}
        for tile in self.board.hexes_with_number(roll):
            for building in tile.buildings():
                if building.owner is None:
                    continue
                gains[building.owner.name][tile.resource] += building.victory_points
        for p in self.players:
            add_resources(p.hand, gains[p.name])
        return gains

    def grant_starting_resources(self, player_idx: int, label: int, corner: int) -> Dict[str, int]:
        """One card per producing hex around a second initial settlement."""
        gains: Dict[str, int] = {r: 0 for r in RESOURCES}
        for tile in self.board.corner_hexes(self.board.get(label).corner(corner)):
            if tile.resource != DESERT:
                gains[tile.resource] += 1
        add_resources(self.players[player_idx].hand, gains)
        return gains

    # ── Building ──────────────────────────────────────────────────────────────

    def place_road(self, player_idx: int, label: int, edge: int, **kwargs) -> PlacementResult:
        result = place_road(self.board, self.players[player_idx], label, edge, **kwargs)
        return self._after_build(result)

    def place_settlement(self, player_idx: int, label: int, corner: int, **kwargs) -> PlacementResult:
        result = place_settlement(self.board, self.players[player_idx], label, corner, **kwargs)
        return self._after_build(result)

    def place_city(self, player_idx: int, label: int, corner: int) -> PlacementResult:
        return self._after_build(place_city(self.board, self.players[player_idx], label, corner))

    def _after_build(self, result: PlacementResult) -> PlacementResult:
        if result.ok and self.winner is None:
            for p in self.players:
                if p.victory_points >= self.config.victory_points:
                    self.winner = p
                    logger.info("%s wins with %d victory points", p.name, p.victory_points)
        return result

    # ── Setup phase ───────────────────────────────────────────────────────────

    def setup_order(self) -> List[int]:
        order = list(range(len(self.players)))
        return order + list(reversed(order))

    def setup_placement(
        self, player_idx: int, label: int, corner: int, edge_label: int, edge: int, second: bool
    ) -> PlacementResult:
        """Free settlement plus a free road leading away from it.

        Nothing is placed unless both pieces are legal.
        """
        player = self.players[player_idx]
        result = place_settlement(self.board, player, label, corner, free=True, setup=True)
        if not result.ok:
            return result
        road_result = place_road(
            self.board, player, edge_label, edge, free=True, setup_at=(label, corner)
        )
        if not road_result.ok:
            player.take_back(self.board.remove_building(label, corner))
            return road_result
        if second:
            self.grant_starting_resources(player_idx, label, corner)
        return self._after_build(
            PlacementResult.success(f"{player.name} placed a settlement and a road.")
        )

    # ── Turns ─────────────────────────────────────────────────────────────────

    def end_turn(self) -> None:
        if not self.dice_rolled:
            raise GameStateError("Roll the dice before ending the turn")
        self.dice_rolled = False
        self.current_player = (self.current_player + 1) % len(self.players)
        if self.current_player == 0:
            self.round_num += 1

    def execute(self, command: str) -> str:
        """Run one command for the current player and return the feedback text."""
        parts = command.strip().lower().split()
        if not parts:
            return ""
        player = self.player
        verb, args = parts[0], parts[1:]

        if verb == "help":
            return HELP_TEXT
        if verb == "board":
            return self.render_board()
        if verb == "hand":
            return f"{player.hand_str()}\n{player.pieces_str()}"
        if verb == "roll":
            if self.dice_rolled:
                return "You already rolled this turn."
            die1, die2, total = self.roll_dice()
            self.dice_rolled = True
            if total == 7:
                return f"{player.name} rolled {die1} + {die2} = 7. Nothing is produced."
            self.distribute_resources(total)
            return f"{player.name} rolled {die1} + {die2} = {total}."
        if verb in ("road", "settlement", "city"):
            if len(args) != 2:
                return f"Usage: {verb} <hex> <{'edge' if verb == 'road' else 'corner'}>"
            try:
                label, index = int(args[0]), int(args[1])
            except ValueError:
                return "Hex and position must be whole numbers."
            if not self.dice_rolled:
                return "Roll the dice first."
            build = {
                "road": self.place_road,
                "settlement": self.place_settlement,
                "city": self.place_city,
            }[verb]
            result = build(self.current_player, label, index)
            if self.winner is not None:
                return f"{result.message}\n{self.winner.name} wins!"
            return result.message
        if verb == "end":
            if not self.dice_rolled:
                return "Roll the dice first."
            self.end_turn()
            return f"{self.player.name}'s turn."
        return "Unknown command. Type 'help'."

    # ── Interactive loop ──────────────────────────────────────────────────────

    def _prompt_ints(self, prompt: str, count: int) -> Tuple[int, ...]:
        while True:
            raw = input(prompt).strip().split()
            if len(raw) == count and all(part.isdigit() for part in raw):
                return tuple(int(part) for part in raw)
            print(f"Enter {count} numbers separated by spaces.")

    def setup_phase(self) -> None:
        print("Setup phase: each player places 2 settlements and 2 roads.")
        order = self.setup_order()
        for turn_idx, pidx in enumerate(order):
            player = self.players[pidx]
            print(f"\n{player.name}'s setup turn.")
            while True:
                label, corner = self._prompt_ints("Settlement <hex> <corner>: ", 2)
                edge_label, edge = self._prompt_ints("Road <hex> <edge>: ", 2)
                result = self.setup_placement(
                    pidx, label, corner, edge_label, edge, second=turn_idx >= len(self.players)
                )
                print(result.message)
                if result.ok:
                    break
        self.current_player = 0

    def run(self) -> None:
        print("\nWelcome to Settlers.")
        print(self.render_board())
        self.setup_phase()
        while self.winner is None:
            print(f"\n=== Round {self.round_num} | {self.player.name}'s turn ===")
            print(self.status())
            turn = (self.round_num, self.current_player)
            while self.winner is None and turn == (self.round_num, self.current_player):
                reply = self.execute(input("Command (help for a list): "))
                if reply:
                    print(reply)
        print(f"\n{self.winner.name} wins with {self.winner.victory_points} victory points!")
