# results.py: Placement outcomes and error types

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from settlers.constants import HEX_COUNT, SIDES


class OutOfRangeError(ValueError):
    """Raised when a hex label or an edge/corner index is outside its domain."""


class GameStateError(RuntimeError):
    """Raised when a game session is asked to do something its state forbids."""


class Outcome(str, Enum):
    OK = "ok"
    INVALID_POSITION = "invalid_position"
    INSUFFICIENT_RESOURCES = "insufficient_resources"
    NO_PIECES_LEFT = "no_pieces_left"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class PlacementResult:
    outcome: Outcome
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, message: str = "") -> "PlacementResult":
        return cls(Outcome.OK, message)


def check_label(label: int) -> int:
    if not isinstance(label, int) or isinstance(label, bool) or not 1 <= label <= HEX_COUNT:
        raise OutOfRangeError(f"Hex label must be 1..{HEX_COUNT}, got {label!r}")
    return label


def check_index(index: int, what: str = "index") -> int:
    if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < SIDES:
        raise OutOfRangeError(f"{what} must be 0..{SIDES - 1}, got {index!r}")
    return index
