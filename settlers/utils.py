# utils.py: Pure helper functions (axial geometry, resource hands)

from __future__ import annotations

import math
from typing import Dict, List, Tuple

from settlers.constants import BOARD_RADIUS, SIDES


def axial_hexes(radius: int = BOARD_RADIUS) -> List[Tuple[int, int]]:
    """Return the axial coordinates within *radius* of the origin, row by row.

    Rows run top to bottom (increasing r) and each row left to right
    (increasing q), which is also the order hexes are labeled in.
    """
    coords: List[Tuple[int, int]] = []
    for r in range(-radius, radius + 1):
        q1 = max(-radius, -r - radius)
        q2 = min(radius, -r + radius)
        for q in range(q1, q2 + 1):
            coords.append((q, r))
    return coords


def hex_center(q: int, r: int) -> Tuple[float, float]:
    """Convert axial hex coordinates to a pixel-space center (pointy-top layout)."""
    x = math.sqrt(3) * (q + r / 2)
    y = 1.5 * r
    return x, y


def corner_point(q: int, r: int, corner: int) -> Tuple[float, float]:
    """Pixel position of *corner* of hex (q, r); corner 0 is the top vertex,
    numbering clockwise."""
    cx, cy = hex_center(q, r)
    angle = math.radians(60 * corner - 90)
    return cx + math.cos(angle), cy + math.sin(angle)


def key_point(x: float, y: float) -> Tuple[int, int]:
    """Snap a floating-point coordinate to an integer key for deduplication."""
    return (round(x * 1000), round(y * 1000))


def opposite(side: int) -> int:
    return (side + 3) % SIDES


def side_corners(side: int) -> Tuple[int, int]:
    """Side i runs from corner i to corner i + 1."""
    return side, (side + 1) % SIDES


# ── Resource helpers ──────────────────────────────────────────────────────────

def can_afford(hand: Dict[str, int], cost: Dict[str, int]) -> bool:
    return all(hand.get(res, 0) >= amount for res, amount in cost.items())


def pay_cost(hand: Dict[str, int], cost: Dict[str, int]) -> None:
    for res, amount in cost.items():
        hand[res] -= amount


def add_resources(hand: Dict[str, int], gains: Dict[str, int]) -> None:
    for res, amount in gains.items():
        hand[res] = hand.get(res, 0) + amount


def missing_resources(hand: Dict[str, int], cost: Dict[str, int]) -> Dict[str, int]:
    return {
        res: amount - hand.get(res, 0)
        for res, amount in cost.items()
        if hand.get(res, 0) < amount
    }
