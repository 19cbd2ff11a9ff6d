"""
Geometry and randomness helpers for the simulation
"""

from __future__ import annotations
import random
from typing import NamedTuple, Optional


class Rect(NamedTuple):
    """Axis-aligned rectangle, (x, y) is the top-left corner, y grows down"""
    x: float
    y: float
    w: float
    h: float


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def rects_overlap(a: Rect, b: Rect) -> bool:
    """Strict AABB overlap; rectangles that only touch do not overlap"""
    return (
        a.x < b.x + b.w
        and a.x + a.w > b.x
        and a.y < b.y + b.h
        and a.y + a.h > b.y
    )


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Private random source for a simulation"""
    return random.Random(seed)
