from __future__ import annotations

import random
from typing import Optional

MAX_ROLLS = 1000


def roll_die(sides: int, rng: Optional[random.Random] = None) -> int:
    """Return a value between 1 and ``sides`` inclusive."""
    if sides < 1:
        raise ValueError("a die needs at least one side")
    return (rng or random).randint(1, sides)


def roll_dice(rolls: int, sides: int, rng: Optional[random.Random] = None) -> list[int]:
    # nothing to roll for non-positive counts or sideless dice
    if rolls < 1 or sides < 1:
        return []
    rolls = min(rolls, MAX_ROLLS)
    return [roll_die(sides, rng) for _ in range(rolls)]


def coerce_count(raw: Optional[str]) -> int:
    """Turn a query parameter into a whole count; junk counts as zero."""
    if raw is None:
        return 0
    try:
        return int(float(raw.strip() or 0))
    except (ValueError, OverflowError):
        return 0
