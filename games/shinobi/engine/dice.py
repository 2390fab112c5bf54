# games/shinobi/engine/dice.py
import random
from typing import Any, Optional, Sequence, Tuple


def rng_for(seed: Optional[int] = None) -> random.Random:
    # seeded for tests and replays, system entropy otherwise
    return random.Random(seed)


def chance(p: float, r: random.Random) -> bool:
    """One uniform draw; p >= 1 is guaranteed and does not consume a draw."""
    if p >= 1:
        return True
    if p <= 0:
        return False
    return r.random() < p


def percent_roll(r: random.Random) -> float:
    # uniform in [0, 100)
    return r.random() * 100


def pick_index(count: int, r: random.Random) -> int:
    if count <= 0:
        raise ValueError("nothing to pick from")
    return min(int(r.random() * count), count - 1)


def weighted_branch(table: Sequence[Tuple[float, Any]], r: random.Random) -> Any:
    """
    table is a list of (cumulative threshold, outcome) pairs ending at 1.0.
    Returns the first outcome whose threshold is above the draw.
    """
    draw = r.random()
    for threshold, outcome in table:
        if draw < threshold:
            return outcome
    return table[-1][1]
