"""Randomised win/loss sequences with an exact number of wins."""

from __future__ import annotations

import random
from typing import Optional


def generate_outcomes(
    total_trades: int,
    win_rate: int,
    rng: Optional[random.Random] = None,
) -> list[bool]:
    if total_trades < 1:
        raise ValueError("total_trades must be at least 1")
    if not 0 <= win_rate <= 100:
        raise ValueError("win_rate must be within [0, 100]")
    if rng is None:
        rng = random.Random()

    win_count = total_trades * win_rate // 100
    outcomes = [False] * total_trades

    placed = 0
    while placed < win_count:
        index = rng.randrange(total_trades)
        if outcomes[index]:
            continue
        outcomes[index] = True
        placed += 1

    rng.shuffle(outcomes)
    return outcomes
