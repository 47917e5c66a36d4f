"""Single-path trading outcome simulator."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from tradesim.config.models import SimulationConfig
from tradesim.simulator.ledger import simulate_ledger
from tradesim.simulator.models import SimulationResult
from tradesim.simulator.sequence import generate_outcomes
from tradesim.simulator.statistics import compute_summary


class TradingSimulator:
    def __init__(self, config: SimulationConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random()

    @classmethod
    def from_seed(cls, config: SimulationConfig, seed: Optional[int]) -> TradingSimulator:
        return cls(config, random.Random(seed))

    def simulate(self) -> SimulationResult:
        outcomes = generate_outcomes(self.config.total_trades, self.config.win_rate, self.rng)
        return self.replay(outcomes)

    def replay(self, outcomes: Sequence[bool]) -> SimulationResult:
        """Run the deterministic stages on a fixed outcome sequence."""
        ledger = simulate_ledger(self.config, outcomes)
        summary = compute_summary(ledger.trades, self.config.initial_balance)
        return SimulationResult(
            config=self.config,
            outcomes=tuple(bool(outcome) for outcome in outcomes),
            trades=ledger.trades,
            summary=summary,
        )


def simulate(config: SimulationConfig, rng: Optional[random.Random] = None) -> SimulationResult:
    return TradingSimulator(config, rng).simulate()
