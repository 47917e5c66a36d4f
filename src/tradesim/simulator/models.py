"""Simulation data structures."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from tradesim.config.models import SimulationConfig


@dataclass(frozen=True)
class TradeRecord:
    pnl: float
    fee: float
    balance_after: float


@dataclass(frozen=True)
class LedgerReplay:
    trades: tuple[TradeRecord, ...]
    final_balance: float
    total_fee_paid: float  # unrounded


@dataclass(frozen=True)
class ResultSummary:
    final_balance: float
    total_fee_paid: float
    gross_profit: float
    gross_profit_pct: float
    net_profit: float
    net_profit_pct: float
    max_drawdown_pct: float


@dataclass(frozen=True)
class SimulationResult:
    config: SimulationConfig
    outcomes: tuple[bool, ...]
    trades: tuple[TradeRecord, ...]
    summary: ResultSummary

    @property
    def wins(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome)

    @property
    def losses(self) -> int:
        return len(self.outcomes) - self.wins

    @property
    def balances(self) -> list[float]:
        return [trade.balance_after for trade in self.trades]

    def to_dict(self) -> dict[str, Any]:
        return {
            "config": asdict(self.config),
            "summary": asdict(self.summary),
            "wins": self.wins,
            "losses": self.losses,
            "trades": [
                {"win": outcome, **asdict(trade)}
                for outcome, trade in zip(self.outcomes, self.trades)
            ],
        }
