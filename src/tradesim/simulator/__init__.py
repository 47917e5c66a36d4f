"""Simulation engine."""

from tradesim.simulator.engine import TradingSimulator, simulate
from tradesim.simulator.ledger import simulate_ledger
from tradesim.simulator.models import LedgerReplay, ResultSummary, SimulationResult, TradeRecord
from tradesim.simulator.rounding import round_money
from tradesim.simulator.sequence import generate_outcomes
from tradesim.simulator.statistics import compute_summary, max_drawdown_pct

__all__ = [
    "LedgerReplay",
    "ResultSummary",
    "SimulationResult",
    "TradeRecord",
    "TradingSimulator",
    "compute_summary",
    "generate_outcomes",
    "max_drawdown_pct",
    "round_money",
    "simulate",
    "simulate_ledger",
]
