"""Summary statistics over a finished trade ledger."""

from __future__ import annotations

from typing import Sequence

from tradesim.simulator.models import ResultSummary, TradeRecord
from tradesim.simulator.rounding import round_money


def max_drawdown_pct(trades: Sequence[TradeRecord], initial_balance: float) -> float:
    """Deepest peak-to-trough fall, as a non-positive percentage of the peak."""
    peak_balance = float(initial_balance)
    worst_drawdown = 0.0

    for trade in trades:
        peak_balance = max(peak_balance, trade.balance_after)
        drawdown = (trade.balance_after - peak_balance) / peak_balance
        worst_drawdown = min(worst_drawdown, drawdown)

    return round_money(worst_drawdown * 100)


def compute_summary(trades: Sequence[TradeRecord], initial_balance: float) -> ResultSummary:
    if not trades:
        raise ValueError("Cannot summarise an empty ledger")

    one_pct = initial_balance / 100
    total_fee_paid = round_money(sum(trade.fee for trade in trades))
    final_balance = trades[-1].balance_after
    gross_profit = final_balance - initial_balance
    net_profit = gross_profit - total_fee_paid

    return ResultSummary(
        final_balance=final_balance,
        total_fee_paid=total_fee_paid,
        gross_profit=gross_profit,
        gross_profit_pct=round_money(gross_profit / one_pct),
        net_profit=net_profit,
        net_profit_pct=round_money(net_profit / one_pct),
        max_drawdown_pct=max_drawdown_pct(trades, initial_balance),
    )
