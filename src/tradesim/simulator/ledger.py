"""Trade-by-trade replay of an outcome sequence against the account balance."""

from __future__ import annotations

from typing import Sequence

from tradesim.config.models import SimulationConfig
from tradesim.simulator.models import LedgerReplay, TradeRecord
from tradesim.simulator.rounding import round_money

# A loss always costs 1% of the position; risk_reward_ratio only scales wins.
LOSS_PCT = 1.0


def simulate_ledger(config: SimulationConfig, outcomes: Sequence[bool]) -> LedgerReplay:
    if len(outcomes) != config.total_trades:
        raise ValueError(
            f"Outcome sequence has {len(outcomes)} entries, expected {config.total_trades}"
        )

    balance = float(config.initial_balance)
    total_fee_paid = 0.0
    trades: list[TradeRecord] = []

    for is_win in outcomes:
        if config.compounding:
            position_size = balance
        else:
            position_size = float(config.initial_balance)

        if is_win:
            pnl = position_size * config.risk_reward_ratio / 100
        else:
            pnl = -position_size * LOSS_PCT / 100

        fee = 0.0
        if config.platform_fee_rate != 0:
            fee = position_size * config.platform_fee_rate / 100
            pnl -= fee
            total_fee_paid += fee

        pnl = round_money(pnl)
        balance += pnl
        trades.append(TradeRecord(pnl=pnl, fee=round_money(fee), balance_after=balance))

    return LedgerReplay(trades=tuple(trades), final_balance=balance, total_fee_paid=total_fee_paid)
