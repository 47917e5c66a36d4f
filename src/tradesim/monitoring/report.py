"""Human and JSON renderings of a simulation result."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional, Sequence

from tradesim.monitoring.notifier import Notifier
from tradesim.runtime.context import RunContext
from tradesim.simulator.models import ResultSummary, SimulationResult, TradeRecord


def _money(value: float) -> str:
    return f"{value:.2f}$"


def format_summary(summary: ResultSummary) -> list[str]:
    return [
        f"Final Balance: {_money(summary.final_balance)}",
        f"Gross PNL: {_money(summary.gross_profit)} ({summary.gross_profit_pct:.2f}%)",
        f"Net PNL: {_money(summary.net_profit)} ({summary.net_profit_pct:.2f}%)",
        f"Fee: {_money(summary.total_fee_paid)}",
        f"MDD: {summary.max_drawdown_pct:.2f}%",
    ]


def format_ledger(trades: Sequence[TradeRecord]) -> list[str]:
    width = len(str(len(trades)))
    return [
        f"#{index:>{width}} pnl={trade.pnl:+.2f} fee={trade.fee:.2f} balance={trade.balance_after:.2f}"
        for index, trade in enumerate(trades, start=1)
    ]


def print_results(result: SimulationResult, notifier: Notifier, show_trades: bool = False) -> None:
    if show_trades:
        for line in format_ledger(result.trades):
            notifier.notify("info", line)
    notifier.notify("info", f"Trades: {len(result.trades)} (wins={result.wins}, losses={result.losses})")
    for line in format_summary(result.summary):
        notifier.notify("success", line)


def build_report(result: SimulationResult, run_context: Optional[RunContext] = None) -> dict[str, Any]:
    report: dict[str, Any] = {"generated_at_utc": datetime.now(timezone.utc).isoformat()}
    if run_context is not None:
        report["run"] = {
            **asdict(run_context),
            "config_path": str(run_context.config_path) if run_context.config_path else None,
            "started_at": run_context.started_at.isoformat(),
        }
    report.update(result.to_dict())
    return report


def write_report(
    result: SimulationResult,
    path: str | Path,
    run_context: Optional[RunContext] = None,
) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    report = build_report(result, run_context)
    path.write_text(json.dumps(report, indent=2, default=str), encoding="utf-8")
    return path
