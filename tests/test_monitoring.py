import io
import json

from tradesim.config import SimulationConfig
from tradesim.monitoring import (
    AuditLog,
    ConsoleNotifier,
    format_ledger,
    format_summary,
    print_results,
    write_report,
)
from tradesim.runtime import create_run_context
from tradesim.simulator import TradingSimulator


def _result():
    config = SimulationConfig(
        initial_balance=1000,
        win_rate=50,
        risk_reward_ratio=2,
        total_trades=4,
        compounding=False,
        platform_fee_rate=0.1,
    )
    return TradingSimulator(config).replay([True, False, True, False])


def test_format_summary_lines():
    lines = format_summary(_result().summary)
    assert lines == [
        "Final Balance: 1016.00$",
        "Gross PNL: 16.00$ (1.60%)",
        "Net PNL: 12.00$ (1.20%)",
        "Fee: 4.00$",
        "MDD: -1.08%",
    ]


def test_format_ledger_lines():
    lines = format_ledger(_result().trades)
    assert lines[0] == "#1 pnl=+19.00 fee=1.00 balance=1019.00"
    assert lines[1] == "#2 pnl=-11.00 fee=1.00 balance=1008.00"
    assert len(lines) == 4


def test_console_notifier_colors():
    stream = io.StringIO()
    notifier = ConsoleNotifier(stream=stream)
    notifier.notify("success", "ok")
    notifier.notify("unknown", "plain")
    assert stream.getvalue() == "\033[0;32mok\033[0m\n\033[0mplain\033[0m\n"


def test_print_results_without_color():
    stream = io.StringIO()
    print_results(_result(), ConsoleNotifier(color=False, stream=stream), show_trades=True)
    lines = stream.getvalue().splitlines()
    assert lines[0].startswith("#1 ")
    assert "Trades: 4 (wins=2, losses=2)" in lines
    assert lines[-1] == "MDD: -1.08%"


def test_write_report(tmp_path):
    context = create_run_context(None, "test", seed=7, config_hash="abcdef0123456789")
    path = write_report(_result(), tmp_path / "reports" / "run.json", context)

    report = json.loads(path.read_text(encoding="utf-8"))
    assert report["run"]["run_id"].startswith("test-")
    assert report["run"]["run_id"].endswith("-abcdef01")
    assert report["run"]["seed"] == 7
    assert report["run"]["config_path"] is None
    assert report["summary"]["final_balance"] == 1016.0
    assert report["wins"] == 2
    assert len(report["trades"]) == 4


def test_audit_log_appends_json_lines(tmp_path):
    audit = AuditLog(tmp_path / "logs" / "audit.log", run_id="run-1", config_hash="hash")
    audit.log("run_start", {"seed": 1})
    audit.log("run_complete", {"final_balance": 1016.0})

    records = [json.loads(line) for line in (tmp_path / "logs" / "audit.log").read_text().splitlines()]
    assert [record["event"] for record in records] == ["run_start", "run_complete"]
    assert records[0]["run_id"] == "run-1"
    assert records[1]["payload"] == {"final_balance": 1016.0}
