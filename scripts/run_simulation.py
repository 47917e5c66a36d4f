from __future__ import annotations

import argparse
from dataclasses import asdict
from pathlib import Path
from typing import Optional

from tradesim.config import (
    ConfigError,
    SimulationConfig,
    SimulationConfigBuilder,
    compute_payload_hash,
    load_config,
    load_monitoring_config,
)
from tradesim.monitoring import AuditLog, ConsoleNotifier, print_results, write_report
from tradesim.runtime import create_run_context
from tradesim.simulator import TradingSimulator



DEFAULT_AUDIT_LOG = "runtime/audit.log"
SIMULATION_FLAGS = (
    "initial_balance",
    "win_rate",
    "risk_reward_ratio",
    "total_trades",
    "platform_fee_rate",
)


def _parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulate a sequence of fixed-odds trades.")
    parser.add_argument("--config", help="YAML run config; cannot be combined with the simulation flags")
    parser.add_argument("--initial-balance", type=int)
    parser.add_argument("--win-rate", type=int)
    parser.add_argument("--risk-reward-ratio", type=float)
    parser.add_argument("--total-trades", type=int)
    parser.add_argument("--platform-fee-rate", type=float)
    parser.add_argument("--no-compounding", action="store_true")
    parser.add_argument("--seed", type=int, help="Overrides the config seed")
    parser.add_argument("--output", help="Write a JSON report to this path")
    parser.add_argument("--audit-log", help=f"Overrides the config path (default {DEFAULT_AUDIT_LOG})")
    parser.add_argument("--show-trades", action="store_true")
    parser.add_argument("--no-color", action="store_true")
    return parser.parse_args(argv)


def _simulation_flags_given(args: argparse.Namespace) -> list[str]:
    given = ["--" + name.replace("_", "-") for name in SIMULATION_FLAGS if getattr(args, name) is not None]
    if args.no_compounding:
        given.append("--no-compounding")
    return given


def _config_from_flags(args: argparse.Namespace) -> SimulationConfig:
    builder = SimulationConfigBuilder()
    if args.initial_balance is not None:
        builder.initial_balance(args.initial_balance)
    if args.win_rate is not None:
        builder.win_rate(args.win_rate)
    if args.risk_reward_ratio is not None:
        builder.risk_reward_ratio(args.risk_reward_ratio)
    if args.total_trades is not None:
        builder.total_trades(args.total_trades)
    if args.platform_fee_rate is not None:
        builder.platform_fee_rate(args.platform_fee_rate)
    builder.compounding(not args.no_compounding)
    return builder.build()


def _rejected_audit_path(args: argparse.Namespace) -> str:
    if args.audit_log:
        return args.audit_log
    if args.config:
        # The simulation section was invalid but the file itself parsed.
        return load_monitoring_config(args.config).audit_log_path
    return DEFAULT_AUDIT_LOG


def main(argv: Optional[list[str]] = None) -> int:
    args = _parse_args(argv)
    notifier = ConsoleNotifier(color=not args.no_color)

    if args.config:
        conflicting = _simulation_flags_given(args)
        if conflicting:
            notifier.notify("error", f"--config cannot be combined with {', '.join(conflicting)}")
            return 2

    try:
        if args.config:
            run_config = load_config(args.config)
            simulation = run_config.simulation
            seed = args.seed if args.seed is not None else run_config.seed
            context = create_run_context(args.config, run_config.run_id_prefix, seed=seed)
            audit_path = Path(args.audit_log or run_config.monitoring.audit_log_path)
        else:
            simulation = _config_from_flags(args)
            seed = args.seed
            context = create_run_context(
                None,
                "cli",
                seed=seed,
                config_hash=compute_payload_hash(asdict(simulation)),
            )
            audit_path = Path(args.audit_log or DEFAULT_AUDIT_LOG)
    except ConfigError as exc:
        audit = AuditLog(_rejected_audit_path(args))
        audit.log("config_rejected", {"config": args.config, "errors": [str(error) for error in exc.errors]})
        notifier.notify("error", "Invalid configuration:")
        for error in exc.errors:
            notifier.notify("error", f"  {error}")
        return 2
    except ValueError as exc:
        notifier.notify("error", str(exc))
        return 2

    audit = AuditLog(audit_path, run_id=context.run_id, config_hash=context.config_hash)
    audit.log("run_start", {"config": asdict(simulation), "seed": seed})

    result = TradingSimulator.from_seed(simulation, seed).simulate()
    audit.log("run_complete", {"summary": asdict(result.summary), "wins": result.wins, "losses": result.losses})

    print_results(result, notifier, show_trades=args.show_trades)
    if args.output:
        output_path = write_report(result, args.output, context)
        print(f"Wrote {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
