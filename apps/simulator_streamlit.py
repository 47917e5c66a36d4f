from __future__ import annotations

import json

import streamlit as st

from tradesim.config import ConfigError, SimulationConfig
from tradesim.monitoring import build_report
from tradesim.simulator import TradingSimulator


def _format_currency(value: float) -> str:
    return f"${value:,.2f}"


def main() -> None:
    st.set_page_config(page_title="Trade Simulator", layout="wide")
    st.title("Trade Outcome Simulator")

    initial_balance = int(st.sidebar.number_input("Initial balance", min_value=1, value=1000, step=100))
    win_rate = int(st.sidebar.slider("Win rate %", min_value=0, max_value=100, value=50))
    risk_reward_ratio = float(st.sidebar.number_input("Risk/reward ratio", min_value=0.0, value=2.5, step=0.1))
    total_trades = int(st.sidebar.number_input("Total trades", min_value=1, value=100, step=10))
    platform_fee_rate = float(
        st.sidebar.number_input("Platform fee %", min_value=0.0, value=0.1, step=0.01, format="%.3f")
    )
    compounding = st.sidebar.checkbox("Compounding", value=True)
    seed_text = st.sidebar.text_input("Seed (blank for random)", value="")

    try:
        config = SimulationConfig(
            initial_balance=initial_balance,
            win_rate=win_rate,
            risk_reward_ratio=risk_reward_ratio,
            total_trades=total_trades,
            compounding=compounding,
            platform_fee_rate=platform_fee_rate,
        )
    except ConfigError as exc:
        for error in exc.errors:
            st.error(str(error))
        return

    seed = int(seed_text) if seed_text.strip().lstrip("-").isdigit() else None
    result = TradingSimulator.from_seed(config, seed).simulate()
    summary = result.summary

    col_a, col_b, col_c, col_d = st.columns(4)
    col_a.metric("Final Balance", _format_currency(summary.final_balance))
    col_b.metric("Gross PNL", _format_currency(summary.gross_profit), f"{summary.gross_profit_pct:.2f}%")
    col_c.metric("Net PNL", _format_currency(summary.net_profit), f"{summary.net_profit_pct:.2f}%")
    col_d.metric("Max Drawdown", f"{summary.max_drawdown_pct:.2f}%")

    col_e, col_f, col_g = st.columns(3)
    col_e.metric("Fees Paid", _format_currency(summary.total_fee_paid))
    col_f.metric("Wins", str(result.wins))
    col_g.metric("Losses", str(result.losses))

    st.subheader("Balance")
    st.line_chart([float(initial_balance)] + result.balances)

    st.subheader("Ledger")
    st.dataframe(result.to_dict()["trades"], use_container_width=True)

    st.download_button(
        "Download report",
        data=json.dumps(build_report(result), indent=2, default=str),
        file_name="simulation_report.json",
        mime="application/json",
    )


if __name__ == "__main__":
    main()
