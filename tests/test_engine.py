import json
import math
import random

from tradesim.config import SimulationConfig
from tradesim.simulator import TradingSimulator, round_money, simulate


def _config(**overrides):
    values = dict(
        initial_balance=1000,
        win_rate=50,
        risk_reward_ratio=2,
        total_trades=4,
        compounding=False,
        platform_fee_rate=0.0,
    )
    values.update(overrides)
    return SimulationConfig(**values)


def test_replay_fixed_sequence():
    result = TradingSimulator(_config()).replay([True, False, True, False])

    assert result.outcomes == (True, False, True, False)
    assert result.balances == [1020.0, 1010.0, 1030.0, 1020.0]
    assert result.summary.final_balance == 1020.0
    assert result.summary.gross_profit == 20.0
    assert result.summary.gross_profit_pct == 2.0
    assert result.summary.total_fee_paid == 0
    assert result.summary.max_drawdown_pct == -0.98
    assert result.wins == 2
    assert result.losses == 2


def test_replay_is_idempotent():
    config = _config(total_trades=8, compounding=True, risk_reward_ratio=2.5, platform_fee_rate=0.1)
    outcomes = [True, False, False, True, True, False, True, False]
    simulator = TradingSimulator(config)

    first = simulator.replay(outcomes)
    second = simulator.replay(outcomes)

    assert first == second
    assert json.dumps(first.to_dict()) == json.dumps(second.to_dict())


def test_single_winning_trade():
    result = simulate(_config(total_trades=1, win_rate=100))

    assert result.outcomes == (True,)
    assert len(result.trades) == 1
    assert result.summary.final_balance == 1020.0
    assert result.summary.max_drawdown_pct == 0


def test_seeded_runs_are_reproducible():
    config = _config(total_trades=100, compounding=True, risk_reward_ratio=2.5, platform_fee_rate=0.1)

    first = TradingSimulator.from_seed(config, 42).simulate()
    second = TradingSimulator.from_seed(config, 42).simulate()

    assert first == second


def test_simulation_invariants_hold_for_random_runs():
    rng = random.Random(2024)
    for win_rate in (0, 25, 50, 75, 100):
        config = _config(total_trades=60, win_rate=win_rate, compounding=True, platform_fee_rate=0.2)
        result = TradingSimulator(config, rng).simulate()

        assert len(result.trades) == config.total_trades
        assert result.wins == config.win_count
        assert result.summary.total_fee_paid == round_money(sum(trade.fee for trade in result.trades))
        assert result.summary.max_drawdown_pct <= 0

        previous = config.initial_balance
        for trade in result.trades:
            assert trade.balance_after == previous + trade.pnl
            previous = trade.balance_after


def test_to_dict_is_json_ready():
    result = TradingSimulator(_config(platform_fee_rate=0.1)).replay([True, False, True, False])
    payload = json.loads(json.dumps(result.to_dict()))

    assert payload["config"]["initial_balance"] == 1000
    assert payload["summary"]["total_fee_paid"] == 4.0
    assert payload["trades"][0] == {"win": True, "pnl": 19.0, "fee": 1.0, "balance_after": 1019.0}
    assert len(payload["trades"]) == 4


def test_huge_starting_balance_simulates():
    result = TradingSimulator.from_seed(_config(initial_balance=10**28, total_trades=10), 5).simulate()
    assert len(result.trades) == 10
    assert result.summary.max_drawdown_pct <= 0


def test_overflowing_balance_does_not_raise():
    config = _config(total_trades=1100, win_rate=100, risk_reward_ratio=100, compounding=True)
    result = TradingSimulator.from_seed(config, 1).simulate()

    assert len(result.trades) == 1100
    assert result.summary.final_balance == math.inf
