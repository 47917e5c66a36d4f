import random

from tradesim.config import SimulationConfigBuilder
from tradesim.monitoring import ConsoleNotifier, print_results
from tradesim.simulator import TradingSimulator


config = (
    SimulationConfigBuilder()
    .initial_balance(1000)
    .total_trades(10)
    .win_rate(50)
    .risk_reward_ratio(2)
    .platform_fee_rate(0.1)
    .compounding(True)
    .build()
)

simulator = TradingSimulator(config, rng=random.Random(7))
result = simulator.simulate()
print_results(result, ConsoleNotifier(), show_trades=True)

# Same sequence, no compounding.
flat = SimulationConfigBuilder().initial_balance(1000).total_trades(10).win_rate(50).risk_reward_ratio(2)
flat_result = TradingSimulator(flat.compounding(False).build()).replay(result.outcomes)
print("Flat sizing final balance:", flat_result.summary.final_balance)
print("Compounded final balance:", result.summary.final_balance)
