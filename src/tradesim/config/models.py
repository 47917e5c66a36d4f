"""Configuration models for reproducible simulation runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from tradesim.config.validation import ConfigError, FieldError, validate_simulation_config


@dataclass(frozen=True)
class SimulationConfig:
    initial_balance: int
    win_rate: int
    risk_reward_ratio: float
    total_trades: int
    compounding: bool = True
    platform_fee_rate: float = 0.0

    def __post_init__(self) -> None:
        errors = validate_simulation_config(self)
        if errors:
            raise ConfigError(errors)

    @property
    def win_count(self) -> int:
        return self.total_trades * self.win_rate // 100


class SimulationConfigBuilder:
    """Fluent builder that refuses to build until every required field is set."""

    REQUIRED = ("initial_balance", "win_rate", "risk_reward_ratio", "total_trades")

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def initial_balance(self, amount: int) -> SimulationConfigBuilder:
        self._values["initial_balance"] = amount
        return self

    def win_rate(self, percentage: int) -> SimulationConfigBuilder:
        self._values["win_rate"] = percentage
        return self

    def risk_reward_ratio(self, ratio: float) -> SimulationConfigBuilder:
        self._values["risk_reward_ratio"] = ratio
        return self

    def total_trades(self, count: int) -> SimulationConfigBuilder:
        self._values["total_trades"] = count
        return self

    def compounding(self, enabled: bool) -> SimulationConfigBuilder:
        self._values["compounding"] = enabled
        return self

    def platform_fee_rate(self, percentage: float) -> SimulationConfigBuilder:
        self._values["platform_fee_rate"] = percentage
        return self

    def build(self) -> SimulationConfig:
        missing = [name for name in self.REQUIRED if name not in self._values]
        if missing:
            raise ConfigError([FieldError(name, None, "a value (required)") for name in missing])
        return SimulationConfig(**self._values)


@dataclass(frozen=True)
class MonitoringConfig:
    audit_log_path: str = "runtime/audit.log"


@dataclass(frozen=True)
class RunConfig:
    name: str
    version: str
    run_id_prefix: str
    simulation: SimulationConfig
    seed: Optional[int] = None
    monitoring: MonitoringConfig = field(default_factory=MonitoringConfig)
