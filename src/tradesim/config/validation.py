"""Eager validation of simulation parameters."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tradesim.config.models import SimulationConfig


@dataclass(frozen=True)
class FieldError:
    field: str
    value: Any
    expected: str

    def __str__(self) -> str:
        return f"{self.field}={self.value!r} (expected {self.expected})"


class ConfigError(ValueError):
    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = list(errors)
        details = "; ".join(str(error) for error in self.errors)
        super().__init__(f"Invalid simulation config: {details}")

    @property
    def fields(self) -> list[str]:
        return [error.field for error in self.errors]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def validate_simulation_config(config: SimulationConfig) -> list[FieldError]:
    """Return every field that falls outside its allowed range.

    A zero ``initial_balance`` is rejected here rather than surfacing later
    as a division by zero in the percentage figures.
    """
    errors: list[FieldError] = []

    if not _is_int(config.initial_balance) or config.initial_balance <= 0:
        errors.append(FieldError("initial_balance", config.initial_balance, "integer > 0"))
    if not _is_int(config.win_rate) or not 0 <= config.win_rate <= 100:
        errors.append(FieldError("win_rate", config.win_rate, "integer in [0, 100]"))
    if not _is_finite_number(config.risk_reward_ratio) or config.risk_reward_ratio < 0:
        errors.append(FieldError("risk_reward_ratio", config.risk_reward_ratio, "finite number >= 0"))
    if not _is_int(config.total_trades) or config.total_trades < 1:
        errors.append(FieldError("total_trades", config.total_trades, "integer >= 1"))
    if not isinstance(config.compounding, bool):
        errors.append(FieldError("compounding", config.compounding, "true or false"))
    if not _is_finite_number(config.platform_fee_rate) or config.platform_fee_rate < 0:
        errors.append(FieldError("platform_fee_rate", config.platform_fee_rate, "finite number >= 0"))

    return errors
