"""Config loading, validation and freezing."""

from tradesim.config.loader import (
    compute_config_hash,
    compute_payload_hash,
    freeze_config,
    load_config,
    load_monitoring_config,
    serialize_config,
    verify_config_lock,
)
from tradesim.config.models import (
    MonitoringConfig,
    RunConfig,
    SimulationConfig,
    SimulationConfigBuilder,
)
from tradesim.config.validation import ConfigError, FieldError, validate_simulation_config

__all__ = [
    "ConfigError",
    "FieldError",
    "MonitoringConfig",
    "RunConfig",
    "SimulationConfig",
    "SimulationConfigBuilder",
    "compute_config_hash",
    "compute_payload_hash",
    "freeze_config",
    "load_config",
    "load_monitoring_config",
    "serialize_config",
    "validate_simulation_config",
    "verify_config_lock",
]
