"""Load and freeze configuration files."""

from __future__ import annotations

import hashlib
import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import yaml

from tradesim.config.models import MonitoringConfig, RunConfig, SimulationConfig


def load_config(path: str | Path) -> RunConfig:
    path = Path(path)
    data = _load_yaml(path)

    name = str(_require(data, "name"))
    version = str(data.get("version", "1"))
    run_id_prefix = str(data.get("run_id_prefix", name))
    simulation = _parse_simulation(_require(data, "simulation"))
    monitoring = _parse_monitoring(data.get("monitoring", {}))
    seed = data.get("seed")

    return RunConfig(
        name=name,
        version=version,
        run_id_prefix=run_id_prefix,
        simulation=simulation,
        seed=None if seed is None else int(seed),
        monitoring=monitoring,
    )


def load_monitoring_config(path: str | Path) -> MonitoringConfig:
    """Read only the monitoring section, even when the simulation section is invalid."""
    data = _load_yaml(Path(path))
    return _parse_monitoring(data.get("monitoring", {}))


def serialize_config(config: RunConfig) -> dict[str, Any]:
    return asdict(config)


def compute_config_hash(path: str | Path) -> str:
    path = Path(path)
    content = path.read_bytes()
    return hashlib.sha256(content).hexdigest()


def compute_payload_hash(payload: dict[str, Any]) -> str:
    content = json.dumps(payload, sort_keys=True, default=str).encode("utf-8")
    return hashlib.sha256(content).hexdigest()


def freeze_config(path: str | Path, lock_path: Optional[str | Path] = None) -> Path:
    path = Path(path)
    config_hash = compute_config_hash(path)
    lock_path = _lock_path_for(path, lock_path)

    payload = {
        "config_path": str(path),
        "config_hash": config_hash,
        "frozen_at_utc": datetime.now(timezone.utc).isoformat(),
    }
    lock_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return lock_path


def verify_config_lock(path: str | Path, lock_path: Optional[str | Path] = None) -> bool:
    path = Path(path)
    lock_path = _lock_path_for(path, lock_path)
    if not lock_path.exists():
        return False
    payload = json.loads(lock_path.read_text(encoding="utf-8"))
    expected = payload.get("config_hash")
    return expected == compute_config_hash(path)


def _lock_path_for(path: Path, lock_path: Optional[str | Path]) -> Path:
    if lock_path is None:
        return path.with_suffix(path.suffix + ".lock.json")
    return Path(lock_path)


def _load_yaml(path: Path) -> dict[str, Any]:
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Config must be a mapping")
    return data


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"Missing required config key: {key}")
    return data[key]


def _parse_simulation(data: Any) -> SimulationConfig:
    if not isinstance(data, dict):
        raise ValueError("simulation must be a mapping")

    # Values are passed through untouched so validation sees what the file holds.
    return SimulationConfig(
        initial_balance=_require(data, "initial_balance"),
        win_rate=_require(data, "win_rate"),
        risk_reward_ratio=_require(data, "risk_reward_ratio"),
        total_trades=_require(data, "total_trades"),
        compounding=data.get("compounding", True),
        platform_fee_rate=data.get("platform_fee_rate", 0.0),
    )


def _parse_monitoring(data: dict[str, Any]) -> MonitoringConfig:
    return MonitoringConfig(
        audit_log_path=str(data.get("audit_log_path", "runtime/audit.log")),
    )
