"""Run context creation and metadata."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from tradesim.config.loader import compute_config_hash


@dataclass(frozen=True)
class RunContext:
    run_id: str
    config_path: Optional[Path]
    config_hash: str
    started_at: datetime
    seed: Optional[int] = None


def create_run_context(
    config_path: Optional[str | Path],
    run_id_prefix: str,
    run_id: Optional[str] = None,
    seed: Optional[int] = None,
    config_hash: Optional[str] = None,
) -> RunContext:
    """Build run metadata; runs without a config file must pass ``config_hash``."""
    path = Path(config_path) if config_path is not None else None
    if config_hash is None:
        if path is None:
            raise ValueError("config_hash is required when no config file is given")
        config_hash = compute_config_hash(path)
    started_at = datetime.now(timezone.utc)
    if run_id is None:
        stamp = started_at.strftime("%Y%m%dT%H%M%SZ")
        run_id = f"{run_id_prefix}-{stamp}-{config_hash[:8]}"
    return RunContext(
        run_id=run_id,
        config_path=path,
        config_hash=config_hash,
        started_at=started_at,
        seed=seed,
    )
