from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, field_validator


class RunConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    targets: list[str]
    verbose: bool = False
    debug_log: str | None = None

    @field_validator("targets")
    @classmethod
    def targets_must_not_be_empty(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("targets must not be empty")
        for target in v:
            if not target.strip():
                raise ValueError("targets must not contain blank entries")
        return v


def is_path_target(target: str) -> bool:
    return target.endswith(".py") or "/" in target or "\\" in target


def load_config(path: Path) -> RunConfig:
    """Load and validate a run config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at top level")

    config = RunConfig(**raw)

    # Resolve relative file paths relative to config file location
    resolved = []
    for target in config.targets:
        target_path = Path(target)
        if is_path_target(target) and not target_path.is_absolute():
            target = str((config_dir / target_path).resolve())
        resolved.append(target)
    config.targets = resolved

    if config.debug_log is not None and not Path(config.debug_log).is_absolute():
        config.debug_log = str((config_dir / config.debug_log).resolve())

    return config
