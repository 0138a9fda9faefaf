"""Application configuration: settings schema and layered loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "HUNKDIFF_"


class Settings(BaseModel):
    context_radius: int = Field(default=3, ge=0, description="Unchanged lines shown around each change")
    encoding:       str = Field(default="utf-8", description="Text encoding of compared files")
    log_level:      str = Field(
        default="WARNING",
        pattern="^(TRACE|DEBUG|INFO|SUCCESS|WARNING|ERROR|CRITICAL)$",
        description="loguru level for stderr logging",
    )


def _from_yaml(path: Path) -> dict[str, Any]:
    """Mapping stored in path; empty when the file is absent or blank."""
    if not path.is_file():
        return {}
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")
    return data


def _from_env() -> dict[str, str]:
    """Non-empty HUNKDIFF_<FIELD> variables keyed by field name."""
    found = {name: os.getenv(f"{ENV_PREFIX}{name.upper()}") for name in Settings.model_fields}
    return {name: val for name, val in found.items() if val}


def load_config(overrides: dict[str, Any] = None, config_file: str = CONFIG_FILE) -> Settings:
    """Layer config_file, then HUNKDIFF_<FIELD> env vars, then non-None CLI overrides into Settings."""
    layers = [_from_yaml(Path(config_file)), _from_env()]
    if overrides:
        layers.append({k: v for k, v in overrides.items() if v is not None})

    data: dict[str, Any] = {}
    for layer in layers:
        data.update(layer)
    return Settings(**data)
