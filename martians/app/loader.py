from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

from martians.api.config import GameConfig

DEFAULT_SETTINGS = Path(__file__).resolve().parents[2] / "config" / "default.yaml"


def read_settings(path: Path) -> Dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing settings file {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level, got {type(data).__name__}")
    return data


def load_settings(path: Optional[Path] = None, overrides: Optional[Dict[str, Any]] = None) -> GameConfig:
    """
    Build a GameConfig from a YAML file plus command-line overrides.
    Unknown keys are rejected so typos do not silently fall back to defaults.
    """
    data = read_settings(path or DEFAULT_SETTINGS)
    data.update({k: v for k, v in (overrides or {}).items() if v is not None})

    unknown = set(data) - GameConfig.field_names()
    if unknown:
        raise ValueError(f"Unknown settings: {', '.join(sorted(unknown))}")
    try:
        return GameConfig(**data)
    except TypeError as e:
        raise ValueError(f"Invalid settings: {e}") from None
