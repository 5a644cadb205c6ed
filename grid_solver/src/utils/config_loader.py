"""Loads YAML/JSON configuration files and global engine settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def default_config_path() -> Path:
    return Path(__file__).resolve().parents[2] / "configs" / "engine_config.yaml"


def load_engine_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the engine configuration, or an empty mapping if none exists."""
    if path is None:
        path = default_config_path()
    if path.exists():
        return load_config(str(path))
    return {}


ENGINE_CONFIG: Dict[str, Any] = load_engine_config()

_CASCADE_CONF = ENGINE_CONFIG.get("cascade", {})
CASCADE_THRESHOLD: int = int(_CASCADE_CONF.get("threshold", 9))
CASCADE_BASELINE: int = int(_CASCADE_CONF.get("baseline", 0))
CASCADE_MAX_STEPS: int = int(_CASCADE_CONF.get("max_steps", 1000))
CASCADE_REPORT_STEP: int = int(_CASCADE_CONF.get("report_step", 100))

_BASIN_CONF = ENGINE_CONFIG.get("basins", {})
BASIN_WALL_VALUE: int = int(_BASIN_CONF.get("wall_value", 9))
BASIN_TOP_N: int = int(_BASIN_CONF.get("top_n", 3))

_RISK_CONF = ENGINE_CONFIG.get("risk", {})
RISK_MAX_VALUE: int = int(_RISK_CONF.get("max_value", 9))
LARGE_CAVE_FACTOR: int = int(_RISK_CONF.get("large_cave_factor", 5))

LOG_LEVEL: str = str(ENGINE_CONFIG.get("log_level", "INFO")).upper()


def set_cascade_threshold(value: int) -> None:
    """Override the cascade trigger threshold at runtime."""
    global CASCADE_THRESHOLD
    CASCADE_THRESHOLD = value
    ENGINE_CONFIG.setdefault("cascade", {})["threshold"] = value


def set_cascade_max_steps(value: int) -> None:
    """Override the number of simulated cascade steps."""
    global CASCADE_MAX_STEPS
    CASCADE_MAX_STEPS = value
    ENGINE_CONFIG.setdefault("cascade", {})["max_steps"] = value


def set_basin_wall_value(value: int) -> None:
    """Override the value treated as a basin boundary."""
    global BASIN_WALL_VALUE
    BASIN_WALL_VALUE = value
    ENGINE_CONFIG.setdefault("basins", {})["wall_value"] = value


def set_large_cave_factor(value: int) -> None:
    """Override the tiling factor used for the large cave."""
    global LARGE_CAVE_FACTOR
    LARGE_CAVE_FACTOR = value
    ENGINE_CONFIG.setdefault("risk", {})["large_cave_factor"] = value


def print_runtime_config() -> None:
    """Print a summary of the current runtime configuration."""
    info = {
        "cascade_threshold": CASCADE_THRESHOLD,
        "cascade_baseline": CASCADE_BASELINE,
        "cascade_max_steps": CASCADE_MAX_STEPS,
        "basin_wall_value": BASIN_WALL_VALUE,
        "basin_top_n": BASIN_TOP_N,
        "large_cave_factor": LARGE_CAVE_FACTOR,
    }
    print("Runtime configuration:")
    for k, v in info.items():
        print(f"  {k}: {v}")
