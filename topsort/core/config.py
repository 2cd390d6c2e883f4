"""YAML configuration loader with validation."""
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Any

import yaml

from topsort.core.errors import ConfigError
from topsort.core.parser import DEFAULT_EDGE_SEP, DEFAULT_PAIR_SEP


@dataclass
class Config:
    """topsort configuration."""
    edge_sep: str = DEFAULT_EDGE_SEP
    pair_sep: str = DEFAULT_PAIR_SEP
    top_sort: bool = False
    json_logs: bool = False
    verbosity: int = 0

    @property
    def classifier_name(self) -> str:
        return "Top Sort" if self.top_sort else "Depth-First"


def load_config(path: Optional[str] = None) -> Config:
    """Load config from YAML file or return defaults.

    Args:
        path: Path to YAML config file. If None, returns default config.

    Returns:
        Config instance

    Raises:
        FileNotFoundError: If specified path doesn't exist
        yaml.YAMLError: If YAML is invalid
        ConfigError: If a key is unknown or has the wrong type
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    return _parse_config(data)


_TYPES = {
    "edge_sep": str,
    "pair_sep": str,
    "top_sort": bool,
    "json_logs": bool,
    "verbosity": int,
}


def _parse_config(data: Dict[str, Any]) -> Config:
    """Parse config dict into Config dataclass."""
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

    unknown = sorted(set(data) - set(_TYPES))
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    for key, value in data.items():
        expected = _TYPES[key]
        # bool is an int subclass
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise ConfigError(f"Config key {key!r} must be {expected.__name__}, got {value!r}")

    return Config(
        edge_sep=data.get("edge_sep", DEFAULT_EDGE_SEP),
        pair_sep=data.get("pair_sep", DEFAULT_PAIR_SEP),
        top_sort=data.get("top_sort", False),
        json_logs=data.get("json_logs", False),
        verbosity=data.get("verbosity", 0),
    )
