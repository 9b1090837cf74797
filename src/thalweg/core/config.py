"""Configuration loader and dataclasses for thalweg settings."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import yaml


@dataclass
class GraphConfig:
    """Graph construction and search settings."""
    resolution: float = 1.0
    metric: str = "planar"
    use_index: bool = True
    round_priorities: bool = False


@dataclass
class InputConfig:
    """Sounding ingestion settings."""
    pattern: str = "*.txt"
    min_depth: float = 0.0


@dataclass
class OutputConfig:
    """Output writer settings."""
    format: str = "dms"
    filename: str = "path"


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class ThalwegConfig:
    """Complete thalweg configuration."""
    graph: GraphConfig = field(default_factory=GraphConfig)
    input: InputConfig = field(default_factory=InputConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "ThalwegConfig":
        """Load configuration from a YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls(
            graph=GraphConfig(**data.get("graph", {})),
            input=InputConfig(**data.get("input", {})),
            output=OutputConfig(**data.get("output", {})),
            logging=LoggingConfig(**data.get("logging", {})),
        )


# Global config instance - lazily loaded
_config: Optional[ThalwegConfig] = None


def default_config_path() -> Path:
    """configs/thalweg_defaults.yaml relative to the project root."""
    return Path(__file__).resolve().parents[3] / "configs" / "thalweg_defaults.yaml"


def get_config(config_path: Optional[Path] = None) -> ThalwegConfig:
    """Get the global configuration, loading from file if not already loaded.

    Args:
        config_path: Path to the config file. If None, uses default location.

    Returns:
        The ThalwegConfig instance.
    """
    global _config

    if _config is None or config_path is not None:
        if config_path is None:
            config_path = default_config_path()

        if config_path.exists():
            _config = ThalwegConfig.from_yaml(config_path)
        else:
            # Use defaults if config file not found
            _config = ThalwegConfig()

    return _config


def reload_config(config_path: Optional[Path] = None) -> ThalwegConfig:
    """Force reload of configuration from file."""
    global _config
    _config = None
    return get_config(config_path)
