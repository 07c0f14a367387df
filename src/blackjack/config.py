"""
Loading of the YAML game configuration.

Only presentation and session settings live here. The house rules are
fixed in BlackjackRules and are not configurable.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class GameConfig:
    """Settings for one run of the game."""
    starting_bankroll: int = 100
    ascii_suits: bool = False
    show_banner: bool = True
    log_level: str = "WARNING"

# section -> {key: (field name, expected type)}
_SCHEMA = {
    'table': {'starting_bankroll': ('starting_bankroll', int)},
    'display': {
        'ascii_suits': ('ascii_suits', bool),
        'show_banner': ('show_banner', bool),
    },
    'logging': {'level': ('log_level', str)},
}

def load_config(config_path: Optional[str] = None) -> GameConfig:
    """Load configuration from YAML file, or defaults when no path is given."""
    if config_path is None:
        return GameConfig()
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
    logger.debug("Loaded config from %s", config_path)
    return config_from_dict(raw or {})

def config_from_dict(raw: Any) -> GameConfig:
    """Validate a parsed config mapping and build a GameConfig."""
    if not isinstance(raw, dict):
        raise ConfigError("Config must be a mapping of sections")

    values: Dict[str, Any] = {}
    for section, entries in raw.items():
        if section not in _SCHEMA:
            raise ConfigError(f"Unknown config section: {section!r}")
        if entries is None:
            continue
        if not isinstance(entries, dict):
            raise ConfigError(f"Section {section!r} must be a mapping")
        for key, value in entries.items():
            if key not in _SCHEMA[section]:
                raise ConfigError(f"Unknown key {section}.{key}")
            name, expected = _SCHEMA[section][key]
            # bool is a subclass of int
            if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
                raise ConfigError(
                    f"{section}.{key} must be {expected.__name__}, got {type(value).__name__}")
            values[name] = value

    config = GameConfig(**values)
    if config.starting_bankroll <= 0:
        raise ConfigError("table.starting_bankroll must be positive")
    if logging.getLevelName(config.log_level.upper()) not in (
            logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL):
        raise ConfigError(f"Unknown logging level: {config.log_level!r}")
    return config
