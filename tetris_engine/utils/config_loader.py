"""
Configuration Loader - Load and validate configuration from YAML.

Sections:
- game: rules engine settings (board size, speed curve)
- score: best-score file location
- driver: event loop behaviour
- logging: log level and optional log file

Missing sections and keys fall back to defaults; unknown keys are ignored.
"""
import logging
import yaml
from pathlib import Path
from typing import Optional, Any, Dict
from dataclasses import dataclass, field, asdict

from ..game.config import TetrisConfig
from ..game.score_store import DEFAULT_SCORE_FILE

logger = logging.getLogger(__name__)


@dataclass
class ScoreConfig:
    """Best-score persistence settings."""
    path: str = DEFAULT_SCORE_FILE


@dataclass
class DriverConfig:
    """Event loop settings."""
    auto_restart: bool = False
    show_ghost: bool = True
    poll_interval: float = 0.05


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class Config:
    """Complete application configuration."""
    game: TetrisConfig = field(default_factory=TetrisConfig)
    score: ScoreConfig = field(default_factory=ScoreConfig)
    driver: DriverConfig = field(default_factory=DriverConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _find_config_file() -> Optional[Path]:
    """Look for config.yaml in the usual places."""
    possible_paths = [
        Path("config.yaml"),
        Path(__file__).parent.parent.parent / "config.yaml",
    ]

    for path in possible_paths:
        if path.exists():
            return path
    return None


def config_from_dict(data: Optional[Dict[str, Any]]) -> Config:
    """Build a Config from parsed YAML data."""
    config = Config()
    if not data:
        return config

    if 'game' in data:
        config.game = _dict_to_dataclass(data['game'], TetrisConfig)

    if 'score' in data:
        config.score = _dict_to_dataclass(data['score'], ScoreConfig)

    if 'driver' in data:
        config.driver = _dict_to_dataclass(data['driver'], DriverConfig)

    if 'logging' in data:
        config.logging = _dict_to_dataclass(data['logging'], LoggingConfig)

    return config


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to config.yaml in the
            working directory or project root)

    Returns:
        Config object with all settings

    Raises:
        ValueError: If a section holds invalid values (e.g. board size 0)
    """
    path = Path(config_path) if config_path is not None else _find_config_file()

    if path is None or not path.exists():
        logger.info("No config file found, using defaults")
        return Config()

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    return config_from_dict(data)


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    data = asdict(config)

    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


def configure_logging(config: LoggingConfig) -> None:
    """
    Configure the root logger from a LoggingConfig.

    Args:
        config: Level name and optional log file
    """
    level = getattr(logging, str(config.level).upper(), logging.INFO)
    handlers: list = [logging.StreamHandler()]

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )
