"""
Settings Loading for Terminal Wrapped

Loads the packaged defaults.yaml with OmegaConf and merges an optional user
config file over it. Later sources override earlier ones:

    defaults.yaml  <  user config file  <  overrides (from CLI flags)

Examples:
    >>> settings = load_settings()
    >>> settings.analysis.top_n
    10

    >>> settings = load_settings(overrides={"history": {"shell": "bash"}, "analysis": {"top_n": 5}})
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import ConfigKeyError, OmegaConfBaseException

load_dotenv()

DEFAULTS_PATH = Path(__file__).resolve().parent.parent / "configs" / "defaults.yaml"
CONFIG_ENV_VAR = "TERMINAL_WRAPPED_CONFIG"

MIN_REPORT_WIDTH = 40


def load_settings(
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> DictConfig:
    """
    Load settings, merging defaults, user file and overrides.

    Args:
        config_path: Optional user YAML file (defaults to TERMINAL_WRAPPED_CONFIG env variable)
        overrides: Nested dict applied last (e.g., {"history": {"shell": "zsh"}})

    Returns:
        Merged, read-only DictConfig

    Raises:
        ValueError: If the user config file does not exist, is not valid YAML,
            contains unknown keys or holds out-of-range values
    """
    settings = OmegaConf.load(DEFAULTS_PATH)
    # Unknown keys in user files are errors, not silent additions
    OmegaConf.set_struct(settings, True)

    if config_path is None and os.getenv(CONFIG_ENV_VAR):
        config_path = Path(os.getenv(CONFIG_ENV_VAR))

    try:
        if config_path is not None:
            config_path = Path(config_path).expanduser()
            if not config_path.is_file():
                raise ValueError(f"Config file {config_path} does not exist")
            settings = OmegaConf.merge(settings, OmegaConf.load(config_path))

        if overrides:
            settings = OmegaConf.merge(settings, overrides)

        _validate(settings, config_path)
    except ConfigKeyError as e:
        raise ValueError(f"Unknown setting in {config_path or 'overrides'}: {e}") from e
    except (yaml.YAMLError, OmegaConfBaseException) as e:
        raise ValueError(f"Invalid config file {config_path}: {e}") from e

    OmegaConf.set_readonly(settings, True)
    return settings


def resolve_log_dir(settings: DictConfig) -> Optional[Path]:
    """Return the configured log directory, falling back to LOGS_PATH env variable."""
    if settings.logging.log_dir:
        return Path(settings.logging.log_dir).expanduser()
    if os.getenv("LOGS_PATH"):
        return Path(os.getenv("LOGS_PATH"))
    return None


def _validate(settings: DictConfig, config_path: Optional[Path]) -> None:
    """Reject values the pipeline and report cannot use."""
    source = config_path or "settings"

    def _int_at_least(key: str, value: Any, minimum: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
            raise ValueError(f"Invalid value in {source}: {key} must be an integer >= {minimum}")

    _int_at_least("analysis.top_n", settings.analysis.top_n, 1)
    _int_at_least("report.width", settings.report.width, MIN_REPORT_WIDTH)
    _int_at_least("report.top_commands_shown", settings.report.top_commands_shown, 0)
    _int_at_least("report.max_categories_shown", settings.report.max_categories_shown, 0)
