"""Application configuration constants for CSV Lens."""

# =============================================================================
# IMPORTS
# =============================================================================

import logging
import os
import sys
from pathlib import Path
from typing import Mapping

import yaml

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION LOADING
# =============================================================================

API_BASE_ENV = "CSVLENS_API_BASE"
DEFAULT_API_BASE = "http://localhost:8000"


def _get_executable_dir() -> Path:
    """Get the directory containing the executable or the package."""
    if getattr(sys, "frozen", False):
        # Running as PyInstaller executable
        return Path(sys.executable).parent
    return Path(__file__).parent


def load_config(config_file: Path) -> dict:
    """Load configuration from a YAML file, returning {} if absent or invalid."""
    if not config_file.exists():
        logger.info("No config file found at %s, using defaults", config_file)
        return {}

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load config from %s: %s", config_file, e)
        return {}

    if not isinstance(config, dict):
        logger.warning("Ignoring config file %s: expected a mapping", config_file)
        return {}

    logger.info("Loaded configuration from %s", config_file)
    return config


def resolve_api_base(config: Mapping, environ: Mapping[str, str]) -> str:
    """Environment variable first, then the config file, then the default."""
    value = environ.get(API_BASE_ENV) or config.get("API_BASE") or DEFAULT_API_BASE
    return str(value).rstrip("/")


def resolve_log_level(config: Mapping) -> str:
    """Configured level name, or INFO when it is not a known level."""
    level = str(config.get("LOG_LEVEL", "INFO")).upper()
    if level not in logging.getLevelNamesMapping():
        logger.warning("Unknown LOG_LEVEL %r in config, using INFO", level)
        return "INFO"
    return level


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

_config = load_config(_get_executable_dir() / "config.yaml")

# Base URL of the analysis service
API_BASE = resolve_api_base(_config, os.environ)

# Default directory for file dialogs
DEFAULT_DIR = os.path.expanduser(str(_config.get("DEFAULT_DIR", "~")))

# Log level used when --debug is not given
LOG_LEVEL = resolve_log_level(_config)

logger.debug("Using API_BASE: %s", API_BASE)
