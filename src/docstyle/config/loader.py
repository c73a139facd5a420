"""Configuration loader for the style checker.

Loads a JSON configuration file and returns a validated CheckerConfig
instance. Uses module-level caching so each file is only parsed once per
process.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import platformdirs
from pydantic import ValidationError

from docstyle.application.error_messages import format_validation_errors
from docstyle.config.models import CheckerConfig
from docstyle.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

_APP_NAME = "docstyle"
_USER_CONFIG_FILENAME = "config.json"

# Module-level cache
_config_cache: dict[str, CheckerConfig] = {}

# Default config path — lives next to this module
_DEFAULT_CONFIG_PATH = Path(__file__).parent / "docstyle_default.json"


def user_config_path() -> Path:
    """Location of the per-user configuration file (may not exist)."""
    return Path(platformdirs.user_config_dir(_APP_NAME)) / _USER_CONFIG_FILENAME


def _validate(raw: Any) -> CheckerConfig:
    try:
        return CheckerConfig.model_validate(raw)
    except ValidationError as exc:
        messages = format_validation_errors(exc.errors())
        raise ConfigurationError("; ".join(messages)) from exc


def load_config(path: Optional[Path] = None) -> CheckerConfig:
    """Load and validate checker config from a JSON file.

    Parameters
    ----------
    path : Path | None
        Path to a custom JSON config file.
        If ``None``, the built-in ``docstyle_default.json`` is used.

    Returns
    -------
    CheckerConfig
        Validated configuration instance.

    Raises
    ------
    ConfigurationError
        If the file does not exist, is not JSON, or does not match the
        expected schema.
    """
    config_path = path or _DEFAULT_CONFIG_PATH
    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Config file is not valid JSON: {config_path} ({exc})") from exc

    config = _validate(raw)
    logger.debug("Loaded configuration from %s", config_path)
    _config_cache[cache_key] = config
    return config


def get_config() -> CheckerConfig:
    """Get the active configuration (cached).

    The per-user config file is used when it exists, otherwise the
    built-in default.
    """
    user_path = user_config_path()
    if user_path.exists():
        return load_config(user_path)
    return load_config()


def apply_overrides(config: CheckerConfig, **overrides: Any) -> CheckerConfig:
    """Return a re-validated copy of *config* with CLI overrides applied.

    Keyword names are dotted paths with ``__`` as separator, e.g.
    ``formatting__max_line_width=100``. ``None`` values are ignored.
    """
    raw = config.model_dump(mode="json")
    for key, value in overrides.items():
        if value is None:
            continue
        *parents, leaf = key.split("__")
        target = raw
        for part in parents:
            target = target[part]
        target[leaf] = value
    return _validate(raw)


def clear_cache() -> None:
    """Clear the config cache — useful for testing."""
    _config_cache.clear()
