# Area: Shared
"""
overcookied_client._client_config — Client Configuration
========================================================

Loads configuration from a JSON file, then the environment (a ``.env``
file in the working directory is read first), and validates it.
Environment values win over the file.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .errors import ConfigurationError

logger = logging.getLogger("overcookied_client")

DEFAULT_LOG_FILE = "overcookied_client.log"
DEFAULT_CLICKS_PER_SECOND = 5

# Environment variable → config key
ENV_MAPPINGS = {
    "OVERCOOKIED_API_URL": "api_url",
    "OVERCOOKIED_ORIGIN": "origin",
    "OVERCOOKIED_TOKEN": "token",
    "OVERCOOKIED_USER_ID": "user_id",
    "OVERCOOKIED_LOG_FILE": "log_file",
    "OVERCOOKIED_CLICKS_PER_SECOND": "clicks_per_second",
    "OVERCOOKIED_VERIFY_SESSION": "verify_session",
}

_TRUE_VALUES = ("true", "1", "yes")


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load config from file and environment.

    Args:
        config_path: Optional JSON file. A missing file is ignored.

    Returns:
        Config dict with defaults filled in.

    Raises:
        ConfigurationError: If the file is not a JSON object or a value
            has the wrong type.
    """
    config: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    config = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Config file {path} is not valid JSON: {e}") from e
            if not isinstance(config, dict):
                raise ConfigurationError(f"Config file {path} must contain a JSON object")
        else:
            logger.warning(f"Config file not found: {path}")

    load_dotenv()
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            config[config_key] = os.environ[env_key]

    config.setdefault("log_file", DEFAULT_LOG_FILE)
    config["clicks_per_second"] = _as_int(
        config.get("clicks_per_second", DEFAULT_CLICKS_PER_SECOND), "clicks_per_second"
    )
    config["verify_session"] = _as_bool(config.get("verify_session", False))
    return config


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate required configuration keys.

    Raises:
        ConfigurationError: If the token is missing, or there is neither
            an API URL nor an origin.
    """
    missing = []
    if not config.get("token"):
        missing.append("token")
    if not config.get("api_url") and not config.get("origin"):
        missing.append("api_url|origin")
    if missing:
        raise ConfigurationError(f"Missing required config keys: {missing}", missing_keys=missing)
    if config.get("clicks_per_second", DEFAULT_CLICKS_PER_SECOND) <= 0:
        raise ConfigurationError("clicks_per_second must be positive")


def _as_int(value: Any, key: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{key} must be an integer, got {value!r}") from e


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return bool(value)
