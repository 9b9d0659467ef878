"""Configuration loader with environment variable substitution"""

import json
import logging
import os
import re
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from btce.config.models import ClientConfig
from btce.config.validator import validate_config_constraints


logger = logging.getLogger("btce.config")

# ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r'\$\{([^}:]+)(?::-([^}]*))?\}')


def substitute_env_vars(data: Any) -> Any:
    """
    Recursively substitute environment variables in configuration data.

    Supports ${VAR_NAME} and ${VAR_NAME:-default} syntax in string values.
    """
    if isinstance(data, dict):
        return {key: substitute_env_vars(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [substitute_env_vars(item) for item in data]
    elif isinstance(data, str):
        def _replace(match: "re.Match") -> str:
            var_name, default = match.group(1), match.group(2)
            env_value = os.getenv(var_name)
            if env_value is not None:
                return env_value
            if default is not None:
                return default
            raise ValueError(
                f"Environment variable {var_name} not found but required in config"
            )

        return ENV_VAR_PATTERN.sub(_replace, data)
    else:
        return data


def _validate_config_path(config_path: str) -> Path:
    """
    Reject traversal sequences and non-JSON paths.

    Raises:
        ValueError: If path contains '..' segments or is not a .json file
    """
    normalized = config_path.replace("\\", "/")
    if ".." in normalized.split("/"):
        raise ValueError(
            f"Config path contains path traversal sequence: {config_path}"
        )

    config_file = Path(config_path)
    if config_file.suffix.lower() != ".json":
        raise ValueError(
            f"Config path must point to a .json file, got: {config_path}"
        )

    return config_file


def load_config(config_path: str = "config/config.json", load_env: bool = True) -> ClientConfig:
    """
    Load and validate client configuration from JSON file.

    Args:
        config_path: Path to config JSON file
        load_env: Whether to load .env file first (default: True)

    Returns:
        Validated ClientConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config validation fails or path is unsafe
        json.JSONDecodeError: If config file is invalid JSON
    """
    if load_env:
        load_dotenv()

    config_file = _validate_config_path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, 'r') as f:
        raw_config = json.load(f)

    config_data = substitute_env_vars(raw_config)

    try:
        config = ClientConfig(**config_data)
        validate_config_constraints(config)
    except Exception as e:
        raise ValueError(f"Config validation failed: {e}")

    logger.debug(f"Loaded config from {config_file}")
    return config
