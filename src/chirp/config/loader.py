"""Configuration loader module.

Configuration is layered: a YAML file, then ``CHIRP_*`` environment variables,
then ``${VAR}`` substitution inside string values. The result is validated into a
:class:`ChirpConfig`.
"""

import logging
import os
import re
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from chirp.exceptions import ConfigError

from .schema import ChirpConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "chirp.yaml"

_ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")

# Well-known keys whose segments contain underscores
_KEY_MAPPINGS = {
    "REGISTRY_AUTO_REGISTER": ["registry", "auto_register"],
    "LOGGING_LEVEL": ["logging", "level"],
}

_COMPOUND_WORDS = ("auto_register",)

_config: Optional[ChirpConfig] = None


def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries.

    Args:
        base: Base dictionary
        override: Dictionary with values that override the base

    Returns:
        Merged dictionary where override values take precedence
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value

    return result


def _substitute(value: str) -> str:
    return _ENV_VAR_PATTERN.sub(lambda match: os.environ.get(match.group(1), ""), value)


def resolve_env_vars(config: Any) -> Any:
    """Replace ``${VAR}`` patterns in string values with environment variables.

    Unset variables are replaced with an empty string.
    """
    if isinstance(config, dict):
        return {key: resolve_env_vars(value) for key, value in config.items()}
    if isinstance(config, list):
        return [resolve_env_vars(item) for item in config]
    if isinstance(config, str) and "${" in config:
        return _substitute(config)
    return config


def load_yaml_file(path: str) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Dictionary containing configuration from YAML, empty when the file
        does not exist

    Raises:
        ConfigError: If file cannot be read or parsed
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Error reading {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Top level of {path} must be a mapping, got {type(data).__name__}")
    return data


def _normalize_env_key(env_key: str) -> List[str]:
    """Normalize environment variable key to configuration path.

    Args:
        env_key: Environment variable key without prefix (e.g., "LOGGING_LEVEL")

    Returns:
        List of path segments (e.g., ["logging", "level"])
    """
    if env_key in _KEY_MAPPINGS:
        return list(_KEY_MAPPINGS[env_key])

    path = env_key.lower().split("_")

    # Merge adjacent segments that form a known compound word
    i = 0
    while i < len(path) - 1:
        combined = f"{path[i]}_{path[i + 1]}"
        if combined in _COMPOUND_WORDS:
            path[i] = combined
            path.pop(i + 1)
        else:
            i += 1

    return path


def load_from_env(prefix: str = "CHIRP") -> Dict[str, Any]:
    """Load configuration from environment variables with given prefix.

    ``<PREFIX>_CONFIG`` names the configuration file and is not treated as a
    setting. Values stay strings; ChirpConfig coerces the fields it declares.
    """
    result: Dict[str, Any] = {}
    prefix_upper = f"{prefix.upper()}_"

    for key, value in os.environ.items():
        if not key.startswith(prefix_upper):
            continue
        env_key = key[len(prefix_upper):]
        if not env_key or env_key == "CONFIG":
            continue

        path = _normalize_env_key(env_key)
        current = result
        for part in path[:-1]:
            current = current.setdefault(part, {})
        current[path[-1]] = value

    return result


def load_config(file_path: Optional[str] = None, env_prefix: str = "CHIRP") -> ChirpConfig:
    """Load ChirpConfig from file and environment.

    Args:
        file_path: Path to config file (defaults to ``<PREFIX>_CONFIG`` from the
            environment, then ``chirp.yaml``)
        env_prefix: Prefix for environment variables

    Returns:
        Validated ChirpConfig instance

    Raises:
        ConfigError: On loading or validation failure
    """
    path = file_path or os.environ.get(f"{env_prefix.upper()}_CONFIG", DEFAULT_CONFIG_FILE)

    config_data: Dict[str, Any] = {}
    if os.path.exists(path):
        config_data = merge_dicts(config_data, load_yaml_file(path))
        logger.debug("Loaded configuration file %s", path)

    env_config = load_from_env(env_prefix)
    if env_config:
        config_data = merge_dicts(config_data, env_config)

    config_data = resolve_env_vars(config_data)

    try:
        config = ChirpConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    config.source = path if os.path.exists(path) else None
    return config


def get_config() -> ChirpConfig:
    """Return the process-wide configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: ChirpConfig) -> None:
    """Replace the process-wide configuration."""
    global _config
    _config = config


def reset_config() -> None:
    """Forget the cached configuration so the next ``get_config`` reloads it."""
    global _config
    _config = None
