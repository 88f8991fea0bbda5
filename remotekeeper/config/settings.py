"""Configuration utilities for remotekeeper."""

import os
import shutil
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ..exceptions import ConfigurationError
from .constants import (
    DEFAULT_GRAPH_TIMEOUT_SECONDS,
    DEFAULT_RCLONE_BINARY,
    ENV_VAR_DEFINITIONS,
    RCLONE_CONFIG_FILENAME,
    RCLONE_SECURE_CONFIG_FILENAME,
)


def validate_env_var(name: str, value: Optional[str]) -> Tuple[bool, Optional[str]]:
    """Validate a single environment variable value.

    Args:
        name: The environment variable name.
        value: The current value (or None if not set).

    Returns:
        Tuple of (is_valid, error_message).
    """
    if name not in ENV_VAR_DEFINITIONS:
        return True, None  # Unknown vars are always valid

    if value is None:
        return True, None

    valid_values = ENV_VAR_DEFINITIONS[name].get("valid_values")
    if valid_values is None:
        return True, None

    if value.lower() not in [v.lower() for v in valid_values]:
        return False, f"Invalid value '{value}' for {name}. Valid values: {valid_values}"

    return True, None


def validate_all_env_vars() -> List[str]:
    """Validate all remotekeeper environment variables.

    Returns:
        List of error messages (empty if all valid).
    """
    errors = []
    for name in ENV_VAR_DEFINITIONS:
        is_valid, error = validate_env_var(name, os.environ.get(name))
        if not is_valid:
            errors.append(error)
    return errors


def get_env_var(name: str, validate: bool = True) -> Optional[str]:
    """Get an environment variable with optional validation.

    Args:
        name: The environment variable name.
        validate: Whether to validate the value against known definitions.

    Returns:
        The environment variable value, its default, or None.

    Raises:
        ConfigurationError: If validate=True and the value is invalid.
    """
    value = os.environ.get(name)

    if validate and value is not None:
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            raise ConfigurationError(error, setting=name)

    if value is None and name in ENV_VAR_DEFINITIONS:
        return ENV_VAR_DEFINITIONS[name].get("default")

    return value


def _get_float(name: str, fallback: Optional[float]) -> Optional[float]:
    raw = get_env_var(name)
    if raw is None or raw == "":
        return fallback
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"Expected a number for {name}, got '{raw}'", setting=name) from None


def get_config_dir() -> Path:
    """Directory that holds the rclone config file."""
    return Path(get_env_var("REMOTEKEEPER_CONFIG_DIR") or "").expanduser()


def get_rclone_config_path(secure: bool = False) -> Path:
    """Path of the rclone config file handed to rclone via RCLONE_CONFIG.

    An explicit REMOTEKEEPER_RCLONE_CONFIG wins for the plain file; the
    secure (encrypted) variant always lives in the config directory.
    """
    explicit = get_env_var("REMOTEKEEPER_RCLONE_CONFIG")
    if explicit and not secure:
        return Path(explicit).expanduser()

    filename = RCLONE_SECURE_CONFIG_FILENAME if secure else RCLONE_CONFIG_FILENAME
    return get_config_dir() / filename


def get_rclone_binary() -> str:
    """Resolve the rclone binary, preferring the configured path."""
    configured = get_env_var("REMOTEKEEPER_RCLONE_BINARY")
    if configured:
        return configured
    return shutil.which(DEFAULT_RCLONE_BINARY) or DEFAULT_RCLONE_BINARY


def get_encryption_key() -> Optional[str]:
    return get_env_var("REMOTEKEEPER_ENCRYPTION_KEY")


def get_rclone_timeout() -> Optional[float]:
    """Timeout for a single rclone call; None means wait for completion."""
    return _get_float("REMOTEKEEPER_RCLONE_TIMEOUT", None)


def get_graph_timeout() -> float:
    timeout = _get_float("REMOTEKEEPER_GRAPH_TIMEOUT", DEFAULT_GRAPH_TIMEOUT_SECONDS)
    return timeout if timeout is not None else DEFAULT_GRAPH_TIMEOUT_SECONDS


def shell_expand_credentials() -> bool:
    """Whether `$(rclone obscure ...)` credential tokens get expanded.

    Defaults to False: arguments reach rclone as an argv array with no shell
    in between, so the tokens are passed through literally.
    """
    return (get_env_var("REMOTEKEEPER_SHELL_EXPAND_CREDENTIALS") or "false").lower() == "true"


def get_log_level() -> str:
    return (get_env_var("REMOTEKEEPER_LOG_LEVEL") or "INFO").upper()


def get_env_info() -> Dict[str, Dict]:
    """Get information about all remotekeeper environment variables.

    Returns:
        Dictionary mapping env var names to their info including:
        - description: What the variable does
        - value: Current value (masked for sensitive vars)
        - valid: Whether the current value is valid
        - default: The default value if not set
    """
    info = {}
    for name, definition in ENV_VAR_DEFINITIONS.items():
        value = os.environ.get(name)
        is_valid, _ = validate_env_var(name, value)

        # Mask sensitive values
        display_value = value
        if value and definition.get("sensitive"):
            display_value = value[:4] + "..." if len(value) > 4 else "***"

        info[name] = {
            "description": definition.get("description", ""),
            "value": display_value,
            "is_set": value is not None,
            "valid": is_valid,
            "default": definition.get("default"),
            "sensitive": definition.get("sensitive", False),
        }
    return info
