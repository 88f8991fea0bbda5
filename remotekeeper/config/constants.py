"""
Centralized constants for remotekeeper.

Environment variable definitions, filesystem defaults and the fixed strings
of the rclone protocol live here so the services never hard-code them.
"""

from pathlib import Path
from typing import Any, Dict

# =============================================================================
# FILESYSTEM
# =============================================================================

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "remotekeeper"
RCLONE_CONFIG_FILENAME = "rclone.conf"
RCLONE_SECURE_CONFIG_FILENAME = "rclone.conf.enc"

# =============================================================================
# SYNC CLI
# =============================================================================

DEFAULT_RCLONE_BINARY = "rclone"
RCLONE_FAILURE_MESSAGE = "Rclone command failed"

# Sentinel storage type that needs no provider descriptor
LOCAL_STORAGE_TYPE = "local"

# Flags appended to every `config create`
CREATE_FLAGS = ("--obscure", "--non-interactive")
NON_INTERACTIVE_FLAG = "--non-interactive"

ENCRYPTION_SKIPPED_MESSAGE = "Encryption already completed. Skipped."

# =============================================================================
# MICROSOFT GRAPH (OneDrive drive metadata lookup)
# =============================================================================

ONEDRIVE_STORAGE_TYPE = "onedrive"
GRAPH_DRIVE_URL = "https://graph.microsoft.com/v1.0/me/drive"
DEFAULT_GRAPH_TIMEOUT_SECONDS = 10.0

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

ENV_VAR_DEFINITIONS: Dict[str, Dict[str, Any]] = {
    "REMOTEKEEPER_CONFIG_DIR": {
        "description": "Directory holding the rclone config file",
        "default": str(DEFAULT_CONFIG_DIR),
        "valid_values": None,
    },
    "REMOTEKEEPER_RCLONE_BINARY": {
        "description": "Path to the rclone binary (looked up on PATH when unset)",
        "default": None,
        "valid_values": None,
    },
    "REMOTEKEEPER_RCLONE_CONFIG": {
        "description": "Explicit rclone config file path",
        "default": None,
        "valid_values": None,
    },
    "REMOTEKEEPER_ENCRYPTION_KEY": {
        "description": "Password for the encrypted rclone config (RCLONE_CONFIG_PASS)",
        "default": None,
        "valid_values": None,
        "sensitive": True,
    },
    "REMOTEKEEPER_RCLONE_TIMEOUT": {
        "description": "Seconds before an rclone call is abandoned (unset = wait forever)",
        "default": None,
        "valid_values": None,
    },
    "REMOTEKEEPER_SHELL_EXPAND_CREDENTIALS": {
        "description": "Expand $(rclone obscure ...) tokens in credential arguments",
        "default": "false",
        "valid_values": ["true", "false"],
    },
    "REMOTEKEEPER_GRAPH_TIMEOUT": {
        "description": "Seconds to wait for the OneDrive drive metadata lookup",
        "default": str(DEFAULT_GRAPH_TIMEOUT_SECONDS),
        "valid_values": None,
    },
    "REMOTEKEEPER_LOG_LEVEL": {
        "description": "Log level for remotekeeper loggers",
        "default": "INFO",
        "valid_values": ["DEBUG", "INFO", "WARNING", "ERROR"],
    },
}
