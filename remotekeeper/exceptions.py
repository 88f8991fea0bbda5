"""Custom exception hierarchy for remotekeeper.

Only two kinds of errors are expected to escape the public API:

1. Validation errors, raised synchronously when a caller hands us something
   that can never work (an unknown storage type, an unknown provider).
2. Configuration errors, raised when the environment holds invalid values.

Everything that goes wrong while talking to rclone or to a provider API is
raised internally as an ExecutionError / ApiError and converted into a
``{"success": False, "result": message}`` result by the remote manager.

Exception Hierarchy:
    RemoteKeeperError (base)
    ├── ValidationError - caller contract violations
    │   ├── UnsupportedStorageType
    │   └── ProviderNotFoundError (also a KeyError)
    ├── ExecutionError - sync CLI execution issues
    │   └── SyncCliError
    ├── ApiError - external HTTP APIs
    │   └── ApiConnectionError (retryable)
    └── ConfigurationError - environment/settings issues

Usage:
    from remotekeeper.exceptions import SyncCliError

    try:
        output = run_rclone(["lsd", "backup1:"])
    except SyncCliError as e:
        return {"success": False, "result": e.message}
"""

from typing import Any, Optional


class RemoteKeeperError(Exception):
    """Base exception for all remotekeeper errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., remote name, command)
        retryable: Whether this error might succeed on retry
    """

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        **context: Any,
    ) -> None:
        self.message = message
        self.context = context
        self.retryable = retryable
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(RemoteKeeperError):
    """Base exception for caller input that can never succeed."""

    pass


class UnsupportedStorageType(ValidationError):
    """A remote was requested for a storage type with no provider."""

    def __init__(self, storage_type: str, **context: Any) -> None:
        self.storage_type = storage_type
        super().__init__(f"Unsupported storage type: {storage_type}", **context)

    def _format_message(self) -> str:
        return self.message


class ProviderNotFoundError(ValidationError, KeyError):
    """No provider descriptor is registered under the requested type."""

    def __init__(self, storage_type: str) -> None:
        self.storage_type = storage_type
        super().__init__(f"Unknown provider: {storage_type}", storage_type=storage_type)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.message


# =============================================================================
# Execution Errors
# =============================================================================


class ExecutionError(RemoteKeeperError):
    """Base exception for sync CLI execution errors."""

    pass


class SyncCliError(ExecutionError):
    """An rclone invocation failed.

    ``message`` holds the text rclone printed on stderr (or a generic
    fallback) so it can be handed to callers unchanged.
    """

    def __init__(
        self,
        message: str = "Rclone command failed",
        *,
        command: Optional[str] = None,
        exit_code: Optional[int] = None,
        stderr: Optional[str] = None,
        **context: Any,
    ) -> None:
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr
        if command:
            context["command"] = command[:100] + "..." if len(command) > 100 else command
        if exit_code is not None:
            context["exit_code"] = exit_code
        super().__init__(message, **context)


# =============================================================================
# API Errors
# =============================================================================


class ApiError(RemoteKeeperError):
    """Base exception for external API calls."""

    pass


class ApiConnectionError(ApiError):
    """Failed to reach an external API - typically retryable."""

    def __init__(
        self,
        message: str = "API connection failed",
        *,
        service: Optional[str] = None,
        **context: Any,
    ) -> None:
        if service:
            context["service"] = service
        super().__init__(message, retryable=True, **context)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(RemoteKeeperError):
    """Configuration or settings error."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
