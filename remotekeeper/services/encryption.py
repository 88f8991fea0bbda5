"""Encrypt the rclone config file at rest."""

from __future__ import annotations

import logging
import os
import time
from typing import Callable, Mapping, Optional

from ..config.constants import ENCRYPTION_SKIPPED_MESSAGE
from ..exceptions import SyncCliError
from .rclone_runner import run_rclone
from .remote_types import RemoteResult, fail, ok

logger = logging.getLogger(__name__)


def password_command(env_var: str, platform: Optional[str] = None) -> str:
    """Command rclone runs to read the password back out of ``env_var``."""
    if (platform or os.name) == "nt":
        return f'cmd /c "echo %{env_var}%"'
    return f"/bin/echo ${env_var}"


def ensure_config_encrypted(
    password: str,
    runner: Optional[Callable[..., str]] = None,
) -> RemoteResult[str]:
    """Encrypt the rclone config with ``password`` unless it already is.

    The password only reaches rclone through a one-off environment variable
    of the child process; it never appears in the argument vector.
    """
    run: Callable[[list[str], Optional[Mapping[str, str]]], str] = runner or run_rclone

    try:
        run(["config", "encryption", "check"])
        return ok(ENCRYPTION_SKIPPED_MESSAGE)
    except SyncCliError:
        logger.warning("rclone config is not encrypted, encrypting it now")

    env_var = f"RCLONE_TEMP_PASS_{time.time_ns()}"
    try:
        output = run(
            ["config", "encryption", "set", "--password-command", password_command(env_var)],
            {env_var: password},
        )
    except SyncCliError as e:
        logger.error(f"Config encryption failed: {e.message}")
        return fail(e.message)

    # rclone can exit 0 and still report the failure in its output
    if "failed" in output:
        logger.error(f"Config encryption failed: {output}")
        return fail(output)

    logger.info("rclone config encrypted")
    return ok(output)
