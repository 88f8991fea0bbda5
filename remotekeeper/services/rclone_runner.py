"""Run one rclone invocation and hand back its output.

This is the only place that spawns the sync CLI. Arguments are passed as an
argv array with no shell in between, and every failure (non-zero exit,
missing binary, timeout) comes out as a SyncCliError.
"""

from __future__ import annotations

import logging
import os
import subprocess
from typing import Callable, Mapping, Optional, Sequence

from ..config.constants import RCLONE_FAILURE_MESSAGE
from ..config.settings import (
    get_encryption_key,
    get_rclone_binary,
    get_rclone_config_path,
    get_rclone_timeout,
    shell_expand_credentials,
)
from ..exceptions import SyncCliError
from .providers.base import is_obscure_token, unwrap_obscure_token

logger = logging.getLogger(__name__)

# (args, env) -> output; the shape RemoteManager expects from a runner
Runner = Callable[..., str]


def describe_command(args: Sequence[str]) -> str:
    """Loggable summary of an invocation: the subcommand, never its values."""
    if not args:
        return ""
    if args[0] == "config" and len(args) > 1:
        return f"config {args[1]}"
    return args[0]


def build_env(extra_env: Optional[Mapping[str, str]] = None) -> dict[str, str]:
    """Child environment: the caller's, plus the rclone config file and password."""
    env = dict(os.environ)
    env["RCLONE_CONFIG"] = str(get_rclone_config_path())

    encryption_key = get_encryption_key()
    if encryption_key:
        env["RCLONE_CONFIG_PASS"] = encryption_key

    if extra_env:
        env.update(extra_env)
    return env


def run_rclone(
    args: Sequence[str],
    env: Optional[Mapping[str, str]] = None,
    *,
    expand_credentials: Optional[bool] = None,
    timeout: Optional[float] = None,
) -> str:
    """Run ``rclone <args>`` and return its output.

    Args:
        args: Argument vector after the binary name. Order is preserved.
        env: Extra environment variables for this call only.
        expand_credentials: Replace ``$(rclone obscure X)`` tokens with the
            obscured value before the call. Defaults to the
            REMOTEKEEPER_SHELL_EXPAND_CREDENTIALS setting.
        timeout: Seconds before the call is abandoned. Defaults to the
            REMOTEKEEPER_RCLONE_TIMEOUT setting (no timeout when unset).

    Returns:
        Stripped stdout, or stripped stderr when stdout is empty, or "".

    Raises:
        SyncCliError: If rclone exits non-zero, cannot be started, or times out.
    """
    if expand_credentials is None:
        expand_credentials = shell_expand_credentials()
    if timeout is None:
        timeout = get_rclone_timeout()

    argv = list(args)
    if expand_credentials:
        argv = expand_obscure_tokens(argv, lambda a: run_rclone(a, env, expand_credentials=False, timeout=timeout))

    summary = describe_command(argv)
    binary = get_rclone_binary()
    logger.debug(f"Running rclone {summary}")

    try:
        result = subprocess.run(
            [binary, *argv],
            capture_output=True,
            text=True,
            # `cat` output may be binary
            errors="replace",
            env=build_env(env),
            timeout=timeout,
        )
    except FileNotFoundError:
        raise SyncCliError(
            f"rclone binary not found: {binary}",
            command=summary,
        ) from None
    except OSError as e:
        raise SyncCliError(
            f"Could not run rclone binary {binary}: {e.strerror or e}",
            command=summary,
        ) from e
    except subprocess.TimeoutExpired as e:
        raise SyncCliError(
            f"rclone {summary} timed out after {timeout}s",
            command=summary,
            retryable=True,
        ) from e

    stdout = (result.stdout or "").strip()
    stderr = (result.stderr or "").strip()

    if result.returncode != 0:
        logger.debug(f"rclone {summary} exited with {result.returncode}")
        raise SyncCliError(
            stderr or RCLONE_FAILURE_MESSAGE,
            command=summary,
            exit_code=result.returncode,
            stderr=stderr,
        )

    return stdout or stderr or ""


def expand_obscure_tokens(args: Sequence[str], runner: Runner) -> list[str]:
    """Replace ``$(rclone obscure X)`` arguments with ``rclone obscure X`` output.

    Other arguments pass through unchanged and in order.
    """
    expanded = []
    for arg in args:
        if is_obscure_token(arg):
            expanded.append(runner(["obscure", unwrap_obscure_token(arg)]))
        else:
            expanded.append(arg)
    return expanded
