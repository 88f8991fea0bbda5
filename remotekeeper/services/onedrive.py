"""OneDrive drive metadata lookup.

rclone's non-interactive `config create` for onedrive leaves ``drive_id`` and
``drive_type`` empty when only a token is supplied, and the remote then fails
verification. The Microsoft Graph API tells us both values, so we fetch them
with the same token and append them to the create arguments.

The lookup is best effort: any failure means no extra arguments.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, Union

import requests

from ..config.constants import GRAPH_DRIVE_URL
from ..config.settings import get_graph_timeout
from ..exceptions import ApiConnectionError, ApiError, RemoteKeeperError

logger = logging.getLogger(__name__)


def _access_token(token_json: Union[str, dict[str, Any]]) -> str:
    token = json.loads(token_json) if isinstance(token_json, str) else token_json
    access_token = token.get("access_token") if isinstance(token, dict) else None
    if not access_token:
        raise ApiError("OAuth token has no access_token", service="graph")
    return access_token


def lookup_drive(token_json: Union[str, dict[str, Any]], timeout: Optional[float] = None) -> dict[str, Any]:
    """Return the Graph `me/drive` resource for the token's account.

    Raises:
        ApiConnectionError: If Graph cannot be reached.
        ApiError: If the token is unusable or Graph answers with an error.
    """
    access_token = _access_token(token_json)
    try:
        response = requests.get(
            GRAPH_DRIVE_URL,
            headers={"Authorization": access_token},
            timeout=timeout if timeout is not None else get_graph_timeout(),
        )
    except requests.RequestException as e:
        raise ApiConnectionError(str(e), service="graph") from e

    if not response.ok:
        raise ApiError(f"Graph drive lookup failed: {response.status_code}", service="graph")
    return response.json()


def fetch_onedrive_drive_args(
    token_json: Union[str, dict[str, Any]],
    timeout: Optional[float] = None,
) -> list[str]:
    """``["drive_id", id, "drive_type", type]`` for the token's drive, or ``[]``.

    Never raises: the caller's create goes ahead either way.
    """
    try:
        drive = lookup_drive(token_json, timeout=timeout)
    except (RemoteKeeperError, ValueError) as e:
        # ValueError covers malformed token JSON and a non-JSON Graph body
        logger.debug(f"Skipping OneDrive drive lookup: {e}")
        return []

    drive_id = drive.get("id") if isinstance(drive, dict) else None
    drive_type = drive.get("driveType") if isinstance(drive, dict) else None
    if not drive_id or not drive_type:
        logger.debug("Graph drive response lacks id or driveType")
        return []

    return ["drive_id", str(drive_id), "drive_type", str(drive_type)]
