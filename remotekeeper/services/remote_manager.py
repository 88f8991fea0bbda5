"""Remote lifecycle management on top of the rclone config store.

The rclone config file is the only source of truth: nothing here caches
remote state, and every read re-queries rclone. Mutations follow the
verify-rollback pattern:

- create, then ``lsd name:``; when that fails, ``config delete name``
- update, then ``lsd name:``; when that fails, replay the complete old
  settings with ``config update``

Every operation returns a RemoteResult. The one exception is
``create_remote`` raising UnsupportedStorageType for a type that has no
provider, before any process is spawned.
"""

from __future__ import annotations

import json
import logging
import threading
import weakref
from typing import Any, Callable, Mapping, Optional

from ..config.constants import (
    CREATE_FLAGS,
    LOCAL_STORAGE_TYPE,
    NON_INTERACTIVE_FLAG,
    ONEDRIVE_STORAGE_TYPE,
)
from ..exceptions import SyncCliError, UnsupportedStorageType
from .config_parser import parse_config_show
from .onedrive import fetch_onedrive_drive_args
from .providers import get_provider, is_supported_type
from .rclone_runner import run_rclone
from .remote_types import BrowseItem, BrowseListing, RemoteResult, SettingValue, fail, ok

logger = logging.getLogger(__name__)

DriveFetcher = Callable[[str], list[str]]


def flatten_settings(settings: Optional[Mapping[str, SettingValue]]) -> list[str]:
    """Settings mapping to alternating ``key value`` arguments, in order.

    Booleans use rclone's ``true``/``false`` spelling and whole floats drop
    their ``.0``.
    """
    args: list[str] = []
    for key, value in (settings or {}).items():
        if isinstance(value, bool):
            rendered = "true" if value else "false"
        elif isinstance(value, float) and value.is_integer():
            rendered = str(int(value))
        else:
            rendered = str(value)
        args.extend([key, rendered])
    return args


def normalize_browse_entry(entry: Mapping[str, Any]) -> BrowseItem:
    """Map one `lsjson` object onto the dashboard's browse item shape."""
    return BrowseItem(
        name=entry.get("Name", ""),
        type="dir" if entry.get("IsDir") else "file",
        size=entry.get("Size", 0),
        modTime=entry.get("ModTime", ""),
        path=entry.get("Path", ""),
    )


class RemoteManager:
    """Create, update, verify and inspect rclone remotes.

    Example:
        manager = RemoteManager()
        result = manager.create_remote("s3", "backup1", "client", {"accessKeyId": "..."})
        if not result["success"]:
            print(result["result"])

    Mutations on the same remote name are serialized for the whole
    mutate-verify-compensate sequence; different names never block each
    other and reads take no lock.
    """

    def __init__(
        self,
        runner: Optional[Callable[[list[str]], str]] = None,
        drive_fetcher: Optional[DriveFetcher] = None,
        probe_on_update_failure: bool = False,
    ) -> None:
        self._run = runner or run_rclone
        self._fetch_drive_args = drive_fetcher or fetch_onedrive_drive_args
        self.probe_on_update_failure = probe_on_update_failure
        # Entries vanish once no caller holds or waits on the lock
        self._locks: weakref.WeakValueDictionary[str, threading.Lock] = weakref.WeakValueDictionary()
        self._locks_guard = threading.Lock()

    def _lock_for(self, name: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(name)
            if lock is None:
                lock = self._locks[name] = threading.Lock()
            return lock

    def _call(self, args: list[str]) -> RemoteResult[str]:
        """Run one command; any failure comes back as a failed result."""
        try:
            return ok(self._run(args))
        except SyncCliError as e:
            return fail(e.message)
        except Exception as e:
            logger.error(f"Unexpected error running rclone {args[0] if args else ''}: {e}")
            return fail(str(e) or type(e).__name__)

    # =========================================================================
    # Mutations
    # =========================================================================

    def create_remote(
        self,
        storage_type: str,
        name: str,
        auth_type: str,
        credentials: Mapping[str, str],
        settings: Optional[Mapping[str, SettingValue]] = None,
    ) -> RemoteResult[str]:
        """Create a remote and verify it can be listed.

        Raises:
            UnsupportedStorageType: If no provider handles ``storage_type``.
        """
        if not is_supported_type(storage_type):
            raise UnsupportedStorageType(storage_type)

        provider = get_provider(storage_type)
        credential_args = provider.setup(credentials, auth_type) if provider else []

        args = ["config", "create", name, storage_type, *credential_args, *flatten_settings(settings)]
        if storage_type == ONEDRIVE_STORAGE_TYPE and auth_type == "oauth" and credentials.get("token"):
            try:
                args.extend(self._fetch_drive_args(credentials["token"]))
            except Exception as e:
                logger.debug(f"OneDrive drive lookup failed, creating without drive_id: {e}")
        args.extend(CREATE_FLAGS)

        with self._lock_for(name):
            created = self._call(args)
            if not created["success"]:
                logger.warning(f"Failed to create remote {name}: {created['result']}")
                return created

            verified = self.verify_remote(name)
            if not verified["success"]:
                logger.warning(f"Remote {name} failed verification, deleting it")
                cleanup = self._call(["config", "delete", name])
                if not cleanup["success"]:
                    logger.error(f"Could not delete unverified remote {name}: {cleanup['result']}")
                return verified

        logger.info(f"Created remote {name} ({storage_type})")
        return created

    def update_remote(
        self,
        name: str,
        new_settings: Mapping[str, SettingValue],
        old_settings: Mapping[str, SettingValue],
    ) -> RemoteResult[str]:
        """Apply new settings, restoring the old ones if verification fails.

        ``old_settings`` must be the complete previous settings: rollback
        replays them in full rather than diffing.
        """
        args = ["config", "update", name, *flatten_settings(new_settings), NON_INTERACTIVE_FLAG]

        with self._lock_for(name):
            updated = self._call(args)
            if not updated["success"]:
                logger.warning(f"Failed to update remote {name}: {updated['result']}")
                if self.probe_on_update_failure:
                    self._log_remote_state(name)
                return updated

            verified = self.verify_remote(name)
            if not verified["success"]:
                logger.warning(f"Updated remote {name} failed verification, rolling back")
                rollback = self._call(
                    ["config", "update", name, NON_INTERACTIVE_FLAG, *flatten_settings(old_settings)]
                )
                if not rollback["success"]:
                    logger.error(f"Rollback of remote {name} failed: {rollback['result']}")
                return verified

        logger.info(f"Updated remote {name}")
        return updated

    def delete_remote(self, name: str) -> RemoteResult[str]:
        with self._lock_for(name):
            return self._call(["config", "delete", name])

    def _log_remote_state(self, name: str) -> None:
        # A failed update may still have written part of the settings
        state = self.get_remote_config(name)
        if state["success"]:
            logger.info(f"Remote {name} after failed update: keys={sorted(state['result'])}")
        else:
            logger.info(f"Remote {name} unreadable after failed update: {state['result']}")

    # =========================================================================
    # Reads
    # =========================================================================

    def get_remote_config(self, name: str) -> RemoteResult[dict[str, str]]:
        shown = self._call(["config", "show", name])
        if not shown["success"]:
            return shown
        return parse_config_show(shown["result"])

    def verify_remote(self, name: str) -> RemoteResult[str]:
        """List the remote's top level; success means rclone can reach it."""
        return self._call(["lsd", f"{name}:"])

    def list_remotes(self) -> RemoteResult[str]:
        return self._call(["listremotes"])

    def browse_remote(self, name: str, path: str = "/") -> RemoteResult[BrowseListing]:
        listed = self._call(["lsjson", f"{name}:{path}"])
        if not listed["success"]:
            return listed

        try:
            entries = json.loads(listed["result"])
        except ValueError as e:
            return fail(f"Invalid listing from rclone: {e}")
        if not isinstance(entries, list) or not all(isinstance(entry, dict) for entry in entries):
            return fail("Invalid listing from rclone: expected a JSON array of objects")

        return ok(BrowseListing(path=path, items=[normalize_browse_entry(entry) for entry in entries]))

    def get_remote_file_content(self, name: str, path: str) -> RemoteResult[str]:
        return self._call(["cat", f"{name}:{path}"])

    def get_download_link(self, name: str, path: str) -> RemoteResult[str]:
        """Public link for a file; backends without link support fail here."""
        linked = self._call(["link", f"{name}:{path}"])
        if linked["success"]:
            return ok(linked["result"].strip())
        return linked
