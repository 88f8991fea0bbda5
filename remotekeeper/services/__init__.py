"""Services that drive rclone on behalf of the dashboard."""

from .remote_manager import RemoteManager, flatten_settings
from .remote_types import RemoteDescriptor, RemoteResult

__all__ = ["RemoteDescriptor", "RemoteManager", "RemoteResult", "flatten_settings"]
