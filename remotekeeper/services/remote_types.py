"""TypedDict definitions for the remote lifecycle results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypedDict, TypeVar, Union

T = TypeVar("T")

SettingValue = Union[str, int, float, bool]


class RemoteResult(TypedDict, Generic[T]):
    """Uniform outcome of every lifecycle operation.

    ``result`` holds the payload on success and the error message on failure.
    """

    success: bool
    result: T | str


class BrowseItem(TypedDict):
    """One normalized `rclone lsjson` entry."""

    name: str
    type: str  # "dir" | "file"
    size: int
    modTime: str
    path: str


class BrowseListing(TypedDict):
    path: str
    items: list[BrowseItem]


@dataclass
class RemoteDescriptor:
    """Caller-side description of a remote. Never persisted here."""

    name: str
    type: str
    auth_type: str
    credentials: dict[str, str] = field(default_factory=dict)
    settings: dict[str, SettingValue] | None = None


def ok(result: Any) -> RemoteResult[Any]:
    return RemoteResult(success=True, result=result)


def fail(message: str) -> RemoteResult[Any]:
    return RemoteResult(success=False, result=message)
