"""Provider registry: read-only map of storage type to descriptor."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from ...config.constants import LOCAL_STORAGE_TYPE
from ...exceptions import ProviderNotFoundError
from .base import ProviderDescriptor, ProviderFeatures
from .catalog import CATALOG

PROVIDERS: Mapping[str, ProviderDescriptor] = MappingProxyType(
    {descriptor.type: descriptor for descriptor in CATALOG}
)


def resolve(storage_type: str) -> ProviderDescriptor:
    """Look up a descriptor, raising ProviderNotFoundError when unknown."""
    try:
        return PROVIDERS[storage_type]
    except KeyError:
        raise ProviderNotFoundError(storage_type) from None


def get_provider(storage_type: str) -> Optional[ProviderDescriptor]:
    return PROVIDERS.get(storage_type)


def list_providers() -> list[ProviderDescriptor]:
    return [PROVIDERS[key] for key in sorted(PROVIDERS)]


def is_supported_type(storage_type: str) -> bool:
    """True for registered backends and the local filesystem sentinel."""
    return storage_type == LOCAL_STORAGE_TYPE or storage_type in PROVIDERS


__all__ = [
    "PROVIDERS",
    "ProviderDescriptor",
    "ProviderFeatures",
    "get_provider",
    "is_supported_type",
    "list_providers",
    "resolve",
]
