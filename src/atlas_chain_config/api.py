"""
Function-style access to a chain config registry.

Every function operates on the cached baseline registry unless an explicit
`registry` is passed.
"""

from __future__ import annotations

from .loader import get_default_registry
from .merge import UpdateBatch
from .models import ConfigEntry, NetworkId, Version, VersionRecord
from .registry import ChainConfigRegistry


def _resolve(registry: ChainConfigRegistry | None) -> ChainConfigRegistry:
    return registry if registry is not None else get_default_registry()


def get_config(
    network_id: NetworkId | str,
    version: Version | None = None,
    *,
    registry: ChainConfigRegistry | None = None,
) -> VersionRecord:
    return _resolve(registry).get(network_id, version)


def list_network_ids(*, registry: ChainConfigRegistry | None = None) -> frozenset[NetworkId]:
    return _resolve(registry).network_ids()


def list_versions(
    network_id: NetworkId | str, *, registry: ChainConfigRegistry | None = None
) -> tuple[Version, ...]:
    return _resolve(registry).versions(network_id)


def list_all_configs(*, registry: ChainConfigRegistry | None = None) -> list[ConfigEntry]:
    return _resolve(registry).entries()


def merge_configs(
    updates: UpdateBatch, *, registry: ChainConfigRegistry | None = None
) -> ChainConfigRegistry:
    """
    Layer `updates` over the registry and return the result.

    The cached baseline is not replaced; callers that want the merged registry
    to be used elsewhere must pass it on explicitly.
    """
    return _resolve(registry).merge(updates)


def get_contract_address(
    network_id: NetworkId | str,
    role: str,
    *,
    version: Version | None = None,
    registry: ChainConfigRegistry | None = None,
) -> str:
    return _resolve(registry).contract_address(network_id, role, version=version)


def get_eip712_domain(
    network_id: NetworkId | str,
    version: Version | None = None,
    *,
    registry: ChainConfigRegistry | None = None,
) -> dict[str, str | int]:
    return _resolve(registry).eip712_domain(network_id, version)
