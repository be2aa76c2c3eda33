# ruff: noqa: RUF022
"""
Atlas chain configuration registry.

Public entrypoints:
- :class:`atlas_chain_config.registry.ChainConfigRegistry`
- :func:`atlas_chain_config.loader.get_default_registry`
- :func:`atlas_chain_config.merge.merge_chain_configs`

For each supported EVM network, the registry holds the deployed Atlas contract
addresses and EIP-712 signing domain of every Atlas release. Registries are
immutable; merging overrides returns a new registry.
"""

from __future__ import annotations

from . import constants
from .api import (
    get_config,
    get_contract_address,
    get_eip712_domain,
    list_all_configs,
    list_network_ids,
    list_versions,
    merge_configs,
)
from .codec import (
    normalize_address,
    record_from_json,
    record_to_json,
    update_from_json,
    updates_from_json,
)
from .eip712 import EIP712_DOMAIN_TYPEHASH, domain_separator
from .errors import (
    ChainConfigError,
    ChainConfigNotFoundError,
    IncompleteNewEntryError,
    InvalidNetworkIdError,
    InvalidRecordError,
    NotFoundError,
    RegistryLoadError,
    UnknownContractRoleError,
    VersionNotFoundError,
)
from .loader import (
    get_default_registry,
    load_bundled_registry,
    load_registry,
    reset_default_registry,
)
from .merge import merge_chain_configs
from .models import (
    ConfigEntry,
    ContractAddressSet,
    PartialContractAddressSet,
    PartialSigningDomain,
    PartialVersionRecord,
    SigningDomain,
    VersionRecord,
)
from .registry import ChainConfigRegistry
from .validation import is_full_record, parse_version_number

__all__ = [
    # Registry
    "ChainConfigRegistry",
    "merge_chain_configs",
    # Loading
    "get_default_registry",
    "load_bundled_registry",
    "load_registry",
    "reset_default_registry",
    # Function API
    "get_config",
    "get_contract_address",
    "get_eip712_domain",
    "list_all_configs",
    "list_network_ids",
    "list_versions",
    "merge_configs",
    # Models
    "ConfigEntry",
    "ContractAddressSet",
    "PartialContractAddressSet",
    "PartialSigningDomain",
    "PartialVersionRecord",
    "SigningDomain",
    "VersionRecord",
    # Codec
    "normalize_address",
    "record_from_json",
    "record_to_json",
    "update_from_json",
    "updates_from_json",
    # Validation
    "is_full_record",
    "parse_version_number",
    # EIP-712
    "EIP712_DOMAIN_TYPEHASH",
    "domain_separator",
    # Errors
    "ChainConfigError",
    "ChainConfigNotFoundError",
    "IncompleteNewEntryError",
    "InvalidNetworkIdError",
    "InvalidRecordError",
    "NotFoundError",
    "RegistryLoadError",
    "UnknownContractRoleError",
    "VersionNotFoundError",
    # Constants
    "constants",
]
