from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from eth_utils import to_checksum_address

from . import constants as const
from .codec import registry_data_from_json, registry_data_to_json
from .errors import ChainConfigNotFoundError, InvalidRecordError, VersionNotFoundError
from .merge import RegistryData, UpdateBatch, merge_chain_configs
from .models import ConfigEntry, NetworkId, Version, VersionRecord
from .validation import coerce_network_id, version_sort_key


def _freeze(data: Mapping[NetworkId, Mapping[Version, VersionRecord]]) -> RegistryData:
    for network_id, versions in data.items():
        for version, record in versions.items():
            if not isinstance(record, VersionRecord):
                raise InvalidRecordError(
                    f"chainId {network_id}, version {version}: expected a VersionRecord, "
                    f"got {type(record).__name__}"
                )
    return MappingProxyType(
        {
            coerce_network_id(network_id): MappingProxyType(dict(versions))
            for network_id, versions in data.items()
        }
    )


class ChainConfigRegistry:
    """
    Immutable `network_id -> version -> VersionRecord` registry.

    Every operation that "changes" the registry (`merge`) returns a new instance;
    the instance it is called on is never modified.
    """

    __slots__ = ("_data",)

    def __init__(
        self, data: Mapping[NetworkId, Mapping[Version, VersionRecord]] | None = None
    ) -> None:
        self._data: RegistryData = _freeze(data or {})

    @classmethod
    def _wrap(cls, data: RegistryData) -> ChainConfigRegistry:
        # `data` is already made of read-only views; share it without copying.
        registry = cls.__new__(cls)
        registry._data = data
        return registry

    # ------------------------------------------------------------------
    # Constructors / serialization
    # ------------------------------------------------------------------

    @classmethod
    def from_json(
        cls, obj: object, *, legacy_version: Version = const.LEGACY_VERSION
    ) -> ChainConfigRegistry:
        """Build a registry from a decoded chain config document."""
        return cls(registry_data_from_json(obj, legacy_version=legacy_version))

    def to_json(self) -> dict[str, dict[str, dict[str, dict[str, str | int]]]]:
        return registry_data_to_json(self._data)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def data(self) -> RegistryData:
        """Read-only view of the underlying mapping."""
        return self._data

    def get(self, network_id: NetworkId | str, version: Version | None = None) -> VersionRecord:
        """
        Return the record for `network_id` at `version`, or at its latest version
        when `version` is omitted.
        """
        nid = coerce_network_id(network_id)
        versions = self._data.get(nid)
        if not versions:
            raise ChainConfigNotFoundError(nid)
        if version is None:
            version = self.latest_version(nid)
        record = versions.get(version)
        if record is None:
            raise VersionNotFoundError(nid, version)
        return record

    def latest_version(self, network_id: NetworkId | str) -> Version:
        """
        Return the latest version of a network.

        Versions are compared by their leading numeric value parsed as a float
        ("1.10" ranks below "1.9"); equal values fall back to string comparison.
        """
        nid = coerce_network_id(network_id)
        versions = self._data.get(nid)
        if not versions:
            raise ChainConfigNotFoundError(nid)
        return max(versions, key=version_sort_key)

    def network_ids(self) -> frozenset[NetworkId]:
        return frozenset(self._data)

    def versions(self, network_id: NetworkId | str) -> tuple[Version, ...]:
        """Versions of a network, oldest to latest; empty for unknown networks."""
        versions = self._data.get(coerce_network_id(network_id), {})
        return tuple(sorted(versions, key=version_sort_key))

    def entries(self) -> list[ConfigEntry]:
        return [
            ConfigEntry(network_id=network_id, version=version, record=record)
            for network_id, versions in self._data.items()
            for version, record in versions.items()
        ]

    def records(self) -> list[VersionRecord]:
        return [entry.record for entry in self.entries()]

    def contract_address(
        self,
        network_id: NetworkId | str,
        role: str,
        *,
        version: Version | None = None,
        checksum: bool = True,
    ) -> str:
        """
        Return the address of one Atlas contract (`atlas`, `atlasVerification`,
        `sorter`, `simulator` or `multicall3`).
        """
        address = self.get(network_id, version).contracts.address_of(role)
        if not checksum:
            return address
        try:
            return to_checksum_address(address)
        except ValueError as e:
            raise InvalidRecordError(f"Invalid {role} address {address!r}") from e

    def eip712_domain(
        self, network_id: NetworkId | str, version: Version | None = None
    ) -> dict[str, str | int]:
        """EIP-712 domain of a network as a typed-data domain dict."""
        return self.get(network_id, version).eip712_domain.as_dict()

    # ------------------------------------------------------------------
    # Merge
    # ------------------------------------------------------------------

    def merge(self, updates: UpdateBatch) -> ChainConfigRegistry:
        """Return a new registry with `updates` layered over this one."""
        return ChainConfigRegistry._wrap(merge_chain_configs(self._data, updates))

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------

    def __contains__(self, network_id: object) -> bool:
        try:
            return coerce_network_id(network_id) in self._data
        except ValueError:
            return False

    def __iter__(self) -> Iterator[ConfigEntry]:
        return iter(self.entries())

    def __len__(self) -> int:
        return sum(len(versions) for versions in self._data.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChainConfigRegistry):
            return NotImplemented
        return {k: dict(v) for k, v in self._data.items()} == {
            k: dict(v) for k, v in other._data.items()
        }

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ChainConfigRegistry(networks={sorted(self._data)}, entries={len(self)})"
