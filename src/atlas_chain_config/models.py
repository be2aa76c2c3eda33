from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Final, TypeAlias

from . import constants as const
from .errors import InvalidRecordError, UnknownContractRoleError
from .validation import is_int_value

NetworkId: TypeAlias = int
Version: TypeAlias = str

# Wire key -> dataclass attribute
ROLE_ATTRIBUTES: Final[dict[str, str]] = {
    const.ROLE_ATLAS: "atlas",
    const.ROLE_ATLAS_VERIFICATION: "atlas_verification",
    const.ROLE_SORTER: "sorter",
    const.ROLE_SIMULATOR: "simulator",
    const.ROLE_MULTICALL3: "multicall3",
}

DOMAIN_ATTRIBUTES: Final[dict[str, str]] = {
    const.DOMAIN_NAME: "name",
    const.DOMAIN_VERSION: "version",
    const.DOMAIN_CHAIN_ID: "chain_id",
    const.DOMAIN_VERIFYING_CONTRACT: "verifying_contract",
}


def role_attribute(role: str) -> str:
    """Resolve a contract role given by wire key ("atlasVerification") or attribute name."""
    if role in ROLE_ATTRIBUTES:
        return ROLE_ATTRIBUTES[role]
    if role in ROLE_ATTRIBUTES.values():
        return role
    raise UnknownContractRoleError(
        f"Unknown contract role {role!r}; expected one of {', '.join(const.CONTRACT_ROLES)}"
    )


def _supplied(obj: object) -> dict[str, object]:
    return {f.name: v for f in fields(obj) if (v := getattr(obj, f.name)) is not None}  # type: ignore[arg-type]


def _check_str(obj: object, attr: str, *, optional: bool = False) -> None:
    value = getattr(obj, attr)
    if value is None and optional:
        return
    if not isinstance(value, str):
        raise InvalidRecordError(
            f"{type(obj).__name__}.{attr} must be a string, got {type(value).__name__}"
        )


def _check_chain_id(obj: object, *, optional: bool = False) -> None:
    value = obj.chain_id  # type: ignore[attr-defined]
    if value is None and optional:
        return
    if not is_int_value(value):
        raise InvalidRecordError(
            f"{type(obj).__name__}.chain_id must be an integer, got {type(value).__name__}"
        )


# ---------------------------------------------------------------------------
# Full records
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ContractAddressSet:
    """The five Atlas contract addresses deployed for one network and version."""

    atlas: str
    atlas_verification: str
    sorter: str
    simulator: str
    multicall3: str

    def __post_init__(self) -> None:
        for attr in ROLE_ATTRIBUTES.values():
            _check_str(self, attr)

    def address_of(self, role: str) -> str:
        return getattr(self, role_attribute(role))  # type: ignore[no-any-return]

    def merged(self, patch: PartialContractAddressSet | None) -> ContractAddressSet:
        """Return a copy with every address supplied in `patch` overriding this one."""
        if patch is None:
            return self
        return replace(self, **_supplied(patch))

    def as_dict(self) -> dict[str, str]:
        return {role: self.address_of(role) for role in const.CONTRACT_ROLES}


@dataclass(frozen=True, slots=True)
class SigningDomain:
    """
    EIP-712 domain used to sign Atlas operations.

    `chain_id` is carried as-is; it is not required to match the network id the
    record is stored under.
    """

    name: str
    version: str
    chain_id: int
    verifying_contract: str

    def __post_init__(self) -> None:
        _check_str(self, "name")
        _check_str(self, "version")
        _check_chain_id(self)
        _check_str(self, "verifying_contract")

    def merged(self, patch: PartialSigningDomain | None) -> SigningDomain:
        if patch is None:
            return self
        return replace(self, **_supplied(patch))

    def as_dict(self) -> dict[str, str | int]:
        """Typed-data domain dict (`name`, `version`, `chainId`, `verifyingContract`)."""
        return {
            wire_key: getattr(self, attr) for wire_key, attr in DOMAIN_ATTRIBUTES.items()
        }


@dataclass(frozen=True, slots=True)
class VersionRecord:
    """
    Complete configuration of one network + version.

    This is the "full" variant of a merge update: passing a VersionRecord to a
    merge replaces the existing entry (or creates a new one) wholesale.
    """

    contracts: ContractAddressSet
    eip712_domain: SigningDomain

    def __post_init__(self) -> None:
        if not isinstance(self.contracts, ContractAddressSet):
            raise InvalidRecordError(
                f"VersionRecord.contracts must be a ContractAddressSet, "
                f"got {type(self.contracts).__name__}"
            )
        if not isinstance(self.eip712_domain, SigningDomain):
            raise InvalidRecordError(
                f"VersionRecord.eip712_domain must be a SigningDomain, "
                f"got {type(self.eip712_domain).__name__}"
            )

    def merged(self, patch: PartialVersionRecord) -> VersionRecord:
        """Field-level merge; `contracts` and `eip712_domain` are merged independently."""
        return VersionRecord(
            contracts=self.contracts.merged(patch.contracts),
            eip712_domain=self.eip712_domain.merged(patch.eip712_domain),
        )


# ---------------------------------------------------------------------------
# Partial records (merge input only)
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PartialContractAddressSet:
    atlas: str | None = None
    atlas_verification: str | None = None
    sorter: str | None = None
    simulator: str | None = None
    multicall3: str | None = None

    def __post_init__(self) -> None:
        for attr in ROLE_ATTRIBUTES.values():
            _check_str(self, attr, optional=True)


@dataclass(frozen=True, slots=True)
class PartialSigningDomain:
    name: str | None = None
    version: str | None = None
    chain_id: int | None = None
    verifying_contract: str | None = None

    def __post_init__(self) -> None:
        _check_str(self, "name", optional=True)
        _check_str(self, "version", optional=True)
        _check_chain_id(self, optional=True)
        _check_str(self, "verifying_contract", optional=True)


@dataclass(frozen=True, slots=True)
class PartialVersionRecord:
    """
    Partial update of an existing network + version.

    Any field left as None keeps its baseline value. A partial record can never
    create a new entry, even if it happens to supply every field.
    """

    contracts: PartialContractAddressSet | None = None
    eip712_domain: PartialSigningDomain | None = None

    def __post_init__(self) -> None:
        if self.contracts is not None and not isinstance(
            self.contracts, PartialContractAddressSet
        ):
            raise InvalidRecordError(
                "PartialVersionRecord.contracts must be a PartialContractAddressSet, "
                f"got {type(self.contracts).__name__}"
            )
        if self.eip712_domain is not None and not isinstance(
            self.eip712_domain, PartialSigningDomain
        ):
            raise InvalidRecordError(
                "PartialVersionRecord.eip712_domain must be a PartialSigningDomain, "
                f"got {type(self.eip712_domain).__name__}"
            )

    @property
    def is_empty(self) -> bool:
        return not (
            (self.contracts and _supplied(self.contracts))
            or (self.eip712_domain and _supplied(self.eip712_domain))
        )


RecordUpdate: TypeAlias = VersionRecord | PartialVersionRecord


@dataclass(frozen=True, slots=True)
class ConfigEntry:
    """One flattened registry entry."""

    network_id: NetworkId
    version: Version
    record: VersionRecord
