from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from . import constants as const
from .errors import InvalidRecordError
from .models import (
    DOMAIN_ATTRIBUTES,
    ROLE_ATTRIBUTES,
    ContractAddressSet,
    NetworkId,
    PartialContractAddressSet,
    PartialSigningDomain,
    PartialVersionRecord,
    RecordUpdate,
    SigningDomain,
    Version,
    VersionRecord,
)
from .validation import address_value, coerce_network_id, is_full_record, is_int_value

_RECORD_KEYS = frozenset({const.CONTRACTS_KEY, const.EIP712_DOMAIN_KEY})


def normalize_address(value: object, *, role: str = "address") -> str:
    """
    Return the bare address for a contract entry.

    Accepts either `"0x..."` or `{"address": "0x..."}`.
    """
    addr = address_value(value)
    if addr is None:
        raise InvalidRecordError(
            f"Contract '{role}' must be an address string or an object with an "
            f"'address' string, got {type(value).__name__}"
        )
    return addr


def _expect_mapping(value: object, *, name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise InvalidRecordError(f"'{name}' must be an object, got {type(value).__name__}")
    return value


def _reject_unknown_keys(obj: Mapping[str, Any], allowed: object, *, name: str) -> None:
    unknown = sorted(set(obj.keys()) - set(allowed))  # type: ignore[call-overload]
    if unknown:
        raise InvalidRecordError(f"Unknown keys in '{name}': {', '.join(map(str, unknown))}")


def _contracts_fields(obj: Mapping[str, Any]) -> dict[str, str]:
    _reject_unknown_keys(obj, ROLE_ATTRIBUTES, name=const.CONTRACTS_KEY)
    return {
        ROLE_ATTRIBUTES[role]: normalize_address(value, role=role)
        for role, value in obj.items()
    }


def _domain_fields(obj: Mapping[str, Any]) -> dict[str, str | int]:
    _reject_unknown_keys(obj, DOMAIN_ATTRIBUTES, name=const.EIP712_DOMAIN_KEY)
    out: dict[str, str | int] = {}
    for key, value in obj.items():
        if key == const.DOMAIN_CHAIN_ID:
            if not is_int_value(value):
                raise InvalidRecordError(
                    f"'{const.EIP712_DOMAIN_KEY}.{key}' must be an integer, "
                    f"got {type(value).__name__}"
                )
        elif not isinstance(value, str):
            raise InvalidRecordError(
                f"'{const.EIP712_DOMAIN_KEY}.{key}' must be a string, got {type(value).__name__}"
            )
        out[DOMAIN_ATTRIBUTES[key]] = value
    return out


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


def record_from_json(obj: object) -> VersionRecord:
    """Decode a structurally complete record; partial records are rejected."""
    record = _expect_mapping(obj, name="record")
    if not is_full_record(record):
        raise InvalidRecordError(
            "Record must supply all contract roles "
            f"({', '.join(const.CONTRACT_ROLES)}) and all EIP-712 domain fields "
            f"({', '.join(const.DOMAIN_FIELDS)})"
        )
    _reject_unknown_keys(record, _RECORD_KEYS, name="record")
    return VersionRecord(
        contracts=ContractAddressSet(**_contracts_fields(record[const.CONTRACTS_KEY])),
        eip712_domain=SigningDomain(**_domain_fields(record[const.EIP712_DOMAIN_KEY])),  # type: ignore[arg-type]
    )


def update_from_json(obj: object) -> RecordUpdate:
    """
    Decode a merge update, deciding between the full and partial variants by
    structural completeness.
    """
    if is_full_record(obj):
        return record_from_json(obj)

    update = _expect_mapping(obj, name="record")
    _reject_unknown_keys(update, _RECORD_KEYS, name="record")

    contracts = None
    if const.CONTRACTS_KEY in update:
        raw = _expect_mapping(update[const.CONTRACTS_KEY], name=const.CONTRACTS_KEY)
        contracts = PartialContractAddressSet(**_contracts_fields(raw))

    domain = None
    if const.EIP712_DOMAIN_KEY in update:
        raw = _expect_mapping(update[const.EIP712_DOMAIN_KEY], name=const.EIP712_DOMAIN_KEY)
        domain = PartialSigningDomain(**_domain_fields(raw))  # type: ignore[arg-type]

    return PartialVersionRecord(contracts=contracts, eip712_domain=domain)


def record_to_json(record: VersionRecord) -> dict[str, dict[str, str | int]]:
    return {
        const.CONTRACTS_KEY: record.contracts.as_dict(),
        const.EIP712_DOMAIN_KEY: record.eip712_domain.as_dict(),
    }


# ---------------------------------------------------------------------------
# Whole documents
# ---------------------------------------------------------------------------


def _is_legacy_entry(obj: Mapping[str, Any]) -> bool:
    return const.CONTRACTS_KEY in obj


def registry_data_from_json(
    obj: object, *, legacy_version: Version = const.LEGACY_VERSION
) -> dict[NetworkId, dict[Version, VersionRecord]]:
    """
    Decode a chain config document into `network_id -> version -> VersionRecord`.

    The current layout nests records under network id then version. The older
    layout stored a single record directly under each network id; such entries
    are placed under `legacy_version`.
    """
    document = _expect_mapping(obj, name="chain config")
    out: dict[NetworkId, dict[Version, VersionRecord]] = {}
    for raw_network_id, raw_versions in document.items():
        network_id = coerce_network_id(raw_network_id)
        if network_id in out:
            raise InvalidRecordError(f"Duplicate network id: {network_id}")
        versions = _expect_mapping(raw_versions, name=str(raw_network_id))
        if _is_legacy_entry(versions):
            out[network_id] = {legacy_version: record_from_json(versions)}
            continue
        out[network_id] = {
            str(version): _record_at(network_id, version, raw_record)
            for version, raw_record in versions.items()
        }
    return out


def _record_at(network_id: NetworkId, version: str, raw_record: object) -> VersionRecord:
    try:
        return record_from_json(raw_record)
    except InvalidRecordError as e:
        raise InvalidRecordError(f"chainId {network_id}, version {version}: {e}") from e


def registry_data_to_json(
    data: Mapping[NetworkId, Mapping[Version, VersionRecord]],
) -> dict[str, dict[str, dict[str, dict[str, str | int]]]]:
    return {
        str(network_id): {
            version: record_to_json(record) for version, record in versions.items()
        }
        for network_id, versions in data.items()
    }


def updates_from_json(
    obj: object,
) -> dict[NetworkId, dict[Version, RecordUpdate]]:
    """Decode a whole update batch (`network_id -> version -> record`)."""
    batch = _expect_mapping(obj, name="updates")
    out: dict[NetworkId, dict[Version, RecordUpdate]] = {}
    for raw_network_id, raw_versions in batch.items():
        network_id = coerce_network_id(raw_network_id)
        versions = _expect_mapping(raw_versions, name=str(raw_network_id))
        target = out.setdefault(network_id, {})
        for version, raw in versions.items():
            target[str(version)] = (
                raw if isinstance(raw, (VersionRecord, PartialVersionRecord)) else update_from_json(raw)
            )
    return out
