import re
from collections.abc import Mapping

from . import constants as const
from .errors import InvalidNetworkIdError

_NUMERIC_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def is_int_value(value: object) -> bool:
    """Return True if `value` is an `int` (booleans excluded), False otherwise."""
    return isinstance(value, int) and not isinstance(value, bool)


def address_value(value: object) -> str | None:
    """
    Return the bare address held by `value`, or None if it is not an address.

    The data file has used two representations for contract addresses: a bare
    string, and an `{"address": "0x..."}` wrapper object. Both are accepted.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping) and set(value.keys()) == {const.ADDRESS_KEY}:
        inner = value[const.ADDRESS_KEY]
        if isinstance(inner, str):
            return inner
    return None


def is_full_record(obj: object) -> bool:
    """
    Check whether a JSON-shaped record is structurally complete.

    A record is full iff all five contract roles are present as addresses and all
    four domain fields are present with kinds string/string/int/string. Values are
    not otherwise validated.
    """
    if not isinstance(obj, Mapping):
        return False

    contracts = obj.get(const.CONTRACTS_KEY)
    if not isinstance(contracts, Mapping):
        return False
    if any(address_value(contracts.get(role)) is None for role in const.CONTRACT_ROLES):
        return False

    domain = obj.get(const.EIP712_DOMAIN_KEY)
    if not isinstance(domain, Mapping):
        return False
    return (
        isinstance(domain.get(const.DOMAIN_NAME), str)
        and isinstance(domain.get(const.DOMAIN_VERSION), str)
        and is_int_value(domain.get(const.DOMAIN_CHAIN_ID))
        and isinstance(domain.get(const.DOMAIN_VERIFYING_CONTRACT), str)
    )


def coerce_network_id(value: object) -> int:
    """
    Normalize a network id given as an int or a decimal string (JSON object key).

    Raises InvalidNetworkIdError for anything else, including booleans and negatives.
    """
    if is_int_value(value):
        network_id = int(value)  # type: ignore[call-overload]
    elif isinstance(value, str) and value.strip().isdecimal():
        network_id = int(value.strip())
    else:
        raise InvalidNetworkIdError(f"Invalid network id: {value!r}")

    if network_id < 0:
        raise InvalidNetworkIdError(f"Network id must be non-negative, got {network_id}")
    return network_id


def parse_version_number(version: str) -> float | None:
    """
    Parse the leading numeric part of a version string as a float.

    Only the longest numeric prefix is used, so "1.0.0" parses as 1.0 and
    "1.10" as 1.1. Returns None when the string has no numeric prefix.
    """
    match = _NUMERIC_PREFIX.match(version)
    if match is None:
        return None
    return float(match.group(1))


def version_sort_key(version: str) -> tuple[int, float, str]:
    """
    Ordering key used to pick the latest version of a network.

    Numeric versions rank above non-numeric ones; equal numeric values fall back
    to plain string comparison.
    """
    number = parse_version_number(version)
    if number is None:
        return (0, 0.0, version)
    return (1, number, version)
