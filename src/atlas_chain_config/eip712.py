from __future__ import annotations

from typing import Final

from eth_utils import is_hex_address, keccak, to_bytes

from . import constants as const
from .errors import InvalidRecordError
from .models import SigningDomain

EIP712_DOMAIN_TYPEHASH: Final[bytes] = keccak(text=const.EIP712_DOMAIN_TYPE)


def _uint256_word(value: int) -> bytes:
    if value < 0 or value > const.MAX_UINT256:
        raise InvalidRecordError(f"chainId must fit in uint256, got {value}")
    return value.to_bytes(const.WORD_SIZE, "big", signed=False)


def _address_word(address: str) -> bytes:
    if not is_hex_address(address):
        raise InvalidRecordError(f"verifyingContract is not a valid address: {address!r}")
    return to_bytes(hexstr=address).rjust(const.WORD_SIZE, b"\x00")


def domain_separator(domain: SigningDomain) -> bytes:
    """
    Compute the EIP-712 domain separator (hashStruct of the domain).

    keccak256(typeHash || keccak256(name) || keccak256(version) || chainId || verifyingContract)
    """
    encoded = b"".join(
        (
            EIP712_DOMAIN_TYPEHASH,
            keccak(text=domain.name),
            keccak(text=domain.version),
            _uint256_word(domain.chain_id),
            _address_word(domain.verifying_contract),
        )
    )
    return keccak(encoded)
