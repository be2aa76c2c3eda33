"""Atlas chain configuration constants."""

from typing import Final

# ---------------------------------------------------------------------------
# Atlas release versions
# ---------------------------------------------------------------------------
ATLAS_V100: Final[str] = "1.0.0"

# Version assigned to records from the older, unversioned data file layout.
LEGACY_VERSION: Final[str] = ATLAS_V100


# ---------------------------------------------------------------------------
# Record shape (wire keys)
# ---------------------------------------------------------------------------
CONTRACTS_KEY: Final[str] = "contracts"
EIP712_DOMAIN_KEY: Final[str] = "eip712Domain"
ADDRESS_KEY: Final[str] = "address"

ROLE_ATLAS: Final[str] = "atlas"
ROLE_ATLAS_VERIFICATION: Final[str] = "atlasVerification"
ROLE_SORTER: Final[str] = "sorter"
ROLE_SIMULATOR: Final[str] = "simulator"
ROLE_MULTICALL3: Final[str] = "multicall3"

CONTRACT_ROLES: Final[tuple[str, ...]] = (
    ROLE_ATLAS,
    ROLE_ATLAS_VERIFICATION,
    ROLE_SORTER,
    ROLE_SIMULATOR,
    ROLE_MULTICALL3,
)

DOMAIN_NAME: Final[str] = "name"
DOMAIN_VERSION: Final[str] = "version"
DOMAIN_CHAIN_ID: Final[str] = "chainId"
DOMAIN_VERIFYING_CONTRACT: Final[str] = "verifyingContract"

DOMAIN_FIELDS: Final[tuple[str, ...]] = (
    DOMAIN_NAME,
    DOMAIN_VERSION,
    DOMAIN_CHAIN_ID,
    DOMAIN_VERIFYING_CONTRACT,
)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------
DATA_PACKAGE: Final[str] = "atlas_chain_config.data"
DATA_FILE_NAME: Final[str] = "chain-config.json"
CONFIG_PATH_ENV_VAR: Final[str] = "ATLAS_CHAIN_CONFIG_PATH"


# ---------------------------------------------------------------------------
# EIP-712
# ---------------------------------------------------------------------------
EIP712_DOMAIN_TYPE: Final[str] = (
    "EIP712Domain(string name,string version,uint256 chainId,address verifyingContract)"
)
WORD_SIZE: Final[int] = 32
MAX_UINT256: Final[int] = 2**256 - 1
