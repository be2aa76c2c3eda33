import pytest

from atlas_chain_config import (
    EIP712_DOMAIN_TYPEHASH,
    InvalidRecordError,
    SigningDomain,
    domain_separator,
)

from .helpers.factories import make_record

# Domain of the "Ether Mail" example in EIP-712
ETHER_MAIL_DOMAIN = SigningDomain(
    name="Ether Mail",
    version="1",
    chain_id=1,
    verifying_contract="0xCcCCccccCCCCcCCCCCCcCcCccCcCCCcCcccccccC",
)


class TestDomainTypehash:
    def test_matches_eip712(self) -> None:
        assert EIP712_DOMAIN_TYPEHASH.hex().removeprefix("0x") == (
            "8b73c3c69bb8fe3d512ecc4cf759cc79239f7b179b0ffacaa9a75d522b39400f"
        )


class TestDomainSeparator:
    def test_ether_mail_example(self) -> None:
        assert domain_separator(ETHER_MAIL_DOMAIN).hex().removeprefix("0x") == (
            "f2cee375fa42b42143804025fc449deafd50cc031ca257e0b194a650a912090f"
        )

    def test_is_32_bytes(self) -> None:
        assert len(domain_separator(make_record().eip712_domain)) == 32

    def test_depends_on_chain_id(self) -> None:
        assert domain_separator(make_record(chain_id=1).eip712_domain) != domain_separator(
            make_record(chain_id=137).eip712_domain
        )

    def test_address_case_does_not_matter(self) -> None:
        lower = SigningDomain(
            name="Ether Mail",
            version="1",
            chain_id=1,
            verifying_contract="0xcccccccccccccccccccccccccccccccccccccccc",
        )
        assert domain_separator(lower) == domain_separator(ETHER_MAIL_DOMAIN)

    def test_invalid_verifying_contract(self) -> None:
        domain = SigningDomain(name="n", version="1", chain_id=1, verifying_contract="0x01")
        with pytest.raises(InvalidRecordError, match="verifyingContract"):
            domain_separator(domain)

    def test_negative_chain_id(self) -> None:
        domain = SigningDomain(
            name="n",
            version="1",
            chain_id=-1,
            verifying_contract="0xcccccccccccccccccccccccccccccccccccccccc",
        )
        with pytest.raises(InvalidRecordError, match="uint256"):
            domain_separator(domain)
