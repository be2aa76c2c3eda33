from typing import Any

import pytest

from atlas_chain_config.errors import InvalidNetworkIdError
from atlas_chain_config.validation import (
    address_value,
    coerce_network_id,
    is_full_record,
    parse_version_number,
    version_sort_key,
)

from .helpers.factories import POLYGON_RECORD_JSON, make_record_json


class TestAddressValue:
    def test_bare_string(self) -> None:
        assert address_value("0xabc") == "0xabc"

    def test_wrapper_object(self) -> None:
        assert address_value({"address": "0xabc"}) == "0xabc"

    def test_wrapper_with_extra_keys_rejected(self) -> None:
        assert address_value({"address": "0xabc", "block": 1}) is None

    def test_wrapper_with_non_string_rejected(self) -> None:
        assert address_value({"address": 1}) is None

    def test_non_address(self) -> None:
        assert address_value(None) is None
        assert address_value(123) is None


class TestIsFullRecord:
    def test_complete_record(self) -> None:
        assert is_full_record(POLYGON_RECORD_JSON) is True

    def test_complete_record_with_wrapped_addresses(self) -> None:
        record = make_record_json()
        record["contracts"] = {
            role: {"address": addr} for role, addr in record["contracts"].items()
        }
        assert is_full_record(record) is True

    @pytest.mark.parametrize(
        "role", ["atlas", "atlasVerification", "sorter", "simulator", "multicall3"]
    )
    def test_missing_contract_role(self, role: str) -> None:
        record = make_record_json()
        del record["contracts"][role]
        assert is_full_record(record) is False

    @pytest.mark.parametrize("field", ["name", "version", "chainId", "verifyingContract"])
    def test_missing_domain_field(self, field: str) -> None:
        record = make_record_json()
        del record["eip712Domain"][field]
        assert is_full_record(record) is False

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("name", 1),
            ("version", 1.0),
            ("chainId", "137"),
            ("chainId", True),
            ("verifyingContract", None),
        ],
    )
    def test_wrong_domain_kind(self, field: str, value: Any) -> None:
        record = make_record_json()
        record["eip712Domain"][field] = value
        assert is_full_record(record) is False

    def test_contracts_only(self) -> None:
        assert is_full_record({"contracts": POLYGON_RECORD_JSON["contracts"]}) is False

    def test_non_mapping(self) -> None:
        assert is_full_record([]) is False
        assert is_full_record({"contracts": "0x", "eip712Domain": {}}) is False


class TestCoerceNetworkId:
    def test_int(self) -> None:
        assert coerce_network_id(137) == 137

    def test_decimal_string(self) -> None:
        assert coerce_network_id("84532") == 84532

    @pytest.mark.parametrize("value", [True, "0x89", "abc", "", 1.5, None, -1, "-1"])
    def test_invalid(self, value: Any) -> None:
        with pytest.raises(InvalidNetworkIdError):
            coerce_network_id(value)

    def test_invalid_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            coerce_network_id("polygon")


class TestParseVersionNumber:
    @pytest.mark.parametrize(
        ("version", "expected"),
        [
            ("1.2", 1.2),
            ("1.0.0", 1.0),
            ("1.1.0", 1.1),
            ("1.10", 1.1),
            ("2", 2.0),
            (" 3.5", 3.5),
            ("1.2-beta", 1.2),
        ],
    )
    def test_numeric_prefix(self, version: str, expected: float) -> None:
        assert parse_version_number(version) == expected

    @pytest.mark.parametrize("version", ["", "v1.0", "latest"])
    def test_non_numeric(self, version: str) -> None:
        assert parse_version_number(version) is None


class TestVersionSortKey:
    def test_numeric_ordering(self) -> None:
        assert max(["1.1", "1.2"], key=version_sort_key) == "1.2"

    def test_float_parse_limitation(self) -> None:
        # "1.10" parses as 1.1, which ranks below 1.9
        assert max(["1.9", "1.10"], key=version_sort_key) == "1.9"

    def test_ties_fall_back_to_string_order(self) -> None:
        assert max(["1.0.0", "1.0.1"], key=version_sort_key) == "1.0.1"

    def test_non_numeric_ranks_lowest(self) -> None:
        assert max(["latest", "0.1"], key=version_sort_key) == "0.1"
