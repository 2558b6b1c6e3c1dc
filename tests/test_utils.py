"""
Tests for the Tokenbound SDK utility functions.
"""
import pytest
from eth_utils import to_checksum_address

from tokenbound_sdk.exceptions import InvalidAddressError, InvalidTokenIdError
from tokenbound_sdk.utils import (
    UINT256_MAX,
    get_create2_address,
    normalize_address,
    normalize_token_id,
    parse_uint,
    to_call_data,
)

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
DEADBEEF_ADDRESS = "0xdeadbeef00000000000000000000000000000000"
TOKEN_CONTRACT = "0xe7134a029cd2fd55f678d6809e64d0b6a0caddcb"


@pytest.mark.parametrize("deployer, salt, init_code, expected", [
    # Example vectors from EIP-1014
    (ZERO_ADDRESS, 0, bytes.fromhex("00"), "0x4D1A2e2bB4F88F0250f26Ffff098B0b30B26BF38"),
    (DEADBEEF_ADDRESS, 0, bytes.fromhex("00"), "0xB928f69Bb1D91Cd65274e3c79d8986362984fDA3"),
    (
        DEADBEEF_ADDRESS,
        bytes.fromhex("000000000000000000000000feed000000000000000000000000000000000000"),
        bytes.fromhex("00"),
        "0xD04116cDd17beBE565EB2422F2497E06cC1C9833",
    ),
    (ZERO_ADDRESS, 0, bytes.fromhex("deadbeef"), "0x70f2b2914A2a4b783FaEFb75f459A580616Fcb5e"),
    (ZERO_ADDRESS, 0, b"", "0xE33C0C7F7df4809055C3ebA6c09CFe4BaF1BD9e0"),
])
def test_get_create2_address_vectors(deployer, salt, init_code, expected):
    assert get_create2_address(deployer, salt, init_code).lower() == expected.lower()


def test_get_create2_address_int_and_bytes_salt_agree():
    as_int = get_create2_address(DEADBEEF_ADDRESS, 0xfeed, b"\x00")
    as_bytes = get_create2_address(DEADBEEF_ADDRESS, (0xfeed).to_bytes(32, "big"), b"\x00")
    assert as_int == as_bytes


def test_get_create2_address_rejects_short_salt():
    with pytest.raises(ValueError):
        get_create2_address(ZERO_ADDRESS, b"\x01", b"")


class TestNormalizeAddress:
    """Tests for address validation."""

    def test_lowercase_is_checksummed(self):
        assert normalize_address(DEADBEEF_ADDRESS).lower() == DEADBEEF_ADDRESS

    def test_raw_bytes(self):
        assert normalize_address(b"\x00" * 20) == ZERO_ADDRESS

    def test_wrong_length_bytes(self):
        with pytest.raises(InvalidAddressError):
            normalize_address(b"\x00" * 19)

    def test_error_carries_value_and_name(self):
        with pytest.raises(InvalidAddressError) as exc_info:
            normalize_address("0x1234", "token_contract")
        assert exc_info.value.value == "0x1234"
        assert "token_contract" in str(exc_info.value)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_address("garbage")

    def test_valid_checksum_and_single_case_accepted(self):
        checksummed = to_checksum_address(TOKEN_CONTRACT)
        assert normalize_address(checksummed) == checksummed
        assert normalize_address("0x" + TOKEN_CONTRACT[2:].upper()) == checksummed

    def test_bad_checksum_rejected(self):
        bad = "0xE7134a029cd2fd55f678d6809e64d0b6a0caddcb"
        assert bad != to_checksum_address(bad)
        with pytest.raises(InvalidAddressError) as exc_info:
            normalize_address(bad, "token_contract")
        assert exc_info.value.value == bad
        assert "checksum" in str(exc_info.value)


class TestParseUint:
    """Tests for unsigned integer parsing."""

    @pytest.mark.parametrize("value, expected", [
        (0, 0),
        ("0", 0),
        ("9", 9),
        (" 42 ", 42),
        ("0x10", 16),
        (UINT256_MAX, UINT256_MAX),
    ])
    def test_valid(self, value, expected):
        assert parse_uint(value) == expected

    @pytest.mark.parametrize("value", [-1, "-1", "1e3", "ten", True, None, 2 ** 256])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_uint(value)

    def test_token_id_error_type(self):
        with pytest.raises(InvalidTokenIdError):
            normalize_token_id("nope")


class TestToCallData:
    """Tests for call data normalisation."""

    def test_hex(self):
        assert to_call_data("0xdeadbeef") == bytes.fromhex("deadbeef")

    def test_bytearray(self):
        assert to_call_data(bytearray(b"\x01\x02")) == b"\x01\x02"

    def test_invalid_hex(self):
        with pytest.raises(ValueError):
            to_call_data("0xzz")

    def test_invalid_type(self):
        with pytest.raises(ValueError):
            to_call_data(1234)
