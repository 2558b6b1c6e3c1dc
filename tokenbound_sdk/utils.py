"""
Utility functions for the Tokenbound SDK.
"""
from typing import Union

from eth_utils import is_checksum_address, is_checksum_formatted_address, is_hex_address
from eth_utils import keccak, to_bytes, to_checksum_address
from eth_utils import function_signature_to_4byte_selector

from .exceptions import InvalidAddressError, InvalidTokenIdError

UINT256_MAX = 2 ** 256 - 1

AddressLike = Union[str, bytes]
UintLike = Union[int, str]


def normalize_address(value: AddressLike, name: str = "address") -> str:
    """
    Validate an address and return it in checksum form.

    Args:
        value: 0x-prefixed hex string or 20 raw bytes
        name: Argument name used in the error message

    Returns:
        EIP-55 checksummed address

    Raises:
        InvalidAddressError: If the value is not a well-formed 20-byte address
    """
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 20:
            raise InvalidAddressError(
                f"{name} must be 20 bytes long (got {len(value)})", value
            )
        return to_checksum_address(bytes(value))

    if not isinstance(value, str) or not is_hex_address(value):
        raise InvalidAddressError(f"Invalid {name}: {value!r}", value)
    # Mixed case must carry a valid EIP-55 checksum
    if is_checksum_formatted_address(value) and not is_checksum_address(value):
        raise InvalidAddressError(f"Invalid checksum for {name}: {value!r}", value)
    return to_checksum_address(value)


def parse_uint(value: UintLike, name: str = "value") -> int:
    """
    Parse an unsigned 256-bit integer from an int, a decimal string or a 0x-hex string.

    Raises:
        ValueError: If the value is not numeric, negative or larger than uint256
    """
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got bool")
    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        try:
            number = int(text, 16) if text.lower().startswith("0x") else int(text, 10)
        except ValueError:
            raise ValueError(f"{name} must be numeric (got: {value!r})")
    else:
        raise ValueError(f"{name} must be an int or str, got {type(value).__name__}")

    if number < 0:
        raise ValueError(f"{name} must not be negative (got: {number})")
    if number > UINT256_MAX:
        raise ValueError(f"{name} does not fit in uint256")
    return number


def normalize_token_id(token_id: UintLike) -> int:
    """
    Convert a token ID to an int.

    Raises:
        InvalidTokenIdError: If the token ID is not an unsigned 256-bit integer
    """
    try:
        return parse_uint(token_id, "token_id")
    except ValueError as e:
        raise InvalidTokenIdError(str(e))


def to_call_data(data: Union[str, bytes, None]) -> bytes:
    """
    Convert call data given as bytes or hex text into bytes.

    ``None``, ``""`` and ``"0x"`` all mean empty call data.
    """
    if data is None:
        return b""
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if isinstance(data, str):
        if data in ("", "0x"):
            return b""
        try:
            return to_bytes(hexstr=data)
        except ValueError as e:
            raise ValueError(f"Invalid hex call data: {str(e)}")
    raise ValueError(f"Call data must be bytes or hex string, got {type(data).__name__}")


def function_selector(signature: str) -> bytes:
    """Return the 4-byte selector for a canonical function signature."""
    return function_signature_to_4byte_selector(signature)


def get_create2_address(deployer: AddressLike, salt: Union[int, bytes], init_code: bytes) -> str:
    """
    Compute a CREATE2 address as defined by EIP-1014.

    ``keccak256(0xff ++ deployer ++ salt ++ keccak256(init_code))[12:]``

    Args:
        deployer: Address of the deploying contract
        salt: 32-byte salt, or an int that is left-padded to 32 bytes
        init_code: Contract creation code

    Returns:
        Checksummed address of the contract the deployer would create
    """
    deployer_bytes = to_bytes(hexstr=normalize_address(deployer, "deployer"))

    if isinstance(salt, int):
        salt_bytes = salt.to_bytes(32, "big")
    else:
        salt_bytes = bytes(salt)
    if len(salt_bytes) != 32:
        raise ValueError(f"salt must be 32 bytes long (got {len(salt_bytes)})")

    digest = keccak(b"\xff" + deployer_bytes + salt_bytes + keccak(init_code))
    return to_checksum_address(digest[12:])
