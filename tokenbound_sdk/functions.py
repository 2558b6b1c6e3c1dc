"""
Address derivation, call-data encoding and wallet-client submission for ERC-6551 accounts.

Everything up to ``prepare_execute_call`` is pure: no provider and no network
access are needed. ``create_account`` and ``execute_call`` submit through a
``WalletClient``; ``fetch_account`` and ``is_account_deployed`` read chain state
through web3.py.
"""
import logging
from typing import Optional, Union

from eth_abi import encode
from eth_utils import to_bytes
from web3 import Web3

from .abis import (
    CREATE_ACCOUNT_SIGNATURE,
    ERC6551_REGISTRY_ABI,
    EXECUTE_CALL_SIGNATURE,
    INITIALIZE_SIGNATURE,
)
from .config import DEFAULT_IMPLEMENTATION_ADDRESS, DEFAULT_REGISTRY_ADDRESS, DEFAULT_SALT
from .models import PreparedTransaction
from .signer import WalletClient
from .utils import (
    UintLike,
    function_selector,
    get_create2_address,
    normalize_address,
    normalize_token_id,
    parse_uint,
    to_call_data,
)

logger = logging.getLogger(__name__)

# ERC-1167 style proxy that delegates to the implementation, followed by the
# ABI-encoded (salt, chainId, tokenContract, tokenId) footer
CREATION_CODE_PREFIX = bytes.fromhex("3d60ad80600a3d3981f3363d3d373d3d3d363d73")
CREATION_CODE_SUFFIX = bytes.fromhex("5af43d82803e903d91602b57fd5bf3")
CREATION_CODE_LENGTH = len(CREATION_CODE_PREFIX) + 20 + len(CREATION_CODE_SUFFIX) + 4 * 32

CREATE_ACCOUNT_SELECTOR = function_selector(CREATE_ACCOUNT_SIGNATURE)
EXECUTE_CALL_SELECTOR = function_selector(EXECUTE_CALL_SIGNATURE)
INITIALIZE_SELECTOR = function_selector(INITIALIZE_SIGNATURE)


def _resolve_chain_id(chain_id: UintLike) -> int:
    return parse_uint(chain_id, "chain_id")


def _with_default(address: Optional[str], default: str) -> str:
    return default if address is None else address


def get_creation_code(
    implementation: str,
    chain_id: UintLike,
    token_contract: str,
    token_id: UintLike,
    salt: UintLike = DEFAULT_SALT
) -> bytes:
    """
    Build the init code the registry deploys for a token-bound account.

    Args:
        implementation: Account implementation address
        chain_id: Chain ID the token lives on
        token_contract: NFT contract address
        token_id: Token ID (int or decimal string)
        salt: Registry salt

    Returns:
        The packed creation code, 183 bytes long

    Raises:
        InvalidAddressError: If an address argument is malformed
        InvalidTokenIdError: If the token ID is not an unsigned integer
    """
    implementation_bytes = to_bytes(hexstr=normalize_address(implementation, "implementation"))
    token_contract = normalize_address(token_contract, "token_contract")
    footer = encode(
        ["uint256", "uint256", "address", "uint256"],
        [parse_uint(salt, "salt"), _resolve_chain_id(chain_id), token_contract, normalize_token_id(token_id)]
    )
    return CREATION_CODE_PREFIX + implementation_bytes + CREATION_CODE_SUFFIX + footer


def compute_account(
    token_contract: str,
    token_id: UintLike,
    chain_id: UintLike,
    implementation_address: Optional[str] = None,
    registry_address: Optional[str] = None
) -> str:
    """
    Compute the token-bound account address the registry would deploy.

    This evaluates the registry's CREATE2 derivation locally and matches what
    the registry's ``account`` view reports on-chain.

    Args:
        token_contract: NFT contract address
        token_id: Token ID (int or decimal string)
        chain_id: Chain ID the token lives on
        implementation_address: Account implementation (defaults to the network-wide one)
        registry_address: Registry contract (defaults to the network-wide one)

    Returns:
        Checksummed account address

    Raises:
        InvalidAddressError: If an address argument is malformed
        InvalidTokenIdError: If the token ID is not an unsigned integer
    """
    implementation = _with_default(implementation_address, DEFAULT_IMPLEMENTATION_ADDRESS)
    registry = normalize_address(_with_default(registry_address, DEFAULT_REGISTRY_ADDRESS), "registry_address")

    code = get_creation_code(implementation, chain_id, token_contract, token_id, DEFAULT_SALT)
    return get_create2_address(registry, DEFAULT_SALT, code)


def prepare_create_account(
    token_contract: str,
    token_id: UintLike,
    chain_id: UintLike,
    implementation_address: Optional[str] = None,
    registry_address: Optional[str] = None
) -> PreparedTransaction:
    """
    Prepare a registry ``createAccount`` call that deploys and initializes the account.

    Returns:
        PreparedTransaction addressed to the registry with zero value
    """
    implementation = normalize_address(
        _with_default(implementation_address, DEFAULT_IMPLEMENTATION_ADDRESS), "implementation_address"
    )
    registry = normalize_address(_with_default(registry_address, DEFAULT_REGISTRY_ADDRESS), "registry_address")
    token_contract = normalize_address(token_contract, "token_contract")

    args = encode(
        ["address", "uint256", "address", "uint256", "uint256", "bytes"],
        [
            implementation,
            _resolve_chain_id(chain_id),
            token_contract,
            normalize_token_id(token_id),
            DEFAULT_SALT,
            INITIALIZE_SELECTOR,
        ]
    )
    logger.debug(f"Prepared createAccount for {token_contract} #{token_id} on chain {chain_id}")
    return PreparedTransaction(to=registry, value=0, data=CREATE_ACCOUNT_SELECTOR + args)


def prepare_execute_call(
    account: str,
    to: str,
    value: UintLike,
    data: Union[str, bytes, None]
) -> PreparedTransaction:
    """
    Prepare an ``executeCall`` on a token-bound account.

    Args:
        account: The token-bound account that performs the call
        to: Call target
        value: Native value (wei) the account forwards to ``to``
        data: Call data for ``to`` as bytes or 0x-hex text

    Returns:
        PreparedTransaction addressed to the account, carrying ``value``
    """
    account = normalize_address(account, "account")
    to = normalize_address(to, "to")
    value = parse_uint(value, "value")

    args = encode(["address", "uint256", "bytes"], [to, value, to_call_data(data)])
    logger.debug(f"Prepared executeCall on {account} to {to} with value {value}")
    return PreparedTransaction(to=account, value=value, data=EXECUTE_CALL_SELECTOR + args)


def create_account(
    token_contract: str,
    token_id: UintLike,
    wallet_client: WalletClient,
    implementation_address: Optional[str] = None,
    registry_address: Optional[str] = None
) -> str:
    """
    Deploy a token-bound account through a wallet client.

    The chain ID is taken from the network the wallet client is connected to.

    Returns:
        Transaction hash reported by the wallet client
    """
    chain_id = wallet_client.get_chain_id()
    tx = prepare_create_account(
        token_contract, token_id, chain_id, implementation_address, registry_address
    )
    return wallet_client.send_transaction(tx.to_tx_dict())


def execute_call(
    account: str,
    to: str,
    value: UintLike,
    data: Union[str, bytes, None],
    wallet_client: WalletClient
) -> str:
    """
    Execute a call through a token-bound account with a wallet client.

    Returns:
        Transaction hash reported by the wallet client
    """
    tx = prepare_execute_call(account, to, value, data)
    return wallet_client.send_transaction(tx.to_tx_dict())


def fetch_account(
    w3: Web3,
    token_contract: str,
    token_id: UintLike,
    chain_id: Optional[UintLike] = None,
    implementation_address: Optional[str] = None,
    registry_address: Optional[str] = None
) -> str:
    """
    Ask the registry contract for the account address.

    Unlike ``compute_account`` this makes an ``eth_call``. When ``chain_id``
    is omitted the chain ID of the connected node is used.

    Returns:
        Checksummed account address reported by the registry
    """
    implementation = normalize_address(
        _with_default(implementation_address, DEFAULT_IMPLEMENTATION_ADDRESS), "implementation_address"
    )
    registry = normalize_address(_with_default(registry_address, DEFAULT_REGISTRY_ADDRESS), "registry_address")
    resolved_chain_id = w3.eth.chain_id if chain_id is None else _resolve_chain_id(chain_id)

    contract = w3.eth.contract(address=registry, abi=ERC6551_REGISTRY_ABI)
    result = contract.functions.account(
        implementation,
        resolved_chain_id,
        normalize_address(token_contract, "token_contract"),
        normalize_token_id(token_id),
        DEFAULT_SALT,
    ).call()
    return normalize_address(result, "account")


def is_account_deployed(w3: Web3, account: str) -> bool:
    """Return True if code is deployed at the account address"""
    code = w3.eth.get_code(normalize_address(account, "account"))
    return len(code) > 0
