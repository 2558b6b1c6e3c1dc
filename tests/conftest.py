"""
Pytest fixtures for the Tokenbound SDK tests.
"""
import pytest
from typing import Any, Dict, List
from unittest.mock import MagicMock

from eth_account import Account
from web3 import Web3

from tokenbound_sdk import TokenboundClient

# Constants for testing
TEST_CHAIN_ID = 1
TEST_PRIV_KEY = "0x0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"
TEST_TOKEN_CONTRACT = "0xe7134a029cd2fd55f678d6809e64d0b6a0caddcb"
TEST_TOKEN_ID = "9"
TEST_IMPLEMENTATION = "0x1234567890123456789012345678901234567890"
TEST_REGISTRY = "0x2345678901234567890123456789012345678901"
TEST_ACCOUNT = "0x3456789012345678901234567890123456789012"
TEST_RECIPIENT = "0x4567890123456789012345678901234567890123"
TEST_TX_HASH = "0x" + "ab" * 32


class RecordingSigner:
    """RawSigner that records submitted transactions instead of broadcasting"""

    def __init__(self, chain_id: int = TEST_CHAIN_ID, tx_hash: str = TEST_TX_HASH):
        self.address = Account.from_key(TEST_PRIV_KEY).address
        self.chain_id = chain_id
        self.tx_hash = tx_hash
        self.sent: List[Dict[str, Any]] = []

    def send_transaction(self, transaction: Dict[str, Any]) -> str:
        self.sent.append(transaction)
        return self.tx_hash

    def get_chain_id(self) -> int:
        return self.chain_id


class RecordingWalletClient(RecordingSigner):
    """WalletClient that records submitted transactions and counts chain lookups"""

    def __init__(self, chain_id: int = TEST_CHAIN_ID, tx_hash: str = TEST_TX_HASH):
        super().__init__(chain_id=chain_id, tx_hash=tx_hash)
        self.chain_id_calls = 0

    def get_chain_id(self) -> int:
        self.chain_id_calls += 1
        return self.chain_id


class FailingSigner:
    """Signer whose backend always fails"""

    def __init__(self, error: Exception):
        self.address = "0x1234567890123456789012345678901234567890"
        self.error = error

    def send_transaction(self, transaction):
        raise self.error

    def get_chain_id(self):
        return TEST_CHAIN_ID


@pytest.fixture
def signer():
    return RecordingSigner()


@pytest.fixture
def wallet_client():
    return RecordingWalletClient()


@pytest.fixture
def signer_client(signer):
    return TokenboundClient(chain_id=TEST_CHAIN_ID, signer=signer)


@pytest.fixture
def wallet_client_client(wallet_client):
    return TokenboundClient(chain_id=TEST_CHAIN_ID, wallet_client=wallet_client)


@pytest.fixture
def unbound_client():
    return TokenboundClient(chain_id=TEST_CHAIN_ID)


@pytest.fixture
def mock_account():
    """Create a deterministic test account"""
    return Account.from_key(TEST_PRIV_KEY)


@pytest.fixture
def mock_w3():
    """Create a mock Web3 instance answering the calls the signers make"""
    mock = MagicMock(spec=Web3)
    eth = MagicMock()
    eth.chain_id = TEST_CHAIN_ID
    eth.gas_price = 1000000000  # 1 gwei
    eth.get_transaction_count = MagicMock(return_value=12)
    eth.estimate_gas = MagicMock(return_value=100000)
    eth.send_raw_transaction = MagicMock(return_value=bytes.fromhex("ab" * 32))
    eth.send_transaction = MagicMock(return_value=bytes.fromhex("cd" * 32))
    eth.accounts = ["0x5678901234567890123456789012345678901234"]
    mock.eth = eth
    return mock
