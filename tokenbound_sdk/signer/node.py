"""
Wallet client for accounts managed by the connected node.
"""
import logging
from typing import Any, Dict, Optional

from web3 import Web3

from ..utils import normalize_address

logger = logging.getLogger(__name__)


class NodeWalletClient:
    """
    WalletClient that lets the node sign with one of its unlocked accounts.

    Suitable for development chains (anvil, hardhat) and for nodes fronting
    a remote signer.
    """

    def __init__(self, w3: Web3, address: Optional[str] = None):
        self.w3 = w3
        if address is not None:
            self.address = normalize_address(address, "address")
        else:
            accounts = self.w3.eth.accounts
            if not accounts:
                raise ValueError("Node exposes no accounts and no address was given")
            self.address = normalize_address(accounts[0], "address")

    def get_chain_id(self) -> int:
        return self.w3.eth.chain_id

    def send_transaction(self, transaction: Dict[str, Any]) -> str:
        """Submit a transaction from the wallet's account and return its hash"""
        params = {"from": self.address, **transaction}
        tx_hash = self.w3.eth.send_transaction(params)
        tx_hash_hex = Web3.to_hex(tx_hash)
        logger.info(f"Transaction sent from {self.address}: {tx_hash_hex}")
        return tx_hash_hex
