"""
Local private-key signer backed by eth_account and web3.py.
"""
import logging
from typing import Any, Dict, Optional

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import Web3

from ..utils import normalize_address

DEFAULT_GAS_LIMIT = 300000


class LocalSigner:
    """
    RawSigner that signs transactions locally and broadcasts them over RPC.

    The key never leaves this object; the Tokenbound client only sees
    ``send_transaction`` and ``get_chain_id``.
    """

    def __init__(
        self,
        private_key: str,
        w3: Optional[Web3] = None,
        rpc_url: Optional[str] = None,
        default_gas: int = DEFAULT_GAS_LIMIT,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the signer

        Args:
            private_key: Hex-encoded secp256k1 private key
            w3: Connected Web3 instance (optional if rpc_url provided)
            rpc_url: RPC endpoint used to build a Web3 instance when w3 is not given
            default_gas: Gas limit used when estimation fails
            logger: Optional logger instance

        Raises:
            ValueError: If neither w3 nor rpc_url is provided
        """
        if w3 is None and not rpc_url:
            raise ValueError("Either w3 or rpc_url must be provided")

        self.w3 = w3 if w3 is not None else Web3(Web3.HTTPProvider(rpc_url))
        self.account: LocalAccount = Account.from_key(private_key)
        self.default_gas = default_gas
        self.logger = logger or logging.getLogger(__name__)

    @property
    def address(self) -> str:
        return self.account.address

    def get_chain_id(self) -> int:
        return self.w3.eth.chain_id

    def build_transaction(self, transaction: Dict[str, Any]) -> Dict[str, Any]:
        """
        Fill in nonce, chain ID, gas and gas price for a ``{to, value, data}`` transaction.

        Fields already present in ``transaction`` are kept as given.
        """
        tx: Dict[str, Any] = {
            "to": normalize_address(transaction["to"], "to"),
            "value": int(transaction.get("value", 0)),
            "data": transaction.get("data", "0x"),
        }
        if "nonce" in transaction:
            tx["nonce"] = transaction["nonce"]
        else:
            tx["nonce"] = self.w3.eth.get_transaction_count(self.address)
        tx["chainId"] = transaction["chainId"] if "chainId" in transaction else self.get_chain_id()

        if "gas" in transaction:
            tx["gas"] = transaction["gas"]
        else:
            try:
                estimate = self.w3.eth.estimate_gas({**tx, "from": self.address})
                # Add 10% buffer to gas estimate
                tx["gas"] = int(estimate * 1.1)
                self.logger.debug(f"Estimated gas: {tx['gas']}")
            except Exception as e:
                tx["gas"] = self.default_gas
                self.logger.warning(f"Gas estimation failed, using default: {tx['gas']}. Error: {e}")

        for fee_field in ("gasPrice", "maxFeePerGas", "maxPriorityFeePerGas"):
            if fee_field in transaction:
                tx[fee_field] = transaction[fee_field]
        if not any(f in tx for f in ("gasPrice", "maxFeePerGas")):
            tx["gasPrice"] = self.w3.eth.gas_price

        return tx

    def send_transaction(self, transaction: Dict[str, Any]) -> str:
        """
        Sign a transaction with the local key and broadcast it

        Args:
            transaction: Dictionary with ``to``, ``value`` and ``data``

        Returns:
            0x-prefixed transaction hash
        """
        tx = self.build_transaction(transaction)
        signed_tx = self.account.sign_transaction(tx)
        tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        tx_hash_hex = Web3.to_hex(tx_hash)
        self.logger.info(f"Transaction sent: {tx_hash_hex}")
        return tx_hash_hex
