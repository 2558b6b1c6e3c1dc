"""
Submission backend bound to a TokenboundClient.

A client holds exactly one of ``RawSignerBackend``, ``WalletClientBackend``
or ``UnboundBackend``, chosen once by ``bind_backend`` at construction.
Each variant knows how to submit both account operations, so the client
dispatches without re-checking which capability is present.
"""
from dataclasses import dataclass
from typing import Optional, Union

from . import functions
from .exceptions import ConfigurationError, NoBackendError
from .signer import RawSigner, WalletClient
from .utils import UintLike


@dataclass(frozen=True)
class RawSignerBackend:
    """Signs and broadcasts prepared transactions for the client's chain ID"""
    signer: RawSigner
    name = "signer"

    def create_account(
        self,
        token_contract: str,
        token_id: UintLike,
        chain_id: int,
        implementation_address: str,
        registry_address: str
    ) -> str:
        tx = functions.prepare_create_account(
            token_contract, token_id, chain_id, implementation_address, registry_address
        )
        return self.signer.send_transaction(tx.to_tx_dict())

    def execute_call(self, account: str, to: str, value: UintLike, data) -> str:
        tx = functions.prepare_execute_call(account, to, value, data)
        return self.signer.send_transaction(tx.to_tx_dict())


@dataclass(frozen=True)
class WalletClientBackend:
    """Delegates to the wallet-client submission functions, which resolve the chain ID"""
    wallet_client: WalletClient
    name = "wallet_client"

    def create_account(
        self,
        token_contract: str,
        token_id: UintLike,
        chain_id: int,
        implementation_address: str,
        registry_address: str
    ) -> str:
        # chain_id is resolved from the wallet client instead
        return functions.create_account(
            token_contract, token_id, self.wallet_client, implementation_address, registry_address
        )

    def execute_call(self, account: str, to: str, value: UintLike, data) -> str:
        return functions.execute_call(account, to, value, data, self.wallet_client)


@dataclass(frozen=True)
class UnboundBackend:
    """No submission capability; every submitting operation fails"""
    name = "unbound"

    def create_account(self, *args, **kwargs) -> str:
        raise NoBackendError("No wallet client or signer available.")

    def execute_call(self, *args, **kwargs) -> str:
        raise NoBackendError("No wallet client or signer available.")


Backend = Union[RawSignerBackend, WalletClientBackend, UnboundBackend]


def bind_backend(
    signer: Optional[RawSigner] = None,
    wallet_client: Optional[WalletClient] = None
) -> Backend:
    """
    Pick the submission backend for a client.

    Raises:
        ConfigurationError: If both a signer and a wallet client are supplied
    """
    if signer is not None and wallet_client is not None:
        raise ConfigurationError("Only one of `signer` or `wallet_client` should be provided.")
    if signer is not None:
        return RawSignerBackend(signer)
    if wallet_client is not None:
        return WalletClientBackend(wallet_client)
    return UnboundBackend()
