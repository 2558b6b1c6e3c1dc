"""
Submission backends for the Tokenbound SDK.

The client never holds keys itself. It hands prepared transactions to one of
two caller-supplied capabilities. Both expose the same two methods; they
differ in which chain ID the client encodes with:

- ``RawSigner``: the client encodes chain-dependent calls with its own
  ``chain_id`` and only asks the signer to submit.
- ``WalletClient``: the client asks the wallet for ``get_chain_id()`` first
  and encodes with the chain the wallet is connected to.
"""
from typing import Any, Dict, Protocol, runtime_checkable


@runtime_checkable
class RawSigner(Protocol):
    """Protocol for signers that sign and broadcast prepared transactions"""

    def send_transaction(self, transaction: Dict[str, Any]) -> str:
        """Sign and broadcast a ``{to, value, data}`` transaction, returning its hash"""
        ...

    def get_chain_id(self) -> int:
        """Return the chain ID of the connected network"""
        ...


@runtime_checkable
class WalletClient(Protocol):
    """Protocol for wallet clients whose connected chain decides the encoded chain ID"""

    def send_transaction(self, transaction: Dict[str, Any]) -> str:
        """Submit a ``{to, value, data}`` transaction, returning its hash"""
        ...

    def get_chain_id(self) -> int:
        """Return the chain ID of the network the wallet is connected to"""
        ...


__all__ = ["RawSigner", "WalletClient"]
