"""
TokenboundClient - Main client for ERC-6551 token-bound accounts.
"""
import logging
from typing import Any, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from . import functions
from .backend import Backend, bind_backend
from .config import (
    DEFAULT_IMPLEMENTATION_ADDRESS,
    DEFAULT_REGISTRY_ADDRESS,
    load_env_config,
)
from .exceptions import ConfigurationError
from .models import CustomImplementation, PreparedTransaction
from .signer import RawSigner, WalletClient
from .utils import UintLike


class TokenboundClient:
    """
    Client for token-bound accounts on a single chain.

    This client handles:
    1. Computing account addresses locally
    2. Preparing createAccount and executeCall transactions
    3. Submitting them through a signer or a wallet client

    Address and preparation methods need no backend. Submitting methods
    need exactly one of ``signer`` or ``wallet_client``.
    """

    def __init__(
        self,
        chain_id: Optional[int] = None,
        signer: Optional[RawSigner] = None,
        wallet_client: Optional[WalletClient] = None,
        custom_implementation: Optional[Union[CustomImplementation, Mapping[str, Any]]] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the TokenboundClient

        Args:
            chain_id: Chain ID of the network the accounts live on
            signer: RawSigner that signs and broadcasts prepared transactions
            wallet_client: WalletClient that submits transactions and reports its chain
            custom_implementation: Implementation and registry addresses replacing the defaults
            logger: Optional logger instance to use for debug/info logging

        Raises:
            ConfigurationError: If chain_id is missing or not a positive integer
            ConfigurationError: If both signer and wallet_client are provided
            ConfigurationError: If custom_implementation holds a malformed address
        """
        if not chain_id:
            raise ConfigurationError("chain_id is required.")
        if isinstance(chain_id, bool) or not isinstance(chain_id, int) or chain_id < 0:
            raise ConfigurationError(f"chain_id must be a positive integer (got: {chain_id!r})")

        self.chain_id = chain_id
        self.logger = logger or logging.getLogger(__name__)
        self.backend: Backend = bind_backend(signer=signer, wallet_client=wallet_client)
        self.custom_implementation = self._coerce_custom_implementation(custom_implementation)

        self.is_initialized = True
        self.logger.debug(f"TokenboundClient initialized for chain {chain_id} ({self.backend.name})")

    @classmethod
    def from_env(
        cls,
        signer: Optional[RawSigner] = None,
        wallet_client: Optional[WalletClient] = None,
        environ: Optional[Mapping[str, str]] = None,
        logger: Optional[logging.Logger] = None
    ) -> "TokenboundClient":
        """
        Build a client from ``TOKENBOUND_*`` environment variables.

        Raises:
            ConfigurationError: If TOKENBOUND_CHAIN_ID is missing or invalid
            ConfigurationError: If an address override is malformed
        """
        config = load_env_config(environ)
        custom = None
        if config.has_custom_implementation:
            custom = {
                "implementation_address": config.implementation_address,
                "registry_address": config.registry_address,
            }
        return cls(
            chain_id=config.chain_id,
            signer=signer,
            wallet_client=wallet_client,
            custom_implementation=custom,
            logger=logger,
        )

    @staticmethod
    def _coerce_custom_implementation(
        value: Optional[Union[CustomImplementation, Mapping[str, Any]]]
    ) -> Optional[CustomImplementation]:
        if value is None or isinstance(value, CustomImplementation):
            return value
        if not isinstance(value, Mapping):
            raise ConfigurationError(
                f"custom_implementation must be a mapping or CustomImplementation, got {type(value).__name__}"
            )
        try:
            return CustomImplementation.model_validate(dict(value))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid custom_implementation: {e}")

    @property
    def signer(self) -> Optional[RawSigner]:
        return getattr(self.backend, "signer", None)

    @property
    def wallet_client(self) -> Optional[WalletClient]:
        return getattr(self.backend, "wallet_client", None)

    def _resolve_addresses(
        self,
        implementation_address: Optional[str],
        registry_address: Optional[str]
    ) -> Tuple[str, str]:
        """
        Resolve implementation and registry addresses.

        Per-call overrides win over the client's custom implementation,
        which wins over the network-wide defaults.
        """
        custom = self.custom_implementation

        implementation = implementation_address
        if implementation is None and custom is not None:
            implementation = custom.implementation_address
        if implementation is None:
            implementation = DEFAULT_IMPLEMENTATION_ADDRESS

        registry = registry_address
        if registry is None and custom is not None:
            registry = custom.registry_address
        if registry is None:
            registry = DEFAULT_REGISTRY_ADDRESS

        return implementation, registry

    def get_account(
        self,
        token_contract: str,
        token_id: UintLike,
        implementation_address: Optional[str] = None,
        registry_address: Optional[str] = None
    ) -> str:
        """
        Get the token-bound account address for a token.

        The address is computed locally; no contract call is made.

        Args:
            token_contract: NFT contract address
            token_id: Token ID (int or decimal string)
            implementation_address: Optional implementation override
            registry_address: Optional registry override

        Returns:
            Checksummed account address

        Raises:
            InvalidAddressError: If an address argument is malformed
        """
        implementation, registry = self._resolve_addresses(implementation_address, registry_address)
        return functions.compute_account(token_contract, token_id, self.chain_id, implementation, registry)

    def prepare_create_account(
        self,
        token_contract: str,
        token_id: UintLike,
        implementation_address: Optional[str] = None,
        registry_address: Optional[str] = None
    ) -> PreparedTransaction:
        """
        Prepare the transaction that creates the token-bound account for a token.

        The result can be sent by any signer or wallet client, e.g. with
        ``PreparedTransaction.to_tx_dict()``.

        Returns:
            PreparedTransaction addressed to the registry
        """
        implementation, registry = self._resolve_addresses(implementation_address, registry_address)
        return functions.prepare_create_account(
            token_contract, token_id, self.chain_id, implementation, registry
        )

    def create_account(
        self,
        token_contract: str,
        token_id: UintLike,
        implementation_address: Optional[str] = None,
        registry_address: Optional[str] = None
    ) -> str:
        """
        Create the token-bound account for a token.

        Returns:
            Transaction hash of the createAccount transaction

        Raises:
            NoBackendError: If the client has neither a signer nor a wallet client
            InvalidAddressError: If an address argument is malformed
        """
        implementation, registry = self._resolve_addresses(implementation_address, registry_address)
        try:
            tx_hash = self.backend.create_account(
                token_contract, token_id, self.chain_id, implementation, registry
            )
        except Exception as e:
            self.logger.error(f"createAccount failed for {token_contract} #{token_id}: {e}")
            raise
        self.logger.info(f"createAccount sent for {token_contract} #{token_id}: {tx_hash}")
        return tx_hash

    def prepare_execute_call(
        self,
        account: str,
        to: str,
        value: UintLike,
        data: Union[str, bytes, None]
    ) -> PreparedTransaction:
        """
        Prepare a transaction that executes a call through a token-bound account.

        Args:
            account: The token-bound account address
            to: Call target
            value: Value in wei the account sends along
            data: Call data as bytes or 0x-hex text

        Returns:
            PreparedTransaction addressed to the account
        """
        return functions.prepare_execute_call(account, to, value, data)

    def execute_call(
        self,
        account: str,
        to: str,
        value: UintLike,
        data: Union[str, bytes, None]
    ) -> str:
        """
        Execute a call through a token-bound account.

        Returns:
            Transaction hash of the executeCall transaction

        Raises:
            NoBackendError: If the client has neither a signer nor a wallet client
        """
        try:
            tx_hash = self.backend.execute_call(account, to, value, data)
        except Exception as e:
            self.logger.error(f"executeCall on {account} failed: {e}")
            raise
        self.logger.info(f"executeCall sent on {account}: {tx_hash}")
        return tx_hash
