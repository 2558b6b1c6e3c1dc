"""
Tokenbound SDK - Python client for ERC-6551 token-bound accounts.
"""
from .abis import ERC6551_ACCOUNT_ABI, ERC6551_REGISTRY_ABI
from .client import TokenboundClient
from .config import DEFAULT_IMPLEMENTATION_ADDRESS, DEFAULT_REGISTRY_ADDRESS
from .exceptions import (
    ConfigurationError,
    InvalidAddressError,
    InvalidTokenIdError,
    NoBackendError,
    TokenboundError,
)
from .functions import (
    compute_account,
    create_account,
    execute_call,
    fetch_account,
    get_creation_code,
    is_account_deployed,
    prepare_create_account,
    prepare_execute_call,
)
from .models import CustomImplementation, PreparedTransaction
from .signer import RawSigner, WalletClient
from .version import __version__

__all__ = [
    "TokenboundClient",
    "CustomImplementation",
    "PreparedTransaction",
    "RawSigner",
    "WalletClient",
    "compute_account",
    "create_account",
    "execute_call",
    "fetch_account",
    "get_creation_code",
    "is_account_deployed",
    "prepare_create_account",
    "prepare_execute_call",
    "ERC6551_ACCOUNT_ABI",
    "ERC6551_REGISTRY_ABI",
    "DEFAULT_IMPLEMENTATION_ADDRESS",
    "DEFAULT_REGISTRY_ADDRESS",
    "TokenboundError",
    "ConfigurationError",
    "InvalidAddressError",
    "InvalidTokenIdError",
    "NoBackendError",
    "__version__",
]
