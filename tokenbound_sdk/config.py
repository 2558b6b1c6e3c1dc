"""
Configuration for the Tokenbound SDK.

The ERC-6551 registry and the default account implementation are deployed at
the same address on every supported chain, so the defaults below hold for any
chain ID. They can be overridden per client or per call, or through the
environment when building a client with ``TokenboundClient.from_env``.
"""
import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Network-wide singletons
DEFAULT_IMPLEMENTATION_ADDRESS = "0x2d25602551487c3f3354dd80d76d54383a243358"
DEFAULT_REGISTRY_ADDRESS = "0x02101dfb77fde026414827fdc604ddaf224f0921"

# Salt the registry is called with; the SDK never varies it
DEFAULT_SALT = 0

ENV_CHAIN_ID = "TOKENBOUND_CHAIN_ID"
ENV_IMPLEMENTATION_ADDRESS = "TOKENBOUND_IMPLEMENTATION_ADDRESS"
ENV_REGISTRY_ADDRESS = "TOKENBOUND_REGISTRY_ADDRESS"


@dataclass(frozen=True)
class EnvConfig:
    """
    Client settings read from environment variables.

    Attributes:
        chain_id: Target chain ID (``TOKENBOUND_CHAIN_ID``)
        implementation_address: Optional implementation override
        registry_address: Optional registry override
    """
    chain_id: int
    implementation_address: Optional[str] = None
    registry_address: Optional[str] = None

    @property
    def has_custom_implementation(self) -> bool:
        return bool(self.implementation_address or self.registry_address)


def load_env_config(environ: Optional[Mapping[str, str]] = None) -> EnvConfig:
    """
    Load client settings from the environment.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)

    Returns:
        EnvConfig with the values found

    Raises:
        ConfigurationError: If the chain ID is missing or not an integer
    """
    env = os.environ if environ is None else environ

    raw_chain_id = (env.get(ENV_CHAIN_ID) or "").strip()
    if not raw_chain_id:
        raise ConfigurationError(f"{ENV_CHAIN_ID} environment variable is required")
    try:
        chain_id = int(raw_chain_id, 0)
    except ValueError:
        raise ConfigurationError(
            f"{ENV_CHAIN_ID} must be an integer (got: {raw_chain_id!r})"
        )

    config = EnvConfig(
        chain_id=chain_id,
        implementation_address=env.get(ENV_IMPLEMENTATION_ADDRESS) or None,
        registry_address=env.get(ENV_REGISTRY_ADDRESS) or None,
    )
    logger.debug(f"Loaded environment config for chain {config.chain_id}")
    return config
