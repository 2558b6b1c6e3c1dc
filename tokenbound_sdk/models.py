"""
Data models for the Tokenbound SDK.
"""
from typing import Any, Dict, Optional

from eth_utils import to_hex
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils import normalize_address


class CustomImplementation(BaseModel):
    """Override of the default account implementation and registry addresses"""
    implementation_address: Optional[str] = Field(None, alias="implementationAddress")
    registry_address: Optional[str] = Field(None, alias="registryAddress")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("implementation_address", "registry_address")
    @classmethod
    def _checksum(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return normalize_address(value)


class PreparedTransaction(BaseModel):
    """An unsent transaction: destination, native value and ABI-encoded call data"""
    to: str
    value: int = Field(0, ge=0)
    data: bytes = b""

    model_config = ConfigDict(frozen=True)

    @field_validator("to")
    @classmethod
    def _checksum_to(cls, value: str) -> str:
        return normalize_address(value, "to")

    @property
    def data_hex(self) -> str:
        return to_hex(self.data)

    def to_tx_dict(self) -> Dict[str, Any]:
        """
        Transaction fields in the shape web3.py and eth_account expect.

        Returns:
            Dictionary with ``to``, ``value`` and hex-encoded ``data``
        """
        return {
            "to": self.to,
            "value": self.value,
            "data": self.data_hex,
        }
