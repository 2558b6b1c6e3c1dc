"""
Exceptions for the Tokenbound SDK.
"""


class TokenboundError(Exception):
    """Base exception for all Tokenbound SDK errors."""
    pass


class ConfigurationError(TokenboundError, ValueError):
    """Raised when client construction options are missing or conflicting."""
    pass


class InvalidAddressError(TokenboundError, ValueError):
    """Raised when an address argument is not a well-formed 20-byte hex address."""

    def __init__(self, message: str, value=None):
        self.value = value
        super().__init__(message)


class InvalidTokenIdError(TokenboundError, ValueError):
    """Raised when a token ID is not an unsigned integer."""
    pass


class NoBackendError(TokenboundError):
    """Raised when a submitting operation runs on a client with no signer or wallet client."""
    pass
