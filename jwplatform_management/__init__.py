"""
JW Platform Management API client

A Python client that builds signed request URLs for the JW Platform
management API, performs the calls and turns API-reported failures into
exceptions.

Example usage:
    from jwplatform_management import ManagementClient

    client = ManagementClient("your-api-key", "your-api-secret")
    videos = client.get("/videos/list", {"result_limit": 10})
"""

from .client import ManagementClient
from .config import ManagementConfig
from .exceptions import (
    ManagementError,
    ConfigurationError,
    SigningInputError,
    DecodeError,
    ApiError,
    TransportError
)
from .signing import (
    encode,
    canonical_query,
    signature_base_string,
    generate_signature
)

__version__ = "1.0.0"
__all__ = [
    "ManagementClient",
    "ManagementConfig",
    "ManagementError",
    "ConfigurationError",
    "SigningInputError",
    "DecodeError",
    "ApiError",
    "TransportError",
    "encode",
    "canonical_query",
    "signature_base_string",
    "generate_signature"
]
