"""
Constants for the JW Platform management client.
"""

# Config option names (mirroring the jw-platform.management.* settings)
OPTION_KEY = "key"
OPTION_SECRET = "secret"
OPTION_PROTOCOL = "protocol"
OPTION_SERVER = "server"
OPTION_VERSION = "version"

# Default configuration values
DEFAULT_CONFIG = {
    OPTION_KEY: None,
    OPTION_SECRET: None,
    OPTION_PROTOCOL: "https",
    OPTION_SERVER: "api.jwplatform.com",
    OPTION_VERSION: "v1",
}

# Environment variables read by ManagementConfig.from_env()
ENV_PREFIX = "JWPLATFORM_MANAGEMENT_"

# System parameters injected into every request
PARAM_NONCE = "api_nonce"
PARAM_TIMESTAMP = "api_timestamp"
PARAM_KEY = "api_key"
PARAM_FORMAT = "api_format"
PARAM_SIGNATURE = "api_signature"

API_FORMAT = "json"

# Nonce range, rendered zero-padded to NONCE_DIGITS
NONCE_MAX = 99999999
NONCE_DIGITS = 8

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}

# Value of the top-level "status" field on failed API calls
STATUS_ERROR = "error"

# Video endpoints
PATH_VIDEOS_CREATE = "/videos/create"
PATH_VIDEOS_UPDATE = "/videos/update/"
