"""
JW Platform management API client.

Every call is signed: the client injects a nonce, a timestamp, the API
key and the response format into the request parameters, signs the whole
set with the shared secret and sends everything in the query string.
"""

import logging
import random
import time
from typing import Any, Callable, Dict, Mapping, Optional

import requests

from .config import ManagementConfig
from .constants import (
    API_FORMAT,
    DEFAULT_HEADERS,
    NONCE_DIGITS,
    NONCE_MAX,
    PARAM_FORMAT,
    PARAM_KEY,
    PARAM_NONCE,
    PARAM_SIGNATURE,
    PARAM_TIMESTAMP,
    PATH_VIDEOS_CREATE,
    PATH_VIDEOS_UPDATE,
    STATUS_ERROR,
)
from .exceptions import ApiError, DecodeError
from .signing import canonical_query, generate_signature

logger = logging.getLogger(__name__)


class ManagementClient:
    """
    Client for the JW Platform management API.

    Credentials and endpoint settings are fixed at construction. The HTTP
    transport, the nonce random source and the clock can be injected.
    """

    def __init__(
        self,
        key: Optional[str] = None,
        secret: Optional[str] = None,
        *,
        config: Optional[ManagementConfig] = None,
        protocol: Optional[str] = None,
        server: Optional[str] = None,
        version: Optional[str] = None,
        session: Optional[requests.Session] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize management client.

        Args:
            key: API key, overrides ``config.key``
            secret: API secret, overrides ``config.secret``
            config: Base settings; defaults to ``ManagementConfig()``
            protocol: URL scheme override
            server: API host override
            version: API version override
            session: requests-compatible session; one is created (and
                owned) when omitted
            rng: Source of nonces, anything with ``randint(a, b)``
            clock: Returns the current Unix time in seconds

        Raises:
            ConfigurationError: If credentials or endpoint parts are missing
        """
        base = config if config is not None else ManagementConfig()
        self.config = base.with_overrides(
            key=key, secret=secret, protocol=protocol, server=server, version=version
        )
        self.config.validate()

        self.rng = rng if rng is not None else random.SystemRandom()
        self.clock = clock

        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    @property
    def key(self) -> str:
        """API key used for signed requests."""
        return self.config.key

    def signature(self, params: Mapping[str, Any]) -> str:
        """Sign ``params`` with this client's secret."""
        return generate_signature(params, self.config.secret)

    def _nonce(self) -> str:
        """Random 8-digit, zero-padded nonce."""
        return str(self.rng.randint(0, NONCE_MAX)).zfill(NONCE_DIGITS)

    def system_params(self) -> Dict[str, Any]:
        """Fresh nonce, timestamp, key and format parameters for one request."""
        return {
            PARAM_NONCE: self._nonce(),
            PARAM_TIMESTAMP: int(self.clock()),
            PARAM_KEY: self.config.key,
            PARAM_FORMAT: API_FORMAT,
        }

    def sign_params(self, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Merge caller parameters with system parameters and sign them.

        System parameters take precedence over caller keys of the same
        name. ``api_signature`` is added after the digest is computed.
        """
        signed = dict(params or {})
        signed.update(self.system_params())
        signed[PARAM_SIGNATURE] = self.signature(signed)
        return signed

    def build_query(self, params: Optional[Mapping[str, Any]] = None) -> str:
        """Return the signed, canonical query string for ``params``."""
        return canonical_query(self.sign_params(params))

    def base_url(self, path: str) -> str:
        """Return the unsigned URL for ``path``, without query string."""
        return "{}://{}/{}/{}".format(
            self.config.protocol,
            self.config.server,
            self.config.version,
            path.lstrip("/"),
        )

    def format_url(self, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Build the fully qualified signed URL for ``path``."""
        return f"{self.base_url(path)}?{self.build_query(params)}"

    def _decode(self, response: requests.Response) -> Dict[str, Any]:
        """Decode a JSON object body or raise DecodeError."""
        try:
            decoded = response.json()
        except ValueError as e:
            raise DecodeError(
                f"Response is not valid JSON: {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e

        if not isinstance(decoded, dict):
            raise DecodeError(
                f"Expected a JSON object, got {type(decoded).__name__}",
                status_code=response.status_code,
                body=response.text,
            )
        return decoded

    def call(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        method: str = "GET",
    ) -> Dict[str, Any]:
        """
        Make a signed API call.

        Args:
            path: API path relative to the version root, e.g. ``/videos/list``
            params: Request parameters; sent in the query string
            method: HTTP method

        Returns:
            Decoded JSON response

        Raises:
            ApiError: If the response has ``"status": "error"``
            DecodeError: If the response body is not a JSON object
            requests.RequestException: If the HTTP request fails
        """
        method = method.upper()
        url = self.format_url(path, params)
        logger.debug("%s %s", method, self.base_url(path))

        response = self.session.request(method, url, headers=dict(DEFAULT_HEADERS))
        decoded = self._decode(response)

        if decoded.get("status") == STATUS_ERROR:
            error = ApiError.from_response(decoded)
            logger.warning("API error on %s %s: %r", method, path, error)
            raise error

        return decoded

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Make signed GET request."""
        return self.call(path, params, "GET")

    def post(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Make signed POST request."""
        return self.call(path, params, "POST")

    def create_video(
        self,
        source_url: str,
        metadata: Optional[Mapping[str, Any]] = None,
        tags: str = "",
    ) -> Dict[str, Any]:
        """
        Register a video fetched by the platform from ``source_url``.

        Keys in ``metadata`` override the base record, ``tags`` included.
        """
        record = {
            "sourcetype": "file",
            "download_url": source_url,
            "tags": tags,
        }
        record.update(metadata or {})
        return self.post(PATH_VIDEOS_CREATE, record)

    def update_video(
        self,
        video_key: str,
        metadata: Optional[Mapping[str, Any]] = None,
        tags: str = "",
    ) -> Dict[str, Any]:
        """Update title, description, author and tags of an existing video."""
        metadata = metadata or {}
        record = {
            "video_key": video_key,
            "title": metadata.get("title") or "",
            "description": metadata.get("description") or "",
            "author": metadata.get("author") or "",
            "tags": tags,
        }
        return self.post(PATH_VIDEOS_UPDATE, record)

    def close(self):
        """Close the HTTP session if this client created it."""
        if self._owns_session and self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
