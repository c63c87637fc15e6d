"""
Configuration for the management client.

Options follow the ``jw-platform.management.*`` settings: ``key``,
``secret``, ``protocol``, ``server`` and ``version``. They are resolved
once, when the client is built.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Optional

from .constants import DEFAULT_CONFIG, ENV_PREFIX
from .exceptions import ConfigurationError

_ROOT_SECTION = "jw-platform"
_SECTION = "management"


@dataclass(frozen=True)
class ManagementConfig:
    """Credentials and endpoint settings for the management API."""

    key: Optional[str] = DEFAULT_CONFIG["key"]
    secret: Optional[str] = field(default=DEFAULT_CONFIG["secret"], repr=False)
    protocol: str = DEFAULT_CONFIG["protocol"]
    server: str = DEFAULT_CONFIG["server"]
    version: str = DEFAULT_CONFIG["version"]

    @classmethod
    def from_mapping(cls, source: Mapping, **overrides) -> "ManagementConfig":
        """
        Build a config from a settings mapping.

        Accepts ``{"management": {...}}``, the same nested under a
        ``"jw-platform"`` root, or flat dotted keys such as
        ``"management.key"``. Options missing from ``source`` keep their
        defaults; non-None ``overrides`` win over both.
        """
        options = {}
        section = source.get(_ROOT_SECTION, source)
        nested = section.get(_SECTION) if isinstance(section, Mapping) else None
        if isinstance(nested, Mapping):
            options.update(nested)

        for dotted, value in source.items():
            parts = str(dotted).split(".")
            if parts[0] == _ROOT_SECTION:
                parts = parts[1:]
            if len(parts) == 2 and parts[0] == _SECTION:
                options[parts[1]] = value

        return cls.from_options(options, **overrides)

    @classmethod
    def from_env(cls, environ: Optional[Mapping] = None, **overrides) -> "ManagementConfig":
        """Build a config from ``JWPLATFORM_MANAGEMENT_*`` environment variables."""
        environ = os.environ if environ is None else environ
        options = {}
        for name in DEFAULT_CONFIG:
            value = environ.get(ENV_PREFIX + name.upper())
            if value:
                options[name] = value
        return cls.from_options(options, **overrides)

    @classmethod
    def from_options(cls, options: Mapping, **overrides) -> "ManagementConfig":
        """Merge ``options`` and ``overrides`` over the defaults."""
        merged = {**DEFAULT_CONFIG}
        merged.update({k: v for k, v in options.items() if k in DEFAULT_CONFIG})
        unknown = set(overrides) - set(DEFAULT_CONFIG)
        if unknown:
            raise ConfigurationError(f"Unknown config options: {', '.join(sorted(unknown))}")
        merged.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**merged)

    def with_overrides(self, **overrides) -> "ManagementConfig":
        """Return a copy with the non-None ``overrides`` applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def validate(self):
        """
        Check that the config can sign and address requests.

        Raises:
            ConfigurationError: If credentials or endpoint parts are empty
        """
        if not self.key:
            raise ConfigurationError("key cannot be empty")
        if not self.secret:
            raise ConfigurationError("secret cannot be empty")
        for name in ("protocol", "server", "version"):
            if not getattr(self, name):
                raise ConfigurationError(f"{name} cannot be empty")
