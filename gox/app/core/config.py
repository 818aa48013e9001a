"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables each time it is instantiated, so tests can
patch ``os.environ`` and build a fresh instance.  Defaults are
provided for all fields.
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from uvicorn.config import LOG_LEVELS

DEFAULT_ADDR = ":1981"
RESPONSE_FORMATS = ("json", "html")


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def parse_address(addr: str) -> Tuple[str, int]:
    """Split a listen address of the form ``host:port`` into its parts.

    An empty host (``":1981"``) means every interface and is returned as
    ``0.0.0.0``.  IPv6 hosts must be bracketed (``[::1]:1981``).
    Raises ``ValueError`` if the port is missing or not a valid TCP
    port number, or if an IPv6 host is not bracketed.
    """
    host, sep, port_str = addr.strip().rpartition(":")
    if not sep:
        raise ValueError(f"invalid listen address {addr!r}: expected host:port")
    try:
        port = int(port_str)
    except ValueError:
        raise ValueError(f"invalid port in listen address {addr!r}") from None
    if not 0 <= port <= 65535:
        raise ValueError(f"port out of range in listen address {addr!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    elif ":" in host:
        raise ValueError(f"invalid listen address {addr!r}: IPv6 hosts must be bracketed, e.g. [::1]:1981")
    host = host or "0.0.0.0"
    return host, port


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # Listen address in ``host:port`` form.  ``:1981`` binds every interface.
    server_address: str = field(default_factory=lambda: _env("ADDR", DEFAULT_ADDR))
    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "gox"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "0.1.0"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Default rendering for successful responses: ``json`` or ``html``.
    # Clients may override per request with ``?format=``.
    response_format: str = field(default_factory=lambda: _env("RESPONSE_FORMAT", "json").lower())

    # Populate the store with the two demo users at startup.
    seed_users: bool = field(default_factory=lambda: _env_flag("SEED_USERS", True))

    # POST /users is not exposed unless this is switched on.
    enable_user_creation: bool = field(default_factory=lambda: _env_flag("ENABLE_USER_CREATION"))

    def __post_init__(self) -> None:
        if self.log_level.lower() not in LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )
        if self.response_format not in RESPONSE_FORMATS:
            raise ValueError(
                f"RESPONSE_FORMAT must be one of {', '.join(RESPONSE_FORMATS)}, got {self.response_format!r}"
            )

    @property
    def host(self) -> str:
        return parse_address(self.server_address)[0]

    @property
    def port(self) -> int:
        return parse_address(self.server_address)[1]


def load_settings() -> Settings:
    """Read the current environment into a new ``Settings`` instance."""
    return Settings()
