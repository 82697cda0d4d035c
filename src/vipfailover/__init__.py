"""
vipfailover: floating IP management through a provider's failover API.

Provides:
- Hetzner Robot failover API client and response decoding
- Cached ownership tracking with a rate-limit friendly TTL
- The configurer contract driven by a leader-election loop
"""

from vipfailover.config import VipConfig, config
from vipfailover.configurer import (
    AddressConfigurer,
    HetznerConfigurer,
    create_configurer,
)
from vipfailover.exceptions import (
    ConfigError,
    FailoverError,
    IdentityUnresolvedError,
    MalformedResponseError,
    NoRouteError,
    OwnershipMismatchError,
    ProviderError,
    TransportError,
)
from vipfailover.hetzner import RobotClient, parse_failover_response
from vipfailover.models.enums import ConfigurerKind, LogLevel, OwnershipState
from vipfailover.models.failover import APIErrorRecord, CachedStatus, FailoverRecord
from vipfailover.utils.network import resolve_outbound_address

__all__ = [
    # Config
    "VipConfig",
    "config",
    # Configurers
    "AddressConfigurer",
    "HetznerConfigurer",
    "create_configurer",
    # API
    "RobotClient",
    "parse_failover_response",
    "resolve_outbound_address",
    # Models
    "ConfigurerKind",
    "LogLevel",
    "OwnershipState",
    "CachedStatus",
    "FailoverRecord",
    "APIErrorRecord",
    # Exceptions
    "FailoverError",
    "ConfigError",
    "IdentityUnresolvedError",
    "NoRouteError",
    "TransportError",
    "MalformedResponseError",
    "ProviderError",
    "OwnershipMismatchError",
]
