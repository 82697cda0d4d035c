"""
Failover configuration.

A global Config instance that can be modified at runtime by whatever loads
the cluster configuration.
"""

import ipaddress
from dataclasses import dataclass

from vipfailover.exceptions import ConfigError
from vipfailover.models.enums import ConfigurerKind, LogLevel


@dataclass
class VipConfig:
    """Floating IP management configuration."""

    # Address Configuration
    VIP: str = ""
    HOSTING_TYPE: ConfigurerKind = ConfigurerKind.HETZNER

    # Hetzner Robot API Configuration
    HETZNER_USER: str = ""
    HETZNER_PASSWORD: str = ""
    HETZNER_API_URL: str = "https://robot-ws.your-server.de"
    API_TIMEOUT_SECONDS: float = 5.0

    # Status cache TTL, keeps us under the Robot API rate limits
    STATUS_CACHE_TTL_SECONDS: int = 3600

    # Outbound address probe (no packets are sent to it)
    OUTBOUND_PROBE_HOST: str = "8.8.8.8"
    OUTBOUND_PROBE_PORT: int = 80
    OUTBOUND_PROBE_TIMEOUT_SECONDS: float = 2.0

    # Logging Configuration
    VERBOSE: bool = False
    LOG_LEVEL: LogLevel = LogLevel.INFO
    LOG_FILE: str = ""

    def get_vip(self) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
        """Get the floating IP as an address object."""
        try:
            return ipaddress.ip_address(self.VIP)
        except ValueError as e:
            raise ConfigError(f"Invalid VIP '{self.VIP}': {e}") from e

    def get_failover_url(self) -> str:
        """Get the failover API URL for the configured VIP."""
        return f"{self.HETZNER_API_URL.rstrip('/')}/failover/{self.get_vip()}"

    def validate(self) -> None:
        """
        Check that the configuration is usable.

        Raises:
            ConfigError: If the VIP is missing/invalid or credentials are
                missing for the hetzner hosting type.
        """
        if not self.VIP:
            raise ConfigError("VIP is not set")
        self.get_vip()

        try:
            kind = ConfigurerKind(self.HOSTING_TYPE)
        except ValueError as e:
            raise ConfigError(f"Unknown hosting type '{self.HOSTING_TYPE}'") from e

        if kind == ConfigurerKind.HETZNER:
            if not self.HETZNER_USER or not self.HETZNER_PASSWORD:
                raise ConfigError(
                    "HETZNER_USER and HETZNER_PASSWORD are required for hosting type 'hetzner'"
                )
        if self.API_TIMEOUT_SECONDS <= 0:
            raise ConfigError("API_TIMEOUT_SECONDS must be positive")


# Global config instance
config = VipConfig()
