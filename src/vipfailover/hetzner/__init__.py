"""Hetzner Robot failover API access."""

from vipfailover.hetzner.client import DEFAULT_API_URL, REDACTED, RobotClient
from vipfailover.hetzner.parser import parse_failover_response

__all__ = [
    "DEFAULT_API_URL",
    "REDACTED",
    "RobotClient",
    "parse_failover_response",
]
