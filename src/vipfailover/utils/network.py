"""Network identity helpers."""

import ipaddress
import socket

from vipfailover.exceptions import NoRouteError
from vipfailover.utils.logger import get_logger

logger = get_logger(__name__)


def resolve_outbound_address(
    probe_host: str = "8.8.8.8",
    probe_port: int = 80,
    timeout: float = 2.0,
) -> ipaddress.IPv4Address:
    """
    Get the local IPv4 address the routing table picks for outbound traffic.

    Connecting a UDP socket only selects a route and a source address;
    no datagram is sent to the probe.

    Raises:
        NoRouteError: If there is no route or the socket cannot be opened.
    """
    probe = f"{probe_host}:{probe_port}"
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.settimeout(timeout)
            sock.connect((probe_host, probe_port))
            local_ip = sock.getsockname()[0]
    except OSError as e:
        logger.error(f"Error dialing {probe} to retrieve preferred outbound IP: {e}")
        raise NoRouteError(probe, str(e)) from e

    try:
        address = ipaddress.IPv4Address(local_ip)
    except ValueError as e:
        raise NoRouteError(probe, f"unexpected local address {local_ip!r}") from e

    if address.is_unspecified:
        raise NoRouteError(probe, "routing table selected no source address")
    return address
