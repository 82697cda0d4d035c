"""
Hetzner Robot failover API client.

The Robot web service only accepts IPv4 connections, so every request goes
through a transport bound to the IPv4 wildcard address.
"""

import ipaddress
from typing import Callable

import httpx

from vipfailover.exceptions import TransportError
from vipfailover.utils.logger import get_logger
from vipfailover.utils.network import resolve_outbound_address

logger = get_logger(__name__)

DEFAULT_API_URL = "https://robot-ws.your-server.de"
DEFAULT_TIMEOUT_SECONDS = 5.0
REDACTED = "XXXXXX"


class RobotClient:
    """
    Reads and triggers the routing of one failover IP.

    Each call opens a fresh HTTP client and closes it afterwards; nothing is
    kept between calls.
    """

    def __init__(
        self,
        username: str,
        password: str,
        vip: ipaddress.IPv4Address | ipaddress.IPv6Address | str,
        *,
        base_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        verbose: bool = False,
        resolver: Callable[[], ipaddress.IPv4Address] = resolve_outbound_address,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            username: Robot web service user
            password: Robot web service password
            vip: The failover IP being managed
            base_url: Robot web service base URL
            timeout: Per-request timeout in seconds (connect, read, write, pool)
            verbose: Log requests (password redacted) and raw responses
            resolver: Returns this node's outbound address for failover writes
            transport: Transport override (tests); defaults to IPv4-only HTTP
        """
        self.username = username
        self._password = password
        self.vip = ipaddress.ip_address(str(vip))
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.verbose = verbose
        self._resolver = resolver
        self._transport = transport

    @property
    def endpoint(self) -> str:
        """Failover API URL for the managed VIP."""
        return f"{self.base_url}/failover/{self.vip}"

    def _build_transport(self) -> httpx.BaseTransport:
        if self._transport is not None:
            return self._transport
        # Binding to 0.0.0.0 restricts name resolution and dialing to IPv4
        return httpx.HTTPTransport(local_address="0.0.0.0")

    def _log_request(self, method: str, data: dict[str, str] | None) -> None:
        if not self.verbose:
            return
        line = f"{method} {self.endpoint} (ipv4, user {self.username}:{REDACTED})"
        if data:
            line += " " + "&".join(f"{k}={v}" for k, v in data.items())
        logger.info(line)

    def query(
        self,
        write: bool = False,
        active_server_ip: ipaddress.IPv4Address | None = None,
    ) -> str:
        """
        Read the failover status, or route the VIP to this node.

        Args:
            write: False for a status read, True to trigger a failover
            active_server_ip: Address to route the VIP to on writes;
                resolved via the outbound resolver when omitted

        Returns:
            The raw response body.

        Raises:
            IdentityUnresolvedError: Write requested but this node's
                address could not be determined (no request is made).
            TransportError: Network/TLS failure, timeout or HTTP 5xx.
        """
        method = "GET"
        data = None
        if write:
            if active_server_ip is None:
                active_server_ip = self._resolver()
            logger.info(f"Routing failover IP {self.vip} to {active_server_ip}")
            method = "POST"
            data = {"active_server_ip": str(active_server_ip)}

        self._log_request(method, data)

        try:
            with httpx.Client(
                auth=httpx.BasicAuth(self.username, self._password),
                timeout=httpx.Timeout(self.timeout),
                transport=self._build_transport(),
                trust_env=False,
            ) as client:
                response = client.request(method, self.endpoint, data=data)
        except httpx.RequestError as e:
            logger.error(f"Request error on {method} {self.endpoint}: {e!r}")
            raise TransportError(str(e) or type(e).__name__, self.endpoint, write) from e

        if response.status_code >= 500:
            logger.error(f"HTTP {response.status_code} on {method} {self.endpoint}")
            raise TransportError(
                f"HTTP {response.status_code}", self.endpoint, write
            )

        if self.verbose:
            logger.info(f"JSON response: {response.text}")

        # 4xx bodies carry the provider's structured error, left to the parser
        return response.text
