"""
Hetzner failover IP configurer.

Hetzner routes failover IPs to a server through its Robot web service, so
holding the VIP means nothing more than being the server the API routes it
to. Nothing is changed on local interfaces.

Reads are cached: once the provider has answered, the ownership belief is
trusted for ``ttl_seconds`` (one hour by default) to stay clear of the Robot
API rate limits.
"""

import functools
import ipaddress
import threading
import time
from dataclasses import replace
from typing import Callable

from vipfailover.config import VipConfig
from vipfailover.configurer.base import AddressConfigurer
from vipfailover.exceptions import (
    FailoverError,
    OwnershipMismatchError,
    ProviderError,
)
from vipfailover.hetzner.client import RobotClient
from vipfailover.hetzner.parser import parse_failover_response
from vipfailover.models.enums import ConfigurerKind, OwnershipState
from vipfailover.models.failover import APIErrorRecord, CachedStatus, FailoverRecord
from vipfailover.utils.logger import format_traceback, get_logger
from vipfailover.utils.network import resolve_outbound_address

logger = get_logger(__name__)

# Default status cache TTL in seconds (1 hour)
DEFAULT_STATUS_TTL = 3600


class HetznerConfigurer(AddressConfigurer):
    """
    Keeps a Hetzner failover IP routed to this node while it is leader.

    The state/timestamp pair is only touched under ``_lock`` so a periodic
    refresher may share the instance with the leadership loop.
    """

    kind = ConfigurerKind.HETZNER

    def __init__(
        self,
        client: RobotClient,
        *,
        ttl_seconds: float = DEFAULT_STATUS_TTL,
        resolver: Callable[[], ipaddress.IPv4Address] = resolve_outbound_address,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the configurer.

        Args:
            client: Robot API client for the managed VIP
            ttl_seconds: How long a provider answer is trusted
            resolver: Returns this node's outbound address
            clock: Monotonic time source
        """
        self.client = client
        self.ttl_seconds = ttl_seconds
        self._resolver = resolver
        self._clock = clock
        self._status = CachedStatus()
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, cfg: VipConfig) -> "HetznerConfigurer":
        """Build a configurer (and its client) from a VipConfig."""
        resolver = functools.partial(
            resolve_outbound_address,
            cfg.OUTBOUND_PROBE_HOST,
            cfg.OUTBOUND_PROBE_PORT,
            cfg.OUTBOUND_PROBE_TIMEOUT_SECONDS,
        )
        client = RobotClient(
            cfg.HETZNER_USER,
            cfg.HETZNER_PASSWORD,
            cfg.get_vip(),
            base_url=cfg.HETZNER_API_URL,
            timeout=cfg.API_TIMEOUT_SECONDS,
            verbose=cfg.VERBOSE,
            resolver=resolver,
        )
        return cls(client, ttl_seconds=cfg.STATUS_CACHE_TTL_SECONDS, resolver=resolver)

    @property
    def status(self) -> CachedStatus:
        """Snapshot of the cached ownership status."""
        with self._lock:
            return replace(self._status)

    # =========================================================================
    # Cache bookkeeping
    # =========================================================================

    def _cache_expired(self) -> bool:
        last = self._status.last_checked_at
        return last is None or self._clock() - last >= self.ttl_seconds

    def _mark_checked(self) -> None:
        self._status.last_checked_at = self._clock()

    @staticmethod
    def _expect_failover(result: FailoverRecord | APIErrorRecord) -> FailoverRecord:
        if isinstance(result, APIErrorRecord):
            raise ProviderError(result.status, result.code, result.message)
        return result

    # =========================================================================
    # Typed operations
    # =========================================================================

    def _refresh_locked(self) -> FailoverRecord:
        try:
            body = self.client.query(write=False)
            # The provider answered, whatever the body says
            self._mark_checked()
            record = self._expect_failover(parse_failover_response(body))
            own_ip = self._resolver()
        except FailoverError:
            self._status.state = OwnershipState.UNKNOWN
            raise

        if record.active_server_ip == own_ip:
            self._status.state = OwnershipState.CONFIGURED
        else:
            self._status.state = OwnershipState.RELEASED
        return record

    def refresh_ownership(self) -> FailoverRecord:
        """
        Re-read the VIP routing from the provider, ignoring the cache.

        Returns:
            The decoded failover record.

        Raises:
            TransportError: Provider unreachable; timestamp left untouched.
            ProviderError: Provider answered with an error.
            MalformedResponseError: Response could not be decoded.
            IdentityUnresolvedError: This node's address is unknown.
        """
        with self._lock:
            return self._refresh_locked()

    def claim_ownership(self) -> FailoverRecord:
        """
        Ask the provider to route the VIP to this node and verify the result.

        The check is single-shot: if the provider has not applied the
        failover by the time it answers, OwnershipMismatchError is raised
        and the caller decides whether to poll.

        Raises:
            IdentityUnresolvedError: This node's address is unknown; nothing
                was sent.
            TransportError: Provider unreachable.
            ProviderError: Provider rejected the request.
            MalformedResponseError: Response could not be decoded.
            OwnershipMismatchError: Request accepted but the VIP still points
                elsewhere.
        """
        with self._lock:
            try:
                own_ip = self._resolver()
                body = self.client.query(write=True, active_server_ip=own_ip)
                self._mark_checked()
                record = self._expect_failover(parse_failover_response(body))
                if record.active_server_ip != own_ip:
                    raise OwnershipMismatchError(own_ip, record.active_server_ip)
            except FailoverError:
                self._status.state = OwnershipState.UNKNOWN
                raise

            self._status.state = OwnershipState.CONFIGURED
            return record

    # =========================================================================
    # AddressConfigurer contract
    # =========================================================================

    def query_ownership(self) -> bool:
        with self._lock:
            if self._cache_expired():
                if self._status.last_checked_at is not None:
                    logger.info("Cached failover state was too old, rechecking")
                self._status.state = OwnershipState.UNKNOWN
            elif self._status.state == OwnershipState.CONFIGURED:
                return True
            elif self._status.state == OwnershipState.RELEASED:
                return False

            try:
                self._refresh_locked()
            except FailoverError as e:
                logger.warning(
                    f"Could not verify ownership of {self.client.vip} "
                    f"via {self.client.endpoint}: {e}"
                )
                return False
            return self._status.state == OwnershipState.CONFIGURED

    def configure_address(self) -> bool:
        try:
            self.claim_ownership()
        except OwnershipMismatchError as e:
            logger.warning(
                "The failover command was issued, but the current failover "
                f"destination ({e.actual}) is different from what it should be "
                f"({e.expected})."
            )
            return False
        except FailoverError as e:
            logger.error(f"Error while configuring failover IP {self.client.vip}: {e}")
            logger.debug(format_traceback(e))
            return False

        logger.info(f"Failover of {self.client.vip} was successfully executed!")
        return True

    def deconfigure_address(self) -> bool:
        # Whoever claims the VIP next takes it over at the provider
        with self._lock:
            self._status.state = OwnershipState.RELEASED
        return True

    def cleanup_local_artifacts(self) -> None:
        pass
