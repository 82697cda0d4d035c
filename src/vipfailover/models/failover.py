"""
Data models for the failover API and the cached ownership status.

FailoverRecord and APIErrorRecord mirror the two JSON shapes returned by the
Hetzner Robot failover endpoint:

    {"failover": {"ip": ..., "netmask": ..., "server_ip": ...,
                  "server_number": ..., "active_server_ip": ...}}
    {"error": {"status": ..., "code": ..., "message": ...}}
"""

from dataclasses import dataclass

from pydantic import BaseModel, Field, IPvAnyAddress

from vipfailover.models.enums import OwnershipState


# =============================================================================
# Provider Response Models
# =============================================================================


class FailoverRecord(BaseModel):
    """Current routing of a failover IP as reported by the provider."""

    ip: str = Field(..., description="The failover IP itself")
    netmask: str
    server_ip: str = Field(..., description="Main IP of the server owning the failover IP")
    server_number: int
    active_server_ip: IPvAnyAddress = Field(
        ..., description="Server the failover IP is currently routed to"
    )


class APIErrorRecord(BaseModel):
    """Structured business error (bad credentials, rate limit, unknown IP...)."""

    status: int
    code: str
    message: str


# =============================================================================
# Cached Status
# =============================================================================


@dataclass
class CachedStatus:
    """Ownership belief plus the monotonic time of the last provider answer."""

    state: OwnershipState = OwnershipState.UNKNOWN
    last_checked_at: float | None = None  # None = never checked
