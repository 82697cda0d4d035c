"""Contract shared by every address configurer variant."""

from abc import ABC, abstractmethod

from vipfailover.models.enums import ConfigurerKind


class AddressConfigurer(ABC):
    """
    What the leader-election loop drives to hold or release the VIP.

    Variants either change local network state (address on an interface,
    ARP announcements) or ask a remote control plane to route the VIP.
    The loop treats them all the same way.
    """

    kind: ConfigurerKind

    @abstractmethod
    def query_ownership(self) -> bool:
        """Return True if the VIP currently points at this node."""

    @abstractmethod
    def configure_address(self) -> bool:
        """Claim the VIP for this node. Returns True on success."""

    @abstractmethod
    def deconfigure_address(self) -> bool:
        """Release the VIP. Returns True on success."""

    @abstractmethod
    def cleanup_local_artifacts(self) -> None:
        """Remove residual local network state left behind by this variant."""
