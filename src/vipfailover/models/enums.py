"""
Enumeration types for vipfailover.

This module defines the enumeration types used for ownership tracking,
configurer selection and logging configuration.
"""

from enum import Enum


# =============================================================================
# Ownership Enums
# =============================================================================


class OwnershipState(str, Enum):
    """
    Cached belief about who owns the floating IP.

    State transitions:
        UNKNOWN -> CONFIGURED (provider routes the VIP to this node)
        UNKNOWN -> RELEASED (provider routes the VIP elsewhere)
        CONFIGURED/RELEASED -> UNKNOWN (cache expired)
        Any -> UNKNOWN (transport, parse or provider error)
        Any -> CONFIGURED (successful failover request)
        Any -> RELEASED (deconfigure)
    """

    UNKNOWN = "unknown"  # Must re-verify with the provider before trusting
    CONFIGURED = "configured"  # This node owns the VIP per the last check
    RELEASED = "released"  # Another node owns the VIP per the last check


# =============================================================================
# Configurer Enums
# =============================================================================


class ConfigurerKind(str, Enum):
    """
    Address configurer variant, selected by the hosting type.

    - HETZNER: Routes the VIP through the Hetzner Robot failover API
    - BASIC: Adds the VIP to a local interface and announces it via ARP
      (implemented outside this package)
    """

    HETZNER = "hetzner"
    BASIC = "basic"


# =============================================================================
# Configuration Enums
# =============================================================================


class LogLevel(str, Enum):
    """
    Logging verbosity levels.

    Levels (from most to least verbose):
        - FULL: Complete trace with detailed stack information
        - DEBUG: Debug messages and above
        - INFO: Informational messages and above
        - WARNING: Only warnings and errors
    """

    FULL = "full"
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
