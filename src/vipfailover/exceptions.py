"""Failover-related exception classes."""


class FailoverError(Exception):
    """Base exception for failover IP operations."""

    pass


class ConfigError(FailoverError):
    """Configuration is missing or invalid."""

    pass


class IdentityUnresolvedError(FailoverError):
    """This node's outbound address could not be determined."""

    pass


class NoRouteError(IdentityUnresolvedError):
    """No route towards the outbound probe address."""

    def __init__(self, probe: str, reason: str):
        self.probe = probe
        super().__init__(f"No route to {probe}: {reason}")


class TransportError(FailoverError):
    """The failover API could not be reached."""

    def __init__(self, message: str, endpoint: str, write: bool):
        self.endpoint = endpoint
        self.write = write
        action = "write" if write else "read"
        super().__init__(f"{action} {endpoint} failed: {message}")


class MalformedResponseError(FailoverError):
    """Response body did not match any known shape."""

    pass


class ProviderError(FailoverError):
    """The failover API answered with a structured error."""

    def __init__(self, status: int, code: str, message: str):
        self.status = status
        self.code = code
        self.message = message
        super().__init__(f"API error {status} {code}: {message}")


class OwnershipMismatchError(FailoverError):
    """Failover request accepted, but the VIP is not (yet) routed to this node."""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Failover destination is {actual}, expected {expected}"
        )
