"""
Exception hierarchy for safe routing.
"""


class SafeRoutingError(Exception):
    """Base class for all safe routing errors."""


class ProviderUnavailable(SafeRoutingError):
    """An external routing or geocoding provider failed or timed out."""


class NoRouteFound(SafeRoutingError):
    """Every candidate strategy was exhausted without a valid route."""


class InvalidInput(SafeRoutingError, ValueError):
    """Missing, non-finite or out-of-range coordinates."""


class DegenerateCandidate(SafeRoutingError):
    """A candidate path is empty or does not connect its endpoints."""
