"""
Error types raised by the pricing library.

Everything derives from ValueError, so callers that already guard
bad arguments with ``except ValueError`` keep working.
"""


class PricingError(ValueError):
    """Base class for every error raised by exact_pricing."""


class DomainError(PricingError):
    """
    Inputs outside the domain of the Black-Scholes formulas.

    Raised for non-positive spot, strike or volatility, negative time,
    non-finite numbers, and sigma * sqrt(T) == 0 at pricing time.
    """


class ConfigurationError(PricingError):
    """Unrecognised option kind, underlying class or mesh selector."""
