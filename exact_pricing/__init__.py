"""
exact-pricing
=============
Closed-form European option prices and greeks under generalized
Black-Scholes-Merton, for stocks, dividend stocks, futures and currencies.

Modules:
    option          - OptionParameters, enums, cost of carry
    black_scholes   - Pricing, parity, mesh sweeps, greeks, finite differences
    mesh            - Arithmetic parameter meshes
    scenarios       - Demo scenarios as DataFrames
    visualization   - Price/greeks charts (matplotlib + plotly)
    exceptions      - DomainError / ConfigurationError
    config          - Global constants and defaults
"""

from .exceptions import PricingError, DomainError, ConfigurationError
from .option import OptionKind, UnderlyingClass, MeshParameter, OptionParameters
from .black_scholes import (
    ParityResult,
    price, price_via_put_call_parity, price_over_mesh,
    delta, gamma, delta_over_mesh, gamma_over_mesh,
    delta_approximation, gamma_approximation,
)
from .mesh import create_mesh

__version__ = "0.1.0"
