"""
Generalized Black-Scholes-Merton pricing and greeks for European options.

Every formula is written in terms of the cost of carry b, so the same code
prices options on stocks, dividend-paying stocks, futures and currencies:

    d1 = (ln(S/K) + (b + sigma^2 / 2) T) / (sigma sqrt(T))
    d2 = d1 - sigma sqrt(T)

    call = S e^{(b-r)T} N(d1) - K e^{-rT} N(d2)
    put  = K e^{-rT} N(-d2) - S e^{(b-r)T} N(-d1)

Everything here is closed-form except delta_approximation and
gamma_approximation, which bump the spot and difference the price so the
analytic greeks can be cross-checked.

References:
    Black, F. & Scholes, M. (1973). The Pricing of Options and Corporate Liabilities.
    Haug, E.G. (2007). The Complete Guide to Option Pricing Formulas. 2nd ed.
    Hull, J.C. (2018). Options, Futures, and Other Derivatives. 10th ed.
"""

import logging
from typing import NamedTuple, Sequence

import numpy as np
from scipy.stats import norm

from . import config
from .exceptions import ConfigurationError, DomainError
from .option import (
    MeshParameter, OptionParameters,
    check_finite, check_non_negative, check_positive, coerce_enum,
)

logger = logging.getLogger(__name__)

_N = norm.cdf   # standard-normal CDF
_n = norm.pdf   # standard-normal PDF


class ParityResult(NamedTuple):
    parity_price: float
    parity_difference: float


# ════════════════════════════════════════════════════════════════════════
#  INPUT CHECKS
# ════════════════════════════════════════════════════════════════════════

def _check_contract(S, K, T, r, b):
    return (
        check_positive("underlying_price", S),
        check_positive("strike_price", K),
        check_non_negative("time_to_maturity", T),
        check_finite("risk_free_rate", r),
        check_finite("cost_of_carry", b),
    )


def _check_vol_time(sigma, T):
    sigma = check_positive("volatility", sigma)
    if sigma * np.sqrt(T) == 0.0:
        raise DomainError(
            f"sigma * sqrt(T) is zero (sigma={sigma}, T={T}); d1 is undefined"
        )
    return sigma


def _check_all(S, K, T, r, sigma, b):
    S, K, T, r, b = _check_contract(S, K, T, r, b)
    return S, K, T, r, _check_vol_time(sigma, T), b


def _inputs(params: OptionParameters, S=None, K=None, T=None, r=None, sigma=None, b=None):
    """
    (S, K, T, r, sigma, b) from params, with explicit per-field overrides.

    An override of None means "use the value on params". b is taken from
    params.cost_of_carry unless overridden, even when r is overridden.
    """
    return (
        params.S if S is None else S,
        params.K if K is None else K,
        params.T if T is None else T,
        params.r if r is None else r,
        params.sigma if sigma is None else sigma,
        params.b if b is None else b,
    )


# ════════════════════════════════════════════════════════════════════════
#  PRICING
# ════════════════════════════════════════════════════════════════════════

def d1(S: float, K: float, T: float, sigma: float, b: float) -> float:
    """
    Compute d1 in the generalized Black-Scholes formula.

    Parameters
    ----------
    S : spot price
    K : strike price
    T : time to expiry in years
    sigma : volatility (annualized)
    b : cost of carry

    Raises
    ------
    DomainError : non-positive S, K or sigma, negative T, or T == 0
    """
    S = check_positive("underlying_price", S)
    K = check_positive("strike_price", K)
    T = check_non_negative("time_to_maturity", T)
    sigma = _check_vol_time(sigma, T)
    b = check_finite("cost_of_carry", b)
    return float((np.log(S / K) + (b + 0.5 * sigma**2) * T) / (sigma * np.sqrt(T)))


def d2(S: float, K: float, T: float, sigma: float, b: float) -> float:
    """Compute d2 = d1 - sigma * sqrt(T)."""
    return d1(S, K, T, sigma, b) - sigma * np.sqrt(T)


def call_price(S: float, K: float, T: float, r: float, sigma: float, b: float) -> float:
    """
    European call under generalized Black-Scholes-Merton.

    With b = r this is plain Black-Scholes; b = r - q is Merton's
    dividend model, b = 0 is Black's futures model and b = r - Rf is
    Garman-Kohlhagen for currencies.
    """
    S, K, T, r, sigma, b = _check_all(S, K, T, r, sigma, b)
    _d1 = d1(S, K, T, sigma, b)
    _d2 = _d1 - sigma * np.sqrt(T)
    return float(S * np.exp((b - r) * T) * _N(_d1) - K * np.exp(-r * T) * _N(_d2))


def put_price(S: float, K: float, T: float, r: float, sigma: float, b: float) -> float:
    """European put under generalized Black-Scholes-Merton."""
    S, K, T, r, sigma, b = _check_all(S, K, T, r, sigma, b)
    _d1 = d1(S, K, T, sigma, b)
    _d2 = _d1 - sigma * np.sqrt(T)
    return float(K * np.exp(-r * T) * _N(-_d2) - S * np.exp((b - r) * T) * _N(-_d1))


def price(params: OptionParameters, **overrides) -> float:
    """
    Price params as a call or put depending on params.option_kind.

    Keyword overrides (S, K, T, r, sigma, b) replace single inputs for
    this evaluation only; params itself is never touched.
    """
    inputs = _inputs(params, **overrides)
    if params.is_call:
        return call_price(*inputs)
    return put_price(*inputs)


def price_via_put_call_parity(params: OptionParameters, observed_price: float) -> ParityResult:
    """
    Price the opposite side of params from an observed price via put-call parity.

    With F = S e^{(b-r)T} the carry-adjusted spot:

        C - P = F - K e^{-rT}

    If params is a call, observed_price is read as the call price and the
    put is returned; if params is a put, the call is returned. For a stock
    (b = r) F is just S.

    Returns
    -------
    ParityResult(parity_price, parity_difference) where parity_difference
    is the residual of the parity identity, ~0 up to rounding.
    """
    observed_price = check_finite("observed_price", observed_price)
    S, K, T, r, b = _check_contract(params.S, params.K, params.T, params.r, params.b)

    disc_K = K * np.exp(-r * T)
    fwd_S = S * np.exp((b - r) * T)

    if params.is_call:
        parity_price = observed_price + disc_K - fwd_S
        parity_difference = (observed_price + disc_K) - (parity_price + fwd_S)
    else:
        parity_price = observed_price + fwd_S - disc_K
        parity_difference = (parity_price + disc_K) - (observed_price + fwd_S)

    return ParityResult(float(parity_price), float(parity_difference))


# which keyword of _inputs each mesh selector overrides
_MESH_FIELDS = {
    MeshParameter.UNDERLYING: "S",
    MeshParameter.STRIKE: "K",
    MeshParameter.TIME: "T",
    MeshParameter.RATE: "r",
    MeshParameter.VOLATILITY: "sigma",
    MeshParameter.CARRY: "b",
}


def _as_mesh(values: Sequence[float]) -> np.ndarray:
    values = np.asarray(values, dtype=float)
    if values.ndim != 1:
        raise ConfigurationError(f"Mesh must be one-dimensional, got shape {values.shape}")
    return values


def price_over_mesh(
    params: OptionParameters,
    values: Sequence[float],
    parameter,
) -> np.ndarray:
    """
    Price params once per mesh value, overriding one input each time.

    Parameters
    ----------
    params : base contract; left unchanged
    values : 1D sequence of values for the swept input
    parameter : MeshParameter (or its string value) naming the input.
                CARRY substitutes b directly, bypassing the underlying
                class formula.

    Returns
    -------
    np.ndarray : one price per mesh value, in input order

    Raises
    ------
    ConfigurationError : unknown parameter selector
    DomainError : a mesh value outside the domain of the swept input
    """
    parameter = coerce_enum(MeshParameter, parameter)
    field = _MESH_FIELDS[parameter]
    values = _as_mesh(values)
    logger.debug("Pricing %d-point mesh over %s", len(values), parameter.value)
    return np.array([price(params, **{field: v}) for v in values], dtype=float)


# ════════════════════════════════════════════════════════════════════════
#  GREEKS
# ════════════════════════════════════════════════════════════════════════

def _delta(S, K, T, r, sigma, b, is_call) -> float:
    S, K, T, r, sigma, b = _check_all(S, K, T, r, sigma, b)
    sign = 1.0 if is_call else -1.0
    _d1 = d1(S, K, T, sigma, b)
    return float(sign * np.exp((b - r) * T) * _N(sign * _d1))


def _gamma(S, K, T, r, sigma, b, is_call) -> float:
    S, K, T, r, sigma, b = _check_all(S, K, T, r, sigma, b)
    sign = 1.0 if is_call else -1.0
    _d1 = d1(S, K, T, sigma, b)
    return float(_n(sign * _d1) * np.exp((b - r) * T) / (S * sigma * np.sqrt(T)))


def delta(params: OptionParameters) -> float:
    """
    Option delta: dV/dS.

    Call delta is in [0, e^{(b-r)T}]; put delta is in [-e^{(b-r)T}, 0].
    """
    return _delta(*_inputs(params), params.is_call)


def gamma(params: OptionParameters) -> float:
    """
    Option gamma: d²V/dS².

    Same for calls and puts, since the normal density is even.
    """
    return _gamma(*_inputs(params), params.is_call)


def delta_over_mesh(params: OptionParameters, prices: Sequence[float]) -> np.ndarray:
    """Delta at each underlying price in prices, everything else from params."""
    prices = _as_mesh(prices)
    logger.debug("Computing delta over %d underlying prices", len(prices))
    return np.array(
        [_delta(*_inputs(params, S=s), params.is_call) for s in prices], dtype=float
    )


def gamma_over_mesh(params: OptionParameters, prices: Sequence[float]) -> np.ndarray:
    """Gamma at each underlying price in prices, everything else from params."""
    prices = _as_mesh(prices)
    logger.debug("Computing gamma over %d underlying prices", len(prices))
    return np.array(
        [_gamma(*_inputs(params, S=s), params.is_call) for s in prices], dtype=float
    )


# ════════════════════════════════════════════════════════════════════════
#  FINITE-DIFFERENCE GREEKS
# ════════════════════════════════════════════════════════════════════════

def _check_bump(params: OptionParameters, h: float) -> float:
    h = check_positive("h", h)
    if params.S - h <= 0:
        raise DomainError(
            f"Bump h={h} pushes the spot to {params.S - h}; it must stay positive"
        )
    return h


def delta_approximation(params: OptionParameters, h: float = None) -> float:
    """
    Central-difference delta: (V(S+h) - V(S-h)) / 2h.

    Error is O(h²). Too small an h loses digits to cancellation, too large
    an h adds truncation bias; config.DELTA_BUMP is a sane default.
    """
    if h is None:
        h = config.DELTA_BUMP
    h = _check_bump(params, h)
    S = params.S
    up = price(params, S=S + h)
    down = price(params, S=S - h)
    logger.debug("delta bump h=%g: V+=%.10f V-=%.10f", h, up, down)
    return (up - down) / (2 * h)


def gamma_approximation(params: OptionParameters, h: float = None) -> float:
    """
    Second-difference gamma: (V(S+h) - 2 V(S) + V(S-h)) / h².

    More sensitive to cancellation than delta_approximation, hence the
    larger default bump (config.GAMMA_BUMP).
    """
    if h is None:
        h = config.GAMMA_BUMP
    h = _check_bump(params, h)
    S = params.S
    up = price(params, S=S + h)
    mid = price(params)
    down = price(params, S=S - h)
    logger.debug("gamma bump h=%g: V+=%.10f V=%.10f V-=%.10f", h, up, mid, down)
    return (up - 2 * mid + down) / (h * h)
