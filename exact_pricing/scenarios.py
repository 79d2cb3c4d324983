"""
Demo scenarios: pricing batches, put-call parity, mesh sweeps and
closed-form vs finite-difference greeks.

Each scenario returns a DataFrame so main.py can print it, save it to
CSV, or hand it to the visualization module.
"""

import logging
from typing import Iterable, Sequence, Tuple

import numpy as np
import pandas as pd

from . import config
from .black_scholes import (
    price, price_via_put_call_parity, price_over_mesh,
    delta, gamma, delta_over_mesh, gamma_over_mesh,
    delta_approximation, gamma_approximation,
)
from .mesh import create_mesh
from .option import MeshParameter, OptionKind, OptionParameters

logger = logging.getLogger(__name__)

Batch = Tuple[float, float, float, float, float]


def _batch_pair(batch: Batch, underlying_class="stock"):
    S, K, T, r, sigma = batch
    call = OptionParameters(S, K, T, r, sigma, OptionKind.CALL, underlying_class)
    return call, call.flipped()


def pricing_table(batches: Iterable[Batch] = None, underlying_class="stock") -> pd.DataFrame:
    """
    Call and put prices for each (S, K, T, r, sigma) batch.

    parity_gap is C - P - (S e^{(b-r)T} - K e^{-rT}), which should be ~0.
    """
    if batches is None:
        batches = config.PRICING_BATCHES

    rows = []
    for batch in batches:
        call, put = _batch_pair(batch, underlying_class)
        c, p = price(call), price(put)
        fwd_gap = call.S * np.exp((call.b - call.r) * call.T) - call.K * np.exp(-call.r * call.T)
        rows.append({
            "S": call.S, "K": call.K, "T": call.T, "r": call.r, "sigma": call.sigma,
            "call": c,
            "put": p,
            "parity_gap": c - p - fwd_gap,
        })
    return pd.DataFrame(rows)


def parity_table(batches: Iterable[Batch] = None, underlying_class="stock") -> pd.DataFrame:
    """
    Recover the call from the put price through put-call parity.

    call_error compares the parity-implied call with the closed-form one.
    """
    if batches is None:
        batches = config.PRICING_BATCHES

    rows = []
    for batch in batches:
        call, put = _batch_pair(batch, underlying_class)
        c, p = price(call), price(put)
        parity = price_via_put_call_parity(put, p)
        rows.append({
            "S": call.S, "K": call.K, "T": call.T, "r": call.r, "sigma": call.sigma,
            "call": c,
            "put": p,
            "call_via_parity": parity.parity_price,
            "parity_difference": parity.parity_difference,
            "call_error": parity.parity_price - c,
        })
    return pd.DataFrame(rows)


def mesh_table(
    params: OptionParameters = None,
    mesh: Sequence[float] = None,
) -> pd.DataFrame:
    """
    Price, delta and gamma across a mesh of underlying prices.

    Defaults to config.MESH_OPTION swept over MESH_START..MESH_END.
    """
    if params is None:
        params = OptionParameters(**config.MESH_OPTION)
    if mesh is None:
        mesh = create_mesh(config.MESH_START, config.MESH_END, config.MESH_STEP)

    mesh = np.asarray(mesh, dtype=float)
    return pd.DataFrame({
        "underlying": mesh,
        "price": price_over_mesh(params, mesh, MeshParameter.UNDERLYING),
        "delta": delta_over_mesh(params, mesh),
        "gamma": gamma_over_mesh(params, mesh),
    })


def greeks_table(
    params: OptionParameters = None,
    bumps: Sequence[float] = None,
) -> pd.DataFrame:
    """
    Closed-form delta/gamma next to their finite-difference estimates.

    One row per bump size h, so the O(h²) convergence (and the loss of
    precision at very small h) is visible.
    """
    if params is None:
        params = OptionParameters(**config.GREEKS_OPTION)
    if bumps is None:
        bumps = config.GREEKS_BUMPS

    exact_delta = delta(params)
    exact_gamma = gamma(params)
    logger.info("Exact delta=%.8f gamma=%.8f", exact_delta, exact_gamma)

    rows = []
    for h in bumps:
        approx_delta = delta_approximation(params, h)
        approx_gamma = gamma_approximation(params, h)
        rows.append({
            "h": h,
            "delta": exact_delta,
            "delta_approx": approx_delta,
            "delta_error": abs(approx_delta - exact_delta),
            "gamma": exact_gamma,
            "gamma_approx": approx_gamma,
            "gamma_error": abs(approx_gamma - exact_gamma),
        })
    return pd.DataFrame(rows)
