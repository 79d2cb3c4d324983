"""
Mesh construction: evenly spaced parameter values for sensitivity sweeps.
"""

import numpy as np

from .exceptions import ConfigurationError


def create_mesh(start: float, end: float, step: float) -> np.ndarray:
    """
    Arithmetic sequence start, start + step, ... up to end (inclusive).

    end is kept when it lies on the grid; floating-point drift is absorbed
    with a half-step tolerance, so create_mesh(99, 101, 1) is [99, 100, 101].

    Parameters
    ----------
    start : first element
    end : last element (upper bound)
    step : spacing, must be positive

    Returns
    -------
    np.ndarray of floats

    Raises
    ------
    ConfigurationError : step <= 0 or end < start
    """
    if not np.isfinite([start, end, step]).all():
        raise ConfigurationError(f"Mesh bounds must be finite, got ({start}, {end}, {step})")
    if step <= 0:
        raise ConfigurationError(f"Mesh step must be positive, got {step}")
    if end < start:
        raise ConfigurationError(f"Mesh end {end} is below start {start}")

    n = int(np.floor((end - start) / step + 0.5)) + 1
    # drop a trailing point that overshoots end by more than rounding noise
    if start + (n - 1) * step > end + step * 1e-9:
        n -= 1
    return start + step * np.arange(n, dtype=float)
