r"""Frequency-response kernels for the seven filter families.

Provides one gain formula per family and the synthesizer that evaluates it on
the folded DFT frequency axis. Preview and final application both go through
:func:`response`, so the plotted curve is the applied curve.

Functions
---------
response
    Evaluate :math:`G(\omega)` of a spec on arbitrary non-negative frequencies.
synthesize
    Full-length kernel for a signal of ``original_length`` bins.
preview_response
    Gains on the half axis ``0..N//2`` (what a filter dialog plots).
preview_curve
    Half-axis preview plus the vertical step edges of ideal filters.
kernel_table
    Kernel as a DataFrame (``bin``, ``folded_frequency``, ``gain``).
"""

from __future__ import annotations

import math
from typing import Callable, Dict, List, Tuple

import numpy as np
import pandas as pd

from ft1d_filters.analysis.folding import check_length, folded_frequency_axis, max_frequency
from ft1d_filters.models.specs import (
    BandPass,
    ButterworthHighPass,
    ButterworthLowPass,
    FilterSpec,
    GaussianHighPass,
    GaussianLowPass,
    IdealHighPass,
    IdealLowPass,
    InvalidParameter,
    is_filter_spec,
)


# =====================================================================
#  Per-family gain formulas
# =====================================================================

def _ideal_low_pass(spec: IdealLowPass, f: np.ndarray) -> np.ndarray:
    return np.where(f <= spec.cutoff, 1.0, 0.0)


def _ideal_high_pass(spec: IdealHighPass, f: np.ndarray) -> np.ndarray:
    return np.where(f >= spec.cutoff, 1.0, 0.0)


def _band_pass(spec: BandPass, f: np.ndarray) -> np.ndarray:
    return np.where((spec.low <= f) & (f <= spec.high), 1.0, 0.0)


def _gaussian_low_pass(spec: GaussianLowPass, f: np.ndarray) -> np.ndarray:
    if spec.sigma == 0.0:
        return np.zeros_like(f)
    # Tiny sigma: f/sigma overflows to inf and the gain saturates to 0.
    with np.errstate(over="ignore", under="ignore"):
        return np.exp(-0.5 * np.square(f / spec.sigma))


def _gaussian_high_pass(spec: GaussianHighPass, f: np.ndarray) -> np.ndarray:
    if spec.sigma == 0.0:
        return np.ones_like(f)
    with np.errstate(over="ignore", under="ignore"):
        return 1.0 - np.exp(-0.5 * np.square(f / spec.sigma))


def _butterworth_low_pass(spec: ButterworthLowPass, f: np.ndarray) -> np.ndarray:
    if spec.cutoff == 0.0:
        return np.zeros_like(f)
    # Large orders overflow to inf; the gain saturates to 0.
    with np.errstate(over="ignore", under="ignore"):
        return 1.0 / (1.0 + np.power(f / spec.cutoff, 2.0 * spec.order))


def _butterworth_high_pass(spec: ButterworthHighPass, f: np.ndarray) -> np.ndarray:
    out = np.zeros_like(f)
    nz = f != 0.0
    with np.errstate(over="ignore", under="ignore"):
        out[nz] = 1.0 / (1.0 + np.power(spec.cutoff / f[nz], 2.0 * spec.order))
    return out


_GAINS: Dict[str, Callable[..., np.ndarray]] = {
    IdealLowPass.kind: _ideal_low_pass,
    IdealHighPass.kind: _ideal_high_pass,
    BandPass.kind: _band_pass,
    GaussianLowPass.kind: _gaussian_low_pass,
    GaussianHighPass.kind: _gaussian_high_pass,
    ButterworthLowPass.kind: _butterworth_low_pass,
    ButterworthHighPass.kind: _butterworth_high_pass,
}


# =====================================================================
#  Synthesis
# =====================================================================

def response(spec: FilterSpec, frequencies: np.ndarray) -> np.ndarray:
    """Evaluate the gain of ``spec`` at each (non-negative) frequency.

    Parameters
    ----------
    spec:
        Any filter spec from :mod:`ft1d_filters.models.specs`.
    frequencies:
        1D array of folded frequencies. Negative values are rejected.

    Returns
    -------
    ndarray
        float64 gains, same shape as ``frequencies``.
    """
    if not is_filter_spec(spec):
        raise InvalidParameter(f"Not a filter spec: {spec!r}")
    f = np.asarray(frequencies, dtype=np.float64)
    if f.ndim != 1:
        raise ValueError(f"frequencies must be 1D, got shape {f.shape}")
    if f.size and not (np.all(np.isfinite(f)) and np.min(f) >= 0.0):
        raise ValueError("frequencies must be finite and >= 0")
    return _GAINS[spec.kind](spec, f)


def synthesize(spec: FilterSpec, original_length: int) -> np.ndarray:
    """Build the full-length kernel of ``spec`` for a signal of ``original_length`` bins.

    Bin ``i`` carries the gain at folded frequency ``min(i, N - i)``. Each
    folded frequency is evaluated once and then gathered per bin, so mirrored
    bins hold identical values and the half axis equals :func:`preview_response`.
    The result is a fresh array on every call.
    """
    n = check_length(original_length)
    _, half = preview_response(spec, n)
    return half[folded_frequency_axis(n).astype(np.intp)]


def preview_response(spec: FilterSpec, original_length: int) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(frequencies, gains)`` over the half axis ``0..N//2``."""
    freqs = np.arange(max_frequency(original_length) + 1, dtype=np.float64)
    return freqs, response(spec, freqs)


def _step_edges(spec: FilterSpec) -> List[Tuple[float, float]]:
    """Vertical segments of an ideal filter, in drawing order."""
    if isinstance(spec, IdealLowPass):
        e = math.floor(spec.cutoff) + 0.5
        return [(e, 1.0), (e, 0.0)]
    if isinstance(spec, IdealHighPass):
        e = math.ceil(spec.cutoff) - 0.5
        return [(e, 0.0), (e, 1.0)]
    if isinstance(spec, BandPass):
        lo = math.ceil(spec.low) - 0.5
        hi = math.floor(spec.high) + 0.5
        return [(lo, 0.0), (lo, 1.0), (hi, 1.0), (hi, 0.0)]
    return []


def preview_curve(spec: FilterSpec, original_length: int) -> Tuple[np.ndarray, np.ndarray]:
    """Half-axis preview with step edges inserted for the ideal families.

    Edges sit half a bin past the last passed bin, so a plotted line drops
    vertically between bins instead of ramping. Points are ordered by
    frequency; edge pairs keep their drawing order.
    """
    freqs, gains = preview_response(spec, original_length)
    points = list(zip(freqs.tolist(), gains.tolist())) + _step_edges(spec)
    points.sort(key=lambda p: p[0])  # stable: edge pairs stay in order
    keys = np.array([p[0] for p in points], dtype=np.float64)
    values = np.array([p[1] for p in points], dtype=np.float64)
    return keys, values


def kernel_table(spec: FilterSpec, original_length: int) -> pd.DataFrame:
    """Kernel with its bin index and folded frequency, one row per bin."""
    n = check_length(original_length)
    f = folded_frequency_axis(n)
    return pd.DataFrame(
        {
            "bin": np.arange(n, dtype=int),
            "folded_frequency": f.astype(int),
            "gain": synthesize(spec, n),
        }
    )
