"""Applying filter kernels to signals.

Functions
---------
apply_filter
    Filter a magnitude :class:`~ft1d_filters.models.signal.Signal` with a spec.
magnitude_spectrum
    FFT of real samples as a magnitude Signal plus phase.
filter_samples
    FFT -> kernel -> inverse FFT round trip on real time-domain samples.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from ft1d_filters.analysis.folding import max_frequency
from ft1d_filters.analysis.kernels import synthesize
from ft1d_filters.log_view import FilterLog
from ft1d_filters.models.signal import Signal
from ft1d_filters.models.specs import BandPass, FilterSpec, GaussianHighPass, GaussianLowPass


@dataclass(frozen=True)
class FilterResult:
    """Outcome of :func:`apply_filter`.

    Attributes
    ----------
    signal:
        Filtered signal, same length as the input.
    kernel:
        Kernel that was applied, shape ``(original_length,)``.
    spec:
        The spec the kernel was built from.
    warnings:
        Human-readable notes about parameters that are valid but probably
        not what the caller meant.
    """

    signal: Signal
    kernel: np.ndarray
    spec: FilterSpec
    warnings: Tuple[str, ...] = ()


def _cutoffs(spec: FilterSpec) -> List[Tuple[str, float]]:
    if isinstance(spec, BandPass):
        return [("low", spec.low), ("high", spec.high)]
    if isinstance(spec, (GaussianLowPass, GaussianHighPass)):
        return [("sigma", spec.sigma)]
    return [("cutoff", spec.cutoff)]


def _check_parameters(spec: FilterSpec, kernel: np.ndarray, original_length: int) -> List[str]:
    warnings: List[str] = []
    fmax = max_frequency(original_length)
    for name, value in _cutoffs(spec):
        if value > fmax:
            warnings.append(
                f"{name}={value:g} exceeds the maximum frequency {fmax} of a {original_length}-bin signal"
            )
    if not np.any(kernel):
        warnings.append("Filter removes every frequency bin (kernel is all zeros).")
    return warnings


def apply_filter(
    signal: Signal,
    spec: FilterSpec,
    *,
    log: Optional[FilterLog] = None,
) -> FilterResult:
    """Synthesize the kernel for ``signal`` and multiply it into the magnitude.

    Parameters
    ----------
    signal:
        Magnitude spectrum; its ``original_length`` sets the kernel length.
    spec:
        Filter to apply.
    log:
        Optional log receiving one info line plus any warnings.
    """
    kernel = synthesize(spec, signal.original_length)
    filtered = signal.apply_filter(kernel)
    warnings = _check_parameters(spec, kernel, signal.original_length)

    if log is not None:
        log.info(f"Applied {spec.describe()} to {signal.original_length} bins.")
        for msg in warnings:
            log.warning(f"WARNING: {msg}")

    return FilterResult(signal=filtered, kernel=kernel, spec=spec, warnings=tuple(warnings))


def magnitude_spectrum(samples: np.ndarray) -> Tuple[Signal, np.ndarray]:
    """Return the DFT magnitude of ``samples`` as a Signal, and the phase in radians.

    No normalization is applied; the inverse of :func:`numpy.fft.fft` recovers
    the samples from ``magnitude * exp(1j * phase)``.
    """
    x = np.asarray(samples, dtype=np.float64)
    if x.ndim != 1:
        raise ValueError(f"samples must be 1D, got shape {x.shape}")
    if x.size == 0:
        raise ValueError("samples must not be empty")
    spectrum = np.fft.fft(x)
    return Signal.from_magnitude(np.abs(spectrum)), np.angle(spectrum)


def filter_samples(samples: np.ndarray, spec: FilterSpec) -> np.ndarray:
    """Filter real time-domain samples in the frequency domain.

    The kernel is real and symmetric on the folded axis, so scaling the
    complex spectrum by it leaves the phase untouched and the inverse
    transform real up to rounding; the imaginary residue is dropped.
    """
    x = np.asarray(samples, dtype=np.float64)
    if x.ndim != 1:
        raise ValueError(f"samples must be 1D, got shape {x.shape}")
    if x.size == 0:
        raise ValueError("samples must not be empty")
    kernel = synthesize(spec, x.size)
    return np.real(np.fft.ifft(np.fft.fft(x) * kernel))
