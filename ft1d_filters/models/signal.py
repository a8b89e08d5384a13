from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd

from ft1d_filters.models.specs import check_length


@dataclass(frozen=True)
class Signal:
    """
    Frequency-domain signal: one (frequency-bin, magnitude) pair per DFT bin.

    Notes
    - x holds bin indices 0..original_length-1, y the magnitude per bin.
    - original_length is the full (padded) DFT length; kernels are built for it.
    - Arrays are always 1D float64.
    """
    x: np.ndarray
    y: np.ndarray
    original_length: int

    def __post_init__(self) -> None:
        x = np.asarray(self.x, dtype=np.float64)
        y = np.asarray(self.y, dtype=np.float64)
        if x.ndim != 1 or y.ndim != 1:
            raise ValueError(f"Signal arrays must be 1D, got shapes {x.shape} and {y.shape}")
        if x.shape != y.shape:
            raise ValueError(f"Signal x/y length mismatch: {x.size} != {y.size}")
        n = check_length(self.original_length)
        if x.size != n:
            raise ValueError(f"Signal length {x.size} does not match original_length={n}")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "original_length", n)

    @classmethod
    def from_magnitude(cls, magnitude: np.ndarray) -> "Signal":
        """Build a signal over bins ``0..N-1`` from a magnitude vector of length N."""
        y = np.asarray(magnitude, dtype=np.float64)
        if y.ndim != 1:
            raise ValueError(f"magnitude must be 1D, got shape {y.shape}")
        return cls(x=np.arange(y.size, dtype=np.float64), y=y, original_length=int(y.size))

    def __len__(self) -> int:
        return int(self.original_length)

    def apply_filter(self, kernel: np.ndarray) -> "Signal":
        """Multiply the magnitude by ``kernel`` bin by bin and return a new signal."""
        k = np.asarray(kernel, dtype=np.float64)
        if k.shape != self.y.shape:
            raise ValueError(
                f"Kernel length {k.size} does not match signal length {self.y.size}"
            )
        return Signal(x=self.x.copy(), y=self.y * k, original_length=self.original_length)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"bin": self.x, "magnitude": self.y})
