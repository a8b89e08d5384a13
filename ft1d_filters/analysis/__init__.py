"""Filter analysis package.

Design principle:
  - Models describe *what* filter to build (:mod:`ft1d_filters.models.specs`).
  - Analysis turns a spec plus a signal length into numbers.

Every kernel is evaluated on the folded DFT frequency axis produced by
:mod:`ft1d_filters.analysis.folding`; no other module walks bins itself.
"""

from .folding import folded_frequency_axis, iter_folded_frequencies, max_frequency
from .kernels import kernel_table, preview_curve, preview_response, response, synthesize
from .filtering import FilterResult, apply_filter, filter_samples, magnitude_spectrum

__all__ = [
    "folded_frequency_axis",
    "iter_folded_frequencies",
    "max_frequency",
    "kernel_table",
    "preview_curve",
    "preview_response",
    "response",
    "synthesize",
    "FilterResult",
    "apply_filter",
    "filter_samples",
    "magnitude_spectrum",
]
