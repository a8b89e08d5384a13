"""FT1D filters -- frequency-domain filter design for 1D Fourier-transform work.

This package provides tools for:
- Describing the seven classic frequency-domain filters (ideal, Gaussian and
  Butterworth low-/high-pass, ideal band-pass) as small frozen specs
- Synthesizing full-length filter kernels on the folded DFT frequency axis
- Previewing a filter response over the half axis ``0..N//2``
- Applying kernels to magnitude spectra and to real time-domain samples

Key principles:
- One synthesizer: live preview and final application evaluate the same formulas
- One fold walk: the mirrored-frequency index walk exists exactly once
- No silent clamping: invalid parameters raise ``InvalidParameter``

Main subpackages:
- analysis: Fold walk, kernel synthesis, filter application
- models: Data models (FilterSpec variants, Signal, FilterProfile)
"""

__all__ = []
