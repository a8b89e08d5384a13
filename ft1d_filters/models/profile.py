"""Filter profile -- default parameters for building filter specs.

A FilterProfile groups the values a filter front-end starts from into one
frozen dataclass. It can be:

- Used as-is (defaults match the classic FT1D filter dialog)
- Overridden field-by-field via ``dataclasses.replace()``
- Serialized to/from a dict for JSON provenance
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

from ft1d_filters.models.specs import (
    DEFAULT_ORDER,
    SPEC_BY_KIND,
    FilterSpec,
    InvalidParameter,
    parse_kind,
)


_HIGH_PASS_KINDS = ("ideal_high_pass", "gaussian_high_pass", "butterworth_high_pass")
_ORDERED_KINDS = ("butterworth_low_pass", "butterworth_high_pass")


@dataclass(frozen=True)
class FilterProfile:
    """Frozen defaults for filter construction.

    Fields
    ------
    default_order : int
        Butterworth order used when none is given (>= 1).
    initial_cutoff : float
        Distance of the starting cutoff from the passband edge: low-pass
        families start at ``initial_cutoff``, high-pass families at
        ``max_frequency - initial_cutoff``.
    band_margin : float
        Band-pass starts at ``(band_margin, max_frequency - band_margin)``.
    """

    default_order: int = DEFAULT_ORDER
    initial_cutoff: float = 1.0
    band_margin: float = 1.0

    def __post_init__(self) -> None:
        if isinstance(self.default_order, bool) or int(self.default_order) != self.default_order:
            raise InvalidParameter(f"default_order must be an integer, got {self.default_order!r}")
        if self.default_order < 1:
            raise InvalidParameter(f"default_order must be >= 1, got {self.default_order}")
        if self.initial_cutoff < 0 or self.band_margin < 0:
            raise InvalidParameter("initial_cutoff and band_margin must be >= 0")
        object.__setattr__(self, "default_order", int(self.default_order))
        object.__setattr__(self, "initial_cutoff", float(self.initial_cutoff))
        object.__setattr__(self, "band_margin", float(self.band_margin))

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------

    def default_parameters(self, kind: str, original_length: int) -> Dict[str, Any]:
        """Starting parameters of ``kind`` for a signal of ``original_length`` bins.

        Values are clamped into ``[0, max_frequency]``; band bounds stay ordered.
        """
        # Avoid circular import at module level
        from ft1d_filters.analysis.folding import max_frequency

        kind = parse_kind(kind)
        fmax = float(max_frequency(original_length))

        def clamp(v: float) -> float:
            return min(max(v, 0.0), fmax)

        if kind == "band_pass":
            low = clamp(self.band_margin)
            high = max(clamp(fmax - self.band_margin), low)
            return {"low": low, "high": high}

        if kind in _HIGH_PASS_KINDS:
            value = clamp(fmax - self.initial_cutoff)
        else:
            value = clamp(self.initial_cutoff)

        name = "sigma" if kind.startswith("gaussian") else "cutoff"
        params: Dict[str, Any] = {name: value}
        if kind in _ORDERED_KINDS:
            params["order"] = self.default_order
        return params

    def default_spec(self, kind: str, original_length: int, **overrides: Any) -> FilterSpec:
        """Build a spec from the profile defaults with optional overrides.

        Example::

            spec = FilterProfile().default_spec("LPBUTTERWORTH", 256, order=4)
        """
        kind = parse_kind(kind)
        params = self.default_parameters(kind, original_length)
        params.update(overrides)
        try:
            return SPEC_BY_KIND[kind](**params)
        except TypeError as exc:
            raise InvalidParameter(f"bad parameters for {kind}: {exc}") from exc

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> FilterProfile:
        """Reconstruct from a dict (e.g. loaded from JSON)."""
        return cls(**dict(d))
