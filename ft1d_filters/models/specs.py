"""Filter specifications.

A :class:`FilterSpec` is a small frozen record naming one filter family and
its parameters. Specs are validated on construction; a spec that exists is a
valid spec. The kernel formulas live in
:mod:`ft1d_filters.analysis.kernels`, not here.

Kinds
-----
``ideal_low_pass``, ``ideal_high_pass``, ``band_pass``,
``gaussian_low_pass``, ``gaussian_high_pass``,
``butterworth_low_pass``, ``butterworth_high_pass``.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Dict, Literal, Tuple, Type, Union


FilterKind = Literal[
    "ideal_low_pass",
    "ideal_high_pass",
    "band_pass",
    "gaussian_low_pass",
    "gaussian_high_pass",
    "butterworth_low_pass",
    "butterworth_high_pass",
]

DEFAULT_ORDER = 2


class InvalidParameter(ValueError):
    """Raised when filter parameters violate the caller contract."""


def _check_frequency(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameter(f"{name} must be a real number, got {value!r}")
    v = float(value)
    if not math.isfinite(v):
        raise InvalidParameter(f"{name} must be finite, got {v}")
    if v < 0.0:
        raise InvalidParameter(f"{name} must be >= 0, got {v}")
    return v


def check_length(original_length: Any) -> int:
    """Validate a signal length and return it as ``int``."""
    if isinstance(original_length, bool) or not isinstance(original_length, numbers.Integral):
        raise InvalidParameter(f"original_length must be an integer, got {original_length!r}")
    n = int(original_length)
    if n < 1:
        raise InvalidParameter(f"original_length must be >= 1, got {n}")
    return n


def _check_order(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameter(f"order must be an integer, got {value!r}")
    n = int(value)
    if n < 1:
        raise InvalidParameter(f"order must be >= 1, got {n}")
    return n


@dataclass(frozen=True)
class IdealLowPass:
    """Pass every bin whose folded frequency is ``<= cutoff``."""

    cutoff: float

    kind: ClassVar[str] = "ideal_low_pass"
    label: ClassVar[str] = "Ideal low-pass filter"

    def __post_init__(self) -> None:
        object.__setattr__(self, "cutoff", _check_frequency("cutoff", self.cutoff))

    def describe(self) -> str:
        return f"{self.label} (w0={self.cutoff:g})"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class IdealHighPass:
    """Pass every bin whose folded frequency is ``>= cutoff``."""

    cutoff: float

    kind: ClassVar[str] = "ideal_high_pass"
    label: ClassVar[str] = "Ideal high-pass filter"

    def __post_init__(self) -> None:
        object.__setattr__(self, "cutoff", _check_frequency("cutoff", self.cutoff))

    def describe(self) -> str:
        return f"{self.label} (w0={self.cutoff:g})"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class BandPass:
    """Pass every bin with ``low <= folded frequency <= high``."""

    low: float
    high: float

    kind: ClassVar[str] = "band_pass"
    label: ClassVar[str] = "Ideal band-pass filter"

    def __post_init__(self) -> None:
        low = _check_frequency("low", self.low)
        high = _check_frequency("high", self.high)
        if low > high:
            raise InvalidParameter(f"band-pass bounds inverted: low={low} > high={high}")
        object.__setattr__(self, "low", low)
        object.__setattr__(self, "high", high)

    def describe(self) -> str:
        return f"{self.label} (w1={self.low:g}, w2={self.high:g})"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class GaussianLowPass:
    sigma: float

    kind: ClassVar[str] = "gaussian_low_pass"
    label: ClassVar[str] = "Gaussian low-pass filter"

    def __post_init__(self) -> None:
        object.__setattr__(self, "sigma", _check_frequency("sigma", self.sigma))

    def describe(self) -> str:
        return f"{self.label} (w0={self.sigma:g})"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class GaussianHighPass:
    sigma: float

    kind: ClassVar[str] = "gaussian_high_pass"
    label: ClassVar[str] = "Gaussian high-pass filter"

    def __post_init__(self) -> None:
        object.__setattr__(self, "sigma", _check_frequency("sigma", self.sigma))

    def describe(self) -> str:
        return f"{self.label} (w0={self.sigma:g})"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class ButterworthLowPass:
    cutoff: float
    order: int = DEFAULT_ORDER

    kind: ClassVar[str] = "butterworth_low_pass"
    label: ClassVar[str] = "Butterworth low-pass filter"

    def __post_init__(self) -> None:
        object.__setattr__(self, "cutoff", _check_frequency("cutoff", self.cutoff))
        object.__setattr__(self, "order", _check_order(self.order))

    def describe(self) -> str:
        return f"{self.label} (w0={self.cutoff:g}, n={self.order})"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class ButterworthHighPass:
    cutoff: float
    order: int = DEFAULT_ORDER

    kind: ClassVar[str] = "butterworth_high_pass"
    label: ClassVar[str] = "Butterworth high-pass filter"

    def __post_init__(self) -> None:
        object.__setattr__(self, "cutoff", _check_frequency("cutoff", self.cutoff))
        object.__setattr__(self, "order", _check_order(self.order))

    def describe(self) -> str:
        return f"{self.label} (w0={self.cutoff:g}, n={self.order})"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, **asdict(self)}


FilterSpec = Union[
    IdealLowPass,
    IdealHighPass,
    BandPass,
    GaussianLowPass,
    GaussianHighPass,
    ButterworthLowPass,
    ButterworthHighPass,
]

SPEC_TYPES: Tuple[Type, ...] = (
    IdealLowPass,
    IdealHighPass,
    BandPass,
    GaussianLowPass,
    GaussianHighPass,
    ButterworthLowPass,
    ButterworthHighPass,
)

SPEC_BY_KIND: Dict[str, Type] = {cls.kind: cls for cls in SPEC_TYPES}

# Filter type names used by the original desktop tool.
_LEGACY_KIND_NAMES: Dict[str, str] = {
    "ilpf": "ideal_low_pass",
    "ihpf": "ideal_high_pass",
    "bandpass": "band_pass",
    "lpgauss": "gaussian_low_pass",
    "hpgauss": "gaussian_high_pass",
    "lpbutterworth": "butterworth_low_pass",
    "hpbutterworth": "butterworth_high_pass",
}


def parse_kind(name: str) -> str:
    """Normalise a filter kind name to its canonical tag.

    Accepts the canonical tags (``"gaussian_low_pass"``), hyphenated variants
    (``"gaussian-low-pass"``) and the legacy enum names (``"LPGAUSS"``),
    case-insensitively.
    """
    key = str(name).strip().lower().replace("-", "_")
    if key in SPEC_BY_KIND:
        return key
    if key in _LEGACY_KIND_NAMES:
        return _LEGACY_KIND_NAMES[key]
    raise InvalidParameter(f"Unknown filter kind: {name!r}")


def is_filter_spec(obj: Any) -> bool:
    return isinstance(obj, SPEC_TYPES)


def spec_from_dict(d: Dict[str, Any]) -> FilterSpec:
    """Reconstruct a spec from :meth:`to_dict` output (e.g. loaded from JSON)."""
    d = dict(d)  # shallow copy
    if "kind" not in d:
        raise InvalidParameter("spec dict has no 'kind' entry")
    cls = SPEC_BY_KIND[parse_kind(d.pop("kind"))]
    try:
        return cls(**d)
    except TypeError as exc:
        raise InvalidParameter(f"bad parameters for {cls.kind}: {exc}") from exc
