from .specs import (
    BandPass,
    ButterworthHighPass,
    ButterworthLowPass,
    FilterSpec,
    GaussianHighPass,
    GaussianLowPass,
    IdealHighPass,
    IdealLowPass,
    InvalidParameter,
    parse_kind,
    spec_from_dict,
)
from .signal import Signal
from .profile import FilterProfile

__all__ = [
    "BandPass",
    "ButterworthHighPass",
    "ButterworthLowPass",
    "FilterSpec",
    "GaussianHighPass",
    "GaussianLowPass",
    "IdealHighPass",
    "IdealLowPass",
    "InvalidParameter",
    "parse_kind",
    "spec_from_dict",
    "Signal",
    "FilterProfile",
]
