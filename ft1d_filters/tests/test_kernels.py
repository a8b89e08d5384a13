"""Tests for kernel synthesis.

Covers:
- kernel length and value ranges for every family
- mirrored-frequency symmetry for even and odd lengths
- zero-cutoff and zero-frequency edge cases
- preview helpers sharing the kernel formulas
"""

from __future__ import annotations

import numpy as np
import pytest

from ft1d_filters.analysis.kernels import (
    kernel_table,
    preview_curve,
    preview_response,
    response,
    synthesize,
)
from ft1d_filters.models.specs import (
    BandPass,
    ButterworthHighPass,
    ButterworthLowPass,
    GaussianHighPass,
    GaussianLowPass,
    IdealHighPass,
    IdealLowPass,
    InvalidParameter,
)


def _all_specs() -> list:
    return [
        IdealLowPass(2),
        IdealHighPass(2),
        BandPass(1, 3),
        GaussianLowPass(2.5),
        GaussianHighPass(2.5),
        ButterworthLowPass(3, 2),
        ButterworthHighPass(3, 4),
    ]


SPECS = _all_specs()
IDS = [s.kind for s in SPECS]


# -----------------------------------------------------------------------
# Contract properties
# -----------------------------------------------------------------------


@pytest.mark.parametrize("spec", SPECS, ids=IDS)
def test_length_matches_original_length(spec) -> None:
    for n in range(1, 17):
        k = synthesize(spec, n)
        assert k.shape == (n,)
        assert k.dtype == np.float64
        assert np.all(np.isfinite(k))


@pytest.mark.parametrize("spec", SPECS[:3], ids=IDS[:3])
def test_ideal_kernels_are_binary(spec) -> None:
    k = synthesize(spec, 33)
    assert set(np.unique(k).tolist()) <= {0.0, 1.0}


@pytest.mark.parametrize("spec", SPECS[3:], ids=IDS[3:])
def test_smooth_kernels_in_unit_interval(spec) -> None:
    k = synthesize(spec, 64)
    assert np.all(k >= 0.0)
    assert np.all(k <= 1.0)


@pytest.mark.parametrize("spec", SPECS, ids=IDS)
@pytest.mark.parametrize("n", [7, 8, 15, 16])
def test_kernel_is_mirrored(spec, n: int) -> None:
    k = synthesize(spec, n)
    for i in range(1, n):
        assert k[i] == k[n - i]


@pytest.mark.parametrize("spec", SPECS, ids=IDS)
def test_synthesis_is_bit_identical(spec) -> None:
    a = synthesize(spec, 31)
    b = synthesize(spec, 31)
    assert a.tobytes() == b.tobytes()
    assert a is not b


# -----------------------------------------------------------------------
# Concrete cases
# -----------------------------------------------------------------------


def test_ideal_low_pass_n8() -> None:
    k = synthesize(IdealLowPass(2), 8)
    assert k.tolist() == [1, 1, 1, 0, 0, 0, 1, 1]


def test_ideal_low_pass_n7() -> None:
    k = synthesize(IdealLowPass(2), 7)
    assert k.tolist() == [1, 1, 1, 0, 0, 1, 1]


def test_ideal_high_pass_inclusive_boundary() -> None:
    k = synthesize(IdealHighPass(3), 8)
    assert k.tolist() == [0, 0, 0, 1, 1, 1, 0, 0]


def test_band_pass_inclusive_both_ends() -> None:
    k = synthesize(BandPass(1, 3), 8)
    assert k.tolist() == [0, 1, 1, 1, 0, 1, 1, 1]


def test_band_pass_covers_whole_half_axis() -> None:
    # The walk must run up to N//2 even when the upper bound is lower.
    k = synthesize(BandPass(0, 1), 9)
    assert k.tolist() == [1, 1, 0, 0, 0, 0, 0, 0, 1]


def test_band_pass_degenerate_single_frequency() -> None:
    k = synthesize(BandPass(2, 2), 8)
    assert k.tolist() == [0, 0, 1, 0, 0, 0, 1, 0]


@pytest.mark.parametrize("order", [1, 2, 5])
@pytest.mark.parametrize("n", [1, 6, 7])
def test_butterworth_low_pass_zero_cutoff_is_all_zeros(order: int, n: int) -> None:
    k = synthesize(ButterworthLowPass(0, order), n)
    assert np.array_equal(k, np.zeros(n))


def test_gaussian_low_pass_zero_sigma_is_all_zeros() -> None:
    assert np.array_equal(synthesize(GaussianLowPass(0), 9), np.zeros(9))


def test_gaussian_high_pass_zero_sigma_is_all_ones() -> None:
    assert np.array_equal(synthesize(GaussianHighPass(0), 9), np.ones(9))


@pytest.mark.parametrize("cutoff", [0.0, 0.5, 3.0, 100.0])
@pytest.mark.parametrize("order", [1, 3, 8])
def test_butterworth_high_pass_dc_is_zero(cutoff: float, order: int) -> None:
    k = synthesize(ButterworthHighPass(cutoff, order), 10)
    assert k[0] == 0.0
    assert np.all(np.isfinite(k))


def test_butterworth_high_pass_zero_cutoff_passes_everything_but_dc() -> None:
    k = synthesize(ButterworthHighPass(0, 2), 6)
    assert k.tolist() == [0.0, 1.0, 1.0, 1.0, 1.0, 1.0]


@pytest.mark.parametrize("sigma", [1e-200, 1e-320])
def test_gaussian_tiny_sigma_stays_finite(sigma: float) -> None:
    with np.errstate(all="raise"):
        lp = synthesize(GaussianLowPass(sigma), 8)
        hp = synthesize(GaussianHighPass(sigma), 8)
    assert np.all(np.isfinite(lp)) and np.all(np.isfinite(hp))
    assert lp.tolist() == [1.0, 0, 0, 0, 0, 0, 0, 0]
    assert hp.tolist() == [0.0, 1, 1, 1, 1, 1, 1, 1]


def test_gaussian_values() -> None:
    sigma = 2.0
    k = synthesize(GaussianLowPass(sigma), 8)
    f = np.array([0, 1, 2, 3, 4, 3, 2, 1], dtype=float)
    np.testing.assert_allclose(k, np.exp(-(f ** 2) / (2 * sigma ** 2)), rtol=0, atol=1e-15)
    hp = synthesize(GaussianHighPass(sigma), 8)
    np.testing.assert_allclose(hp, 1.0 - k, rtol=0, atol=1e-15)


def test_butterworth_half_power_at_cutoff() -> None:
    lp = synthesize(ButterworthLowPass(2, 3), 8)
    hp = synthesize(ButterworthHighPass(2, 3), 8)
    assert lp[2] == pytest.approx(0.5)
    assert hp[2] == pytest.approx(0.5)
    assert lp[0] == 1.0


def test_butterworth_huge_order_saturates_without_warnings() -> None:
    with np.errstate(over="raise", divide="raise", invalid="raise"):
        lp = synthesize(ButterworthLowPass(1, 2000), 16)
        hp = synthesize(ButterworthHighPass(7, 2000), 16)
    assert np.all(np.isfinite(lp)) and np.all(np.isfinite(hp))
    assert lp[8] == 0.0
    assert hp[1] == 0.0


# -----------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------


def test_length_errors() -> None:
    with pytest.raises(InvalidParameter):
        synthesize(IdealLowPass(1), 0)
    with pytest.raises(InvalidParameter):
        synthesize(IdealLowPass(1), -4)


def test_rejects_non_spec() -> None:
    with pytest.raises(InvalidParameter):
        synthesize("ideal_low_pass", 8)


def test_response_rejects_negative_frequency() -> None:
    with pytest.raises(ValueError):
        response(IdealLowPass(1), np.array([0.0, -1.0]))


# -----------------------------------------------------------------------
# Preview
# -----------------------------------------------------------------------


@pytest.mark.parametrize("spec", SPECS, ids=IDS)
def test_preview_matches_kernel_half_axis(spec) -> None:
    n = 12
    freqs, gains = preview_response(spec, n)
    assert freqs.tolist() == list(range(n // 2 + 1))
    np.testing.assert_array_equal(gains, synthesize(spec, n)[: n // 2 + 1])


def test_preview_curve_low_pass_step() -> None:
    keys, values = preview_curve(IdealLowPass(2), 8)
    assert keys.tolist() == [0, 1, 2, 2.5, 2.5, 3, 4]
    assert values.tolist() == [1, 1, 1, 1, 0, 0, 0]


def test_preview_curve_high_pass_step() -> None:
    keys, values = preview_curve(IdealHighPass(2), 8)
    assert keys.tolist() == [0, 1, 1.5, 1.5, 2, 3, 4]
    assert values.tolist() == [0, 0, 0, 1, 1, 1, 1]


def test_preview_curve_band_pass_fractional_bounds() -> None:
    keys, values = preview_curve(BandPass(0.4, 2.6), 8)
    assert keys.tolist() == [0, 0.5, 0.5, 1, 2, 2.5, 2.5, 3, 4]
    assert values.tolist() == [0, 0, 1, 1, 1, 1, 0, 0, 0]


def test_preview_curve_smooth_has_no_edges() -> None:
    keys, values = preview_curve(GaussianLowPass(1), 8)
    freqs, gains = preview_response(GaussianLowPass(1), 8)
    np.testing.assert_array_equal(keys, freqs)
    np.testing.assert_array_equal(values, gains)


def test_kernel_table() -> None:
    df = kernel_table(IdealLowPass(2), 8)
    assert list(df.columns) == ["bin", "folded_frequency", "gain"]
    assert df["folded_frequency"].tolist() == [0, 1, 2, 3, 4, 3, 2, 1]
    assert df["gain"].tolist() == [1, 1, 1, 0, 0, 0, 1, 1]
