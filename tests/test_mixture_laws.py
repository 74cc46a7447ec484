"""Mixture law tests.

Covers the closed-form laws in mmc_rom.laws:
- Bound behaviour at f = 0 and f = 1
- Reference values for Al (70 GPa) + ceramic (510 GPa) at 20 %
- IEEE-754 propagation of degenerate inputs (no exceptions, no warnings)
- Broadcasting over numpy arrays
"""

import math
import warnings

import numpy as np
import pytest
from numpy.testing import assert_allclose

from mmc_rom.laws import (
    LBYS_COEFFICIENT,
    halpin_tsai,
    halpin_tsai_efficiency,
    hashin,
    lbtc,
    lbys,
    levin,
    reuss,
    schapery,
    voigt,
    voigt_reuss_hill,
)

E_R = 510.0
E_M = 70.0
F = 0.2


class TestBounds:
    """Voigt, Reuss and Voigt-Reuss-Hill."""

    def test_voigt_reference_value(self):
        assert_allclose(voigt(E_R, E_M, F), 158.0)

    def test_reuss_reference_value(self):
        expected = 1.0 / (F / E_R + (1.0 - F) / E_M)
        assert_allclose(reuss(E_R, E_M, F), expected)
        assert_allclose(reuss(E_R, E_M, F), 84.597, rtol=1e-4)

    def test_vrh_reference_value(self):
        upper = voigt(E_R, E_M, F)
        lower = reuss(E_R, E_M, F)
        assert_allclose(voigt_reuss_hill(upper, lower), 121.30, rtol=1e-3)

    @pytest.mark.parametrize("law", [voigt, reuss])
    def test_pure_phases(self, law):
        assert_allclose(law(E_R, E_M, 0.0), E_M)
        assert_allclose(law(E_R, E_M, 1.0), E_R)

    def test_reuss_below_voigt(self):
        f = np.linspace(0.05, 0.95, 19)
        assert np.all(reuss(E_R, E_M, f) < voigt(E_R, E_M, f))

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_bounds_ordering(self, seed):
        # min(a, b) <= Reuss <= Voigt <= max(a, b) for positive phase values
        rng = np.random.default_rng(seed)
        a = rng.uniform(1e-3, 1e3, 5000)
        b = np.concatenate([rng.uniform(1e-3, 1e3, 4000), a[4000:]])
        f = np.concatenate([rng.uniform(0.0, 1.0, 4800), np.zeros(100), np.ones(100)])

        upper = voigt(a, b, f)
        lower = reuss(a, b, f)
        tol = 1e-12 * np.maximum(a, b)
        assert np.all(np.minimum(a, b) <= lower + tol)
        assert np.all(lower <= upper + tol)
        assert np.all(upper <= np.maximum(a, b) + tol)

    def test_vrh_is_plain_mean(self):
        assert voigt_reuss_hill(2.0, 4.0) == 3.0


class TestHashin:

    def test_matches_closed_form(self):
        a, b, c, d = 70.0, 510.0, 0.33, 0.15
        lm = (1 - c) - 2 * c**2
        lr = (1 - d) - 2 * d**2
        expected = b * F + a * (1 - F) + 2 * (d - c) ** 2 * F * (1 - d) / (
            a * (1 - c) * lr + lm * (1 - F) + (1 - c) * b
        )
        assert_allclose(hashin(a, b, c, d, F), expected)

    def test_equal_poisson_ratios_reduce_to_voigt(self):
        assert_allclose(hashin(E_M, E_R, 0.3, 0.3, F), voigt(E_R, E_M, F))


class TestHalpinTsai:

    def test_reference_value(self):
        """Al + ceramic at 20 %, s = 5 gives about 130.4 GPa."""
        assert_allclose(halpin_tsai(E_M, E_R, F, 5.0), 130.39, rtol=1e-3)

    def test_efficiency_factor(self):
        # r = 510/70 -> q = 4/11 at s = 5
        assert_allclose(halpin_tsai_efficiency(E_R / E_M, 5.0), 4.0 / 11.0)

    def test_large_aspect_ratio_tends_to_voigt(self):
        assert_allclose(halpin_tsai(E_M, E_R, F, 1e9), voigt(E_R, E_M, F), rtol=1e-6)

    def test_between_bounds(self):
        value = halpin_tsai(E_M, E_R, F, 1.0)
        assert reuss(E_R, E_M, F) < value < voigt(E_R, E_M, F)

    def test_pure_matrix(self):
        assert_allclose(halpin_tsai(E_M, E_R, 0.0, 3.0), E_M)

    def test_singular_when_qf_is_one(self):
        # r = 4, s = 1 -> q = 0.5; f = 2 -> q*f = 1
        assert math.isinf(halpin_tsai(1.0, 4.0, 2.0, 1.0))


class TestThermalLaws:
    """LBYS, LBTC, Levin and Schapery."""

    def test_lbys_coefficient(self):
        assert LBYS_COEFFICIENT == 0.0625

    def test_lbys_value(self):
        # sqrt(0.25) = 0.5 -> factor 1 + 1/16
        assert_allclose(lbys(3.0, 0.276, 0.25), 0.276 * 1.0625)

    def test_lbys_ignores_reinforcement(self):
        assert lbys(1.0, 0.3, 0.2) == lbys(1000.0, 0.3, 0.2)

    def test_lbys_singular_at_full_fraction(self):
        assert math.isinf(lbys(3.0, 0.276, 1.0))

    def test_lbtc_pure_phases(self):
        assert_allclose(lbtc(120.0, 170.0, 0.0), 170.0)
        assert_allclose(lbtc(120.0, 170.0, 1.0), 120.0)

    def test_levin_with_equal_weights_is_voigt(self):
        assert_allclose(levin(4.5, 23.0, 200.0, 200.0, F), voigt(4.5, 23.0, F))

    def test_levin_weights_toward_stiffer_phase(self):
        value = levin(4.5, 23.0, E_R, E_M, F)
        assert value < voigt(4.5, 23.0, F)

    def test_schapery_without_poisson_is_voigt(self):
        assert_allclose(schapery(4.5, 23.0, 99.0, 0.0, 0.0, F), voigt(4.5, 23.0, F))

    def test_schapery_closed_form(self):
        a, b, c, d, e = 4.5, 23.0, 10.0, 0.15, 0.33
        expected = F * a * (1 + d) + (1 - F) * b * (1 + e) - c * (F * d + (1 - F) * e)
        assert_allclose(schapery(a, b, c, d, e, F), expected)


class TestDegenerateInputs:
    """Degenerate inputs propagate inf/NaN without raising or warning."""

    def test_reuss_zero_phase(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert reuss(E_R, 0.0, F) == 0.0

    def test_reuss_zero_over_zero_is_nan(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert math.isnan(reuss(0.0, E_M, 0.0))

    def test_nan_propagates(self):
        assert math.isnan(voigt(math.nan, E_M, F))
        assert math.isnan(halpin_tsai(E_M, math.nan, F, 2.0))

    def test_zero_matrix_in_halpin_tsai(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            value = halpin_tsai(0.0, E_R, F, 2.0)
        assert not math.isfinite(value)


class TestVectorization:

    def test_arrays_broadcast(self):
        f = np.array([0.0, 0.5, 1.0])
        assert_allclose(voigt(E_R, E_M, f), [E_M, 290.0, E_R])

    def test_scalar_inputs_return_scalars(self):
        assert np.ndim(reuss(E_R, E_M, F)) == 0
        assert isinstance(float(reuss(E_R, E_M, F)), float)

    def test_halpin_tsai_grid(self):
        f = np.array([[0.1], [0.2]])
        s = np.array([1.0, 5.0, 10.0])
        grid = halpin_tsai(E_M, E_R, f, s)
        assert grid.shape == (2, 3)
        assert_allclose(grid[1, 1], halpin_tsai(E_M, E_R, 0.2, 5.0))
