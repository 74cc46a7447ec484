"""Composite evaluation tests.

Covers chains, CompositeEvaluator and the bundled presets' law tables:
- Nominal laws applied per property
- Property-specific lower bounds (yield strength, conductivity)
- Composed chains (specific heat, thermal expansion)
- Unknown law selections and missing inputs
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from mmc_rom.config import ModelConfiguration
from mmc_rom.config.enums import MixtureLaw
from mmc_rom.evaluation import CompositeEvaluator, EvaluationContext, chains
from mmc_rom.laws import halpin_tsai, lbtc, lbys, levin, reuss, schapery, voigt
from mmc_rom.materials import PropertyId, PropertyInput

F = 0.2


def _pair(matrix, reinforcement, prop):
    return reinforcement.get(prop), matrix.get(prop)


class TestEvaluationContext:

    def test_fraction_from_percentage(self, aluminium, ceramic):
        ctx = EvaluationContext(aluminium, ceramic, percentage=20.0, aspect_ratio=3.0)
        assert ctx.f == pytest.approx(0.2)
        assert ctx.s == 3.0

    def test_pair_order(self, aluminium, ceramic):
        ctx = EvaluationContext(aluminium, ceramic, percentage=20.0, aspect_ratio=1.0)
        assert ctx.pair(PropertyId.YOUNGS_MODULUS) == (510.0, 70.0)


class TestMatrixParticles:
    """Bound-based preset with the full property set."""

    @pytest.mark.parametrize("law, expected", [
        ("voigt", 158.0),
        ("reuss", 84.597),
        ("voigt_reuss_hill", 121.30),
    ])
    def test_youngs_modulus(self, matrix_particles, aluminium, ceramic, law, expected):
        result = matrix_particles.evaluate(aluminium, ceramic, law=law, percentage=20)
        assert_allclose(result.get(PropertyId.YOUNGS_MODULUS), expected, rtol=1e-3)

    def test_outputs_in_order(self, matrix_particles, aluminium, ceramic):
        result = matrix_particles.evaluate(aluminium, ceramic, percentage=20)
        assert list(result) == [
            PropertyId.PRICE,
            PropertyId.DENSITY,
            PropertyId.YOUNGS_MODULUS,
            PropertyId.FLEXURAL_MODULUS,
            PropertyId.YIELD_STRENGTH,
            PropertyId.HARDNESS_VICKERS,
            PropertyId.SPECIFIC_HEAT,
            PropertyId.THERMAL_CONDUCTIVITY,
            PropertyId.THERMAL_EXPANSION,
            PropertyId.ELECTRICAL_RESISTIVITY,
        ]

    def test_flexural_modulus_uses_youngs_moduli(self, matrix_particles, aluminium, ceramic):
        aluminium.set(PropertyId.FLEXURAL_MODULUS, 1.0)
        result = matrix_particles.evaluate(aluminium, ceramic, law="voigt", percentage=20)
        assert_allclose(result.get(PropertyId.FLEXURAL_MODULUS), 158.0)

    def test_yield_strength_lower_bound(self, matrix_particles, aluminium, ceramic):
        result = matrix_particles.evaluate(aluminium, ceramic, law="reuss", percentage=20)
        assert_allclose(result.get(PropertyId.YIELD_STRENGTH), lbys(3.0, 0.28, F))

    def test_yield_strength_vrh_uses_conductivity_bound(self, matrix_particles, aluminium, ceramic):
        result = matrix_particles.evaluate(aluminium, ceramic, law="vrh", percentage=20)
        expected = (voigt(3.0, 0.28, F) + lbtc(3.0, 0.28, F)) / 2
        assert_allclose(result.get(PropertyId.YIELD_STRENGTH), expected)

    def test_thermal_conductivity(self, matrix_particles, aluminium, ceramic):
        reuss_result = matrix_particles.evaluate(aluminium, ceramic, law="reuss", percentage=20)
        vrh_result = matrix_particles.evaluate(aluminium, ceramic, law="vrh", percentage=20)
        lower = lbtc(120.0, 170.0, F)
        assert_allclose(reuss_result.get(PropertyId.THERMAL_CONDUCTIVITY), lower)
        assert_allclose(
            vrh_result.get(PropertyId.THERMAL_CONDUCTIVITY), (voigt(120.0, 170.0, F) + lower) / 2
        )

    def test_specific_heat(self, matrix_particles, aluminium, ceramic):
        cpr, cpm = 3200.0 * 750.0, 2700.0 * 900.0
        rho_voigt = voigt(3200.0, 2700.0, F)
        rho_reuss = reuss(3200.0, 2700.0, F)

        values = {
            law: matrix_particles.evaluate(aluminium, ceramic, law=law, percentage=20).get(
                PropertyId.SPECIFIC_HEAT
            )
            for law in ("voigt", "reuss", "vrh")
        }
        assert_allclose(values["voigt"], voigt(cpr, cpm, F) / rho_voigt)
        assert_allclose(values["reuss"], voigt(cpr, cpm, F) / rho_reuss)
        assert_allclose(values["vrh"], ((cpr + cpm) / 2) / rho_reuss)

    def test_specific_heat_voigt_between_phases(self, matrix_particles, aluminium, ceramic):
        result = matrix_particles.evaluate(aluminium, ceramic, law="voigt", percentage=20)
        assert 750.0 < result.get(PropertyId.SPECIFIC_HEAT) < 900.0

    def test_thermal_expansion(self, matrix_particles, aluminium, ceramic):
        coupling = levin(4.5, 23.0, 510.0, 70.0, F)
        voigt_value = schapery(4.5, 23.0, coupling, 0.15, 0.33, F)

        conduction = levin(120.0, 170.0, 510.0, 70.0, F)
        vrh_value = (schapery(4.5, 23.0, conduction, 0.15, 0.33, F) + conduction) / 2

        results = {
            law: matrix_particles.evaluate(aluminium, ceramic, law=law, percentage=20).get(
                PropertyId.THERMAL_EXPANSION
            )
            for law in ("voigt", "reuss", "vrh")
        }
        assert_allclose(results["voigt"], voigt_value)
        assert_allclose(results["reuss"], coupling)
        assert_allclose(results["vrh"], vrh_value)

    def test_hashin_not_offered(self, matrix_particles, aluminium, ceramic):
        result = matrix_particles.evaluate(aluminium, ceramic, law="hashin", percentage=20)
        assert all(math.isnan(entry.value) for entry in result.values.values())


class TestFeTiB2:
    """Reduced property set with five laws."""

    def test_outputs(self, fe_tib2):
        assert fe_tib2.evaluator.outputs == [
            PropertyId.TIB2_FRACTION,
            PropertyId.DENSITY,
            PropertyId.YOUNGS_MODULUS,
        ]

    @pytest.mark.parametrize("law", ["voigt", "reuss", "vrh", "hashin", "halpin_tsai"])
    def test_tib2_fraction_passthrough(self, fe_tib2, iron, titanium_boride, law):
        result = fe_tib2.evaluate(iron, titanium_boride, law=law, percentage=35)
        assert result.get(PropertyId.TIB2_FRACTION) == 35

    @pytest.mark.parametrize("percentage", [0, 20, 80])
    def test_density_is_phase_mean(self, fe_tib2, iron, titanium_boride, percentage):
        result = fe_tib2.evaluate(iron, titanium_boride, percentage=percentage)
        assert_allclose(result.get(PropertyId.DENSITY), (7870.0 + 4520.0) / 2)

    def test_hashin_default(self, fe_tib2, iron, titanium_boride):
        from mmc_rom.laws import hashin

        result = fe_tib2.evaluate(iron, titanium_boride, percentage=20)
        assert result.law == "hashin"
        assert_allclose(
            result.get(PropertyId.YOUNGS_MODULUS), hashin(211.0, 565.0, 0.29, 0.108, F)
        )

    def test_unknown_law_gives_nan_everywhere(self, fe_tib2, iron, titanium_boride):
        result = fe_tib2.evaluate(iron, titanium_boride, law="bogus", percentage=20)
        assert math.isnan(result.get(PropertyId.TIB2_FRACTION))
        assert math.isnan(result.get(PropertyId.DENSITY))
        assert math.isnan(result.get(PropertyId.YOUNGS_MODULUS))

    def test_halpin_tsai_uses_aspect_ratio(self, fe_tib2, iron, titanium_boride):
        result = fe_tib2.evaluate(
            iron, titanium_boride, law="halpin_tsai", percentage=20, aspect_ratio=4
        )
        assert_allclose(
            result.get(PropertyId.YOUNGS_MODULUS), halpin_tsai(211.0, 565.0, F, 4.0)
        )


class TestHalpinTsaiPreset:

    def test_reference_value(self, halpin_tsai_preset, aluminium, ceramic):
        result = halpin_tsai_preset.evaluate(aluminium, ceramic, percentage=20, aspect_ratio=5)
        assert_allclose(result.get(PropertyId.YOUNGS_MODULUS), 130.39, rtol=1e-3)

    def test_every_property_is_halpin_tsai(self, halpin_tsai_preset, aluminium, ceramic):
        result = halpin_tsai_preset.evaluate(aluminium, ceramic, percentage=20, aspect_ratio=2)
        assert_allclose(result.get(PropertyId.SPECIFIC_HEAT), halpin_tsai(900.0, 750.0, F, 2.0))
        assert_allclose(
            result.get(PropertyId.FLEXURAL_MODULUS), result.get(PropertyId.YOUNGS_MODULUS)
        )

    def test_voigt_not_offered(self, halpin_tsai_preset, aluminium, ceramic):
        value = halpin_tsai_preset.evaluator.evaluate_property(
            PropertyId.DENSITY, aluminium, ceramic, ModelConfiguration(law="voigt")
        )
        assert math.isnan(value)


class TestCompositeEvaluator:

    def test_unknown_law_gives_nan(self, matrix_particles, aluminium, ceramic):
        result = matrix_particles.evaluate(aluminium, ceramic, law="not-a-law", percentage=20)
        assert result.law == "not-a-law"
        assert len(result.non_finite()) == len(result.values)

    def test_missing_input_gives_nan(self, matrix_particles, ceramic):
        sparse = PropertyInput.from_values("Sparse", youngs_modulus=70.0)
        result = matrix_particles.evaluate(sparse, ceramic, law="voigt", percentage=20)
        assert_allclose(result.get(PropertyId.YOUNGS_MODULUS), 158.0)
        assert math.isnan(result.get(PropertyId.DENSITY))

    def test_chain_for_unknown_property(self, fe_tib2):
        with pytest.raises(KeyError):
            fe_tib2.evaluator.chain_for(PropertyId.PRICE, MixtureLaw.VOIGT)

    def test_properties_using(self, matrix_particles, fe_tib2):
        evaluator = matrix_particles.evaluator
        assert evaluator.properties_using(lbys, "reuss") == [PropertyId.YIELD_STRENGTH]
        assert evaluator.properties_using(lbys, "vrh") == []
        assert evaluator.properties_using(lbtc, "vrh") == [
            PropertyId.YIELD_STRENGTH,
            PropertyId.THERMAL_CONDUCTIVITY,
        ]
        assert PropertyId.THERMAL_EXPANSION in evaluator.properties_using(schapery, "voigt")
        assert evaluator.properties_using(halpin_tsai, "halpin_tsai") == []
        assert fe_tib2.evaluator.properties_using(halpin_tsai, "ht") == [PropertyId.YOUNGS_MODULUS]
        assert fe_tib2.evaluator.properties_using(lbys, "bogus") == []

    def test_evaluation_is_pure(self, matrix_particles, aluminium, ceramic):
        first = matrix_particles.evaluate(aluminium, ceramic, law="vrh", percentage=20)
        second = matrix_particles.evaluate(aluminium, ceramic, law="vrh", percentage=20)
        assert first.to_dict() == second.to_dict()

    def test_custom_table(self, aluminium, ceramic):
        evaluator = CompositeEvaluator(
            {PropertyId.DENSITY: {MixtureLaw.REUSS: chains.reuss_of(PropertyId.DENSITY)}},
            name="custom",
        )
        result = evaluator.evaluate(aluminium, ceramic, ModelConfiguration(law="reuss", percentage=20))
        assert result.preset == "custom"
        assert_allclose(result.get(PropertyId.DENSITY), reuss(3200.0, 2700.0, F))

    def test_evaluate_arrays_matches_scalar(self, matrix_particles, aluminium, ceramic):
        percentages = np.array([10.0, 20.0, 30.0])
        arrays = matrix_particles.evaluator.evaluate_arrays(
            aluminium, ceramic, "vrh", percentages, 1.0
        )
        for i, p in enumerate(percentages):
            point = matrix_particles.evaluate(aluminium, ceramic, law="vrh", percentage=p)
            for prop, column in arrays.items():
                assert_allclose(column[i], point.get(prop))

    def test_evaluate_arrays_unknown_law(self, matrix_particles, aluminium, ceramic):
        arrays = matrix_particles.evaluator.evaluate_arrays(
            aluminium, ceramic, "bogus", np.array([10.0, 20.0]), 1.0
        )
        assert all(column.shape == (2,) for column in arrays.values())
        assert all(np.isnan(column).all() for column in arrays.values())

    def test_degenerate_input_does_not_raise(self, matrix_particles, ceramic):
        void = PropertyInput.from_values("Void", youngs_modulus=0.0, density=0.0)
        result = matrix_particles.evaluate(void, ceramic, law="reuss", percentage=20)
        assert result.get(PropertyId.YOUNGS_MODULUS) == 0.0


class TestOutputProperty:

    def test_metadata_and_value(self, matrix_particles, aluminium, ceramic):
        youngs = next(
            out for out in matrix_particles.outputs if out.prop is PropertyId.YOUNGS_MODULUS
        )
        assert youngs.display_name == "Young's modulus"
        assert youngs.unit == "GPa"
        config = matrix_particles.create_config(law="voigt", percentage=20)
        assert_allclose(youngs.evaluate(aluminium, ceramic, config), 158.0)
