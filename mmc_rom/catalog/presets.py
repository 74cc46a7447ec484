"""Catalog presets for metal matrix composites.

Each preset fixes the laws it offers, its editable parameters, its
output properties and, for every output, the chain run under every law.
The tables are written out explicitly: several properties do not follow
the nominal law (e.g. yield strength under Reuss uses the lower-bound
yield law, specific heat always divides by a Reuss density outside Voigt).

Mixture laws from:
    Ashby, doi:10.1016/0956-7151(93)90242-K
    Shercliff and Ashby, doi:10.1179/mst.1994.10.6.443
    Akhtar, Canadian Metallurgical Quarterly 53 (2014) 253 (Halpin-Tsai)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from mmc_rom.config.defaults import DEFAULT_ASPECT_RATIO, DEFAULT_PERCENTAGE
from mmc_rom.config.enums import MixtureLaw
from mmc_rom.config.model_config import (
    ASPECT_RATIO_SPEC,
    PERCENTAGE_SPEC,
    ModelConfiguration,
    ParameterSpec,
)
from mmc_rom.evaluation import chains
from mmc_rom.evaluation.evaluator import CompositeEvaluator, LawTable, OutputProperty
from mmc_rom.evaluation.result import CompositeResult
from mmc_rom.laws import lbtc
from mmc_rom.materials.descriptor import PropertyId, PropertyInput

V = MixtureLaw.VOIGT
R = MixtureLaw.REUSS
VRH = MixtureLaw.VOIGT_REUSS_HILL
HASHIN = MixtureLaw.HASHIN
HT = MixtureLaw.HALPIN_TSAI

# Group label shared by the bundled presets
EXAMPLES_GROUP = "Examples"


@dataclass
class ModelPreset:
    """Named model of the catalog.

    Attributes:
        name: Catalog key
        display_name: Name shown to users
        description: One-line description
        group: Catalog group label
        laws: Laws offered, in display order
        default_law: Law selected by default
        parameters: Editable parameters, in display order
        inputs: Constituent properties requested from the materials source
        law_table: Output property -> {law -> chain}
    """

    name: str
    display_name: str
    description: str
    group: str
    laws: Tuple[MixtureLaw, ...]
    default_law: MixtureLaw
    parameters: Tuple[ParameterSpec, ...]
    inputs: Tuple[PropertyId, ...]
    law_table: LawTable
    evaluator: CompositeEvaluator = field(init=False, repr=False)

    def __post_init__(self):
        if self.default_law not in self.laws:
            raise ValueError(
                f"Preset '{self.name}': default law {self.default_law.value} is not offered"
            )
        self.evaluator = CompositeEvaluator(self.law_table, name=self.name)

    @property
    def outputs(self) -> List[OutputProperty]:
        return [OutputProperty(prop, self.evaluator) for prop in self.evaluator.outputs]

    def create_config(self, **overrides) -> ModelConfiguration:
        """Create a configuration bound to this preset's laws and parameters.

        Args:
            **overrides: law, percentage, aspect_ratio

        Raises:
            ValueError: On an unknown override name
        """
        values = {
            "law": self.default_law,
            "percentage": DEFAULT_PERCENTAGE,
            "aspect_ratio": DEFAULT_ASPECT_RATIO,
        }
        for key, value in overrides.items():
            if key not in values:
                raise ValueError(f"Unknown configuration parameter: {key}")
            values[key] = value

        return ModelConfiguration(
            allowed_laws=self.laws,
            parameters={spec.name: spec for spec in self.parameters},
            **values,
        )

    def evaluate(
        self,
        matrix: PropertyInput,
        reinforcement: PropertyInput,
        config: ModelConfiguration | None = None,
        **overrides,
    ) -> CompositeResult:
        """Evaluate every output for one configuration."""
        if config is None:
            config = self.create_config(**overrides)
        elif overrides:
            config = config.with_updates(**overrides)
        return self.evaluator.evaluate(matrix, reinforcement, config)

    def describe(self) -> dict:
        """Metadata a host UI needs to expose this model."""
        return {
            "name": self.name,
            "display_name": self.display_name,
            "description": self.description,
            "group": self.group,
            "laws": [
                {"value": law.value, "label": law.label, "default": law is self.default_law}
                for law in self.laws
            ],
            "parameters": [spec.to_dict() for spec in self.parameters],
            "inputs": [
                {"id": prop.value, "display_name": prop.display_name, "unit": prop.unit}
                for prop in self.inputs
            ],
            "outputs": [
                {"id": out.prop.value, "display_name": out.display_name, "unit": out.unit}
                for out in self.outputs
            ],
        }


# =============================================================================
# Preset B: full property set, bound-based laws
# =============================================================================

# Every property except the TiB2 content
FULL_INPUTS: Tuple[PropertyId, ...] = tuple(
    prop for prop in PropertyId if prop is not PropertyId.TIB2_FRACTION
)


def _bounds_row(prop: PropertyId, source: PropertyId | None = None) -> dict:
    """Voigt / Reuss / VRH(Voigt, Reuss) of a property."""
    source = source or prop
    return {
        V: chains.voigt_of(source),
        R: chains.reuss_of(source),
        VRH: chains.vrh_of(source),
    }


MATRIX_PARTICLES_TABLE: LawTable = {
    PropertyId.PRICE: _bounds_row(PropertyId.PRICE),
    PropertyId.DENSITY: _bounds_row(PropertyId.DENSITY),
    PropertyId.YOUNGS_MODULUS: _bounds_row(PropertyId.YOUNGS_MODULUS),
    # Flexural modulus is estimated from the phases' Young's moduli
    PropertyId.FLEXURAL_MODULUS: _bounds_row(PropertyId.FLEXURAL_MODULUS, PropertyId.YOUNGS_MODULUS),
    PropertyId.YIELD_STRENGTH: {
        V: chains.voigt_of(PropertyId.YIELD_STRENGTH),
        R: chains.lbys_of(PropertyId.YIELD_STRENGTH),
        VRH: chains.vrh_of(PropertyId.YIELD_STRENGTH, lower=lbtc),
    },
    PropertyId.HARDNESS_VICKERS: _bounds_row(PropertyId.HARDNESS_VICKERS),
    PropertyId.SPECIFIC_HEAT: {
        V: chains.specific_heat_voigt,
        R: chains.specific_heat_reuss,
        VRH: chains.specific_heat_vrh,
    },
    PropertyId.THERMAL_CONDUCTIVITY: {
        V: chains.voigt_of(PropertyId.THERMAL_CONDUCTIVITY),
        R: chains.lbtc_of(PropertyId.THERMAL_CONDUCTIVITY),
        VRH: chains.vrh_of(PropertyId.THERMAL_CONDUCTIVITY, lower=lbtc),
    },
    PropertyId.THERMAL_EXPANSION: {
        V: chains.thermal_expansion_schapery,
        R: chains.thermal_expansion_levin,
        VRH: chains.thermal_expansion_vrh,
    },
    PropertyId.ELECTRICAL_RESISTIVITY: _bounds_row(PropertyId.ELECTRICAL_RESISTIVITY),
}

MATRIX_PARTICLES = ModelPreset(
    name="matrix_particles",
    display_name="Matrix-Particles ROM",
    description="Example models for metallic matrix composites.",
    group=EXAMPLES_GROUP,
    laws=(V, R, VRH),
    default_law=VRH,
    parameters=(PERCENTAGE_SPEC,),
    inputs=FULL_INPUTS,
    law_table=MATRIX_PARTICLES_TABLE,
)


# =============================================================================
# Preset A: Fe-TiB2, reduced property set
# =============================================================================

_ALL_FE_TIB2_LAWS = (V, R, VRH, HASHIN, HT)

FE_TIB2_TABLE: LawTable = {
    PropertyId.TIB2_FRACTION: {law: chains.percentage_passthrough for law in _ALL_FE_TIB2_LAWS},
    PropertyId.DENSITY: {
        law: chains.phase_mean_of(PropertyId.DENSITY) for law in _ALL_FE_TIB2_LAWS
    },
    PropertyId.YOUNGS_MODULUS: {
        **_bounds_row(PropertyId.YOUNGS_MODULUS),
        HASHIN: chains.hashin_of(PropertyId.YOUNGS_MODULUS),
        HT: chains.halpin_tsai_of(PropertyId.YOUNGS_MODULUS),
    },
}

FE_TIB2 = ModelPreset(
    name="fe_tib2",
    display_name="Fe-TiB2",
    description="Example models for metallic matrix composites.",
    group=EXAMPLES_GROUP,
    laws=_ALL_FE_TIB2_LAWS,
    default_law=HASHIN,
    parameters=(PERCENTAGE_SPEC, ASPECT_RATIO_SPEC),
    inputs=(
        PropertyId.TIB2_FRACTION,
        PropertyId.DENSITY,
        PropertyId.YOUNGS_MODULUS,
        PropertyId.POISSON_RATIO,
    ),
    law_table=FE_TIB2_TABLE,
)


# =============================================================================
# Preset C: shape-factor based, full property set
# =============================================================================

_HALPIN_TSAI_SOURCES = {
    PropertyId.PRICE: PropertyId.PRICE,
    PropertyId.DENSITY: PropertyId.DENSITY,
    PropertyId.YOUNGS_MODULUS: PropertyId.YOUNGS_MODULUS,
    PropertyId.FLEXURAL_MODULUS: PropertyId.YOUNGS_MODULUS,
    PropertyId.YIELD_STRENGTH: PropertyId.YIELD_STRENGTH,
    PropertyId.HARDNESS_VICKERS: PropertyId.HARDNESS_VICKERS,
    PropertyId.SPECIFIC_HEAT: PropertyId.SPECIFIC_HEAT,
    PropertyId.THERMAL_CONDUCTIVITY: PropertyId.THERMAL_CONDUCTIVITY,
    PropertyId.THERMAL_EXPANSION: PropertyId.THERMAL_EXPANSION,
    PropertyId.ELECTRICAL_RESISTIVITY: PropertyId.ELECTRICAL_RESISTIVITY,
}

HALPIN_TSAI_TABLE: LawTable = {
    prop: {HT: chains.halpin_tsai_of(source)} for prop, source in _HALPIN_TSAI_SOURCES.items()
}

MATRIX_PARTICLES_HALPIN_TSAI = ModelPreset(
    name="matrix_particles_halpin_tsai",
    display_name="Matrix-Particles Halpin-Tsai ROM",
    description=(
        "Example model for metallic matrix composites, considering shape ratio of reinforcement."
    ),
    group=EXAMPLES_GROUP,
    laws=(HT,),
    default_law=HT,
    parameters=(PERCENTAGE_SPEC, ASPECT_RATIO_SPEC),
    inputs=FULL_INPUTS,
    law_table=HALPIN_TSAI_TABLE,
)

BUILTIN_PRESETS: Tuple[ModelPreset, ...] = (
    MATRIX_PARTICLES,
    FE_TIB2,
    MATRIX_PARTICLES_HALPIN_TSAI,
)
