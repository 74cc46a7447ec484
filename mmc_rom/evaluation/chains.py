"""Per-property law chains.

A chain turns an EvaluationContext (both constituents plus f and s) into
one composite property value. Direct chains apply a single law to the two
phase values of a property; composed chains (specific heat, thermal
expansion) run a fixed multi-step pipeline. Catalog presets assemble
these into explicit (property, law) tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

from mmc_rom.laws import (
    halpin_tsai,
    hashin,
    lbtc,
    lbys,
    levin,
    reuss,
    schapery,
    voigt,
    voigt_reuss_hill,
)
from mmc_rom.materials.descriptor import PropertyId, PropertyInput


@dataclass(frozen=True)
class EvaluationContext:
    """Inputs of one evaluation.

    Attributes:
        matrix: Matrix constituent
        reinforcement: Reinforcement constituent
        percentage: Reinforcement volume percentage
        aspect_ratio: Reinforcement aspect ratio
    """

    matrix: PropertyInput
    reinforcement: PropertyInput
    percentage: float
    aspect_ratio: float

    @property
    def f(self) -> float:
        return self.percentage / 100.0

    @property
    def s(self) -> float:
        return self.aspect_ratio

    def pair(self, prop: PropertyId) -> tuple[float, float]:
        """(reinforcement, matrix) values of a property."""
        return self.reinforcement.get(prop), self.matrix.get(prop)


Chain = Callable[[EvaluationContext], float]


# =============================================================================
# Direct chains
# =============================================================================

def _tagged(chain, *laws) -> Chain:
    # Laws applied by the chain, queried by CompositeEvaluator.properties_using
    chain.laws = laws
    return chain


def _uses(*laws):
    def decorate(fn):
        return _tagged(fn, *laws)
    return decorate


def voigt_of(prop: PropertyId) -> Chain:
    def chain(ctx: EvaluationContext) -> float:
        a, b = ctx.pair(prop)
        return voigt(a, b, ctx.f)
    return _tagged(chain, voigt)


def reuss_of(prop: PropertyId) -> Chain:
    def chain(ctx: EvaluationContext) -> float:
        a, b = ctx.pair(prop)
        return reuss(a, b, ctx.f)
    return _tagged(chain, reuss)


def lbys_of(prop: PropertyId) -> Chain:
    def chain(ctx: EvaluationContext) -> float:
        a, b = ctx.pair(prop)
        return lbys(a, b, ctx.f)
    return _tagged(chain, lbys)


def lbtc_of(prop: PropertyId) -> Chain:
    def chain(ctx: EvaluationContext) -> float:
        a, b = ctx.pair(prop)
        return lbtc(a, b, ctx.f)
    return _tagged(chain, lbtc)


def vrh_of(prop: PropertyId, lower: Callable = reuss) -> Chain:
    """Mean of the Voigt estimate and a property-specific lower bound.

    Args:
        prop: Property whose phase values are combined
        lower: Lower-bound law with an (a, b, f) signature
    """
    def chain(ctx: EvaluationContext) -> float:
        a, b = ctx.pair(prop)
        return voigt_reuss_hill(voigt(a, b, ctx.f), lower(a, b, ctx.f))
    return _tagged(chain, voigt, lower, voigt_reuss_hill)


def phase_mean_of(prop: PropertyId) -> Chain:
    """Plain mean of the two phase values, independent of f."""
    def chain(ctx: EvaluationContext) -> float:
        a, b = ctx.pair(prop)
        return voigt_reuss_hill(a, b)
    return _tagged(chain, voigt_reuss_hill)


def hashin_of(prop: PropertyId) -> Chain:
    """Hashin bound with matrix-first operands and both Poisson ratios."""
    def chain(ctx: EvaluationContext) -> float:
        return hashin(
            ctx.matrix.get(prop),
            ctx.reinforcement.get(prop),
            ctx.matrix.get(PropertyId.POISSON_RATIO),
            ctx.reinforcement.get(PropertyId.POISSON_RATIO),
            ctx.f,
        )
    return _tagged(chain, hashin)


def halpin_tsai_of(prop: PropertyId) -> Chain:
    """Halpin-Tsai estimate scaled from the matrix value.

    The ratio is reinforcement / matrix and the volume fraction is the
    reinforcement's.
    """
    def chain(ctx: EvaluationContext) -> float:
        a, b = ctx.pair(prop)
        return halpin_tsai(b, a, ctx.f, ctx.s)
    return _tagged(chain, halpin_tsai)


def percentage_passthrough(ctx: EvaluationContext) -> float:
    """Report the configured reinforcement percentage as a property."""
    return ctx.percentage


# =============================================================================
# Specific heat capacity
# =============================================================================
# Heat capacity mixes per unit volume (density * specific heat) and is
# converted back to a per-mass value with a combined density. The law used
# for that density is fixed per chain.

def _volumetric_heat_capacity(ctx: EvaluationContext) -> tuple[float, float]:
    cpr = ctx.reinforcement.get(PropertyId.DENSITY) * ctx.reinforcement.get(PropertyId.SPECIFIC_HEAT)
    cpm = ctx.matrix.get(PropertyId.DENSITY) * ctx.matrix.get(PropertyId.SPECIFIC_HEAT)
    return cpr, cpm


@_uses(voigt)
def specific_heat_voigt(ctx: EvaluationContext) -> float:
    """Voigt heat capacity over Voigt density."""
    cpr, cpm = _volumetric_heat_capacity(ctx)
    rho_r, rho_m = ctx.pair(PropertyId.DENSITY)
    with np.errstate(divide="ignore", invalid="ignore"):
        return voigt(cpr, cpm, ctx.f) / voigt(rho_r, rho_m, ctx.f)


@_uses(voigt, reuss)
def specific_heat_reuss(ctx: EvaluationContext) -> float:
    """Voigt heat capacity over Reuss density."""
    cpr, cpm = _volumetric_heat_capacity(ctx)
    rho_r, rho_m = ctx.pair(PropertyId.DENSITY)
    with np.errstate(divide="ignore", invalid="ignore"):
        return voigt(cpr, cpm, ctx.f) / reuss(rho_r, rho_m, ctx.f)


@_uses(voigt_reuss_hill, reuss)
def specific_heat_vrh(ctx: EvaluationContext) -> float:
    """Mean of the two phase heat capacities over Reuss density."""
    cpr, cpm = _volumetric_heat_capacity(ctx)
    rho_r, rho_m = ctx.pair(PropertyId.DENSITY)
    with np.errstate(divide="ignore", invalid="ignore"):
        return voigt_reuss_hill(cpr, cpm) / reuss(rho_r, rho_m, ctx.f)


# =============================================================================
# Thermal expansion coefficient
# =============================================================================

def _levin_coupling(ctx: EvaluationContext, prop: PropertyId) -> float:
    """Levin mean of ``prop`` weighted by the phases' Young's moduli."""
    a, b = ctx.pair(prop)
    e_r, e_m = ctx.pair(PropertyId.YOUNGS_MODULUS)
    return levin(a, b, e_r, e_m, ctx.f)


def _schapery(ctx: EvaluationContext, coupling: float) -> float:
    alpha_r, alpha_m = ctx.pair(PropertyId.THERMAL_EXPANSION)
    nu_r, nu_m = ctx.pair(PropertyId.POISSON_RATIO)
    return schapery(alpha_r, alpha_m, coupling, nu_r, nu_m, ctx.f)


@_uses(levin, schapery)
def thermal_expansion_schapery(ctx: EvaluationContext) -> float:
    """Schapery law fed with the Levin mean of the expansion coefficients."""
    return _schapery(ctx, _levin_coupling(ctx, PropertyId.THERMAL_EXPANSION))


@_uses(levin)
def thermal_expansion_levin(ctx: EvaluationContext) -> float:
    """Levin mean of the expansion coefficients alone."""
    return _levin_coupling(ctx, PropertyId.THERMAL_EXPANSION)


@_uses(levin, schapery, voigt_reuss_hill)
def thermal_expansion_vrh(ctx: EvaluationContext) -> float:
    """Mean of a Schapery estimate and its Levin coupling term.

    The coupling term here is the modulus-weighted Levin mean of the
    phases' thermal conductivities.
    """
    coupling = _levin_coupling(ctx, PropertyId.THERMAL_CONDUCTIVITY)
    return voigt_reuss_hill(_schapery(ctx, coupling), coupling)
