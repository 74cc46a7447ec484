"""Pytest configuration and shared fixtures for mmc_rom tests."""

import os

# Headless figure rendering
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from mmc_rom.catalog import get_preset
from mmc_rom.materials import PropertyInput


# Fixtures for constituents


@pytest.fixture
def aluminium():
    """Aluminium-like matrix with every property set."""
    return PropertyInput.from_values(
        "Aluminium",
        price=2.0,
        density=2700.0,
        youngs_modulus=70.0,
        flexural_modulus=70.0,
        poisson_ratio=0.33,
        yield_strength=0.28,
        hardness_vickers=100.0,
        specific_heat=900.0,
        thermal_expansion=23.0,
        thermal_conductivity=170.0,
        electrical_resistivity=4.0,
    )


@pytest.fixture
def ceramic():
    """Stiff ceramic reinforcement (E = 510 GPa) with every property set."""
    return PropertyInput.from_values(
        "Ceramic",
        price=20.0,
        density=3200.0,
        youngs_modulus=510.0,
        flexural_modulus=510.0,
        poisson_ratio=0.15,
        yield_strength=3.0,
        hardness_vickers=2500.0,
        specific_heat=750.0,
        thermal_expansion=4.5,
        thermal_conductivity=120.0,
        electrical_resistivity=100.0,
    )


@pytest.fixture
def iron():
    """Fe matrix for the Fe-TiB2 model."""
    return PropertyInput.from_values(
        "Fe", tib2_fraction=0.0, density=7870.0, youngs_modulus=211.0, poisson_ratio=0.29,
    )


@pytest.fixture
def titanium_boride():
    """TiB2 reinforcement for the Fe-TiB2 model."""
    return PropertyInput.from_values(
        "TiB2", tib2_fraction=100.0, density=4520.0, youngs_modulus=565.0, poisson_ratio=0.108,
    )


# Fixtures for presets


@pytest.fixture
def matrix_particles():
    return get_preset("matrix_particles")


@pytest.fixture
def fe_tib2():
    return get_preset("fe_tib2")


@pytest.fixture
def halpin_tsai_preset():
    return get_preset("matrix_particles_halpin_tsai")
