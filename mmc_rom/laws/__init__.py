"""Mixture-law library shared by every catalog preset."""

from mmc_rom.laws.mixture_laws import (
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

__all__ = [
    "voigt",
    "reuss",
    "voigt_reuss_hill",
    "hashin",
    "halpin_tsai",
    "halpin_tsai_efficiency",
    "lbys",
    "lbtc",
    "levin",
    "schapery",
    "LBYS_COEFFICIENT",
]
