"""
Configuration Enums for mmc_rom

This module defines the enumeration types used throughout model configuration.
These enums provide type-safe configuration options and carry the
human-readable labels shown to users.

Import Policy:
    from mmc_rom.config.enums import MixtureLaw

DO NOT use: from mmc_rom.config.enums import *
"""

from __future__ import annotations

from enum import Enum


class MixtureLaw(Enum):
    """Homogenization law selected for a model evaluation.

    Options:
        VOIGT: Arithmetic mean weighted by volume fraction (upper bound)
        REUSS: Harmonic mean weighted by volume fraction (lower bound)
        VOIGT_REUSS_HILL: Mean of an upper and a lower bound
        HASHIN: Elastic bound using both phases' Poisson ratios
        HALPIN_TSAI: Semi-empirical law using the reinforcement aspect ratio

    Note:
        The lower bound used by VOIGT_REUSS_HILL is property specific
        (see mmc_rom.evaluation.chains). It is not always REUSS.
    """
    VOIGT = "voigt"
    REUSS = "reuss"
    VOIGT_REUSS_HILL = "voigt_reuss_hill"
    HASHIN = "hashin"
    HALPIN_TSAI = "halpin_tsai"

    @property
    def label(self) -> str:
        """Human-readable description used by the catalog."""
        return _LAW_LABELS[self]

    @classmethod
    def parse(cls, value) -> MixtureLaw | None:
        """Resolve a law from an enum, value, name or label.

        Returns None when nothing matches; callers decide what an
        unknown selection means.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None

        key = value.strip().lower().replace("-", "_").replace(" ", "_")
        for law in cls:
            if key in (law.value, law.name.lower()):
                return law
        for law in cls:
            if value.strip().lower() == law.label.lower():
                return law
        # Common short forms
        return _LAW_ALIASES.get(key)


_LAW_LABELS = {
    MixtureLaw.VOIGT: "Voigt or Upper bound",
    MixtureLaw.REUSS: "Reuss or Lower bound",
    MixtureLaw.VOIGT_REUSS_HILL: "Voigt-Reuss-Hill or Mean",
    MixtureLaw.HASHIN: "Hashin",
    MixtureLaw.HALPIN_TSAI: "Halpin-Tsai",
}

_LAW_ALIASES = {
    "vrh": MixtureLaw.VOIGT_REUSS_HILL,
    "voigtreusshill": MixtureLaw.VOIGT_REUSS_HILL,
    "halpintsai": MixtureLaw.HALPIN_TSAI,
    "ht": MixtureLaw.HALPIN_TSAI,
}


class PhaseRole(Enum):
    """Role of a constituent in the two-phase composite."""
    MATRIX = "matrix"
    REINFORCEMENT = "reinforcement"
