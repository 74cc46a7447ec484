"""
Default Configuration Constants for mmc_rom

This module contains the numeric defaults used by model configurations.
This is the Single Source of Truth (SSOT) for parameter bounds and
default sample ranges.

IMPORTANT Import Policies:
    1. DO NOT use: from mmc_rom.config.defaults import *
       This causes namespace pollution and makes tracking difficult.

    2. DO use explicit imports:
       from mmc_rom.config.defaults import PERCENTAGE_BOUNDS, DEFAULT_PERCENTAGE

    3. DO NOT define defaults elsewhere. All numeric defaults must be in this file.

Runtime settings (paths, output formats) live in defaults.yaml instead.
"""

from mmc_rom.config.enums import MixtureLaw

# =============================================================================
# Reinforcement Percentage
# =============================================================================

# Allowed range of the reinforcement volume percentage (%)
# Volume fraction f = percentage / 100
PERCENTAGE_BOUNDS = (0.0, 100.0)

# Default sweep: 15 to 25 % over 3 linearly spaced samples
PERCENTAGE_RANGE_START = 15.0
PERCENTAGE_RANGE_END = 25.0
PERCENTAGE_RANGE_NUMBER = 3
PERCENTAGE_RANGE_LOGARITHMIC = False

# Single-point evaluations use the first sample of the default sweep
DEFAULT_PERCENTAGE = PERCENTAGE_RANGE_START

# =============================================================================
# Reinforcement Aspect Ratio
# =============================================================================

# Mean particle length / diameter. Only used by shape-dependent laws.
ASPECT_RATIO_BOUNDS = (1.0, 1000.0)

# Default sweep: 1 to 5 over 3 linearly spaced samples
ASPECT_RATIO_RANGE_START = 1.0
ASPECT_RATIO_RANGE_END = 5.0
ASPECT_RATIO_RANGE_NUMBER = 3
ASPECT_RATIO_RANGE_LOGARITHMIC = False

DEFAULT_ASPECT_RATIO = ASPECT_RATIO_RANGE_START

# =============================================================================
# Law Selection
# =============================================================================

# Used when a preset does not name its own default law
DEFAULT_MIXTURE_LAW = MixtureLaw.VOIGT_REUSS_HILL

# =============================================================================
# Numerical Safety Thresholds (warnings only, never enforced)
# =============================================================================

# Halpin-Tsai becomes singular as q*f -> 1
HALPIN_TSAI_SINGULARITY_MARGIN = 1e-3

# LBYS becomes singular as sqrt(f) -> 1
LBYS_SINGULARITY_MARGIN = 1e-3

# Conventional Poisson ratio range for isotropic solids
POISSON_RATIO_BOUNDS = (-1.0, 0.5)
