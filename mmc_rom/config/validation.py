"""
Configuration Validation Utilities

This module provides validation functions for model configurations.
The mixture-law arithmetic never validates its inputs; these helpers are
for callers that want to guard against out-of-bounds parameters or
numerically fragile inputs before evaluating.

Import Policy:
    from mmc_rom.config.validation import validate_config, warn_if_unsafe, ConfigurationError

DO NOT use: from mmc_rom.config.validation import *
"""

from __future__ import annotations

import math
import warnings
from typing import List, Tuple

from mmc_rom.config.defaults import (
    HALPIN_TSAI_SINGULARITY_MARGIN,
    LBYS_SINGULARITY_MARGIN,
)
from mmc_rom.config.enums import MixtureLaw, PhaseRole
from mmc_rom.config.model_config import ModelConfiguration
from mmc_rom.laws.mixture_laws import halpin_tsai, halpin_tsai_efficiency, lbys


class ConfigurationError(Exception):
    """Raised when configuration validation fails."""

    pass


class ConfigurationWarning(Warning):
    """Warning for numerically fragile but legal configuration choices."""

    pass


def validate_config(config: ModelConfiguration, raise_on_error: bool = True) -> Tuple[bool, List[str]]:
    """Validate a model configuration.

    Args:
        config: ModelConfiguration to validate
        raise_on_error: If True, raise ConfigurationError on validation failure

    Returns:
        Tuple of (is_valid, error_messages)

    Raises:
        ConfigurationError: If validation fails and raise_on_error=True
    """
    errors = config.validate()

    if errors:
        if raise_on_error:
            raise ConfigurationError(
                f"Configuration validation failed with {len(errors)} error(s):\n"
                + "\n".join(f"  - {err}" for err in errors)
            )
        return False, errors

    return True, []


def warn_if_unsafe(
    config: ModelConfiguration, matrix=None, reinforcement=None, preset=None,
) -> List[str]:
    """Check for inputs that make a law singular or ill-conditioned.

    These are not errors: evaluation proceeds and returns inf/NaN.
    Warnings are issued via Python's warnings module.

    Args:
        config: ModelConfiguration to check
        matrix: Optional matrix PropertyInput
        reinforcement: Optional reinforcement PropertyInput
        preset: Optional ModelPreset. When given, the singularity checks only
            fire for laws its chains actually apply under the selected law.
            Without it, LBYS is assumed under Reuss and Halpin-Tsai under
            Halpin-Tsai.

    Returns:
        List of warning messages (empty if no warnings)
    """
    # Local import: materials depends on config
    from mmc_rom.materials.descriptor import PropertyId, check_physical_inputs

    warnings_list = []
    f = config.volume_fraction
    law = config.mixture_law
    evaluator = getattr(preset, "evaluator", None)

    if evaluator is not None:
        lbys_props = evaluator.properties_using(lbys, law)
        uses_halpin_tsai = PropertyId.YOUNGS_MODULUS in evaluator.properties_using(halpin_tsai, law)
    else:
        lbys_props = [PropertyId.YIELD_STRENGTH] if law is MixtureLaw.REUSS else []
        uses_halpin_tsai = law is MixtureLaw.HALPIN_TSAI

    # Check 1: LBYS is singular at f = 1
    if lbys_props and f >= 0 and abs(1.0 - math.sqrt(f)) < LBYS_SINGULARITY_MARGIN:
        names = ", ".join(prop.display_name for prop in lbys_props)
        warnings_list.append(
            f"Volume fraction {f:.4f} makes the lower-bound yield strength law singular ({names})."
        )

    # Check 2: Halpin-Tsai is singular when q*f -> 1
    if uses_halpin_tsai and matrix is not None and reinforcement is not None:
        base = matrix.get(PropertyId.YOUNGS_MODULUS)
        other = reinforcement.get(PropertyId.YOUNGS_MODULUS)
        q = float(halpin_tsai_efficiency(other / base, config.aspect_ratio)) if base else math.nan
        if math.isfinite(q) and abs(1.0 - q * f) < HALPIN_TSAI_SINGULARITY_MARGIN:
            warnings_list.append(
                f"Halpin-Tsai q*f = {q * f:.4f} is close to 1; "
                "Young's modulus estimate is singular."
            )

    # Check 3: Non-physical phase data
    for role, phase in ((PhaseRole.MATRIX, matrix), (PhaseRole.REINFORCEMENT, reinforcement)):
        if phase is None:
            continue
        for problem in check_physical_inputs(phase):
            warnings_list.append(f"{role.value}: {problem}")

    for warning_msg in warnings_list:
        warnings.warn(warning_msg, ConfigurationWarning, stacklevel=2)

    return warnings_list


def validate_and_warn(
    config: ModelConfiguration, matrix=None, reinforcement=None, preset=None,
) -> ModelConfiguration:
    """Validate a configuration and issue warnings for fragile inputs.

    This is the recommended entry point for caller-side guarding.

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    validate_config(config, raise_on_error=True)
    warn_if_unsafe(config, matrix, reinforcement, preset)
    return config
