"""Configuration Module - Single Source of Truth for Model Parameters

This module provides the configuration system for mmc_rom.

Runtime defaults (loaded from defaults.yaml):
    from mmc_rom.config import get_default, get_defaults

    preset = get_default('evaluation.default_preset')
    dpi = get_default('output.figure_dpi')

Recommended Usage:
    from mmc_rom.config import ModelConfiguration, validate_config
    from mmc_rom.config.enums import MixtureLaw

    config = ModelConfiguration(law=MixtureLaw.VOIGT, percentage=20.0)
    validate_config(config)

Import Policy:
    DO NOT use: from mmc_rom.config import *

Submodules:
    enums: MixtureLaw, PhaseRole
    defaults: numeric bounds and default sample ranges
    yaml_loader: YAML runtime defaults (get_default, get_defaults, get_path)
    model_config: ModelConfiguration, ParameterSpec, RangeValues
    validation: validate_config, warn_if_unsafe, ConfigurationError
"""

from mmc_rom.config.enums import MixtureLaw, PhaseRole
from mmc_rom.config.yaml_loader import get_default, get_defaults, get_path, reload_defaults
from mmc_rom.config.model_config import (
    ASPECT_RATIO_SPEC,
    PERCENTAGE_SPEC,
    ModelConfiguration,
    ParameterSpec,
    RangeValues,
    default_parameter_specs,
)
from mmc_rom.config.validation import (
    ConfigurationError,
    ConfigurationWarning,
    validate_and_warn,
    validate_config,
    warn_if_unsafe,
)


__all__ = [
    # Enums
    "MixtureLaw",
    "PhaseRole",
    # Config classes
    "ModelConfiguration",
    "ParameterSpec",
    "RangeValues",
    "PERCENTAGE_SPEC",
    "ASPECT_RATIO_SPEC",
    "default_parameter_specs",
    # Validation
    "ConfigurationError",
    "ConfigurationWarning",
    "validate_config",
    "validate_and_warn",
    "warn_if_unsafe",
    # YAML defaults access
    "get_default",
    "get_defaults",
    "get_path",
    "reload_defaults",
]
