"""Rule-of-Mixtures Engine for Metal Matrix Composites

Estimates effective properties of a two-phase composite (metallic matrix
plus reinforcement particles) from the constituents' properties, the
reinforcement volume percentage and, for shape-dependent laws, the
reinforcement aspect ratio.

Key Principles:
- Pure, vectorized mixture laws (Voigt, Reuss, Hashin, Halpin-Tsai, ...)
- Explicit (property, law) -> chain tables per catalog preset
- Degenerate inputs propagate as inf/NaN; guarding is the caller's choice

Version: 1.0
"""

__version__ = "1.0"

# Configuration
from mmc_rom.config import (
    ConfigurationError,
    ConfigurationWarning,
    MixtureLaw,
    ModelConfiguration,
    validate_and_warn,
    validate_config,
)

# Constituents
from mmc_rom.materials import (
    PropertyId,
    PropertyInput,
    PropertyValue,
    get_constituent,
    list_constituents,
)

# Evaluation
from mmc_rom.evaluation import CompositeEvaluator, CompositeResult

# Catalog
from mmc_rom.catalog import (
    ModelPreset,
    evaluate_composite,
    get_preset,
    list_presets,
)

__all__ = [
    # Version
    "__version__",
    # Configuration
    "MixtureLaw",
    "ModelConfiguration",
    "ConfigurationError",
    "ConfigurationWarning",
    "validate_config",
    "validate_and_warn",
    # Constituents
    "PropertyId",
    "PropertyInput",
    "PropertyValue",
    "get_constituent",
    "list_constituents",
    # Evaluation
    "CompositeEvaluator",
    "CompositeResult",
    # Catalog
    "ModelPreset",
    "get_preset",
    "list_presets",
    "evaluate_composite",
]
