"""Model catalog.

Module structure:
    presets: ModelPreset and the bundled presets with their law tables
    registry: ModelCatalog and global convenience functions

Example usage:
    >>> from mmc_rom.catalog import get_preset, list_presets
    >>> list_presets()
    ['matrix_particles', 'fe_tib2', 'matrix_particles_halpin_tsai']
    >>> preset = get_preset("fe_tib2")
    >>> config = preset.create_config(law="halpin_tsai", percentage=20, aspect_ratio=5)
"""

from .presets import (
    BUILTIN_PRESETS,
    FE_TIB2,
    MATRIX_PARTICLES,
    MATRIX_PARTICLES_HALPIN_TSAI,
    ModelPreset,
)
from .registry import (
    ModelCatalog,
    evaluate_composite,
    get_catalog,
    get_preset,
    list_presets,
    register_preset,
)

__all__ = [
    # Presets
    "ModelPreset",
    "MATRIX_PARTICLES",
    "FE_TIB2",
    "MATRIX_PARTICLES_HALPIN_TSAI",
    "BUILTIN_PRESETS",
    # Catalog
    "ModelCatalog",
    "get_catalog",
    "get_preset",
    "list_presets",
    "register_preset",
    "evaluate_composite",
]
