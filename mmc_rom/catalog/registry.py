"""Model catalog registry.

Runtime API:
    - get_preset(name) -> ModelPreset
    - list_presets() -> List[str]
    - register_preset(preset) -> None
"""

import warnings
from typing import Dict, List

from mmc_rom.evaluation.result import CompositeResult
from mmc_rom.materials.descriptor import PropertyInput
from .presets import BUILTIN_PRESETS, ModelPreset


class ModelCatalog:
    """Named model presets, in registration order."""

    def __init__(self, presets=()):
        self._presets: Dict[str, ModelPreset] = {}
        for preset in presets:
            self.register_preset(preset)

    def register_preset(self, preset: ModelPreset) -> None:
        """Register a preset.

        Duplicate names warn and overwrite the earlier preset.
        """
        if preset.name in self._presets:
            warnings.warn(
                f"Preset '{preset.name}' already registered. Overwriting.",
                UserWarning,
                stacklevel=2,
            )
        self._presets[preset.name] = preset

    def get_preset(self, name: str) -> ModelPreset:
        """Get preset by catalog name or display name.

        Raises:
            KeyError: If preset not found

        """
        if name in self._presets:
            return self._presets[name]
        for preset in self._presets.values():
            if preset.display_name == name:
                return preset

        available = ", ".join(self.list_presets())
        raise KeyError(f"Preset '{name}' not found. Available: {available}")

    def list_presets(self) -> List[str]:
        return list(self._presets.keys())

    def describe(self) -> List[dict]:
        return [preset.describe() for preset in self._presets.values()]

    def __iter__(self):
        return iter(self._presets.values())

    def __len__(self) -> int:
        return len(self._presets)


# Global catalog instance
_global_catalog: ModelCatalog | None = None


def get_catalog() -> ModelCatalog:
    """Get or create the global catalog holding the bundled presets."""
    global _global_catalog
    if _global_catalog is None:
        _global_catalog = ModelCatalog(BUILTIN_PRESETS)
    return _global_catalog


def get_preset(name: str) -> ModelPreset:
    """Get preset from the global catalog.

    Raises:
        KeyError: If preset not found

    """
    return get_catalog().get_preset(name)


def list_presets() -> List[str]:
    return get_catalog().list_presets()


def register_preset(preset: ModelPreset) -> None:
    get_catalog().register_preset(preset)


def evaluate_composite(
    preset_name: str,
    matrix: PropertyInput,
    reinforcement: PropertyInput,
    **params,
) -> CompositeResult:
    """Evaluate a catalog preset in one call.

    Args:
        preset_name: Catalog name of the preset
        matrix: Matrix constituent
        reinforcement: Reinforcement constituent
        **params: law, percentage, aspect_ratio (preset defaults otherwise)

    Example:
        >>> result = evaluate_composite("matrix_particles", al, sic, law="voigt", percentage=20)
        >>> result.get("youngs_modulus")
    """
    return get_preset(preset_name).evaluate(matrix, reinforcement, **params)
