"""Constituent registry.

Stand-in for the external materials database: holds PropertyInput
records by name and loads/saves them from YAML.
"""

import logging
import warnings
from pathlib import Path
from typing import Dict, List

import yaml

from mmc_rom.config.yaml_loader import get_path
from .descriptor import PropertyInput, check_physical_inputs

logger = logging.getLogger(__name__)


class ConstituentRegistry:
    """Central registry for constituent property records.

    Runtime API:
        - get_constituent(name) -> PropertyInput
        - list_constituents() -> List[str]
        - register_constituent(record) -> None

    Validation:
        - Units match the canonical units (on load)
        - Finite, non-negative values and Poisson range (validate_all)
        - Duplicate names (warning, last one wins)
    """

    def __init__(self, config_path: str | None = None):
        """Initialize constituent registry.

        Args:
            config_path: Path to a constituents YAML file

        """
        self._constituents: Dict[str, PropertyInput] = {}
        self._config_path = config_path

        if config_path:
            self.load_from_yaml(config_path)

    def register_constituent(self, record: PropertyInput) -> None:
        """Register a constituent record.

        Raises:
            ValueError: If the record has no name

        """
        name = record.name
        if not name:
            raise ValueError("Constituent record must have a name")

        if name in self._constituents:
            warnings.warn(
                f"Constituent '{name}' already registered. Overwriting.",
                UserWarning,
                stacklevel=2,
            )

        self._constituents[name] = record

    def get_constituent(self, name: str) -> PropertyInput:
        """Get constituent record by name.

        Raises:
            KeyError: If constituent not found

        """
        if name not in self._constituents:
            available = ", ".join(self.list_constituents())
            raise KeyError(
                f"Constituent '{name}' not found. Available: {available}",
            )

        return self._constituents[name]

    def list_constituents(self) -> List[str]:
        return list(self._constituents.keys())

    def load_from_yaml(self, yaml_path: str) -> None:
        """Load constituents from YAML file.

        Expected format:
            constituents:
              - name: Al 6061
                properties:
                  density: 2700
                  youngs_modulus: {value: 69.0, unit: GPa}
                  poisson_ratio: 0.33

        Args:
            yaml_path: Path to YAML file

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If YAML format is invalid

        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Constituent database not found: {yaml_path}")

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict) or "constituents" not in data:
            raise ValueError("YAML must contain 'constituents' key")

        loaded = 0
        for entry in data["constituents"]:
            try:
                record = PropertyInput.from_dict(entry)
                self.register_constituent(record)
                loaded += 1
            except (KeyError, ValueError, TypeError) as e:
                warnings.warn(
                    f"Failed to load constituent '{entry.get('name', 'unknown')}': {e}",
                    UserWarning,
                    stacklevel=2,
                )

        logger.debug(f"Loaded {loaded} constituents from {path}")

    def save_to_yaml(self, yaml_path: str) -> None:
        """Save all registered constituents to YAML file."""
        data = {
            "constituents": [rec.to_dict() for rec in self._constituents.values()],
        }

        path = Path(yaml_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)

    def validate_all(self) -> List[str]:
        """Validate all registered constituents.

        Returns:
            List of validation error messages (empty if all valid)

        """
        errors = []
        for name, record in self._constituents.items():
            for problem in check_physical_inputs(record):
                errors.append(f"{name}: {problem}")
        return errors


# Global registry instance
_global_registry: ConstituentRegistry | None = None


def default_constituents_path() -> Path:
    """Resolve the constituent database path from defaults.yaml."""
    return get_path("materials.constituents_path", "data/constituents.yaml")


def get_global_registry() -> ConstituentRegistry:
    """Get or create global constituent registry."""
    global _global_registry
    if _global_registry is None:
        default_path = default_constituents_path()
        if default_path.exists():
            _global_registry = ConstituentRegistry(str(default_path))
        else:
            warnings.warn(
                f"Default constituent database not found: {default_path}. Using empty registry.",
                UserWarning,
                stacklevel=2,
            )
            _global_registry = ConstituentRegistry()

    return _global_registry


def get_constituent(name: str) -> PropertyInput:
    """Get constituent from global registry.

    Raises:
        KeyError: If constituent not found

    """
    return get_global_registry().get_constituent(name)


def list_constituents() -> List[str]:
    return get_global_registry().list_constituents()


def register_constituent(record: PropertyInput) -> None:
    """Register constituent in global registry."""
    get_global_registry().register_constituent(record)
