"""Composite evaluation results."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List

from mmc_rom.materials.descriptor import PropertyId, PropertyValue


@dataclass
class CompositeResult:
    """Computed properties for one (configuration, matrix, reinforcement) triple.

    Attributes:
        preset: Name of the catalog preset that produced the result
        law: Law selection as given (enum value or raw string)
        percentage: Reinforcement volume percentage
        aspect_ratio: Reinforcement aspect ratio
        matrix_name, reinforcement_name: Constituent names
        values: Computed values by property, in the preset's output order
    """

    preset: str
    law: str
    percentage: float
    aspect_ratio: float
    matrix_name: str = ""
    reinforcement_name: str = ""
    values: Dict[PropertyId, PropertyValue] = field(default_factory=dict)

    def __getitem__(self, prop) -> PropertyValue:
        return self.values[PropertyId.parse(prop)]

    def __contains__(self, prop) -> bool:
        try:
            return PropertyId.parse(prop) in self.values
        except KeyError:
            return False

    def __iter__(self):
        return iter(self.values)

    def get(self, prop) -> float:
        """Return the value of a property, NaN when it was not computed."""
        entry = self.values.get(PropertyId.parse(prop))
        return math.nan if entry is None else entry.value

    def non_finite(self) -> List[PropertyId]:
        """Properties whose value is inf or NaN."""
        return [prop for prop, entry in self.values.items() if not math.isfinite(entry.value)]

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary keyed by display name."""
        return {
            "preset": self.preset,
            "law": self.law,
            "percentage": self.percentage,
            "aspect_ratio": self.aspect_ratio,
            "matrix": self.matrix_name,
            "reinforcement": self.reinforcement_name,
            "properties": {
                prop.display_name: {"value": entry.value, "unit": entry.unit}
                for prop, entry in self.values.items()
            },
        }
