"""Constituent property descriptors.

Each constituent (matrix or reinforcement) is described by a PropertyInput:
a mapping from a fixed PropertyId to a unit-tagged scalar. The static
PROPERTY_DESCRIPTORS table gives every identifier its display name and
canonical unit.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List

from mmc_rom.config.defaults import POISSON_RATIO_BOUNDS


class PropertyId(Enum):
    """Fixed identifiers of constituent and composite properties."""
    PRICE = "price"
    DENSITY = "density"
    YOUNGS_MODULUS = "youngs_modulus"
    FLEXURAL_MODULUS = "flexural_modulus"
    POISSON_RATIO = "poisson_ratio"
    YIELD_STRENGTH = "yield_strength"
    HARDNESS_VICKERS = "hardness_vickers"
    SPECIFIC_HEAT = "specific_heat"
    THERMAL_EXPANSION = "thermal_expansion"
    THERMAL_CONDUCTIVITY = "thermal_conductivity"
    ELECTRICAL_RESISTIVITY = "electrical_resistivity"
    TIB2_FRACTION = "tib2_fraction"

    @property
    def descriptor(self) -> PropertyDescriptor:
        return PROPERTY_DESCRIPTORS[self]

    @property
    def display_name(self) -> str:
        return PROPERTY_DESCRIPTORS[self].display_name

    @property
    def unit(self) -> str:
        return PROPERTY_DESCRIPTORS[self].unit

    @classmethod
    def parse(cls, key) -> PropertyId:
        """Resolve an identifier from an enum, value, name or display name.

        Raises:
            KeyError: If nothing matches
        """
        if isinstance(key, cls):
            return key
        text = str(key).strip()
        for prop in cls:
            if text in (prop.value, prop.name, prop.display_name):
                return prop
        lowered = text.lower()
        for prop in cls:
            if lowered in (prop.value, prop.display_name.lower()):
                return prop
        raise KeyError(f"Unknown property identifier: {key!r}")


@dataclass(frozen=True)
class PropertyDescriptor:
    """Static metadata of a property.

    Attributes:
        display_name: Name used by materials databases and reports
        unit: Canonical unit; inputs in other units are rejected
        description: One-line help text
        non_negative: Whether well-formed data is expected to be >= 0
    """

    display_name: str
    unit: str
    description: str = ""
    non_negative: bool = True


PROPERTY_DESCRIPTORS: Dict[PropertyId, PropertyDescriptor] = {
    # Price data uses currency per kilogram
    PropertyId.PRICE: PropertyDescriptor("Price", "currency/kg", "Price per unit mass"),
    PropertyId.DENSITY: PropertyDescriptor("Density", "kg/m^3", "Mass density"),
    PropertyId.YOUNGS_MODULUS: PropertyDescriptor("Young's modulus", "GPa", "Elastic modulus"),
    PropertyId.FLEXURAL_MODULUS: PropertyDescriptor("Flexural modulus", "GPa", "Bending modulus"),
    PropertyId.POISSON_RATIO: PropertyDescriptor(
        "Poisson's ratio", "", "Lateral to axial strain ratio", non_negative=False,
    ),
    PropertyId.YIELD_STRENGTH: PropertyDescriptor(
        "Yield strength (elastic limit)", "GPa", "Elastic limit",
    ),
    PropertyId.HARDNESS_VICKERS: PropertyDescriptor("Hardness - Vickers", "HV", "Vickers hardness"),
    PropertyId.SPECIFIC_HEAT: PropertyDescriptor(
        "Specific heat capacity", "J/kg.°C", "Heat capacity per unit mass",
    ),
    PropertyId.THERMAL_EXPANSION: PropertyDescriptor(
        "Thermal expansion coefficient", "µstrain/°C", "Linear expansion coefficient",
        non_negative=False,
    ),
    PropertyId.THERMAL_CONDUCTIVITY: PropertyDescriptor(
        "Thermal conductivity", "W/m.°C", "Heat conductivity",
    ),
    PropertyId.ELECTRICAL_RESISTIVITY: PropertyDescriptor(
        "Electrical resistivity", "µohm.cm", "Electrical resistivity",
    ),
    PropertyId.TIB2_FRACTION: PropertyDescriptor(
        "TiB2 (titanium boride)", "%", "Titanium boride content",
    ),
}


@dataclass(frozen=True)
class PropertyValue:
    """A scalar value with its unit."""

    value: float
    unit: str

    def __float__(self) -> float:
        return float(self.value)


@dataclass
class PropertyInput:
    """Named, unit-tagged scalar properties of one constituent.

    Values are stored as given. Finiteness, sign and the Poisson range
    are not enforced here; see check_physical_inputs.

    Attributes:
        name: Constituent name (e.g. 'Al 6061', 'SiC')
        values: Property values by identifier
    """

    name: str = ""
    values: Dict[PropertyId, PropertyValue] = field(default_factory=dict)

    def __post_init__(self):
        normalized = {}
        for key, raw in self.values.items():
            prop = PropertyId.parse(key)
            normalized[prop] = _coerce_value(prop, raw)
        self.values = normalized

    def get(self, prop) -> float:
        """Return the value of a property, NaN when it is missing."""
        prop = PropertyId.parse(prop)
        entry = self.values.get(prop)
        if entry is None:
            return math.nan
        return float(entry.value)

    def set(self, prop, value: float, unit: str | None = None) -> None:
        prop = PropertyId.parse(prop)
        raw = value if unit is None else {"value": value, "unit": unit}
        self.values[prop] = _coerce_value(prop, raw)

    def __getitem__(self, prop) -> PropertyValue:
        return self.values[PropertyId.parse(prop)]

    def __contains__(self, prop) -> bool:
        try:
            return PropertyId.parse(prop) in self.values
        except KeyError:
            return False

    def __iter__(self) -> Iterator[PropertyId]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    @classmethod
    def from_values(cls, name: str = "", **values: float) -> PropertyInput:
        """Build from keyword values in canonical units.

        Example:
            >>> al = PropertyInput.from_values("Al", density=2700.0, youngs_modulus=70.0)
        """
        return cls(name=name, values=dict(values))

    def to_dict(self) -> dict:
        """Convert to a dictionary for serialization."""
        return {
            "name": self.name,
            "properties": {
                prop.value: {"value": entry.value, "unit": entry.unit}
                for prop, entry in self.values.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> PropertyInput:
        """Create from a dictionary.

        The 'properties' mapping accepts plain numbers (canonical unit)
        or {value, unit} mappings. Keys may be enum names, values or
        display names.

        Raises:
            KeyError: On an unknown property identifier
            ValueError: On a unit that differs from the canonical unit
        """
        return cls(name=data.get("name", ""), values=dict(data.get("properties", {})))


def _coerce_value(prop: PropertyId, raw) -> PropertyValue:
    """Normalize a raw entry into a PropertyValue in the canonical unit."""
    canonical = prop.unit
    if isinstance(raw, PropertyValue):
        value, unit = raw.value, raw.unit
    elif isinstance(raw, dict):
        value, unit = raw.get("value"), raw.get("unit", canonical)
    else:
        value, unit = raw, canonical

    if unit is None:
        unit = canonical
    if unit != canonical:
        raise ValueError(
            f"{prop.display_name} must be given in '{canonical}', got '{unit}'"
        )
    return PropertyValue(float(value), canonical)


def check_physical_inputs(phase: PropertyInput) -> List[str]:
    """List physically suspicious values of a constituent.

    Checks:
        - Values are finite
        - Moduli, density, hardness, conductivity etc. are non-negative
        - Poisson's ratio lies in [-1, 0.5]

    Never raises; the engine itself propagates whatever it is given.

    Returns:
        List of problem descriptions (empty if none)
    """
    problems = []
    low, high = POISSON_RATIO_BOUNDS

    for prop, entry in phase.values.items():
        value = entry.value
        if not math.isfinite(value):
            problems.append(f"{prop.display_name} is not finite ({value})")
            continue
        if prop.descriptor.non_negative and value < 0:
            problems.append(f"{prop.display_name} is negative ({value} {entry.unit})")
        if prop is PropertyId.POISSON_RATIO and not (low <= value <= high):
            problems.append(f"Poisson's ratio {value} outside [{low}, {high}]")

    return problems
