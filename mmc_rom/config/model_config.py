"""Model Configuration - Single Source of Truth (SSOT)

This module provides the configuration dataclasses for a composite model
evaluation. ALL evaluation parameters (law choice, reinforcement
percentage, aspect ratio) flow through these classes.

Import Policy:
    from mmc_rom.config.model_config import ModelConfiguration, ParameterSpec, RangeValues

DO NOT use: from mmc_rom.config.model_config import *
"""

from __future__ import annotations

import dataclasses
import math
import numbers
from dataclasses import dataclass, field

import numpy as np

from mmc_rom.config.defaults import (
    ASPECT_RATIO_BOUNDS,
    ASPECT_RATIO_RANGE_END,
    ASPECT_RATIO_RANGE_LOGARITHMIC,
    ASPECT_RATIO_RANGE_NUMBER,
    ASPECT_RATIO_RANGE_START,
    DEFAULT_ASPECT_RATIO,
    DEFAULT_MIXTURE_LAW,
    DEFAULT_PERCENTAGE,
    PERCENTAGE_BOUNDS,
    PERCENTAGE_RANGE_END,
    PERCENTAGE_RANGE_LOGARITHMIC,
    PERCENTAGE_RANGE_NUMBER,
    PERCENTAGE_RANGE_START,
)
from mmc_rom.config.enums import MixtureLaw


@dataclass(frozen=True)
class RangeValues:
    """Default sample range of an editable parameter.

    Attributes:
        start, end: First and last sample (inclusive)
        number: Number of samples
        logarithmic: Geometric instead of linear spacing
    """

    start: float
    end: float
    number: int = 3
    logarithmic: bool = False

    def samples(self) -> np.ndarray:
        """Return the sample points of this range."""
        if self.number <= 0:
            return np.empty(0)
        if self.logarithmic:
            return np.geomspace(self.start, self.end, self.number)
        return np.linspace(self.start, self.end, self.number)

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class ParameterSpec:
    """Editable model parameter with bounds and a default sample range.

    Attributes:
        name: Attribute name on ModelConfiguration
        display_name: Name shown to users
        unit: Unit symbol
        description: One-line help text
        bounds: Inclusive (lower, upper) bounds
        default_range: Default sweep used for exploration charts
        group: Group label and its display order
    """

    name: str
    display_name: str
    unit: str
    description: str
    bounds: tuple[float, float]
    default_range: RangeValues
    group: str
    group_order: int

    def contains(self, value: float) -> bool:
        lower, upper = self.bounds
        return lower <= value <= upper

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "display_name": self.display_name,
            "unit": self.unit,
            "description": self.description,
            "bounds": list(self.bounds),
            "default_range": self.default_range.to_dict(),
            "group": self.group,
            "group_order": self.group_order,
        }


PERCENTAGE_SPEC = ParameterSpec(
    name="percentage",
    display_name="Reinforcement percentage",
    unit="%",
    description="Specify the volume fraction",
    bounds=PERCENTAGE_BOUNDS,
    default_range=RangeValues(
        start=PERCENTAGE_RANGE_START,
        end=PERCENTAGE_RANGE_END,
        number=PERCENTAGE_RANGE_NUMBER,
        logarithmic=PERCENTAGE_RANGE_LOGARITHMIC,
    ),
    group="Reinforcement percentage",
    group_order=4,
)

ASPECT_RATIO_SPEC = ParameterSpec(
    name="aspect_ratio",
    display_name="Aspect Ratio",
    unit="s",
    description="Specify the mean particles aspect ratio",
    bounds=ASPECT_RATIO_BOUNDS,
    default_range=RangeValues(
        start=ASPECT_RATIO_RANGE_START,
        end=ASPECT_RATIO_RANGE_END,
        number=ASPECT_RATIO_RANGE_NUMBER,
        logarithmic=ASPECT_RATIO_RANGE_LOGARITHMIC,
    ),
    group="Reinforcement description",
    group_order=5,
)


def default_parameter_specs() -> dict[str, ParameterSpec]:
    """Parameter specs exposed by every law family."""
    return {
        PERCENTAGE_SPEC.name: PERCENTAGE_SPEC,
        ASPECT_RATIO_SPEC.name: ASPECT_RATIO_SPEC,
    }


@dataclass
class ModelConfiguration:
    """Configuration of one composite model evaluation.

    Bounds are checked by validate(), never on assignment: the
    arithmetic layer accepts any value and lets IEEE-754 semantics
    propagate.

    Attributes:
        law: Selected mixture law. Strings are parsed into MixtureLaw
            when possible and kept verbatim otherwise (unknown selection).
        percentage: Reinforcement volume percentage p, f = p / 100
        aspect_ratio: Reinforcement aspect ratio s
        allowed_laws: Laws offered by the owning preset
        parameters: Editable parameter specs by attribute name
    """

    law: MixtureLaw | str = DEFAULT_MIXTURE_LAW
    percentage: float = DEFAULT_PERCENTAGE
    aspect_ratio: float = DEFAULT_ASPECT_RATIO
    allowed_laws: tuple[MixtureLaw, ...] = tuple(MixtureLaw)
    parameters: dict[str, ParameterSpec] = field(default_factory=default_parameter_specs)

    def __post_init__(self):
        parsed = MixtureLaw.parse(self.law)
        if parsed is not None:
            self.law = parsed

    @property
    def volume_fraction(self) -> float:
        """Reinforcement volume fraction f in [0, 1]."""
        return self.percentage / 100.0

    @property
    def mixture_law(self) -> MixtureLaw | None:
        """The selected law, or None for an unrecognized selection."""
        return self.law if isinstance(self.law, MixtureLaw) else None

    def validate(self) -> list[str]:
        """Validate model configuration.

        Returns:
            List of error messages (empty if valid)

        """
        errors = []

        if self.mixture_law is None:
            errors.append(f"Unknown mixture law: {self.law!r}")
        elif self.mixture_law not in self.allowed_laws:
            offered = ", ".join(law.value for law in self.allowed_laws)
            errors.append(
                f"Mixture law '{self.mixture_law.value}' is not offered "
                f"(available: {offered})"
            )

        for name, spec in self.parameters.items():
            value = getattr(self, name)
            if not isinstance(value, numbers.Real) or math.isnan(value):
                errors.append(f"{spec.display_name} must be a number, got {value!r}")
            elif not spec.contains(value):
                lower, upper = spec.bounds
                errors.append(
                    f"{spec.display_name} ({value} {spec.unit}) must be within "
                    f"[{lower}, {upper}]"
                )

        return errors

    def with_updates(self, **kwargs) -> ModelConfiguration:
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **kwargs)

    def to_dict(self) -> dict:
        law = self.law.value if isinstance(self.law, MixtureLaw) else self.law
        data = {"law": law, "percentage": self.percentage}
        if ASPECT_RATIO_SPEC.name in self.parameters:
            data["aspect_ratio"] = self.aspect_ratio
        return data
