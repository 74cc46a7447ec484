"""Parameter sweeps over a preset's default sample ranges.

Sample points are independent evaluations. Serial sweeps evaluate all
points in one vectorized call; with n_workers > 1 the points are spread
over a multiprocessing pool.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from multiprocessing import Pool
from typing import Dict, List

import numpy as np

from mmc_rom.catalog.presets import ModelPreset
from mmc_rom.catalog.registry import get_preset
from mmc_rom.config.enums import MixtureLaw
from mmc_rom.config.model_config import ModelConfiguration
from mmc_rom.materials.descriptor import PropertyId, PropertyInput

logger = logging.getLogger(__name__)


@dataclass
class SweepResult:
    """Output of a one-parameter sweep.

    Attributes:
        preset: Preset name
        law: Law selection
        parameter: Swept parameter name (ModelConfiguration attribute)
        samples: Swept parameter values
        fixed: Values of the parameters held constant
        values: Property -> array aligned with samples
        matrix_name, reinforcement_name: Constituent names
    """

    preset: str
    law: str
    parameter: str
    samples: np.ndarray
    fixed: Dict[str, float] = field(default_factory=dict)
    values: Dict[PropertyId, np.ndarray] = field(default_factory=dict)
    matrix_name: str = ""
    reinforcement_name: str = ""

    @property
    def properties(self) -> List[PropertyId]:
        return list(self.values)

    def __len__(self) -> int:
        return len(self.samples)

    def column(self, prop) -> np.ndarray:
        return self.values[PropertyId.parse(prop)]


def _law_name(law) -> str:
    return law.value if isinstance(law, MixtureLaw) else str(law)


def _evaluate_point(
    preset_name: str,
    matrix: PropertyInput,
    reinforcement: PropertyInput,
    law,
    percentage: float,
    aspect_ratio: float,
) -> Dict[PropertyId, float]:
    """Evaluate one sample point (parallel worker).

    The preset is looked up by name inside the worker so only picklable
    data crosses the process boundary.
    """
    preset = get_preset(preset_name)
    config = ModelConfiguration(
        law=law,
        percentage=percentage,
        aspect_ratio=aspect_ratio,
        allowed_laws=preset.laws,
    )
    result = preset.evaluator.evaluate(matrix, reinforcement, config)
    return {prop: entry.value for prop, entry in result.values.items()}


def run_sweep(
    preset: ModelPreset | str,
    matrix: PropertyInput,
    reinforcement: PropertyInput,
    parameter: str = "percentage",
    samples=None,
    config: ModelConfiguration | None = None,
    n_workers: int = 1,
    **fixed,
) -> SweepResult:
    """Sweep one editable parameter of a preset.

    Args:
        preset: ModelPreset or catalog name
        matrix: Matrix constituent
        reinforcement: Reinforcement constituent
        parameter: 'percentage' or 'aspect_ratio'
        samples: Values to evaluate. Defaults to the parameter's default
            sample range.
        config: Base configuration; built from the preset when omitted
        n_workers: Worker processes (1 evaluates serially, -1 uses one
            worker per sample)
        **fixed: Overrides for the base configuration (law, percentage,
            aspect_ratio)

    Returns:
        SweepResult with one array per output property

    Raises:
        ValueError: If the parameter is not editable for the preset
    """
    if isinstance(preset, str):
        preset = get_preset(preset)
    if config is None:
        config = preset.create_config(**fixed)
    elif fixed:
        config = config.with_updates(**fixed)

    spec = config.parameters.get(parameter)
    if spec is None:
        editable = ", ".join(config.parameters)
        raise ValueError(
            f"Parameter '{parameter}' is not editable for preset '{preset.name}' "
            f"(editable: {editable})"
        )

    if samples is None:
        samples = spec.default_range.samples()
    samples = np.atleast_1d(np.asarray(samples, dtype=np.float64))

    percentage = samples if parameter == "percentage" else config.percentage
    aspect_ratio = samples if parameter == "aspect_ratio" else config.aspect_ratio
    held = {
        name: getattr(config, name) for name in config.parameters if name != parameter
    }

    if n_workers == -1:
        n_workers = len(samples)

    logger.info(
        f"Sweeping {spec.display_name} over {len(samples)} samples "
        f"({preset.name}, law={_law_name(config.law)}, workers={max(n_workers, 1)})"
    )

    if n_workers <= 1:
        values = preset.evaluator.evaluate_arrays(
            matrix, reinforcement, config.law, percentage, aspect_ratio
        )
    else:
        percentages = np.broadcast_to(percentage, samples.shape)
        aspect_ratios = np.broadcast_to(aspect_ratio, samples.shape)
        tasks = [
            (preset.name, matrix, reinforcement, config.law, float(p), float(s))
            for p, s in zip(percentages, aspect_ratios)
        ]
        with Pool(processes=n_workers) as pool:
            points = pool.starmap(_evaluate_point, tasks)
        values = {
            prop: np.array([point[prop] for point in points], dtype=np.float64)
            for prop in preset.evaluator.outputs
        }

    return SweepResult(
        preset=preset.name,
        law=_law_name(config.law),
        parameter=parameter,
        samples=samples,
        fixed=held,
        values=values,
        matrix_name=matrix.name,
        reinforcement_name=reinforcement.name,
    )
