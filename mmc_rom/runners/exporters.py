"""Export functions for evaluation output data.

This module provides functions for exporting results to various formats:
- CSV table of a single composite evaluation
- CSV table of a parameter sweep (one row per sample)
- JSON dump of a single composite evaluation
"""

import csv
import json
import logging
import math
from pathlib import Path

from mmc_rom.config.yaml_loader import get_default
from mmc_rom.evaluation.result import CompositeResult
from mmc_rom.runners.sweep import SweepResult

logger = logging.getLogger(__name__)


def _format(value: float, float_format: str) -> str:
    if not math.isfinite(value):
        return str(value)
    return float_format % value


def export_result_csv(result: CompositeResult, filename="composite_properties.csv",
                      float_format=None):
    """Export one evaluation to CSV.

    Layout: a header block with the model parameters, then one row per
    property with value and unit.

    Args:
        result: CompositeResult to export
        filename: Output CSV filename
        float_format: printf-style format for values (defaults.yaml
            output.csv_float_format)

    Returns:
        Path to output file
    """
    float_format = float_format or get_default("output.csv_float_format", "%.6e")
    path = Path(filename)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)

        writer.writerow(["Parameter", "Value", "Unit"])
        writer.writerow(["MODEL", "", ""])
        writer.writerow(["Preset", result.preset, "-"])
        writer.writerow(["Mixture law", result.law, "-"])
        writer.writerow(["Reinforcement percentage", result.percentage, "%"])
        writer.writerow(["Aspect ratio", result.aspect_ratio, "-"])
        writer.writerow(["Matrix", result.matrix_name, "-"])
        writer.writerow(["Reinforcement", result.reinforcement_name, "-"])

        writer.writerow(["PROPERTIES", "", ""])
        for prop, entry in result.values.items():
            writer.writerow([prop.display_name, _format(entry.value, float_format), entry.unit])

    logger.info(f"Saved composite properties to {path}")
    return path


def export_result_json(result: CompositeResult, filename="composite_properties.json"):
    """Export one evaluation to JSON.

    Non-finite values are written as the strings 'inf', '-inf' and 'nan'.

    Returns:
        Path to output file
    """
    data = result.to_dict()
    for entry in data["properties"].values():
        if not math.isfinite(entry["value"]):
            entry["value"] = str(entry["value"])

    path = Path(filename)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    logger.info(f"Saved composite properties to {path}")
    return path


def export_sweep_csv(sweep: SweepResult, filename="composite_sweep.csv", float_format=None):
    """Export a parameter sweep to CSV.

    One header row (swept parameter, then 'display name [unit]' per
    property) followed by one row per sample.

    Returns:
        Path to output file
    """
    float_format = float_format or get_default("output.csv_float_format", "%.6e")
    path = Path(filename)
    path.parent.mkdir(parents=True, exist_ok=True)

    props = sweep.properties
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)

        header = [sweep.parameter]
        header += [f"{prop.display_name} [{prop.unit}]" if prop.unit else prop.display_name
                   for prop in props]
        writer.writerow(header)

        for i, sample in enumerate(sweep.samples):
            row = [f"{sample:g}"]
            row += [_format(float(sweep.values[prop][i]), float_format) for prop in props]
            writer.writerow(row)

    logger.info(f"Saved sweep of {len(sweep)} samples to {path}")
    return path
