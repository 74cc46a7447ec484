"""Visualization functions for parameter sweeps.

This module provides functions for creating exploration charts:
- One panel per output property against the swept parameter
"""

import logging
import math
from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from mmc_rom.config.yaml_loader import get_default
from mmc_rom.materials.descriptor import PropertyId
from mmc_rom.runners.sweep import SweepResult

logger = logging.getLogger(__name__)

_PARAMETER_LABELS = {
    "percentage": "Reinforcement percentage [%]",
    "aspect_ratio": "Aspect ratio [-]",
}


def save_sweep_figure(
    sweep: SweepResult,
    output_dir: Path,
    properties: Optional[Sequence] = None,
    figure_format: Optional[str] = None,
    dpi: Optional[int] = None,
    max_columns: int = 3,
) -> Path:
    """Save a chart of every swept property.

    Args:
        sweep: Sweep to plot
        output_dir: Output directory for the figure
        properties: Subset of properties to plot (default: all)
        figure_format: Figure format (png, pdf, svg); defaults.yaml otherwise
        dpi: Figure DPI; defaults.yaml otherwise
        max_columns: Panels per row

    Returns:
        Path of the saved figure
    """
    figure_format = figure_format or get_default("output.figure_format", "png")
    dpi = dpi or get_default("output.figure_dpi", 150)
    output_dir = Path(output_dir)
    output_dir.mkdir(exist_ok=True, parents=True)

    if properties is None:
        props = sweep.properties
    else:
        props = [PropertyId.parse(p) for p in properties]
    if not props:
        raise ValueError("Nothing to plot: sweep has no properties")

    n_cols = min(max_columns, len(props))
    n_rows = math.ceil(len(props) / n_cols)
    fig, axes = plt.subplots(n_rows, n_cols, figsize=(4.5 * n_cols, 3.5 * n_rows), squeeze=False)

    x_label = _PARAMETER_LABELS.get(sweep.parameter, sweep.parameter)
    for ax, prop in zip(axes.flat, props):
        y = sweep.column(prop)
        finite = np.isfinite(y)
        ax.plot(sweep.samples[finite], y[finite], marker="o", linewidth=2, color="blue")
        ax.set_xlabel(x_label)
        ax.set_ylabel(f"{prop.display_name} [{prop.unit}]" if prop.unit else prop.display_name)
        ax.set_title(prop.display_name)
        ax.grid(True, alpha=0.3)

    # Hide unused panels
    for ax in list(axes.flat)[len(props):]:
        ax.set_visible(False)

    fig.suptitle(
        f"{sweep.preset} ({sweep.law}): "
        f"{sweep.matrix_name or 'matrix'} + {sweep.reinforcement_name or 'reinforcement'}"
    )
    plt.tight_layout()

    figure_file = output_dir / f"{sweep.preset}_{sweep.parameter}_sweep.{figure_format}"
    plt.savefig(figure_file, dpi=dpi)
    plt.close(fig)
    logger.info(f"Saved: {figure_file}")

    return figure_file
