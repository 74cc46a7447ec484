"""Runners for exploring composite models.

This package provides components built on top of the evaluator:
- sweep: Parameter sweeps over default sample ranges
- exporters: CSV/JSON export functions
- visualization: Exploration charts

Example usage:
    from mmc_rom.runners import run_sweep, export_sweep_csv, save_sweep_figure

    sweep = run_sweep("matrix_particles", matrix, reinforcement, law="voigt")
    export_sweep_csv(sweep, "output/sweep.csv")
    save_sweep_figure(sweep, "output")
"""

from mmc_rom.runners.sweep import SweepResult, run_sweep
from mmc_rom.runners.exporters import (
    export_result_csv,
    export_result_json,
    export_sweep_csv,
)
from mmc_rom.runners.visualization import save_sweep_figure

__all__ = [
    # Sweeps
    "run_sweep",
    "SweepResult",
    # Exporters
    "export_result_csv",
    "export_result_json",
    "export_sweep_csv",
    # Visualization
    "save_sweep_figure",
]
