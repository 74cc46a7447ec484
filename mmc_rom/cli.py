"""Command-line interface for composite property estimation.

Usage:
    mmc-rom info
    mmc-rom evaluate --preset matrix_particles --matrix "Al 6061" --reinforcement SiC --law voigt
    mmc-rom sweep --preset fe_tib2 --matrix Fe --reinforcement TiB2 --parameter aspect_ratio
"""

import argparse
import json
import logging
import math
import sys
from pathlib import Path

from mmc_rom import __version__
from mmc_rom.catalog import get_catalog, get_preset
from mmc_rom.config import (
    ConfigurationError,
    RangeValues,
    get_default,
    validate_and_warn,
)
from mmc_rom.materials import ConstituentRegistry, get_global_registry

logger = logging.getLogger(__name__)


def _registry(args: argparse.Namespace) -> ConstituentRegistry:
    if getattr(args, "constituents", None):
        return ConstituentRegistry(args.constituents)
    return get_global_registry()


def _overrides(args: argparse.Namespace) -> dict:
    overrides = {}
    for name in ("law", "percentage", "aspect_ratio"):
        value = getattr(args, name, None)
        if value is not None:
            overrides[name] = value
    return overrides


def _format_value(value: float) -> str:
    return f"{value:.6g}" if math.isfinite(value) else str(value)


def cmd_info(args: argparse.Namespace) -> int:
    """Display the catalog and the known constituents."""
    registry = _registry(args)

    print("\n" + "=" * 60)
    print(f"MMC RULE OF MIXTURES {__version__}")
    print("=" * 60)

    for preset in get_catalog():
        print(f"\n[{preset.display_name}]  ({preset.name}, group: {preset.group})")
        print(f"  {preset.description}")
        print("  Laws:")
        for law in preset.laws:
            marker = " (default)" if law is preset.default_law else ""
            print(f"    - {law.value}: {law.label}{marker}")
        print("  Parameters:")
        for spec in preset.parameters:
            lower, upper = spec.bounds
            print(f"    - {spec.name} [{spec.unit}] in [{lower:g}, {upper:g}]")
        print("  Outputs:")
        for out in preset.outputs:
            print(f"    - {out.display_name} [{out.unit}]")

    print("\n[Constituents]")
    for name in registry.list_constituents():
        print(f"  - {name}")

    print("\n" + "=" * 60)
    return 0


def cmd_evaluate(args: argparse.Namespace) -> int:
    """Evaluate every output of a preset at one configuration."""
    preset = get_preset(args.preset)
    registry = _registry(args)
    matrix = registry.get_constituent(args.matrix)
    reinforcement = registry.get_constituent(args.reinforcement)

    config = preset.create_config(**_overrides(args))
    validate_and_warn(config, matrix, reinforcement, preset=preset)

    result = preset.evaluate(matrix, reinforcement, config)

    if args.json:
        data = result.to_dict()
        for entry in data["properties"].values():
            entry["value"] = entry["value"] if math.isfinite(entry["value"]) else str(entry["value"])
        print(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        print(f"\n{preset.display_name}: {matrix.name} + {reinforcement.name}")
        print(f"  law={result.law}, percentage={result.percentage:g} %, "
              f"aspect_ratio={result.aspect_ratio:g}")
        for prop, entry in result.values.items():
            print(f"  {prop.display_name:<32} {_format_value(entry.value):>14} {entry.unit}")

    if args.csv:
        from mmc_rom.runners import export_result_csv

        export_result_csv(result, args.csv)

    return 0


def cmd_sweep(args: argparse.Namespace) -> int:
    """Sweep one editable parameter and export the results."""
    from mmc_rom.runners import export_sweep_csv, run_sweep, save_sweep_figure

    preset = get_preset(args.preset)
    registry = _registry(args)
    matrix = registry.get_constituent(args.matrix)
    reinforcement = registry.get_constituent(args.reinforcement)

    config = preset.create_config(**_overrides(args))
    validate_and_warn(config, matrix, reinforcement, preset=preset)

    parameter = args.parameter or get_default("sweep.parameter", "percentage")
    spec = config.parameters.get(parameter)
    if spec is None:
        raise ConfigurationError(
            f"Parameter '{parameter}' is not editable for preset '{preset.name}'. "
            f"Editable: {', '.join(config.parameters)}"
        )

    samples = None
    if args.start is not None or args.end is not None:
        default = spec.default_range
        samples = RangeValues(
            start=default.start if args.start is None else args.start,
            end=default.end if args.end is None else args.end,
            number=args.number or default.number,
            logarithmic=args.logarithmic or default.logarithmic,
        ).samples()

    n_workers = args.workers if args.workers is not None else get_default("sweep.n_workers", 1)
    sweep = run_sweep(
        preset, matrix, reinforcement,
        parameter=parameter, samples=samples, config=config, n_workers=n_workers,
    )

    output_dir = Path(args.output_dir or get_default("output.output_dir", "output"))
    csv_path = Path(args.csv) if args.csv else output_dir / f"{preset.name}_{parameter}_sweep.csv"
    export_sweep_csv(sweep, csv_path)

    if not args.no_figure:
        save_sweep_figure(sweep, output_dir)

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mmc-rom",
        description="Rule-of-mixtures property estimates for metal matrix composites",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List presets, laws and constituents
  mmc-rom info

  # Young's modulus and friends of Al 6061 + 20 % SiC, Voigt bound
  mmc-rom evaluate --preset matrix_particles --matrix "Al 6061" --reinforcement SiC \\
      --law voigt --percentage 20

  # Aspect ratio sweep of the Fe-TiB2 model with Halpin-Tsai
  mmc-rom sweep --preset fe_tib2 --matrix Fe --reinforcement TiB2 --law halpin_tsai \\
      --parameter aspect_ratio --start 1 --end 100 --number 20 --logarithmic
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--constituents",
        help="Constituent database YAML (default: bundled database)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Info command
    subparsers.add_parser("info", help="Display presets, laws and constituents")

    # Shared model arguments
    model_parser = argparse.ArgumentParser(add_help=False)
    model_parser.add_argument(
        "--preset",
        default=get_default("evaluation.default_preset", "matrix_particles"),
        help="Catalog preset (default: %(default)s)",
    )
    model_parser.add_argument("--matrix", required=True, help="Matrix constituent name")
    model_parser.add_argument("--reinforcement", required=True, help="Reinforcement constituent name")
    model_parser.add_argument("--law", help="Mixture law (default: preset default)")
    model_parser.add_argument("--percentage", type=float, help="Reinforcement percentage [%%]")
    model_parser.add_argument("--aspect-ratio", type=float, help="Reinforcement aspect ratio")

    # Evaluate command
    eval_parser = subparsers.add_parser(
        "evaluate", parents=[model_parser], help="Evaluate one configuration",
    )
    eval_parser.add_argument("--json", action="store_true", help="Print results as JSON")
    eval_parser.add_argument("--csv", help="Also export results to this CSV file")

    # Sweep command
    sweep_parser = subparsers.add_parser(
        "sweep", parents=[model_parser], help="Sweep one editable parameter",
    )
    sweep_parser.add_argument(
        "--parameter",
        choices=["percentage", "aspect_ratio"],
        help="Parameter to sweep (default: from defaults.yaml)",
    )
    sweep_parser.add_argument("--start", type=float, help="First sample (default: parameter range)")
    sweep_parser.add_argument("--end", type=float, help="Last sample (default: parameter range)")
    sweep_parser.add_argument("--number", type=int, help="Number of samples")
    sweep_parser.add_argument("--logarithmic", action="store_true", help="Geometric spacing")
    sweep_parser.add_argument("--workers", type=int, help="Worker processes (-1: one per sample)")
    sweep_parser.add_argument("--output-dir", help="Output directory (default: from defaults.yaml)")
    sweep_parser.add_argument("--csv", help="CSV output path (default: <output-dir>/<preset>_<parameter>_sweep.csv)")
    sweep_parser.add_argument("--no-figure", action="store_true", help="Skip the sweep figure")

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    commands = {
        "info": cmd_info,
        "evaluate": cmd_evaluate,
        "sweep": cmd_sweep,
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        return 1

    try:
        return command(args)
    except ConfigurationError as e:
        logger.error(str(e))
        return 2
    except (KeyError, ValueError, FileNotFoundError) as e:
        logger.error(e.args[0] if e.args else str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
