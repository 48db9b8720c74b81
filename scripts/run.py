#!/usr/bin/env python3
"""
Multimodal Route Model v1 - Main Entry Point

Find the optimal route between the configured origin and destination under
one or more optimization policies, and write a comparison workbook.

Usage:
    python scripts/run.py [--input INPUT_FILE | --dataset NAME] [--policy P ...]
                          [--solver S] [--time-weight W] [--cost-weight W]
                          [--output OUTPUT_FILE]

Output naming:
    - If --output is specified, uses that path
    - Otherwise, derives name from origin and destination
      e.g., "Tambaram" -> "Anna Nagar" -> "outputs/tambaram_to_anna_nagar.xlsx"
"""
import argparse
import logging
import sys
import time
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from multimodal_route_model.bellman_ford import NegativeCycleError
from multimodal_route_model.config import DEFAULT_INPUT_FILE, Policy, SolverType
from multimodal_route_model.datasets import DATASETS, load_dataset
from multimodal_route_model.engine import RouteEngine
from multimodal_route_model.io_loader import InputLoader
from multimodal_route_model.reporting import build_all_reports
from multimodal_route_model.utils import format_path_nodes, setup_logging
from multimodal_route_model.validators import ValidationError, validate_inputs
from multimodal_route_model.write_outputs import write_outputs


def derive_output_filename(origin: str, destination: str, output_dir: str = "outputs") -> str:
    """
    Derive output filename from the query endpoints.

    Args:
        origin: Origin location name
        destination: Destination location name
        output_dir: Directory for output files

    Returns:
        Output file path like "outputs/tambaram_to_anna_nagar.xlsx"
    """
    stem = f"{origin}_to_{destination}".lower()

    # Clean up filename (remove invalid characters)
    invalid_chars = '<>:"/\\|?*. '
    for char in invalid_chars:
        stem = stem.replace(char, '_')
    while "__" in stem:
        stem = stem.replace("__", "_")

    return str(Path(output_dir) / f"{stem}.xlsx")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Multimodal Route Model v1 - Multi-criteria optimal route search"
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--input", "-i",
        default=None,
        help=f"Input Excel file (e.g. {DEFAULT_INPUT_FILE})"
    )
    source.add_argument(
        "--dataset", "-d",
        choices=sorted(DATASETS),
        default=None,
        help="Use a built-in network instead of an input file (default: chennai)"
    )
    parser.add_argument(
        "--policy", "-p",
        action="append",
        default=None,
        help=f"Policy to solve, repeatable (default: all of {[p.value for p in Policy]})"
    )
    parser.add_argument(
        "--solver", "-s",
        choices=[s.value for s in SolverType],
        default=None,
        help="Override the solver from run settings"
    )
    parser.add_argument("--time-weight", type=float, default=None, help="Combined policy time weight")
    parser.add_argument("--cost-weight", type=float, default=None, help="Combined policy cost weight")
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output Excel file (default: derived from origin and destination)"
    )
    parser.add_argument(
        "--output-dir",
        default="outputs",
        help="Output directory when deriving filename (default: outputs)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    # Setup logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logger = setup_logging(log_level)

    start_time = time.time()
    logger.info("=" * 60)
    logger.info("Multimodal Route Model v1 - Starting")
    logger.info("=" * 60)

    try:
        # Step 1: Load inputs
        logger.info("Step 1: Loading inputs...")
        if args.input:
            data = InputLoader(args.input).load_all()
        else:
            data = load_dataset(args.dataset or "chennai")

        settings = data["run_settings"]
        if args.time_weight is not None:
            settings.time_weight = args.time_weight
        if args.cost_weight is not None:
            settings.cost_weight = args.cost_weight
        if args.solver:
            settings.solver_type = SolverType(args.solver)

        output_path = args.output or derive_output_filename(
            settings.origin, settings.destination, args.output_dir
        )
        logger.info(f"Output will be written to: {output_path}")

        # Step 2: Validate inputs
        logger.info("Step 2: Validating inputs...")
        validate_inputs(data)

        # Step 3: Solve each policy
        logger.info("Step 3: Solving routes...")
        engine = RouteEngine.from_settings(data["graph"], settings)
        results = engine.compare_policies(args.policy)

        # Step 4: Build reports
        logger.info("Step 4: Building reports...")
        reports = build_all_reports(data["graph"], results)

        # Step 5: Write outputs
        logger.info("Step 5: Writing outputs...")
        write_outputs(reports, output_path)

        elapsed = time.time() - start_time
        logger.info("=" * 60)
        logger.info(f"Multimodal Route Model v1 - Complete ({elapsed:.1f}s)")
        logger.info(f"Output written to: {output_path}")
        logger.info("=" * 60)

        # Print summary
        for policy, result in results.items():
            if result is None:
                logger.info(f"  {policy.value}: no route")
                continue
            logger.info(f"  {result.optimization_type}:")
            logger.info(f"    Path: {format_path_nodes(result.path)}")
            logger.info(f"    Modes: {', '.join(result.modes)}")
            logger.info(
                f"    Time {result.total_time:g} | Cost {result.total_cost:g} | "
                f"Distance {result.total_distance:g}"
            )

        return 0

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except ValidationError as e:
        logger.error(f"Validation error: {e}")
        return 1
    except NegativeCycleError as e:
        logger.error(f"Network error: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
