"""Command line harness that generates and summarises a cube surface walk."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Sequence

from .bounds import CubeBounds
from .src.generation import (
    CubeSettings,
    MetricsSummary,
    WalkSeeds,
    WalkerSettings,
    compute_walk_metrics,
    export_path_csv,
    export_walk_metrics,
    generate_configured_walk,
    load_walk_seeds,
    load_walker_settings,
    sample_walk,
    summarize_walk_metrics,
    with_change_probability,
)
from .walk import FreeAxisPolicy, SurfaceClassificationError

LOGGER = logging.getLogger(__name__)


def _probability(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"'{value}' is not a valid probability") from exc
    if not 0.0 <= parsed <= 1.0:
        raise argparse.ArgumentTypeError("Change probability must lie in [0, 1]")
    return parsed


def _non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"'{value}' is not a valid step count") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("Step count must be non-negative")
    return parsed


def create_parser() -> argparse.ArgumentParser:
    # //1.- Construct the parser shared across tests and console execution.
    parser = argparse.ArgumentParser(description="Generate a random walk on the surface of a cube")
    parser.add_argument("--config-dir", help="Directory holding cube.json, walk.json and sampling.json")
    parser.add_argument("--seed", type=int, help="Walk seed (default: CUBEWALK_WALK_SEED or 0)")
    parser.add_argument("--steps", type=_non_negative_int, help="Number of steps to take")
    parser.add_argument("--change-probability", type=_probability, help="Per-step direction change probability")
    parser.add_argument("--min", dest="minimum", type=float, help="Cube minimum on every axis")
    parser.add_argument("--max", dest="maximum", type=float, help="Cube maximum on every axis")
    parser.add_argument(
        "--free-axis-policy",
        choices=[policy.value for policy in FreeAxisPolicy],
        help="Whether in-plane moves past the cube edge stall (clamped) or drift (unbounded)",
    )
    parser.add_argument(
        "--legacy-z-coupling",
        action="store_true",
        help="Reproduce the historical sampler that copies the y sample into z",
    )
    parser.add_argument("--csv", help="Write the path to this CSV file")
    parser.add_argument("--metrics", help="Write walk metrics to this JSON file")
    parser.add_argument("--print-path", action="store_true", help="Print every point of the path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _apply_overrides(settings: WalkerSettings, args: argparse.Namespace) -> WalkerSettings:
    # //2.- Layer command line overrides on top of the JSON configuration.
    if args.minimum is not None or args.maximum is not None:
        bounds = CubeBounds(
            minimum=settings.cube.minimum if args.minimum is None else args.minimum,
            maximum=settings.cube.maximum if args.maximum is None else args.maximum,
        )
        settings = replace(settings, cube=CubeSettings(minimum=bounds.minimum, maximum=bounds.maximum))
    if args.steps is not None:
        settings = replace(settings, walk=replace(settings.walk, steps=args.steps))
    if args.change_probability is not None:
        settings = with_change_probability(settings, args.change_probability)
    if args.free_axis_policy is not None:
        policy = FreeAxisPolicy.from_name(args.free_axis_policy)
        settings = replace(settings, sampling=replace(settings.sampling, free_axis_policy=policy))
    if args.legacy_z_coupling:
        settings = replace(settings, sampling=replace(settings.sampling, legacy_z_coupling=True))
    return settings


def run(argv: Sequence[str] | None = None) -> int:
    # //3.- Parse arguments, generate the walk and emit the requested artefacts.
    parser = create_parser()
    args = parser.parse_args(argv)
    logging.getLogger().setLevel(logging.DEBUG if args.verbose else logging.INFO)

    try:
        settings = _apply_overrides(load_walker_settings(args.config_dir), args)
    except ValueError as exc:
        parser.error(str(exc))
    seeds = WalkSeeds(walk_seed=args.seed) if args.seed is not None else load_walk_seeds()

    try:
        result = generate_configured_walk(settings, seeds=seeds)
    except SurfaceClassificationError as exc:
        LOGGER.error("%s", exc)
        return 1

    metrics = compute_walk_metrics(result, seeds=seeds)
    LOGGER.info(
        "Walked %d steps on cube [%d, %d] from %s: %d transitions, %d stalls, faces %s",
        metrics.steps,
        result.bounds.minimum,
        result.bounds.maximum,
        result.path[0].as_tuple(),
        metrics.transition_count,
        metrics.stall_count,
        ",".join(metrics.faces_visited),
    )
    if args.print_path:
        for point in result.path:
            print("%d %d %d" % point.as_tuple())
    if args.csv:
        export_path_csv(sample_walk(result), args.csv)
        LOGGER.info("Path written to %s", args.csv)
    if args.metrics:
        summary: MetricsSummary = summarize_walk_metrics([metrics])
        export_walk_metrics(summary, filepath=args.metrics)
        LOGGER.info("Metrics written to %s", args.metrics)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Console script entry point invoked via ``cubewalk-demo``."""

    # //1.- Enable a default logging configuration suitable for terminal output.
    logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s %(message)s")
    return run(argv)


if __name__ == "__main__":  # pragma: no cover - exercised via ``python -m`` execution
    sys.exit(main())
