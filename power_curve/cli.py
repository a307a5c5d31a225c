from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import DEFAULT_POWER_COLUMN, METHODS, get_config
from .curve.engine import calculate_power_curve
from .io.sample_loader import load_power_samples
from .models.types import PowerCurve
from .storage.export import export_power_curve, format_duration

logger = logging.getLogger(__name__)


def _parse_duration_list(raw: Optional[str]) -> List[int]:
    if not raw:
        return []
    durations: List[int] = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            durations.append(int(token))
        except ValueError:
            raise ValueError(f"Invalid duration '{token}' (expected whole seconds)")
    return durations


def _format_table(curve: PowerCurve, only: List[int]) -> str:
    lines = [f"{'duration':>10}  {'seconds':>7}  {'watts':>8}"]
    wanted = set(only)
    for entry in curve:
        if wanted and entry.duration_s not in wanted:
            continue
        lines.append(f"{format_duration(entry.duration_s):>10}  {entry.duration_s:>7d}  {entry.best_average_power_w:>8.1f}")
    return "\n".join(lines)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Power Curve CLI: best average power per duration from 1 Hz power samples")
    parser.add_argument("input", help="Per-second sample table (.csv, .json, .parquet) or .txt with one value per line")
    parser.add_argument("--column", default=DEFAULT_POWER_COLUMN, help=f"Power column name (default: {DEFAULT_POWER_COLUMN})")
    parser.add_argument("--output", help="Export path; format from extension (.csv, .json, .parquet, .xlsx)")
    parser.add_argument("--plot", help="Save a PNG plot of the curve to this path")
    parser.add_argument("--workers", type=int, help="Worker threads (default: one per logical core)")
    parser.add_argument("--method", choices=METHODS, help="Window summation strategy (default: prefix)")
    parser.add_argument("--durations", help="Comma-separated durations in seconds to print (default: all)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    try:
        cfg = get_config()
        overrides = {}
        if args.workers is not None:
            overrides["max_workers"] = args.workers
        if args.method is not None:
            overrides["method"] = args.method
        if overrides:
            cfg.update_engine_settings(**overrides)
        cfg.validate_configuration()

        only = _parse_duration_list(args.durations)
        samples = load_power_samples(args.input, column=args.column)
        curve = calculate_power_curve(samples)
        logger.info(f"Processed {Path(args.input).name}: {len(samples)} samples, {len(curve)} durations")

        if args.output:
            export_power_curve(curve, args.output)
        else:
            print(_format_table(curve, only))

        if args.plot:
            from .storage.plot import plot_power_curve
            plot_power_curve(curve, args.plot, title=f"Power Curve - {Path(args.input).stem}")
    except (ValueError, OSError) as e:
        logger.error(f"{e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
