"""Command line entry point: tswarp INPUT_FILE."""

import argparse
import json
import logging
import sys
from pathlib import Path

from jsonschema import ValidationError

from tswarp import __version__
from tswarp.io.csv_loader import TimeSeriesLoadError
from tswarp.runner import RunConfig, build_report, run_dtw_sum

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tswarp",
        description="Working with time series: sum of DTW distances over all pairs",
    )
    parser.add_argument("input_file", type=Path, help="Input file, must be a csv")
    parser.add_argument(
        "--no-header",
        action="store_true",
        help="Treat the first row as data instead of a header",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON run report instead of plain text",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # stdout занят результатом, логи идут в stderr
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    config = RunConfig(input_path=args.input_file, has_header=not args.no_header)

    try:
        result = run_dtw_sum(config)
    except TimeSeriesLoadError as e:
        logger.error(f"Failed to load {config.input_path}: {e}")
        return 1

    if args.json:
        try:
            report = build_report(result)
        except (ValueError, ValidationError) as e:
            logger.error(f"Run report rejected: {e}")
            return 1
        print(json.dumps(report, indent=2))
    else:
        print(f"{result.elapsed_ms} ms")
        print(f"Total error: {result.total}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
