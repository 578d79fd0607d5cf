import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from axis_separation import BatchOptions, SeparatorOptions, get_separator_options, run_batch

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    defaults = BatchOptions()
    parser = argparse.ArgumentParser(
        description="Separate numbered point instances with greedy axis-parallel lines"
    )
    parser.add_argument(
        "input_dir",
        nargs="?",
        default=str(defaults.input_dir),
        help=f"Directory holding instance files (default: {defaults.input_dir})",
    )
    parser.add_argument(
        "--output-dir",
        default=str(defaults.output_dir),
        help=f"Directory receiving solution files (default: {defaults.output_dir})",
    )
    parser.add_argument(
        "--first",
        type=int,
        default=defaults.first_index,
        help=f"First instance index to process (default: {defaults.first_index})",
    )
    parser.add_argument(
        "--last",
        type=int,
        default=defaults.last_index,
        help=f"Last instance index to process (default: {defaults.last_index})",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=get_separator_options().capacity,
        help="Maximum number of points per instance",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    input_dir = Path(args.input_dir)
    if not input_dir.is_dir():
        logger.error("Input directory %s does not exist", input_dir)
        raise SystemExit(1)

    options = BatchOptions(
        input_dir=input_dir,
        output_dir=Path(args.output_dir),
        first_index=args.first,
        last_index=args.last,
        separator=SeparatorOptions(capacity=args.capacity),
    )

    print("----------- Separation starts -----------")
    report = run_batch(options)
    for outcome in report.outcomes:
        if outcome.status == "missing":
            continue
        if outcome.solved:
            print(f"{options.input_path(outcome.index).name}: {outcome.line_count} line(s) -> {outcome.output_path}")
        else:
            print(f"{options.input_path(outcome.index).name}: {outcome.status} ({outcome.message})")
    print(f"{report.solved_count} files done.")
    print("----------- Separation ends -----------")


if __name__ == "__main__":
    main(sys.argv[1:])
