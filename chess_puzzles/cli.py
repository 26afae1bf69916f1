"""
CLI for building and validating the trainer puzzle data.

Usage:
    python -m chess_puzzles build \\
        --puzzles puzzles \\
        --output data \\
        --clean

    python -m chess_puzzles validate \\
        data \\
        --output-report data/validation.md
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from chess_puzzles.data.errors import NoCollectionsError
from chess_puzzles.data.pipeline import BuildConfig, PuzzleBuilder
from chess_puzzles.data.validator import PuzzleDataValidator


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_data(args):
    """Run the puzzle build."""
    config = BuildConfig(
        puzzles_dir=Path(args.puzzles),
        output_dir=Path(args.output),
        indent=args.indent,
        clean=args.clean,
        validate_output=args.validate,
    )

    builder = PuzzleBuilder(config)
    summary = builder.run()

    print(
        f"\nBuilt {summary.total_puzzles} puzzles in {summary.problem_files} file(s) "
        f"from {summary.collections} collection(s): {config.output_dir}"
    )


def validate_data(args):
    """Validate an existing data tree."""
    validator = PuzzleDataValidator(Path(args.data))

    output_path = None
    if args.output_report:
        output_path = Path(args.output_report)

    report = validator.generate_report(output_path=output_path)
    print(report)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chess-puzzles",
        description="Build or validate chess puzzle data for the trainer",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    build_parser = subparsers.add_parser("build", help="Build JSON data from PGN collections")

    build_parser.add_argument(
        "--puzzles",
        default="puzzles",
        help="Directory with one folder per collection",
    )
    build_parser.add_argument(
        "--output",
        default="data",
        help="Output directory for generated JSON",
    )
    build_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation",
    )
    build_parser.add_argument(
        "--clean",
        action="store_true",
        help="Remove the output directory before writing",
    )
    build_parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate the generated data after the build",
    )
    build_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    val_parser = subparsers.add_parser("validate", help="Validate generated data")

    val_parser.add_argument(
        "data",
        help="Generated data directory (containing index.json)",
    )
    val_parser.add_argument(
        "--output-report",
        help="Path to write validation report (default: print to stdout)",
    )
    val_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    setup_logging(verbose=args.verbose)

    try:
        if args.command == "build":
            build_data(args)
        elif args.command == "validate":
            validate_data(args)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        sys.exit(1)
    except NoCollectionsError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"\n\nError: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
