"""
Command-line interface for makegl.

Usage:
    python -m makegl [options] [DOCUMENT ...]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import LANGUAGES, MakeGlConfig, TargetConfig
from .errors import MakeGlError
from .pipeline import GenerationReport, generate, scan_only

logger = logging.getLogger("makegl")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="makegl",
        description="Generate an OpenGL pass-through wrapper from JOGL javadoc pages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate Gl.java from the GL*.html pages in the current directory
  python -m makegl

  # Read pages from a javadoc directory, write elsewhere
  python -m makegl -i jogl/javadoc/com/jogamp/opengl -o src/Gl.java

  # Python wrapper from two pages only
  python -m makegl --target python -o gl.py GL.html GL2.html

  # Count what would be generated
  python -m makegl --dry-run
""",
    )

    parser.add_argument(
        "documents",
        nargs="*",
        help="Javadoc pages to process, in order (default: configured list)",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Configuration file (makegl.toml)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--input-dir", "-i",
        type=Path,
        help="Directory containing the javadoc pages",
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Output file",
    )
    parser.add_argument(
        "--target", "-t",
        choices=LANGUAGES,
        help="Output language (default: java)",
    )
    parser.add_argument(
        "--keep-duplicates",
        action="store_true",
        help="Emit every declaration, even when an earlier page declared it",
    )
    parser.add_argument(
        "--json-report",
        type=Path,
        help="Write JSON report to file",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Scan pages but don't write the wrapper",
    )
    return parser


def apply_overrides(config: MakeGlConfig, args: argparse.Namespace) -> None:
    """Apply CLI overrides to a loaded configuration."""
    if args.documents:
        config.paths.inputs = list(args.documents)
    if args.input_dir:
        config.paths.input_dir = args.input_dir.resolve()
    if args.output:
        config.paths.output = args.output.resolve()
    if args.target and args.target != config.target.language:
        config.target = TargetConfig(
            language=args.target,
            class_name=config.target.class_name,
            description=config.target.description,
        )
    if args.keep_duplicates:
        config.generation.deduplicate = False


def print_summary(report: GenerationReport) -> None:
    print("\n" + "=" * 60)
    print("Generation Summary")
    print("=" * 60)
    for doc in report.documents:
        print(
            f"  {doc.identifier}: {doc.constants} constants, "
            f"{doc.functions} functions, {len(doc.duplicates)} duplicates"
        )
    if report.epilogue_duplicates:
        print(f"  Epilogue: {len(report.epilogue_duplicates)} duplicates")
    print(f"  Total: {report.constants} constants, {report.functions} functions")
    if report.output is not None:
        print(f"  Output: {report.output}")
    print("=" * 60)


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    # Setup logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = MakeGlConfig.load(args.config)
        apply_overrides(config, args)

        if args.dry_run:
            logger.info("Dry run mode - no files will be written")
            report = scan_only(config.paths.inputs, config)
        else:
            report = generate(config.paths.inputs, config.output_abs, config)

        print_summary(report)

        if args.json_report:
            with open(args.json_report, "w") as f:
                json.dump(report.to_dict(), f, indent=2)
            print(f"\nJSON report written to: {args.json_report}")
    except (MakeGlError, OSError) as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
