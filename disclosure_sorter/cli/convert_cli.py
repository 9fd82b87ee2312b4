"""
Command-line interface for converting disclosure records.

Usage:
    disclosure-sorter <source_dir> <destination_dir> [options]
    python -m disclosure_sorter.cli.convert_cli <source_dir> <destination_dir> [options]
"""

import argparse
import sys
from pathlib import Path

from disclosure_sorter.batch.pipeline import ConversionPipeline, ConversionRun
from disclosure_sorter.batch.writers import DestinationError
from disclosure_sorter.core.classification import REVIEW_BUCKET, Category
from disclosure_sorter.observability.logger import configure_logging, get_logger

logger = get_logger(__name__)

# Errors listed in the console report before truncating.
MAX_REPORTED_ERRORS = 5


def report_run(run: ConversionRun) -> None:
    """
    Log the final report of a run.

    Args:
        run: Finished conversion run
    """
    result = run.result
    summary = run.summary
    written = len(run.write_report.written) if run.write_report else 0

    logger.info("=" * 60)
    logger.info("CONVERSION COMPLETE" + (" (DRY RUN)" if run.dry_run else ""))
    logger.info("=" * 60)
    logger.info(f"Records processed: {run.records_read}")
    logger.info(f"Files written: {written}")
    logger.info(f"Destination directory: {run.destination_dir}")

    logger.info("Classification by procedure type:")
    for category in Category:
        logger.info(f"  {category.value}: {result.counts[category.value]} files")
    logger.info(f"  {REVIEW_BUCKET}: {result.counts[REVIEW_BUCKET]} files")

    logger.info("Buckets created:")
    for bucket, entries in result.category_buckets.items():
        logger.info(f"  {bucket}/ ({len(entries)} files)")
    for bucket, entries in result.review_buckets.items():
        logger.info(f"  {bucket}/ ({len(entries)} files - REQUIRE REVIEW)")

    if result.errors:
        logger.info(f"Errors found: {len(result.errors)}")
        for error in result.errors[:MAX_REPORTED_ERRORS]:
            logger.info(f"  - {error}")
        if len(result.errors) > MAX_REPORTED_ERRORS:
            logger.info(
                f"  ... and {len(result.errors) - MAX_REPORTED_ERRORS} more errors (see summary file)"
            )

    if result.warnings:
        logger.info(f"Warnings: {len(result.warnings)}")

    if run.skipped_files:
        logger.info(f"Source files skipped: {len(run.skipped_files)}")

    logger.info("Classification criteria used:")
    for category, description in summary.criteria.items():
        logger.info(f"  {category}: {description}")
    logger.info("=" * 60)


def convert_command(args) -> None:
    """
    Execute a conversion.

    Args:
        args: Parsed command-line arguments
    """
    source_dir = Path(args.source_dir).resolve()
    destination_dir = Path(args.destination_dir).resolve()

    logger.info(f"Source directory: {source_dir}")
    logger.info(f"Destination directory: {destination_dir}")

    if not source_dir.is_dir():
        logger.error(f"Source directory does not exist: {source_dir}")
        sys.exit(1)

    try:
        pipeline = ConversionPipeline(rules_path=args.rules)
        run = pipeline.run(source_dir, destination_dir, dry_run=args.dry_run)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)
    except DestinationError as e:
        logger.error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.error(f"Fatal error during conversion: {e}", exc_info=True)
        sys.exit(1)

    if run.empty:
        logger.warning("No JSON files found in the source directory")
        return

    report_run(run)

    if run.write_report is not None and not run.write_report.ok:
        logger.error(f"{len(run.write_report.failed)} output files could not be written")
        sys.exit(1)

    logger.info(f"See {run.destination_dir}/_resumen_procesamiento.json for full details")


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="disclosure-sorter",
        description="Convert conflict-of-interest disclosure records and sort them by procedure type",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert every JSON file under ./datos_origen
  disclosure-sorter ./datos_origen ./datos_convertidos

  # Use a custom keyword table
  disclosure-sorter ./datos_origen ./datos_convertidos --rules config/classification_rules.yaml

  # Report what would be produced without writing anything
  disclosure-sorter ./datos_origen ./datos_convertidos --dry-run
        """
    )
    parser.add_argument("source_dir", nargs="?", help="Directory holding the source JSON files")
    parser.add_argument("destination_dir", nargs="?", help="Directory receiving the converted files (recreated)")
    parser.add_argument(
        "--rules",
        default=None,
        help="YAML file overriding the classification keyword table"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Convert and report without writing to the destination"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: LOG_LEVEL environment variable or INFO)"
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "text"],
        help="Log format (default: LOG_FORMAT environment variable or json)"
    )

    args = parser.parse_args(argv)
    configure_logging(level=args.log_level, format_type=args.log_format)

    if not args.source_dir or not args.destination_dir:
        logger.error("Both a source directory and a destination directory are required")
        parser.print_help()
        sys.exit(1)

    convert_command(args)


if __name__ == "__main__":
    main()
