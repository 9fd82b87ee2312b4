"""
Conversion pipeline orchestration.

Coordinates the flow: read → prepare destination → process → report → write
"""

from pathlib import Path

from pydantic import BaseModel, Field

from disclosure_sorter.core.classification import KeywordClassifier
from disclosure_sorter.core.models import BatchResult, ProcessingSummary
from disclosure_sorter.core.rules import ClassificationConfigLoader
from disclosure_sorter.observability import metrics
from disclosure_sorter.observability.logger import get_logger, log_operation
from disclosure_sorter.utils.clock import Clock, utc_now

from .processor import BatchProcessor
from .readers import JsonRecordReader
from .report import SUMMARY_FILE_NAME, ReportBuilder
from .writers import OutputWriter, WriteReport, render_output_files

logger = get_logger(__name__)


class ConversionRun(BaseModel):
    """
    Everything a finished run produced.

    ``result`` and ``summary`` are None when the source held no records,
    in which case the destination is left untouched.
    """

    source_dir: str
    destination_dir: str
    records_read: int = 0
    skipped_files: list[str] = Field(default_factory=list)
    result: BatchResult | None = None
    summary: ProcessingSummary | None = None
    write_report: WriteReport | None = None
    dry_run: bool = False

    @property
    def empty(self) -> bool:
        return self.records_read == 0


class ConversionPipeline:
    """
    Orchestrates a full conversion run.

    Flow:
    1. Read every JSON record under the source directory
    2. Stop early if there is nothing to convert
    3. Prepare (wipe and recreate) the destination directory
    4. Validate, map and classify the records
    5. Build the processing summary
    6. Write bucket files and the summary
    """

    def __init__(self, rules_path: str | Path | None = None, clock: Clock = utc_now):
        """
        Initialize conversion pipeline.

        Args:
            rules_path: Optional YAML file overriding the classifier's
                        keyword table
            clock: Source of every generated timestamp

        Raises:
            FileNotFoundError: If rules_path does not exist
            ValueError: If rules_path is not a valid rules file
        """
        if rules_path is not None:
            rules = ClassificationConfigLoader(rules_path).load_rules()
            logger.info(f"Loaded {len(rules)} classification rules from {rules_path}")
            self.classifier = KeywordClassifier(rules)
        else:
            self.classifier = KeywordClassifier()

        self.clock = clock
        self.processor = BatchProcessor(classifier=self.classifier, clock=clock)
        self.report_builder = ReportBuilder(classifier=self.classifier, clock=clock)

    def run(self, source_dir: str | Path, destination_dir: str | Path, dry_run: bool = False) -> ConversionRun:
        """
        Convert every record under source_dir into destination_dir.

        Args:
            source_dir: Directory holding raw JSON files
            destination_dir: Directory receiving bucket folders and summary
            dry_run: Process and report without touching the destination

        Returns:
            ConversionRun describing the outcome

        Raises:
            DestinationError: If the destination cannot be prepared
        """
        source_dir = Path(source_dir)
        destination_dir = Path(destination_dir)
        run = ConversionRun(
            source_dir=str(source_dir),
            destination_dir=str(destination_dir),
            dry_run=dry_run,
        )

        reader = JsonRecordReader(source_dir)
        records = reader.read()
        run.records_read = len(records)
        run.skipped_files = list(reader.skipped_files)

        if not records:
            logger.warning(f"No JSON records found in source directory: {source_dir}")
            return run

        writer = OutputWriter(destination_dir)
        if not dry_run:
            writer.prepare()

        with log_operation("Converting records", logger=logger, records=len(records)) as operation:
            result = self.processor.process(records)
        metrics.record_batch_duration(operation.duration_seconds)

        summary = self.report_builder.build(result, str(source_dir), str(destination_dir))
        files = render_output_files(result, summary, SUMMARY_FILE_NAME)

        run.result = result
        run.summary = summary

        if dry_run:
            logger.info(f"DRY RUN: {len(files)} files would be written to {destination_dir}")
            return run

        run.write_report = writer.write_all(files)
        logger.info(
            f"Wrote {len(run.write_report.written)} files to {destination_dir}",
            extra={"failed": len(run.write_report.failed)}
        )
        return run
