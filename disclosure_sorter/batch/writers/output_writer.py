"""
Output rendering and the destination-directory writer.
"""

import json
import shutil
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from disclosure_sorter.core.models import BatchResult, ProcessingSummary
from disclosure_sorter.observability import metrics
from disclosure_sorter.observability.logger import get_logger

logger = get_logger(__name__)


class DestinationError(RuntimeError):
    """Raised when the destination directory cannot be prepared."""


class WriteReport(BaseModel):
    """
    Outcome of writing a set of output files.

    Attributes:
        written: Relative paths written successfully
        failed: Relative path -> error message for files that failed
    """

    written: list[str] = Field(default_factory=list)
    failed: dict[str, str] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


def serialize(document: Any) -> str:
    """JSON text as written to disk: 2-space indent, non-ASCII kept."""
    return json.dumps(document, indent=2, ensure_ascii=False)


def render_output_files(result: BatchResult, summary: ProcessingSummary, summary_name: str) -> dict[str, str]:
    """
    Map each relative output path to its serialized content.

    Category buckets come first, then review buckets, then the summary
    under ``summary_name``. A later record with the same path replaces an
    earlier one.

    Raises:
        ValueError: If a bucket is named like the summary file
    """
    if summary_name in result.bucket_names:
        raise ValueError(f"Bucket name collides with the summary file: {summary_name}")

    files: dict[str, str] = {}
    for bucket, entry in result.iter_entries():
        files[f"{bucket}/{entry.file_name}"] = serialize(entry.record.to_document())

    files[summary_name] = serialize(summary.to_document())
    return files


class OutputWriter:
    """
    Writes rendered output files below a destination directory.
    """

    def __init__(self, destination_dir: str | Path):
        """
        Initialize writer.

        Args:
            destination_dir: Root directory for every output file
        """
        self.destination_dir = Path(destination_dir)

    def prepare(self) -> None:
        """
        Remove any existing destination directory and create it empty.

        Raises:
            DestinationError: If the directory cannot be removed or created
        """
        try:
            if self.destination_dir.exists():
                logger.info(f"Cleaning existing destination directory: {self.destination_dir}")
                if self.destination_dir.is_dir():
                    shutil.rmtree(self.destination_dir)
                else:
                    self.destination_dir.unlink()
            logger.info(f"Creating destination directory: {self.destination_dir}")
            self.destination_dir.mkdir(parents=True)
        except OSError as e:
            raise DestinationError(
                f"Cannot prepare destination directory {self.destination_dir}: {e}"
            ) from e

    def write_all(self, files: dict[str, str]) -> WriteReport:
        """
        Write every file, creating parent directories as needed.

        A file that fails is logged and recorded; the remaining files are
        still written.

        Args:
            files: Relative path -> UTF-8 content

        Returns:
            WriteReport listing written and failed paths
        """
        report = WriteReport()
        root = self.destination_dir.resolve()

        for relative_path, content in files.items():
            target = self.destination_dir / relative_path
            if not target.resolve().is_relative_to(root):
                logger.error(f"Refusing to write outside destination: {relative_path}", extra={"file": relative_path})
                report.failed[relative_path] = "path leaves the destination directory"
                continue
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(content, encoding="utf-8")
            except OSError as e:
                logger.error(f"Error writing {relative_path}: {e}", extra={"file": relative_path})
                report.failed[relative_path] = str(e)
                continue

            logger.debug(f"File created: {relative_path}")
            report.written.append(relative_path)

        metrics.record_output_files(len(report.written), len(report.failed))
        return report
