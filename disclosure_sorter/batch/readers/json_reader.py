"""
JSON record reader for disclosure files.

Walks a source directory recursively and collects raw records from every
``.json`` file. A file holding an array contributes each element; any
other JSON value contributes one record.
"""

import json
from pathlib import Path
from typing import Any

from disclosure_sorter.observability import metrics
from disclosure_sorter.observability.logger import get_logger

logger = get_logger(__name__)


class JsonRecordReader:
    """
    Reads raw disclosure records from a directory tree.

    Entries are visited depth first in name order so the resulting
    sequence is stable across runs. Unreadable files and directories are
    logged, listed in ``skipped_files`` and left out.
    """

    def __init__(self, source_dir: str | Path):
        """
        Initialize reader.

        Args:
            source_dir: Root directory to search for JSON files
        """
        self.source_dir = Path(source_dir)
        self.skipped_files: list[str] = []
        self.files_read: list[str] = []

    def read(self) -> list[Any]:
        """
        Read every JSON file under the source directory.

        Returns:
            Raw records in discovery order
        """
        self.skipped_files = []
        self.files_read = []
        records: list[Any] = []
        self._explore(self.source_dir, records)
        logger.info(
            f"Read {len(records)} records from {len(self.files_read)} files",
            extra={"source_dir": str(self.source_dir), "skipped_files": len(self.skipped_files)}
        )
        return records

    def _explore(self, directory: Path, records: list[Any]) -> None:
        try:
            entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
        except OSError as e:
            logger.error(f"Error exploring directory {directory}: {e}")
            self.skipped_files.append(str(directory))
            return

        for entry in entries:
            if entry.is_dir():
                self._explore(entry, records)
            elif entry.is_file() and entry.name.lower().endswith(".json"):
                self._read_file(entry, records)

    def _read_file(self, path: Path, records: list[Any]) -> None:
        relative = path.relative_to(self.source_dir)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error(f"Error reading {path}: {e}", extra={"file": str(relative)})
            self.skipped_files.append(str(relative))
            metrics.record_skipped_source_file()
            return

        if isinstance(data, list):
            records.extend(data)
        else:
            records.append(data)

        self.files_read.append(str(relative))
        logger.debug(f"File read: {relative}")
