"""
Batch conversion of disclosure records.
"""

from .pipeline import ConversionPipeline, ConversionRun
from .processor import BatchProcessor
from .readers import JsonRecordReader
from .report import SUMMARY_FILE_NAME, ReportBuilder
from .writers import DestinationError, OutputWriter, WriteReport

__all__ = [
    "BatchProcessor",
    "ConversionPipeline",
    "ConversionRun",
    "DestinationError",
    "JsonRecordReader",
    "OutputWriter",
    "ReportBuilder",
    "SUMMARY_FILE_NAME",
    "WriteReport",
]
