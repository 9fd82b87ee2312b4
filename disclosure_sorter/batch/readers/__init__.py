"""
Batch data source readers.
"""

from .json_reader import JsonRecordReader

__all__ = [
    "JsonRecordReader",
]
