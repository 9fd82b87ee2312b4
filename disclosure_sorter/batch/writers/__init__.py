"""
Output writers.
"""

from .output_writer import (
    DestinationError,
    OutputWriter,
    WriteReport,
    render_output_files,
    serialize,
)

__all__ = [
    "DestinationError",
    "OutputWriter",
    "WriteReport",
    "render_output_files",
    "serialize",
]
