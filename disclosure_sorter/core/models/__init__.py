"""
Core data models for the disclosure conversion pipeline.

All models use Pydantic for runtime validation and type safety. Field
aliases carry the key names of the output documents.
"""

from .batch_result import BatchResult
from .classification import ClassificationTag, ReviewAnnotation
from .outcome import BucketEntry, ProcessingOutcome
from .summary import DetailedStatistics, ProcessingSummary
from .transformed_record import TransformedRecord
from .validation_result import ValidationResult

__all__ = [
    "BatchResult",
    "BucketEntry",
    "ClassificationTag",
    "DetailedStatistics",
    "ProcessingOutcome",
    "ProcessingSummary",
    "ReviewAnnotation",
    "TransformedRecord",
    "ValidationResult",
]
