"""
Per-record processing outcome and bucket entries.
"""

from typing import Literal

from pydantic import BaseModel, Field

from .transformed_record import TransformedRecord


class ProcessingOutcome(BaseModel):
    """
    What happened to one input record.

    Attributes:
        index: Position of the record in the input sequence
        status: "accepted" (category bucket), "flagged" (review bucket) or
                "rejected" (excluded from every output)
        bucket: Output bucket for accepted/flagged records
        file_name: Output file name for accepted/flagged records
        error: Error description for rejected records
    """

    index: int = Field(..., ge=0)
    status: Literal["accepted", "flagged", "rejected"]
    bucket: str | None = None
    file_name: str | None = None
    error: str | None = None

    @classmethod
    def accepted(cls, index: int, bucket: str, file_name: str) -> "ProcessingOutcome":
        return cls(index=index, status="accepted", bucket=bucket, file_name=file_name)

    @classmethod
    def flagged(cls, index: int, bucket: str, file_name: str) -> "ProcessingOutcome":
        return cls(index=index, status="flagged", bucket=bucket, file_name=file_name)

    @classmethod
    def rejected(cls, index: int, error: str) -> "ProcessingOutcome":
        return cls(index=index, status="rejected", error=error)

    @property
    def output_path(self) -> str | None:
        """Relative output path, None for rejected records."""
        if self.bucket is None or self.file_name is None:
            return None
        return f"{self.bucket}/{self.file_name}"

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "index": 0,
                "status": "accepted",
                "bucket": "contracting_public",
                "file_name": "1_ANA_LOPEZ.json"
            }
        }


class BucketEntry(BaseModel):
    """A transformed record together with its output file name."""

    file_name: str = Field(..., min_length=1)
    record: TransformedRecord

    class Config:
        frozen = True
