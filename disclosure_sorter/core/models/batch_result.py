"""
BatchResult model: everything one pass of the batch processor produces.
"""

from pydantic import BaseModel, Field

from .outcome import BucketEntry, ProcessingOutcome


class BatchResult(BaseModel):
    """
    Accumulated result of processing a sequence of raw records.

    Built incrementally by the batch processor during a single pass and
    consumed read-only afterwards by the report builder and the writer.

    Attributes:
        total_records: Number of input records
        outcomes: One outcome per input record, in input order
        category_buckets: Category bucket name -> entries, in input order
        review_buckets: Review bucket name -> entries, in input order
        counts: Per-category counters, including the review counter
        errors: Rejection messages
        warnings: Non-fatal observations
    """

    total_records: int = Field(0, ge=0)
    outcomes: list[ProcessingOutcome] = Field(default_factory=list)
    category_buckets: dict[str, list[BucketEntry]] = Field(default_factory=dict)
    review_buckets: dict[str, list[BucketEntry]] = Field(default_factory=dict)
    counts: dict[str, int] = Field(default_factory=dict)
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    def _count_status(self, status: str) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == status)

    @property
    def accepted_count(self) -> int:
        return self._count_status("accepted")

    @property
    def flagged_count(self) -> int:
        return self._count_status("flagged")

    @property
    def rejected_count(self) -> int:
        return self._count_status("rejected")

    @property
    def bucket_names(self) -> list[str]:
        """Sorted distinct names of every bucket that received a record."""
        return sorted(set(self.category_buckets) | set(self.review_buckets))

    def iter_entries(self):
        """Yield (bucket, entry) pairs, category buckets first, then review buckets."""
        for buckets in (self.category_buckets, self.review_buckets):
            for bucket, entries in buckets.items():
                for entry in entries:
                    yield bucket, entry
