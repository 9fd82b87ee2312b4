"""
Batch processor: one pass over raw disclosure records.

Each record is validated, mapped through the schema selector and either
classified into a category bucket or diverted to the review bucket when it
declares more than one procedure type. A failure on one record rejects that
record only; the pass always reaches the end of the input.
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any

from disclosure_sorter.core.classification import REVIEW_BUCKET, Category, KeywordClassifier
from disclosure_sorter.core.models import (
    BatchResult,
    BucketEntry,
    ClassificationTag,
    ProcessingOutcome,
    ReviewAnnotation,
)
from disclosure_sorter.core.rules import RuleEngine
from disclosure_sorter.core.schema import SchemaSelector, SchemaVariant
from disclosure_sorter.observability import metrics
from disclosure_sorter.observability.logger import get_logger
from disclosure_sorter.utils.clock import Clock, format_timestamp, utc_now
from disclosure_sorter.utils.fields import pick, pick_list

logger = get_logger(__name__)

_WHITESPACE = re.compile(r"\s+")
_PATH_SEPARATOR = re.compile(r"[/\\]")


def initial_counts() -> dict[str, int]:
    """Zeroed counters for every category plus the review bucket."""
    counts = {category.value: 0 for category in Category}
    counts[REVIEW_BUCKET] = 0
    return counts


def output_file_name(raw: Mapping[str, Any], index: int) -> str:
    """
    Deterministic output file name for a record.

    ``{id or batch index}_{given name, whitespace runs as "_"}_{first surname}.json``

    Raises:
        ValueError: If the name would contain a path separator
    """
    identifier = pick(raw, "id", default=index)
    given_name = _WHITESPACE.sub("_", str(raw["nombres"]))
    file_name = f"{identifier}_{given_name}_{raw['primerApellido']}.json"
    if _PATH_SEPARATOR.search(file_name):
        raise ValueError(f"output file name '{file_name}' contains a path separator")
    return file_name


class _Placement:
    """A fully built record waiting to be committed to the result."""

    def __init__(self, outcome: ProcessingOutcome, entry: BucketEntry, review: bool, warnings: list[str]):
        self.outcome = outcome
        self.entry = entry
        self.review = review
        self.warnings = warnings


class BatchProcessor:
    """
    Converts and sorts a sequence of raw records.

    Flow per record:
    1. Validate identity fields (reject on failure)
    2. Map through the schema selector using the first procedure type
    3. Several procedure types -> review bucket with a review annotation
    4. Otherwise classify the label -> category bucket with a tag
    """

    def __init__(
        self,
        selector: SchemaSelector | None = None,
        classifier: KeywordClassifier | None = None,
        rule_engine: RuleEngine | None = None,
        clock: Clock = utc_now,
    ):
        """
        Initialize batch processor.

        Args:
            selector: Schema selector (default label table)
            classifier: Keyword classifier (default keyword table)
            rule_engine: Identity validation rules
            clock: Source of every generated timestamp
        """
        self.selector = selector or SchemaSelector()
        self.classifier = classifier or KeywordClassifier()
        self.rule_engine = rule_engine or RuleEngine()
        self.clock = clock

    def process(self, records: Sequence[Any]) -> BatchResult:
        """
        Process every record once, in order.

        Args:
            records: Raw records as produced by the reader

        Returns:
            BatchResult with buckets, counters, errors and warnings
        """
        result = BatchResult(total_records=len(records), counts=initial_counts())
        seen_paths: set[str] = set()

        for index, raw in enumerate(records):
            try:
                placement = self._build(index, raw)
            except Exception as e:
                outcome = ProcessingOutcome.rejected(index, f"Record {index}: {e}")
                logger.warning(
                    f"Rejected record {index}: {e}",
                    extra={"record_index": index, "error_type": type(e).__name__}
                )
                result.errors.append(outcome.error)
                result.outcomes.append(outcome)
                metrics.record_outcome("rejected")
                continue

            if isinstance(placement, ProcessingOutcome):
                logger.warning(placement.error, extra={"record_index": index})
                result.errors.append(placement.error)
                result.outcomes.append(placement)
                metrics.record_outcome("rejected")
                continue

            self._commit(result, placement, seen_paths)

        logger.info(
            f"Processed {result.total_records} records: {result.accepted_count} accepted, "
            f"{result.flagged_count} flagged for review, {result.rejected_count} rejected",
            extra={
                "total_records": result.total_records,
                "accepted": result.accepted_count,
                "flagged": result.flagged_count,
                "rejected": result.rejected_count,
            }
        )
        return result

    def _build(self, index: int, raw: Any) -> "_Placement | ProcessingOutcome":
        """Build everything for one record without touching the result."""
        if not isinstance(raw, Mapping):
            raise TypeError(f"record must be a JSON object, got {type(raw).__name__}")

        validation = self.rule_engine.validate_record(index, raw)
        if not validation.passed:
            return ProcessingOutcome.rejected(
                index,
                f"Record {index}: missing required fields: {', '.join(validation.failed_fields)}",
            )

        procedure_types = pick_list(raw, "tipoProcedimiento")
        labels = [str(pick(entry, "valor")) for entry in procedure_types]
        label = labels[0] if labels else ""

        record = self.selector.map_record(raw, label)
        file_name = output_file_name(raw, index)
        timestamp = format_timestamp(self.clock())
        warnings: list[str] = []

        if len(procedure_types) > 1:
            review = ReviewAnnotation.for_labels(labels, processed_at=timestamp)
            entry = BucketEntry(file_name=file_name, record=record.model_copy(update={"review": review}))
            outcome = ProcessingOutcome.flagged(index, REVIEW_BUCKET, file_name)
            return _Placement(outcome, entry, review=True, warnings=warnings)

        category = self.classifier.classify(label)
        tag = ClassificationTag(
            category=category.value,
            original_label=label,
            classified_at=timestamp,
        )
        entry = BucketEntry(file_name=file_name, record=record.model_copy(update={"classification": tag}))
        outcome = ProcessingOutcome.accepted(index, category.value, file_name)

        if not label:
            warnings.append(f"Record {index} ({file_name}): no procedure type declared, classified as unclassified")
        elif self.selector.select_variant(label) is SchemaVariant.GENERIC:
            warnings.append(
                f"Record {index} ({file_name}): procedure type '{label}' has no dedicated schema, "
                "generic structure used"
            )
        return _Placement(outcome, entry, review=False, warnings=warnings)

    def _commit(self, result: BatchResult, placement: _Placement, seen_paths: set[str]) -> None:
        outcome = placement.outcome
        buckets = result.review_buckets if placement.review else result.category_buckets
        buckets.setdefault(outcome.bucket, []).append(placement.entry)
        result.counts[outcome.bucket] += 1
        result.outcomes.append(outcome)
        result.warnings.extend(placement.warnings)

        if outcome.output_path in seen_paths:
            result.warnings.append(
                f"Record {outcome.index}: output path '{outcome.output_path}' was already produced "
                "by an earlier record and will be overwritten"
            )
        seen_paths.add(outcome.output_path)

        metrics.record_outcome(outcome.status, outcome.bucket)
