"""
Prometheus metrics collection for disclosure-sorter

Counts record outcomes, bucket placement and written files for each
conversion run. Metrics live in a private registry; nothing is served
over HTTP, callers render the registry with generate_metrics().
"""
from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# PIPELINE METRICS
# =======================

# Records processed counter
records_processed_total = Counter(
    name="converter_records_processed_total",
    documentation="Total number of disclosure records processed",
    labelnames=["outcome"],  # outcome: accepted, flagged, rejected
    registry=REGISTRY,
)

# Records per output bucket
records_bucketed_total = Counter(
    name="converter_records_bucketed_total",
    documentation="Total number of records placed into each output bucket",
    labelnames=["bucket"],
    registry=REGISTRY,
)

# Batch duration
batch_duration_seconds = Histogram(
    name="converter_batch_duration_seconds",
    documentation="Time spent converting one batch of records in seconds",
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 10.0, 30.0, 60.0],
    registry=REGISTRY,
)

# =======================
# OUTPUT METRICS
# =======================

output_files_total = Counter(
    name="converter_output_files_total",
    documentation="Total number of output files handled by the writer",
    labelnames=["status"],  # status: written, failed
    registry=REGISTRY,
)

# Source files skipped by the reader
source_files_skipped_total = Counter(
    name="converter_source_files_skipped_total",
    documentation="Total number of source files skipped because they could not be read or parsed",
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    if labels:
        counter.labels(**labels).inc(value)
    else:
        counter.inc(value)


def record_outcome(outcome: str, bucket: str | None = None) -> None:
    """
    Record the outcome of one record.

    Args:
        outcome: accepted, flagged or rejected
        bucket: Output bucket for accepted/flagged records
    """
    increment_counter(records_processed_total, 1, outcome=outcome)
    if bucket is not None:
        increment_counter(records_bucketed_total, 1, bucket=bucket)


def record_batch_duration(duration_seconds: float) -> None:
    batch_duration_seconds.observe(duration_seconds)


def record_output_files(written: int, failed: int) -> None:
    if written:
        increment_counter(output_files_total, written, status="written")
    if failed:
        increment_counter(output_files_total, failed, status="failed")


def record_skipped_source_file() -> None:
    increment_counter(source_files_skipped_total, 1)
