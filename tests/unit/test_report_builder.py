"""
Unit tests for the report builder and output rendering.
"""

import json

import pytest

from disclosure_sorter.batch.processor import BatchProcessor
from disclosure_sorter.batch.report import APPLIED_RULES, SUMMARY_FILE_NAME, ReportBuilder
from disclosure_sorter.batch.writers import render_output_files
from disclosure_sorter.core.classification import REVIEW_BUCKET
from disclosure_sorter.core.models import BatchResult


@pytest.fixture
def result(clock, mixed_records):
    return BatchProcessor(clock=clock).process(mixed_records)


@pytest.fixture
def builder(clock):
    return ReportBuilder(clock=clock)


@pytest.mark.unit
class TestReportBuilder:
    """Tests for ReportBuilder"""

    def test_summary_fields(self, builder, result):
        """Test the summary built from a mixed batch"""
        summary = builder.build(result, "/data/origen", "/data/destino")

        assert summary.generated_at == "2025-03-14T09:26:53.589Z"
        assert summary.source_dir == "/data/origen"
        assert summary.destination_dir == "/data/destino"
        assert summary.total_files == 4
        assert summary.classification == {
            "contracting_public": 1,
            "concession_grant": 1,
            "asset_disposal": 0,
            "appraisal_ruling": 0,
            "unclassified": 1,
            REVIEW_BUCKET: 1,
        }
        assert len(summary.errors) == 2
        assert len(summary.warnings) == 2
        assert summary.created_buckets == [
            "concession_grant", "contracting_public", REVIEW_BUCKET, "unclassified",
        ]
        assert summary.applied_rules == list(APPLIED_RULES)
        assert summary.detailed_statistics.per_category == {
            "contracting_public": 1, "concession_grant": 1, "unclassified": 1,
        }
        assert summary.detailed_statistics.per_review_bucket == {REVIEW_BUCKET: 1}

    def test_criteria_cover_all_categories(self, builder, result):
        """Test the static criteria section"""
        criteria = builder.build(result, "a", "b").criteria
        assert set(criteria) == {
            "contracting_public", "concession_grant", "asset_disposal",
            "appraisal_ruling", "unclassified", "revisar_casos",
        }

    def test_explicit_total_files(self, builder, result):
        """Test that the caller may supply the file count"""
        assert builder.build(result, "a", "b", total_files=10).total_files == 10

    def test_empty_result(self, builder):
        """Test a summary for a batch with no buckets"""
        summary = builder.build(BatchResult(), "a", "b")
        assert summary.total_files == 0
        assert summary.created_buckets == []

    def test_summary_name_not_a_bucket(self, result):
        """Test that the summary name never collides with a bucket"""
        assert SUMMARY_FILE_NAME not in result.bucket_names


@pytest.mark.unit
class TestRenderOutputFiles:
    """Tests for render_output_files()"""

    def test_paths_and_content(self, builder, result):
        """Test relative paths and serialized documents"""
        summary = builder.build(result, "a", "b")
        files = render_output_files(result, summary, SUMMARY_FILE_NAME)

        assert list(files) == [
            "contracting_public/1_ANA_LOPEZ.json",
            "concession_grant/4_MARIA_ELENA_GARCIA.json",
            "unclassified/5_CARLOS_TORRES.json",
            f"{REVIEW_BUCKET}/2_ALEJANDRO_JAVIER_ROMERO.json",
            SUMMARY_FILE_NAME,
        ]
        document = json.loads(files["concession_grant/4_MARIA_ELENA_GARCIA.json"])
        assert document["otorgamientoConcesiones"]["tipoActo"] == "CONCESIÓN"
        assert "CONCESIÓN" in files["concession_grant/4_MARIA_ELENA_GARCIA.json"]
        assert json.loads(files[SUMMARY_FILE_NAME])["totalArchivos"] == 4

    def test_collision_refused(self, builder, result):
        """Test that a bucket named like the summary file is refused"""
        summary = builder.build(result, "a", "b")
        with pytest.raises(ValueError, match="collides"):
            render_output_files(result, summary, "unclassified")
