"""
Unit tests for Pydantic data models.

Tests aliases, immutability and constraint enforcement.
"""

import pytest
from pydantic import ValidationError

from disclosure_sorter.core.models import (
    BatchResult,
    BucketEntry,
    ClassificationTag,
    ProcessingOutcome,
    ProcessingSummary,
    ReviewAnnotation,
    TransformedRecord,
    ValidationResult,
)


class TestClassificationTag:
    """Tests for ClassificationTag model"""

    def test_dump_uses_output_keys(self):
        """Test that serialization uses the output document keys"""
        tag = ClassificationTag(
            category="asset_disposal",
            original_label="VENTA",
            classified_at="2025-01-01T00:00:00.000Z",
        )
        assert tag.model_dump(by_alias=True) == {
            "categoria": "asset_disposal",
            "tipoProcedimientoOriginal": "VENTA",
            "fechaClasificacion": "2025-01-01T00:00:00.000Z",
        }

    def test_populate_by_alias(self):
        """Test construction from output document keys"""
        tag = ClassificationTag(categoria="unclassified", fechaClasificacion="t")
        assert tag.category == "unclassified"
        assert tag.original_label == ""

    def test_frozen(self):
        """Test that tags cannot be modified"""
        tag = ClassificationTag(category="unclassified", classified_at="t")
        with pytest.raises(ValidationError):
            tag.category = "asset_disposal"


class TestReviewAnnotation:
    """Tests for ReviewAnnotation model"""

    def test_for_labels(self):
        """Test that the reason names every detected label"""
        annotation = ReviewAnnotation.for_labels(["CONCESIÓN", "VENTA"], processed_at="t")
        assert annotation.requires_review is True
        assert annotation.reason == "Múltiples tipos de procedimiento: CONCESIÓN, VENTA"
        assert annotation.model_dump(by_alias=True) == {
            "requiereRevision": True,
            "razon": "Múltiples tipos de procedimiento: CONCESIÓN, VENTA",
            "fechaProcesamiento": "t",
            "procedimientosDetectados": ["CONCESIÓN", "VENTA"],
        }


class TestTransformedRecord:
    """Tests for TransformedRecord model"""

    def test_defaults(self):
        """Test that every common field has an empty default"""
        document = TransformedRecord().to_document()
        assert document["id"] == ""
        assert document["ramo"] == {"clave": "", "valor": ""}
        assert document["continuaParticipando"] is True
        assert document["superiorInmediato"] is None

    def test_variant_and_tag_appended_last(self):
        """Test that the variant section and tag follow the common section"""
        tag = ClassificationTag(category="unclassified", classified_at="t")
        record = TransformedRecord(variant={"estructuraGenerica": {"tipo": "X"}}, classification=tag)
        keys = list(record.to_document())
        assert keys[-2:] == ["estructuraGenerica", "_clasificacion"]
        assert "variant" not in keys

    def test_default_structures_not_shared(self):
        """Test that default dicts are independent between instances"""
        first, second = TransformedRecord(), TransformedRecord()
        first.branch["clave"] = "X"
        assert second.branch == {"clave": "", "valor": ""}


class TestProcessingOutcome:
    """Tests for ProcessingOutcome model"""

    def test_accepted(self):
        """Test accepted outcome and its output path"""
        outcome = ProcessingOutcome.accepted(0, "contracting_public", "1_ANA_LOPEZ.json")
        assert outcome.status == "accepted"
        assert outcome.output_path == "contracting_public/1_ANA_LOPEZ.json"

    def test_rejected_has_no_path(self):
        """Test that rejected outcomes carry an error and no path"""
        outcome = ProcessingOutcome.rejected(3, "Record 3: boom")
        assert outcome.error == "Record 3: boom"
        assert outcome.output_path is None

    def test_invalid_status(self):
        """Test that unknown statuses are refused"""
        with pytest.raises(ValidationError):
            ProcessingOutcome(index=0, status="skipped")

    def test_negative_index(self):
        """Test that indexes start at zero"""
        with pytest.raises(ValidationError):
            ProcessingOutcome.rejected(-1, "x")


class TestBatchResult:
    """Tests for BatchResult model"""

    def test_counts_and_bucket_names(self):
        """Test status counts and sorted bucket names"""
        entry = BucketEntry(file_name="a.json", record=TransformedRecord())
        result = BatchResult(
            total_records=3,
            outcomes=[
                ProcessingOutcome.accepted(0, "unclassified", "a.json"),
                ProcessingOutcome.flagged(1, "revisar", "b.json"),
                ProcessingOutcome.rejected(2, "x"),
            ],
            category_buckets={"unclassified": [entry]},
            review_buckets={"revisar": [entry]},
        )
        assert (result.accepted_count, result.flagged_count, result.rejected_count) == (1, 1, 1)
        assert result.bucket_names == ["revisar", "unclassified"]
        assert [bucket for bucket, _ in result.iter_entries()] == ["unclassified", "revisar"]


class TestValidationResult:
    """Tests for ValidationResult model"""

    def test_passed_with_failures_rejected(self):
        """Test that passed=True with failed rules is inconsistent"""
        with pytest.raises(ValidationError):
            ValidationResult(record_index=0, passed=True, failed_rules=["nombres_required"])


class TestProcessingSummary:
    """Tests for ProcessingSummary model"""

    def test_document_keys(self):
        """Test that the summary document uses the published keys"""
        summary = ProcessingSummary(
            generated_at="t",
            source_dir="/in",
            destination_dir="/out",
            total_files=0,
        )
        document = summary.to_document()
        assert list(document) == [
            "fechaGeneracion", "directorioOrigen", "directorioDestino", "totalArchivos",
            "clasificacion", "errores", "advertencias", "directoriosCreados",
            "criteriosClasificacion", "reglasAplicadas", "estadisticasDetalladas",
        ]
        assert document["estadisticasDetalladas"] == {
            "archivosNormalesPorCategoria": {},
            "archivosRevisionPorCategoria": {},
        }
