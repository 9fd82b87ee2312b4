"""
Annotations attached to a transformed record: a classification tag for
single-procedure records, a review annotation for ambiguous ones.
"""

from pydantic import BaseModel, Field


class ClassificationTag(BaseModel):
    """
    Category assigned by the keyword classifier.

    Attributes:
        category: Category identifier (e.g. "contracting_public")
        original_label: Raw procedure-type label that was classified
        classified_at: ISO-8601 UTC timestamp
    """

    category: str = Field(..., alias="categoria", min_length=1)
    original_label: str = Field("", alias="tipoProcedimientoOriginal")
    classified_at: str = Field(..., alias="fechaClasificacion")

    class Config:
        populate_by_name = True
        frozen = True
        json_schema_extra = {
            "example": {
                "categoria": "contracting_public",
                "tipoProcedimientoOriginal": "LICITACIÓN PÚBLICA",
                "fechaClasificacion": "2025-01-01T00:00:00.000Z"
            }
        }


class ReviewAnnotation(BaseModel):
    """
    Marks a record that declares several procedure types and needs a human
    to pick one.
    """

    requires_review: bool = Field(True, alias="requiereRevision")
    reason: str = Field(..., alias="razon")
    processed_at: str = Field(..., alias="fechaProcesamiento")
    detected_labels: list[str] = Field(default_factory=list, alias="procedimientosDetectados")

    @classmethod
    def for_labels(cls, labels: list[str], processed_at: str) -> "ReviewAnnotation":
        """Build the annotation whose reason lists every detected label."""
        return cls(
            requires_review=True,
            reason=f"Múltiples tipos de procedimiento: {', '.join(labels)}",
            processed_at=processed_at,
            detected_labels=list(labels),
        )

    class Config:
        populate_by_name = True
        frozen = True
        json_schema_extra = {
            "example": {
                "requiereRevision": True,
                "razon": "Múltiples tipos de procedimiento: CONCESIÓN, VENTA",
                "fechaProcesamiento": "2025-01-01T00:00:00.000Z",
                "procedimientosDetectados": ["CONCESIÓN", "VENTA"]
            }
        }
