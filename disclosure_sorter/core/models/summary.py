"""
ProcessingSummary model: the report written next to the category buckets.
"""

from pydantic import BaseModel, Field


class DetailedStatistics(BaseModel):
    """Item counts per bucket, split into normal and review buckets."""

    per_category: dict[str, int] = Field(default_factory=dict, alias="archivosNormalesPorCategoria")
    per_review_bucket: dict[str, int] = Field(default_factory=dict, alias="archivosRevisionPorCategoria")

    class Config:
        populate_by_name = True
        frozen = True


class ProcessingSummary(BaseModel):
    """
    Summary of one conversion run.

    Attributes:
        generated_at: ISO-8601 UTC generation timestamp
        source_dir: Source directory echoed from the caller
        destination_dir: Destination directory echoed from the caller
        total_files: Number of record files produced (the summary excluded)
        classification: Count per category plus the review count
        errors: Per-record errors
        warnings: Per-record warnings
        created_buckets: Sorted distinct bucket names
        criteria: Human description of each category's matching criteria
        applied_rules: Mapping rules applied during the run
        detailed_statistics: Item counts per bucket
    """

    generated_at: str = Field(..., alias="fechaGeneracion")
    source_dir: str = Field(..., alias="directorioOrigen")
    destination_dir: str = Field(..., alias="directorioDestino")
    total_files: int = Field(..., ge=0, alias="totalArchivos")
    classification: dict[str, int] = Field(default_factory=dict, alias="clasificacion")
    errors: list[str] = Field(default_factory=list, alias="errores")
    warnings: list[str] = Field(default_factory=list, alias="advertencias")
    created_buckets: list[str] = Field(default_factory=list, alias="directoriosCreados")
    criteria: dict[str, str] = Field(default_factory=dict, alias="criteriosClasificacion")
    applied_rules: list[str] = Field(default_factory=list, alias="reglasAplicadas")
    detailed_statistics: DetailedStatistics = Field(
        default_factory=DetailedStatistics, alias="estadisticasDetalladas"
    )

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True)

    class Config:
        populate_by_name = True
        frozen = True
        json_schema_extra = {
            "example": {
                "fechaGeneracion": "2025-01-01T00:00:00.000Z",
                "directorioOrigen": "/data/origen",
                "directorioDestino": "/data/destino",
                "totalArchivos": 2,
                "clasificacion": {
                    "contracting_public": 1,
                    "concession_grant": 0,
                    "asset_disposal": 0,
                    "appraisal_ruling": 0,
                    "unclassified": 0,
                    "revisar_casos_sin_tipoProcedimiento_definido": 1
                },
                "errores": [],
                "advertencias": [],
                "directoriosCreados": [
                    "contracting_public",
                    "revisar_casos_sin_tipoProcedimiento_definido"
                ]
            }
        }
