"""
TransformedRecord model: the normalized rewrite of one raw disclosure record.
"""

from typing import Any

from pydantic import BaseModel, Field

from .classification import ClassificationTag, ReviewAnnotation


class TransformedRecord(BaseModel):
    """
    Output envelope for one record.

    The common section is modelled field by field. The schema-specific
    section selected by procedure type is kept as ``variant`` (its shape
    depends on the variant) and is merged after the common section when the
    record is serialized. Exactly one of ``classification`` / ``review`` is
    set once the batch processor has routed the record.

    Field aliases are the keys of the output documents.
    """

    record_id: Any = Field("", alias="id")
    capture_date: Any = Field("", alias="fechaCaptura")
    fiscal_year: Any = Field("", alias="ejercicioFiscal")
    branch: Any = Field(default_factory=lambda: {"clave": "", "valor": ""}, alias="ramo")
    rfc: Any = ""
    curp: Any = ""
    given_name: Any = Field("", alias="nombres")
    first_surname: Any = Field("", alias="primerApellido")
    second_surname: Any = Field("", alias="segundoApellido")
    gender: Any = Field(default_factory=lambda: {"clave": "", "valor": ""}, alias="genero")
    institution: Any = Field(
        default_factory=lambda: {"nombre": "", "siglas": "", "clave": ""},
        alias="institucionDependencia",
    )
    position: Any = Field(default_factory=lambda: {"nombre": "", "nivel": ""}, alias="puesto")
    responsibility_levels: dict[str, Any] = Field(default_factory=dict, alias="nivelesResponsabilidad")
    observations: Any = Field("", alias="observaciones")
    employment: dict[str, Any] = Field(default_factory=dict, alias="empleoCargoComision")
    # Key spelling is part of the published output format.
    procedure_type: str = Field("", alias="tipoProcedimineto")
    superior: Any = Field(None, alias="superiorInmediato")
    still_participating: bool = Field(True, alias="continuaParticipando")

    variant: dict[str, Any] = Field(default_factory=dict)
    classification: ClassificationTag | None = Field(None, alias="_clasificacion")
    review: ReviewAnnotation | None = Field(None, alias="_metadata")

    def to_document(self) -> dict[str, Any]:
        """
        Serialize to the output document: common section, then the variant
        section, then the classification tag or review annotation.
        """
        document = self.model_dump(
            by_alias=True,
            exclude={"variant", "classification", "review"},
        )
        document.update(self.variant)
        if self.classification is not None:
            document["_clasificacion"] = self.classification.model_dump(by_alias=True)
        if self.review is not None:
            document["_metadata"] = self.review.model_dump(by_alias=True)
        return document

    class Config:
        populate_by_name = True
        frozen = True
        json_schema_extra = {
            "example": {
                "id": "1",
                "fechaCaptura": "2024-05-02",
                "nombres": "ANA",
                "primerApellido": "LOPEZ",
                "tipoProcedimineto": "Enajenación de Bienes",
                "continuaParticipando": True,
                "enajenacionBienes": {"nivelesResponsabilidad": {"autorizacionesDictamenes": "A"}},
                "_clasificacion": {"categoria": "asset_disposal"}
            }
        }
