"""
Category identifiers and the default ordered keyword table.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class Category(str, Enum):
    """Topical bucket a single-procedure record is sorted into."""

    CONTRACTING_PUBLIC = "contracting_public"
    CONCESSION_GRANT = "concession_grant"
    ASSET_DISPOSAL = "asset_disposal"
    APPRAISAL_RULING = "appraisal_ruling"
    UNCLASSIFIED = "unclassified"


# Bucket for records declaring more than one procedure type.
REVIEW_BUCKET = "revisar_casos_sin_tipoProcedimiento_definido"

# Key of the review criterion in the summary's criteria section.
REVIEW_CRITERIA_KEY = "revisar_casos"


class CategoryRule(BaseModel):
    """
    Keywords that send a procedure-type label to one category.

    Keywords are stored upper-cased; a label matches when any keyword is a
    substring of the upper-cased label.
    """

    category: Category
    keywords: tuple[str, ...] = Field(..., min_length=1)
    description: str = ""

    @field_validator("category")
    @classmethod
    def check_classifiable(cls, v):
        if v is Category.UNCLASSIFIED:
            raise ValueError("'unclassified' is the fallback and cannot carry keywords")
        return v

    @field_validator("keywords")
    @classmethod
    def normalize_keywords(cls, v):
        keywords = tuple(str(keyword).strip().upper() for keyword in v)
        if any(not keyword for keyword in keywords):
            raise ValueError("keywords must be non-empty strings")
        return keywords

    class Config:
        frozen = True


# Order is priority: the first category with a matching keyword wins.
DEFAULT_CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        category=Category.CONTRACTING_PUBLIC,
        keywords=(
            "CONTRATACIÓN PÚBLICA",
            "CONTRATACIONES PÚBLICAS",
            "TRAMITACIÓN",
            "ATENCIÓN Y RESOLUCIÓN",
            "ADJUDICACIÓN",
            "CONTRATO",
            "LICITACIÓN",
            "ADQUISICIONES",
            "OBRAS PÚBLICAS",
        ),
        description=(
            "CONTRATACIÓN PÚBLICA, DE TRAMITACIÓN, ATENCIÓN Y RESOLUCIÓN "
            "PARA LA ADJUDICACIÓN DE UN CONTRATO"
        ),
    ),
    CategoryRule(
        category=Category.CONCESSION_GRANT,
        keywords=(
            "OTORGAMIENTO",
            "CONCESIONES",
            "LICENCIAS",
            "PERMISOS",
            "AUTORIZACIONES",
            "PRÓRROGAS",
            "CONCESIÓN",
        ),
        description=(
            "OTORGAMIENTO DE CONCESIONES, LICENCIAS, PERMISOS, "
            "AUTORIZACIONES Y SUS PRÓRROGAS"
        ),
    ),
    CategoryRule(
        category=Category.ASSET_DISPOSAL,
        keywords=("ENAJENACIÓN", "BIENES MUEBLES", "VENTA", "DISPOSICIÓN", "BIENES"),
        description="ENAJENACIÓN DE BIENES MUEBLES",
    ),
    CategoryRule(
        category=Category.APPRAISAL_RULING,
        keywords=(
            "DICTAMEN VALUATORIO",
            "JUSTIPRECIACIÓN",
            "RENTAS",
            "AVALÚO",
            "AVALÚOS",
            "VALUACIÓN",
            "PERITAJE",
        ),
        description="EMISIÓN DE DICTAMEN VALUATORIO Y JUSTIPRECIACIÓN DE RENTAS",
    ),
)

UNCLASSIFIED_DESCRIPTION = "No coincide con ningún patrón conocido"
REVIEW_DESCRIPTION = "Objetos con múltiples tipos de procedimiento"
