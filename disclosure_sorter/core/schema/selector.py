"""
Schema selection by procedure-type label.

Dispatch is a lookup table from the exact label to a SchemaVariant, and
from each variant to its section builder. Unknown labels use the GENERIC
variant.
"""

from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from disclosure_sorter.core.models import TransformedRecord
from disclosure_sorter.utils.fields import pick

from .responsibility import convert_responsibility_levels
from .variants import (
    build_appraisal_ruling,
    build_asset_disposal,
    build_concession_grant,
    build_contracting_public,
    build_generic,
)

SectionBuilder = Callable[[Mapping[str, Any], str], dict[str, Any]]


class SchemaVariant(Enum):
    CONTRACTING_PUBLIC = "contracting_public"
    CONCESSION_GRANT = "concession_grant"
    ASSET_DISPOSAL = "asset_disposal"
    APPRAISAL_RULING = "appraisal_ruling"
    GENERIC = "generic"


VARIANT_BY_LABEL: dict[str, SchemaVariant] = {
    "Contrataciones Públicas": SchemaVariant.CONTRACTING_PUBLIC,
    "Otorgamiento de Concesiones": SchemaVariant.CONCESSION_GRANT,
    "Enajenación de Bienes": SchemaVariant.ASSET_DISPOSAL,
    "Avalúos y Justipreciación": SchemaVariant.APPRAISAL_RULING,
}

SECTION_BUILDERS: dict[SchemaVariant, SectionBuilder] = {
    SchemaVariant.CONTRACTING_PUBLIC: build_contracting_public,
    SchemaVariant.CONCESSION_GRANT: build_concession_grant,
    SchemaVariant.ASSET_DISPOSAL: build_asset_disposal,
    SchemaVariant.APPRAISAL_RULING: build_appraisal_ruling,
    SchemaVariant.GENERIC: build_generic,
}


class SchemaSelector:
    """
    Rewrites a raw disclosure record into its normalized structure.

    The common section is the same for every record; the variant section
    depends on the procedure-type label.
    """

    def __init__(
        self,
        variants: Mapping[str, SchemaVariant] | None = None,
        builders: Mapping[SchemaVariant, SectionBuilder] | None = None,
    ):
        self.variants = dict(VARIANT_BY_LABEL if variants is None else variants)
        self.builders = dict(SECTION_BUILDERS if builders is None else builders)
        if SchemaVariant.GENERIC not in self.builders:
            raise ValueError("A builder for the GENERIC variant is required")

    def select_variant(self, label: str | None) -> SchemaVariant:
        return self.variants.get(label or "", SchemaVariant.GENERIC)

    def build_section(self, raw: Mapping[str, Any], label: str | None) -> dict[str, Any]:
        """Build the variant section for ``label``."""
        builder = self.builders.get(self.select_variant(label), self.builders[SchemaVariant.GENERIC])
        return builder(raw, label or "")

    def map_record(self, raw: Mapping[str, Any], label: str | None) -> TransformedRecord:
        """
        Build the TransformedRecord for a raw record.

        Args:
            raw: The raw disclosure record
            label: Procedure-type label driving the variant ("" or None if
                   the record declares none)

        Returns:
            TransformedRecord without classification or review annotation
        """
        return TransformedRecord(
            record_id=pick(raw, "id"),
            capture_date=pick(raw, "fechaCaptura"),
            fiscal_year=pick(raw, "ejercicioFiscal"),
            branch=pick(raw, "ramo", default={"clave": "", "valor": ""}),
            rfc=pick(raw, "rfc"),
            curp=pick(raw, "curp"),
            given_name=pick(raw, "nombres"),
            first_surname=pick(raw, "primerApellido"),
            second_surname=pick(raw, "segundoApellido"),
            gender=pick(raw, "genero", default={"clave": "", "valor": ""}),
            institution=pick(
                raw, "institucionDependencia", default={"nombre": "", "siglas": "", "clave": ""}
            ),
            position=pick(raw, "puesto", default={"nombre": "", "nivel": ""}),
            responsibility_levels=convert_responsibility_levels(
                pick(raw, "tipoArea", default=None),
                pick(raw, "nivelResponsabilidad", default=None),
            ),
            observations=pick(raw, "observaciones"),
            employment={
                "denominacion": pick(raw, "puesto", "nombre"),
                "areaAdscripcion": pick(raw, "institucionDependencia", "nombre"),
            },
            procedure_type=label or "",
            superior=pick(raw, "superiorInmediato", default=None),
            still_participating=True,
            variant=self.build_section(raw, label),
        )
