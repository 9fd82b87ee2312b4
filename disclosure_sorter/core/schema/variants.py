"""
Builders for the procedure-specific sections of a transformed record.

Each builder takes the raw record and the procedure-type label and returns
the section(s) to merge after the common fields. Fields that the raw
record cannot supply are present as empty strings so they can be completed
by hand later.
"""

from collections.abc import Mapping
from typing import Any

from disclosure_sorter.utils.fields import pick

CONCESSION_ACT_TYPE = "CONCESIÓN"
UNSPECIFIED_PROCEDURE = "No especificado"


def _first_level(raw: Mapping[str, Any]) -> str:
    return pick(raw, "nivelResponsabilidad", 0, "valor")


def _empty_beneficiary() -> dict[str, str]:
    return {
        "razonSocial": "",
        "nombre": "",
        "primerApellido": "",
        "segundoApellido": "",
    }


def _procedure_dates(raw: Mapping[str, Any]) -> dict[str, str]:
    return {
        "numeroExpedienteFolio": "",
        "descripcion": pick(raw, "puesto", "nombre"),
        "fechaInicioProcedimiento": pick(raw, "fechaCaptura"),
        "fechaConclusionProcedimiento": "",
    }


def build_contracting_public(raw: Mapping[str, Any], label: str) -> dict[str, Any]:
    area_label = pick(raw, "tipoArea", 0, "valor")
    area_code = pick(raw, "tipoArea", 0, "clave")
    return {
        "tipoContratacion": [],
        "contratacionAdquisiones": {
            "tipoArea": area_label,
            "valorTipoArea": area_code,
            "nivelesResponsabilidad": {
                "autorizacionDictamen": _first_level(raw),
                "justificacionLicitacion": "",
                "convocatoriaInvitacion": "",
                "evaluacionProposiciones": "",
                "adjudicacionContrato": "",
                "formalizacionContrato": "",
            },
            "datosGeneralesProcedimientos": [],
            "datosBeneficiariosFinales": _empty_beneficiary(),
        },
        "contratacionObra": {
            "tipoArea": area_label,
            "valorContratacionObra": area_code,
            "nivelesResponsabilidad": {
                "autorizacionDictamen": _first_level(raw),
                "justificacionLicictacion": "",
                "convocatoriaInvitacion": "",
                "evaluacionProposiciones": "",
                "adjudicacionContrato": "",
                "formalizacionContrato": "",
            },
            "datosGeneralesProcedimientos": {
                "numeroExpedienteFolio": "",
                "tipoProcedimiento": label,
                "otroTipoProcedimiento": "",
                "materia": "",
                "otroMateria": "",
                "fechaInicioProcedimiento": pick(raw, "fechaCaptura"),
                "fechaConclusionProcedimiento": "",
            },
            "datosBeneficiariosFinales": _empty_beneficiary(),
        },
    }


def build_concession_grant(raw: Mapping[str, Any], label: str) -> dict[str, Any]:
    institution_name = pick(raw, "institucionDependencia", "nombre")
    return {
        "otorgamientoConcesiones": {
            "tipoActo": CONCESSION_ACT_TYPE,
            "nivelesResponsabilidad": {
                "convocatoriaLicitacion": _first_level(raw),
                "dictamenesOpiniones": "",
                "visitasVerificacion": "",
                "evaluacionCumplimiento": "",
                "determinacionOtorgamiento": "",
            },
            "datosGeneralesProcedimientos": {
                "numeroExpedienteFolio": "",
                "denominacion": pick(raw, "puesto", "nombre"),
                "objeto": "",
                "fundamento": "",
                "nombrePersonaSolicitaOtorga": pick(raw, "nombres"),
                "primerApellidoSolicitaOtorga": pick(raw, "primerApellido"),
                "segundoApellidoSolicitaOtorga": pick(raw, "segundoApellido"),
                "denominacionPersonaMoral": institution_name,
                "sectorActo": "",
                "fechaInicioVigencia": pick(raw, "fechaCaptura"),
                "fechaConclusionVigencia": "",
                "monto": "",
                "urlInformacionActo": "",
            },
            "datosBeneficiariosFinales": {
                "razonSocial": institution_name,
                "nombre": pick(raw, "nombres"),
                "primerApellido": pick(raw, "primerApellido"),
                "segundoApellido": pick(raw, "segundoApellido"),
            },
        },
    }


def build_asset_disposal(raw: Mapping[str, Any], label: str) -> dict[str, Any]:
    return {
        "enajenacionBienes": {
            "nivelesResponsabilidad": {
                "autorizacionesDictamenes": _first_level(raw),
                "analisisAutorizacion": "",
                "modificacionBases": "",
                "presentacionOfertas": "",
                "evaluacionOfertas": "",
                "adjudicacionBienes": "",
                "formalizacionContrato": "",
            },
            "datosGeneralesProcedimientos": _procedure_dates(raw),
        },
    }


def build_appraisal_ruling(raw: Mapping[str, Any], label: str) -> dict[str, Any]:
    return {
        "dictaminacionAvaluos": {
            "nivelesResponsabilidad": {
                "propuestasAsignaciones": _first_level(raw),
                "asignacionAvaluos": "",
                "emisionDictamenes": "",
            },
            "datosGeneralesProcedimientos": _procedure_dates(raw),
        },
    }


def build_generic(raw: Mapping[str, Any], label: str) -> dict[str, Any]:
    surnames = f"{pick(raw, 'primerApellido')} {pick(raw, 'segundoApellido')}".strip()
    return {
        "estructuraGenerica": {
            "tipo": label or UNSPECIFIED_PROCEDURE,
            "datosGenerales": {
                "fechaInicio": pick(raw, "fechaCaptura"),
                "descripcion": pick(raw, "puesto", "nombre"),
            },
            "nivelesResponsabilidad": {
                "nivel": _first_level(raw),
                "tipoArea": pick(raw, "tipoArea", 0, "valor"),
            },
            "datosBeneficiarios": {
                "nombre": pick(raw, "nombres"),
                "apellidos": surnames,
                "institucion": pick(raw, "institucionDependencia", "nombre"),
            },
        },
    }
