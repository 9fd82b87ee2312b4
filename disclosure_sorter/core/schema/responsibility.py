"""
Responsibility-level structure of the common record section.
"""

from typing import Any

from disclosure_sorter.utils.fields import pick


def convert_responsibility_levels(area_types: Any, levels: Any) -> dict[str, Any]:
    """
    Build ``nivelesResponsabilidad`` from the raw ``tipoArea`` and
    ``nivelResponsabilidad`` lists.

    Only the first entry of each list is used; later entries are dropped.
    Keys for a list appear only when that list has at least one entry.

    Args:
        area_types: Raw list of area-type {clave, valor} entries
        levels: Raw list of responsibility-level {clave, valor} entries

    Returns:
        Dict with tipoArea/valorTipoArea and/or nivel/claveNivel
    """
    result: dict[str, Any] = {}

    if isinstance(area_types, list) and area_types:
        result["tipoArea"] = pick(area_types, 0, "valor")
        result["valorTipoArea"] = pick(area_types, 0, "clave")

    if isinstance(levels, list) and levels:
        result["nivel"] = pick(levels, 0, "valor")
        result["claveNivel"] = pick(levels, 0, "clave")

    return result
