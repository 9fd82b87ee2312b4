"""
Schema selection: rewriting raw records into procedure-specific structures.
"""

from .responsibility import convert_responsibility_levels
from .selector import (
    SECTION_BUILDERS,
    VARIANT_BY_LABEL,
    SchemaSelector,
    SchemaVariant,
)

__all__ = [
    "SECTION_BUILDERS",
    "SchemaSelector",
    "SchemaVariant",
    "VARIANT_BY_LABEL",
    "convert_responsibility_levels",
]
