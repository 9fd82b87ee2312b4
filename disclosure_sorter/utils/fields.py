"""
Default resolution for optional fields of raw disclosure records.

Raw records are loosely shaped JSON: any key may be missing, null, an
empty string or a falsy scalar such as 0 or false. Every mapping rule reads
through ``pick`` so absent values resolve to the same default everywhere.
"""

from collections.abc import Mapping
from typing import Any


def is_absent(value: Any) -> bool:
    """
    Return True for values treated as missing.

    None and falsy scalars ("", 0, 0.0, False) are absent. Empty lists and
    objects are present values.
    """
    if value is None:
        return True
    return isinstance(value, (str, int, float)) and not value


def pick(source: Any, *path: str | int, default: Any = "") -> Any:
    """
    Walk ``path`` through nested mappings and lists.

    Each step is a mapping key (str) or a list index (int). A step that
    cannot be taken, or a final value that is absent, yields ``default``.

    Examples:
        >>> pick({"puesto": {"nombre": "JEFE"}}, "puesto", "nombre")
        'JEFE'
        >>> pick({"tipoArea": []}, "tipoArea", 0, "valor")
        ''
    """
    current = source
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or not -len(current) <= step < len(current):
                return default
            current = current[step]
        elif isinstance(current, Mapping) and step in current:
            current = current[step]
        else:
            return default

    if is_absent(current):
        return default
    return current


def pick_list(source: Any, key: str) -> list[Any]:
    """
    Return ``source[key]`` as a list.

    Absent values become an empty list. Any other non-list value raises
    TypeError so the caller can reject the record.
    """
    value = pick(source, key, default=None)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"'{key}' must be a list, got {type(value).__name__}")
    return value
