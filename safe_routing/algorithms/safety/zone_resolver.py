"""
Resolve free-form area names onto a lookup table.

Every component that maps a zone or area name to table data goes through
``match_area_name`` so the matching rule lives in one place.
"""

from typing import Mapping, Optional, Tuple, TypeVar

V = TypeVar('V')


def normalize_area_name(name: Optional[str]) -> str:
    return (name or '').strip().lower()


def match_area_name(name: Optional[str], table: Mapping[str, V]) -> Optional[Tuple[str, V]]:
    """
    Find the table entry for an area name.

    A key matches when, ignoring case and surrounding whitespace, it equals the
    name or either string contains the other. The first matching key in table
    iteration order wins.

    Args:
        name: Area name as stored with the zone
        table: Mapping keyed by canonical area name

    Returns:
        (key, value) of the matching entry, or None
    """
    normalized = normalize_area_name(name)
    if not normalized:
        return None

    for key, value in table.items():
        candidate = normalize_area_name(key)
        if not candidate:
            continue
        if candidate == normalized or candidate in normalized or normalized in candidate:
            return key, value

    return None


def resolve_area_value(name: Optional[str], table: Mapping[str, V],
                       default: Optional[V] = None) -> Optional[V]:
    """Value for the matching table entry, or ``default``."""
    match = match_area_name(name, table)
    return match[1] if match is not None else default
