"""
Helpers for element properties (scalars and time series).
"""

import logging
from typing import Any, List, Optional, Tuple

import numpy as np

from .element_access import instance_of, iter_collection

logger = logging.getLogger(__name__)

UNKNOWN_LINE_TYPE = 'unknown'
TIME_SERIES_CLASS = 'PReliableFloatArray'


def property_name(prop: Any) -> str:
    """Name of a property."""
    get_name = getattr(prop, 'getName', None)
    if get_name is not None:
        return str(get_name())
    return str(getattr(prop, 'name', ''))


def get_property(element: Any, name: str) -> Optional[Any]:
    """Property of an element by name, or None if the element lacks it."""
    get = getattr(element, 'getProperty', None)
    if get is None:
        return None
    return get(name)


def line_type(line: Any) -> str:
    """
    Get the type of a line from its property names.

    Line properties are named ``<type>.<attribute>``; properties without a dot
    (e.g. 'geometry') are skipped.

    Returns:
        The type prefix of the first dotted property name, or 'unknown'
    """
    for prop in iter_collection(getattr(line, 'properties', None)):
        name = property_name(prop)
        dot = name.find('.')
        if dot >= 0:
            return name[:dot]
    return UNKNOWN_LINE_TYPE


def lane_count(element: Any, prefix: str) -> int:
    """
    Number of lanes from the ``<prefix>.nLanes`` property.

    Returns:
        Lane count, 0 when unknown
    """
    if prefix == UNKNOWN_LINE_TYPE:
        return 0
    prop = get_property(element, f"{prefix}.nLanes")
    if prop is None:
        logger.debug(f"Element has no {prefix}.nLanes property, assuming 0 lanes")
        return 0
    as_int = getattr(prop, 'asInt', None)
    if as_int is not None:
        return int(as_int())
    return int(prop.value)


def is_time_series(prop: Any, property_package: str = '') -> bool:
    """Check whether a property is a time series with reliability flags."""
    name = f"{property_package}.{TIME_SERIES_CLASS}" if property_package else TIME_SERIES_CLASS
    return instance_of(prop, name)


def series_values(prop: Optional[Any]) -> np.ndarray:
    """Values of a time-series property as a float array (empty for None)."""
    if prop is None:
        return np.zeros(0)
    values = prop.values
    if hasattr(values, 'size') and hasattr(values, 'get'):
        values = list(iter_collection(values))
    return np.asarray(values, dtype=float).ravel()


def masked_values(prop: Any) -> np.ndarray:
    """
    Values of a time series with flagged entries replaced by NaN.

    Entries where ``reliability`` is set are masked.
    """
    values = series_values(prop).copy()
    reliability = getattr(prop, 'reliability', None)
    if reliability is None:
        return values

    mask = np.asarray(reliability, dtype=bool).ravel()
    if mask.shape != values.shape:
        logger.warning(f"Reliability of {property_name(prop)} has {mask.size} entries "
                       f"for {values.size} values, not masking")
        return values
    values[mask] = np.nan
    return values


def split_property_listing(text: str) -> List[str]:
    """
    Split a property listing at its ``(0)``, ``(1)``, ... markers.

    Args:
        text: Output of an element's ``listProperties()``

    Returns:
        One string per property, starting with its marker
    """
    rows = []
    index = 0
    start = text.find(f"({index})")
    while start >= 0:
        end = text.find(f"({index + 1})")
        chunk = text[start:end] if end >= 0 else text[start:]
        rows.append(chunk.rstrip())
        index += 1
        start = end
    return rows


def property_rows(element: Any) -> List[Tuple[str, Any]]:
    """
    Rows describing the properties of an element.

    Uses the element's own ``listProperties()`` text when available.

    Returns:
        List of (text, property) tuples in property order
    """
    properties = list(iter_collection(getattr(element, 'properties', None)))
    list_properties = getattr(element, 'listProperties', None)
    if list_properties is None:
        return [(f"({i}) {property_name(prop)}", prop) for i, prop in enumerate(properties)]

    rows = split_property_listing(str(list_properties()))
    if len(rows) != len(properties):
        logger.debug(f"Property listing has {len(rows)} entries for {len(properties)} properties")
    return [(row, properties[i] if i < len(properties) else None) for i, row in enumerate(rows)]
