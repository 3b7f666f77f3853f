"""
Geometry extraction for network elements.
"""

from typing import Iterable, Optional, Tuple

import numpy as np
from shapely.geometry import LineString

from .element_access import iter_collection


def element_geometry(element) -> Tuple[np.ndarray, np.ndarray]:
    """
    Retrieve the geometry of an element.

    Args:
        element: Network element with ``geometry.points``

    Returns:
        Tuple of (x, y) coordinate arrays in point order
    """
    points = [tuple(coords) for coords in iter_collection(element.geometry.points)]
    x = np.zeros(len(points))
    y = np.zeros(len(points))
    for j, coords in enumerate(points):
        x[j] = coords[0]
        y[j] = coords[1]
    return x, y


def link_length(element) -> float:
    """
    Calculate the length of a link as the sum of its segment lengths.

    Returns:
        Length in network units (meters), 0 for fewer than two points
    """
    x, y = element_geometry(element)
    if len(x) < 2:
        return 0.0
    return float(LineString(np.column_stack((x, y))).length)


def network_extent(elements: Iterable) -> Optional[Tuple[float, float, float, float]]:
    """
    Get the bounding box of a set of elements.

    Returns:
        (x_min, x_max, y_min, y_max), or None if no element has geometry
    """
    x_min = y_min = np.inf
    x_max = y_max = -np.inf
    for element in elements:
        x, y = element_geometry(element)
        if len(x) == 0:
            continue
        x_min = min(x_min, float(np.min(x)))
        x_max = max(x_max, float(np.max(x)))
        y_min = min(y_min, float(np.min(y)))
        y_max = max(y_max, float(np.max(y)))

    if not np.isfinite(x_min):
        return None
    return x_min, x_max, y_min, y_max
