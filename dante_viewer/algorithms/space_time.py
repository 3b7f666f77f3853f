"""
Space-time matrices of measurements along a route.
"""

import logging
from typing import Any, Dict, Optional, Tuple

import numpy as np

from ..config.viewer_config import ViewerConfig
from ..data.element_access import iter_collection
from ..data.properties import get_property, series_values

logger = logging.getLogger(__name__)

# kind -> (route attribute, property name, fixed grid width)
SPACE_TIME_KINDS: Dict[str, Tuple[str, str, bool]] = {
    'detector speed': ('detectors', 'speed', False),
    'detector flow': ('detectors', 'flow', False),
    'asm speed': ('segments', 'ASM Speed', True),
    'asm flow': ('segments', 'ASM Flow', True),
}


def space_time(route: Any, kind: str, steps: Optional[int] = None,
               config: Optional[ViewerConfig] = None) -> np.ndarray:
    """
    Collect measurements along a route into a space-time matrix.

    Rows follow the route (detectors or segments in route order), columns are
    time steps. Detector kinds use the length of the detector series; segment
    kinds use a fixed grid of ``steps`` columns. A series that is missing or
    whose length does not match the grid leaves its row at zero.

    Args:
        route: Object with ``detectors`` and/or ``segments``
        kind: 'detector speed', 'detector flow', 'asm speed' or 'asm flow'
            (case-insensitive)
        steps: Number of time steps of segment series, defaults to
            ``config.space_time_steps``
        config: Viewer configuration

    Returns:
        Array of shape (number of detectors or segments, time steps)

    Raises:
        ValueError: If the kind is unknown
    """
    key = kind.strip().lower()
    if key not in SPACE_TIME_KINDS:
        raise ValueError(f"Unknown space-time kind '{kind}', "
                         f"expected one of {sorted(SPACE_TIME_KINDS)}")
    attribute, prop_name, fixed = SPACE_TIME_KINDS[key]
    if steps is None:
        steps = (config or ViewerConfig()).space_time_steps

    elements = list(iter_collection(getattr(route, attribute)))
    series = [series_values(get_property(element, prop_name)) for element in elements]

    if fixed:
        width = steps
    else:
        width = next((len(values) for values in series if len(values) > 0), 0)

    xt = np.zeros((len(elements), width))
    skipped = 0
    for x, values in enumerate(series):
        if len(values) == 0 or len(values) != width:
            skipped += 1
            continue
        xt[x, :] = values

    if skipped:
        logger.warning(f"{skipped} of {len(elements)} {attribute} have no '{prop_name}' "
                       f"series of {width} values, left at zero")
    logger.debug(f"Space-time matrix '{key}': {xt.shape[0]} x {xt.shape[1]}")
    return xt
