"""
Route overlays, property time series and space-time plots.
"""

import logging
from typing import Any, List, Optional

import matplotlib.pyplot as plt
import numpy as np

from ..config.viewer_config import ViewerConfig
from ..data.element_access import iter_collection
from ..data.geometry import element_geometry
from ..data.properties import masked_values, property_name

logger = logging.getLogger(__name__)


def find_viewer_figure(window_name: str = 'NetworkViewer'):
    """Open viewer figure, or None if there is none."""
    if window_name not in plt.get_figlabels():
        return None
    return plt.figure(window_name)


def plot_route(route: Any, config: Optional[ViewerConfig] = None) -> Optional[List[Any]]:
    """
    Highlight the segments of a route in the open network viewer.

    Args:
        route: Object with ``segments``
        config: Viewer configuration (window name and route style)

    Returns:
        The drawn artists, or None if no viewer window is open
    """
    config = config or ViewerConfig()
    fig = find_viewer_figure(config.window_name)
    if fig is None:
        logger.warning(f"No '{config.window_name}' window open, route not plotted")
        return None

    # The map is the first axes of the viewer window
    ax = fig.axes[0]
    style = config.route_style
    artists = []
    for segment in iter_collection(route.segments):
        x, y = element_geometry(segment)
        line, = ax.plot(x, y, linewidth=style['linewidth'], color=style['color'],
                        linestyle=style['linestyle'])
        artists.append(line)

    fig.canvas.draw_idle()
    logger.info(f"Plotted route with {len(artists)} segments")
    return artists


def plot_time_series(prop: Any, config: Optional[ViewerConfig] = None):
    """
    Plot a time-series property in a separate window.

    Flagged values are left out; time is in hours from the first sample.

    Returns:
        The new figure
    """
    config = config or ViewerConfig()
    name = property_name(prop)
    values = masked_values(prop)
    hours = np.arange(len(values)) / config.samples_per_hour

    with plt.rc_context({'toolbar': 'None'}):
        fig = plt.figure()
    if fig.canvas.manager is not None:
        fig.canvas.manager.set_window_title(name)
    ax = fig.add_subplot()
    ax.plot(hours, values)
    ax.set_title(name)
    ax.set_xlabel('Time [h]')
    fig.canvas.draw_idle()
    logger.debug(f"Plotted {name} with {len(values)} values")
    return fig


def plot_space_time(matrix: np.ndarray, kind: str,
                    samples_per_hour: Optional[float] = None,
                    config: Optional[ViewerConfig] = None):
    """
    Show a space-time matrix as an image.

    Args:
        matrix: Matrix from ``space_time`` (route position x time)
        kind: Kind of the matrix, used as title and colorbar label
        samples_per_hour: Time resolution; fixed-grid kinds cover a day,
            detector kinds use the configured sample rate
        config: Viewer configuration

    Returns:
        The new figure
    """
    config = config or ViewerConfig()
    if samples_per_hour is None:
        if kind.strip().lower().startswith('asm'):
            samples_per_hour = config.space_time_steps / 24
        else:
            samples_per_hour = config.samples_per_hour

    rows, steps = matrix.shape
    fig, ax = plt.subplots()
    image = ax.imshow(matrix, aspect='auto', origin='lower', interpolation='nearest',
                      extent=(0, steps / samples_per_hour, 0, rows))
    fig.colorbar(image, ax=ax, label=kind)
    ax.set_title(kind)
    ax.set_xlabel('Time [h]')
    ax.set_ylabel('Position along route')
    return fig
