"""
Drawing of network elements, one layer per element category.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..config.viewer_config import ViewerConfig
from ..data.element_access import (
    ElementCategory,
    element_category,
    instance_of,
    iter_connection_targets,
    iter_elements,
)
from ..data.geometry import element_geometry
from ..data.properties import lane_count, line_type

logger = logging.getLogger(__name__)

# Layer key -> menu label, in menu order
LAYER_LABELS = OrderedDict([
    ('l', 'Links'),
    ('n', 'Nodes'),
    ('r', 'Ramp lines'),
    ('o', 'Other lines'),
    ('c', 'Carriageway detectors'),
    ('d', 'Lane detectors'),
    ('p', 'Points'),
])

# Drawing order of the categories
Z_ORDER = {
    ElementCategory.LINK: 1,
    ElementCategory.LINE: 2,
    ElementCategory.NODE: 3,
    ElementCategory.CARRIAGEWAY_DETECTOR: 4,
    ElementCategory.LANE_DETECTOR: 5,
    ElementCategory.POINT: 6,
}

PICK_RADIUS = 5


@dataclass
class NetworkLayers:
    """Artists of a drawn network grouped by layer key."""

    artists: Dict[str, List[Any]] = field(
        default_factory=lambda: OrderedDict((key, []) for key in LAYER_LABELS))
    elements: Dict[Any, Any] = field(default_factory=dict)

    def add(self, key: str, artist: Any, element: Any) -> None:
        self.artists[key].append(artist)
        self.elements[artist] = element

    def element_of(self, artist: Any) -> Optional[Any]:
        """Element drawn by an artist."""
        return self.elements.get(artist)

    def set_visible(self, key: str, visible: bool) -> None:
        for artist in self.artists[key]:
            artist.set_visible(visible)

    def is_visible(self, key: str) -> bool:
        artists = self.artists[key]
        return not artists or artists[0].get_visible()

    def counts(self) -> Dict[str, int]:
        return {key: len(artists) for key, artists in self.artists.items()}


def _draw_link(ax, element, x, y, config: ViewerConfig):
    style = config.layer_styles['link']
    lanes = lane_count(element, 'NWBLink')
    color = style['color']
    if lanes == 0:
        lanes = 1
        color = style['unknown_color']
    line, = ax.plot(x, y, linewidth=lanes, color=color, linestyle=style['linestyle'])
    return 'l', line


def _draw_line(ax, element, x, y, config: ViewerConfig):
    # Ramps have a known type with lanes, anything else is drawn as other line
    lanes = lane_count(element, line_type(element))
    if lanes == 0:
        key, style, width = 'o', config.layer_styles['other'], 1
    else:
        key, style, width = 'r', config.layer_styles['ramp'], lanes
    line, = ax.plot(x, y, linewidth=width, color=style['color'], linestyle=style['linestyle'])
    return key, line


def _draw_node(ax, element, x, y, config: ViewerConfig):
    style = config.layer_styles['node']
    line, = ax.plot(x, y, marker=style['marker'], color=style['color'])
    return 'n', line


def _draw_carriageway_detector(ax, element, x, y, config: ViewerConfig):
    style = config.layer_styles['carriageway_detector']
    link_class = config.graph_class(ElementCategory.LINK.class_name)
    linked = any(instance_of(target, link_class) for target in iter_connection_targets(element))
    color = style['linked_color'] if linked else style['color']
    line, = ax.plot(x, y, marker=style['marker'], color=color)
    return 'c', line


def _draw_lane_detector(ax, element, x, y, config: ViewerConfig):
    style = config.layer_styles['lane_detector']
    line, = ax.plot(x, y, marker=style['marker'], color=style['color'])
    return 'd', line


def _draw_point(ax, element, x, y, config: ViewerConfig):
    style = config.layer_styles['point']
    line, = ax.plot(x, y, marker=style['marker'], color=style['color'],
                    markersize=style['markersize'], markerfacecolor=style['color'])
    return 'p', line


DRAWERS = {
    ElementCategory.LINK: _draw_link,
    ElementCategory.LINE: _draw_line,
    ElementCategory.NODE: _draw_node,
    ElementCategory.CARRIAGEWAY_DETECTOR: _draw_carriageway_detector,
    ElementCategory.LANE_DETECTOR: _draw_lane_detector,
    ElementCategory.POINT: _draw_point,
}


def draw_element(ax, element, config: Optional[ViewerConfig] = None):
    """
    Draw a single element.

    Returns:
        (layer key, artist), or None for elements of an unknown category
    """
    config = config or ViewerConfig()
    category = element_category(element, config.graph_package)
    if category is None:
        return None
    x, y = element_geometry(element)
    key, artist = DRAWERS[category](ax, element, x, y, config)
    artist.set_zorder(Z_ORDER[category])
    artist.set_pickradius(PICK_RADIUS)
    return key, artist


def draw_network(ax, network, config: Optional[ViewerConfig] = None) -> NetworkLayers:
    """
    Draw all elements of a network.

    Args:
        ax: Map axes
        network: Loaded network
        config: Viewer configuration for styling

    Returns:
        NetworkLayers with the artists of each layer
    """
    config = config or ViewerConfig()
    layers = NetworkLayers()
    skipped = 0

    for element in iter_elements(network):
        drawn = draw_element(ax, element, config)
        if drawn is None:
            skipped += 1
            continue
        key, artist = drawn
        layers.add(key, artist, element)

    counts = ', '.join(f"{LAYER_LABELS[key]}: {count}" for key, count in layers.counts().items())
    logger.info(f"Plotted {counts}")
    if skipped:
        logger.debug(f"Skipped {skipped} elements of other classes")
    return layers
