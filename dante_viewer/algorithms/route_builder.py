"""
Route assembly over element connections.

Routes are normally provided by the external library. This module builds
equivalent routes from the connections of a loaded network so that
space-time matrices and route overlays can be produced for any pair of
elements.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import networkx as nx
from shapely.geometry import LineString, Point

from ..config.viewer_config import ViewerConfig
from ..data.element_access import (
    ElementCategory,
    element_category,
    element_hash,
    iter_connection_targets,
    iter_elements,
)
from ..data.geometry import element_geometry, link_length

logger = logging.getLogger(__name__)

DETECTOR_CATEGORIES = (ElementCategory.CARRIAGEWAY_DETECTOR, ElementCategory.LANE_DETECTOR)


class RouteNotFoundError(RuntimeError):
    """Raised when two elements are not connected."""


@dataclass
class Route:
    """Container for an assembled route."""

    elements: List[Any]
    segments: List[Any] = field(default_factory=list)
    detectors: List[Any] = field(default_factory=list)
    total_length: float = 0.0

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics for the route."""
        return {
            'element_count': len(self.elements),
            'segment_count': len(self.segments),
            'detector_count': len(self.detectors),
            'total_length_m': round(self.total_length, 1),
        }


def build_connection_graph(network: Any, config: Optional[ViewerConfig] = None) -> nx.DiGraph:
    """
    Build a directed graph of element connections.

    Nodes are element hashes with the element under the 'element' attribute.
    Leaving a link costs its length; other elements are free to pass.

    Args:
        network: Loaded network
        config: Viewer configuration (graph package)

    Returns:
        NetworkX DiGraph with 'length' edge attributes
    """
    config = config or ViewerConfig()
    graph = nx.DiGraph()

    for element in iter_elements(network):
        category = element_category(element, config.graph_package)
        graph.add_node(element_hash(element), element=element, category=category)

    for key, data in list(graph.nodes(data=True)):
        element = data['element']
        length = link_length(element) if data['category'] is ElementCategory.LINK else 0.0
        for target in iter_connection_targets(element):
            target_key = element_hash(target)
            if target_key not in graph:
                graph.add_node(target_key, element=target,
                               category=element_category(target, config.graph_package))
            graph.add_edge(key, target_key, length=length)

    logger.info(f"Connection graph: {graph.number_of_nodes()} elements, "
                f"{graph.number_of_edges()} connections")
    return graph


def _position_along(link: Any, detector: Any) -> float:
    x, y = element_geometry(link)
    dx, dy = element_geometry(detector)
    if len(x) < 2 or len(dx) == 0:
        return 0.0
    return LineString(list(zip(x, y))).project(Point(dx[0], dy[0]))


def _detectors_by_link(graph: nx.DiGraph) -> Dict[str, List[Any]]:
    index: Dict[str, List[Any]] = {}
    for key, data in graph.nodes(data=True):
        if data['category'] not in DETECTOR_CATEGORIES:
            continue
        for target_key in graph.successors(key):
            if graph.nodes[target_key]['category'] is ElementCategory.LINK:
                index.setdefault(target_key, []).append(data['element'])
    return index


def find_route(network: Any, origin: Any, destination: Any,
               config: Optional[ViewerConfig] = None,
               graph: Optional[nx.DiGraph] = None) -> Route:
    """
    Find the shortest connected route between two elements.

    Args:
        network: Loaded network
        origin: First element of the route
        destination: Last element of the route
        config: Viewer configuration
        graph: Prebuilt connection graph, built from the network when None

    Returns:
        Route with its links as segments and the detectors on those links,
        both in route order

    Raises:
        RouteNotFoundError: If no directed connection path exists
    """
    graph = graph if graph is not None else build_connection_graph(network, config)
    start, end = element_hash(origin), element_hash(destination)

    try:
        path = nx.shortest_path(graph, start, end, weight='length')
    except (nx.NetworkXNoPath, nx.NodeNotFound) as e:
        raise RouteNotFoundError(f"No route from {start} to {end}: {e}") from e

    detectors_on = _detectors_by_link(graph)
    route = Route(elements=[graph.nodes[key]['element'] for key in path])
    for key in path:
        if graph.nodes[key]['category'] is not ElementCategory.LINK:
            continue
        link = graph.nodes[key]['element']
        route.segments.append(link)
        route.total_length += link_length(link)
        on_link = detectors_on.get(key, [])
        route.detectors.extend(sorted(on_link, key=lambda d: _position_along(link, d)))

    logger.info(f"Route found: {len(route.segments)} segments, "
                f"{len(route.detectors)} detectors, {route.total_length:.0f}m")
    return route
