"""
Access to network data of the external graph library.

This module contains:
- Element enumeration and class identity
- Geometry extraction and link lengths
- Property helpers (lane counts, time series)
- Network construction and loading
"""

from .element_access import (
    ElementCategory,
    element_category,
    instance_of,
    iter_collection,
    iter_elements,
)
from .geometry import element_geometry, link_length, network_extent
from .properties import line_type, lane_count, masked_values, split_property_listing
from .network_loader import (
    NetworkUnavailableError,
    ask_network_paths,
    create_network,
    load_network,
)

__all__ = [
    'ElementCategory',
    'element_category',
    'instance_of',
    'iter_collection',
    'iter_elements',
    'element_geometry',
    'link_length',
    'network_extent',
    'line_type',
    'lane_count',
    'masked_values',
    'split_property_listing',
    'NetworkUnavailableError',
    'ask_network_paths',
    'create_network',
    'load_network'
]
