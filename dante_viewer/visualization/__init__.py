"""
Network drawing, navigation and inspection windows.
"""

from .navigation import PanZoomController, ViewState, fit_to_aspect, zoom_limits
from .layers import LAYER_LABELS, NetworkLayers, draw_network
from .info_panel import InfoLine, InfoPanel, describe_element
from .route_plot import plot_route, plot_space_time, plot_time_series
from .network_viewer import NetworkViewer, view_network

__all__ = [
    'PanZoomController',
    'ViewState',
    'fit_to_aspect',
    'zoom_limits',
    'LAYER_LABELS',
    'NetworkLayers',
    'draw_network',
    'InfoLine',
    'InfoPanel',
    'describe_element',
    'plot_route',
    'plot_space_time',
    'plot_time_series',
    'NetworkViewer',
    'view_network'
]
