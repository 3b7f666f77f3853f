"""
Route assembly and space-time matrices.
"""

from .space_time import space_time, SPACE_TIME_KINDS
from .route_builder import Route, RouteNotFoundError, build_connection_graph, find_route

__all__ = [
    'space_time',
    'SPACE_TIME_KINDS',
    'Route',
    'RouteNotFoundError',
    'build_connection_graph',
    'find_route'
]
