"""
Dante Network Viewer

Visual inspection of road networks exported by an external graph library:
element properties (e.g. link IDs), element connections (what is connected
to what) and detector data (flow, speed).

## Quick Start

```python
from dante_viewer import view_network, find_route, space_time, plot_route

# Show a network with dynamic data
viewer = view_network("path/to/network", "path/to/data.dpnz", show=False)

# Space-time matrix of detector speeds along a route
route = find_route(viewer.network, origin_link, destination_link)
speeds = space_time(route, 'detector speed')
plot_route(route)
```

The external library must be importable from Python (for a Java library,
through an import hook such as the one of JPype) before the viewer is used.

## Architecture

- `config/`: Viewer configuration
- `data/`: Access to elements, geometry, properties and network loading
- `algorithms/`: Route assembly and space-time matrices
- `visualization/`: Viewer window, navigation, info panels and plots
"""

from .config import ViewerConfig
from .data import (
    NetworkUnavailableError,
    element_geometry,
    link_length,
    load_network,
)
from .algorithms import Route, RouteNotFoundError, find_route, space_time
from .visualization import NetworkViewer, plot_route, plot_space_time, view_network

# Version information
__version__ = "1.0.0"

# Public API
__all__ = [
    # Main interfaces
    'view_network',
    'NetworkViewer',
    'ViewerConfig',

    # Data access
    'load_network',
    'element_geometry',
    'link_length',
    'NetworkUnavailableError',

    # Routes
    'Route',
    'RouteNotFoundError',
    'find_route',
    'space_time',
    'plot_route',
    'plot_space_time',

    # Metadata
    '__version__'
]
