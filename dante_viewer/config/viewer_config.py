"""
Configuration management for the network viewer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


def _default_layer_styles() -> Dict[str, Dict[str, Any]]:
    return {
        'link': {'color': (0, 0, 1), 'unknown_color': (1, 0, 0), 'linestyle': '-'},
        'ramp': {'color': (0, 1, 0), 'linestyle': ':'},
        'other': {'color': (1, 0, 0), 'linestyle': ':'},
        'node': {'color': (0, 0, 1), 'marker': 'o'},
        'carriageway_detector': {'color': (1, 0, 0), 'linked_color': (0.5, 0, 0), 'marker': 's'},
        'lane_detector': {'color': (1, 1, 0), 'marker': 's'},
        'point': {'color': (0, 0.5, 0), 'marker': 'o', 'markersize': 2},
    }


@dataclass
class ViewerConfig:
    """Configuration parameters for the network viewer window and helpers."""

    # External library
    network_class: str = 'nl.fileradar.dante.export.graph.ENetwork'
    graph_package: str = 'nl.fileradar.dante.export.graph'
    property_package: str = 'nl.fileradar.dante.export.property'
    data_file_pattern: str = '*.dpnz'

    # Window layout
    window_name: str = 'NetworkViewer'
    figure_size: Tuple[float, float] = (14.0, 8.0)
    panel_width: float = 0.4      # fraction of the window used by the info panels
    panel_font: str = 'monospace'
    panel_font_size: float = 8
    panel_visible_rows: int = 40  # rows shown per panel before scrolling

    # Navigation
    zoom_step: float = 1.05       # zoom factor per scroll line
    scroll_amount: int = 3        # lines per wheel notch
    view_margin: float = 0.05     # relative margin around the network extent

    # Data
    samples_per_hour: int = 60    # time axis of property plots, minute data
    space_time_steps: int = 288   # 5 minute periods in a day

    # Styling
    layer_styles: Dict[str, Dict[str, Any]] = field(default_factory=_default_layer_styles)
    route_style: Dict[str, Any] = field(default_factory=lambda: {
        'linewidth': 5,
        'color': (0.5, 0.8, 0.6),
        'linestyle': '-',
    })

    def validate(self) -> None:
        """Validate configuration parameters."""
        if not 0 < self.panel_width < 1:
            raise ValueError("panel_width must be between 0 and 1")
        if self.zoom_step <= 1.0:
            raise ValueError("zoom_step must be greater than 1")
        if self.scroll_amount < 1:
            raise ValueError("scroll_amount must be at least 1")
        if self.panel_visible_rows < 1:
            raise ValueError("panel_visible_rows must be at least 1")
        if self.samples_per_hour <= 0:
            raise ValueError("samples_per_hour must be positive")
        if self.space_time_steps <= 0:
            raise ValueError("space_time_steps must be positive")
        if self.view_margin < 0:
            raise ValueError("view_margin must not be negative")
        if not self.network_class or '.' not in self.network_class:
            raise ValueError("network_class must be a dotted class path")

    def graph_class(self, simple_name: str) -> str:
        """Qualified name of a class in the external graph package."""
        return f"{self.graph_package}.{simple_name}" if self.graph_package else simple_name

    def property_class(self, simple_name: str) -> str:
        """Qualified name of a class in the external property package."""
        return f"{self.property_package}.{simple_name}" if self.property_package else simple_name

    @classmethod
    def create_default_config(cls) -> 'ViewerConfig':
        """Create the default configuration."""
        return cls()

    @classmethod
    def create_presentation_config(cls) -> 'ViewerConfig':
        """
        Create a configuration for projectors and large screens.

        Larger panel text, fewer rows per panel and coarser zoom steps.
        """
        return cls(
            figure_size=(19.2, 10.8),
            panel_font_size=11,
            panel_visible_rows=28,
            zoom_step=1.1,
        )
