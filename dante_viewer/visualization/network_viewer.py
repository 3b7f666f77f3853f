"""
Interactive viewer of a road network with element inspection.

Usage of the window:

1. Zoom by scrolling and pan by dragging the map with the mouse.
2. Double-click the map to reset the zoom.
3. Right-click the map for a menu to show or hide element categories
   (the keys l, n, r, o, c, d and p toggle them as well).
4. Click an element to show its information in the upper info panel.
5. Click a line about a connected element in the upper panel to show that
   element in the lower panel.
6. Click a line about measurement data in the upper panel to plot the data
   in a separate window.
7. Double-click a line in either panel to print it, e.g. to copy element
   names or values.
8. Links in red have 0 lanes (i.e. probably unknown).
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.widgets import CheckButtons

from ..config.viewer_config import ViewerConfig
from ..data.geometry import network_extent
from ..data.network_loader import ask_network_paths, create_network, load_network
from ..data.properties import is_time_series
from .info_panel import InfoPanel, describe_element
from .layers import LAYER_LABELS, NetworkLayers, draw_network
from .navigation import PanZoomController
from .route_plot import plot_time_series

logger = logging.getLogger(__name__)

PLACEHOLDER = 'Click on network item to obtain info'
MENU_SIZE = (0.17, 0.28)  # figure fraction

# Viewer per window name, its figure is reused by the next viewer
_open_viewers: Dict[str, "NetworkViewer"] = {}


def _padded_extent(extent: Optional[Tuple[float, float, float, float]],
                   margin: float) -> Tuple[float, float, float, float]:
    if extent is None:
        return 0.0, 1.0, 0.0, 1.0
    x_min, x_max, y_min, y_max = extent
    dx = (x_max - x_min) * margin or 1.0
    dy = (y_max - y_min) * margin or 1.0
    return x_min - dx, x_max + dx, y_min - dy, y_max + dy


class NetworkViewer:
    """
    Window showing a network with two info panels on the left.
    """

    def __init__(self, network: Any, config: Optional[ViewerConfig] = None,
                 on_select: Optional[Callable[[Any], None]] = None):
        """
        Create the viewer window and draw the network.

        Args:
            network: Loaded network of the external graph library
            config: Viewer configuration
            on_select: Called with every element clicked on the map
        """
        self.config = config or ViewerConfig()
        self.config.validate()
        self.network = network
        self.on_select = on_select
        self.selected_element = None

        previous = _open_viewers.pop(self.config.window_name, None)
        if previous is not None:
            previous.disconnect()

        with plt.rc_context({'toolbar': 'None'}):
            self.fig = plt.figure(num=self.config.window_name,
                                  figsize=self.config.figure_size, facecolor='white')
        self.fig.clear()
        manager = self.fig.canvas.manager
        if manager is not None:
            manager.set_window_title(self.config.window_name)
            # The layer keys would otherwise trigger default bindings such as log scale
            handler_id = getattr(manager, 'key_press_handler_id', None)
            if handler_id is not None:
                self.fig.canvas.mpl_disconnect(handler_id)

        w = self.config.panel_width
        self.ax = self.fig.add_axes([w, 0, 1 - w, 1])
        self.ax.set_axis_off()
        self.panels: Tuple[InfoPanel, InfoPanel] = (
            InfoPanel(self.fig.add_axes([0, .5, w, .5]), self.config, PLACEHOLDER),
            InfoPanel(self.fig.add_axes([0, 0, w, .5]), self.config),
        )

        logger.info("Plotting all elements, this may take a little while.")
        self.layers: NetworkLayers = draw_network(self.ax, network, self.config)

        extent = network_extent(self.layers.elements.values())
        self.navigation = PanZoomController(
            self.ax, _padded_extent(extent, self.config.view_margin),
            zoom_step=self.config.zoom_step, scroll_amount=self.config.scroll_amount)

        self.menu_ax, self.menu = self._create_layer_menu()

        self.navigation.connect()
        canvas = self.fig.canvas
        self._cids: List[int] = [
            canvas.mpl_connect('button_press_event', self.on_press),
            canvas.mpl_connect('scroll_event', self.on_scroll),
            canvas.mpl_connect('key_press_event', self.on_key),
        ]
        _open_viewers[self.config.window_name] = self
        self.navigation.on_resize()

    # ------------------------------------------------------------------
    # Layer menu
    # ------------------------------------------------------------------

    def _create_layer_menu(self):
        menu_ax = self.fig.add_axes([0, 0, *MENU_SIZE], zorder=10)
        labels = list(LAYER_LABELS.values())
        menu = CheckButtons(menu_ax, labels, [True] * len(labels))
        menu.on_clicked(self._on_menu_clicked)
        menu_ax.set_visible(False)
        menu.active = False
        return menu_ax, menu

    def show_menu(self, x: float, y: float) -> None:
        """Open the layer menu at a pixel position."""
        width, height = MENU_SIZE
        left = min(max(x / self.fig.bbox.width, 0), 1 - width)
        bottom = min(max(y / self.fig.bbox.height - height, 0), 1 - height)
        self.menu_ax.set_position([left, bottom, width, height])
        self.menu_ax.set_visible(True)
        self.menu.active = True
        self.fig.canvas.draw_idle()

    def hide_menu(self) -> None:
        self.menu_ax.set_visible(False)
        self.menu.active = False
        self.fig.canvas.draw_idle()

    @property
    def menu_visible(self) -> bool:
        return self.menu_ax.get_visible()

    def _on_menu_clicked(self, label: str) -> None:
        keys = list(LAYER_LABELS)
        index = list(LAYER_LABELS.values()).index(label)
        visible = self.menu.get_status()[index]
        self.layers.set_visible(keys[index], visible)
        logger.debug(f"{label} {'shown' if visible else 'hidden'}")
        self.hide_menu()

    def set_layer_visible(self, key: str, visible: bool) -> None:
        """Show or hide a layer, keeping the menu check marks in sync."""
        index = list(LAYER_LABELS).index(key)
        if self.menu.get_status()[index] != visible:
            self.menu.set_active(index)

    def toggle_layer(self, key: str) -> None:
        index = list(LAYER_LABELS).index(key)
        self.menu.set_active(index)

    def layer_visible(self, key: str) -> bool:
        return self.menu.get_status()[list(LAYER_LABELS).index(key)]

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def on_press(self, event) -> None:
        """
        Dispatch mouse clicks.

        A right-click on the map opens the layer menu and any other click
        closes it. A left click selects the topmost visible element under the
        pointer or the panel line under the pointer.
        """
        if event.button == 3 and event.inaxes is self.ax:
            self.show_menu(event.x, event.y)
            return
        if self.menu_visible and event.inaxes is not self.menu_ax:
            self.hide_menu()
        if event.button != 1:
            return

        if event.inaxes is self.ax:
            # A double-click on the map resets the view
            element = None if event.dblclick else self.element_at(event)
            if element is not None:
                self.item_clicked(element)
            return

        for panel in self.panels:
            row = panel.row_at(event)
            if row is not None:
                self.panel_clicked(panel, row, double=bool(event.dblclick))
                return

    def element_at(self, event) -> Optional[Any]:
        """Topmost visible element under a mouse event on the map."""
        top = None
        # Artists of equal z-order are drawn in insertion order, later on top
        for order, (artist, element) in enumerate(self.layers.elements.items()):
            if not artist.get_visible() or not artist.contains(event)[0]:
                continue
            rank = (artist.get_zorder(), order)
            if top is None or rank > top[0]:
                top = (rank, element)
        return None if top is None else top[1]

    def on_scroll(self, event) -> None:
        """Scroll the info panels."""
        for panel in self.panels:
            if event.inaxes is panel.ax:
                panel.scroll(-event.step * self.config.scroll_amount)

    def on_key(self, event) -> None:
        if event.key in LAYER_LABELS:
            self.toggle_layer(event.key)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def item_clicked(self, element: Any) -> None:
        """Show information about an element in the upper panel."""
        self.selected_element = element
        self.panels[0].set_lines(describe_element(element, self.config))
        self.panels[1].clear()
        if self.on_select is not None:
            self.on_select(element)

    def panel_clicked(self, panel: InfoPanel, row: int, double: bool = False):
        """
        Handle a click on a panel line.

        A double-click prints the line. A single click in the upper panel
        plots a time series or shows a connected element in the lower panel.

        Returns:
            The printed text, the new time-series figure, or None
        """
        panel.select(row)
        if double:
            text = panel.lines[row].text.strip()
            print(text)
            return text

        if panel is not self.panels[0] or self.selected_element is None:
            return None

        target = panel.target(row)
        if target is not None and is_time_series(target, self.config.property_package):
            return plot_time_series(target, self.config)
        if target is not None:
            self.panels[1].set_lines(describe_element(target, self.config))
        else:
            self.panels[1].clear()
        return None

    def reset_view(self) -> None:
        self.navigation.reset()

    def show(self) -> None:
        plt.show()

    def disconnect(self) -> None:
        """Stop handling events of the window."""
        self.navigation.disconnect()
        for cid in self._cids:
            self.fig.canvas.mpl_disconnect(cid)
        self._cids = []

    def close(self) -> None:
        self.disconnect()
        if _open_viewers.get(self.config.window_name) is self:
            del _open_viewers[self.config.window_name]
        plt.close(self.fig)


def view_network(data_folder: Optional[str] = None, data_file: Optional[str] = None,
                 config: Optional[ViewerConfig] = None, show: bool = True) -> Optional[NetworkViewer]:
    """
    Load a network and show it in a viewer window.

    Without a data folder, the folder and data file are requested through
    dialogs; cancelling the data file dialog shows the network without
    dynamic data.

    Args:
        data_folder: Network folder
        data_file: Data file with dynamic data, None for the network only
        config: Viewer configuration
        show: Enter the GUI main loop

    Returns:
        The viewer, or None when the folder dialog was cancelled

    Raises:
        NetworkUnavailableError: If the external library is not available
    """
    config = config or ViewerConfig()
    config.validate()

    # Fail before any dialog if the network can't be created
    network = create_network(config)

    if data_folder is None:
        paths = ask_network_paths(config=config)
        if paths is None:
            return None
        data_folder, data_file = paths

    load_network(data_folder, data_file, config, network=network)
    viewer = NetworkViewer(network, config)
    if show:
        viewer.show()
    return viewer
