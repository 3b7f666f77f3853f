"""
Mouse navigation of the network map: scroll to zoom, drag to pan,
double-click to reset.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

Limits = Tuple[float, float]


@dataclass
class ViewState:
    """Zoom and pan state of the map axes for one window session."""

    factor: float = 1.0
    panning: bool = False
    pan_origin: Tuple[float, float] = (0.0, 0.0)   # pixel position where panning started
    units_per_pixel: float = 0.0
    pan_xlim: Optional[Limits] = None
    pan_ylim: Optional[Limits] = None
    home_xlim: Optional[Limits] = None
    home_ylim: Optional[Limits] = None


def scroll_factor(lines: float, zoom_step: float) -> float:
    """Zoom factor for a number of scrolled lines, > 1 zooms out."""
    return zoom_step ** lines


def zoom_limits(xlim: Limits, ylim: Limits, fx: float, fy: float,
                factor: float) -> Tuple[Limits, Limits]:
    """
    Scale axis limits around an anchor.

    Args:
        xlim, ylim: Current limits
        fx, fy: Anchor as a fraction of the axes width and height
        factor: Scale factor of the visible range

    Returns:
        New (xlim, ylim); the coordinate at the anchor is unchanged
    """
    x0 = xlim[0] + fx * (xlim[1] - xlim[0])
    y0 = ylim[0] + fy * (ylim[1] - ylim[0])
    w = (xlim[1] - xlim[0]) * factor
    h = (ylim[1] - ylim[0]) * factor
    return (x0 - fx * w, x0 + (1 - fx) * w), (y0 - fy * h, y0 + (1 - fy) * h)


def fit_to_aspect(xlim: Limits, ylim: Limits, width_px: float,
                  height_px: float) -> Tuple[Limits, Limits]:
    """
    Widen limits so that the data aspect ratio is even on the given axes size.

    The range that is too small for the axes shape is enlarged around its centre.
    """
    w = xlim[1] - xlim[0]
    h = ylim[1] - ylim[0]
    if h == 0 or w / h > width_px / height_px:
        h = w * height_px / width_px
    else:
        w = h * width_px / height_px
    xc = (xlim[0] + xlim[1]) / 2
    yc = (ylim[0] + ylim[1]) / 2
    return (xc - .5 * w, xc + .5 * w), (yc - .5 * h, yc + .5 * h)


def centered_limits(center: Tuple[float, float], xlim: Limits, ylim: Limits,
                    factor: float) -> Tuple[Limits, Limits]:
    """Limits of the size of (xlim, ylim) times factor around a centre."""
    w = (xlim[1] - xlim[0]) * factor
    h = (ylim[1] - ylim[0]) * factor
    return ((center[0] - .5 * w, center[0] + .5 * w),
            (center[1] - .5 * h, center[1] + .5 * h))


class PanZoomController:
    """
    Pan and zoom a matplotlib axes with the mouse.

    The home view is the data extent fitted to the axes shape. It is
    recomputed whenever the window is resized, after which the current zoom
    factor is applied again around the current centre.
    """

    def __init__(self, ax, data_limits: Optional[Tuple[float, float, float, float]] = None,
                 zoom_step: float = 1.05, scroll_amount: int = 3):
        """
        Initialize the controller.

        Args:
            ax: Map axes
            data_limits: (x_min, x_max, y_min, y_max) of the home view,
                the current axes limits when None
            zoom_step: Zoom factor per scrolled line
            scroll_amount: Lines per wheel notch
        """
        self.ax = ax
        self.zoom_step = zoom_step
        self.scroll_amount = scroll_amount
        self.state = ViewState()
        if data_limits is None:
            (x_min, x_max), (y_min, y_max) = ax.get_xlim(), ax.get_ylim()
            data_limits = (x_min, x_max, y_min, y_max)
        self.data_limits = data_limits
        self._cids: List[int] = []

    def connect(self) -> None:
        """Connect to the canvas events of the axes' figure."""
        canvas = self.ax.figure.canvas
        self._cids = [
            canvas.mpl_connect('scroll_event', self.on_scroll),
            canvas.mpl_connect('button_press_event', self.on_press),
            canvas.mpl_connect('motion_notify_event', self.on_motion),
            canvas.mpl_connect('button_release_event', self.on_release),
            canvas.mpl_connect('resize_event', self.on_resize),
        ]

    def disconnect(self) -> None:
        canvas = self.ax.figure.canvas
        for cid in self._cids:
            canvas.mpl_disconnect(cid)
        self._cids = []

    def axes_fraction(self, event) -> Optional[Tuple[float, float]]:
        """Pointer position as a fraction of the axes size, None if outside."""
        if event.x is None or event.y is None:
            return None
        bbox = self.ax.bbox
        if not (bbox.x0 < event.x < bbox.x1 and bbox.y0 < event.y < bbox.y1):
            return None
        return (event.x - bbox.x0) / bbox.width, (event.y - bbox.y0) / bbox.height

    def _set_limits(self, xlim: Limits, ylim: Limits) -> None:
        self.ax.set_xlim(*xlim)
        self.ax.set_ylim(*ylim)
        self.ax.figure.canvas.draw_idle()

    def on_scroll(self, event) -> None:
        """Zoom around the pointer."""
        if event.inaxes is not self.ax:
            return
        fraction = self.axes_fraction(event)
        if fraction is None:
            return
        # Scrolling up (positive step) zooms in
        factor = scroll_factor(-event.step * self.scroll_amount, self.zoom_step)
        xlim, ylim = zoom_limits(self.ax.get_xlim(), self.ax.get_ylim(),
                                 fraction[0], fraction[1], factor)
        self._set_limits(xlim, ylim)
        self.state.factor *= factor

    def on_press(self, event) -> None:
        """Start panning on a left click, reset the zoom on a double-click."""
        if event.inaxes is not self.ax:
            return
        if event.dblclick:
            self.reset()
            return
        if event.button != 1:
            return
        xlim = self.ax.get_xlim()
        self.state.panning = True
        self.state.units_per_pixel = (xlim[1] - xlim[0]) / self.ax.bbox.width
        self.state.pan_xlim = tuple(xlim)
        self.state.pan_ylim = tuple(self.ax.get_ylim())
        self.state.pan_origin = (event.x, event.y)

    def on_motion(self, event) -> None:
        """Move the view along with the pointer while panning."""
        if not self.state.panning or event.x is None or event.y is None:
            return
        dx = (self.state.pan_origin[0] - event.x) * self.state.units_per_pixel
        dy = (self.state.pan_origin[1] - event.y) * self.state.units_per_pixel
        xlim, ylim = self.state.pan_xlim, self.state.pan_ylim
        self._set_limits((xlim[0] + dx, xlim[1] + dx), (ylim[0] + dy, ylim[1] + dy))

    def on_release(self, event) -> None:
        self.state.panning = False

    def on_resize(self, event=None) -> None:
        """Recompute the home view and apply the current zoom."""
        bbox = self.ax.bbox
        if bbox.width <= 0 or bbox.height <= 0:
            return
        if self.state.home_xlim is None:
            x_min, x_max, y_min, y_max = self.data_limits
            center = ((x_min + x_max) / 2, (y_min + y_max) / 2)
        else:
            xlim, ylim = self.ax.get_xlim(), self.ax.get_ylim()
            center = ((xlim[0] + xlim[1]) / 2, (ylim[0] + ylim[1]) / 2)

        x_min, x_max, y_min, y_max = self.data_limits
        home_xlim, home_ylim = fit_to_aspect((x_min, x_max), (y_min, y_max),
                                             bbox.width, bbox.height)
        self.state.home_xlim, self.state.home_ylim = home_xlim, home_ylim

        xlim, ylim = centered_limits(center, home_xlim, home_ylim, self.state.factor)
        self._set_limits(xlim, ylim)
        logger.debug(f"Home view {home_xlim}, {home_ylim} at zoom {self.state.factor:.3f}")

    def reset(self) -> None:
        """Return to the home view."""
        if self.state.home_xlim is None:
            self.on_resize()
        self.state.factor = 1.0
        if self.state.home_xlim is not None:
            self._set_limits(self.state.home_xlim, self.state.home_ylim)
