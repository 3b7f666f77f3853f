"""
Text panels showing information about network elements.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from ..config.viewer_config import ViewerConfig
from ..data.element_access import (
    ElementCategory,
    direct_attributes,
    element_hash,
    element_label,
    format_attribute,
    instance_of,
    iter_connection_targets,
    qualified_class_name,
)
from ..data.geometry import link_length
from ..data.properties import is_time_series, property_rows

logger = logging.getLogger(__name__)

SELECTION_COLOR = '#cce4ff'


@dataclass
class InfoLine:
    """A line of panel text, optionally pointing at a property or element."""

    text: str
    target: Any = None


def describe_element(element: Any, config: Optional[ViewerConfig] = None) -> List[InfoLine]:
    """
    Describe an element for display in an info panel.

    Lines about time-series properties point at the property, lines about
    connections point at the connected element.

    Args:
        element: Network element
        config: Viewer configuration (class packages)

    Returns:
        Panel lines: hash, class, link length, direct attributes,
        properties and connections
    """
    config = config or ViewerConfig()
    lines = [
        InfoLine(f"Element Hash: {element_hash(element)}"),
        InfoLine(f"Element Class: {qualified_class_name(element)}"),
    ]
    if instance_of(element, config.graph_class(ElementCategory.LINK.class_name)):
        lines.append(InfoLine(f"Link length = {link_length(element):g}m"))
    lines.append(InfoLine(''))

    lines.append(InfoLine('Direct attributes:'))
    for name, value in direct_attributes(element):
        lines.append(InfoLine(f"({name}) {format_attribute(value)}"))
    lines.append(InfoLine(''))

    lines.append(InfoLine('Properties:'))
    for text, prop in property_rows(element):
        target = prop if prop is not None and is_time_series(prop, config.property_package) else None
        lines.append(InfoLine(text, target))
    lines.append(InfoLine(''))

    lines.append(InfoLine('Connections:'))
    for target in iter_connection_targets(element):
        lines.append(InfoLine(element_label(target), target))

    return lines


class InfoPanel:
    """
    A scrollable, selectable list of text lines drawn in an axes.
    """

    def __init__(self, ax, config: Optional[ViewerConfig] = None, placeholder: str = ''):
        """
        Initialize the panel.

        Args:
            ax: Axes to draw the panel in
            config: Viewer configuration (font and row count)
            placeholder: Text shown before any content is set
        """
        self.ax = ax
        self.config = config or ViewerConfig()
        self.lines: List[InfoLine] = []
        self.selected = 0
        self.offset = 0
        self._texts = []

        ax.set_xticks([])
        ax.set_yticks([])
        ax.set_xlim(0, 1)
        ax.set_ylim(0, 1)
        ax.set_facecolor('white')
        ax.set_navigate(False)

        self.set_lines([InfoLine(placeholder)] if placeholder else [])

    @property
    def rows(self) -> int:
        return self.config.panel_visible_rows

    def set_lines(self, lines: List[InfoLine]) -> None:
        """Replace the content and select the first line."""
        self.lines = list(lines)
        self.selected = 0
        self.offset = 0
        self.redraw()

    def set_text(self, texts: List[str]) -> None:
        self.set_lines([InfoLine(text) for text in texts])

    def clear(self) -> None:
        self.set_lines([])

    def texts(self) -> List[str]:
        return [line.text for line in self.lines]

    def target(self, index: int) -> Any:
        """Target of a line, None for plain text or an invalid index."""
        if 0 <= index < len(self.lines):
            return self.lines[index].target
        return None

    def select(self, index: int) -> None:
        if 0 <= index < len(self.lines):
            self.selected = index
            self.redraw()

    def scroll(self, steps: int) -> None:
        """Scroll by a number of lines, positive scrolls down."""
        max_offset = max(0, len(self.lines) - self.rows)
        offset = min(max(0, self.offset + steps), max_offset)
        if offset != self.offset:
            self.offset = offset
            self.redraw()

    def row_at(self, event) -> Optional[int]:
        """Line index under a mouse event, None outside the panel or below the last line."""
        if event.inaxes is not self.ax or event.x is None or event.y is None:
            return None
        _, y = self.ax.transAxes.inverted().transform((event.x, event.y))
        row = int((1 - y) * self.rows)
        index = self.offset + row
        if 0 <= row < self.rows and index < len(self.lines):
            return index
        return None

    def redraw(self) -> None:
        for text in self._texts:
            text.remove()
        self._texts = []

        row_height = 1.0 / self.rows
        for row, line in enumerate(self.lines[self.offset:self.offset + self.rows]):
            index = self.offset + row
            bbox = None
            if index == self.selected:
                bbox = dict(boxstyle='square,pad=0.1', facecolor=SELECTION_COLOR, edgecolor='none')
            text = self.ax.text(
                0.01, 1 - (row + 0.5) * row_height, line.text,
                transform=self.ax.transAxes,
                fontfamily=self.config.panel_font,
                fontsize=self.config.panel_font_size,
                verticalalignment='center',
                clip_on=True,
                bbox=bbox,
            )
            self._texts.append(text)

        self.ax.figure.canvas.draw_idle()
