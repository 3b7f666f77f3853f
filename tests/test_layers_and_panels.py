from types import SimpleNamespace

import matplotlib.pyplot as plt
import pytest
from matplotlib.backend_bases import MouseEvent
from matplotlib.colors import to_rgb

from dante_viewer.visualization.info_panel import InfoLine, InfoPanel, describe_element
from dante_viewer.visualization.layers import LAYER_LABELS, draw_element, draw_network

from conftest import GRAPH


@pytest.fixture
def ax():
    fig = plt.figure()
    return fig.add_subplot()


def click(ax, fx, fy):
    x, y = ax.transAxes.transform((fx, fy))
    return MouseEvent('button_press_event', ax.figure.canvas, x, y, button=1)


def test_draw_network_fills_every_layer(ax, network):
    layers = draw_network(ax, network)
    assert list(layers.artists) == list(LAYER_LABELS)
    assert layers.counts() == {'l': 2, 'n': 1, 'r': 1, 'o': 1, 'c': 3, 'd': 1, 'p': 1}
    assert len(layers.elements) == 10


def test_link_style_follows_lane_count(ax, elements):
    _, link = draw_element(ax, elements['L1'])
    assert link.get_linewidth() == 2
    assert to_rgb(link.get_color()) == (0, 0, 1)

    _, unknown = draw_element(ax, elements['L2'])
    assert unknown.get_linewidth() == 1
    assert to_rgb(unknown.get_color()) == (1, 0, 0)


def test_lines_split_into_ramps_and_others(ax, elements):
    key, ramp = draw_element(ax, elements['R1'])
    assert key == 'r'
    assert ramp.get_linestyle() == ':'
    assert to_rgb(ramp.get_color()) == (0, 1, 0)

    key, other = draw_element(ax, elements['O1'])
    assert key == 'o'
    assert to_rgb(other.get_color()) == (1, 0, 0)


def test_detector_colour_shows_link_connection(ax, elements):
    _, linked = draw_element(ax, elements['C1'])
    _, loose = draw_element(ax, elements['C2'])
    assert to_rgb(linked.get_color()) == (0.5, 0, 0)
    assert to_rgb(loose.get_color()) == (1, 0, 0)
    assert linked.get_marker() == 's'


def test_elements_have_click_radius_and_layers(ax, elements):
    _, point = draw_element(ax, elements['P1'])
    _, link = draw_element(ax, elements['L1'])
    assert point.get_pickradius() == 5
    assert point.get_zorder() > link.get_zorder()


def test_layer_visibility(ax, network):
    layers = draw_network(ax, network)
    layers.set_visible('c', False)
    assert not layers.is_visible('c')
    assert all(not artist.get_visible() for artist in layers.artists['c'])
    assert layers.is_visible('l')


def test_describe_link(elements):
    lines = describe_element(elements['L1'])
    texts = [line.text for line in lines]
    assert texts[:3] == ['Element Hash: L1', f'Element Class: {GRAPH}.ELink', 'Link length = 5m']
    assert texts[3:7] == ['', 'Direct attributes:', '(id) 1', '(geometry) Geometry[2 points]']
    assert texts[7:11] == ['', 'Properties:', '(0) NWBLink.nLanes: 2', '(1) ASM Speed: [288 values]']
    assert texts[11:] == ['', 'Connections:', 'ENode N1']

    # Time series and connections are clickable, scalars are not
    assert lines[9].target is None
    assert lines[10].target is elements['L1'].getProperty('ASM Speed')
    assert lines[13].target is elements['N1']


def test_describe_node_has_no_length(elements):
    texts = [line.text for line in describe_element(elements['N1'])]
    assert not any(text.startswith('Link length') for text in texts)
    assert texts[-2:] == ['Connections:', 'ELink L2']


def test_panel_selects_first_line_on_new_content(ax):
    panel = InfoPanel(ax, placeholder='Click on network item to obtain info')
    assert panel.texts() == ['Click on network item to obtain info']

    panel.set_lines([InfoLine('a'), InfoLine('b', target='x')])
    panel.select(1)
    assert panel.selected == 1
    assert panel.target(1) == 'x'

    panel.set_text(['c'])
    assert panel.selected == 0
    assert panel.target(5) is None

    panel.clear()
    assert panel.texts() == []


def test_panel_scrolls_within_content(ax, config):
    config.panel_visible_rows = 3
    panel = InfoPanel(ax, config)
    panel.set_text([str(i) for i in range(5)])

    panel.scroll(10)
    assert panel.offset == 2
    assert panel._texts[0].get_text() == '2'
    assert panel.row_at(click(ax, 0.5, 5 / 6)) == 2

    panel.scroll(-10)
    assert panel.offset == 0
    assert panel.row_at(click(ax, 0.5, 5 / 6)) == 0


def test_panel_rows_are_clickable_across_their_width(ax, config):
    config.panel_visible_rows = 3
    panel = InfoPanel(ax, config)
    panel.set_text(['a', ''])

    assert panel.row_at(click(ax, 0.95, 5 / 6)) == 0
    # Empty rows count as lines
    assert panel.row_at(click(ax, 0.5, 0.5)) == 1
    assert panel.row_at(click(ax, 0.5, 1 / 6)) is None
    assert panel.row_at(SimpleNamespace(inaxes=None, x=1, y=1)) is None
