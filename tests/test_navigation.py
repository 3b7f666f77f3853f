from types import SimpleNamespace

import matplotlib.pyplot as plt
import pytest

from dante_viewer.visualization.navigation import (
    PanZoomController,
    centered_limits,
    fit_to_aspect,
    scroll_factor,
    zoom_limits,
)


def mouse(ax, x, y, **kwargs):
    values = dict(inaxes=ax, x=x, y=y, button=1, dblclick=False, step=0)
    values.update(kwargs)
    return SimpleNamespace(**values)


@pytest.fixture
def controller():
    fig = plt.figure(figsize=(4, 4), dpi=100)
    ax = fig.add_axes([0, 0, 1, 1])
    controller = PanZoomController(ax, (0, 10, 0, 10), zoom_step=1.05, scroll_amount=3)
    controller.on_resize()
    return controller


def test_zoom_keeps_anchor_in_place():
    xlim, ylim = zoom_limits((0, 10), (0, 20), 0.25, 0.5, 2.0)
    assert xlim == pytest.approx((-2.5, 17.5))
    assert ylim == pytest.approx((-10, 30))
    # The anchor is at the same fraction of the new limits
    assert (2.5 - xlim[0]) / (xlim[1] - xlim[0]) == pytest.approx(0.25)


def test_scroll_factor():
    assert scroll_factor(3, 1.05) == pytest.approx(1.05 ** 3)
    assert scroll_factor(-3, 1.05) == pytest.approx((1 / 1.05) ** 3)
    assert scroll_factor(0, 1.05) == 1.0


def test_fit_to_aspect_widens_the_short_range():
    xlim, ylim = fit_to_aspect((0, 10), (0, 10), 200, 100)
    assert xlim == pytest.approx((-5, 15))
    assert ylim == pytest.approx((0, 10))

    xlim, ylim = fit_to_aspect((0, 20), (0, 10), 100, 100)
    assert xlim == pytest.approx((0, 20))
    assert ylim == pytest.approx((-5, 15))


def test_centered_limits():
    xlim, ylim = centered_limits((1, 2), (0, 10), (0, 4), 0.5)
    assert xlim == pytest.approx((-1.5, 3.5))
    assert ylim == pytest.approx((1, 3))


def test_resize_sets_home_view(controller):
    assert controller.state.home_xlim == pytest.approx((0, 10))
    assert controller.ax.get_xlim() == pytest.approx((0, 10))
    assert controller.ax.get_ylim() == pytest.approx((0, 10))


def test_scroll_up_zooms_in_around_pointer(controller):
    ax = controller.ax
    controller.on_scroll(mouse(ax, 100, 200, step=1))

    factor = 1.05 ** -3
    assert controller.state.factor == pytest.approx(factor)
    xlim = ax.get_xlim()
    assert xlim[1] - xlim[0] == pytest.approx(10 * factor)
    # The pointer is a quarter into the axes, at x = 2.5
    assert xlim[0] + 0.25 * (xlim[1] - xlim[0]) == pytest.approx(2.5)


def test_scroll_outside_axes_is_ignored(controller):
    controller.on_scroll(mouse(None, 100, 200, step=1))
    assert controller.state.factor == 1.0


def test_drag_pans_the_view(controller):
    ax = controller.ax
    controller.on_press(mouse(ax, 200, 200))
    assert controller.state.panning

    controller.on_motion(mouse(ax, 240, 180))
    assert ax.get_xlim() == pytest.approx((-1, 9))
    assert ax.get_ylim() == pytest.approx((0.5, 10.5))

    controller.on_release(mouse(ax, 240, 180))
    controller.on_motion(mouse(ax, 300, 300))
    assert ax.get_xlim() == pytest.approx((-1, 9))


def test_right_click_does_not_pan(controller):
    controller.on_press(mouse(controller.ax, 200, 200, button=3))
    assert not controller.state.panning


def test_double_click_resets_zoom(controller):
    ax = controller.ax
    controller.on_scroll(mouse(ax, 100, 100, step=2))
    controller.on_press(mouse(ax, 100, 100, dblclick=True))

    assert controller.state.factor == 1.0
    assert ax.get_xlim() == pytest.approx((0, 10))
    assert ax.get_ylim() == pytest.approx((0, 10))


def test_resize_keeps_zoom_and_centre(controller):
    ax = controller.ax
    controller.on_scroll(mouse(ax, 100, 100, step=-1))
    xlim, ylim = ax.get_xlim(), ax.get_ylim()
    center = ((xlim[0] + xlim[1]) / 2, (ylim[0] + ylim[1]) / 2)

    ax.figure.set_size_inches(8, 4)
    controller.on_resize()

    factor = controller.state.factor
    assert controller.state.home_xlim == pytest.approx((-5, 15))
    new_xlim, new_ylim = ax.get_xlim(), ax.get_ylim()
    assert new_xlim[1] - new_xlim[0] == pytest.approx(20 * factor)
    assert new_ylim[1] - new_ylim[0] == pytest.approx(10 * factor)
    assert ((new_xlim[0] + new_xlim[1]) / 2) == pytest.approx(center[0])
