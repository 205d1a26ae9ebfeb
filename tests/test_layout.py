import pytest

from minestake.constants import FOOTER_HEIGHT, HEADER_HEIGHT
from minestake.events.bus import EventBus, EVENT_CELL_CLICK, EVENT_MOUSE_PRESS
from minestake.ui.input_system import BoardInputSystem
from minestake.ui.layout import compute_board_geometry


def test_board_fits_between_header_and_footer():
    geometry = compute_board_geometry(480, 720, 5, 5)
    assert geometry.left >= 0
    assert geometry.left + geometry.width <= 480
    assert geometry.bottom >= FOOTER_HEIGHT
    assert geometry.bottom + geometry.height <= 720 - HEADER_HEIGHT
    assert geometry.left == pytest.approx((480 - geometry.width) / 2)


@pytest.mark.parametrize("row,col", [(0, 0), (0, 4), (2, 3), (4, 0), (4, 4)])
def test_cell_center_maps_back_to_same_cell(row, col):
    geometry = compute_board_geometry(480, 720, 5, 5)
    x, y = geometry.cell_center(row, col)
    assert geometry.cell_at_point(x, y) == (row, col)


def test_row_zero_is_drawn_at_the_top():
    geometry = compute_board_geometry(480, 720, 5, 5)
    _, top_y = geometry.cell_center(0, 0)
    _, bottom_y = geometry.cell_center(4, 0)
    assert top_y > bottom_y


def test_points_outside_board_or_in_gaps_miss():
    geometry = compute_board_geometry(480, 720, 5, 5)
    assert geometry.cell_at_point(geometry.left - 1, geometry.bottom + 10) is None
    assert geometry.cell_at_point(geometry.left + 10, geometry.bottom + geometry.height + 1) is None
    # Exactly on the boundary between two columns lies in the gap.
    boundary_x = geometry.left + geometry.cell_size
    _, y = geometry.cell_center(2, 0)
    assert geometry.cell_at_point(boundary_x, y) is None


def test_tiny_window_keeps_minimum_cell_size():
    geometry = compute_board_geometry(50, 50, 10, 10)
    assert geometry.cell_size == 20


def test_input_system_emits_cell_click_for_left_button_only():
    bus = EventBus()
    geometry = compute_board_geometry(480, 720, 5, 5)
    system = BoardInputSystem(bus, lambda: geometry)
    clicks: list[tuple[int, int]] = []
    bus.subscribe(EVENT_CELL_CLICK, lambda sender, **p: clicks.append((p["row"], p["col"])))

    x, y = geometry.cell_center(1, 2)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=4)
    bus.emit(EVENT_MOUSE_PRESS, x=0, y=0, button=1)
    assert clicks == [(1, 2)]

    system.enabled = False
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert clicks == [(1, 2)]


def test_input_system_ignores_presses_without_board():
    bus = EventBus()
    BoardInputSystem(bus, lambda: None)
    clicks: list = []
    bus.subscribe(EVENT_CELL_CLICK, lambda sender, **p: clicks.append(p))
    bus.emit(EVENT_MOUSE_PRESS, x=10, y=10, button=1)
    assert clicks == []
