from tetris_grid import COLS, ROWS
from tetris_layout import button_at, cell_origin, compute_dims


def test_scale_applies_to_device_and_cells():
    d100 = compute_dims(100)
    d200 = compute_dims(200)
    assert (d100.device_w, d100.device_h) == (400, 650)
    assert (d200.device_w, d200.device_h) == (800, 1300)
    assert d100.board_w == COLS * d100.cell
    assert d200.cell == 2 * d100.cell


def test_board_fits_inside_lcd():
    for scale in (50, 100, 150, 200):
        d = compute_dims(scale)
        lx, ly, lw, lh = d.lcd
        assert lx <= d.board_x and d.board_x + d.board_w <= lx + lw
        assert ly <= d.board_y and d.board_y + ROWS * d.cell <= ly + lh


def test_cell_origin():
    d = compute_dims(100)
    assert cell_origin(d, 0, 0) == (d.board_x, d.board_y)
    assert cell_origin(d, 2, 3) == (d.board_x + 2 * d.cell, d.board_y + 3 * d.cell)


def test_button_hit_testing():
    d = compute_dims(100)
    cx, cy, arm = d.dpad
    assert button_at(d, cx, cy - arm + 1) == "up"
    assert button_at(d, cx, cy + arm - 1) == "down"
    assert button_at(d, cx - arm + 1, cy) == "left"
    assert button_at(d, cx + arm - 1, cy) == "right"
    assert button_at(d, *d.button_a[:2]) == "a"
    assert button_at(d, *d.button_b[:2]) == "b"
    sx, sy, sw, sh = d.start
    assert button_at(d, sx + 1, sy + 1) == "start"
    assert button_at(d, 5, 5) is None
