# tetris_layout.py
from dataclasses import dataclass
from typing import Optional, Tuple
from tetris_config import CONFIG
from tetris_grid import COLS, ROWS

# Unscaled handheld geometry, in pixels at 100%
DEVICE_W, DEVICE_H = 400, 650
BASE_CELL = 13

Rect = Tuple[int, int, int, int]


@dataclass
class Dims:
    scale: float
    cell: int
    device_w: int
    device_h: int
    bezel: Rect
    lcd: Rect
    board_x: int
    board_y: int
    board_w: int
    board_h: int
    panel_x: int
    panel_y: int
    pv_cell: int
    dpad: Tuple[int, int, int]       # centre x, centre y, arm length
    button_a: Tuple[int, int, int]   # centre x, centre y, radius
    button_b: Tuple[int, int, int]
    select: Rect
    start: Rect


def compute_dims(scale_percent: Optional[int] = None) -> Dims:
    if scale_percent is None:
        scale_percent = CONFIG["SCREEN_SCALE"]
    s = scale_percent / 100

    def px(v):
        return max(1, round(v * s))

    cell = px(BASE_CELL)
    lcd = (px(60), px(95), px(280), px(290))
    board_x = lcd[0] + px(10)
    board_y = lcd[1] + px(15)
    board_w, board_h = COLS * cell, ROWS * cell
    panel_x = board_x + board_w + px(12)

    return Dims(
        scale=s, cell=cell,
        device_w=px(DEVICE_W), device_h=px(DEVICE_H),
        bezel=(px(40), px(70), px(320), px(330)),
        lcd=lcd,
        board_x=board_x, board_y=board_y, board_w=board_w, board_h=board_h,
        panel_x=panel_x, panel_y=board_y,
        pv_cell=max(4, cell * 3 // 4),
        dpad=(px(110), px(500), px(30)),
        button_a=(px(320), px(480), px(22)),
        button_b=(px(265), px(515), px(22)),
        select=(px(135), px(585), px(50), px(14)),
        start=(px(215), px(585), px(50), px(14)),
    )


def cell_origin(dims: Dims, bx: int, by: int) -> Tuple[int, int]:
    """Top-left pixel of board cell (bx, by)."""
    return dims.board_x + bx * dims.cell, dims.board_y + by * dims.cell


def button_at(dims: Dims, x: int, y: int) -> Optional[str]:
    """Which handheld button, if any, is under a pointer at (x, y)."""
    cx, cy, arm = dims.dpad
    half = max(1, arm // 3)
    if abs(x - cx) <= half and cy - arm <= y < cy - half:
        return "up"
    if abs(x - cx) <= half and cy + half < y <= cy + arm:
        return "down"
    if abs(y - cy) <= half and cx - arm <= x < cx - half:
        return "left"
    if abs(y - cy) <= half and cx + half < x <= cx + arm:
        return "right"
    for name, (bx, by, r) in (("a", dims.button_a), ("b", dims.button_b)):
        if (x - bx) ** 2 + (y - by) ** 2 <= r * r:
            return name
    for name, (rx, ry, rw, rh) in (("select", dims.select), ("start", dims.start)):
        if rx <= x < rx + rw and ry <= y < ry + rh:
            return name
    return None
