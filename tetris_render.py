"""
Rendering helpers for the handheld Tetris.

- The device skin (body, bezel, d-pad, buttons) is pre-rendered once per Dims.
- The LCD is redrawn every frame from the session: grid + active piece,
  HUD, next preview, or the title / paused / game over screen.
- display_matrix() and preview_cells() are pure so they can be tested
  without a display.
"""
from __future__ import annotations
import pygame
from typing import Dict, List, Tuple
from tetris_config import CONFIG
from tetris_grid import EMPTY, landing_row
from tetris_layout import Dims, cell_origin
from tetris_session import Phase
from tetris_shapes import Kind, cells
from tetris_state import GameState, NextPiece

Color = Tuple[int, int, int]


def hex_color(h: str) -> Color:
    h = h.lstrip("#")
    return tuple(int(h[i:i + 2], 16) for i in (0, 2, 4))


PALETTES: Dict[str, Dict[str, Color]] = {
    "classic": {
        "background": hex_color("#9bbc0f"),
        "foreground": hex_color("#0f380f"),
        "border": hex_color("#0f380f"),
        "block": hex_color("#0f380f"),
        "screen": hex_color("#8bac0f"),
    },
    "blackwhite": {
        "background": hex_color("#e0e0e0"),
        "foreground": (0, 0, 0),
        "border": (0, 0, 0),
        "block": (0, 0, 0),
        "screen": hex_color("#c0c0c0"),
    },
    "blue": {
        "background": hex_color("#8ba5ff"),
        "foreground": hex_color("#00238b"),
        "border": hex_color("#00238b"),
        "block": hex_color("#00238b"),
        "screen": hex_color("#7b95ef"),
    },
    "red": {
        "background": hex_color("#ff9b9b"),
        "foreground": hex_color("#8b0000"),
        "border": hex_color("#8b0000"),
        "block": hex_color("#8b0000"),
        "screen": hex_color("#ef7b7b"),
    },
}

# Per-kind colours for every palette except classic
COLORS: Dict[Kind, Color] = {
    Kind.I: (6, 182, 212),
    Kind.O: (250, 204, 21),
    Kind.T: (168, 85, 247),
    Kind.L: (249, 115, 22),
    Kind.J: (59, 130, 246),
    Kind.S: (34, 197, 94),
    Kind.Z: (239, 68, 68),
}

BODY = (224, 224, 192)
BODY_EDGE = (160, 160, 136)
BEZEL = (96, 96, 96)
INK = (64, 64, 64)


def block_color(palette: str, value: int) -> Color:
    if palette == "classic":
        return PALETTES["classic"]["block"]
    return COLORS[Kind(value)]


def display_matrix(state: GameState) -> List[List[int]]:
    """Grid copy with the active piece written in. Cells above the top are dropped."""
    out = [list(row) for row in state.grid]
    p = state.current
    for cx, cy in cells(p.shape):
        bx, by = p.x + cx, p.y + cy
        if 0 <= by < len(out) and 0 <= bx < len(out[0]):
            out[by][bx] = int(p.kind)
    return out


def preview_cells(piece: NextPiece, box: int = 4) -> List[Tuple[int, int]]:
    """(col, row) cells of the next piece centred in a box x box preview."""
    shape = piece.shape
    offx = (box - len(shape[0])) // 2
    offy = (box - len(shape)) // 2
    return [(x + offx, y + offy) for x, y in cells(shape)]


def ghost_cells(state: GameState) -> List[Tuple[int, int]]:
    p = state.current
    gy = landing_row(state.grid, p.shape, p.x, p.y)
    return [(p.x + cx, gy + cy) for cx, cy in cells(p.shape) if gy + cy >= 0]


class RenderAssets:
    """Holds the pre-rendered skin and fonts for one Dims."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_skin()

    # ---------- Static skin ----------
    def _make_skin(self):
        d = self.dims
        self.skin = pygame.Surface((d.device_w, d.device_h))
        self.skin.fill((243, 244, 246))
        body = pygame.Rect(0, 0, d.device_w, d.device_h)
        radius = max(4, int(20 * d.scale))
        pygame.draw.rect(self.skin, BODY, body, border_radius=radius)
        pygame.draw.rect(self.skin, BODY_EDGE, body, max(1, int(4 * d.scale)), border_radius=radius)
        pygame.draw.rect(self.skin, BEZEL, pygame.Rect(d.bezel), border_radius=max(2, int(8 * d.scale)))

        title = self.font.render("GAME BOY", True, (51, 51, 51))
        self.skin.blit(title, title.get_rect(center=(d.device_w // 2, d.bezel[1] // 2)))

        # D-pad
        cx, cy, arm = d.dpad
        w = max(2, arm * 2 // 3)
        pygame.draw.rect(self.skin, INK, (cx - w // 2, cy - arm, w, arm * 2))
        pygame.draw.rect(self.skin, INK, (cx - arm, cy - w // 2, arm * 2, w))

        # A / B
        for label, (bx, by, r) in (("A", d.button_a), ("B", d.button_b)):
            pygame.draw.circle(self.skin, (139, 26, 74), (bx, by), r)
            t = self.font.render(label, True, (255, 255, 255))
            self.skin.blit(t, t.get_rect(center=(bx, by)))

        # Select / Start
        for label, rect in (("SELECT", d.select), ("START", d.start)):
            r = pygame.Rect(rect)
            pygame.draw.rect(self.skin, INK, r, border_radius=r.height // 2)
            t = self.font.render(label, True, INK)
            self.skin.blit(t, t.get_rect(midtop=(r.centerx, r.bottom + 2)))

    # ---------- LCD ----------
    def _text(self, screen, text, pos, color, big=False, anchor="center"):
        f = self.big_font if big else self.font
        s = f.render(text, True, color)
        screen.blit(s, s.get_rect(**{anchor: pos}))

    def draw(self, screen: pygame.Surface, session):
        """Draw the whole device for the session's current phase."""
        d = self.dims
        pal = PALETTES[CONFIG["PALETTE"]]
        screen.blit(self.skin, (0, 0))
        lcd = pygame.Rect(d.lcd)
        pygame.draw.rect(screen, pal["background"], lcd)
        pygame.draw.rect(screen, pal["screen"], lcd.inflate(-6, -6))

        fg = pal["foreground"]
        mid = (lcd.centerx, lcd.centery)
        state = session.state
        if session.phase == Phase.TITLE:
            self._text(screen, "TETRIS", (mid[0], mid[1] - 20), fg, big=True)
            self._text(screen, "PRESS START", (mid[0], mid[1] + 20), fg)
        elif session.phase == Phase.PAUSED:
            self._text(screen, "PAUSED", (mid[0], mid[1] - 20), fg, big=True)
            self._text(screen, "PRESS START TO CONTINUE", (mid[0], mid[1] + 20), fg)
        elif session.phase == Phase.GAMEOVER:
            self._text(screen, "GAME OVER", (mid[0], mid[1] - 30), fg, big=True)
            self._text(screen, f"SCORE: {state.score}", mid, fg)
            self._text(screen, "PRESS START", (mid[0], mid[1] + 30), fg)
        else:
            self.draw_board(screen, state, pal)
            self.draw_hud(screen, state, pal)

    def draw_board(self, screen: pygame.Surface, state: GameState, pal):
        d = self.dims
        c = d.cell
        pygame.draw.rect(screen, pal["border"], (d.board_x - 2, d.board_y - 2, d.board_w + 4, d.board_h + 4), 1)
        for bx, by in ghost_cells(state):
            x, y = cell_origin(d, bx, by)
            pygame.draw.rect(screen, pal["border"], (x + 2, y + 2, c - 4, c - 4), 1)
        for by, row in enumerate(display_matrix(state)):
            for bx, v in enumerate(row):
                if v != EMPTY:
                    x, y = cell_origin(d, bx, by)
                    pygame.draw.rect(screen, block_color(CONFIG["PALETTE"], v), (x + 1, y + 1, c - 1, c - 1))

    def draw_hud(self, screen: pygame.Surface, state: GameState, pal):
        d = self.dims
        fg = pal["foreground"]
        x, y = d.panel_x, d.panel_y
        step = self.font.get_linesize()
        for i, (label, value) in enumerate((("SCORE", f"{state.score:06d}"),
                                            ("LEVEL", str(state.level)),
                                            ("LINES", str(state.lines)))):
            self._text(screen, label, (x, y + i * step * 2), fg, anchor="topleft")
            self._text(screen, value, (x, y + i * step * 2 + step), fg, anchor="topleft")

        py = y + step * 7
        self._text(screen, "NEXT", (x, py), fg, anchor="topleft")
        pv = d.pv_cell
        box = pygame.Rect(x, py + step, pv * 4 + 4, pv * 4 + 4)
        pygame.draw.rect(screen, pal["border"], box, 1)
        color = block_color(CONFIG["PALETTE"], state.next_piece.kind)
        for cx, cy in preview_cells(state.next_piece):
            pygame.draw.rect(screen, color, (box.x + 2 + cx * pv, box.y + 2 + cy * pv, pv - 1, pv - 1))
