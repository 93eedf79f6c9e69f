import pygame
from tetris_config import CONFIG, PALETTE_NAMES, set_option


class Overlay:
    """Options panel (F1). Cosmetic settings only: nothing here changes the rules."""
    def __init__(self):
        self.active = False
        self.items = [
            ("PALETTE", "Palette", PALETTE_NAMES, None, None),
            ("SCREEN_SCALE", "Screen size %", 50, 200, 10),
            ("VOLUME", "Volume %", 0, 100, 10),
            ("SOUND_ENABLED", "Sound", False, True, None),
        ]
        self.index = 0

    def toggle(self): self.active = not self.active

    def handle(self, e):
        """Apply one KEYDOWN. Returns the option key that changed, if any."""
        if e.key in (pygame.K_ESCAPE, pygame.K_F1): self.toggle(); return None
        if e.key == pygame.K_UP: self.index = (self.index - 1) % len(self.items); return None
        if e.key == pygame.K_DOWN: self.index = (self.index + 1) % len(self.items); return None
        key, label, lo, hi, step = self.items[self.index]
        val = CONFIG[key]
        if isinstance(lo, tuple):
            delta = {pygame.K_LEFT: -1, pygame.K_RIGHT: 1}.get(e.key)
            if delta is None: return None
            set_option(key, lo[(lo.index(val) + delta) % len(lo)])
        elif isinstance(lo, bool):
            if e.key not in (pygame.K_RETURN, pygame.K_LEFT, pygame.K_RIGHT): return None
            set_option(key, not val)
        else:
            if e.key == pygame.K_LEFT: set_option(key, max(lo, val - step))
            elif e.key == pygame.K_RIGHT: set_option(key, min(hi, val + step))
            else: return None
        return key

    def lines(self):
        out = []
        for i, (key, label, lo, hi, step) in enumerate(self.items):
            v = CONFIG[key]
            if isinstance(v, bool): v = "on" if v else "off"
            out.append(("> " if i == self.index else "  ") + f"{label}: {v}")
        return out

    def draw(self, screen, font, w, h):
        if not self.active: return
        s = pygame.Surface((w - 80, h - 80), pygame.SRCALPHA); s.fill((20, 25, 40, 230))
        screen.blit(s, (40, 40))
        screen.blit(font.render("OPTIONS (F1/Esc to close)", True, (230, 240, 255)), (60, 60))
        y = 100
        for i, txt in enumerate(self.lines()):
            col = (255, 255, 255) if i == self.index else (200, 210, 235)
            screen.blit(font.render(txt, True, col), (60, y)); y += 30
