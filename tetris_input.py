"""Input surface: keys and handheld buttons -> buttons, held-key auto-repeat"""
from enum import Enum
import pygame
from tetris_config import CONFIG


class Button(str, Enum):
    """Handheld buttons. Keyboard keys are mapped onto these."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    A = "a"
    B = "b"
    START = "start"
    SELECT = "select"


class Command(str, Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE = "rotate"
    HARD_DROP = "hard_drop"
    PAUSE = "pause"


# While playing. START is handled by the session since its meaning depends on the phase.
PLAY_COMMANDS = {
    Button.LEFT: Command.MOVE_LEFT,
    Button.RIGHT: Command.MOVE_RIGHT,
    Button.DOWN: Command.SOFT_DROP,
    Button.UP: Command.ROTATE,
    Button.A: Command.ROTATE,
    Button.B: Command.HARD_DROP,
}

KEY_BINDINGS = {
    pygame.K_LEFT: Button.LEFT,
    pygame.K_RIGHT: Button.RIGHT,
    pygame.K_DOWN: Button.DOWN,
    pygame.K_UP: Button.UP,
    pygame.K_z: Button.A,
    pygame.K_SPACE: Button.B,
    pygame.K_p: Button.START,
    pygame.K_RETURN: Button.START,
    pygame.K_RSHIFT: Button.SELECT,
}


def button_for_key(key):
    return KEY_BINDINGS.get(key)


class ShiftRepeat:
    """
    Auto-repeat for held left/right.

    The first press is delivered by the KEYDOWN event itself, so update()
    only emits repeats: one step when DAS_MS is reached, then one step
    every ARR_MS (every call when ARR_MS is 0). Switching or releasing
    resets the timers.
    """
    def __init__(self):
        self.dir = 0
        self.held_ms = 0
        self.since_step = 0
        self.repeating = False

    def update(self, dt, left, right):
        nd = (-1 if left else 0) + (1 if right else 0)
        if nd != self.dir:
            self.dir = nd; self.held_ms = 0; self.since_step = 0; self.repeating = False
        if self.dir == 0:
            return None
        button = Button.LEFT if self.dir < 0 else Button.RIGHT
        self.held_ms += dt
        if self.held_ms < CONFIG["DAS_MS"]:
            return None
        if not self.repeating:
            self.repeating = True
            self.since_step = 0
            return button
        arr = CONFIG["ARR_MS"]
        if arr == 0:
            return button
        self.since_step += dt
        if self.since_step >= arr:
            self.since_step = 0
            return button
        return None
