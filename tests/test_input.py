import pygame

from tetris_config import CONFIG
from tetris_input import Button, Command, PLAY_COMMANDS, ShiftRepeat, button_for_key


def test_key_bindings():
    assert button_for_key(pygame.K_SPACE) == Button.B
    assert button_for_key(pygame.K_z) == Button.A
    assert button_for_key(pygame.K_p) == Button.START
    assert button_for_key(pygame.K_q) is None


def test_play_commands():
    assert PLAY_COMMANDS[Button.UP] == PLAY_COMMANDS[Button.A] == Command.ROTATE
    assert PLAY_COMMANDS[Button.B] == Command.HARD_DROP
    assert Button.START not in PLAY_COMMANDS


def test_shift_repeat_waits_for_das_then_repeats():
    CONFIG["DAS_MS"], CONFIG["ARR_MS"] = 170, 50
    s = ShiftRepeat()
    assert s.update(100, True, False) is None
    assert s.update(100, True, False) == Button.LEFT
    assert s.update(30, True, False) is None
    assert s.update(30, True, False) == Button.LEFT


def test_shift_repeat_resets_on_switch_and_release():
    CONFIG["DAS_MS"], CONFIG["ARR_MS"] = 100, 50
    s = ShiftRepeat()
    s.update(200, True, False)
    assert s.update(10, False, True) is None
    assert s.update(10, False, False) is None
    assert s.update(10, True, True) is None


def test_shift_repeat_zero_arr_steps_every_update():
    CONFIG["DAS_MS"], CONFIG["ARR_MS"] = 50, 0
    s = ShiftRepeat()
    s.update(60, False, True)
    assert [s.update(1, False, True) for _ in range(3)] == [Button.RIGHT] * 3
