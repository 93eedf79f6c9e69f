from dataclasses import replace

import pytest

from tetris_config import CONFIG
from tetris_grid import empty_grid
from tetris_input import Button, Command
from tetris_rng import ScriptedRandomizer
from tetris_session import GameSession, Phase
from tetris_shapes import Kind
from tetris_state import ActivePiece


class FakeMusic:
    def __init__(self):
        self.calls = []
        self.volume = None

    def play(self):
        self.calls.append("play")

    def pause(self):
        self.calls.append("pause")

    def set_volume(self, percent):
        self.volume = percent


@pytest.fixture
def music():
    return FakeMusic()


@pytest.fixture
def session(music):
    return GameSession(ScriptedRandomizer([Kind.T, Kind.O, Kind.T, Kind.O, Kind.I], seed=5), music)


def test_starts_on_title_and_ignores_moves(session):
    before = session.state
    session.press(Button.LEFT)
    session.tick(5000)
    assert session.phase == Phase.TITLE
    assert session.state is before


def test_start_begins_play_and_music(session, music):
    session.press(Button.START)
    assert session.phase == Phase.PLAYING
    assert music.calls[-1] == "play"
    assert music.volume == CONFIG["VOLUME"]
    assert session.state.current.kind == Kind.T


def test_sound_disabled_keeps_music_paused(session, music):
    CONFIG["SOUND_ENABLED"] = False
    session.press(Button.START)
    assert "play" not in music.calls


def test_buttons_map_to_commands(session):
    session.start()
    session.press(Button.LEFT)
    assert session.state.current.x == 2
    session.press(Button.RIGHT)
    session.press(Button.RIGHT)
    assert session.state.current.x == 4
    session.press(Button.A)
    assert session.state.current.rotation == 1
    session.press(Button.UP)
    assert session.state.current.rotation == 2
    session.press(Button.DOWN)
    assert session.state.current.y == 1
    session.press(Button.B)
    assert session.state.current.kind == Kind.O


def test_apply_reports_rejection(session):
    session.start()
    session.state = replace(session.state, current=ActivePiece(Kind.O, 0, 0, 5))
    assert session.apply(Command.MOVE_LEFT) is False
    assert session.apply(Command.MOVE_RIGHT) is True


def test_pause_withholds_gravity_and_moves(session, music):
    session.start()
    session.press(Button.START)
    assert session.phase == Phase.PAUSED
    assert session.state.paused
    assert music.calls[-1] == "pause"

    frozen = session.state
    session.press(Button.LEFT)
    session.press(Button.B)
    session.tick(10_000)
    assert session.state is frozen

    session.press(Button.START)
    assert session.phase == Phase.PLAYING
    assert not session.state.paused
    assert music.calls[-1] == "play"


def test_gravity_drops_after_interval(session):
    session.start()
    session.tick(1000)
    assert session.state.current.y == 0
    session.tick(1)
    assert session.state.current.y == 1
    session.tick(500)
    assert session.state.current.y == 1


def test_gravity_speeds_up_with_level(session):
    session.start()
    session.state = replace(session.state, level=5)
    session.tick(601)
    assert session.state.current.y == 1


def test_game_over_stops_play(music):
    over_calls = []
    session = GameSession(ScriptedRandomizer([Kind.O, Kind.T, Kind.T, Kind.I, Kind.J]), music,
                          on_game_over=lambda: over_calls.append(True))
    session.start()
    rows = [list(r) for r in empty_grid()]
    for x in range(3, 7):
        rows[1][x] = 4
    session.state = replace(session.state, grid=tuple(tuple(r) for r in rows),
                            current=ActivePiece(Kind.O, 0, 0, 18))

    session.press(Button.B)
    assert session.state.game_over
    assert session.phase == Phase.GAMEOVER
    assert over_calls == [True]
    assert music.calls[-1] == "pause"

    session.tick(5000)
    session.press(Button.LEFT)
    assert session.phase == Phase.GAMEOVER

    session.press(Button.START)
    assert session.phase == Phase.PLAYING
    assert not session.state.game_over
    assert session.state.grid == empty_grid()


def test_score_listener(music):
    scores = []
    session = GameSession(ScriptedRandomizer([Kind.I, Kind.T, Kind.T]), music, on_score=scores.append)
    session.start()
    rows = [list(r) for r in empty_grid()]
    for x in range(4, 10):
        rows[19][x] = 7
    session.state = replace(session.state, grid=tuple(tuple(r) for r in rows),
                            current=ActivePiece(Kind.I, 0, 0, 0))
    session.press(Button.B)
    assert scores == [40]
