import logging

import pygame
import pytest

from tetris_audio import MusicPlayer


class FakeMixer:
    def __init__(self, fail_on=None):
        self.calls = []
        self.fail_on = fail_on

    def __getattr__(self, name):
        def call(*args):
            if name == self.fail_on:
                raise pygame.error(f"{name} failed")
            self.calls.append((name,) + args)
        return call


def test_first_play_loads_and_loops():
    mixer = FakeMixer()
    player = MusicPlayer("song.ogg", volume=50, mixer=mixer)
    player.play()
    assert mixer.calls == [("load", "song.ogg"), ("set_volume", 0.5), ("play", -1)]
    assert player.playing


def test_pause_then_resume_unpauses():
    mixer = FakeMixer()
    player = MusicPlayer("song.ogg", mixer=mixer)
    player.play()
    player.play()
    player.pause()
    player.pause()
    player.play()
    names = [c[0] for c in mixer.calls]
    assert names == ["load", "set_volume", "play", "pause", "unpause"]


def test_stop_rewinds():
    mixer = FakeMixer()
    player = MusicPlayer("song.ogg", mixer=mixer)
    player.play()
    player.stop()
    player.play()
    assert [c[0] for c in mixer.calls][-2:] == ["stop", "play"]


def test_toggle():
    player = MusicPlayer("song.ogg", mixer=FakeMixer())
    player.toggle()
    assert player.playing
    player.toggle()
    assert not player.playing


@pytest.mark.parametrize("given, stored", [(150, 100), (-5, 0), (30, 30)])
def test_volume_is_clamped(given, stored):
    mixer = FakeMixer()
    player = MusicPlayer("song.ogg", mixer=mixer)
    player.play()
    player.set_volume(given)
    assert player.volume == stored
    assert mixer.calls[-1] == ("set_volume", stored / 100)


def test_load_failure_is_logged_not_raised(caplog):
    mixer = FakeMixer(fail_on="load")
    player = MusicPlayer("missing.ogg", mixer=mixer)
    with caplog.at_level(logging.ERROR, logger="tetris_audio"):
        player.play()
        player.play()
    assert not player.playing
    assert mixer.calls == []
    assert len(caplog.records) == 1
    assert "missing.ogg" in caplog.records[0].getMessage()
