"""Background music wrapper around pygame.mixer.music"""
import logging
from typing import Optional
import pygame

logger = logging.getLogger(__name__)


class MusicPlayer:
    """
    Looped background track. play/pause/stop never raise: a missing file or
    an uninitialised mixer is logged once and the player goes quiet.

    `mixer` defaults to pygame.mixer.music; anything with the same
    load/play/pause/unpause/stop/set_volume methods works.
    """
    def __init__(self, path: str, volume: int = 50, mixer=None):
        self.path = path
        self.mixer = mixer if mixer is not None else pygame.mixer.music
        self.volume = 50
        self.playing = False
        self._loaded = False
        self._started = False
        self._broken = False
        self.set_volume(volume)

    def _call(self, name, *args) -> bool:
        if self._broken:
            return False
        try:
            getattr(self.mixer, name)(*args)
            return True
        except (pygame.error, OSError) as exc:
            logger.error("audio %s failed for %s: %s", name, self.path, exc)
            self._broken = True
            return False

    def _ensure_loaded(self) -> bool:
        if not self._loaded:
            self._loaded = self._call("load", self.path)
            if self._loaded:
                self._call("set_volume", self.volume / 100)
        return self._loaded

    def play(self):
        if self.playing or not self._ensure_loaded():
            return
        ok = self._call("unpause") if self._started else self._call("play", -1)
        if ok:
            self._started = True
            self.playing = True
            logger.debug("music playing")

    def pause(self):
        if not self.playing:
            return
        self._call("pause")
        self.playing = False
        logger.debug("music paused")

    def toggle(self):
        if self.playing:
            self.pause()
        else:
            self.play()

    def stop(self):
        """Pause and rewind to the start of the track."""
        if self._started:
            self._call("stop")
        self._started = False
        self.playing = False

    def set_volume(self, percent: Optional[int]):
        self.volume = max(0, min(100, int(percent or 0)))
        if self._loaded:
            self._call("set_volume", self.volume / 100)
