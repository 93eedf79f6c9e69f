"""
Game session: the driver that owns the current GameState.

Buttons and gravity ticks are applied one at a time to a single snapshot,
in the order they arrive. The session also owns the screen phase
(title / playing / paused / game over) and tells the music player when
play starts and stops.
"""
import logging
from enum import Enum
from typing import Callable, Optional

import tetris_engine as engine
from tetris_config import CONFIG, gravity_interval_ms
from tetris_input import Button, Command, PLAY_COMMANDS
from tetris_rng import PieceRandomizer
from tetris_state import GameState

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    TITLE = "title"
    PLAYING = "playing"
    PAUSED = "paused"
    GAMEOVER = "gameover"


class GameSession:
    def __init__(self, rng: Optional[PieceRandomizer] = None, music=None,
                 on_score: Optional[Callable[[int], None]] = None,
                 on_game_over: Optional[Callable[[], None]] = None):
        self.rng = rng if rng is not None else PieceRandomizer(CONFIG["SEED"])
        self.music = music
        self.on_score = on_score
        self.on_game_over = on_game_over
        self.state: GameState = engine.new_game(self.rng)
        self.phase = Phase.TITLE
        self.gravity_acc = 0

    # ---------- phase changes ----------
    def _set_phase(self, phase: Phase):
        if phase != self.phase:
            logger.debug("phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase
        self.sync_audio()

    def sync_audio(self):
        """Play while in the playing phase with sound on, otherwise pause."""
        if self.music is None:
            return
        self.music.set_volume(CONFIG["VOLUME"])
        if self.phase == Phase.PLAYING and CONFIG["SOUND_ENABLED"]:
            self.music.play()
        else:
            self.music.pause()

    def start(self):
        self._set_state(engine.reset_game(self.rng))
        self.gravity_acc = 0
        self._set_phase(Phase.PLAYING)

    def toggle_pause(self):
        if self.phase == Phase.PLAYING:
            self.state = engine.toggle_pause(self.state)
            self._set_phase(Phase.PAUSED)
        elif self.phase == Phase.PAUSED:
            self.state = engine.toggle_pause(self.state)
            self._set_phase(Phase.PLAYING)

    # ---------- input ----------
    def press(self, button: Button):
        button = Button(button)
        if self.phase in (Phase.TITLE, Phase.GAMEOVER):
            if button == Button.START:
                self.start()
        elif self.phase == Phase.PAUSED:
            if button == Button.START:
                self.toggle_pause()
        elif button == Button.START:
            self.toggle_pause()
        else:
            command = PLAY_COMMANDS.get(button)
            if command is not None:
                self.apply(command)

    def apply(self, command: Command) -> bool:
        """Run one engine command while playing. Returns False when it was rejected or withheld."""
        if self.phase != Phase.PLAYING:
            return False
        command = Command(command)
        if command == Command.PAUSE:
            self.toggle_pause()
            return True
        before = self.state
        if command == Command.MOVE_LEFT:
            after = engine.move_left(before)
        elif command == Command.MOVE_RIGHT:
            after = engine.move_right(before)
        elif command == Command.SOFT_DROP:
            after = engine.soft_drop(before, self.rng)
        elif command == Command.ROTATE:
            after = engine.rotate(before)
        else:
            after = engine.hard_drop(before, self.rng)
        if command in (Command.SOFT_DROP, Command.HARD_DROP):
            self.gravity_acc = 0
        self._set_state(after)
        return after is not before

    # ---------- gravity ----------
    def tick(self, dt_ms):
        """Advance the gravity clock; drop one row once the level's interval is exceeded."""
        if self.phase != Phase.PLAYING:
            return
        self.gravity_acc += dt_ms
        if self.gravity_acc > gravity_interval_ms(self.state.level):
            self.gravity_acc = 0
            self._set_state(engine.soft_drop(self.state, self.rng))

    def _set_state(self, new: GameState):
        old, self.state = self.state, new
        if self.on_score is not None and new.score != old.score:
            self.on_score(new.score)
        if new.game_over and self.phase == Phase.PLAYING:
            self._set_phase(Phase.GAMEOVER)
            if self.on_game_over is not None:
                self.on_game_over()
