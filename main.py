import argparse
import logging
import sys

import pygame

from tetris_audio import MusicPlayer
from tetris_config import CONFIG, PALETTE_NAMES, set_option
from tetris_input import Button, ShiftRepeat, button_for_key
from tetris_layout import compute_dims, button_at
from tetris_overlay import Overlay
from tetris_render import RenderAssets
from tetris_rng import PieceRandomizer
from tetris_session import GameSession, Phase

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Handheld Tetris")
    p.add_argument("--seed", type=int, default=None, help="seed for the piece randomizer")
    p.add_argument("--palette", choices=PALETTE_NAMES, default=CONFIG["PALETTE"])
    p.add_argument("--scale", type=int, default=CONFIG["SCREEN_SCALE"], help="screen size in percent (50-200)")
    p.add_argument("--volume", type=int, default=CONFIG["VOLUME"], help="music volume in percent (0-100)")
    p.add_argument("--mute", action="store_true", help="start with sound disabled")
    p.add_argument("--music", default=CONFIG["MUSIC_PATH"], help="background track")
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def apply_args(args):
    set_option("SEED", args.seed)
    set_option("PALETTE", args.palette)
    set_option("SCREEN_SCALE", args.scale)
    set_option("VOLUME", args.volume)
    set_option("SOUND_ENABLED", not args.mute)
    set_option("MUSIC_PATH", args.music)


def recreate_window(dims):
    return pygame.display.set_mode((dims.device_w, dims.device_h))


def make_fonts(dims):
    return (pygame.font.SysFont(None, max(12, int(18 * dims.scale))),
            pygame.font.SysFont(None, max(16, int(32 * dims.scale))))


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    apply_args(args)

    pygame.init()
    try:
        pygame.mixer.init()
    except pygame.error as exc:
        logger.warning("no audio device, music disabled: %s", exc)

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Handheld Tetris")
    font, big_font = make_fonts(dims)
    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()

    music = MusicPlayer(CONFIG["MUSIC_PATH"], CONFIG["VOLUME"])
    session = GameSession(PieceRandomizer(CONFIG["SEED"]), music,
                          on_game_over=lambda: logger.info("final score %d", session.state.score))
    shift = ShiftRepeat()
    overlay = Overlay()

    while True:
        dt = clock.tick(60)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                music.stop()
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                if e.key == pygame.K_F1:
                    overlay.toggle(); continue
                if overlay.active:
                    changed = overlay.handle(e)
                    if changed == "SCREEN_SCALE":
                        dims = compute_dims()
                        screen = recreate_window(dims)
                        font, big_font = make_fonts(dims)
                        render = RenderAssets(dims, font, big_font)
                    elif changed in ("VOLUME", "SOUND_ENABLED"):
                        session.sync_audio()
                    continue
                button = button_for_key(e.key)
                if button is not None:
                    session.press(button)
            if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1 and not overlay.active:
                name = button_at(dims, *e.pos)
                if name is not None:
                    session.press(Button(name))

        if not overlay.active and session.phase == Phase.PLAYING:
            keys = pygame.key.get_pressed()
            repeat = shift.update(dt, keys[pygame.K_LEFT], keys[pygame.K_RIGHT])
            if repeat is not None:
                session.press(repeat)
            session.tick(dt)

        render.draw(screen, session)
        overlay.draw(screen, font, dims.device_w, dims.device_h)
        pygame.display.flip()


if __name__ == "__main__":
    main()
