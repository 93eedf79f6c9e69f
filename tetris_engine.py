"""
Game-state engine
=================

Pure transition functions: each takes a GameState (plus, where a new piece
may be needed, a PieceRandomizer) and returns a GameState. Inputs are never
mutated. A rejected move or rotation returns the input state object itself,
so callers can detect a bump with ``new is old``.

Policies:
  • Once ``game_over`` is set, every transition except reset_game returns
    its input unchanged.
  • ``paused`` is only a flag here. The driver (GameSession) is the one that
    withholds gravity and movement while paused.
  • Hard drop always locks, even when the piece was already resting.
"""
import logging
from dataclasses import replace
from typing import Optional

from tetris_config import CONFIG
from tetris_grid import empty_grid, is_valid_position, stamp, clear_lines, landing_row
from tetris_rng import PieceRandomizer
from tetris_shapes import Kind, ROTATIONS, shape_for
from tetris_state import ActivePiece, NextPiece, GameState

logger = logging.getLogger(__name__)

# Points per simultaneous clear, multiplied by the level before the clear
SCORE_TABLE = {1: 40, 2: 100, 3: 300, 4: 1200}

# Horizontal offsets tried, in order, when a rotation collides
WALL_KICKS = (0, -1, 1, -2, 2)

_default_rng = PieceRandomizer()


def _rng_or_default(rng: Optional[PieceRandomizer]) -> PieceRandomizer:
    return rng if rng is not None else _default_rng


def spawn_piece(kind: Kind) -> ActivePiece:
    return ActivePiece(Kind(kind), 0, CONFIG["SPAWN_X"], CONFIG["SPAWN_Y"])


def score_for_lines(cleared: int, level: int) -> int:
    if cleared == 0:
        return 0
    return SCORE_TABLE[cleared] * level


def level_for_lines(lines: int) -> int:
    return lines // CONFIG["LINES_PER_LEVEL"] + 1


def new_game(rng: Optional[PieceRandomizer] = None) -> GameState:
    rng = _rng_or_default(rng)
    current = spawn_piece(rng.next_kind())
    nxt = NextPiece(rng.next_kind())
    return GameState(grid=empty_grid(), current=current, next_piece=nxt)


def reset_game(rng: Optional[PieceRandomizer] = None) -> GameState:
    """Throw the old state away and start over: empty grid, score 0, level 1."""
    return new_game(rng)


def _try_move(state: GameState, dx: int, dy: int) -> Optional[GameState]:
    p = state.current
    if not is_valid_position(state.grid, p.shape, p.x + dx, p.y + dy):
        return None
    return replace(state, current=replace(p, x=p.x + dx, y=p.y + dy))


def move_left(state: GameState) -> GameState:
    if state.game_over:
        return state
    return _try_move(state, -1, 0) or state


def move_right(state: GameState) -> GameState:
    if state.game_over:
        return state
    return _try_move(state, 1, 0) or state


def soft_drop(state: GameState, rng: Optional[PieceRandomizer] = None) -> GameState:
    """Move down one row, or lock the piece if it has landed."""
    if state.game_over:
        return state
    moved = _try_move(state, 0, 1)
    if moved is not None:
        return moved
    return lock_piece(state, rng)


def rotate(state: GameState) -> GameState:
    """Rotate clockwise, trying each WALL_KICKS offset in order."""
    if state.game_over:
        return state
    p = state.current
    new_rotation = (p.rotation + 1) % ROTATIONS
    new_shape = shape_for(p.kind, new_rotation)
    for dx in WALL_KICKS:
        if is_valid_position(state.grid, new_shape, p.x + dx, p.y):
            return replace(state, current=replace(p, rotation=new_rotation, x=p.x + dx))
    return state


def hard_drop(state: GameState, rng: Optional[PieceRandomizer] = None) -> GameState:
    if state.game_over:
        return state
    p = state.current
    y = landing_row(state.grid, p.shape, p.x, p.y)
    return lock_piece(replace(state, current=replace(p, y=y)), rng)


def lock_piece(state: GameState, rng: Optional[PieceRandomizer] = None) -> GameState:
    """Stamp the active piece, clear full rows, score, promote the next piece
    and check whether it fits at the spawn origin."""
    if state.game_over:
        return state
    rng = _rng_or_default(rng)
    p = state.current

    grid = stamp(state.grid, p.shape, p.x, p.y, p.kind)
    grid, cleared_rows = clear_lines(grid)
    cleared = len(cleared_rows)

    points = score_for_lines(cleared, state.level)
    lines = state.lines + cleared
    level = max(state.level, level_for_lines(lines))

    current = spawn_piece(state.next_piece.kind)
    nxt = NextPiece(rng.next_kind())
    game_over = not is_valid_position(grid, current.shape, current.x, current.y)

    logger.debug("locked %s at (%d, %d), cleared rows %s for %d points",
                 p.kind.name, p.x, p.y, cleared_rows, points)
    if level > state.level:
        logger.info("level up: %d -> %d (%d lines)", state.level, level, lines)
    if game_over:
        logger.info("game over: score %d, level %d, lines %d", state.score + points, level, lines)

    return replace(
        state,
        grid=grid,
        current=current,
        next_piece=nxt,
        score=state.score + points,
        level=level,
        lines=lines,
        game_over=game_over,
    )


def toggle_pause(state: GameState) -> GameState:
    if state.game_over:
        return state
    return replace(state, paused=not state.paused)
