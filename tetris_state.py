"""Game state snapshot types. Every value here is immutable."""
from dataclasses import dataclass
from tetris_grid import Grid
from tetris_shapes import Kind, Shape, shape_for, ROTATIONS


@dataclass(frozen=True)
class ActivePiece:
    kind: Kind
    rotation: int
    x: int
    y: int

    def __post_init__(self):
        object.__setattr__(self, "kind", Kind(self.kind))
        if not 0 <= self.rotation < ROTATIONS:
            raise ValueError(f"rotation must be 0..{ROTATIONS - 1}, got {self.rotation!r}")

    @property
    def shape(self) -> Shape:
        return shape_for(self.kind, self.rotation)


@dataclass(frozen=True)
class NextPiece:
    kind: Kind
    rotation: int = 0

    @property
    def shape(self) -> Shape:
        return shape_for(self.kind, self.rotation)


@dataclass(frozen=True)
class GameState:
    grid: Grid
    current: ActivePiece
    next_piece: NextPiece
    score: int = 0
    level: int = 1
    lines: int = 0
    game_over: bool = False
    paused: bool = False
