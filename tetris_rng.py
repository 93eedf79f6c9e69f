"""Piece randomizer: uniform, independent picks (no bag, no repeat rejection)"""
import random
from typing import Optional
from tetris_shapes import Kind


class PieceRandomizer:
    """
    Draws tetromino kinds uniformly at random, each pick independent of
    all earlier ones. Pass a seed for a reproducible sequence; with
    seed=None the generator is seeded from system entropy.
    """
    KINDS = tuple(Kind)

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_kind(self) -> Kind:
        return self._rng.choice(self.KINDS)


class ScriptedRandomizer(PieceRandomizer):
    """Replays a fixed list of kinds, then falls back to uniform picks. Handy for demos and tests."""
    def __init__(self, kinds, seed: Optional[int] = None):
        super().__init__(seed)
        self._queue = [Kind(k) for k in kinds]

    def next_kind(self) -> Kind:
        if self._queue:
            return self._queue.pop(0)
        return super().next_kind()
