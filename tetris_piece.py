
"""Piece model, shapes, rotation with horizontal wall kicks"""
from dataclasses import dataclass
from typing import List, Optional, Dict, Tuple

from tetris_config import CONFIG

COLS, ROWS = 10, 20

Shape = List[List[int]]

SHAPES: Dict[str, Shape] = {
    "I": [[0,0,0,0],[1,1,1,1],[0,0,0,0],[0,0,0,0]],
    "O": [[1,1],[1,1]],
    "T": [[0,1,0],[1,1,1],[0,0,0]],
    "S": [[0,1,1],[1,1,0],[0,0,0]],
    "Z": [[1,1,0],[0,1,1],[0,0,0]],
    "J": [[1,0,0],[1,1,1],[0,0,0]],
    "L": [[0,0,1],[1,1,1],[0,0,0]],
}

COLORS: Dict[str, str] = {
    "I": "#00f0f0",
    "O": "#f0f000",
    "T": "#a000f0",
    "S": "#00f000",
    "Z": "#f00000",
    "J": "#0000f0",
    "L": "#f0a000",
}

# tried in order after the in-place rotation fails
KICKS: Tuple[int, ...] = (1, -1, 2, -2)

def rotate_cw(m: Shape) -> Shape: return [list(r) for r in zip(*m[::-1])]

@dataclass
class Piece:
    t: str
    shape: Shape
    color: str
    x: int
    y: int

    @staticmethod
    def spawn(t: str, cols: int = COLS) -> "Piece":
        s = [r[:] for r in SHAPES[t]]
        return Piece(t, s, COLORS[t], cols // 2 - len(s[0]) // 2, 0)

    def moved(self, dx: int = 0, dy: int = 0) -> "Piece":
        return Piece(self.t, self.shape, self.color, self.x + dx, self.y + dy)

    def with_shape(self, shape: Shape, dx: int = 0) -> "Piece":
        return Piece(self.t, [r[:] for r in shape], self.color, self.x + dx, self.y)

    def cells(self) -> List[Tuple[int, int]]:
        """Absolute (x, y) of every filled cell, including rows above the board."""
        return [(self.x + c, self.y + r)
                for r, row in enumerate(self.shape)
                for c, v in enumerate(row) if v]

# rotation

def try_rotate(board, piece: Piece) -> Optional[Piece]:
    """Rotate clockwise in place, else at the first valid kick offset.

    Returns the rotated piece, or None when every trial collides.
    """
    from tetris_board import collide
    ns = rotate_cw(piece.shape)
    offsets = (0,) + (KICKS if CONFIG["WALL_KICKS"] else ())
    for dx in offsets:
        test = piece.with_shape(ns, dx)
        if not collide(board, test): return test
    return None
