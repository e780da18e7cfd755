
"""Board helpers: collide, merge, sweep, ghost"""
from typing import Optional, List
from tetris_piece import Piece, COLS, ROWS

Board = List[List[Optional[str]]]


class BoardShapeError(ValueError):
    """Board is not a fixed-size rectangle of cells."""


def empty_board(cols: int = COLS, rows: int = ROWS) -> Board:
    return [[None] * cols for _ in range(rows)]

def validate_board(board: Board, cols: Optional[int] = None, rows: Optional[int] = None) -> Board:
    if not board or not board[0]:
        raise BoardShapeError("board has no cells")
    w = cols if cols is not None else len(board[0])
    if rows is not None and len(board) != rows:
        raise BoardShapeError(f"expected {rows} rows, got {len(board)}")
    for y, row in enumerate(board):
        if len(row) != w:
            raise BoardShapeError(f"row {y} has {len(row)} cells, expected {w}")
    return board

def collide(board: Board, piece: Piece) -> bool:
    # rows above the board (by < 0) are open: only sides and floor are walls
    h, w = len(board), len(board[0])
    for y,row in enumerate(piece.shape):
        for x,v in enumerate(row):
            if not v: continue
            bx,by = piece.x+x, piece.y+y
            if bx<0 or bx>=w or by>=h: return True
            if by>=0 and board[by][bx]: return True
    return False

def is_valid_placement(board: Board, shape, x: int, y: int) -> bool:
    return not collide(board, Piece("?", shape, "", x, y))

def merge(board:Board, piece:Piece):
    for y,r in enumerate(piece.shape):
        for x,v in enumerate(r):
            if v:
                by = piece.y+y
                if by>=0: board[by][piece.x+x]=piece.color

def sweep(board:Board)->int:
    """Remove every full row in one pass; refill from the top. Mutates board."""
    w = len(board[0])
    kept = [row for row in board if not all(row)]
    c = len(board) - len(kept)
    if c:
        board[:] = [[None]*w for _ in range(c)] + kept
    return c

def ghost_y(board:Board,piece:Piece)->int:
    t = piece
    while not collide(board, t.moved(dy=1)):
        t = t.moved(dy=1)
    return t.y
