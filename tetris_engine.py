
"""
Board simulation engine.

One ``TetrisEngine`` owns a board, the active piece, the pre-rolled next
piece and the score/level state. Callers drive it with commands
(``move_left``, ``rotate``, ``tick`` ...) and read it back through
``snapshot()``. Nothing here knows about clocks or drawing: the frame loop
calls ``tick()`` every ``drop_ms`` and renders the snapshot.

Commands never raise for gameplay reasons. A rejected command returns False
and leaves the state untouched; the only terminal event is a blocked spawn,
which sets ``over``.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from tetris_config import CONFIG
from tetris_piece import Piece, SHAPES, COLS, ROWS, try_rotate
from tetris_board import Board, collide, merge, sweep, ghost_y, empty_board, validate_board
from tetris_rng import UniformRandom

log = logging.getLogger(__name__)


def drop_interval_ms(level: int) -> int:
    """Milliseconds between automatic drops at ``level`` (1-based)."""
    return max(CONFIG["MIN_DROP_MS"],
               CONFIG["INITIAL_DROP_MS"] - (level - 1) * CONFIG["DROP_STEP_MS"])


def line_clear_points(cleared: int, level: int) -> int:
    return CONFIG["LINE_SCORES"][cleared] * level


@dataclass(frozen=True)
class GameSnapshot:
    board: Tuple[Tuple[Optional[str], ...], ...]
    piece_type: Optional[str]
    piece_color: Optional[str]
    piece_x: int
    piece_y: int
    piece_cells: Tuple[Tuple[int, int], ...]
    ghost_cells: Tuple[Tuple[int, int], ...]
    next_type: Optional[str]
    next_shape: Tuple[Tuple[int, ...], ...]
    score: int
    lines: int
    level: int
    drop_ms: int
    started: bool
    paused: bool
    over: bool

    @property
    def show_paused_card(self) -> bool:
        return self.paused and self.started and not self.over

    @property
    def show_game_over_card(self) -> bool:
        return self.over

    @property
    def show_start_button(self) -> bool:
        return not self.started or self.over

    @property
    def start_label(self) -> str:
        return "Restart" if self.over else "Start Game"

    @property
    def pause_label(self) -> str:
        return "Resume" if self.paused else "Pause"


class TetrisEngine:
    def __init__(self, rng: Optional[UniformRandom] = None, board: Optional[Board] = None,
                 cols: int = COLS, rows: int = ROWS):
        self.cols, self.rows = cols, rows
        self.rng = rng or UniformRandom(CONFIG["SEED"])
        self._reset()
        if board is not None:
            self.board = validate_board(board, cols, rows)

    def _reset(self):
        self.board: Board = empty_board(self.cols, self.rows)
        self.current: Optional[Piece] = None
        self.next_type: Optional[str] = None
        self.score = 0
        self.lines = 0
        self.level = 1
        self.drop_ms = drop_interval_ms(1)
        self.started = False
        self.paused = True
        self.over = False

    # ---------- lifecycle ----------
    def start(self) -> bool:
        if self.started and not self.over:
            return False
        if self.over:
            self._reset()
        self.started = True
        self.paused = False
        log.info("Game started (seed=%s)", getattr(self.rng, "seed", None))
        self._spawn()
        return True

    def restart(self) -> bool:
        self._reset()
        return self.start()

    def toggle_pause(self) -> bool:
        if self.over or not self.started:
            return False
        self.paused = not self.paused
        log.debug("Paused" if self.paused else "Resumed")
        return True

    def _spawn(self) -> Optional[Piece]:
        """Place the next piece at the top; on a blocked spawn the game is over."""
        t = self.next_type or self.rng.next_piece()
        piece = Piece.spawn(t, self.cols)
        if collide(self.board, piece):
            self.current = None
            self.over = True
            self.paused = True
            log.info("Game over: score=%d lines=%d level=%d", self.score, self.lines, self.level)
            return None
        self.current = piece
        self.next_type = self.rng.next_piece()
        return piece

    # ---------- commands ----------
    def _can_act(self) -> bool:
        return self.current is not None and not self.over and not self.paused

    def _shift(self, dx: int) -> bool:
        if not self._can_act(): return False
        test = self.current.moved(dx=dx)
        if collide(self.board, test): return False
        self.current = test
        return True

    def move_left(self) -> bool:
        return self._shift(-1)

    def move_right(self) -> bool:
        return self._shift(1)

    def rotate(self) -> bool:
        if not self._can_act(): return False
        test = try_rotate(self.board, self.current)
        if test is None: return False
        self.current = test
        return True

    def soft_drop_step(self) -> bool:
        """Fall one row. Returns False when the piece locked instead (or the command was rejected)."""
        if not self._can_act(): return False
        test = self.current.moved(dy=1)
        if not collide(self.board, test):
            self.current = test
            return True
        self._lock()
        return False

    tick = soft_drop_step

    def hard_drop(self) -> bool:
        if not self._can_act(): return False
        landing = ghost_y(self.board, self.current)
        self.score += (landing - self.current.y) * CONFIG["HARD_DROP_PER_CELL"]
        self.current = self.current.moved(dy=landing - self.current.y)
        self._lock()
        return True

    # ---------- lock / clear ----------
    def _lock(self):
        merge(self.board, self.current)
        log.debug("Locked %s at (%d, %d)", self.current.t, self.current.x, self.current.y)
        self.current = None
        self.clear_lines()
        self._spawn()

    def clear_lines(self) -> int:
        if not self.started or self.over:
            return 0
        c = sweep(self.board)
        if not c:
            return 0
        self.score += line_clear_points(c, self.level)
        self.lines += c
        log.debug("Cleared %d line(s), total %d", c, self.lines)
        # one level per clear, even if several thresholds were crossed
        if self.lines // CONFIG["LINES_PER_LEVEL"] + 1 > self.level:
            self.level += 1
            self.drop_ms = drop_interval_ms(self.level)
            log.info("Level %d, drop interval %d ms", self.level, self.drop_ms)
        return c

    # ---------- queries ----------
    def snapshot(self) -> GameSnapshot:
        p = self.current
        if p is not None:
            cells = tuple(p.cells())
            gy = ghost_y(self.board, p)
            ghost = tuple((x, y + gy - p.y) for x, y in cells)
        else:
            cells = ghost = ()
        return GameSnapshot(
            board=tuple(tuple(row) for row in self.board),
            piece_type=p.t if p else None,
            piece_color=p.color if p else None,
            piece_x=p.x if p else 0,
            piece_y=p.y if p else 0,
            piece_cells=cells,
            ghost_cells=ghost,
            next_type=self.next_type,
            next_shape=tuple(tuple(r) for r in SHAPES[self.next_type]) if self.next_type else (),
            score=self.score,
            lines=self.lines,
            level=self.level,
            drop_ms=self.drop_ms,
            started=self.started,
            paused=self.paused,
            over=self.over,
        )
