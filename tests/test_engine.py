import dataclasses

import pytest

from tetris_board import empty_board
from tetris_engine import TetrisEngine, drop_interval_ms, line_clear_points
from tetris_piece import COLORS, COLS, ROWS


def filled_cells(board):
    return sorted((x, y) for y, row in enumerate(board) for x, c in enumerate(row) if c)


def fill_rows(board, rows):
    for r in rows:
        board[r] = ["#cccccc"] * COLS


# ---------- lifecycle ----------

def test_new_engine_waits_for_start(make_engine):
    e = make_engine()
    assert not e.started and e.paused and not e.over
    assert e.current is None
    assert not e.move_left()
    assert not e.tick()
    assert not e.toggle_pause()


def test_start_spawns_current_and_next(engine):
    assert engine.started and not engine.paused
    assert engine.current.t == "T"
    assert engine.next_type == "O"
    assert (engine.current.x, engine.current.y) == (4, 0)


def test_start_twice_is_rejected(engine):
    assert not engine.start()


def test_pause_blocks_commands(engine):
    assert engine.toggle_pause()
    before = engine.current
    for cmd in (engine.move_left, engine.move_right, engine.rotate,
                engine.soft_drop_step, engine.hard_drop):
        assert cmd() is False
    assert engine.current == before
    assert engine.score == 0
    assert engine.toggle_pause()
    assert engine.move_left()


# ---------- movement ----------

def test_move_stops_at_wall(engine):
    moves = 0
    while engine.move_left():
        moves += 1
    assert moves == 4
    assert engine.current.x == 0
    assert not engine.move_left()
    assert engine.current.x == 0


def test_soft_drop_until_lock_merges_piece(engine):
    steps = 0
    while engine.soft_drop_step():
        steps += 1
    assert steps == 18
    t = COLORS["T"]
    assert engine.board[18][5] == t
    assert engine.board[19][4:7] == [t, t, t]
    assert len(filled_cells(engine.board)) == 4
    assert engine.current.t == "O"
    assert engine.score == 0


def test_hard_drop_scores_two_per_row_and_locks_once(engine):
    assert engine.hard_drop()
    assert engine.score == 18 * 2
    assert len(filled_cells(engine.board)) == 4
    assert engine.current.t == "O"
    assert engine.current.y == 0
    assert engine.next_type == "T"


def test_hard_drop_from_landing_row_still_locks(make_engine):
    board = empty_board()
    for y in range(2, ROWS):
        board[y][4] = board[y][5] = "X"
    e = make_engine(("O",), board=board)
    e.start()
    assert e.hard_drop()
    assert e.score == 0
    assert e.board[0][4] == COLORS["O"]


def test_rotate_kicks_i_piece_off_left_wall(make_engine):
    e = make_engine(("I",))
    e.start()
    assert e.rotate()
    while e.move_left():
        pass
    assert e.current.x == -2
    assert e.rotate()
    assert e.current.x == 0
    assert all(x >= 0 for x, _ in e.current.cells())


# ---------- line clearing & scoring ----------

def test_hard_drop_into_gap_clears_line(make_engine):
    board = empty_board()
    board[ROWS - 1] = ["X"] * 3 + [None] * 4 + ["X"] * 3
    e = make_engine(("I", "O"), board=board)
    e.start()
    e.hard_drop()
    assert e.lines == 1
    assert e.score == 18 * 2 + 100
    assert filled_cells(e.board) == []


def test_single_line_at_level_one_scores_100(engine):
    fill_rows(engine.board, [19])
    assert engine.clear_lines() == 1
    assert engine.score == 100


def test_tetris_at_level_two_scores_1600(engine):
    engine.level, engine.lines = 2, 10
    fill_rows(engine.board, [16, 17, 18, 19])
    assert engine.clear_lines() == 4
    assert engine.score == 1600
    assert engine.lines == 14


def test_clear_without_full_rows_changes_nothing(engine):
    engine.board[19][0] = "X"
    assert engine.clear_lines() == 0
    assert engine.score == 0 and engine.lines == 0


def test_scoring_table():
    assert [line_clear_points(n, 1) for n in range(5)] == [0, 100, 300, 500, 800]
    assert line_clear_points(3, 4) == 2000


# ---------- levels ----------

def test_level_progression(engine):
    engine.lines = 8
    fill_rows(engine.board, [18, 19])
    engine.clear_lines()
    assert (engine.level, engine.drop_ms) == (2, 900)
    engine.lines = 18
    fill_rows(engine.board, [18, 19])
    engine.clear_lines()
    assert (engine.lines, engine.level, engine.drop_ms) == (20, 3, 800)


def test_drop_interval_floor():
    assert drop_interval_ms(1) == 1000
    assert drop_interval_ms(9) == 200
    assert drop_interval_ms(10) == 100
    assert drop_interval_ms(25) == 100


def test_level_rises_at_most_once_per_clear(engine):
    # crossing two thresholds in one clear still only gains one level
    engine.lines = 17
    fill_rows(engine.board, [16, 17, 18, 19])
    engine.clear_lines()
    assert engine.lines == 21
    assert engine.level == 2
    assert engine.drop_ms == 900


# ---------- game over ----------

def test_blocked_spawn_ends_game_without_merging(make_engine):
    board = empty_board()
    for r in (0, 1):
        board[r] = ["X"] * (COLS - 1) + [None]
    before = [row[:] for row in board]
    e = make_engine(("T",), board=board)
    e.start()
    assert e.over and e.paused
    assert e.current is None
    assert e.board == before
    assert not e.hard_drop()
    assert not e.toggle_pause()


def test_start_after_game_over_resets(make_engine):
    board = empty_board()
    board[1] = ["X"] * (COLS - 1) + [None]
    e = make_engine(("T",), board=board)
    e.start()
    e.score = 500
    assert e.over
    assert e.start()
    assert not e.over and e.started and not e.paused
    assert e.score == 0 and e.lines == 0 and e.level == 1
    assert filled_cells(e.board) == []


def test_restart_mid_game(engine):
    engine.hard_drop()
    assert engine.score > 0
    assert engine.restart()
    assert engine.score == 0
    assert filled_cells(engine.board) == []
    assert engine.current is not None


def test_game_runs_until_stack_reaches_top(make_engine):
    e = make_engine(("O",))
    e.start()
    drops = 0
    while not e.over:
        e.hard_drop()
        drops += 1
    # O pieces stack two rows at a time in one column pair
    assert drops == ROWS // 2
    assert e.current is None


# ---------- snapshot ----------

def test_snapshot_is_frozen_copy(engine):
    snap = engine.snapshot()
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.score = 10
    engine.hard_drop()
    assert snap.score == 0
    assert all(c is None for row in snap.board for c in row)
    assert len(snap.board) == ROWS and len(snap.board[0]) == COLS


def test_snapshot_piece_and_landing_cells(engine):
    snap = engine.snapshot()
    assert snap.piece_type == "T"
    assert sorted(snap.piece_cells) == [(4, 1), (5, 0), (5, 1), (6, 1)]
    assert sorted(snap.ghost_cells) == [(4, 19), (5, 18), (5, 19), (6, 19)]
    assert snap.next_type == "O"
    assert snap.next_shape == ((1, 1), (1, 1))


def test_snapshot_ui_flags(make_engine):
    e = make_engine()
    snap = e.snapshot()
    assert snap.show_start_button and snap.start_label == "Start Game"
    assert not snap.show_paused_card
    e.start()
    e.toggle_pause()
    snap = e.snapshot()
    assert snap.show_paused_card and snap.pause_label == "Resume"
    assert not snap.show_start_button
    e.toggle_pause()
    assert e.snapshot().pause_label == "Pause"


def test_snapshot_after_game_over(make_engine):
    board = empty_board()
    board[0][5] = "X"
    e = make_engine(("T",), board=board)
    e.start()
    snap = e.snapshot()
    assert snap.show_game_over_card
    assert snap.start_label == "Restart"
    assert not snap.show_paused_card
    assert snap.piece_cells == ()


# ---------- internal steps are guarded ----------

def test_clear_lines_is_inert_before_start_and_after_game_over(make_engine):
    e = make_engine()
    fill_rows(e.board, [19])
    assert e.clear_lines() == 0
    assert e.score == 0 and e.board[19][0] is not None
    board = empty_board()
    board[0][5] = "X"
    fill_rows(board, [19])
    over = make_engine(("T",), board=board)
    over.start()
    assert over.over
    assert over.clear_lines() == 0
    assert over.score == 0 and over.lines == 0


def test_randomizer_without_seed_attribute():
    class Plain:
        def next_piece(self):
            return "O"

    e = TetrisEngine(Plain())
    assert e.start()
    assert e.current.t == "O"


def test_lock_above_top_drops_off_board_cells(engine):
    # a T whose top cell sits one row above the board, resting on a ledge
    engine.board[1][4:7] = ["X"] * 3
    engine.current = engine.current.moved(dy=-1)
    assert sorted(engine.current.cells()) == [(4, 0), (5, -1), (5, 0), (6, 0)]
    assert not engine.soft_drop_step()
    t = COLORS["T"]
    assert engine.board[0][4:7] == [t, t, t]
    assert filled_cells(engine.board) == sorted(
        [(4, 0), (5, 0), (6, 0), (4, 1), (5, 1), (6, 1)])
    # the next spawn is blocked by the locked cells
    assert engine.over
