
"""
Rendering helpers for the Tetris project.

Everything here draws a GameSnapshot; nothing reads or mutates the engine.

- Pre-render block cell Surfaces per colour (solid + landing outline) and blit them.
- Pre-render the static background (grid + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when values change.
- Cache a BOARD SURFACE with the locked blocks; rebuild it only when the board changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
from tetris_layout import Dims
from tetris_piece import COLORS

BG = (26, 26, 26)
GRID = (31, 41, 55)
TEXT = (200, 210, 240)
DIM_TEXT = (165, 175, 215)

Button = Tuple[str, str, pygame.Rect]

def button_rects(dims: Dims, snap) -> List[Button]:
    """(label, engine command, rect) for the clickable panel buttons."""
    if snap.show_start_button:
        specs = ((snap.start_label, "start"),)
    else:
        specs = ((snap.pause_label, "toggle_pause"), ("Restart", "restart"))
    gap = 8
    w = (dims.panel_w - 24 - gap * (len(specs) - 1)) // len(specs)
    y = dims.panel_y + 150 + dims.preview_cell*4 + 20
    return [(label, cmd, pygame.Rect(dims.panel_x + 12 + i*(w + gap), y, w, 28))
            for i, (label, cmd) in enumerate(specs)]

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    next_type: Optional[str] = ""
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    next_s: Optional[pygame.Surface] = None
    labels: Dict[str, pygame.Surface] = field(default_factory=dict)
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, cols: int, rows: int):
        self.dims = dims
        self.font = font
        self.cols, self.rows = cols, rows
        self._make_static()
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}
        for col in COLORS.values():
            self._cell(col)
        self.hud = HudCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_key = None

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((17, 24, 39))
        pygame.draw.rect(self.bg, BG, (d.board_x, d.board_y, d.board_w, d.board_h))
        for x in range(self.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, GRID, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(self.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, GRID, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        self.pv_x = d.panel_x + 12
        self.pv_y = d.panel_y + 150
        frame = pygame.Rect(self.pv_x-6, self.pv_y-6, d.preview_cell*4+12, d.preview_cell*4+12)
        pygame.draw.rect(self.bg, (17,24,39), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    # ---------- Small cell sprites (solid + landing outline) ----------
    def _cell(self, color: str) -> pygame.Surface:
        s = self.cell_surf.get(color)
        if s is None:
            c = self.dims.cell
            s = pygame.Surface((c-2, c-2))
            s.fill(pygame.Color(color))
            self.cell_surf[color] = s
            g = pygame.Surface((c-8, c-8), pygame.SRCALPHA)
            pygame.draw.rect(g, pygame.Color(color), (0,0,c-8,c-8), 2)
            self.ghost_surf[color] = g
        return s

    def _cell_pos(self, bx: int, by: int, inset: int = 1):
        return (self.dims.board_x + bx*self.dims.cell + inset,
                self.dims.board_y + by*self.dims.cell + inset)

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, board):
        """Rebuilds the "locked blocks" surface from board contents."""
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y, row in enumerate(board):
            for x, col in enumerate(row):
                if col:
                    self.board_surface.blit(self._cell(col), (x*c + 1, y*c + 1))
        self._board_key = board

    def draw(self, screen: pygame.Surface, snap):
        if snap.board != self._board_key:
            self.rebuild_board_surface(snap.board)
        screen.blit(self.bg, (0, 0))
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))
        if snap.piece_color:
            self._cell(snap.piece_color)
            for x, y in snap.ghost_cells:
                if y >= 0:
                    screen.blit(self.ghost_surf[snap.piece_color], self._cell_pos(x, y, 4))
            for x, y in snap.piece_cells:
                if y >= 0:
                    screen.blit(self.cell_surf[snap.piece_color], self._cell_pos(x, y))
        self.draw_panel_hud(screen, snap)

    # ---------- HUD / Panel ----------
    def _preview(self, snap) -> pygame.Surface:
        pv = self.dims.preview_cell
        s = pygame.Surface((pv*4, pv*4), pygame.SRCALPHA)
        if not snap.next_type: return s
        shape = snap.next_shape
        offx = (4 - len(shape[0])) // 2
        offy = max(0, (4 - len(shape)) // 2)
        block = pygame.Surface((pv-2, pv-2))
        block.fill(pygame.Color(COLORS[snap.next_type]))
        for y, row in enumerate(shape):
            for x, v in enumerate(row):
                if v:
                    s.blit(block, ((x + offx) * pv + 1, (y + offy) * pv + 1))
        return s

    def draw_panel_hud(self, screen: pygame.Surface, snap):
        d = self.dims
        f = self.font
        h = self.hud
        if h.title is None:
            h.title = f.render("Tetris", True, (197,202,233))
        if snap.score != h.score:
            h.score = snap.score
            h.score_s = f.render(f"Score: {snap.score}", True, TEXT)
        if snap.level != h.level:
            h.level = snap.level
            h.level_s = f.render(f"Level: {snap.level}", True, TEXT)
        if snap.lines != h.lines:
            h.lines = snap.lines
            h.lines_s = f.render(f"Lines: {snap.lines}", True, TEXT)
        if snap.next_type != h.next_type:
            h.next_type = snap.next_type
            h.next_s = self._preview(snap)
        screen.blit(h.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(h.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(h.level_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(h.lines_s, (d.panel_x + 12, d.panel_y + 92))
        screen.blit(f.render("Next:", True, TEXT), (d.panel_x + 12, d.panel_y + 126))
        screen.blit(h.next_s, (self.pv_x, self.pv_y))
        if not h.controls:
            h.controls = [f.render(t, True, DIM_TEXT) for t in (
                "←/→ Move", "↓ Soft drop", "↑ Rotate", "Space Hard drop",
                "P Pause", "Enter Start", "R Restart (game over)")]
            h.controls.insert(0, f.render("Controls:", True, TEXT))
        for label, _, rect in button_rects(d, snap):
            pygame.draw.rect(screen, (55,65,110), rect)
            pygame.draw.rect(screen, (255,255,255), rect, 1)
            if label not in h.labels:
                h.labels[label] = f.render(label, True, (255,255,255))
            s = h.labels[label]
            screen.blit(s, s.get_rect(center=rect.center))
        y = d.panel_y + 150 + d.preview_cell*4 + 64
        for surf in h.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20
