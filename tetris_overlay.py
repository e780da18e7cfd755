
"""Paused / game over cards drawn over the board"""
import pygame

class Overlay:
    def __init__(self, dims, font, big_font):
        self.dims = dims
        self.font = font
        self.big_font = big_font

    def lines_for(self, snap):
        if snap.show_game_over_card:
            return ("GAME OVER", f"Score: {snap.score}", "R or Enter to restart")
        if snap.show_paused_card:
            return ("PAUSED", "P to resume")
        if not snap.started:
            return ("TETRIS", "Enter to start")
        return ()

    def draw(self, screen, snap):
        lines = self.lines_for(snap)
        if not lines: return
        d = self.dims
        s = pygame.Surface((d.board_w, d.board_h), pygame.SRCALPHA)
        s.fill((0, 0, 0, 190))
        screen.blit(s, (d.board_x, d.board_y))
        cx = d.board_x + d.board_w // 2
        y = d.board_y + d.board_h // 2 - 30
        for i, text in enumerate(lines):
            f = self.big_font if i == 0 else self.font
            surf = f.render(text, True, (255, 255, 255))
            screen.blit(surf, surf.get_rect(center=(cx, y)))
            y += 40 if i == 0 else 24
