"""Input bindings: pygame key and mouse events -> engine commands"""
import logging
from typing import Dict, Optional
import pygame

log = logging.getLogger(__name__)

KEY_COMMANDS: Dict[int, str] = {
    pygame.K_LEFT: "move_left",
    pygame.K_RIGHT: "move_right",
    pygame.K_DOWN: "soft_drop_step",
    pygame.K_UP: "rotate",
    pygame.K_SPACE: "hard_drop",
    pygame.K_p: "toggle_pause",
    pygame.K_RETURN: "start",
    pygame.K_KP_ENTER: "start",
}

def command_for(engine, key: int) -> Optional[str]:
    if key == pygame.K_r:
        # restart only from the game over screen
        return "restart" if engine.over else None
    return KEY_COMMANDS.get(key)

def handle_key(engine, e) -> bool:
    """Dispatch one KEYDOWN event; returns the command's result (False if unbound)."""
    if e.type != pygame.KEYDOWN: return False
    name = command_for(engine, e.key)
    if name is None: return False
    ok = getattr(engine, name)()
    log.debug("%s -> %s", name, ok)
    return ok

def handle_click(engine, buttons, e) -> bool:
    """Dispatch a left click on one of the panel ``buttons`` (label, command, rect)."""
    if e.type != pygame.MOUSEBUTTONDOWN or e.button != 1: return False
    for label, name, rect in buttons:
        if rect.collidepoint(e.pos):
            ok = getattr(engine, name)()
            log.debug("[%s] %s -> %s", label, name, ok)
            return ok
    return False
