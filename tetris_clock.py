
"""Drop clock: turns frame deltas into engine ticks"""

class DropClock:
    """
    Fixed-step accumulator for gravity.

    The frame loop feeds elapsed milliseconds to ``update``; every time the
    accumulated time exceeds the engine's ``drop_ms`` one ``tick()`` is
    delivered. A changed interval (level up) re-arms the clock from zero, and
    nothing accumulates while the game is paused, over or not started.
    """
    def __init__(self, engine):
        self.engine = engine
        self.acc = 0.0
        self.interval = engine.drop_ms

    def running(self) -> bool:
        e = self.engine
        return e.started and not e.paused and not e.over

    def reset(self):
        self.acc = 0.0
        self.interval = self.engine.drop_ms

    def update(self, dt_ms: float) -> int:
        """Advance by ``dt_ms``; returns how many ticks were delivered."""
        if not self.running():
            self.reset()
            return 0
        if self.engine.drop_ms != self.interval:
            self.reset()
        self.acc += dt_ms
        ticks = 0
        while self.running() and self.acc > self.interval:
            self.acc -= self.interval
            self.engine.tick()
            ticks += 1
            if self.engine.drop_ms != self.interval:
                self.reset()
                break
        return ticks
