
CONFIG = {
    "CELL_SIZE": 28,
    "FPS": 60,
    "INITIAL_DROP_MS": 1000,
    "MIN_DROP_MS": 100,
    "DROP_STEP_MS": 100,
    "LINES_PER_LEVEL": 10,
    "LINE_SCORES": (0, 100, 300, 500, 800),
    "HARD_DROP_PER_CELL": 2,
    "WALL_KICKS": True,
    "SEED": None,
    "LOG_LEVEL": "INFO",
}
