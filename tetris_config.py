import logging

logger = logging.getLogger(__name__)

PALETTE_NAMES = ("classic", "blackwhite", "blue", "red")

CONFIG = {
    # Rules
    "SPAWN_X": 3,
    "SPAWN_Y": 0,
    "LINES_PER_LEVEL": 10,
    # Gravity curve: BASE ms at level 1, STEP ms faster per level, never below MIN
    "GRAVITY_BASE_MS": 1000,
    "GRAVITY_STEP_MS": 100,
    "GRAVITY_MIN_MS": 100,
    # Held left/right auto-repeat
    "DAS_MS": 170,
    "ARR_MS": 50,
    # Presentation only
    "PALETTE": "classic",
    "SCREEN_SCALE": 100,
    "VOLUME": 50,
    "SOUND_ENABLED": True,
    "MUSIC_PATH": "tetris.mp3",
    "SEED": None,
}

# key -> (lo, hi) for numeric options that are clamped on write
_RANGES = {
    "SCREEN_SCALE": (50, 200),
    "VOLUME": (0, 100),
    "DAS_MS": (0, 400),
    "ARR_MS": (0, 200),
}


def set_option(key, value):
    """Validate and store one option. Returns the value actually stored."""
    if key not in CONFIG:
        raise KeyError(f"unknown option: {key}")
    if key == "PALETTE" and value not in PALETTE_NAMES:
        raise ValueError(f"unknown palette {value!r}, expected one of {', '.join(PALETTE_NAMES)}")
    if key in _RANGES:
        lo, hi = _RANGES[key]
        value = max(lo, min(hi, int(value)))
    if key == "SOUND_ENABLED":
        value = bool(value)
    CONFIG[key] = value
    logger.debug("option %s = %r", key, value)
    return value


def gravity_interval_ms(level: int) -> int:
    """Milliseconds between gravity drops at the given level (level 1 is the slowest)."""
    base, step = CONFIG["GRAVITY_BASE_MS"], CONFIG["GRAVITY_STEP_MS"]
    return max(CONFIG["GRAVITY_MIN_MS"], base - (level - 1) * step)
