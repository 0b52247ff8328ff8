
# Scoring & progression (tuned for one tick per frame at 60 Hz)
BASE_SCORE = 10                # Points for any match
POWER_SCORE = 5                # Extra points per unit of power on a match
ACCELERATION = 0.00055         # Speed gained per match, scaled by power
SPEED_BOOST = 0.003            # Speed gained by popping a speed tile
SPEED_SCORE = 50               # Points for popping a speed tile
START_SPEED = 0.015            # Rows scrolled per tick at level start
START_POWER = 1.0
MISMATCH_PENALTY = 0.1
POWER_DECAY = 50               # power -= speed / POWER_DECAY every tick
LEVEL_UP_SCORE = 150           # Score to clear a tutorial level
MAX_LEVEL = 5

# Health bar flashing
LOW_POWER = 0.25
FLASH_TICKS = 15

CONFIG = {
    "TILE_W": 48,
    "TILE_H": 52,
    "SPACE": 10,
    "FONT_SIZE": 64,
    "HEALTH_BAR_W": 20,
    "FPS": 60,
    "SEED": None,          # If None, seeded from the clock; set int for reproducibility
    "FONT_PATH": None,     # TTF with suit and die glyphs; falls back to a system font
    "LOG_LEVEL": "INFO",
}
