"""World generation, player and engine-wide constants."""

CHUNK_RADIUS = 0
CHUNK_HEIGHT_VARIANCE = 20
CHUNK_WATER_LINE = 64
CHUNK_OCTAVES = 7
CHUNK_SMOOTHING = 50.0
CHUNK_SEED = 1

PLAYER_HEIGHT = 75.6
PLAYER_SPEED = 0.8

MAX_LOG_LENGTH = 1024