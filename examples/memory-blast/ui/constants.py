"""Layout constants and color definitions."""
from tick_blast.config import ARENA_SIZE

FPS = 60

TILE_SIZE = 30
ARENA_PX = TILE_SIZE * ARENA_SIZE
PANEL_W = 380

SCREEN_W = ARENA_PX + PANEL_W
SCREEN_H = ARENA_PX

# Arena rings, radius in tiles
RING_OUTER = 10
RING_MIDDLE = 7
RING_INNER = 5

BG_COLOR = (20, 20, 30)
ARENA_OUTER = (0x90, 0x8C, 0x74)
ARENA_MIDDLE = (0x71, 0x80, 0x8C)
ARENA_INNER = (0x63, 0x71, 0x7B)
ARENA_STAR = (0x42, 0x4C, 0x53)
GRID_LINE = (0xEE, 0xEE, 0xEE, 40)

PLAYER_STROKE = (0x00, 0xEF, 0xEF)
TARGET_STROKE = (0xD3, 0x5E, 0xED)

PANEL_BG = (25, 25, 38)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)
HIT_COLOR = (255, 90, 90)
PASS_COLOR = (100, 255, 120)


def hex_to_rgba(value: str) -> tuple[int, ...]:
    """'#rrggbb' or '#rrggbbaa' -> tuple of ints."""
    value = value.lstrip("#")
    return tuple(int(value[i:i + 2], 16) for i in range(0, len(value), 2))
