"""Layout constants and color definitions."""

# Timing
FPS = 60

# Layout dimensions
MAP_W = 900
MAP_H = 500
STATUS_H = 36

SCREEN_W = MAP_W
SCREEN_H = MAP_H + STATUS_H

# Tooltip
TOOLTIP_PAD = 8
TOOLTIP_H = 28

# Colors
BG_COLOR = (18, 22, 30)
LAND_COLOR = (32, 40, 52)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
TOOLTIP_BG = (245, 240, 228)
TOOLTIP_TEXT = (30, 30, 30)

# Visual treatments
DORMANT_FILL = (70, 74, 84)
DORMANT_INSET = (40, 42, 50)
REVEALED_FILL = (84, 170, 96)
REVEALED_RIM = (220, 235, 210)
SHADOW_COLOR = (8, 10, 14)
SHADOW_OFFSET = 2
