GRID_WIDTH = 12
GRID_HEIGHT = 6
TILE_TYPE_COUNT = 7

# Seconds between fall steps when no combo is running.
BASE_FALL_TIME = 0.2
# Combo count at which fall steps become instantaneous.
COMBO_FALL_CAP = 9

# Minimum run length that clears tiles.
MATCH_LENGTH = 3
